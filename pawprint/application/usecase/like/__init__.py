"""Like use cases."""

from .like_post import LikePostRequest, LikePostResponse, LikePostUseCase
from .unlike_post import UnlikePostUseCase

__all__ = [
    "LikePostRequest",
    "LikePostResponse",
    "LikePostUseCase",
    "UnlikePostUseCase",
]
