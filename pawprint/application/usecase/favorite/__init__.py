"""Favorite use cases."""

from .favorite_post import (
    FavoritePostRequest,
    FavoritePostResponse,
    FavoritePostUseCase,
)
from .unfavorite_post import UnfavoritePostUseCase

__all__ = [
    "FavoritePostRequest",
    "FavoritePostResponse",
    "FavoritePostUseCase",
    "UnfavoritePostUseCase",
]
