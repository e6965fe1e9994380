"""Domain services."""

from .base import Service
from .favorite_service import FavoriteService
from .feed_service import FeedService
from .like_service import LikeService
from .post_service import PostService
from .reaction import PostReactionService
from .tag_service import TagService

__all__ = [
    "FavoriteService",
    "FeedService",
    "LikeService",
    "PostReactionService",
    "PostService",
    "Service",
    "TagService",
]
