"""Domain model entities for Pawprint."""

from pawprint.domain.model.favorite import PostFavorite
from pawprint.domain.model.like import PostLike
from pawprint.domain.model.pet import Pet
from pawprint.domain.model.post import Post
from pawprint.domain.model.tag import Tag
from pawprint.domain.model.user import User

__all__ = [
    "Pet",
    "Post",
    "PostFavorite",
    "PostLike",
    "Tag",
    "User",
]
