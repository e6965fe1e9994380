"""Repository interfaces for the Pawprint domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from pawprint.domain.repository.favorite import FavoriteRepository
from pawprint.domain.repository.like import LikeRepository
from pawprint.domain.repository.pet import PetRepository
from pawprint.domain.repository.post import (
    FeedSortOrder,
    HotWeights,
    PostFilter,
    PostRepository,
)
from pawprint.domain.repository.reaction import PostReactionRepository
from pawprint.domain.repository.tag import TagRepository
from pawprint.domain.repository.user import UserRepository

__all__ = [
    "FavoriteRepository",
    "FeedSortOrder",
    "HotWeights",
    "LikeRepository",
    "PetRepository",
    "PostFilter",
    "PostReactionRepository",
    "PostRepository",
    "TagRepository",
    "UserRepository",
]
