"""Domain value objects for Pawprint."""

from pawprint.domain.value.identifiers import (
    PetId,
    PostFavoriteId,
    PostId,
    PostLikeId,
    TagId,
    UserId,
)
from pawprint.domain.value.types import (
    MediaType,
    PostCounter,
    TagName,
    canonicalize_tag,
)

__all__ = [
    # Identifiers
    "UserId",
    "PetId",
    "PostId",
    "TagId",
    "PostLikeId",
    "PostFavoriteId",
    # Types
    "MediaType",
    "PostCounter",
    "TagName",
    "canonicalize_tag",
]
