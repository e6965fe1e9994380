"""Strongly typed identifiers for Pawprint domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PetId = NewType("PetId", UUID)
PostId = NewType("PostId", UUID)
TagId = NewType("TagId", UUID)
PostLikeId = NewType("PostLikeId", UUID)
PostFavoriteId = NewType("PostFavoriteId", UUID)
