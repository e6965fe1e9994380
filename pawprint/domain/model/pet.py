"""Pet profile projection."""

from typing import Optional

from pawprint.domain.model.common import DomainModel
from pawprint.domain.value import PetId, UserId


class Pet(DomainModel):
    """Pet profile a post can be about.

    Only the owner may attach their pet to a post.
    """

    id: PetId
    owner_id: UserId
    name: str
    species: str = "other"
    avatar_url: Optional[str] = None
    is_deleted: bool = False
