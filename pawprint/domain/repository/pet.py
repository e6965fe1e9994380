"""Pet profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pawprint.domain.model.pet import Pet
from pawprint.domain.value import PetId


class PetRepository(ABC):
    """Read-only access to pet profiles."""

    @abstractmethod
    async def find_by_id(self, pet_id: PetId) -> Optional[Pet]:
        """Find a pet by ID (including deleted pets)."""
        pass

    @abstractmethod
    async def find_by_ids(self, pet_ids: list[PetId]) -> list[Pet]:
        """Find several pets in one query.

        Args:
            pet_ids: Pet IDs to look up

        Returns:
            Pets found (unknown IDs are skipped)
        """
        pass
