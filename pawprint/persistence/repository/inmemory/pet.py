"""In-memory pet profile repository for testing."""

from typing import Optional

from pawprint.domain.model.pet import Pet
from pawprint.domain.repository.pet import PetRepository
from pawprint.domain.value import PetId

from .store import InMemoryStore


class InMemoryPetRepository(PetRepository):
    """In-memory implementation of PetRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, pet_id: PetId) -> Optional[Pet]:
        return self._store.pets.get(pet_id)

    async def find_by_ids(self, pet_ids: list[PetId]) -> list[Pet]:
        return [
            self._store.pets[pet_id] for pet_id in set(pet_ids) if pet_id in self._store.pets
        ]
