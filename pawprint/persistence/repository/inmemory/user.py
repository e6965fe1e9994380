"""In-memory user profile repository for testing."""

from typing import Optional

from pawprint.domain.model.user import User
from pawprint.domain.repository.user import UserRepository
from pawprint.domain.value import UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        return [
            self._store.users[user_id]
            for user_id in set(user_ids)
            if user_id in self._store.users
        ]
