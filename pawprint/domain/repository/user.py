"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pawprint.domain.model.user import User
from pawprint.domain.value import UserId


class UserRepository(ABC):
    """Read-only access to user profiles owned by the identity service."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user profile by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several user profiles in one query.

        Args:
            user_ids: User IDs to look up

        Returns:
            Profiles found (unknown IDs are skipped)
        """
        pass
