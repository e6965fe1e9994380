"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pawprint.domain.model.tag import Tag
from pawprint.domain.value import TagName


class TagRepository(ABC):
    """Storage for hashtags. Names are unique across all tags."""

    @abstractmethod
    async def create(self, tag: Tag) -> Tag:
        """Insert ``tag``.

        A failed insert must leave the surrounding transaction usable, so
        the caller can re-read the row that won a concurrent race.

        Raises:
            IntegrityError: If the name is taken
        """

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Return the tag with this exact canonical name, if any."""

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Return the tags that exist among ``names``, in no particular order."""

    @abstractmethod
    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """List up to ``limit`` tags.

        Args:
            limit: Maximum number of tags
            order_by: ``name`` (A-Z), ``post_count`` (most used first) or
                ``created_at`` (newest first)
        """
