"""Dict-backed tag repository."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from pawprint.domain.model.tag import Tag
from pawprint.domain.repository.tag import TagRepository
from pawprint.domain.value import TagName

from .store import InMemoryStore

_SORT_KEYS = {
    "name": lambda t: (t.name.root,),
    "post_count": lambda t: (-t.post_count, t.name.root),
    "created_at": lambda t: (-t.created_at.timestamp(), t.name.root),
}


class InMemoryTagRepository(TagRepository):
    """Tags kept in an ``InMemoryStore``, with the same unique-name rule as the table."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    async def create(self, tag: Tag) -> Tag:
        """Insert a tag.

        Raises:
            IntegrityError: If the name is taken
        """
        if await self.find_by_name(tag.name) is not None:
            raise IntegrityError("duplicate key value violates idx_tags_name", None, Exception())
        self._store.tags[tag.id] = tag
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        return next((t for t in self._store.tags.values() if t.name == name), None)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        wanted = set(names)
        return [t for t in self._store.tags.values() if t.name in wanted]

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        key = _SORT_KEYS.get(order_by, _SORT_KEYS["name"])
        return sorted(self._store.tags.values(), key=key)[:limit]
