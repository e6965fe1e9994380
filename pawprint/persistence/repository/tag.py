"""PostgreSQL tag repository."""

from typing import Optional

import logfire
from sqlalchemy import Select, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from pawprint.domain.model.tag import Tag
from pawprint.domain.repository.tag import TagRepository
from pawprint.domain.value import TagName
from pawprint.persistence.mappers import row_to_tag, tag_to_dict
from pawprint.persistence.tables import tags_table

_ORDERINGS = {
    "name": (tags_table.c.name,),
    "post_count": (tags_table.c.post_count.desc(), tags_table.c.name),
    "created_at": (tags_table.c.created_at.desc(), tags_table.c.name),
}


class PostgresTagRepository(TagRepository):
    """Tags table access. Names are unique (idx_tags_name)."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _fetch(self, stmt: Select) -> list[Tag]:
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def create(self, tag: Tag) -> Tag:
        """Insert a tag.

        The insert runs in a SAVEPOINT: when a concurrent request already
        created the name, only the savepoint is rolled back and the caller
        can still read the winning row in the same transaction.

        Raises:
            IntegrityError: If the name is taken
        """
        async with self.session.begin_nested():
            await self.session.execute(insert(tags_table).values(**tag_to_dict(tag)))
        logfire.debug("Tag inserted", tag_name=tag.name.root)
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        tags = await self._fetch(select(tags_table).where(tags_table.c.name == name.root))
        return tags[0] if tags else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        if not names:
            return []
        return await self._fetch(
            select(tags_table).where(tags_table.c.name.in_([n.root for n in names]))
        )

    async def find_all(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """List tags; unknown ``order_by`` values sort by name."""
        ordering = _ORDERINGS.get(order_by, _ORDERINGS["name"])
        return await self._fetch(select(tags_table).order_by(*ordering).limit(limit))
