"""PostgreSQL base for like and favorite repositories.

Both tables have the same shape (id, post_id, user_id, created_at, unique
post_id + user_id), so the queries only differ by table and row mapper.
"""

from typing import Any, Callable, Generic, Optional

from sqlalchemy import Select, Table, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from pawprint.domain.repository.reaction import R
from pawprint.domain.value import PostId, UserId
from pawprint.persistence.mappers import reaction_to_dict
from pawprint.persistence.tables import post_is_live, posts_table


class PostgresReactionRepository(Generic[R]):
    """Queries shared by the post_likes and post_favorites tables."""

    table: Table
    from_row: Callable[[dict[str, Any]], R]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _pair(self, post_id: PostId, user_id: UserId) -> list:
        return [self.table.c.post_id == post_id, self.table.c.user_id == user_id]

    def _listed_for(self, stmt: Select, user_id: UserId) -> Select:
        """Restrict to the user's rows whose post is live and published."""
        return (
            stmt.join(posts_table, posts_table.c.id == self.table.c.post_id)
            .where(self.table.c.user_id == user_id)
            .where(post_is_live(), posts_table.c.is_draft.is_(False))
        )

    async def find(self, post_id: PostId, user_id: UserId) -> Optional[R]:
        result = await self.session.execute(
            select(self.table).where(*self._pair(post_id, user_id))
        )
        row = result.fetchone()
        return self.from_row(row._asdict()) if row else None

    async def find_marked_post_ids(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> set[PostId]:
        if not post_ids:
            return set()
        stmt = select(self.table.c.post_id).where(
            self.table.c.user_id == user_id, self.table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)
        return {PostId(row.post_id) for row in result.fetchall()}

    async def save(self, reaction: R) -> R:
        """Insert inside a savepoint so a failed insert leaves the session usable."""
        async with self.session.begin_nested():
            await self.session.execute(
                insert(self.table).values(**reaction_to_dict(reaction))
            )
        return reaction

    async def delete(self, post_id: PostId, user_id: UserId) -> bool:
        result = await self.session.execute(
            delete(self.table).where(*self._pair(post_id, user_id))
        )
        await self.session.flush()
        return result.rowcount > 0

    async def find_post_ids_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[PostId]:
        stmt = self._listed_for(select(self.table.c.post_id), user_id)
        stmt = (
            stmt.order_by(self.table.c.created_at.desc(), self.table.c.post_id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [PostId(row.post_id) for row in result.fetchall()]

    async def count_by_user(self, user_id: UserId) -> int:
        stmt = self._listed_for(
            select(func.count()).select_from(self.table), user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
