"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import Select, delete, distinct, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pawprint.domain.model import Post
from pawprint.domain.repository.post import (
    FeedSortOrder,
    HotWeights,
    PostFilter,
    PostRepository,
)
from pawprint.domain.value import PostCounter, PostId
from pawprint.persistence.mappers import post_to_dict, row_to_post
from pawprint.persistence.tables import (
    post_is_live,
    post_tags_table,
    posts_table,
    tags_table,
)

# Columns an update may change; counters and created_at are never overwritten
_UPDATABLE_COLUMNS = (
    "pet_id",
    "content",
    "media_type",
    "media_urls",
    "is_draft",
    "updated_at",
)


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _apply_filter(self, stmt: Select, post_filter: PostFilter) -> Select:
        """Add the live-post predicate and equality filters to a statement."""
        stmt = stmt.where(
            post_is_live(), posts_table.c.is_draft.is_(post_filter.is_draft)
        )

        if post_filter.author_id:
            stmt = stmt.where(posts_table.c.author_id == post_filter.author_id)
        if post_filter.pet_id:
            stmt = stmt.where(posts_table.c.pet_id == post_filter.pet_id)
        if post_filter.tag:
            stmt = (
                stmt.join(
                    post_tags_table, posts_table.c.id == post_tags_table.c.post_id
                )
                .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
                .where(tags_table.c.name == post_filter.tag.root)
            )
        return stmt

    def _order_by(self, sort: FeedSortOrder, weights: HotWeights) -> list:
        """Order clauses for a sort, ending in created_at DESC, id DESC."""
        tie_break = [posts_table.c.created_at.desc(), posts_table.c.id.desc()]

        if sort == FeedSortOrder.POPULAR:
            return [posts_table.c.like_count.desc(), *tie_break]
        if sort == FeedSortOrder.HOT:
            # Computed per query, never stored
            score = (
                posts_table.c.like_count * weights.like
                + posts_table.c.comment_count * weights.comment
                + posts_table.c.share_count * weights.share
            )
            return [score.desc(), *tie_break]
        return tie_break

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag names, in the order they were given
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, tags_table.c.name)
            .select_from(post_tags_table)
            .join(tags_table, post_tags_table.c.tag_id == tags_table.c.id)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.post_id, post_tags_table.c.position)
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()

        post_tag_map: dict[UUID, list[str]] = defaultdict(list)
        for row in rows:
            post_tag_map[row.post_id].append(row.name)

        return post_tag_map

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a live post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(
                posts_table.c.id == post_id, post_is_live()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.debug("Post not found", post_id=str(post_id))
                return None

            post_tag_map = await self._fetch_tags_for_posts([post_id])
            return row_to_post(row._asdict(), tag_names=post_tag_map.get(post_id, []))

    async def find_ids(
        self,
        post_filter: PostFilter,
        sort: FeedSortOrder = FeedSortOrder.LATEST,
        limit: int = 20,
        offset: int = 0,
        weights: HotWeights = HotWeights(),
    ) -> list[PostId]:
        """Find one page of post IDs in feed order."""
        with logfire.span(
            "post_repository.find_ids",
            sort=sort.value,
            tag=post_filter.tag.root if post_filter.tag else None,
            limit=limit,
            offset=offset,
        ):
            stmt = self._apply_filter(select(posts_table.c.id), post_filter)
            stmt = (
                stmt.order_by(*self._order_by(sort, weights))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            post_ids = [PostId(row.id) for row in result.fetchall()]

            logfire.debug("Post IDs found", count=len(post_ids))
            return post_ids

    async def count(self, post_filter: PostFilter) -> int:
        """Count live posts matching the filter."""
        with logfire.span(
            "post_repository.count",
            tag=post_filter.tag.root if post_filter.tag else None,
        ):
            stmt = select(func.count(distinct(posts_table.c.id))).select_from(
                posts_table
            )
            stmt = self._apply_filter(stmt, post_filter)

            result = await self.session.execute(stmt)
            count = result.scalar() or 0
            logfire.debug("Post count", count=count)
            return count

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Load live posts with their tags. No LIMIT, no guaranteed order."""
        if not post_ids:
            return []

        with logfire.span("post_repository.find_by_ids", count=len(post_ids)):
            stmt = select(posts_table).where(
                posts_table.c.id.in_(post_ids), post_is_live()
            )
            result = await self.session.execute(stmt)
            post_rows = result.fetchall()

            post_tag_map = await self._fetch_tags_for_posts(
                [row.id for row in post_rows]
            )
            return [
                row_to_post(row._asdict(), tag_names=post_tag_map.get(row.id, []))
                for row in post_rows
            ]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update) and replace its tags."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            tags=[t.root for t in post.tag_names],
        ):
            exists_stmt = select(posts_table.c.id).where(posts_table.c.id == post.id)
            existing = (await self.session.execute(exists_stmt)).fetchone()

            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**{k: post_dict[k] for k in _UPDATABLE_COLUMNS})
                )
                await self.session.execute(stmt)

                # Tag set is replaced wholesale
                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post.id)
                )
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    author_id=str(post.author_id),
                )
                await self.session.execute(insert(posts_table).values(**post_dict))

            if post.tag_names:
                tag_lookup_stmt = select(tags_table.c.id, tags_table.c.name).where(
                    tags_table.c.name.in_([tag.root for tag in post.tag_names])
                )
                tag_result = await self.session.execute(tag_lookup_stmt)
                tag_id_map = {row.name: row.id for row in tag_result.fetchall()}

                rows = [
                    {"post_id": post.id, "tag_id": tag_id_map[name.root], "position": i}
                    for i, name in enumerate(post.tag_names)
                    if name.root in tag_id_map
                ]
                if rows:
                    await self.session.execute(insert(post_tags_table), rows)

            await self.session.flush()
            return post

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> bool:
        """Mark a live post as deleted."""
        with logfire.span("post_repository.soft_delete", post_id=str(post_id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id, post_is_live())
                .values(is_deleted=True, deleted_at=deleted_at, updated_at=deleted_at)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0

    async def increment_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Atomically increment a counter by 1."""
        column = posts_table.c[counter.value]
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values({column: column + 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Atomically decrement a counter by 1 (minimum 0)."""
        column = posts_table.c[counter.value]
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .where(column > 0)  # Don't go below 0
            .values({column: column - 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()
