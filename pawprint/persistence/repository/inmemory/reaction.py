"""In-memory base for like and favorite repositories."""

from typing import Generic, Optional

from sqlalchemy.exc import IntegrityError

from pawprint.domain.repository.reaction import R
from pawprint.domain.value import PostId, UserId

from .store import InMemoryStore


class InMemoryReactionRepository(Generic[R]):
    """Rows kept in a list of the shared store, unique per (post, user).

    Subclasses name the list with ``rows_attr``.
    """

    rows_attr: str

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _rows(self) -> list[R]:
        return getattr(self._store, self.rows_attr)

    def _listed_for(self, user_id: UserId) -> list[R]:
        """The user's rows whose post is live and published, newest first."""
        rows = []
        for row in self._rows:
            post = self._store.posts.get(row.post_id)
            if row.user_id == user_id and post and post.is_live and not post.is_draft:
                rows.append(row)
        rows.sort(key=lambda r: (r.created_at, r.post_id), reverse=True)
        return rows

    async def find(self, post_id: PostId, user_id: UserId) -> Optional[R]:
        return next(
            (r for r in self._rows if r.post_id == post_id and r.user_id == user_id),
            None,
        )

    async def find_marked_post_ids(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> set[PostId]:
        wanted = set(post_ids)
        return {r.post_id for r in self._rows if r.user_id == user_id and r.post_id in wanted}

    async def save(self, reaction: R) -> R:
        """Append a row.

        Raises:
            IntegrityError: If the user already has a row for the post
        """
        if await self.find(reaction.post_id, reaction.user_id) is not None:
            raise IntegrityError(
                f"duplicate key value violates unique constraint on {self.rows_attr}",
                None,
                Exception(),
            )
        self._rows.append(reaction)
        return reaction

    async def delete(self, post_id: PostId, user_id: UserId) -> bool:
        row = await self.find(post_id, user_id)
        if row is None:
            return False
        self._rows.remove(row)
        return True

    async def find_post_ids_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[PostId]:
        return [r.post_id for r in self._listed_for(user_id)[offset : offset + limit]]

    async def count_by_user(self, user_id: UserId) -> int:
        return len(self._listed_for(user_id))
