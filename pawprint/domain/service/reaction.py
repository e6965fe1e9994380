"""Shared flow for per-user marks on posts (likes, favorites)."""

from typing import Generic

import logfire
from sqlalchemy.exc import IntegrityError

from pawprint.domain.error import AlreadyExistsError, NotFoundError
from pawprint.domain.repository.reaction import PostReactionRepository, R
from pawprint.domain.value import PostCounter, PostId, UserId

from .base import Service
from .post_service import PostService


class PostReactionService(Service, Generic[R]):
    """Adds and removes a user's mark on a post and keeps its counter in step.

    Subclasses set ``resource`` (used in errors and logs) and ``counter``,
    and build the row to insert.
    """

    resource: str
    counter: PostCounter

    def __init__(
        self, repository: PostReactionRepository[R], post_service: PostService
    ) -> None:
        self.repository = repository
        self.post_service = post_service

    def _build(self, post_id: PostId, user_id: UserId) -> R:
        raise NotImplementedError

    async def _add(self, post_id: PostId, user_id: UserId) -> R:
        """Insert the mark and increment the post's counter.

        Raises:
            NotFoundError: If the post doesn't exist, was deleted, or is
                someone else's draft
            AlreadyExistsError: If the user already marked the post
            IntegrityError: If the insert fails for another reason, such as
                a user without a profile row
        """
        await self.post_service.get_post(post_id, viewer_id=user_id)

        if await self.repository.find(post_id, user_id) is not None:
            logfire.warn(
                f"Duplicate {self.resource.lower()}",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise AlreadyExistsError(self.resource, str(post_id))

        try:
            saved = await self.repository.save(self._build(post_id, user_id))
        except IntegrityError:
            # A concurrent request may have inserted the same pair
            if await self.repository.find(post_id, user_id) is None:
                raise
            raise AlreadyExistsError(self.resource, str(post_id))

        await self.post_service.increment_counter(post_id, self.counter)
        return saved

    async def _remove(self, post_id: PostId, user_id: UserId) -> None:
        """Delete the mark and decrement the post's counter.

        Raises:
            NotFoundError: If the post is not visible or the user hasn't marked it
        """
        await self.post_service.get_post(post_id, viewer_id=user_id)

        if not await self.repository.delete(post_id, user_id):
            logfire.info(
                f"No {self.resource.lower()} to remove",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            raise NotFoundError(self.resource, str(post_id))

        await self.post_service.decrement_counter(post_id, self.counter)

    async def _marked_among(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> set[PostId]:
        if not post_ids:
            return set()
        return await self.repository.find_marked_post_ids(user_id, post_ids)

    async def _page_for_user(
        self, user_id: UserId, limit: int, offset: int
    ) -> tuple[list[PostId], int]:
        with logfire.span(
            f"{self.resource.lower()}_service.page_for_user",
            user_id=str(user_id),
            limit=limit,
            offset=offset,
        ):
            post_ids = await self.repository.find_post_ids_by_user(
                user_id, limit=limit, offset=offset
            )
            total = await self.repository.count_by_user(user_id)
            return post_ids, total
