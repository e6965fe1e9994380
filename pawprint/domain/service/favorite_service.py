"""Favorite domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from pawprint.domain.model.favorite import PostFavorite
from pawprint.domain.repository import FavoriteRepository
from pawprint.domain.value import PostCounter, PostFavoriteId, PostId, UserId

from .post_service import PostService
from .reaction import PostReactionService


class FavoriteService(PostReactionService[PostFavorite]):
    """Domain service for saving posts to a user's favorites."""

    resource = "Favorite"
    counter = PostCounter.FAVORITE

    def __init__(
        self, favorite_repository: FavoriteRepository, post_service: PostService
    ) -> None:
        super().__init__(favorite_repository, post_service)

    def _build(self, post_id: PostId, user_id: UserId) -> PostFavorite:
        return PostFavorite(
            id=PostFavoriteId(uuid4()),
            post_id=post_id,
            user_id=user_id,
            created_at=datetime.now(),
        )

    async def favorite_post(self, post_id: PostId, user_id: UserId) -> PostFavorite:
        """Save a post to the user's favorites.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
            AlreadyExistsError: If the post is already a favorite
        """
        with logfire.span(
            "favorite_post", post_id=str(post_id), user_id=str(user_id)
        ):
            return await self._add(post_id, user_id)

    async def unfavorite_post(self, post_id: PostId, user_id: UserId) -> None:
        """Remove a post from the user's favorites.

        Raises:
            NotFoundError: If the post doesn't exist or isn't a favorite
        """
        with logfire.span(
            "unfavorite_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self._remove(post_id, user_id)

    async def get_favorited_post_ids(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> set[PostId]:
        """Return which of the given posts are among the user's favorites."""
        return await self._marked_among(user_id, post_ids)

    async def favorited_posts_page(
        self, user_id: UserId, limit: int, offset: int
    ) -> tuple[list[PostId], int]:
        """IDs of one page of the user's favorites, most recently saved first."""
        return await self._page_for_user(user_id, limit, offset)
