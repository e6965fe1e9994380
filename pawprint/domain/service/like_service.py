"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from pawprint.domain.model.like import PostLike
from pawprint.domain.repository import LikeRepository
from pawprint.domain.value import PostCounter, PostId, PostLikeId, UserId

from .post_service import PostService
from .reaction import PostReactionService


class LikeService(PostReactionService[PostLike]):
    """Domain service for liking posts."""

    resource = "Like"
    counter = PostCounter.LIKE

    def __init__(
        self, like_repository: LikeRepository, post_service: PostService
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            post_service: Post domain service (visibility checks and counters)
        """
        super().__init__(like_repository, post_service)

    def _build(self, post_id: PostId, user_id: UserId) -> PostLike:
        return PostLike(
            id=PostLikeId(uuid4()),
            post_id=post_id,
            user_id=user_id,
            created_at=datetime.now(),
        )

    async def like_post(self, post_id: PostId, user_id: UserId) -> PostLike:
        """Like a post.

        Creates the like record and atomically increments the post's
        like count.

        Args:
            post_id: Post ID
            user_id: User ID

        Returns:
            Created like

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
            AlreadyExistsError: If the user already liked the post
            IntegrityError: If the insert fails for any other reason
        """
        with logfire.span("like_post", post_id=str(post_id), user_id=str(user_id)):
            return await self._add(post_id, user_id)

    async def unlike_post(self, post_id: PostId, user_id: UserId) -> None:
        """Remove a user's like from a post.

        Raises:
            NotFoundError: If the post doesn't exist or the user hasn't liked it
        """
        with logfire.span("unlike_post", post_id=str(post_id), user_id=str(user_id)):
            await self._remove(post_id, user_id)

    async def get_liked_post_ids(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> set[PostId]:
        """Return which of the given posts a user has liked."""
        return await self._marked_among(user_id, post_ids)

    async def liked_posts_page(
        self, user_id: UserId, limit: int, offset: int
    ) -> tuple[list[PostId], int]:
        """IDs of one page of the posts a user liked, most recent like first.

        Returns:
            The page of post IDs and the total number of liked posts
        """
        return await self._page_for_user(user_id, limit, offset)
