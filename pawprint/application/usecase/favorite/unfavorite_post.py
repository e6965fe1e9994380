"""Unfavorite post use case."""

from uuid import UUID

import logfire

from pawprint.domain.service import FavoriteService, PostService
from pawprint.domain.value import PostId, UserId

from .favorite_post import FavoritePostRequest, FavoritePostResponse


class UnfavoritePostUseCase:
    """Use case for removing a post from the user's favorites."""

    def __init__(
        self, favorite_service: FavoriteService, post_service: PostService
    ) -> None:
        self.favorite_service = favorite_service
        self.post_service = post_service

    async def execute(self, request: FavoritePostRequest) -> FavoritePostResponse:
        """Execute unfavorite flow.

        Raises:
            NotFoundError: If the post doesn't exist or isn't a favorite
        """
        with logfire.span(
            "unfavorite_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post_id = PostId(UUID(request.post_id))
            user_id = UserId(UUID(request.user_id))
            await self.favorite_service.unfavorite_post(post_id, user_id)

            post = await self.post_service.get_post(post_id, viewer_id=user_id)
            return FavoritePostResponse(
                post_id=request.post_id,
                is_favorited=False,
                favorite_count=post.favorite_count,
            )
