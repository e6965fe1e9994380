"""Favorite post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.service import FavoriteService, PostService
from pawprint.domain.value import PostId, UserId


class FavoritePostRequest(BaseModel):
    """Favorite or unfavorite request."""

    post_id: str
    user_id: str


class FavoritePostResponse(BaseModel):
    """Favorite state of a post after the change."""

    post_id: str
    is_favorited: bool
    favorite_count: int


class FavoritePostUseCase:
    """Use case for saving a post to the user's favorites."""

    def __init__(
        self, favorite_service: FavoriteService, post_service: PostService
    ) -> None:
        """Initialize favorite post use case.

        Args:
            favorite_service: Favorite domain service
            post_service: Post domain service (to read the new count)
        """
        self.favorite_service = favorite_service
        self.post_service = post_service

    async def execute(self, request: FavoritePostRequest) -> FavoritePostResponse:
        """Execute favorite flow.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
            AlreadyExistsError: If the post is already a favorite
        """
        with logfire.span(
            "favorite_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post_id = PostId(UUID(request.post_id))
            user_id = UserId(UUID(request.user_id))
            await self.favorite_service.favorite_post(post_id, user_id)

            post = await self.post_service.get_post(post_id, viewer_id=user_id)
            return FavoritePostResponse(
                post_id=request.post_id,
                is_favorited=True,
                favorite_count=post.favorite_count,
            )
