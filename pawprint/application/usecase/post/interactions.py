"""Post interaction status use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.service import FavoriteService, LikeService, PostService
from pawprint.domain.value import PostId, UserId

from .item import viewer_marks


class InteractionStatusRequest(BaseModel):
    """Interaction status request."""

    post_id: str
    user_id: str


class InteractionStatusResponse(BaseModel):
    """How the acting user has interacted with a post."""

    post_id: str
    is_liked: bool
    is_favorited: bool


class InteractionStatusUseCase:
    """Use case for reading the acting user's marks on one post."""

    def __init__(
        self,
        post_service: PostService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> None:
        self.post_service = post_service
        self.like_service = like_service
        self.favorite_service = favorite_service

    async def execute(
        self, request: InteractionStatusRequest
    ) -> InteractionStatusResponse:
        """Execute interaction status flow.

        Raises:
            NotFoundError: If the post doesn't exist or is not visible to the user
        """
        with logfire.span(
            "interaction_status.execute",
            post_id=request.post_id,
            user_id=request.user_id,
        ):
            post_id = PostId(UUID(request.post_id))
            await self.post_service.get_post(
                post_id, viewer_id=UserId(UUID(request.user_id))
            )
            liked, favorited = await viewer_marks(
                self.like_service, self.favorite_service, request.user_id, [post_id]
            )
            return InteractionStatusResponse(
                post_id=request.post_id,
                is_liked=post_id in liked,
                is_favorited=post_id in favorited,
            )
