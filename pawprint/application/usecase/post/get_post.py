"""Get post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.error import NotFoundError
from pawprint.domain.service import FavoriteService, FeedService, LikeService
from pawprint.domain.value import PostId, UserId

from .item import PostItem, viewer_marks


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    viewer_id: str | None = None


class GetPostResponse(PostItem):
    """Get post response."""

    pass


class GetPostUseCase:
    """Use case for retrieving a single post."""

    def __init__(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> None:
        """Initialize get post use case.

        Args:
            feed_service: Feed domain service (hydration)
            like_service: Like domain service
            favorite_service: Favorite domain service
        """
        self.feed_service = feed_service
        self.like_service = like_service
        self.favorite_service = favorite_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            The post with author and pet

        Raises:
            NotFoundError: If the post doesn't exist, was deleted, or is a
                draft of another user
        """
        with logfire.span("get_post.execute", post_id=request.post_id):
            post_id = PostId(UUID(request.post_id))
            viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
            item = await self.feed_service.get_item(post_id, viewer_id)
            if item is None:
                raise NotFoundError("Post", request.post_id)

            liked, favorited = await viewer_marks(
                self.like_service, self.favorite_service, request.viewer_id, [post_id]
            )
            return GetPostResponse.model_validate(
                PostItem.from_feed_item(
                    item, is_liked=post_id in liked, is_favorited=post_id in favorited
                ).model_dump()
            )
