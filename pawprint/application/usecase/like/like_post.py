"""Like post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.service import LikeService, PostService
from pawprint.domain.value import PostId, UserId


class LikePostRequest(BaseModel):
    """Like or unlike request."""

    post_id: str
    user_id: str


class LikePostResponse(BaseModel):
    """Like state of a post after the change."""

    post_id: str
    is_liked: bool
    like_count: int


class LikePostUseCase:
    """Use case for liking a post."""

    def __init__(self, like_service: LikeService, post_service: PostService) -> None:
        """Initialize like post use case.

        Args:
            like_service: Like domain service
            post_service: Post domain service (to read the new count)
        """
        self.like_service = like_service
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
            AlreadyExistsError: If the user already liked the post
        """
        with logfire.span(
            "like_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post_id = PostId(UUID(request.post_id))
            user_id = UserId(UUID(request.user_id))
            await self.like_service.like_post(post_id, user_id)

            post = await self.post_service.get_post(post_id, viewer_id=user_id)
            return LikePostResponse(
                post_id=request.post_id, is_liked=True, like_count=post.like_count
            )
