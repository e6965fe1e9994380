"""Unlike post use case."""

from uuid import UUID

import logfire

from pawprint.domain.service import LikeService, PostService
from pawprint.domain.value import PostId, UserId

from .like_post import LikePostRequest, LikePostResponse


class UnlikePostUseCase:
    """Use case for removing a like."""

    def __init__(self, like_service: LikeService, post_service: PostService) -> None:
        self.like_service = like_service
        self.post_service = post_service

    async def execute(self, request: LikePostRequest) -> LikePostResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the post doesn't exist or the user hasn't liked it
        """
        with logfire.span(
            "unlike_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post_id = PostId(UUID(request.post_id))
            user_id = UserId(UUID(request.user_id))
            await self.like_service.unlike_post(post_id, user_id)

            post = await self.post_service.get_post(post_id, viewer_id=user_id)
            return LikePostResponse(
                post_id=request.post_id, is_liked=False, like_count=post.like_count
            )
