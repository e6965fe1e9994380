"""Share post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.service import PostService
from pawprint.domain.value import PostId


class SharePostRequest(BaseModel):
    """Share post request."""

    post_id: str


class SharePostResponse(BaseModel):
    """Share post response."""

    post_id: str
    share_count: int


class SharePostUseCase:
    """Use case for recording a share."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: SharePostRequest) -> SharePostResponse:
        """Increment the post's share count.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
        """
        with logfire.span("share_post.execute", post_id=request.post_id):
            post = await self.post_service.share_post(PostId(UUID(request.post_id)))
            return SharePostResponse(post_id=str(post.id), share_count=post.share_count)
