"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.service import PostService
from pawprint.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # Acting user, must be the author


class DeletePostUseCase:
    """Use case for soft deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Soft delete the post.

        Raises:
            NotFoundError: If the post doesn't exist or was already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "delete_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            await self.post_service.delete_post(
                PostId(UUID(request.post_id)), UserId(UUID(request.user_id))
            )
