"""Create post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.error import NotFoundError
from pawprint.domain.service import FeedService, PostService
from pawprint.domain.value import MediaType, PetId, UserId

from .item import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # Acting user
    content: str
    pet_id: str | None = None
    media_type: MediaType | None = None
    media_urls: list[str] = []
    hashtags: list[str] = []
    is_draft: bool = False


class CreatePostResponse(PostItem):
    """Create post response."""

    pass


class CreatePostUseCase:
    """Use case for publishing a new post."""

    def __init__(self, post_service: PostService, feed_service: FeedService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            feed_service: Feed domain service (hydration of the result)
        """
        self.post_service = post_service
        self.feed_service = feed_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate content, media and pet ownership, then resolve hashtags
        2. Save the post with its tags
        3. Reload it with author and pet for the response

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If the content is empty or too long
            InvalidMediaError: If media type and URLs don't agree
            NotFoundError: If the pet doesn't exist
            NotAuthorizedError: If the pet belongs to another user
        """
        with logfire.span("create_post.execute", author_id=request.author_id):
            post = await self.post_service.create_post(
                author_id=UserId(UUID(request.author_id)),
                content=request.content,
                pet_id=PetId(UUID(request.pet_id)) if request.pet_id else None,
                media_type=request.media_type,
                media_urls=request.media_urls,
                hashtags=request.hashtags,
                is_draft=request.is_draft,
            )

            item = await self.feed_service.get_item(post.id, post.author_id)
            if item is None:
                raise NotFoundError("Post", str(post.id))

            logfire.info("Post created", post_id=str(post.id), is_draft=post.is_draft)
            return CreatePostResponse.model_validate(
                PostItem.from_feed_item(item).model_dump()
            )
