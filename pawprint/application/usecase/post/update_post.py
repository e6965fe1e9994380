"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.error import NotFoundError
from pawprint.domain.service import (
    FavoriteService,
    FeedService,
    LikeService,
    PostService,
)
from pawprint.domain.value import MediaType, PetId, PostId, UserId

from .item import PostItem, viewer_marks


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are unchanged. ``hashtags`` replaces the full set.
    """

    post_id: str
    user_id: str  # Acting user, must be the author
    content: str | None = None
    pet_id: str | None = None
    media_type: MediaType | None = None
    media_urls: list[str] | None = None
    hashtags: list[str] | None = None
    is_draft: bool | None = None


class UpdatePostResponse(PostItem):
    """Update post response."""

    pass


class UpdatePostUseCase:
    """Use case for editing a post."""

    def __init__(
        self,
        post_service: PostService,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> None:
        self.post_service = post_service
        self.feed_service = feed_service
        self.like_service = like_service
        self.favorite_service = favorite_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
            NotAuthorizedError: If the user is not the author
            ValidationError: If the new content is empty or too long
            InvalidMediaError: If the resulting media payload is invalid
        """
        with logfire.span(
            "update_post.execute", post_id=request.post_id, user_id=request.user_id
        ):
            post_id = PostId(UUID(request.post_id))
            user_id = UserId(UUID(request.user_id))

            await self.post_service.update_post(
                post_id=post_id,
                user_id=user_id,
                content=request.content,
                pet_id=PetId(UUID(request.pet_id)) if request.pet_id else None,
                media_type=request.media_type,
                media_urls=request.media_urls,
                hashtags=request.hashtags,
                is_draft=request.is_draft,
            )

            item = await self.feed_service.get_item(post_id, user_id)
            if item is None:
                raise NotFoundError("Post", request.post_id)

            liked, favorited = await viewer_marks(
                self.like_service, self.favorite_service, request.user_id, [post_id]
            )
            return UpdatePostResponse.model_validate(
                PostItem.from_feed_item(
                    item, is_liked=post_id in liked, is_favorited=post_id in favorited
                ).model_dump()
            )
