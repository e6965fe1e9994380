"""Post domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from pawprint.config import MediaSettings
from pawprint.domain.error import (
    InvalidMediaError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from pawprint.domain.model.post import Post
from pawprint.domain.repository import PetRepository, PostRepository
from pawprint.domain.value import MediaType, PetId, PostCounter, PostId, UserId

from .base import Service
from .tag_service import TagService


class PostService(Service):
    """Domain service for the post lifecycle and engagement counters."""

    def __init__(
        self,
        post_repository: PostRepository,
        pet_repository: PetRepository,
        tag_service: TagService,
        media_settings: MediaSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            pet_repository: Pet profile repository (for ownership checks)
            tag_service: Resolves hashtags to tags
            media_settings: Media attachment limits
        """
        self.post_repository = post_repository
        self.pet_repository = pet_repository
        self.tag_service = tag_service
        self.media_settings = media_settings

    def validate_media(
        self, media_type: Optional[MediaType], media_urls: list[str]
    ) -> None:
        """Check that media type and URLs agree.

        A post without a media type may not carry URLs. Image posts carry
        1 to ``max_images`` URLs; video posts exactly ``max_videos``.

        Raises:
            InvalidMediaError: If the combination is not allowed
        """
        count = len(media_urls)
        if count > self.media_settings.max_media_urls:
            raise InvalidMediaError(
                f"At most {self.media_settings.max_media_urls} media URLs allowed"
            )
        if media_type is None:
            if count:
                raise InvalidMediaError("media_type is required when media_urls are given")
            return
        if count == 0:
            raise InvalidMediaError("media_urls are required when media_type is set")
        if media_type == MediaType.IMAGE and count > self.media_settings.max_images:
            raise InvalidMediaError(
                f"At most {self.media_settings.max_images} images allowed"
            )
        if media_type == MediaType.VIDEO and count != self.media_settings.max_videos:
            raise InvalidMediaError(
                f"Video posts need exactly {self.media_settings.max_videos} video"
            )

    async def ensure_pet_ownership(self, pet_id: Optional[PetId], user_id: UserId) -> None:
        """Check that a user may attach a pet to their post.

        Raises:
            NotFoundError: If the pet doesn't exist or was deleted
            NotAuthorizedError: If the pet belongs to someone else
        """
        if pet_id is None:
            return
        pet = await self.pet_repository.find_by_id(pet_id)
        if pet is None or pet.is_deleted:
            raise NotFoundError("Pet", str(pet_id))
        if pet.owner_id != user_id:
            logfire.warn(
                "Pet ownership check failed", pet_id=str(pet_id), user_id=str(user_id)
            )
            raise NotAuthorizedError("pet", str(pet_id), str(user_id))

    def _build(self, fields: dict) -> Post:
        """Validate post fields, turning pydantic errors into domain errors."""
        try:
            return Post.model_validate(fields)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid post: {e.errors()[0]['msg']}") from e

    async def create_post(
        self,
        author_id: UserId,
        content: str,
        pet_id: Optional[PetId] = None,
        media_type: Optional[MediaType] = None,
        media_urls: Optional[list[str]] = None,
        hashtags: Optional[list[str]] = None,
        is_draft: bool = False,
    ) -> Post:
        """Create a post.

        Everything that can reject the post is checked before hashtags are
        resolved, because resolving them inserts tag rows.

        Args:
            author_id: Author of the post
            content: Post text
            pet_id: Optional pet the post is about (must belong to the author)
            media_type: Kind of attached media
            media_urls: URLs of already uploaded media
            hashtags: Raw hashtags, canonicalized and created as needed
            is_draft: Save as a draft, visible only to the author

        Returns:
            The saved post

        Raises:
            ValidationError: If the content is empty or too long
            InvalidMediaError: If media type and URLs don't agree
            NotFoundError: If the pet doesn't exist
            NotAuthorizedError: If the pet belongs to another user
        """
        media_urls = media_urls or []
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            pet_id=str(pet_id) if pet_id else None,
            media_count=len(media_urls),
            is_draft=is_draft,
        ):
            now = datetime.now()
            post = self._build(
                {
                    "id": PostId(uuid4()),
                    "author_id": author_id,
                    "pet_id": pet_id,
                    "content": content,
                    "media_type": media_type,
                    "media_urls": media_urls,
                    "is_draft": is_draft,
                    "created_at": now,
                    "updated_at": now,
                }
            )
            self.validate_media(media_type, media_urls)
            await self.ensure_pet_ownership(pet_id, author_id)

            tags = await self.tag_service.normalize_tags(hashtags or [])
            post = post.model_copy(update={"tag_names": [tag.name for tag in tags]})

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), tag_count=len(tags))
            return saved

    async def get_post(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Post:
        """Get a post ``viewer_id`` may see.

        Raises:
            NotFoundError: If the post doesn't exist, was deleted, or is a
                draft of another user
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or not post.is_visible_to(viewer_id):
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Get a live post the user is allowed to modify.

        Raises:
            NotFoundError: If the post doesn't exist or was deleted
            NotAuthorizedError: If the user is not the author
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        if post.author_id != user_id:
            logfire.warn(
                "Post modification by non-author",
                post_id=str(post_id),
                user_id=str(user_id),
            )
            if post.is_draft:
                # Someone else's draft doesn't exist for this user
                raise NotFoundError("Post", str(post_id))
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post

    async def update_post(
        self,
        post_id: PostId,
        user_id: UserId,
        content: Optional[str] = None,
        pet_id: Optional[PetId] = None,
        media_type: Optional[MediaType] = None,
        media_urls: Optional[list[str]] = None,
        hashtags: Optional[list[str]] = None,
        is_draft: Optional[bool] = None,
    ) -> Post:
        """Update a post owned by ``user_id``.

        Fields left as None keep their current value. ``hashtags`` replaces
        the whole tag set; an empty list removes all tags. ``is_draft=False``
        publishes a draft. New hashtags are only resolved once every other
        change has been validated.

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post (or new pet) doesn't exist
            NotAuthorizedError: If the user is not the author or doesn't own the pet
            ValidationError: If the new content is empty or too long
            InvalidMediaError: If the resulting media payload is invalid
        """
        with logfire.span(
            "post_service.update_post", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.get_owned_post(post_id, user_id)

            changes: dict = {"updated_at": datetime.now()}
            if content is not None:
                changes["content"] = content
            if media_type is not None:
                changes["media_type"] = media_type
            if media_urls is not None:
                changes["media_urls"] = media_urls
            if is_draft is not None:
                changes["is_draft"] = is_draft

            # model_copy skips validation, so rebuild to re-check content rules
            updated = self._build({**post.model_dump(), **changes})
            self.validate_media(updated.media_type, updated.media_urls)

            late: dict = {}
            if pet_id is not None and pet_id != post.pet_id:
                await self.ensure_pet_ownership(pet_id, user_id)
                late["pet_id"] = pet_id
            if hashtags is not None:
                tags = await self.tag_service.normalize_tags(hashtags)
                late["tag_names"] = [tag.name for tag in tags]

            saved = await self.post_repository.save(updated.model_copy(update=late))
            logfire.info(
                "Post updated",
                post_id=str(post_id),
                fields=sorted(k for k in [*changes, *late] if k != "updated_at"),
            )
            return saved

    async def delete_post(self, post_id: PostId, user_id: UserId) -> None:
        """Soft delete a post owned by ``user_id``.

        Raises:
            NotFoundError: If the post doesn't exist or was already deleted
            NotAuthorizedError: If the user is not the author
        """
        with logfire.span(
            "post_service.delete_post", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.get_owned_post(post_id, user_id)
            deleted = await self.post_repository.soft_delete(post_id, datetime.now())
            if not deleted:
                # Deleted concurrently between the check and the update
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post deleted", post_id=str(post_id))

    async def increment_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Atomically increment a counter by 1."""
        with logfire.span(
            "post_service.increment_counter", post_id=str(post_id), counter=counter.value
        ):
            await self.post_repository.increment_counter(post_id, counter)

    async def decrement_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Atomically decrement a counter by 1 (never below 0)."""
        with logfire.span(
            "post_service.decrement_counter", post_id=str(post_id), counter=counter.value
        ):
            await self.post_repository.decrement_counter(post_id, counter)

    async def increment_like_count(self, post_id: PostId) -> None:
        await self.increment_counter(post_id, PostCounter.LIKE)

    async def decrement_like_count(self, post_id: PostId) -> None:
        await self.decrement_counter(post_id, PostCounter.LIKE)

    async def increment_comment_count(self, post_id: PostId) -> None:
        await self.increment_counter(post_id, PostCounter.COMMENT)

    async def decrement_comment_count(self, post_id: PostId) -> None:
        await self.decrement_counter(post_id, PostCounter.COMMENT)

    async def share_post(self, post_id: PostId) -> Post:
        """Record a share of a published post.

        Returns:
            The post with its updated share count

        Raises:
            NotFoundError: If the post doesn't exist, was deleted or is a draft
        """
        await self.get_post(post_id)
        await self.increment_counter(post_id, PostCounter.SHARE)
        return await self.get_post(post_id)
