"""Tag domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from pawprint.domain.error import ValidationError
from pawprint.domain.model.tag import Tag
from pawprint.domain.repository.tag import TagRepository
from pawprint.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for hashtag resolution and listing."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    @staticmethod
    def canonical_names(raw_names: list[str]) -> list[TagName]:
        """Canonicalize raw hashtags, dropping empties and duplicates.

        Keeps the first occurrence of each name, so the caller's order is
        preserved: ["Cats", "#cats", " CATS "] becomes [cats].

        Args:
            raw_names: Hashtags as typed by the user

        Returns:
            Unique canonical tag names in input order

        Raises:
            ValidationError: If a name is too long after canonicalization
        """
        names: list[TagName] = []
        seen: set[str] = set()
        for raw in raw_names:
            try:
                name = TagName.parse(raw)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid hashtag {raw!r}") from e
            if name is None or name.root in seen:
                continue
            seen.add(name.root)
            names.append(name)
        return names

    async def normalize_tags(self, raw_names: list[str]) -> list[Tag]:
        """Resolve hashtags to persisted tags, creating missing ones.

        Lookup and creation race with other requests introducing the same
        new name. The unique index on tags.name decides the winner; the
        loser's IntegrityError means the tag now exists, so it is re-read.

        Args:
            raw_names: Hashtags as typed by the user

        Returns:
            One tag per distinct canonical name, in input order
        """
        names = self.canonical_names(raw_names)
        with logfire.span(
            "tag_service.normalize_tags", tags=[n.root for n in names]
        ):
            if not names:
                return []

            existing = {
                tag.name.root: tag
                for tag in await self.tag_repository.find_by_names(names)
            }

            tags: list[Tag] = []
            for name in names:
                tag = existing.get(name.root)
                if tag is None:
                    tag = await self._create_or_get(name)
                tags.append(tag)

            logfire.info(
                "Tags resolved",
                count=len(tags),
                created=len(tags) - len(existing),
            )
            return tags

    async def _create_or_get(self, name: TagName) -> Tag:
        """Create a tag, falling back to the existing row on a unique violation."""
        tag = Tag(
            id=TagId(uuid4()),
            name=name,
            post_count=0,
            created_at=datetime.now(),
        )
        try:
            return await self.tag_repository.create(tag)
        except IntegrityError:
            logfire.info("Tag created concurrently, re-reading", tag_name=name.root)
            winner = await self.tag_repository.find_by_name(name)
            if winner is None:
                # Unique violation without a visible row; let the caller see it
                raise
            return winner

    async def get_all_tags(self, limit: int = 100, order_by: str = "name") -> list[Tag]:
        """Get all available tags.

        Args:
            limit: Maximum number of tags to return
            order_by: Field to order by ('name', 'post_count' or 'created_at')

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", limit=limit, order_by=order_by):
            tags = await self.tag_repository.find_all(limit=limit, order_by=order_by)
            logfire.info("Tags retrieved", count=len(tags))
            return tags
