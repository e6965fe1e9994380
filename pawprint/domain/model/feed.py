"""Feed query and result models."""

from typing import Any, Optional
from uuid import UUID

from pydantic import Field, field_validator

from pawprint.domain.model.common import DomainModel
from pawprint.domain.model.pet import Pet
from pawprint.domain.model.post import Post
from pawprint.domain.model.user import User
from pawprint.domain.repository.post import FeedSortOrder
from pawprint.domain.value import PetId, UserId


class FeedQuery(DomainModel):
    """Filter, sort and pagination options for a feed.

    Parsing is permissive: values that don't parse fall back to defaults
    instead of raising. Range clamping (page >= 1, 1 <= limit <= cap) is
    applied by FeedService, which knows the configured cap.
    """

    page: int = 1
    limit: Optional[int] = None
    sort_by: FeedSortOrder = FeedSortOrder.LATEST
    author_id: Optional[UserId] = None
    pet_id: Optional[PetId] = None
    tag: Optional[str] = None
    drafts: bool = False  # The author's drafts instead of published posts

    @field_validator("page", mode="before")
    @classmethod
    def parse_page(cls, v: Any) -> int:
        try:
            return int(v)
        except (TypeError, ValueError):
            return 1

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v: Any) -> Optional[int]:
        if v is None:
            return None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None

    @field_validator("sort_by", mode="before")
    @classmethod
    def parse_sort(cls, v: Any) -> FeedSortOrder:
        """Unknown sort values fall back to latest."""
        if isinstance(v, FeedSortOrder):
            return v
        try:
            return FeedSortOrder(str(v).strip().lower())
        except ValueError:
            return FeedSortOrder.LATEST

    @field_validator("tag", mode="before")
    @classmethod
    def parse_tag(cls, v: Any) -> Optional[str]:
        """A blank tag means no tag filter."""
        if v is None:
            return None
        v = str(v)
        return v if v.strip() else None

    @field_validator("author_id", "pet_id", mode="before")
    @classmethod
    def parse_uuid(cls, v: Any) -> Optional[UUID]:
        if v is None or isinstance(v, UUID):
            return v
        return UUID(str(v))


class FeedItem(DomainModel):
    """A post hydrated with its author and pet profiles."""

    post: Post
    author: Optional[User] = None
    pet: Optional[Pet] = None


class FeedPage(DomainModel):
    """One page of a feed with pagination metadata."""

    items: list[FeedItem] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20
    total_pages: int = 0
