"""Post aggregate root.

A post is a user-authored feed entry, optionally about one of the author's
pets, with text, optional media and a set of hashtags.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from pawprint.domain.model.common import DomainModel
from pawprint.domain.value import MediaType, PetId, PostId, TagName, UserId


class Post(DomainModel):
    """Post aggregate root.

    Engagement counters are never negative. They change only through the
    repository's atomic increment/decrement, never by saving a modified copy.
    """

    id: PostId
    author_id: UserId
    pet_id: Optional[PetId] = None
    content: str = Field(min_length=1, max_length=2000)
    media_type: Optional[MediaType] = None
    media_urls: list[str] = Field(default_factory=list)
    tag_names: list[TagName] = Field(default_factory=list)
    like_count: int = Field(default=0, ge=0)
    comment_count: int = Field(default=0, ge=0)
    share_count: int = Field(default=0, ge=0)
    favorite_count: int = Field(default=0, ge=0)
    is_draft: bool = False
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Store content trimmed."""
        return v.strip() if isinstance(v, str) else v

    @property
    def is_live(self) -> bool:
        """Whether the post is visible (not soft-deleted)."""
        return not self.is_deleted

    def is_visible_to(self, viewer_id: Optional[UserId]) -> bool:
        """Live posts are public, except drafts, which only their author sees."""
        if not self.is_live:
            return False
        return not self.is_draft or viewer_id == self.author_id
