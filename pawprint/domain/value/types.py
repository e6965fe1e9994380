"""Domain value objects for Pawprint.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from pydantic import field_validator

from pawprint.domain.value.common import RootValueObject

TAG_MARKER = "#"
TAG_NAME_MAX_LENGTH = 50


class MediaType(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "image"
    VIDEO = "video"


class PostCounter(str, Enum):
    """Engagement counters on a post.

    Values are the column names, so repositories can address them directly.
    """

    LIKE = "like_count"
    COMMENT = "comment_count"
    SHARE = "share_count"
    FAVORITE = "favorite_count"


def canonicalize_tag(raw: str) -> str:
    """Reduce a free-text hashtag to its canonical form.

    Trims, lowercases and strips exactly one leading '#'.
    "#Cats", "cats" and " CATS " all become "cats". May return an
    empty string, which callers treat as "no tag".
    """
    name = raw.strip().lower()
    if name.startswith(TAG_MARKER):
        name = name[len(TAG_MARKER) :].strip()
    return name


class TagName(RootValueObject[str]):
    """Canonical hashtag name.

    Always stored in canonical form: trimmed, lowercase, no leading '#',
    1-50 characters. Use ``TagName.parse`` for user input.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name is already canonical."""
        if not v or len(v) > TAG_NAME_MAX_LENGTH:
            raise ValueError(
                f"Tag name must be 1-{TAG_NAME_MAX_LENGTH} characters"
            )
        if v != v.strip().lower():
            raise ValueError("Tag name must be trimmed and lowercase")
        return v

    @classmethod
    def parse(cls, raw: str) -> Optional["TagName"]:
        """Build a TagName from user input, or None if it normalizes to nothing."""
        name = canonicalize_tag(raw)
        if not name:
            return None
        return cls(name)
