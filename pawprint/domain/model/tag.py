"""Tag entity for hashtags on posts."""

from datetime import datetime

from pydantic import Field

from pawprint.domain.model.common import DomainModel
from pawprint.domain.value import TagId, TagName


class Tag(DomainModel):
    """Hashtag attached to posts.

    Created lazily the first time any post uses the name, never deleted.
    The name is canonical and unique across all tags.
    """

    id: TagId
    name: TagName
    post_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
