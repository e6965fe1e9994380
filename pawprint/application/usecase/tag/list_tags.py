"""List tags use case."""

from datetime import datetime
from typing import Literal

import logfire
from pydantic import BaseModel, Field

from pawprint.domain.model.tag import Tag
from pawprint.domain.service import TagService

TagOrder = Literal["name", "post_count", "created_at"]


class TagItem(BaseModel):
    """A hashtag as shown in tag pickers and autocomplete."""

    name: str
    post_count: int
    created_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagItem":
        return cls(name=tag.name.root, post_count=tag.post_count, created_at=tag.created_at)


class ListTagsRequest(BaseModel):
    """Which tags to list, and how many."""

    limit: int = Field(default=100, ge=1, le=100)
    order_by: TagOrder = "name"


class ListTagsResponse(BaseModel):
    tags: list[TagItem]


class ListTagsUseCase:
    """Lists known hashtags, e.g. for client-side autocomplete."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Return up to ``request.limit`` tags in the requested order."""
        with logfire.span("list_tags.execute", order_by=request.order_by):
            tags = await self.tag_service.get_all_tags(
                limit=request.limit, order_by=request.order_by
            )
            logfire.debug("Tags listed", count=len(tags))
            return ListTagsResponse(tags=[TagItem.from_tag(tag) for tag in tags])
