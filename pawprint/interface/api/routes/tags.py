"""Hashtag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from pawprint.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from pawprint.application.usecase.tag.list_tags import TagOrder

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("", response_model=ListTagsResponse, summary="List hashtags")
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    limit: int = Query(default=100, ge=1, le=100),
    order_by: TagOrder = "name",
) -> ListTagsResponse:
    """List hashtags that have been used on posts.

    Example:
        GET /tags?limit=10&order_by=post_count
    """
    return await use_case.execute(ListTagsRequest(limit=limit, order_by=order_by))
