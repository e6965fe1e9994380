"""User collection routes: the posts a user liked or saved to favorites."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from pawprint.application.usecase.post import (
    ListFavoritedPostsUseCase,
    ListLikedPostsUseCase,
    ListPostsResponse,
    ListUserPostsRequest,
)

from .common import optional_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/likes", response_model=ListPostsResponse)
async def list_liked_posts(
    user_id: UUID,
    use_case: FromDishka[ListLikedPostsUseCase],
    page: str | None = None,
    limit: str | None = None,
    x_user_id: str | None = Header(default=None),
) -> ListPostsResponse:
    """Published posts the user liked, most recent like first.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000/likes?page=2
    """
    return await use_case.execute(
        ListUserPostsRequest(
            user_id=str(user_id),
            page=page,
            limit=limit,
            viewer_id=optional_user(x_user_id),
        )
    )


@router.get("/{user_id}/favorites", response_model=ListPostsResponse)
async def list_favorited_posts(
    user_id: UUID,
    use_case: FromDishka[ListFavoritedPostsUseCase],
    page: str | None = None,
    limit: str | None = None,
    x_user_id: str | None = Header(default=None),
) -> ListPostsResponse:
    """Published posts the user saved, most recently saved first."""
    return await use_case.execute(
        ListUserPostsRequest(
            user_id=str(user_id),
            page=page,
            limit=limit,
            viewer_id=optional_user(x_user_id),
        )
    )
