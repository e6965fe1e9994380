"""Post routes.

Reads work without the ``X-User-Id`` header; writes require it.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Response, status
from pydantic import BaseModel, Field

from pawprint.application.usecase.favorite import (
    FavoritePostRequest,
    FavoritePostResponse,
    FavoritePostUseCase,
    UnfavoritePostUseCase,
)
from pawprint.application.usecase.like import (
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    UnlikePostUseCase,
)
from pawprint.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    InteractionStatusRequest,
    InteractionStatusResponse,
    InteractionStatusUseCase,
    ListDraftsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ListUserPostsRequest,
    RecommendedFeedRequest,
    RecommendedFeedUseCase,
    SharePostRequest,
    SharePostResponse,
    SharePostUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from pawprint.config import FeedSettings
from pawprint.domain.error import DomainError, NotFoundError
from pawprint.domain.value import MediaType

from .common import optional_user, require_user, to_http_error

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def _check_hashtag_count(hashtags: list[str] | None, feed_settings: FeedSettings) -> None:
    if hashtags is not None and len(hashtags) > feed_settings.max_hashtags:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"At most {feed_settings.max_hashtags} hashtags allowed",
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    page: str | None = None,
    limit: str | None = None,
    sort_by: str = "latest",
    author_id: UUID | None = None,
    pet_id: UUID | None = None,
    tag: str | None = None,
    x_user_id: str | None = Header(default=None),
) -> ListPostsResponse:
    """List published posts.

    ``page`` and ``limit`` are taken as raw strings: values that don't
    parse fall back to the first page and the default size, out-of-range
    values are clamped. Unknown sort values fall back to ``latest``.

    Example:
        GET /posts?sort_by=hot&tag=cats&page=2&limit=10
    """
    with logfire.span("api.list_posts", page=page, limit=limit, sort_by=sort_by):
        return await use_case.execute(
            ListPostsRequest(
                page=page,
                limit=limit,
                sort_by=sort_by,
                author_id=str(author_id) if author_id else None,
                pet_id=str(pet_id) if pet_id else None,
                tag=tag,
                viewer_id=optional_user(x_user_id),
            )
        )


@router.get("/feed/recommended", response_model=ListPostsResponse)
async def recommended_feed(
    use_case: FromDishka[RecommendedFeedUseCase],
    page: str | None = None,
    limit: str | None = None,
    x_user_id: str | None = Header(default=None),
) -> ListPostsResponse:
    """Recommended feed: all published posts ranked by hot score."""
    return await use_case.execute(
        RecommendedFeedRequest(
            page=page, limit=limit, viewer_id=optional_user(x_user_id)
        )
    )


@router.get("/drafts", response_model=ListPostsResponse)
async def list_drafts(
    use_case: FromDishka[ListDraftsUseCase],
    page: str | None = None,
    limit: str | None = None,
    x_user_id: str | None = Header(default=None),
) -> ListPostsResponse:
    """List the acting user's drafts, newest first."""
    user_id = require_user(x_user_id)
    return await use_case.execute(
        ListUserPostsRequest(user_id=user_id, page=page, limit=limit, viewer_id=user_id)
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    use_case: FromDishka[GetPostUseCase],
    x_user_id: str | None = Header(default=None),
) -> GetPostResponse:
    """Get a post by ID.

    Raises:
        HTTPException: 404 if the post doesn't exist, was deleted, or is
            someone else's draft
    """
    try:
        return await use_case.execute(
            GetPostRequest(post_id=str(post_id), viewer_id=optional_user(x_user_id))
        )
    except NotFoundError as e:
        logfire.warn("Post not found", post_id=str(post_id))
        raise to_http_error(e)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str = Field(min_length=1, max_length=2000)
    pet_id: UUID | None = None
    media_type: MediaType | None = None
    media_urls: list[str] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)
    is_draft: bool = False


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    use_case: FromDishka[CreatePostUseCase],
    feed_settings: FromDishka[FeedSettings],
    x_user_id: str | None = Header(default=None),
) -> CreatePostResponse:
    """Create a new post, or a draft with ``is_draft: true``.

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user(x_user_id)
    _check_hashtag_count(request.hashtags, feed_settings)

    try:
        return await use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                content=request.content,
                pet_id=str(request.pet_id) if request.pet_id else None,
                media_type=request.media_type,
                media_urls=request.media_urls,
                hashtags=request.hashtags,
                is_draft=request.is_draft,
            )
        )
    except DomainError as e:
        logfire.warn("Post creation domain error", error=str(e))
        raise to_http_error(e)
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are unchanged.

    ``is_draft: false`` publishes a draft.
    """

    content: str | None = Field(default=None, min_length=1, max_length=2000)
    pet_id: UUID | None = None
    media_type: MediaType | None = None
    media_urls: list[str] | None = None
    hashtags: list[str] | None = None
    is_draft: bool | None = None


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    use_case: FromDishka[UpdatePostUseCase],
    feed_settings: FromDishka[FeedSettings],
    x_user_id: str | None = Header(default=None),
) -> UpdatePostResponse:
    """Update a post. Only the author can edit.

    Raises:
        HTTPException: If not authenticated, not authorized, or validation fails
    """
    user_id = require_user(x_user_id)
    _check_hashtag_count(request.hashtags, feed_settings)

    try:
        return await use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                user_id=user_id,
                content=request.content,
                pet_id=str(request.pet_id) if request.pet_id else None,
                media_type=request.media_type,
                media_urls=request.media_urls,
                hashtags=request.hashtags,
                is_draft=request.is_draft,
            )
        )
    except DomainError as e:
        logfire.warn("Post update domain error", post_id=str(post_id), error=str(e))
        raise to_http_error(e)
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: UUID,
    use_case: FromDishka[DeletePostUseCase],
    x_user_id: str | None = Header(default=None),
) -> Response:
    """Soft delete a post. Only the author can delete."""
    user_id = require_user(x_user_id)

    try:
        await use_case.execute(DeletePostRequest(post_id=str(post_id), user_id=user_id))
    except DomainError as e:
        logfire.warn("Post deletion domain error", post_id=str(post_id), error=str(e))
        raise to_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/interactions", response_model=InteractionStatusResponse)
async def interaction_status(
    post_id: UUID,
    use_case: FromDishka[InteractionStatusUseCase],
    x_user_id: str | None = Header(default=None),
) -> InteractionStatusResponse:
    """Whether the acting user has liked and favorited the post."""
    user_id = require_user(x_user_id)

    try:
        return await use_case.execute(
            InteractionStatusRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_error(e)


@router.post("/{post_id}/like", response_model=LikePostResponse)
async def like_post(
    post_id: UUID,
    use_case: FromDishka[LikePostUseCase],
    x_user_id: str | None = Header(default=None),
) -> LikePostResponse:
    """Like a post.

    Raises:
        HTTPException: 404 if the post is missing, 409 if already liked
    """
    user_id = require_user(x_user_id)

    try:
        return await use_case.execute(
            LikePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        logfire.warn("Like failed", post_id=str(post_id), error=str(e))
        raise to_http_error(e)


@router.delete("/{post_id}/like", response_model=LikePostResponse)
async def unlike_post(
    post_id: UUID,
    use_case: FromDishka[UnlikePostUseCase],
    x_user_id: str | None = Header(default=None),
) -> LikePostResponse:
    """Remove the acting user's like.

    Raises:
        HTTPException: 404 if the post is missing or wasn't liked
    """
    user_id = require_user(x_user_id)

    try:
        return await use_case.execute(
            LikePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        logfire.warn("Unlike failed", post_id=str(post_id), error=str(e))
        raise to_http_error(e)


@router.post("/{post_id}/favorite", response_model=FavoritePostResponse)
async def favorite_post(
    post_id: UUID,
    use_case: FromDishka[FavoritePostUseCase],
    x_user_id: str | None = Header(default=None),
) -> FavoritePostResponse:
    """Save a post to the acting user's favorites.

    Raises:
        HTTPException: 404 if the post is missing, 409 if already a favorite
    """
    user_id = require_user(x_user_id)

    try:
        return await use_case.execute(
            FavoritePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        logfire.warn("Favorite failed", post_id=str(post_id), error=str(e))
        raise to_http_error(e)


@router.delete("/{post_id}/favorite", response_model=FavoritePostResponse)
async def unfavorite_post(
    post_id: UUID,
    use_case: FromDishka[UnfavoritePostUseCase],
    x_user_id: str | None = Header(default=None),
) -> FavoritePostResponse:
    """Remove a post from the acting user's favorites."""
    user_id = require_user(x_user_id)

    try:
        return await use_case.execute(
            FavoritePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        logfire.warn("Unfavorite failed", post_id=str(post_id), error=str(e))
        raise to_http_error(e)


@router.post("/{post_id}/share", response_model=SharePostResponse)
async def share_post(
    post_id: UUID,
    use_case: FromDishka[SharePostUseCase],
    x_user_id: str | None = Header(default=None),
) -> SharePostResponse:
    """Record a share of a post."""
    require_user(x_user_id)

    try:
        return await use_case.execute(SharePostRequest(post_id=str(post_id)))
    except DomainError as e:
        logfire.warn("Share failed", post_id=str(post_id), error=str(e))
        raise to_http_error(e)
