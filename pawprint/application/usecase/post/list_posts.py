"""List posts use case."""

import logfire
from pydantic import BaseModel

from pawprint.domain.model.feed import FeedPage, FeedQuery
from pawprint.domain.repository.post import FeedSortOrder
from pawprint.domain.service import FavoriteService, FeedService, LikeService

from .item import PostItem, viewer_marks


class ListPostsRequest(BaseModel):
    """List posts request.

    Pagination and sort values are passed through as given, unparsed
    strings included; FeedQuery parses them and the feed service clamps them.
    """

    page: int | str | None = 1
    limit: int | str | None = None
    sort_by: str = FeedSortOrder.LATEST.value
    author_id: str | None = None
    pet_id: str | None = None
    tag: str | None = None
    viewer_id: str | None = None  # Acting user, for is_liked / is_favorited


class ListPostsResponse(BaseModel):
    """One page of posts."""

    items: list[PostItem]
    total: int
    page: int
    limit: int
    total_pages: int


async def build_page_response(
    page: FeedPage,
    like_service: LikeService,
    favorite_service: FavoriteService,
    viewer_id: str | None,
) -> ListPostsResponse:
    """Convert a feed page, marking the posts the viewer liked or favorited.

    Args:
        page: Hydrated feed page
        like_service: Like domain service
        favorite_service: Favorite domain service
        viewer_id: Acting user ID, if any

    Returns:
        List posts response
    """
    liked, favorited = await viewer_marks(
        like_service, favorite_service, viewer_id, [item.post.id for item in page.items]
    )
    return ListPostsResponse(
        items=[
            PostItem.from_feed_item(
                item,
                is_liked=item.post.id in liked,
                is_favorited=item.post.id in favorited,
            )
            for item in page.items
        ],
        total=page.total,
        page=page.page,
        limit=page.limit,
        total_pages=page.total_pages,
    )


class ListPostsUseCase:
    """Use case for listing posts with filters, sorting and pagination."""

    def __init__(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            feed_service: Feed domain service
            like_service: Like domain service
            favorite_service: Favorite domain service
        """
        self.feed_service = feed_service
        self.like_service = like_service
        self.favorite_service = favorite_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            One page of posts
        """
        with logfire.span(
            "list_posts.execute",
            page=request.page,
            limit=request.limit,
            sort_by=request.sort_by,
            tag=request.tag,
        ):
            query = FeedQuery(
                page=request.page,
                limit=request.limit,
                sort_by=request.sort_by,
                author_id=request.author_id,
                pet_id=request.pet_id,
                tag=request.tag,
            )
            page = await self.feed_service.query_feed(query)

            response = await build_page_response(
                page, self.like_service, self.favorite_service, request.viewer_id
            )
            logfire.info("Posts listed", count=len(response.items), total=page.total)
            return response
