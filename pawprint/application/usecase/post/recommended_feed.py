"""Recommended feed use case."""

import logfire
from pydantic import BaseModel

from pawprint.domain.service import FavoriteService, FeedService, LikeService

from .list_posts import ListPostsResponse, build_page_response


class RecommendedFeedRequest(BaseModel):
    """Recommended feed request. Malformed page/limit fall back to defaults."""

    page: int | str | None = 1
    limit: int | str | None = None
    viewer_id: str | None = None


class RecommendedFeedUseCase:
    """Use case for the unfiltered feed ranked by hot score."""

    def __init__(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> None:
        self.feed_service = feed_service
        self.like_service = like_service
        self.favorite_service = favorite_service

    async def execute(self, request: RecommendedFeedRequest) -> ListPostsResponse:
        """Return one page of the recommended feed."""
        with logfire.span("recommended_feed.execute", page=request.page):
            page = await self.feed_service.recommended_feed(
                page=request.page, limit=request.limit
            )
            return await build_page_response(
                page, self.like_service, self.favorite_service, request.viewer_id
            )
