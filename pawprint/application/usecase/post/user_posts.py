"""Per-user post lists: liked posts, favorites and drafts."""

from typing import Awaitable, Callable
from uuid import UUID

import logfire
from pydantic import BaseModel

from pawprint.domain.model.feed import FeedPage, FeedQuery
from pawprint.domain.service import FavoriteService, FeedService, LikeService
from pawprint.domain.value import PostId, UserId

from .list_posts import ListPostsResponse, build_page_response


class ListUserPostsRequest(BaseModel):
    """Request for one page of a user's list.

    ``page`` and ``limit`` are parsed permissively, as for the main feed.
    """

    user_id: str  # Owner of the list
    page: int | str | None = 1
    limit: int | str | None = None
    viewer_id: str | None = None


PageLoader = Callable[[UserId, int, int], Awaitable[tuple[list[PostId], int]]]


class _UserPostsUseCase:
    def __init__(
        self,
        feed_service: FeedService,
        like_service: LikeService,
        favorite_service: FavoriteService,
    ) -> None:
        self.feed_service = feed_service
        self.like_service = like_service
        self.favorite_service = favorite_service

    async def _page_of(
        self, request: ListUserPostsRequest, load_ids: PageLoader
    ) -> FeedPage:
        query = FeedQuery(page=request.page, limit=request.limit)
        page = self.feed_service.clamp_page(query.page)
        limit = self.feed_service.clamp_limit(query.limit)
        post_ids, total = await load_ids(
            UserId(UUID(request.user_id)), limit, (page - 1) * limit
        )
        return await self.feed_service.page_from_ids(post_ids, total, page, limit)

    async def _respond(
        self, page: FeedPage, request: ListUserPostsRequest
    ) -> ListPostsResponse:
        return await build_page_response(
            page, self.like_service, self.favorite_service, request.viewer_id
        )


class ListLikedPostsUseCase(_UserPostsUseCase):
    """Posts a user liked, most recent like first."""

    async def execute(self, request: ListUserPostsRequest) -> ListPostsResponse:
        with logfire.span("list_liked_posts.execute", user_id=request.user_id):
            page = await self._page_of(request, self.like_service.liked_posts_page)
            return await self._respond(page, request)


class ListFavoritedPostsUseCase(_UserPostsUseCase):
    """Posts a user saved to favorites, most recently saved first."""

    async def execute(self, request: ListUserPostsRequest) -> ListPostsResponse:
        with logfire.span("list_favorited_posts.execute", user_id=request.user_id):
            page = await self._page_of(
                request, self.favorite_service.favorited_posts_page
            )
            return await self._respond(page, request)


class ListDraftsUseCase(_UserPostsUseCase):
    """The acting user's own drafts, newest first.

    Drafts go through the regular feed query with the author filter set to
    the requesting user, so nobody can list another user's drafts.
    """

    async def execute(self, request: ListUserPostsRequest) -> ListPostsResponse:
        with logfire.span("list_drafts.execute", user_id=request.user_id):
            page = await self.feed_service.query_feed(
                FeedQuery(
                    page=request.page,
                    limit=request.limit,
                    author_id=request.user_id,
                    drafts=True,
                )
            )
            return await self._respond(page, request)
