"""Feed domain service.

Feeds are assembled in two phases. The first query selects only the IDs of
one page, in feed order, with every filter applied. The second loads full
posts for exactly those IDs. Joining hashtags in a single paginated query
would repeat a post once per tag inside the LIMIT window; selecting IDs
first keeps every page free of duplicates.
"""

import math
from typing import Any, Optional

import logfire
from pydantic import ValidationError as PydanticValidationError

from pawprint.config import FeedSettings
from pawprint.domain.model.feed import FeedItem, FeedPage, FeedQuery
from pawprint.domain.model.pet import Pet
from pawprint.domain.model.post import Post
from pawprint.domain.model.user import User
from pawprint.domain.repository import (
    FeedSortOrder,
    HotWeights,
    PetRepository,
    PostFilter,
    PostRepository,
    UserRepository,
)
from pawprint.domain.value import PetId, PostId, TagName, UserId

from .base import Service


class FeedService(Service):
    """Domain service for paginated post feeds."""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        pet_repository: PetRepository,
        feed_settings: FeedSettings,
    ) -> None:
        """Initialize feed service.

        Args:
            post_repository: Post repository
            user_repository: User profile repository
            pet_repository: Pet profile repository
            feed_settings: Page size limits and hot score weights
        """
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.pet_repository = pet_repository
        self.feed_settings = feed_settings

    @property
    def hot_weights(self) -> HotWeights:
        return HotWeights(
            like=self.feed_settings.hot_like_weight,
            comment=self.feed_settings.hot_comment_weight,
            share=self.feed_settings.hot_share_weight,
        )

    def clamp_page(self, page: int) -> int:
        """Pages start at 1; anything lower is treated as the first page."""
        return max(page, 1)

    def clamp_limit(self, limit: Optional[int]) -> int:
        """Resolve a requested page size.

        Missing or non-positive limits use the default, limits above the
        cap are reduced to the cap.
        """
        if limit is None or limit < 1:
            return self.feed_settings.default_limit
        return min(limit, self.feed_settings.max_limit)

    def build_filter(self, query: FeedQuery) -> Optional[PostFilter]:
        """Convert query filters to a repository filter.

        The tag is canonicalized the same way tags are stored, so "#Cats"
        matches posts tagged "cats".

        Returns:
            The filter, or None if the tag can never match a stored tag
        """
        tag = None
        if query.tag is not None:
            try:
                tag = TagName.parse(query.tag)
            except PydanticValidationError:
                return None
            if tag is None:
                return None
        return PostFilter(
            author_id=query.author_id,
            pet_id=query.pet_id,
            tag=tag,
            is_draft=query.drafts,
        )

    async def query_feed(self, query: FeedQuery) -> FeedPage:
        """Return one page of live posts matching the query.

        Args:
            query: Filters, sort order and pagination

        Returns:
            Page of hydrated posts with total count and page count
        """
        page = self.clamp_page(query.page)
        limit = self.clamp_limit(query.limit)

        with logfire.span(
            "feed_service.query_feed",
            page=page,
            limit=limit,
            sort_by=query.sort_by.value,
            author_id=str(query.author_id) if query.author_id else None,
            pet_id=str(query.pet_id) if query.pet_id else None,
            tag=query.tag,
            drafts=query.drafts,
        ):
            post_filter = self.build_filter(query)
            if post_filter is None:
                logfire.info("Tag filter matches no tag", tag=query.tag)
                return FeedPage(items=[], total=0, page=page, limit=limit)

            # Phase 1: IDs of this page, plus the unpaginated total
            post_ids = await self.post_repository.find_ids(
                post_filter,
                sort=query.sort_by,
                limit=limit,
                offset=(page - 1) * limit,
                weights=self.hot_weights,
            )
            total = await self.post_repository.count(post_filter)
            return await self.page_from_ids(post_ids, total, page, limit)

    async def page_from_ids(
        self, post_ids: list[PostId], total: int, page: int, limit: int
    ) -> FeedPage:
        """Hydrate one page of already selected, ordered post IDs.

        The second phase of every feed, also used for lists whose IDs come
        from elsewhere (a user's likes or favorites).

        Args:
            post_ids: IDs of the page, in display order
            total: Number of matching posts across all pages
            page: Page number (already clamped)
            limit: Page size (already clamped)
        """
        total_pages = math.ceil(total / limit) if total else 0
        if not post_ids:
            logfire.info("Empty feed page", page=page, total=total)
            return FeedPage(
                items=[], total=total, page=page, limit=limit, total_pages=total_pages
            )

        # Phase 2: hydrate exactly those IDs, then restore feed order
        items = await self.hydrate(post_ids)

        logfire.info("Feed page built", page=page, count=len(items), total=total)
        return FeedPage(
            items=items,
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
        )

    async def recommended_feed(
        self, page: Any = 1, limit: Optional[Any] = None
    ) -> FeedPage:
        """Unfiltered feed ranked by hot score.

        ``page`` and ``limit`` are parsed as permissively as in FeedQuery.
        """
        return await self.query_feed(
            FeedQuery(page=page, limit=limit, sort_by=FeedSortOrder.HOT)
        )

    async def get_item(
        self, post_id: PostId, viewer_id: Optional[UserId] = None
    ) -> Optional[FeedItem]:
        """Load a single post ``viewer_id`` may see, with its author and pet.

        Args:
            post_id: Post ID
            viewer_id: Acting user; drafts are only returned to their author

        Returns:
            Hydrated post, or None if missing, deleted or not visible
        """
        items = await self.hydrate([post_id])
        if not items or not items[0].post.is_visible_to(viewer_id):
            return None
        return items[0]

    async def hydrate(self, post_ids: list[PostId]) -> list[FeedItem]:
        """Load posts by ID with author and pet profiles, in the given order.

        Repositories return rows in no particular order, so results are
        rebuilt from ``post_ids``. IDs whose post disappeared between the
        two phases (deleted meanwhile) are dropped.

        Args:
            post_ids: Ordered post IDs

        Returns:
            Feed items in the order of ``post_ids``
        """
        with logfire.span("feed_service.hydrate", count=len(post_ids)):
            posts = await self.post_repository.find_by_ids(post_ids)
            posts_by_id: dict[PostId, Post] = {post.id: post for post in posts}

            authors = await self._load_authors({post.author_id for post in posts})
            pets = await self._load_pets(
                {post.pet_id for post in posts if post.pet_id is not None}
            )

            items = []
            for post_id in post_ids:
                post = posts_by_id.get(post_id)
                if post is None:
                    continue
                items.append(
                    FeedItem(
                        post=post,
                        author=authors.get(post.author_id),
                        pet=pets.get(post.pet_id) if post.pet_id else None,
                    )
                )

            if len(items) < len(post_ids):
                logfire.warn(
                    "Posts vanished during hydration",
                    requested=len(post_ids),
                    hydrated=len(items),
                )
            return items

    async def _load_authors(self, user_ids: set[UserId]) -> dict[UserId, User]:
        if not user_ids:
            return {}
        users = await self.user_repository.find_by_ids(list(user_ids))
        return {user.id: user for user in users}

    async def _load_pets(self, pet_ids: set[PetId]) -> dict[PetId, Pet]:
        if not pet_ids:
            return {}
        pets = await self.pet_repository.find_by_ids(list(pet_ids))
        return {pet.id: pet for pet in pets}
