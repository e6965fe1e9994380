"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Optional

from pawprint.domain.model.post import Post
from pawprint.domain.value import PetId, PostCounter, PostId, TagName, UserId
from pawprint.domain.value.common import ValueObject


class FeedSortOrder(str, Enum):
    """Sort order for feeds.

    Every order falls back to created_at DESC, id DESC on ties so that
    pagination is stable across repeated calls.
    """

    LATEST = "latest"  # created_at DESC
    POPULAR = "popular"  # like_count DESC
    HOT = "hot"  # likes*2 + comments*3 + shares*5 DESC, computed at query time


class PostFilter(ValueObject):
    """Equality filters applied to live (non-deleted) posts.

    Published posts and drafts never mix: ``is_draft`` selects one or the other.
    """

    author_id: Optional[UserId] = None
    pet_id: Optional[PetId] = None
    tag: Optional[TagName] = None
    is_draft: bool = False


class HotWeights(ValueObject):
    """Weights of the hot score."""

    like: int = 2
    comment: int = 3
    share: int = 5


class PostRepository(ABC):
    """Repository for Post aggregate.

    Soft-deleted posts are invisible to every read method.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a live post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_ids(
        self,
        post_filter: PostFilter,
        sort: FeedSortOrder = FeedSortOrder.LATEST,
        limit: int = 20,
        offset: int = 0,
        weights: HotWeights = HotWeights(),
    ) -> list[PostId]:
        """Find one page of matching post IDs, in feed order.

        Selects identifiers only so the hashtag join can never multiply rows
        inside the LIMIT/OFFSET window.

        Args:
            post_filter: Filters to apply
            sort: Sort order
            limit: Maximum number of IDs to return
            offset: Number of IDs to skip
            weights: Hot score weights (used for HOT only)

        Returns:
            Ordered list of post IDs
        """
        pass

    @abstractmethod
    async def count(self, post_filter: PostFilter) -> int:
        """Count live posts matching the filter, ignoring pagination.

        Args:
            post_filter: Filters to apply

        Returns:
            Number of distinct matching posts
        """
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Load live posts with their tags by ID.

        No ordering is guaranteed; callers reorder by their ID list.

        Args:
            post_ids: IDs to load

        Returns:
            Posts found (missing or deleted IDs are skipped)
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update) and replace its tag associations.

        Counters are written on insert only; updates never overwrite them.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> bool:
        """Mark a live post as deleted.

        Args:
            post_id: The post ID
            deleted_at: Deletion timestamp

        Returns:
            True if a live post was marked deleted
        """
        pass

    @abstractmethod
    async def increment_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Atomically increment a counter by 1.

        Uses SQL-level increment to avoid lost updates.

        Args:
            post_id: The post ID
            counter: Which counter to adjust
        """
        pass

    @abstractmethod
    async def decrement_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Atomically decrement a counter by 1, never below 0.

        Args:
            post_id: The post ID
            counter: Which counter to adjust
        """
        pass
