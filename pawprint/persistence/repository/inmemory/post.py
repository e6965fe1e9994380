"""In-memory post repository for testing."""

from datetime import datetime
from typing import Any, Callable, Optional

from pawprint.domain.model.post import Post
from pawprint.domain.repository.post import (
    FeedSortOrder,
    HotWeights,
    PostFilter,
    PostRepository,
)
from pawprint.domain.value import PostCounter, PostId

from .store import InMemoryStore


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Mirrors the Postgres ordering: the sort metric first, then
    created_at DESC, id DESC.
    """

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _posts(self) -> dict[PostId, Post]:
        return self._store.posts

    def _matching(self, post_filter: PostFilter) -> list[Post]:
        posts = [
            p
            for p in self._posts.values()
            if p.is_live and p.is_draft == post_filter.is_draft
        ]

        if post_filter.author_id:
            posts = [p for p in posts if p.author_id == post_filter.author_id]
        if post_filter.pet_id:
            posts = [p for p in posts if p.pet_id == post_filter.pet_id]
        if post_filter.tag is not None:
            posts = [p for p in posts if post_filter.tag in p.tag_names]

        return posts

    @staticmethod
    def _sort_key(sort: FeedSortOrder, weights: HotWeights) -> Callable[[Post], Any]:
        if sort == FeedSortOrder.POPULAR:
            return lambda p: (p.like_count, p.created_at, p.id)
        if sort == FeedSortOrder.HOT:
            return lambda p: (
                p.like_count * weights.like
                + p.comment_count * weights.comment
                + p.share_count * weights.share,
                p.created_at,
                p.id,
            )
        return lambda p: (p.created_at, p.id)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a live post by ID."""
        post = self._posts.get(post_id)
        return post if post and post.is_live else None

    async def find_ids(
        self,
        post_filter: PostFilter,
        sort: FeedSortOrder = FeedSortOrder.LATEST,
        limit: int = 20,
        offset: int = 0,
        weights: HotWeights = HotWeights(),
    ) -> list[PostId]:
        """Find one page of post IDs in feed order."""
        posts = self._matching(post_filter)
        posts.sort(key=self._sort_key(sort, weights), reverse=True)
        return [p.id for p in posts[offset : offset + limit]]

    async def count(self, post_filter: PostFilter) -> int:
        """Count live posts matching the filter."""
        return len(self._matching(post_filter))

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Load live posts by ID, in storage order."""
        wanted = set(post_ids)
        return [p for p in self._posts.values() if p.id in wanted and p.is_live]

    async def save(self, post: Post) -> Post:
        """Save or update a post.

        Like the Postgres update, counters, created_at and the deletion
        state of an existing post are kept.
        """
        existing = self._posts.get(post.id)
        if existing:
            post = post.model_copy(
                update={
                    "like_count": existing.like_count,
                    "comment_count": existing.comment_count,
                    "share_count": existing.share_count,
                    "favorite_count": existing.favorite_count,
                    "created_at": existing.created_at,
                    "is_deleted": existing.is_deleted,
                    "deleted_at": existing.deleted_at,
                }
            )
        self._posts[post.id] = post
        return post

    async def soft_delete(self, post_id: PostId, deleted_at: datetime) -> bool:
        """Mark a live post as deleted."""
        post = self._posts.get(post_id)
        if post is None or not post.is_live:
            return False
        self._posts[post_id] = post.model_copy(
            update={"is_deleted": True, "deleted_at": deleted_at, "updated_at": deleted_at}
        )
        return True

    async def increment_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Increment a counter by 1."""
        post = self._posts.get(post_id)
        if post:
            value = getattr(post, counter.value)
            self._posts[post_id] = post.model_copy(update={counter.value: value + 1})

    async def decrement_counter(self, post_id: PostId, counter: PostCounter) -> None:
        """Decrement a counter by 1 (minimum 0)."""
        post = self._posts.get(post_id)
        if post and getattr(post, counter.value) > 0:
            value = getattr(post, counter.value)
            self._posts[post_id] = post.model_copy(update={counter.value: value - 1})
