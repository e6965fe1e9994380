"""Shared interface for per-user marks on posts (likes, favorites)."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pawprint.domain.model import PostFavorite, PostLike
from pawprint.domain.value import PostId, UserId

R = TypeVar("R", PostLike, PostFavorite)


class PostReactionRepository(ABC, Generic[R]):
    """Rows linking a user to a post, unique per (post, user)."""

    @abstractmethod
    async def find(self, post_id: PostId, user_id: UserId) -> Optional[R]:
        """Find a user's mark on a post.

        Returns:
            The row if it exists, None otherwise
        """
        pass

    @abstractmethod
    async def find_marked_post_ids(
        self, user_id: UserId, post_ids: list[PostId]
    ) -> set[PostId]:
        """Return which of the given posts the user has marked.

        Batch lookup for feed pages, avoiding one query per post.
        """
        pass

    @abstractmethod
    async def save(self, reaction: R) -> R:
        """Insert a row.

        Raises:
            IntegrityError: On a duplicate or a dangling post/user reference
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's mark on a post.

        Returns:
            True if a row was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_post_ids_by_user(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[PostId]:
        """One page of the posts a user marked, most recently marked first.

        Only live, published posts are listed.

        Args:
            user_id: User whose marks are listed
            limit: Maximum number of IDs to return
            offset: Number of IDs to skip

        Returns:
            Ordered post IDs
        """
        pass

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int:
        """Count the live, published posts a user marked."""
        pass
