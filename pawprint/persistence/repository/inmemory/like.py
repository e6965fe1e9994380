"""In-memory like repository for testing."""

from pawprint.domain.model.like import PostLike
from pawprint.domain.repository.like import LikeRepository

from .reaction import InMemoryReactionRepository


class InMemoryLikeRepository(InMemoryReactionRepository[PostLike], LikeRepository):
    """Likes kept in ``InMemoryStore.likes``."""

    rows_attr = "likes"
