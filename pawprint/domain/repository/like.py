"""Post like repository interface."""

from pawprint.domain.model.like import PostLike
from pawprint.domain.repository.reaction import PostReactionRepository


class LikeRepository(PostReactionRepository[PostLike]):
    """Repository for post likes."""
