"""Post favorite repository interface."""

from pawprint.domain.model.favorite import PostFavorite
from pawprint.domain.repository.reaction import PostReactionRepository


class FavoriteRepository(PostReactionRepository[PostFavorite]):
    """Repository for posts users saved to their favorites."""
