"""In-memory favorite repository for testing."""

from pawprint.domain.model.favorite import PostFavorite
from pawprint.domain.repository.favorite import FavoriteRepository

from .reaction import InMemoryReactionRepository


class InMemoryFavoriteRepository(
    InMemoryReactionRepository[PostFavorite], FavoriteRepository
):
    """Favorites kept in ``InMemoryStore.favorites``."""

    rows_attr = "favorites"
