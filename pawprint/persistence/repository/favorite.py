"""PostgreSQL implementation of Favorite repository."""

from pawprint.domain.model import PostFavorite
from pawprint.domain.repository import FavoriteRepository
from pawprint.persistence.mappers import row_to_favorite
from pawprint.persistence.tables import post_favorites_table

from .reaction import PostgresReactionRepository


class PostgresFavoriteRepository(
    PostgresReactionRepository[PostFavorite], FavoriteRepository
):
    """Favorites in post_favorites (uq_post_favorite)."""

    table = post_favorites_table
    from_row = staticmethod(row_to_favorite)
