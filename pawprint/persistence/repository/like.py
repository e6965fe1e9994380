"""PostgreSQL implementation of Like repository."""

from pawprint.domain.model import PostLike
from pawprint.domain.repository import LikeRepository
from pawprint.persistence.mappers import row_to_like
from pawprint.persistence.tables import post_likes_table

from .reaction import PostgresReactionRepository


class PostgresLikeRepository(PostgresReactionRepository[PostLike], LikeRepository):
    """Likes in post_likes (uq_post_like)."""

    table = post_likes_table
    from_row = staticmethod(row_to_like)
