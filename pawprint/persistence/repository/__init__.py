"""PostgreSQL repository implementations."""

from pawprint.persistence.repository.favorite import PostgresFavoriteRepository
from pawprint.persistence.repository.like import PostgresLikeRepository
from pawprint.persistence.repository.pet import PostgresPetRepository
from pawprint.persistence.repository.post import PostgresPostRepository
from pawprint.persistence.repository.tag import PostgresTagRepository
from pawprint.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresFavoriteRepository",
    "PostgresLikeRepository",
    "PostgresPetRepository",
    "PostgresPostRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]
