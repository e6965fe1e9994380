"""In-memory repository implementations for testing."""

from .favorite import InMemoryFavoriteRepository
from .like import InMemoryLikeRepository
from .pet import InMemoryPetRepository
from .post import InMemoryPostRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryFavoriteRepository",
    "InMemoryLikeRepository",
    "InMemoryPetRepository",
    "InMemoryPostRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
