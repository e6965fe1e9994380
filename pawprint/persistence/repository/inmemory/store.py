"""Shared state for in-memory repositories."""

from dataclasses import dataclass, field

from pawprint.domain.model import Pet, Post, PostFavorite, PostLike, Tag, User
from pawprint.domain.value import PetId, PostId, TagId, UserId


@dataclass
class InMemoryStore:
    """Tables of the in-memory database.

    Repositories built on the same store see each other's writes, the way
    Postgres repositories share a database.
    """

    posts: dict[PostId, Post] = field(default_factory=dict)
    tags: dict[TagId, Tag] = field(default_factory=dict)
    users: dict[UserId, User] = field(default_factory=dict)
    pets: dict[PetId, Pet] = field(default_factory=dict)
    likes: list[PostLike] = field(default_factory=list)
    favorites: list[PostFavorite] = field(default_factory=list)
