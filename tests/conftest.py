"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from pawprint.domain.model import Pet, Post, User
from pawprint.domain.value import PetId, PostId, TagName, UserId

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_post(
    author_id: UserId | None = None,
    content: str = "Morning walk in the park",
    minutes: int = 0,
    tags: list[str] | None = None,
    **fields,
) -> Post:
    """Helper function to build a live post for tests.

    Args:
        author_id: Author (a random user if omitted)
        content: Post text
        minutes: Creation time as minutes after BASE_TIME
        tags: Canonical tag names
        **fields: Any other Post field (counters, pet_id, media...)

    Returns:
        Post that has not been saved yet
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Post(
        id=PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        content=content,
        tag_names=[TagName(name) for name in tags or []],
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )


def make_user(username: str = "alice") -> User:
    """Helper function to build a user profile."""
    return User(id=UserId(uuid4()), username=username)


def make_pet(owner_id: UserId, name: str = "Biscuit", **fields) -> Pet:
    """Helper function to build a pet profile owned by ``owner_id``."""
    return Pet(id=PetId(uuid4()), owner_id=owner_id, name=name, **fields)
