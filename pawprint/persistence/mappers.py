"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are converted by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from pawprint.domain.model import Pet, Post, PostFavorite, PostLike, Tag, User
from pawprint.domain.value import (
    MediaType,
    PetId,
    PostFavoriteId,
    PostId,
    PostLikeId,
    TagId,
    TagName,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """asyncpg returns UUID objects, other drivers may return strings."""
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any], tag_names: Optional[list[str]] = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tag_names: Canonical names of the post's tags, in tag order

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        pet_id=PetId(_uuid(row["pet_id"])) if row.get("pet_id") else None,
        content=row["content"],
        media_type=MediaType(row["media_type"]) if row.get("media_type") else None,
        media_urls=list(row.get("media_urls") or []),
        tag_names=[TagName(name) for name in tag_names or []],
        like_count=row["like_count"],
        comment_count=row["comment_count"],
        share_count=row["share_count"],
        favorite_count=row["favorite_count"],
        is_draft=row["is_draft"],
        is_deleted=row["is_deleted"],
        deleted_at=row.get("deleted_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Tags live in post_tags and are written separately.
    """
    data = post.model_dump(exclude={"tag_names"})
    data["media_type"] = post.media_type.value if post.media_type else None
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        post_count=row["post_count"],
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": tag.id,
        "name": tag.name.root,
        "post_count": tag.post_count,
        "created_at": tag.created_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User profile."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        avatar_url=row.get("avatar_url"),
    )


def row_to_pet(row: Dict[str, Any]) -> Pet:
    """Convert database row to Pet profile."""
    return Pet(
        id=PetId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        name=row["name"],
        species=row["species"],
        avatar_url=row.get("avatar_url"),
        is_deleted=row["is_deleted"],
    )


def row_to_like(row: Dict[str, Any]) -> PostLike:
    """Convert database row to PostLike domain model."""
    return PostLike(
        id=PostLikeId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: PostLike | PostFavorite) -> Dict[str, Any]:
    """Convert a like or favorite to a database dict (same columns)."""
    return reaction.model_dump()


def row_to_favorite(row: Dict[str, Any]) -> PostFavorite:
    """Convert database row to PostFavorite domain model."""
    return PostFavorite(
        id=PostFavoriteId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )
