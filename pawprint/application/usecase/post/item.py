"""Post representation shared by post use case responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from pawprint.domain.model.feed import FeedItem
from pawprint.domain.service import FavoriteService, LikeService
from pawprint.domain.value import MediaType, PostId, UserId


class AuthorSummary(BaseModel):
    """Public author fields shown with a post."""

    user_id: str
    username: str
    avatar_url: str | None = None


class PetSummary(BaseModel):
    """Pet fields shown with a post."""

    pet_id: str
    name: str
    species: str
    avatar_url: str | None = None


class PostItem(BaseModel):
    """A post as returned by the API."""

    post_id: str
    author_id: str
    author: AuthorSummary | None
    pet: PetSummary | None
    content: str
    media_type: MediaType | None
    media_urls: list[str]
    hashtags: list[str]
    like_count: int
    comment_count: int
    share_count: int
    favorite_count: int
    is_draft: bool
    created_at: datetime
    updated_at: datetime
    is_liked: bool = False
    is_favorited: bool = False

    @classmethod
    def from_feed_item(
        cls, item: FeedItem, is_liked: bool = False, is_favorited: bool = False
    ) -> "PostItem":
        """Build the API view of a hydrated post.

        Args:
            item: Post with author and pet profiles
            is_liked: Whether the viewer has liked the post
            is_favorited: Whether the post is among the viewer's favorites

        Returns:
            Post item
        """
        post = item.post
        author = (
            AuthorSummary(
                user_id=str(item.author.id),
                username=item.author.username,
                avatar_url=item.author.avatar_url,
            )
            if item.author
            else None
        )
        pet = (
            PetSummary(
                pet_id=str(item.pet.id),
                name=item.pet.name,
                species=item.pet.species,
                avatar_url=item.pet.avatar_url,
            )
            if item.pet
            else None
        )
        return cls(
            post_id=str(post.id),
            author_id=str(post.author_id),
            author=author,
            pet=pet,
            content=post.content,
            media_type=post.media_type,
            media_urls=list(post.media_urls),
            hashtags=[tag.root for tag in post.tag_names],
            like_count=post.like_count,
            comment_count=post.comment_count,
            share_count=post.share_count,
            favorite_count=post.favorite_count,
            is_draft=post.is_draft,
            created_at=post.created_at,
            updated_at=post.updated_at,
            is_liked=is_liked,
            is_favorited=is_favorited,
        )


async def viewer_marks(
    like_service: LikeService,
    favorite_service: FavoriteService,
    viewer_id: str | None,
    post_ids: list[PostId],
) -> tuple[set[PostId], set[PostId]]:
    """Which of ``post_ids`` the viewer liked and favorited.

    One batch query per kind, whatever the number of posts.

    Returns:
        Liked post IDs and favorited post IDs (both empty for anonymous viewers)
    """
    if not viewer_id or not post_ids:
        return set(), set()
    user_id = UserId(UUID(viewer_id))
    liked = await like_service.get_liked_post_ids(user_id, post_ids)
    favorited = await favorite_service.get_favorited_post_ids(user_id, post_ids)
    return liked, favorited
