"""Post favorite entity."""

from datetime import datetime

from pydantic import Field

from pawprint.domain.model.common import DomainModel
from pawprint.domain.value import PostFavoriteId, PostId, UserId


class PostFavorite(DomainModel):
    """A post a user saved to their favorites.

    Like a like, at most one per user per post (uq_post_favorite).
    """

    id: PostFavoriteId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
