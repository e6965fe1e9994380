"""Post like entity."""

from datetime import datetime

from pydantic import Field

from pawprint.domain.model.common import DomainModel
from pawprint.domain.value import PostId, PostLikeId, UserId


class PostLike(DomainModel):
    """A user's like on a post.

    One like per user per post, enforced by a database unique constraint.
    """

    id: PostLikeId
    post_id: PostId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
