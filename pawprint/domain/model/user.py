"""User profile projection.

Accounts are owned by the identity service; posts only need the public
profile fields to render an author.
"""

from typing import Optional

from pawprint.domain.model.common import DomainModel
from pawprint.domain.value import UserId


class User(DomainModel):
    """Public profile of a post author."""

    id: UserId
    username: str
    avatar_url: Optional[str] = None
