"""Helpers shared by routers: acting user header and domain error mapping.

The acting user is identified by the ``X-User-Id`` header, set by the
gateway after authentication.
"""

from uuid import UUID

from fastapi import HTTPException, status

from pawprint.domain.error import (
    AlreadyExistsError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)


def optional_user(x_user_id: str | None) -> str | None:
    """Parse the optional acting user header; a malformed value counts as absent."""
    if not x_user_id:
        return None
    try:
        return str(UUID(x_user_id))
    except ValueError:
        return None


def require_user(x_user_id: str | None) -> str:
    """Return the acting user ID or fail with 401."""
    user_id = optional_user(x_user_id)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


def to_http_error(e: DomainError) -> HTTPException:
    """Map a domain error to an HTTP error."""
    if isinstance(e, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(e, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(e, AlreadyExistsError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(e))
