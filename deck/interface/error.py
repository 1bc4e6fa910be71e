"""Mapping of domain errors to HTTP errors."""

from fastapi import HTTPException, status
import logfire

from deck.domain.error import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


def to_http_exception(error: DomainError | ValueError) -> HTTPException:
    """Translate a domain error into the HTTP error returned to the client.

    ValueError covers malformed ids and scope/page combinations rejected
    while building use case requests.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ForbiddenError):
        logfire.warn("Forbidden request", error=str(error))
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"You can only delete your own {error.resource}s",
        )
    if isinstance(error, UnauthorizedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, (ValidationError, ValueError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    logfire.error("Unmapped domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal error"
    )


def require_user_id(user_id: str | None, action: str) -> str:
    """Return the authenticated user id or raise 401.

    Args:
        user_id: User id from the auth cookie, None if missing or invalid
        action: What the caller tried to do, for the error message
    """
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
