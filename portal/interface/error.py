"""Interface layer error translation."""

from fastapi import HTTPException, status

from portal.domain.error import (
    ConflictError,
    DomainError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: DomainError | ValueError) -> HTTPException:
    """Translate a use case error into the HTTP error returned to the client.

    ValueError comes from malformed identifiers in the path.

    Args:
        error: Domain error or ValueError raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, InvalidInputError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error)
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{error}. Please retry.",
        )
    if isinstance(error, ValueError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid request: {error}"
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def require_account(account_id: str | None, action: str) -> str:
    """Return the authenticated account ID or raise 401.

    Args:
        account_id: Account ID from the auth token, if any
        action: What the caller was trying to do, for the error message

    Raises:
        HTTPException: 401 when there is no authenticated account
    """
    if not account_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return account_id
