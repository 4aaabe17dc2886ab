"""Interface layer errors and their HTTP mapping."""

from fastapi import HTTPException, status

from flashcastr.domain.error import (
    DomainError,
    InvalidInputError,
    NotFoundError,
    UpstreamError,
)

BAD_USER_INPUT = "BAD_USER_INPUT"


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """Missing or wrong API key on a privileged route."""

    pass


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client."""
    if isinstance(error, InvalidInputError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": BAD_USER_INPUT, "message": str(error)},
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, UpstreamError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
