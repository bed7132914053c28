"""Exception handlers for converting custom exceptions to HTTP responses."""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from videoboard.app.core.exceptions import (
    VideoBoardException,
    SuggestionNotFoundError,
    MissingFieldError,
    AdminAuthenticationError,
    InvalidTransitionError,
    InvalidStateError,
    SuggestionNotVotableError,
    DuplicateVoteError,
    VideoCatalogError,
    VideoCatalogNotConfiguredError,
)


async def videoboard_exception_handler(request: Request, exc: VideoBoardException) -> JSONResponse:
    """
    Handle all suggestion board exceptions and convert to appropriate HTTP responses.

    Args:
        request: The incoming request
        exc: The exception that was raised

    Returns:
        JSONResponse with appropriate status code and error details
    """
    extra: dict = {}
    headers: dict[str, str] | None = None

    # Map exception types to HTTP status codes
    if isinstance(exc, SuggestionNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, MissingFieldError):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
        extra["fields"] = exc.fields
    elif isinstance(exc, AdminAuthenticationError):
        status_code = status.HTTP_401_UNAUTHORIZED
        extra["login_url"] = exc.login_url
        headers = {"WWW-Authenticate": "Bearer"}
    elif isinstance(exc, (InvalidTransitionError, SuggestionNotVotableError, DuplicateVoteError)):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, InvalidStateError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, VideoCatalogNotConfiguredError):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    elif isinstance(exc, VideoCatalogError):
        status_code = status.HTTP_502_BAD_GATEWAY
    else:
        # Generic VideoBoardException
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "type": exc.__class__.__name__,
            **({"info": exc.details} if exc.details else {}),
            **extra,
        },
        headers=headers,
    )


def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(VideoBoardException, videoboard_exception_handler)
