from collections.abc import Awaitable, Callable
from logging import Logger
from typing import Any

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from blogsite.utils.helpers import host


class BaseAppError(Exception):
    """
    Base exception class for application errors.

    Subclasses may set extra public attributes (e.g. ``line``); they are
    added to the JSON error body next to ``detail``.
    """

    def __init__(
        self,
        detail: str = "Internal Server Error",
        status_code: int = HTTP_500_INTERNAL_SERVER_ERROR,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        return self.detail

    def to_content(self) -> dict[str, Any]:
        """Return the JSON error body."""
        extra = {k: v for k, v in vars(self).items() if k not in ("detail", "status_code")}
        return {"detail": self.detail, **extra}


def create_exception_handler(
    logger: Logger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create an exception handler that renders application errors as JSON.

    Client errors are logged as warnings, server errors as errors. Anything
    that is not a ``BaseAppError`` becomes a bare 500.

    Args:
        logger: Logger of the error family the handler is registered for.
    """

    async def handler(request: Request, exc: Exception) -> ORJSONResponse:
        error = exc if isinstance(exc, BaseAppError) else BaseAppError()
        log = logger.error if error.status_code >= HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
        log(f"{error.detail} for ip: {host(request)} for endpoint {request.url.path}")

        return ORJSONResponse(content=error.to_content(), status_code=error.status_code)

    return handler
