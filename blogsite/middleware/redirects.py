"""Permanent redirects for URLs from earlier versions of the blog."""

from collections.abc import Mapping
from logging import getLogger

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import RedirectResponse
from starlette.status import HTTP_301_MOVED_PERMANENTLY
from starlette.types import ASGIApp

from blogsite.configs import LEGACY_REDIRECTS, file_logger

logger = file_logger(getLogger(__name__))


class LegacyRedirectMiddleware(BaseHTTPMiddleware):
    """Answer requests for moved paths with a 301 before routing."""

    def __init__(self, app: ASGIApp, redirects: Mapping[str, str] | None = None) -> None:
        super().__init__(app)
        self.redirects = dict(LEGACY_REDIRECTS if redirects is None else redirects)

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if target := self.redirects.get(request.url.path):
            logger.info(f"Redirecting {request.url.path} to {target}")
            return RedirectResponse(target, status_code=HTTP_301_MOVED_PERMANENTLY)
        return await call_next(request)
