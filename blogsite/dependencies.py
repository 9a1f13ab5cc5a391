"""Shared FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from blogsite.configs import cdn_config
from blogsite.db import get_session
from blogsite.repositories import PostRepository

SURROGATE_KEY_HEADER = "Surrogate-Key"


def get_post_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PostRepository:
    """Resolve the `PostRepository` dependency."""
    return PostRepository(session)


def set_cache_control_headers(response: Response) -> None:
    """
    Mark a response as cacheable by the CDN only.

    Browsers must revalidate (``no-cache``) while the CDN keeps the page for
    ``max_age`` and may serve it stale while revalidating or on origin errors.
    Entries are purged through their surrogate keys.
    """
    response.headers["Cache-Control"] = "public, no-cache"
    response.headers["Surrogate-Control"] = (
        f"max-age={cdn_config.max_age}, "
        f"stale-while-revalidate={cdn_config.stale_while_revalidate}, "
        f"stale-if-error={cdn_config.stale_if_error}"
    )


def set_surrogate_key_header(response: Response, key: str) -> None:
    response.headers[SURROGATE_KEY_HEADER] = key


RepoDep = Annotated[PostRepository, Depends(get_post_repository)]
CdnCached = Depends(set_cache_control_headers)
