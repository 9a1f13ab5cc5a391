"""
Cache key builders for the application.

This module contains functions to generate the surrogate keys attached to
responses, so the CDN can purge exactly the cached pages that show a post
once that post changes.

A post key is derived from the post identity and its ``updated_at``
timestamp: the same post observed twice without changes yields the same key,
and every synchronization produces a new one.
"""

from collections.abc import Iterable

from blogsite.configs import settings
from blogsite.models.post import PostDB
from blogsite.schemas.now import NowPage
from blogsite.utils.timezone import as_utc

CACHE_KEY_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S%f"


def table_key() -> str:
    """Return the namespace label shared by every post list response."""
    return settings.SURROGATE_KEY_NAMESPACE


def post_cache_key(post: PostDB) -> str:
    """
    Generate the cache key for a single post.

    Args:
        post: Stored or unsaved post.

    Returns:
        str: ``posts/<id>-<updated_at>`` for stored posts, ``posts/new``
        for posts that were never persisted.
    """
    namespace = table_key()
    if post.id is None:
        return f"{namespace}/new"
    if post.updated_at is None:
        return f"{namespace}/{post.id}"
    timestamp = as_utc(post.updated_at).strftime(CACHE_KEY_TIMESTAMP_FORMAT)
    return f"{namespace}/{post.id}-{timestamp}"


def posts_surrogate_key(posts: Iterable[PostDB]) -> str:
    """Generate the surrogate key for a list of posts, in rendering order."""
    return " ".join([table_key(), *(post_cache_key(post) for post in posts)])


def now_page_cache_key(page: NowPage) -> str:
    """Generate cache key for the "now" page."""
    return f"now/{as_utc(page.updated_at).strftime(CACHE_KEY_TIMESTAMP_FORMAT)}"
