# blogsite/routes/posts.py

"""
Post Routes.

Read-only endpoints for blog posts. Every response carries CDN cache headers
and a ``Surrogate-Key`` header so that a changed post can be purged from the
CDN together with every list that shows it.

Summary
-------
Endpoints include:
  - List posts, newest first (``Surrogate-Key: posts <key> <key> ...``)
  - Get post by slug (``Surrogate-Key: <key>``)
"""

from logging import getLogger

from fastapi import APIRouter, Response
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_404_NOT_FOUND

from blogsite.configs import file_logger
from blogsite.dependencies import CdnCached, RepoDep, set_surrogate_key_header
from blogsite.errors.database import RecordNotFoundError
from blogsite.schemas import PostListResponse, PostResponse
from blogsite.utils.cache_keys import post_cache_key, posts_surrogate_key

router = APIRouter(prefix="/blog", tags=["📝 Posts"])

logger = file_logger(getLogger(__name__))


@router.get(
    "",
    summary="List posts",
    response_model=list[PostListResponse],
    response_class=ORJSONResponse,
    dependencies=[CdnCached],
    operation_id="list_posts",
)
async def list_posts(response: Response, repo: RepoDep) -> list[PostListResponse]:
    """List all posts, newest first."""
    posts = await repo.newest_first()
    set_surrogate_key_header(response, posts_surrogate_key(posts))
    return [PostListResponse.model_validate(post) for post in posts]


@router.get(
    "/{slug:path}",
    summary="Get post by slug",
    response_model=PostResponse,
    response_class=ORJSONResponse,
    dependencies=[CdnCached],
    responses={HTTP_404_NOT_FOUND: {"description": "Post not found"}},
    operation_id="show_post",
)
async def show_post(slug: str, response: Response, repo: RepoDep) -> PostResponse:
    """Get a single post."""
    post = await repo.get_by_slug(slug)
    if post is None:
        raise RecordNotFoundError(detail=f"Post {slug!r} not found")

    set_surrogate_key_header(response, post_cache_key(post))
    return PostResponse.model_validate(post)
