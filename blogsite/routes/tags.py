# blogsite/routes/tags.py

"""Tag Routes: tag index with post counts and posts per tag."""

from fastapi import APIRouter, Response
from fastapi.responses import ORJSONResponse

from blogsite.dependencies import CdnCached, RepoDep, set_surrogate_key_header
from blogsite.errors.database import RecordNotFoundError
from blogsite.schemas import PostListResponse, TagResponse
from blogsite.utils.cache_keys import posts_surrogate_key, table_key

router = APIRouter(prefix="/tags", tags=["🏷️ Tags"])


@router.get(
    "",
    summary="List tags",
    response_model=list[TagResponse],
    response_class=ORJSONResponse,
    dependencies=[CdnCached],
    operation_id="list_tags",
)
async def list_tags(response: Response, repo: RepoDep) -> list[TagResponse]:
    """List tags with the number of posts carrying each one."""
    counts = await repo.tag_counts()
    # any post change may change the counts
    set_surrogate_key_header(response, table_key())
    return [TagResponse(name=name, count=count) for name, count in counts.items()]


@router.get(
    "/{tag}",
    summary="List posts by tag",
    response_model=list[PostListResponse],
    response_class=ORJSONResponse,
    dependencies=[CdnCached],
    operation_id="show_tag",
)
async def show_tag(tag: str, response: Response, repo: RepoDep) -> list[PostListResponse]:
    """List posts carrying a tag, newest first."""
    posts = await repo.by_tag(tag)
    if not posts:
        raise RecordNotFoundError(detail=f"No posts tagged {tag!r}")

    set_surrogate_key_header(response, posts_surrogate_key(posts))
    return [PostListResponse.model_validate(post) for post in posts]
