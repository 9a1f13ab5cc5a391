# blogsite/routes/pages.py

"""Static pages and the health check."""

from fastapi import APIRouter, Response
from fastapi.responses import ORJSONResponse

from blogsite.dependencies import CdnCached, set_surrogate_key_header
from blogsite.schemas import NowPage
from blogsite.services.now import load_now_page
from blogsite.utils.cache_keys import now_page_cache_key
from blogsite.utils.helpers import today_str

router = APIRouter(tags=["📄 Pages"])


@router.get(
    "/now",
    summary="What I'm doing now",
    response_model=NowPage,
    response_class=ORJSONResponse,
    dependencies=[CdnCached],
    operation_id="now_page",
)
async def now_page(response: Response) -> NowPage:
    page = await load_now_page()
    set_surrogate_key_header(response, now_page_cache_key(page))
    return page


@router.get(
    "/are-you-with-me",
    summary="Health check endpoint",
    response_class=ORJSONResponse,
    operation_id="health_check",
)
async def health_check() -> ORJSONResponse:
    return ORJSONResponse(content={"status": "ok", "timestamp": today_str()})
