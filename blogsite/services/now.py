"""Loader for the static "now" page."""

from datetime import UTC, datetime
from pathlib import Path

from anyio import Path as AsyncPath

from blogsite.configs import settings
from blogsite.errors.database import RecordNotFoundError
from blogsite.schemas.now import NowPage


async def load_now_page(path: Path | None = None) -> NowPage:
    """
    Read the "now" page from disk.

    Its ``updated_at`` is the file modification time, so editing the file
    changes the page's cache key.

    Raises:
        RecordNotFoundError: If the file does not exist
    """
    page_path = AsyncPath(path or settings.NOW_PAGE_PATH)
    if not await page_path.is_file():
        raise RecordNotFoundError(detail=f"Now page not found at {page_path}")

    stat = await page_path.stat()
    return NowPage(
        body=await page_path.read_text(encoding="utf-8"),
        updated_at=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
    )
