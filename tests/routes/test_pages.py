# tests/routes/test_pages.py
"""Tests for static pages, the health check and legacy redirects."""

import os
from datetime import UTC, datetime
from pathlib import Path

import pytest
from httpx import AsyncClient
from pytest import mark

from blogsite.configs import settings
from blogsite.schemas import PostDocument
from blogsite.services.synchronizer import PostSynchronizer

SYNCED_AT = datetime(2017, 3, 1, tzinfo=UTC)


@pytest.fixture
def now_page(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "now.md"
    path.write_text("Reading and writing.\n", encoding="utf-8")
    mtime = datetime(2017, 1, 2, tzinfo=UTC).timestamp()
    os.utime(path, (mtime, mtime))
    monkeypatch.setattr(settings, "NOW_PAGE_PATH", path)
    return path


@mark.asyncio
async def test_now_page(client: AsyncClient, now_page: Path) -> None:
    response = await client.get("/now")

    assert response.status_code == 200
    assert response.json()["body"] == "Reading and writing.\n"
    assert response.headers["cache-control"] == "public, no-cache"
    assert response.headers["surrogate-key"] == "now/20170102000000000000"


@mark.asyncio
async def test_missing_now_page(
    client: AsyncClient,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(settings, "NOW_PAGE_PATH", tmp_path / "missing.md")

    response = await client.get("/now")

    assert response.status_code == 404


@mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    response = await client.get("/are-you-with-me")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "timestamp" in data
    assert "surrogate-key" not in response.headers


LEGACY_POSTS = [
    (
        "/2015/05/19/rubygem-configuration-pattern",
        "/blog/rubygem-configuration-pattern",
        "Rubygem Configuration Pattern",
    ),
    (
        "/blog/2018/02/09/git_data_api_example_in_ruby",
        "/blog/git-data-api-example-in-ruby",
        "Git Data API example in Ruby",
    ),
]


@mark.asyncio
@pytest.mark.parametrize(("old", "new", "title"), LEGACY_POSTS)
async def test_legacy_redirects(client: AsyncClient, old: str, new: str, title: str) -> None:
    response = await client.get(old, follow_redirects=False)

    assert response.status_code == 301
    assert response.headers["location"] == new


@mark.asyncio
@pytest.mark.parametrize(("old", "new", "title"), LEGACY_POSTS)
async def test_legacy_redirect_lands_on_post(
    client: AsyncClient,
    session_scope,
    old: str,
    new: str,
    title: str,
) -> None:
    """Test following a legacy URL serves the migrated post."""
    async with session_scope() as session:
        await PostSynchronizer(session, clock=lambda: SYNCED_AT).sync(
            PostDocument(title=title, date="2015-05-19 00:00:00", body="Body\n"),
        )

    response = await client.get(old, follow_redirects=True)

    assert response.status_code == 200
    assert response.url.path == new
    assert response.json()["title"] == title
