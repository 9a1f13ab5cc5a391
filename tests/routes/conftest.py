# tests/routes/conftest.py
"""Pytest fixtures for route tests."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from blogsite.db import get_session
from blogsite.main import app
from blogsite.models import PostDB
from blogsite.schemas import PostDocument
from blogsite.services.synchronizer import PostSynchronizer

SYNCED_AT = datetime(2017, 3, 1, tzinfo=UTC)


@pytest.fixture
async def client(session_scope) -> AsyncGenerator[AsyncClient]:
    """Async client whose requests run against the in-memory test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_scope() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def posts(session_scope) -> list[PostDB]:
    """Two synchronized posts, returned oldest first."""
    documents = [
        PostDocument(
            title="Example Post",
            date="2017-01-01 00:00:00",
            description="An example",
            tags=["ruby", "rails"],
            body="Hello world.\n",
        ),
        PostDocument(
            title="Second Post",
            date="2017-02-01 00:00:00",
            tags=["ruby"],
            body="Second body.\n",
        ),
    ]
    stored = []
    async with session_scope() as session:
        synchronizer = PostSynchronizer(session, clock=lambda: SYNCED_AT)
        for document in documents:
            stored.append(await synchronizer.sync(document))
    return stored
