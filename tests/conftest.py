# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read at import time, so this must happen before blogsite is imported
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

from collections.abc import AsyncGenerator, Callable  # noqa: E402
from contextlib import AbstractAsyncContextManager, asynccontextmanager  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from blogsite.models import PostDB  # noqa: E402, F401

SessionScope = Callable[[], AbstractAsyncContextManager[AsyncSession]]

EXAMPLE_POST = """---
layout: post
title: Example Post
date: 2017-01-01 00:00:00
description: An example
tags: ruby, rails
---

Hello world.
"""


class TickingClock:
    """Clock that moves forward by a fixed step on every call."""

    def __init__(
        self,
        start: datetime = datetime(2017, 1, 2, tzinfo=UTC),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        self.calls += 1
        return current


@pytest.fixture
def example_post() -> str:
    return EXAMPLE_POST


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine shared by every session of a test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def session_scope(session_maker: async_sessionmaker[AsyncSession]) -> SessionScope:
    """Transaction factory equivalent to ``blogsite.db.transaction`` on the test engine."""

    @asynccontextmanager
    async def scope() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return scope


@pytest.fixture
async def session(session_scope: SessionScope) -> AsyncGenerator[AsyncSession]:
    async with session_scope() as session:
        yield session


@pytest.fixture
def write_post(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a post file into a temporary posts directory."""
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()

    def write(name: str, content: str) -> Path:
        path = posts_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return write
