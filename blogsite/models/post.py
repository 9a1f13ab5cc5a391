"""Post database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast

from pydantic import ConfigDict
from sqlalchemy import JSON, DateTime, Index, Text
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String

from blogsite.configs.settings import (
    MAX_DESCRIPTION_LENGTH,
    MAX_SLUG_LENGTH,
    MAX_TITLE_LENGTH,
)


class PostDB(SQLModel, table=True):
    """
    Post database model.

    A post is identified by its title: ingesting a post file whose title is
    already stored updates that row instead of inserting a new one.
    ``updated_at`` changes on every synchronization and feeds the CDN
    surrogate key of the post.
    """

    __tablename__ = cast("declared_attr[str]", "posts")

    __table_args__ = (Index("ix_posts_created_at", "created_at"),)

    # Primary key
    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Post ID",
    )

    # Required fields
    title: str = Field(
        sa_column=Column(String(MAX_TITLE_LENGTH), unique=True, nullable=False, index=True),
        description="Post title (unique)",
    )
    slug: str = Field(
        sa_column=Column(String(MAX_SLUG_LENGTH), unique=True, nullable=False, index=True),
        description="URL-friendly slug (unique)",
    )
    body: str = Field(
        default="\n",
        sa_column=Column(Text, nullable=False),
        description="Post body (markdown)",
    )

    # Optional fields
    description: str = Field(
        default="",
        sa_column=Column(String(MAX_DESCRIPTION_LENGTH), nullable=False),
        description="Post description",
    )

    # Stored as a JSON array to work on both SQLite and PostgreSQL
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Post tags in header order",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Publication timestamp taken from the post header",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last synchronization timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 42,
                "title": "Example Post",
                "slug": "example-post",
                "description": "An example",
                "tags": ["ruby", "rails"],
                "body": "Hello world.\n",
                "created_at": "2017-01-01T00:00:00Z",
                "updated_at": "2017-01-02T00:00:00Z",
            },
        },
    )
