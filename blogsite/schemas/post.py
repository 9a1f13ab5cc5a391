"""
Post schemas.

``PostDocument`` is the typed form of a post file (header fields plus body)
as produced by the parser. The response models describe what the read-only
blog endpoints return.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogsite.utils.timezone import as_utc


class PostDocument(BaseModel):
    """Structured contents of a post file."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Post title, used as the upsert key")
    date: str = Field(..., description="Raw value of the date header", examples=["2017-01-01 00:00:00"])
    description: str = Field(default="", description="Post description")
    tags: list[str] = Field(default_factory=list, description="Tags in header order")
    body: str = Field(default="\n", description="Everything after the header block")
    layout: str | None = Field(default=None, description="Layout marker of the file")
    extra: dict[str, str] = Field(
        default_factory=dict,
        description="Header keys without a dedicated field, in file order",
    )


class PostListResponse(BaseModel):
    """Post summary as shown on list pages."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_utc(cls, value: datetime | None) -> datetime | None:
        """Attach UTC to timestamps read back naive from SQLite."""
        return as_utc(value) if value is not None else None


class PostResponse(PostListResponse):
    """Full post including its body."""

    body: str


class TagResponse(BaseModel):
    """Tag with the number of posts carrying it."""

    name: str
    count: int
