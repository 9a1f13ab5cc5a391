"""Schema for the static "now" page."""

from datetime import datetime

from pydantic import BaseModel, Field


class NowPage(BaseModel):
    """Contents of the "what I'm doing now" page and its file modification time."""

    body: str = Field(..., description="Page markdown")
    updated_at: datetime = Field(..., description="File modification time (UTC)")
