"""Request bodies for media items."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MediaMeta(BaseModel):
    """Descriptive fields that can be set on an attachment."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str | None = None
    alt_text: str | None = None
    caption: str | None = None
    description: str | None = None
    post: int | None = Field(default=None, description="Attach to this post ID.", ge=1)


class UpdateMediaRequest(MediaMeta):
    """Body for updating a media item."""

    id: int = Field(..., description="Media ID.", ge=1)
