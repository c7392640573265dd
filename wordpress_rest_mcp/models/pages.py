"""Request bodies for pages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import OpenClosed, PostStatus


class CreatePageRequest(BaseModel):
    """Body for creating a page."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Page title.", min_length=1)
    content: str | None = Field(default=None, description="Page content (HTML).")
    excerpt: str | None = None
    status: PostStatus = Field(default=PostStatus.DRAFT, description="Page status.")
    slug: str | None = Field(default=None, max_length=200)
    parent: int | None = Field(default=None, description="Parent page ID.", ge=0)
    menu_order: int | None = None
    template: str | None = Field(default=None, description="Theme template file.")
    author: int | None = Field(default=None, ge=1)
    featured_media: int | None = Field(default=None, ge=0)
    comment_status: OpenClosed | None = None


class UpdatePageRequest(BaseModel):
    """Body for updating a page. Only ``id`` is required."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Page ID.", ge=1)
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    status: PostStatus | None = None
    slug: str | None = Field(default=None, max_length=200)
    parent: int | None = Field(default=None, ge=0)
    menu_order: int | None = None
    template: str | None = None
    author: int | None = Field(default=None, ge=1)
    featured_media: int | None = Field(default=None, ge=0)
    comment_status: OpenClosed | None = None
