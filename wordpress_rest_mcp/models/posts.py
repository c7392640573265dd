"""Request bodies for posts."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import OpenClosed, PostStatus


class CreatePostRequest(BaseModel):
    """Body for creating a post."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    title: str = Field(..., description="Post title.", min_length=1)
    content: str | None = Field(default=None, description="Post content (HTML).")
    excerpt: str | None = Field(default=None, description="Post excerpt.")
    status: PostStatus = Field(default=PostStatus.DRAFT, description="Post status.")
    slug: str | None = Field(default=None, description="URL slug.", max_length=200)
    author: int | None = Field(default=None, description="Author user ID.", ge=1)
    categories: list[int] | None = Field(default=None, description="Category IDs.")
    tags: list[int] | None = Field(default=None, description="Tag IDs.")
    featured_media: int | None = Field(default=None, description="Featured image ID.", ge=0)
    comment_status: OpenClosed | None = None
    ping_status: OpenClosed | None = None
    format: str | None = Field(default=None, description="Post format (standard, aside, ...).")
    sticky: bool | None = None
    date: str | None = Field(default=None, description="Publish date (ISO 8601).")


class UpdatePostRequest(BaseModel):
    """Body for updating a post. Only ``id`` is required."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Post ID.", ge=1)
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    status: PostStatus | None = None
    slug: str | None = Field(default=None, max_length=200)
    author: int | None = Field(default=None, ge=1)
    categories: list[int] | None = None
    tags: list[int] | None = None
    featured_media: int | None = Field(default=None, ge=0)
    comment_status: OpenClosed | None = None
    ping_status: OpenClosed | None = None
    format: str | None = None
    sticky: bool | None = None
    date: str | None = None
