"""Request bodies for comments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .base import CommentStatus


class CreateCommentRequest(BaseModel):
    """Body for creating a comment."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    post: int = Field(..., description="Post ID the comment belongs to.", ge=1)
    content: str = Field(..., description="Comment content.", min_length=1)
    parent: int | None = Field(default=None, description="Parent comment ID.", ge=0)
    author: int | None = Field(default=None, description="Author user ID.", ge=1)
    author_name: str | None = None
    author_email: str | None = None
    status: CommentStatus | None = None


class UpdateCommentRequest(BaseModel):
    """Body for updating a comment. Only ``id`` is required."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    id: int = Field(..., description="Comment ID.", ge=1)
    content: str | None = None
    status: CommentStatus | None = None
    author_name: str | None = None
    author_email: str | None = None
