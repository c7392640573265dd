"""Base types and enums for WordPress request models."""

from __future__ import annotations

from enum import Enum
from typing import Literal


class PostStatus(str, Enum):
    """Publication status of a post or page."""

    PUBLISH = "publish"
    FUTURE = "future"
    DRAFT = "draft"
    PENDING = "pending"
    PRIVATE = "private"


class CommentStatus(str, Enum):
    """Moderation status of a comment."""

    APPROVED = "approved"
    HOLD = "hold"
    SPAM = "spam"
    TRASH = "trash"


Context = Literal["view", "embed", "edit"]
Order = Literal["asc", "desc"]
OpenClosed = Literal["open", "closed"]
