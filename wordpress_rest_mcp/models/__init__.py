"""Pydantic request models for WordPress REST resources."""

from .base import CommentStatus, Context, OpenClosed, Order, PostStatus
from .comments import CreateCommentRequest, UpdateCommentRequest
from .media import MediaMeta, UpdateMediaRequest
from .pages import CreatePageRequest, UpdatePageRequest
from .posts import CreatePostRequest, UpdatePostRequest
from .taxonomies import (
    CreateCategoryRequest,
    CreateTagRequest,
    UpdateCategoryRequest,
    UpdateTagRequest,
)
from .users import CreateUserRequest, UpdateUserRequest

__all__ = [
    # Base
    "PostStatus",
    "CommentStatus",
    "Context",
    "Order",
    "OpenClosed",
    # Posts & Pages
    "CreatePostRequest",
    "UpdatePostRequest",
    "CreatePageRequest",
    "UpdatePageRequest",
    # Media
    "MediaMeta",
    "UpdateMediaRequest",
    # Users
    "CreateUserRequest",
    "UpdateUserRequest",
    # Comments
    "CreateCommentRequest",
    "UpdateCommentRequest",
    # Taxonomies
    "CreateCategoryRequest",
    "UpdateCategoryRequest",
    "CreateTagRequest",
    "UpdateTagRequest",
]
