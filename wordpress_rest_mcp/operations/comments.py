"""Comment operations and moderation shortcuts."""

from __future__ import annotations

from typing import Any

from ..models import CommentStatus, Context, CreateCommentRequest, UpdateCommentRequest
from ..utils import build_query, dump_body
from .base import ResourceOperations, split_id


class CommentsOperations(ResourceOperations):
    """CRUD for ``/wp/v2/comments``."""

    async def get_comments(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._client.get(f"comments{build_query(params)}")

    async def get_comment(self, comment_id: int, context: Context = "view") -> dict[str, Any]:
        return await self._client.get(f"comments/{comment_id}?context={context}")

    async def create_comment(self, data: CreateCommentRequest | dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("comments", dump_body(data))

    async def update_comment(self, data: UpdateCommentRequest | dict[str, Any]) -> dict[str, Any]:
        comment_id, body = split_id(data, "Comment")
        return await self._client.put(f"comments/{comment_id}", body)

    async def delete_comment(self, comment_id: int, force: bool = False) -> dict[str, Any]:
        return await self._client.delete(f"comments/{comment_id}{build_query({'force': force})}")

    async def approve_comment(self, comment_id: int) -> dict[str, Any]:
        return await self._set_status(comment_id, CommentStatus.APPROVED)

    async def reject_comment(self, comment_id: int) -> dict[str, Any]:
        return await self._set_status(comment_id, CommentStatus.HOLD)

    async def spam_comment(self, comment_id: int) -> dict[str, Any]:
        return await self._set_status(comment_id, CommentStatus.SPAM)

    async def _set_status(self, comment_id: int, status: CommentStatus) -> dict[str, Any]:
        return await self._client.put(f"comments/{comment_id}", {"status": status.value})
