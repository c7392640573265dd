"""Post operations, including custom post types."""

from __future__ import annotations

from typing import Any

from ..models import Context, CreatePostRequest, UpdatePostRequest
from ..utils import build_query, dump_body
from .base import ResourceOperations, split_id


class PostsOperations(ResourceOperations):
    """CRUD for ``/wp/v2/posts`` or any custom post type's REST base."""

    async def get_posts(
        self, params: dict[str, Any] | None = None, post_type: str = "posts"
    ) -> list[dict[str, Any]]:
        return await self._client.get(f"{post_type}{build_query(params)}")

    async def get_post(
        self, post_id: int, context: Context = "view", post_type: str = "posts"
    ) -> dict[str, Any]:
        return await self._client.get(f"{post_type}/{post_id}?context={context}")

    async def create_post(
        self, data: CreatePostRequest | dict[str, Any], post_type: str = "posts"
    ) -> dict[str, Any]:
        return await self._client.post(post_type, dump_body(data))

    async def update_post(
        self, data: UpdatePostRequest | dict[str, Any], post_type: str = "posts"
    ) -> dict[str, Any]:
        post_id, body = split_id(data, "Post")
        return await self._client.put(f"{post_type}/{post_id}", body)

    async def delete_post(
        self, post_id: int, force: bool = False, post_type: str = "posts"
    ) -> dict[str, Any]:
        """Trash a post, or delete it permanently with ``force``."""
        return await self._client.delete(f"{post_type}/{post_id}{build_query({'force': force})}")

    async def get_post_revisions(
        self, post_id: int, post_type: str = "posts"
    ) -> list[dict[str, Any]]:
        return await self._client.get(f"{post_type}/{post_id}/revisions")
