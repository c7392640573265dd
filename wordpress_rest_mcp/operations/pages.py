"""Page operations."""

from __future__ import annotations

from typing import Any

from ..models import Context, CreatePageRequest, UpdatePageRequest
from ..utils import build_query, dump_body
from .base import ResourceOperations, split_id


class PagesOperations(ResourceOperations):
    """CRUD for ``/wp/v2/pages``."""

    async def get_pages(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._client.get(f"pages{build_query(params)}")

    async def get_page(self, page_id: int, context: Context = "view") -> dict[str, Any]:
        return await self._client.get(f"pages/{page_id}?context={context}")

    async def create_page(self, data: CreatePageRequest | dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("pages", dump_body(data))

    async def update_page(self, data: UpdatePageRequest | dict[str, Any]) -> dict[str, Any]:
        page_id, body = split_id(data, "Page")
        return await self._client.put(f"pages/{page_id}", body)

    async def delete_page(self, page_id: int, force: bool = False) -> dict[str, Any]:
        return await self._client.delete(f"pages/{page_id}{build_query({'force': force})}")

    async def get_page_revisions(self, page_id: int) -> list[dict[str, Any]]:
        return await self._client.get(f"pages/{page_id}/revisions")
