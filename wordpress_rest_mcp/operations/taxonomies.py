"""Category and tag operations."""

from __future__ import annotations

from typing import Any

from ..models import (
    CreateCategoryRequest,
    CreateTagRequest,
    UpdateCategoryRequest,
    UpdateTagRequest,
)
from ..utils import build_query, dump_body
from .base import ResourceOperations, split_id


class TaxonomiesOperations(ResourceOperations):
    """CRUD for ``/wp/v2/categories`` and ``/wp/v2/tags``."""

    # Categories

    async def get_categories(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._client.get(f"categories{build_query(params)}")

    async def get_category(self, category_id: int) -> dict[str, Any]:
        return await self._client.get(f"categories/{category_id}")

    async def create_category(self, data: CreateCategoryRequest | dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("categories", dump_body(data))

    async def update_category(self, data: UpdateCategoryRequest | dict[str, Any]) -> dict[str, Any]:
        category_id, body = split_id(data, "Category")
        return await self._client.put(f"categories/{category_id}", body)

    async def delete_category(self, category_id: int, force: bool = False) -> dict[str, Any]:
        return await self._client.delete(f"categories/{category_id}{build_query({'force': force})}")

    # Tags

    async def get_tags(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._client.get(f"tags{build_query(params)}")

    async def get_tag(self, tag_id: int) -> dict[str, Any]:
        return await self._client.get(f"tags/{tag_id}")

    async def create_tag(self, data: CreateTagRequest | dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("tags", dump_body(data))

    async def update_tag(self, data: UpdateTagRequest | dict[str, Any]) -> dict[str, Any]:
        tag_id, body = split_id(data, "Tag")
        return await self._client.put(f"tags/{tag_id}", body)

    async def delete_tag(self, tag_id: int, force: bool = False) -> dict[str, Any]:
        return await self._client.delete(f"tags/{tag_id}{build_query({'force': force})}")
