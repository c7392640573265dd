"""User operations."""

from __future__ import annotations

from typing import Any

from ..models import Context, CreateUserRequest, UpdateUserRequest
from ..utils import build_query, dump_body
from .base import ResourceOperations, split_id


class UsersOperations(ResourceOperations):
    """CRUD for ``/wp/v2/users``."""

    async def get_users(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._client.get(f"users{build_query(params)}")

    async def get_user(self, user_id: int | str, context: Context = "view") -> dict[str, Any]:
        return await self._client.get(f"users/{user_id}?context={context}")

    async def get_current_user(self) -> dict[str, Any]:
        return await self._client.get("users/me")

    async def create_user(self, data: CreateUserRequest | dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("users", dump_body(data))

    async def update_user(self, data: UpdateUserRequest | dict[str, Any]) -> dict[str, Any]:
        user_id, body = split_id(data, "User")
        return await self._client.put(f"users/{user_id}", body)

    async def delete_user(self, user_id: int, reassign: int | None = None) -> dict[str, Any]:
        """Delete a user permanently, optionally handing their content to ``reassign``.

        Users cannot be trashed, so ``force`` is always sent.
        """
        query = build_query({"force": True, "reassign": reassign})
        return await self._client.delete(f"users/{user_id}{query}")
