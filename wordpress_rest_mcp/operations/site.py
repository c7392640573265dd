"""Site-wide operations: settings, search, application passwords, discovery."""

from __future__ import annotations

from typing import Any

from ..config import logger
from ..errors import WordPressError
from ..utils import build_query
from .base import ResourceOperations


class SiteOperations(ResourceOperations):
    """Settings and site discovery endpoints."""

    async def get_site_settings(self) -> dict[str, Any]:
        return await self._client.get("settings")

    async def update_site_settings(self, settings: dict[str, Any]) -> dict[str, Any]:
        return await self._client.post("settings", settings)

    async def get_site_info(self) -> dict[str, Any]:
        """Fetch the REST index at ``<site>/wp-json`` (name, description, namespaces)."""
        return await self._client.get(f"{self._client.base_url}/wp-json")

    async def search(
        self, query: str, types: list[str] | None = None, subtype: str | None = None
    ) -> list[dict[str, Any]]:
        params = {"search": query, "type": types, "subtype": subtype}
        return await self._client.get(f"search{build_query(params)}")

    async def get_application_passwords(self, user_id: int | str = "me") -> list[dict[str, Any]]:
        return await self._client.get(f"users/{user_id}/application-passwords")

    async def create_application_password(
        self, user_id: int | str, name: str, app_id: str | None = None
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"name": name}
        if app_id:
            body["app_id"] = app_id
        return await self._client.post(f"users/{user_id}/application-passwords", body)

    async def delete_application_password(self, user_id: int | str, uuid: str) -> dict[str, Any]:
        return await self._client.delete(f"users/{user_id}/application-passwords/{uuid}")

    async def ping(self) -> bool:
        """True if the REST index answers."""
        try:
            await self.get_site_info()
        except WordPressError as e:
            logger.debug("Ping failed: %s", e)
            return False
        return True

    async def get_server_info(self) -> dict[str, Any]:
        """Summarize the REST index: site identity plus available namespaces."""
        info = await self.get_site_info()
        if not isinstance(info, dict):
            return {"raw": info}
        return {
            "name": info.get("name"),
            "description": info.get("description"),
            "url": info.get("url"),
            "home": info.get("home"),
            "gmt_offset": info.get("gmt_offset"),
            "timezone_string": info.get("timezone_string"),
            "namespaces": info.get("namespaces", []),
            "authentication": list((info.get("authentication") or {}).keys()),
            "route_count": len(info.get("routes") or {}),
        }
