"""Site settings, search and application password tools."""

from __future__ import annotations

from typing import Any, Literal

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..utils import error_response, handle_api_exception, to_json, tool_annotations


def register_site_tools(mcp):
    """Register site-wide tools with the MCP server."""

    @mcp.tool(
        name="wp_get_site_settings",
        annotations=tool_annotations("Get Site Settings", read_only=True),
    )
    async def wp_get_site_settings(ctx: Context = None) -> str:
        """Retrieve general site settings (title, tagline, timezone, ...)."""
        try:
            settings = await get_client().site.get_site_settings()
        except Exception as e:
            return handle_api_exception(e)
        return to_json(settings)

    @mcp.tool(
        name="wp_update_site_settings",
        annotations=tool_annotations("Update Site Settings"),
    )
    async def wp_update_site_settings(
        title: str | None = None,
        description: str | None = None,
        timezone: str | None = None,
        date_format: str | None = None,
        time_format: str | None = None,
        posts_per_page: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Update general site settings. Omitted settings are left unchanged.

        Args:
            title: Site title.
            description: Site tagline.
            timezone: Timezone string, e.g. 'Europe/Lisbon'.
            date_format: PHP date format.
            time_format: PHP time format.
            posts_per_page: Blog pages show at most this many posts.
        """
        settings: dict[str, Any] = {
            "title": title,
            "description": description,
            "timezone": timezone,
            "date_format": date_format,
            "time_format": time_format,
            "posts_per_page": posts_per_page,
        }
        settings = {k: v for k, v in settings.items() if v is not None}
        if not settings:
            return error_response("No settings provided to update.", "validation_error")

        try:
            result = await get_client().site.update_site_settings(settings)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)

    @mcp.tool(
        name="wp_search_site",
        annotations=tool_annotations("Search Site", read_only=True),
    )
    async def wp_search_site(
        term: str,
        type: Literal["post", "term", "post-format"] | None = None,
        subtype: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Search across posts, pages and terms.

        Args:
            term: Search term.
            type: Object type to search.
            subtype: Subtype to narrow to, e.g. 'page' or 'category'.
        """
        try:
            results = await get_client().site.search(
                term, [type] if type else None, subtype
            )
        except Exception as e:
            return handle_api_exception(e)
        results = results or []
        return to_json({"search": term, "count": len(results), "results": results})

    @mcp.tool(
        name="wp_get_application_passwords",
        annotations=tool_annotations("List Application Passwords", read_only=True),
    )
    async def wp_get_application_passwords(
        user_id: int | None = None,
        ctx: Context = None,
    ) -> str:
        """List application passwords for a user (default: the current user)."""
        try:
            passwords = await get_client().site.get_application_passwords(user_id or "me")
        except Exception as e:
            return handle_api_exception(e)
        return to_json(passwords)

    @mcp.tool(
        name="wp_create_application_password",
        annotations=tool_annotations("Create Application Password", idempotent=False),
    )
    async def wp_create_application_password(
        name: str,
        user_id: int | None = None,
        app_id: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Create an application password. The secret is only shown once.

        Args:
            name: Label for the password.
            user_id: Owner user ID (default: the current user).
            app_id: Optional UUID identifying the application.
        """
        try:
            result = await get_client().site.create_application_password(
                user_id or "me", name, app_id
            )
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)

    @mcp.tool(
        name="wp_delete_application_password",
        annotations=tool_annotations("Revoke Application Password", destructive=True),
    )
    async def wp_delete_application_password(
        uuid: str,
        user_id: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Revoke an application password by UUID."""
        try:
            result = await get_client().site.delete_application_password(
                user_id or "me", uuid
            )
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)
