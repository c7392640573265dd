"""Authentication status tools."""

from __future__ import annotations

from dataclasses import asdict

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..utils import handle_api_exception, to_json, tool_annotations


def register_auth_tools(mcp):
    """Register authentication tools with the MCP server."""

    @mcp.tool(
        name="wp_test_auth",
        annotations=tool_annotations("Test Authentication", read_only=True),
    )
    async def wp_test_auth(ctx: Context = None) -> str:
        """Re-run authentication against the site and report the result."""
        try:
            client = get_client()
            await client.authenticate()
        except Exception as e:
            return handle_api_exception(e)
        return to_json(
            {
                "authenticated": client.is_authenticated,
                "method": client.auth_method,
                "site": client.base_url,
            }
        )

    @mcp.tool(
        name="wp_get_auth_status",
        annotations=tool_annotations("Get Authentication Status", read_only=True),
    )
    async def wp_get_auth_status(ctx: Context = None) -> str:
        """Report the authentication method, state and request statistics."""
        try:
            client = get_client()
        except Exception as e:
            return handle_api_exception(e)
        return to_json(
            {
                "authenticated": client.is_authenticated,
                "method": client.auth_method,
                "site": client.base_url,
                "stats": asdict(client.stats),
            }
        )
