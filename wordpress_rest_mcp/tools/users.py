"""User management tools."""

from __future__ import annotations

from typing import Literal

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..models import CreateUserRequest, UpdateUserRequest
from ..utils import handle_api_exception, to_json, tool_annotations


def register_user_tools(mcp):
    """Register user-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_users",
        annotations=tool_annotations("List Users", read_only=True),
    )
    async def wp_list_users(
        per_page: int | None = None,
        page: int | None = None,
        search: str | None = None,
        roles: list[str] | None = None,
        ctx: Context = None,
    ) -> str:
        """List users, optionally filtered by search term or roles.

        Args:
            per_page: Number of items per page (max 100).
            page: Page number.
            search: Limit results to those matching a search term.
            roles: Only users with at least one of these roles.
        """
        params = {"per_page": per_page, "page": page, "search": search, "roles": roles}
        try:
            users = await get_client().users.get_users(params)
        except Exception as e:
            return handle_api_exception(e)
        users = users or []
        return to_json({"count": len(users), "users": users})

    @mcp.tool(
        name="wp_get_user",
        annotations=tool_annotations("Get User", read_only=True),
    )
    async def wp_get_user(
        id: int,
        context: Literal["view", "embed", "edit"] = "view",
        ctx: Context = None,
    ) -> str:
        """Retrieve a single user by ID."""
        try:
            user = await get_client().users.get_user(id, context)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(user)

    @mcp.tool(
        name="wp_get_current_user",
        annotations=tool_annotations("Get Current User", read_only=True),
    )
    async def wp_get_current_user(ctx: Context = None) -> str:
        """Retrieve the user the server is authenticated as."""
        try:
            user = await get_client().users.get_current_user()
        except Exception as e:
            return handle_api_exception(e)
        return to_json(user)

    @mcp.tool(
        name="wp_create_user",
        annotations=tool_annotations("Create User", idempotent=False),
    )
    async def wp_create_user(
        username: str,
        email: str,
        password: str,
        name: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        roles: list[str] | None = None,
        ctx: Context = None,
    ) -> str:
        """Create a new user account.

        Args:
            username: Login name.
            email: Email address.
            password: Password.
            name: Display name.
            first_name: First name.
            last_name: Last name.
            roles: Roles to assign, e.g. ['editor'].
        """
        try:
            data = CreateUserRequest(
                username=username,
                email=email,
                password=password,
                name=name,
                first_name=first_name,
                last_name=last_name,
                roles=roles,
            )
            user = await get_client().users.create_user(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(user)

    @mcp.tool(
        name="wp_update_user",
        annotations=tool_annotations("Update User"),
    )
    async def wp_update_user(
        id: int,
        email: str | None = None,
        name: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        description: str | None = None,
        roles: list[str] | None = None,
        ctx: Context = None,
    ) -> str:
        """Update fields of an existing user. Omitted fields are left unchanged."""
        try:
            data = UpdateUserRequest(
                id=id,
                email=email,
                name=name,
                first_name=first_name,
                last_name=last_name,
                description=description,
                roles=roles,
            )
            user = await get_client().users.update_user(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(user)

    @mcp.tool(
        name="wp_delete_user",
        annotations=tool_annotations("Delete User", destructive=True),
    )
    async def wp_delete_user(
        id: int,
        reassign: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Permanently delete a user.

        Args:
            id: User ID.
            reassign: Give the deleted user's posts to this user ID.
        """
        try:
            result = await get_client().users.delete_user(id, reassign)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)
