"""Category and tag tools."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..models import (
    CreateCategoryRequest,
    CreateTagRequest,
    UpdateCategoryRequest,
    UpdateTagRequest,
)
from ..utils import handle_api_exception, to_json, tool_annotations


def register_taxonomy_tools(mcp):
    """Register category and tag tools with the MCP server."""

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    @mcp.tool(
        name="wp_list_categories",
        annotations=tool_annotations("List Categories", read_only=True),
    )
    async def wp_list_categories(
        per_page: int | None = None,
        search: str | None = None,
        parent: int | None = None,
        hide_empty: bool | None = None,
        ctx: Context = None,
    ) -> str:
        """List categories.

        Args:
            per_page: Number of items per page (max 100).
            search: Limit results to those matching a search term.
            parent: Only children of this category ID.
            hide_empty: Skip categories with no posts.
        """
        params = {
            "per_page": per_page,
            "search": search,
            "parent": parent,
            "hide_empty": hide_empty,
        }
        try:
            categories = await get_client().taxonomies.get_categories(params)
        except Exception as e:
            return handle_api_exception(e)
        categories = categories or []
        return to_json({"count": len(categories), "categories": categories})

    @mcp.tool(
        name="wp_get_category",
        annotations=tool_annotations("Get Category", read_only=True),
    )
    async def wp_get_category(id: int, ctx: Context = None) -> str:
        """Retrieve a single category by ID."""
        try:
            category = await get_client().taxonomies.get_category(id)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(category)

    @mcp.tool(
        name="wp_create_category",
        annotations=tool_annotations("Create Category", idempotent=False),
    )
    async def wp_create_category(
        name: str,
        description: str | None = None,
        slug: str | None = None,
        parent: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Create a category."""
        try:
            data = CreateCategoryRequest(
                name=name, description=description, slug=slug, parent=parent
            )
            category = await get_client().taxonomies.create_category(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(category)

    @mcp.tool(
        name="wp_update_category",
        annotations=tool_annotations("Update Category"),
    )
    async def wp_update_category(
        id: int,
        name: str | None = None,
        description: str | None = None,
        slug: str | None = None,
        parent: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Rename or re-parent a category."""
        try:
            data = UpdateCategoryRequest(
                id=id, name=name, description=description, slug=slug, parent=parent
            )
            category = await get_client().taxonomies.update_category(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(category)

    @mcp.tool(
        name="wp_delete_category",
        annotations=tool_annotations("Delete Category", destructive=True),
    )
    async def wp_delete_category(id: int, ctx: Context = None) -> str:
        """Permanently delete a category. Terms have no trash, so force is always sent."""
        try:
            result = await get_client().taxonomies.delete_category(id, force=True)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    @mcp.tool(
        name="wp_list_tags",
        annotations=tool_annotations("List Tags", read_only=True),
    )
    async def wp_list_tags(
        per_page: int | None = None,
        search: str | None = None,
        hide_empty: bool | None = None,
        ctx: Context = None,
    ) -> str:
        """List tags."""
        params = {"per_page": per_page, "search": search, "hide_empty": hide_empty}
        try:
            tags = await get_client().taxonomies.get_tags(params)
        except Exception as e:
            return handle_api_exception(e)
        tags = tags or []
        return to_json({"count": len(tags), "tags": tags})

    @mcp.tool(
        name="wp_get_tag",
        annotations=tool_annotations("Get Tag", read_only=True),
    )
    async def wp_get_tag(id: int, ctx: Context = None) -> str:
        """Retrieve a single tag by ID."""
        try:
            tag = await get_client().taxonomies.get_tag(id)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(tag)

    @mcp.tool(
        name="wp_create_tag",
        annotations=tool_annotations("Create Tag", idempotent=False),
    )
    async def wp_create_tag(
        name: str,
        description: str | None = None,
        slug: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Create a tag."""
        try:
            data = CreateTagRequest(name=name, description=description, slug=slug)
            tag = await get_client().taxonomies.create_tag(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(tag)

    @mcp.tool(
        name="wp_update_tag",
        annotations=tool_annotations("Update Tag"),
    )
    async def wp_update_tag(
        id: int,
        name: str | None = None,
        description: str | None = None,
        slug: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Rename a tag or change its description or slug."""
        try:
            data = UpdateTagRequest(id=id, name=name, description=description, slug=slug)
            tag = await get_client().taxonomies.update_tag(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(tag)

    @mcp.tool(
        name="wp_delete_tag",
        annotations=tool_annotations("Delete Tag", destructive=True),
    )
    async def wp_delete_tag(id: int, ctx: Context = None) -> str:
        """Permanently delete a tag."""
        try:
            result = await get_client().taxonomies.delete_tag(id, force=True)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)
