"""Page management tools."""

from __future__ import annotations

from typing import Literal

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..models import CreatePageRequest, UpdatePageRequest
from ..utils import handle_api_exception, to_json, tool_annotations

PageStatusName = Literal["publish", "future", "draft", "pending", "private"]


def register_page_tools(mcp):
    """Register page-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_pages",
        annotations=tool_annotations("List Pages", read_only=True),
    )
    async def wp_list_pages(
        per_page: int | None = None,
        page: int | None = None,
        search: str | None = None,
        status: PageStatusName | None = None,
        parent: int | None = None,
        orderby: str | None = None,
        order: Literal["asc", "desc"] | None = None,
        ctx: Context = None,
    ) -> str:
        """List pages, optionally filtered by search term, status or parent.

        Args:
            per_page: Number of items per page (max 100).
            page: Page number of the result set.
            search: Limit results to those matching a search term.
            status: Page status.
            parent: Only children of this page ID.
            orderby: Sort field (date, title, menu_order, ...).
            order: Sort direction - asc or desc.
        """
        params = {
            "per_page": per_page,
            "page": page,
            "search": search,
            "status": status,
            "parent": parent,
            "orderby": orderby,
            "order": order,
        }
        try:
            pages = await get_client().pages.get_pages(params)
        except Exception as e:
            return handle_api_exception(e)
        pages = pages or []
        return to_json({"count": len(pages), "pages": pages})

    @mcp.tool(
        name="wp_get_page",
        annotations=tool_annotations("Get Page", read_only=True),
    )
    async def wp_get_page(
        id: int,
        context: Literal["view", "embed", "edit"] = "view",
        ctx: Context = None,
    ) -> str:
        """Retrieve a single page by ID."""
        try:
            page = await get_client().pages.get_page(id, context)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(page)

    @mcp.tool(
        name="wp_create_page",
        annotations=tool_annotations("Create Page", idempotent=False),
    )
    async def wp_create_page(
        title: str,
        content: str | None = None,
        excerpt: str | None = None,
        status: PageStatusName = "draft",
        slug: str | None = None,
        parent: int | None = None,
        menu_order: int | None = None,
        template: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Create a new page.

        Args:
            title: Page title.
            content: Page content (HTML).
            excerpt: Page excerpt.
            status: Page status (default draft).
            slug: URL slug.
            parent: Parent page ID.
            menu_order: Order within menus.
            template: Theme template file.
        """
        try:
            data = CreatePageRequest(
                title=title,
                content=content,
                excerpt=excerpt,
                status=status,
                slug=slug,
                parent=parent,
                menu_order=menu_order,
                template=template,
            )
            page = await get_client().pages.create_page(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(page)

    @mcp.tool(
        name="wp_update_page",
        annotations=tool_annotations("Update Page"),
    )
    async def wp_update_page(
        id: int,
        title: str | None = None,
        content: str | None = None,
        excerpt: str | None = None,
        status: PageStatusName | None = None,
        slug: str | None = None,
        parent: int | None = None,
        menu_order: int | None = None,
        template: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Update fields of an existing page. Omitted fields are left unchanged."""
        try:
            data = UpdatePageRequest(
                id=id,
                title=title,
                content=content,
                excerpt=excerpt,
                status=status,
                slug=slug,
                parent=parent,
                menu_order=menu_order,
                template=template,
            )
            page = await get_client().pages.update_page(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(page)

    @mcp.tool(
        name="wp_delete_page",
        annotations=tool_annotations("Delete Page", destructive=True),
    )
    async def wp_delete_page(id: int, force: bool = False, ctx: Context = None) -> str:
        """Move a page to the trash, or delete it permanently with force=true."""
        try:
            result = await get_client().pages.delete_page(id, force)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)

    @mcp.tool(
        name="wp_get_page_revisions",
        annotations=tool_annotations("Get Page Revisions", read_only=True),
    )
    async def wp_get_page_revisions(id: int, ctx: Context = None) -> str:
        """List the revision history of a page."""
        try:
            revisions = await get_client().pages.get_page_revisions(id)
        except Exception as e:
            return handle_api_exception(e)
        revisions = revisions or []
        return to_json({"page_id": id, "count": len(revisions), "revisions": revisions})
