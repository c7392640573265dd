"""Media library tools."""

from __future__ import annotations

from typing import Literal

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..models import MediaMeta, UpdateMediaRequest
from ..utils import handle_api_exception, to_json, tool_annotations


def register_media_tools(mcp):
    """Register media library tools with the MCP server."""

    @mcp.tool(
        name="wp_list_media",
        annotations=tool_annotations("List Media", read_only=True),
    )
    async def wp_list_media(
        per_page: int | None = None,
        page: int | None = None,
        search: str | None = None,
        media_type: Literal["image", "video", "audio", "application"] | None = None,
        mime_type: str | None = None,
        parent: int | None = None,
        ctx: Context = None,
    ) -> str:
        """List items in the media library.

        Args:
            per_page: Number of items per page (max 100).
            page: Page number.
            search: Limit results to those matching a search term.
            media_type: Filter by media type.
            mime_type: Filter by exact MIME type (e.g. 'image/png').
            parent: Only attachments of this post ID.
        """
        params = {
            "per_page": per_page,
            "page": page,
            "search": search,
            "media_type": media_type,
            "mime_type": mime_type,
            "parent": parent,
        }
        try:
            items = await get_client().media.get_media(params)
        except Exception as e:
            return handle_api_exception(e)
        items = items or []
        return to_json({"count": len(items), "media": items})

    @mcp.tool(
        name="wp_get_media",
        annotations=tool_annotations("Get Media Item", read_only=True),
    )
    async def wp_get_media(
        id: int,
        context: Literal["view", "embed", "edit"] = "view",
        ctx: Context = None,
    ) -> str:
        """Retrieve a single media item by ID."""
        try:
            item = await get_client().media.get_media_item(id, context)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(item)

    @mcp.tool(
        name="wp_upload_media",
        annotations=tool_annotations("Upload Media", idempotent=False),
    )
    async def wp_upload_media(
        file_path: str,
        title: str | None = None,
        alt_text: str | None = None,
        caption: str | None = None,
        description: str | None = None,
        post: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Upload a local file to the media library.

        Uploads are sent once and never retried, since the file is streamed.

        Args:
            file_path: Path of the file on the server's filesystem.
            title: Attachment title.
            alt_text: Alternative text for images.
            caption: Attachment caption.
            description: Attachment description.
            post: Attach the file to this post ID.

        Returns:
            str: JSON with the created media item.
        """
        try:
            meta = MediaMeta(
                title=title,
                alt_text=alt_text,
                caption=caption,
                description=description,
                post=post,
            )
            item = await get_client().media.upload_media(file_path, meta)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(item)

    @mcp.tool(
        name="wp_update_media",
        annotations=tool_annotations("Update Media Item"),
    )
    async def wp_update_media(
        id: int,
        title: str | None = None,
        alt_text: str | None = None,
        caption: str | None = None,
        description: str | None = None,
        post: int | None = None,
        ctx: Context = None,
    ) -> str:
        """Update the title, alt text, caption or description of a media item."""
        try:
            data = UpdateMediaRequest(
                id=id,
                title=title,
                alt_text=alt_text,
                caption=caption,
                description=description,
                post=post,
            )
            item = await get_client().media.update_media(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(item)

    @mcp.tool(
        name="wp_delete_media",
        annotations=tool_annotations("Delete Media Item", destructive=True),
    )
    async def wp_delete_media(id: int, force: bool = True, ctx: Context = None) -> str:
        """Permanently delete a media item. WordPress requires force=true for media."""
        try:
            result = await get_client().media.delete_media(id, force)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)
