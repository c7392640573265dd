"""Comment management and moderation tools."""

from __future__ import annotations

from typing import Literal

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..models import CreateCommentRequest, UpdateCommentRequest
from ..utils import handle_api_exception, to_json, tool_annotations

CommentStatusName = Literal["approved", "hold", "spam", "trash"]


def register_comment_tools(mcp):
    """Register comment-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_comments",
        annotations=tool_annotations("List Comments", read_only=True),
    )
    async def wp_list_comments(
        per_page: int | None = None,
        page: int | None = None,
        search: str | None = None,
        post: int | None = None,
        status: Literal["approve", "hold", "spam", "trash", "all"] | None = None,
        ctx: Context = None,
    ) -> str:
        """List comments, optionally for one post or moderation status.

        Args:
            per_page: Number of items per page (max 100).
            page: Page number.
            search: Limit results to those matching a search term.
            post: Only comments on this post ID.
            status: Moderation status filter (needs edit permissions except 'approve').
        """
        params = {
            "per_page": per_page,
            "page": page,
            "search": search,
            "post": post,
            "status": status,
        }
        try:
            comments = await get_client().comments.get_comments(params)
        except Exception as e:
            return handle_api_exception(e)
        comments = comments or []
        return to_json({"count": len(comments), "comments": comments})

    @mcp.tool(
        name="wp_get_comment",
        annotations=tool_annotations("Get Comment", read_only=True),
    )
    async def wp_get_comment(
        id: int,
        context: Literal["view", "embed", "edit"] = "view",
        ctx: Context = None,
    ) -> str:
        """Retrieve a single comment by ID."""
        try:
            comment = await get_client().comments.get_comment(id, context)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(comment)

    @mcp.tool(
        name="wp_create_comment",
        annotations=tool_annotations("Create Comment", idempotent=False),
    )
    async def wp_create_comment(
        post: int,
        content: str,
        parent: int | None = None,
        author_name: str | None = None,
        author_email: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Add a comment to a post.

        Args:
            post: Post ID.
            content: Comment text.
            parent: Parent comment ID when replying.
            author_name: Display name for the comment author.
            author_email: Email of the comment author.
        """
        try:
            data = CreateCommentRequest(
                post=post,
                content=content,
                parent=parent,
                author_name=author_name,
                author_email=author_email,
            )
            comment = await get_client().comments.create_comment(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(comment)

    @mcp.tool(
        name="wp_update_comment",
        annotations=tool_annotations("Update Comment"),
    )
    async def wp_update_comment(
        id: int,
        content: str | None = None,
        status: CommentStatusName | None = None,
        ctx: Context = None,
    ) -> str:
        """Edit a comment's content or moderation status."""
        try:
            data = UpdateCommentRequest(id=id, content=content, status=status)
            comment = await get_client().comments.update_comment(data)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(comment)

    @mcp.tool(
        name="wp_delete_comment",
        annotations=tool_annotations("Delete Comment", destructive=True),
    )
    async def wp_delete_comment(id: int, force: bool = False, ctx: Context = None) -> str:
        """Trash a comment, or delete it permanently with force=true."""
        try:
            result = await get_client().comments.delete_comment(id, force)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)

    @mcp.tool(
        name="wp_approve_comment",
        annotations=tool_annotations("Approve Comment"),
    )
    async def wp_approve_comment(id: int, ctx: Context = None) -> str:
        """Approve a pending comment."""
        try:
            comment = await get_client().comments.approve_comment(id)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(comment)

    @mcp.tool(
        name="wp_spam_comment",
        annotations=tool_annotations("Mark Comment as Spam"),
    )
    async def wp_spam_comment(id: int, ctx: Context = None) -> str:
        """Mark a comment as spam."""
        try:
            comment = await get_client().comments.spam_comment(id)
        except Exception as e:
            return handle_api_exception(e)
        return to_json(comment)
