"""Post management tools, including custom post types."""

from __future__ import annotations

from typing import Literal

from mcp.server.fastmcp import Context

from ..connection import get_client
from ..models import CreatePostRequest, UpdatePostRequest
from ..utils import handle_api_exception, to_json, tool_annotations

PostStatusName = Literal["publish", "future", "draft", "pending", "private"]


def register_post_tools(mcp):
    """Register post-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_posts",
        annotations=tool_annotations("List Posts", read_only=True),
    )
    async def wp_list_posts(
        per_page: int | None = None,
        page: int | None = None,
        search: str | None = None,
        status: PostStatusName | list[PostStatusName] | None = None,
        categories: list[int] | None = None,
        tags: list[int] | None = None,
        orderby: str | None = None,
        order: Literal["asc", "desc"] | None = None,
        offset: int | None = None,
        post_type: str | None = None,
        ctx: Context = None,
    ) -> str:
        """List posts with filtering by search term, status, categories and tags.

        Args:
            per_page: Number of items per page (max 100).
            page: Page number.
            search: Limit results to those matching a search term.
            status: Post status, or a list of statuses.
            categories: Limit to posts in these category IDs.
            tags: Limit to posts with these tag IDs.
            orderby: Sort field (date, title, id, ...).
            order: Sort direction - asc or desc.
            offset: Number of items to skip.
            post_type: REST base of a custom post type (default 'posts').

        Returns:
            str: JSON with the matching posts.
        """
        params = {
            "per_page": per_page,
            "page": page,
            "search": search,
            "status": [status] if isinstance(status, str) else status,
            "categories": categories,
            "tags": tags,
            "orderby": orderby,
            "order": order,
            "offset": offset,
        }
        try:
            posts = await get_client().posts.get_posts(params, post_type or "posts")
        except Exception as e:
            return handle_api_exception(e)

        posts = posts or []
        return to_json({"post_type": post_type or "posts", "count": len(posts), "posts": posts})

    @mcp.tool(
        name="wp_get_post",
        annotations=tool_annotations("Get Post", read_only=True),
    )
    async def wp_get_post(
        id: int,
        context: Literal["view", "embed", "edit"] = "view",
        post_type: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Retrieve a single post by ID.

        Args:
            id: Post ID.
            context: Response context - use 'edit' for raw content.
            post_type: REST base of a custom post type (default 'posts').
        """
        try:
            post = await get_client().posts.get_post(id, context, post_type or "posts")
        except Exception as e:
            return handle_api_exception(e)
        return to_json(post)

    @mcp.tool(
        name="wp_create_post",
        annotations=tool_annotations("Create Post", idempotent=False),
    )
    async def wp_create_post(
        title: str,
        content: str | None = None,
        excerpt: str | None = None,
        status: PostStatusName = "draft",
        slug: str | None = None,
        author: int | None = None,
        categories: list[int] | None = None,
        tags: list[int] | None = None,
        featured_media: int | None = None,
        date: str | None = None,
        post_type: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Create a new post.

        Args:
            title: Post title.
            content: Post content (HTML).
            excerpt: Post excerpt.
            status: Post status (default draft).
            slug: URL slug.
            author: Author user ID.
            categories: Category IDs.
            tags: Tag IDs.
            featured_media: Featured image media ID.
            date: Publish date (ISO 8601), for scheduled posts.
            post_type: REST base of a custom post type (default 'posts').

        Returns:
            str: JSON with the created post.
        """
        try:
            data = CreatePostRequest(
                title=title,
                content=content,
                excerpt=excerpt,
                status=status,
                slug=slug,
                author=author,
                categories=categories,
                tags=tags,
                featured_media=featured_media,
                date=date,
            )
            post = await get_client().posts.create_post(data, post_type or "posts")
        except Exception as e:
            return handle_api_exception(e)
        return to_json(post)

    @mcp.tool(
        name="wp_update_post",
        annotations=tool_annotations("Update Post"),
    )
    async def wp_update_post(
        id: int,
        title: str | None = None,
        content: str | None = None,
        excerpt: str | None = None,
        status: PostStatusName | None = None,
        slug: str | None = None,
        author: int | None = None,
        categories: list[int] | None = None,
        tags: list[int] | None = None,
        featured_media: int | None = None,
        date: str | None = None,
        post_type: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Update fields of an existing post. Omitted fields are left unchanged.

        Args:
            id: Post ID.
            title: New title.
            content: New content (HTML).
            excerpt: New excerpt.
            status: New status.
            slug: New URL slug.
            author: New author user ID.
            categories: Replacement category IDs.
            tags: Replacement tag IDs.
            featured_media: Featured image media ID.
            date: Publish date (ISO 8601).
            post_type: REST base of a custom post type (default 'posts').
        """
        try:
            data = UpdatePostRequest(
                id=id,
                title=title,
                content=content,
                excerpt=excerpt,
                status=status,
                slug=slug,
                author=author,
                categories=categories,
                tags=tags,
                featured_media=featured_media,
                date=date,
            )
            post = await get_client().posts.update_post(data, post_type or "posts")
        except Exception as e:
            return handle_api_exception(e)
        return to_json(post)

    @mcp.tool(
        name="wp_delete_post",
        annotations=tool_annotations("Delete Post", destructive=True),
    )
    async def wp_delete_post(
        id: int,
        force: bool = False,
        post_type: str | None = None,
        ctx: Context = None,
    ) -> str:
        """Move a post to the trash, or delete it permanently with force=true.

        Args:
            id: Post ID.
            force: Bypass the trash and delete permanently.
            post_type: REST base of a custom post type (default 'posts').
        """
        try:
            result = await get_client().posts.delete_post(id, force, post_type or "posts")
        except Exception as e:
            return handle_api_exception(e)
        return to_json(result)

    @mcp.tool(
        name="wp_get_post_revisions",
        annotations=tool_annotations("Get Post Revisions", read_only=True),
    )
    async def wp_get_post_revisions(
        id: int,
        post_type: str | None = None,
        ctx: Context = None,
    ) -> str:
        """List the revision history of a post.

        Args:
            id: Post ID.
            post_type: REST base of a custom post type (default 'posts').
        """
        try:
            revisions = await get_client().posts.get_post_revisions(id, post_type or "posts")
        except Exception as e:
            return handle_api_exception(e)
        revisions = revisions or []
        return to_json({"post_id": id, "count": len(revisions), "revisions": revisions})
