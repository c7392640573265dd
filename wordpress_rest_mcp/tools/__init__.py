"""MCP tool implementations for the WordPress REST API."""

from .auth import register_auth_tools
from .comments import register_comment_tools
from .media import register_media_tools
from .pages import register_page_tools
from .posts import register_post_tools
from .site import register_site_tools
from .taxonomies import register_taxonomy_tools
from .users import register_user_tools

__all__ = [
    "register_post_tools",
    "register_page_tools",
    "register_media_tools",
    "register_user_tools",
    "register_comment_tools",
    "register_taxonomy_tools",
    "register_site_tools",
    "register_auth_tools",
]


def register_all_tools(mcp):
    """Register all tools with the MCP server."""
    register_post_tools(mcp)
    register_page_tools(mcp)
    register_media_tools(mcp)
    register_user_tools(mcp)
    register_comment_tools(mcp)
    register_taxonomy_tools(mcp)
    register_site_tools(mcp)
    register_auth_tools(mcp)
