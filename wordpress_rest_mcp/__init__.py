"""WordPress REST MCP Server.

An MCP server exposing the WordPress REST API (posts, pages, media, users,
comments, taxonomies and site settings) as tools, backed by an async client
with pluggable authentication, rate limiting and retries.
"""

from .client import ClientConfig, ClientStats, WordPressClient
from .errors import (
    AuthenticationError,
    RateLimitError,
    WordPressAPIError,
    WordPressError,
)
from .options import RequestOptions
from .server import main, mcp

__all__ = [
    "mcp",
    "main",
    "WordPressClient",
    "ClientConfig",
    "ClientStats",
    "RequestOptions",
    "WordPressError",
    "WordPressAPIError",
    "AuthenticationError",
    "RateLimitError",
]
__version__ = "1.0.0"
