"""WordPress client lifecycle for the MCP server."""

from __future__ import annotations

from contextlib import asynccontextmanager

from .client import WordPressClient
from .config import logger
from .errors import WordPressError

# Global state (set during lifespan)
_client: WordPressClient | None = None


def get_client() -> WordPressClient:
    """Get the WordPress client, raising if not initialized.

    Raises:
        RuntimeError: If the server is not yet initialized (client is None).
    """
    if _client is None:
        raise RuntimeError(
            "WordPress client not initialized. Server may still be starting up."
        )
    return _client


@asynccontextmanager
async def app_lifespan(app):
    """Create, authenticate and tear down the WordPress client.

    Args:
        app: The FastMCP application instance (required by lifespan protocol).
    """
    global _client

    try:
        _client = WordPressClient()
        await _client.initialize()
        logger.info(
            "Connected to %s using %s authentication",
            _client.base_url,
            _client.auth_method,
        )
        yield {"client": _client}
    except WordPressError as e:
        logger.error("Failed to authenticate with WordPress: %s", e)
        raise RuntimeError(f"WordPress authentication failed: {e}") from e
    except Exception as e:
        logger.error("Failed to initialize MCP server: %s", e)
        raise
    finally:
        if _client is not None:
            await _client.aclose()
            _client = None
            logger.info("WordPress client closed")
