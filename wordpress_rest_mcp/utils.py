"""Utility functions for query strings, serialization and tool responses."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlencode

from pydantic import ValidationError

from .config import logger
from .errors import (
    AuthenticationError,
    ConnectionLostError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    WordPressAPIError,
)


def serialize(value: Any) -> Any:
    """Make query parameter values WordPress-friendly."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(serialize(v)) for v in value)
    if hasattr(value, "value"):  # Enum
        return value.value
    return value


def build_query(params: dict[str, Any] | None) -> str:
    """Encode params as a query string, dropping None values.

    Returns:
        The encoded string with a leading '?', or '' when nothing remains.
    """
    if not params:
        return ""
    cleaned = {k: serialize(v) for k, v in params.items() if v is not None}
    if not cleaned:
        return ""
    return "?" + urlencode(cleaned)


def dump_body(data: Any) -> dict[str, Any]:
    """Turn a pydantic model or dict into a request body without None values."""
    if hasattr(data, "model_dump"):
        return data.model_dump(exclude_none=True, mode="json")
    return {k: v for k, v in dict(data).items() if v is not None}


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)


def error_response(message: str, code: str = "error") -> str:
    """Create a consistent JSON error response.

    Args:
        message: Human-readable error description.
        code: Error code for programmatic handling.

    Returns:
        JSON string with error details.
    """
    return json.dumps({"error": message, "code": code})


def handle_api_exception(e: Exception) -> str:
    """Handle client exceptions with specific error codes.

    Logs detailed error information while returning sanitized messages to users.

    Args:
        e: The exception to handle.

    Returns:
        JSON error response string.
    """
    if isinstance(e, RateLimitError):
        logger.warning("Rate limited by WordPress: %s", e)
        return error_response(str(e), "rate_limited")
    if isinstance(e, AuthenticationError):
        logger.error("Authentication error (%s): %s", e.method, e)
        return error_response(str(e), "authentication_error")
    if isinstance(e, WordPressAPIError):
        # The pipeline wraps the final transport failure; classify by its cause
        if isinstance(e.__cause__, RequestTimeoutError):
            logger.error("Request timed out: %s", e)
            return error_response(str(e), "timeout")
        if isinstance(e.__cause__, TransportError):
            logger.error("Transport error: %s", e)
            return error_response(str(e), "connection_error")
        logger.error("WordPress API error (%s): %s", e.status_code, e)
        code = "not_found" if e.status_code == 404 else "api_error"
        return error_response(str(e), code)
    if isinstance(e, RequestTimeoutError):
        return error_response(str(e), "timeout")
    if isinstance(e, (ConnectionLostError, TransportError)):
        logger.error("Transport error: %s", e)
        return error_response(str(e), "connection_error")
    if isinstance(e, FileNotFoundError):
        return error_response(str(e), "file_not_found")
    if isinstance(e, ValidationError):
        return error_response(str(e), "validation_error")
    if isinstance(e, (RuntimeError, ValueError)):
        # Configuration and initialization problems - pass through
        return error_response(str(e), "runtime_error")
    # Unknown exception - log full details, return generic message
    logger.exception("Unexpected error: %s", e)
    return error_response("An unexpected error occurred.", "internal_error")


def tool_annotations(
    title: str,
    *,
    read_only: bool = False,
    destructive: bool = False,
    idempotent: bool = True,
) -> dict[str, Any]:
    """Build MCP tool annotations. Every tool talks to a remote site."""
    return {
        "title": title,
        "readOnlyHint": read_only,
        "destructiveHint": destructive,
        "idempotentHint": idempotent,
        "openWorldHint": True,
    }
