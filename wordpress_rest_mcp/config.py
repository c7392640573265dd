"""Configuration and constants for the WordPress REST MCP Server."""

from __future__ import annotations

import logging
import os
import sys

# ---------------------------------------------------------------------------
# Configuration from environment variables
# ---------------------------------------------------------------------------

SITE_URL = os.getenv("WORDPRESS_SITE_URL", "")
USERNAME = os.getenv("WORDPRESS_USERNAME", "")
APP_PASSWORD = os.getenv("WORDPRESS_APP_PASSWORD", "").replace(" ", "")
PASSWORD = os.getenv("WORDPRESS_PASSWORD", "")
JWT_SECRET = os.getenv("WORDPRESS_JWT_SECRET", "")
API_KEY = os.getenv("WORDPRESS_API_KEY", "")
COOKIE_NONCE = os.getenv("WORDPRESS_COOKIE_NONCE", "")
AUTH_METHOD = os.getenv("WORDPRESS_AUTH_METHOD", "").strip().lower()

TIMEOUT_MS = int(os.getenv("WORDPRESS_TIMEOUT", "30000"))
MAX_RETRIES = int(os.getenv("WORDPRESS_MAX_RETRIES", "3"))
RATE_LIMIT = int(os.getenv("WORDPRESS_RATE_LIMIT", "60"))  # requests per minute

ENVIRONMENT = os.getenv("WORDPRESS_ENV", "development").strip().lower()
IS_PRODUCTION = ENVIRONMENT == "production"

LOG_LEVEL = os.getenv("WORDPRESS_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

API_PREFIX = "/wp-json/wp/v2"
JWT_TOKEN_PATH = "/wp-json/jwt-auth/v1/token"
FALLBACK_ROUTE = "/index.php?rest_route=/wp/v2"

USER_AGENT = "wordpress-rest-mcp/1.0.0"

# Endpoints whose responses must be JSON to be trusted
AUTH_ENDPOINT_MARKERS = ("users/me", "jwt-auth")

RATE_LIMIT_RETRY_AFTER = 60.0  # seconds
RETRY_BACKOFF = 1.0  # seconds, multiplied by the attempt number

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logger = logging.getLogger("wordpress_rest_mcp")
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), stream=sys.stderr)

if not SITE_URL:
    logger.warning(
        "WORDPRESS_SITE_URL is not set. The server cannot reach WordPress "
        "until a site URL is configured."
    )
