"""Site URL and endpoint validation."""

from __future__ import annotations

import ipaddress
import re
from urllib.parse import urlsplit

ENDPOINT_PATTERN = re.compile(r"^[a-zA-Z0-9/\-_]+$")

LOCAL_HOSTNAMES = {"localhost", "localhost.localdomain", "ip6-localhost"}


def is_private_host(hostname: str) -> bool:
    """True for localhost names and loopback, private or link-local addresses."""
    hostname = hostname.lower().strip("[]")
    if hostname in LOCAL_HOSTNAMES:
        return True
    try:
        address = ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return address.is_loopback or address.is_private or address.is_link_local


def validate_site_url(url: str, production: bool = False) -> str:
    """Validate a WordPress site URL and return it in normalized form.

    Performs the following checks:
    1. A URL is present and has a scheme and host
    2. The scheme is http or https
    3. In production, the host is not localhost or a private address

    The result keeps scheme, host and path, without query, fragment or
    trailing slash.

    Raises:
        ValueError: If any check fails.
    """
    if not url:
        raise ValueError("WordPress site URL is required")

    parsed = urlsplit(url.strip())
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("Invalid WordPress site URL format")

    if parsed.scheme.lower() not in ("http", "https"):
        raise ValueError("Only HTTP and HTTPS protocols are allowed")

    if production and is_private_host(parsed.hostname or ""):
        raise ValueError("Private/localhost URLs not allowed in production")

    return f"{parsed.scheme.lower()}://{parsed.netloc}{parsed.path}".rstrip("/")


def validate_endpoint(endpoint: str) -> bool:
    """True if the endpoint only contains path-safe characters."""
    return bool(ENDPOINT_PATTERN.match(endpoint))
