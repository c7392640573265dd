"""Authentication descriptors and header injection.

Each supported scheme is its own frozen dataclass. A client holds exactly one
of them; headers are derived from it with a ``match`` over the variant.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from . import config


@dataclass(frozen=True)
class AppPasswordAuth:
    """WordPress Application Password (Basic auth over the REST API)."""

    method: ClassVar[str] = "app-password"

    username: str = ""
    app_password: str = ""


@dataclass(frozen=True)
class BasicAuth:
    """Plain username/password Basic auth (needs a Basic Auth plugin)."""

    method: ClassVar[str] = "basic"

    username: str = ""
    password: str = ""


@dataclass(frozen=True)
class JwtAuth:
    """JWT Authentication for WP REST API plugin."""

    method: ClassVar[str] = "jwt"

    username: str = ""
    password: str = ""
    secret: str = ""


@dataclass(frozen=True)
class ApiKeyAuth:
    method: ClassVar[str] = "api-key"

    api_key: str = ""


@dataclass(frozen=True)
class CookieAuth:
    method: ClassVar[str] = "cookie"

    nonce: str = ""


AuthConfig = Union[AppPasswordAuth, BasicAuth, JwtAuth, ApiKeyAuth, CookieAuth]

AUTH_TYPES: tuple[type, ...] = (AppPasswordAuth, BasicAuth, JwtAuth, ApiKeyAuth, CookieAuth)
AUTH_METHODS = {t.method: t for t in AUTH_TYPES}


def _basic_credentials(username: str, secret: str) -> str:
    encoded = base64.b64encode(f"{username}:{secret}".encode()).decode()
    return f"Basic {encoded}"


def build_auth_headers(auth: AuthConfig, jwt_token: str | None = None) -> dict[str, str]:
    """Return the headers that authenticate a request.

    Args:
        auth: The active authentication descriptor.
        jwt_token: Token obtained during JWT bootstrap, if any.

    Returns:
        A dict with zero or one header. Missing credentials yield no header.
    """
    match auth:
        case AppPasswordAuth(username=user, app_password=secret) if user and secret:
            return {"Authorization": _basic_credentials(user, secret)}
        case BasicAuth(username=user, password=secret) if user and secret:
            return {"Authorization": _basic_credentials(user, secret)}
        case JwtAuth() if jwt_token:
            return {"Authorization": f"Bearer {jwt_token}"}
        case ApiKeyAuth(api_key=key) if key:
            return {"X-API-Key": key}
        case CookieAuth(nonce=nonce) if nonce:
            return {"X-WP-Nonce": nonce}
    return {}


def auth_from_mapping(data: dict[str, Any]) -> AuthConfig:
    """Build a descriptor from a plain dict, inferring the method when absent.

    Raises:
        ValueError: If ``method`` names an unsupported scheme.
    """
    fields = {k: v for k, v in data.items() if k != "method" and v is not None}
    method = (data.get("method") or "").lower()

    if not method:
        if fields.get("username") and fields.get("app_password"):
            method = AppPasswordAuth.method
        elif fields.get("username") and fields.get("password") and fields.get("secret"):
            method = JwtAuth.method
        elif fields.get("username") and fields.get("password"):
            method = BasicAuth.method
        elif fields.get("api_key"):
            method = ApiKeyAuth.method
        elif fields.get("nonce"):
            method = CookieAuth.method
        else:
            method = AppPasswordAuth.method

    auth_type = AUTH_METHODS.get(method)
    if auth_type is None:
        raise ValueError(f"Unsupported authentication method: {method}")

    allowed = auth_type.__dataclass_fields__.keys()
    return auth_type(**{k: v for k, v in fields.items() if k in allowed})


def auth_from_env() -> AuthConfig:
    """Resolve the descriptor from WORDPRESS_* environment configuration."""
    if config.AUTH_METHOD:
        explicit = {
            "app-password": (config.USERNAME and config.APP_PASSWORD)
            and AppPasswordAuth(config.USERNAME, config.APP_PASSWORD),
            "basic": (config.USERNAME and config.PASSWORD)
            and BasicAuth(config.USERNAME, config.PASSWORD),
            "jwt": (config.USERNAME and config.PASSWORD and config.JWT_SECRET)
            and JwtAuth(config.USERNAME, config.PASSWORD, config.JWT_SECRET),
            "api-key": config.API_KEY and ApiKeyAuth(config.API_KEY),
            "cookie": config.COOKIE_NONCE and CookieAuth(config.COOKIE_NONCE),
        }
        if config.AUTH_METHOD not in explicit:
            raise ValueError(f"Unsupported authentication method: {config.AUTH_METHOD}")
        if explicit[config.AUTH_METHOD]:
            return explicit[config.AUTH_METHOD]

    if config.USERNAME and config.APP_PASSWORD:
        return AppPasswordAuth(config.USERNAME, config.APP_PASSWORD)
    if config.JWT_SECRET and config.USERNAME and config.PASSWORD:
        return JwtAuth(config.USERNAME, config.PASSWORD, config.JWT_SECRET)
    if config.API_KEY:
        return ApiKeyAuth(config.API_KEY)
    if config.COOKIE_NONCE:
        return CookieAuth(config.COOKIE_NONCE)

    return BasicAuth(config.USERNAME, config.PASSWORD or config.APP_PASSWORD)
