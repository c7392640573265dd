"""WordPress REST API client.

All traffic to a site goes through ``WordPressClient.request``, which:
- resolves endpoints against ``<site>/wp-json/wp/v2``
- injects authentication headers for the configured scheme
- spaces requests according to the requests-per-minute budget
- retries transient failures with linear backoff
- falls back to ``index.php?rest_route=`` when pretty permalinks are off

Resource-specific operations live under ``client.posts``, ``client.pages``,
``client.media``, ``client.users``, ``client.comments``,
``client.taxonomies`` and ``client.site``.
"""

from __future__ import annotations

import asyncio
import json
import time
from dataclasses import dataclass, replace
from typing import Any
from urllib.parse import urlsplit

import httpx

from . import config
from .auth import (
    AUTH_TYPES,
    ApiKeyAuth,
    AppPasswordAuth,
    AuthConfig,
    BasicAuth,
    CookieAuth,
    JwtAuth,
    auth_from_env,
    auth_from_mapping,
    build_auth_headers,
)
from .body import MultipartBody, RequestBody, coerce_body
from .config import logger
from .errors import (
    AuthenticationError,
    ConnectionLostError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    WordPressAPIError,
    WordPressError,
)
from .options import RequestOptions
from .operations import (
    CommentsOperations,
    MediaOperations,
    PagesOperations,
    PostsOperations,
    SiteOperations,
    TaxonomiesOperations,
    UsersOperations,
)
from .utils import build_query
from .validation import validate_endpoint, validate_site_url

BODY_METHODS = {"POST", "PUT", "PATCH"}

# Localized "not allowed to create posts" message some sites return for uploads
MEDIA_RESTRICTION_PHRASE = "Beiträge zu erstellen"

_NO_FALLBACK = object()

# Permission errors, and 404s that already went through the permalink fallback
NON_RETRYABLE_STATUSES = {401, 403, 404}


@dataclass(frozen=True)
class ClientConfig:
    """Resolved, validated client settings."""

    base_url: str
    auth: AuthConfig
    timeout: int  # milliseconds
    max_retries: int
    rate_limit: int  # requests per minute


@dataclass
class ClientStats:
    """Cumulative request counters for one client instance."""

    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    rate_limit_hits: int = 0
    auth_failures: int = 0
    average_response_time: float = 0.0  # milliseconds
    last_request_time: float | None = None  # epoch seconds


class WordPressClient:
    """Async client for a single WordPress site.

    Args:
        base_url: Site URL. Falls back to WORDPRESS_SITE_URL.
        auth: An auth descriptor, a dict to infer one from, or None to read
            WORDPRESS_* environment variables.
        timeout: Per-attempt timeout in milliseconds.
        max_retries: Maximum attempts for replayable requests.
        rate_limit: Requests per minute.
        production: Reject private/loopback hosts. Defaults to WORDPRESS_ENV.
        http_client: Optional ``httpx.AsyncClient`` to send requests with.
            The caller keeps ownership of an injected client.

    Raises:
        ValueError: On an invalid site URL, rate limit or auth method.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        auth: AuthConfig | dict[str, Any] | None = None,
        timeout: int | None = None,
        max_retries: int | None = None,
        rate_limit: int | None = None,
        production: bool | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        if production is None:
            production = config.IS_PRODUCTION

        self._base_url = validate_site_url(base_url or config.SITE_URL, production)
        self._api_url = f"{self._base_url}{config.API_PREFIX}"
        self._timeout = timeout or config.TIMEOUT_MS
        self._max_retries = max_retries or config.MAX_RETRIES

        if auth is None:
            auth = auth_from_env()
        elif isinstance(auth, dict):
            auth = auth_from_mapping(auth)
        if not isinstance(auth, AUTH_TYPES):
            raise ValueError(f"Unsupported authentication method: {auth!r}")
        self._auth: AuthConfig = auth

        self._rate_limit_rpm = rate_limit or config.RATE_LIMIT
        if self._rate_limit_rpm <= 0:
            raise ValueError("Rate limit must be a positive number of requests per minute")
        self._request_interval = 60.0 / self._rate_limit_rpm

        self._authenticated = False
        self._jwt_token: str | None = None
        self._last_request_time = 0.0
        self._rate_lock = asyncio.Lock()
        self._stats = ClientStats()

        self._http = http_client
        self._owns_http = http_client is None

        self.posts = PostsOperations(self)
        self.pages = PagesOperations(self)
        self.media = MediaOperations(self)
        self.users = UsersOperations(self)
        self.comments = CommentsOperations(self)
        self.taxonomies = TaxonomiesOperations(self)
        self.site = SiteOperations(self)

        logger.debug("WordPress API client initialized for: %s", self._api_url)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> ClientConfig:
        return ClientConfig(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            max_retries=self._max_retries,
            rate_limit=self._rate_limit_rpm,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def auth_method(self) -> str:
        return self._auth.method

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def jwt_token(self) -> str | None:
        return self._jwt_token

    @property
    def stats(self) -> ClientStats:
        return replace(self._stats)

    def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(follow_redirects=True)
            self._owns_http = True
        return self._http

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http and self._http is not None and not self._http.is_closed:
            await self._http.aclose()
        self._http = None if self._owns_http else self._http

    async def __aenter__(self) -> WordPressClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        await self.authenticate()

    async def disconnect(self) -> None:
        self._authenticated = False
        self._jwt_token = None
        logger.debug("WordPress client disconnected")

    async def authenticate(self) -> bool:
        """Establish (or verify) the session for the configured auth scheme.

        Returns:
            True once authenticated.

        Raises:
            AuthenticationError: If credentials are missing or rejected.
            ValueError: If the descriptor is not a supported scheme.
        """
        auth = self._auth
        try:
            match auth:
                case AppPasswordAuth() | BasicAuth():
                    return await self._authenticate_basic()
                case JwtAuth():
                    return await self._authenticate_jwt()
                case CookieAuth():
                    return self._authenticate_cookie()
                case ApiKeyAuth():
                    # Key is sent on every request; nothing to bootstrap
                    self._authenticated = True
                    return True
                case _:
                    raise ValueError(f"Unsupported authentication method: {auth!r}")
        except Exception as e:
            self._stats.auth_failures += 1
            logger.error(
                "Authentication failed (%s): %s", getattr(auth, "method", "unknown"), e
            )
            raise

    async def _authenticate_basic(self) -> bool:
        auth = self._auth
        if isinstance(auth, AppPasswordAuth):
            secret, label, field = auth.app_password, "Application Password", "app password"
        else:
            secret, label, field = auth.password, "Basic", "password"

        if not (auth.username and secret):
            raise AuthenticationError(
                f"Username and {field} are required for {label} authentication",
                auth.method,
            )

        try:
            await self.request("GET", "users/me")
        except WordPressError as e:
            raise AuthenticationError(
                f"Basic authentication failed: {e}", auth.method
            ) from e

        self._authenticated = True
        logger.info("%s authentication successful", label)
        return True

    async def _authenticate_jwt(self) -> bool:
        auth = self._auth
        if not (auth.secret and auth.username and auth.password):
            raise AuthenticationError(
                "JWT secret, username, and password are required for JWT authentication",
                auth.method,
            )

        url = f"{self._base_url}{config.JWT_TOKEN_PATH}"
        try:
            response = await asyncio.wait_for(
                self._get_http().post(
                    url,
                    json={"username": auth.username, "password": auth.password},
                    headers={"Content-Type": "application/json", "User-Agent": config.USER_AGENT},
                ),
                timeout=self._timeout / 1000,
            )
        except (asyncio.TimeoutError, httpx.HTTPError) as e:
            raise AuthenticationError(
                f"JWT authentication failed: {str(e) or type(e).__name__}", auth.method
            ) from e

        if not response.is_success:
            raise AuthenticationError(
                f"JWT authentication failed: HTTP {response.status_code}: {response.reason_phrase}",
                auth.method,
                response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise AuthenticationError(
                f"JWT authentication failed: Invalid JSON response: {e}", auth.method
            ) from e

        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise AuthenticationError(
                "JWT authentication failed: no token in response", auth.method
            )

        self._jwt_token = token
        self._authenticated = True
        logger.info("JWT authentication successful")
        return True

    def _authenticate_cookie(self) -> bool:
        if not self._auth.nonce:
            raise AuthenticationError(
                "Nonce is required for cookie authentication", self._auth.method
            )
        self._authenticated = True
        logger.info("Cookie authentication configured")
        return True

    # ------------------------------------------------------------------
    # Request pipeline
    # ------------------------------------------------------------------

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        options: RequestOptions | None = None,
    ) -> Any:
        """Send a request to the WordPress REST API.

        Args:
            method: HTTP method.
            endpoint: Path relative to ``/wp-json/wp/v2`` or an absolute URL.
            data: Request body: a ``RequestBody`` variant or a raw value
                (dict/list as JSON, str as text, bytes as binary).
            options: Per-call headers, timeout (ms), retries and query params.

        Returns:
            Parsed JSON, raw text for non-JSON responses, or None for an
            empty body.

        Raises:
            RateLimitError: On HTTP 429.
            AuthenticationError: When the server blocks a media upload.
            WordPressAPIError: When the request fails for any other reason.
        """
        options = options or RequestOptions()
        started = time.perf_counter()
        self._stats.total_requests += 1

        try:
            return await self._send_with_retries(
                method.upper(), endpoint, coerce_body(data), options, started
            )
        except WordPressError:
            self._stats.failed_requests += 1
            raise

    async def _send_with_retries(
        self,
        method: str,
        endpoint: str,
        body: RequestBody,
        options: RequestOptions,
        started: float,
    ) -> Any:
        url = self._resolve_url(endpoint)
        timeout_ms = options.timeout or self._timeout

        configured = options.retries if options.retries and options.retries > 0 else None
        configured = configured or self._max_retries or 1
        max_attempts = configured if body.replayable else 1

        base_headers = {
            "Content-Type": "application/json",
            "User-Agent": config.USER_AGENT,
            **(options.headers or {}),
        }

        last_error: WordPressError = WordPressAPIError("Unknown error")
        attempts = 0

        for attempt in range(max_attempts):
            attempts = attempt + 1
            await self._rate_limit()

            headers = self._build_headers(base_headers, body)
            logger.debug(
                "API Request: %s %s%s",
                method,
                url,
                f" (attempt {attempts})" if attempt else "",
            )

            try:
                response = await self._send(
                    method, url, headers, body, options.params, timeout_ms
                )
            except (RequestTimeoutError, ConnectionLostError) as e:
                last_error = e
                break
            except TransportError as e:
                last_error = e
            else:
                if response.is_success:
                    return self._parse_response(response, endpoint, started)
                try:
                    return await self._handle_error_response(
                        response, url, endpoint, method, headers, body,
                        options.params, timeout_ms, started,
                    )
                except (RateLimitError, AuthenticationError):
                    raise
                except WordPressAPIError as e:
                    last_error = e
                    if not _is_retryable_status(e.status_code):
                        break

            if attempt < max_attempts - 1:
                delay = config.RETRY_BACKOFF * (attempt + 1)
                logger.warning(
                    "Request failed (attempt %s): %s. Retrying in %.1fs",
                    attempts, last_error, delay,
                )
                await asyncio.sleep(delay)

        logger.error("%s %s failed after %s attempt(s): %s", method, url, attempts, last_error)
        raise WordPressAPIError(
            f"Request failed after {attempts} attempt{'' if attempts == 1 else 's'}: {last_error}",
            getattr(last_error, "status_code", None),
        ) from last_error

    def _resolve_url(self, endpoint: str) -> str:
        if endpoint.startswith("http"):
            return endpoint
        return f"{self._api_url}/{endpoint.lstrip('/')}"

    def _build_headers(self, base_headers: dict[str, str], body: RequestBody) -> dict[str, str]:
        headers = dict(base_headers)
        if isinstance(body, MultipartBody):
            # httpx sets the multipart boundary itself
            headers.pop("Content-Type", None)
        headers.update(build_auth_headers(self._auth, self._jwt_token))
        return headers

    async def _rate_limit(self) -> None:
        async with self._rate_lock:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self._request_interval:
                await asyncio.sleep(self._request_interval - elapsed)
            self._last_request_time = time.monotonic()

    async def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: RequestBody,
        params: dict[str, Any] | None,
        timeout_ms: int,
    ) -> httpx.Response:
        """Perform one HTTP attempt, translating httpx failures to TransportErrors."""
        content = body.to_httpx() if method in BODY_METHODS else {}
        try:
            return await asyncio.wait_for(
                self._get_http().request(
                    method,
                    url,
                    headers=headers,
                    params=params,
                    timeout=timeout_ms / 1000,
                    **content,
                ),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise RequestTimeoutError(f"Request timeout after {timeout_ms}ms") from e
        except (httpx.RemoteProtocolError, httpx.ReadError, httpx.WriteError) as e:
            raise ConnectionLostError(
                f"Network connection lost during request: {e}"
            ) from e
        except httpx.HTTPError as e:
            message = str(e) or type(e).__name__
            if "connection reset" in message.lower():
                raise ConnectionLostError(
                    f"Network connection lost during request: {message}"
                ) from e
            raise TransportError(message) from e

    async def _handle_error_response(
        self,
        response: httpx.Response,
        url: str,
        endpoint: str,
        method: str,
        headers: dict[str, str],
        body: RequestBody,
        params: dict[str, Any] | None,
        timeout_ms: int,
        started: float,
    ) -> Any:
        """Classify a non-2xx response.

        Returns the permalink fallback's result when it succeeds; raises
        otherwise.
        """
        status = response.status_code
        message = _error_message(response)
        is_media = "media" in endpoint

        if status == 429:
            self._stats.rate_limit_hits += 1
            raise RateLimitError(message, time.time() + config.RATE_LIMIT_RETRY_AFTER)

        if status == 403 and is_media and method == "POST":
            raise AuthenticationError(
                "Media upload blocked: WordPress REST API media uploads appear to be "
                "disabled or restricted by a plugin/security policy. "
                f"Error: {message}. "
                "Common causes: W3 Total Cache, security plugins, or custom REST API "
                "restrictions. Please check WordPress admin settings or contact your "
                "system administrator.",
                self._auth.method,
                status,
            )

        if MEDIA_RESTRICTION_PHRASE in message and is_media:
            raise AuthenticationError(
                f"WordPress REST API media upload restriction detected: {message}. "
                "This typically indicates that media uploads via REST API are disabled "
                "by WordPress configuration, a security plugin, or server policy. "
                "User has sufficient permissions but WordPress/plugins are blocking "
                "the upload.",
                self._auth.method,
                status,
            )

        if status == 404 and config.API_PREFIX in url:
            result = await self._try_index_php_fallback(
                url, method, headers, body, params, timeout_ms, started
            )
            if result is not _NO_FALLBACK:
                return result

        raise WordPressAPIError(message, status)

    async def _try_index_php_fallback(
        self,
        url: str,
        method: str,
        headers: dict[str, str],
        body: RequestBody,
        params: dict[str, Any] | None,
        timeout_ms: int,
        started: float,
    ) -> Any:
        fallback_url = build_fallback_url(url)
        logger.warning("404 on pretty permalinks, trying %s", fallback_url)

        await self._rate_limit()
        try:
            response = await self._send(method, fallback_url, headers, body, params, timeout_ms)
        except TransportError as e:
            logger.debug("Fallback request failed: %s", e)
            return _NO_FALLBACK

        if not response.is_success:
            logger.debug("Fallback also failed with status %s", response.status_code)
            return _NO_FALLBACK

        if not response.text:
            self._record_success(_elapsed_ms(started))
            return None

        try:
            result = response.json()
        except ValueError as e:
            logger.debug("Fallback returned invalid JSON: %s", e)
            return _NO_FALLBACK

        self._record_success(_elapsed_ms(started))
        return result

    def _parse_response(self, response: httpx.Response, endpoint: str, started: float) -> Any:
        text = response.text
        if not text:
            self._record_success(_elapsed_ms(started))
            return None

        try:
            result = json.loads(text)
        except ValueError as e:
            if any(marker in endpoint for marker in config.AUTH_ENDPOINT_MARKERS):
                raise WordPressAPIError(
                    f"Invalid JSON response: {e}", response.status_code
                ) from e
            # Some endpoints legitimately answer with HTML or plain text
            self._record_success(_elapsed_ms(started))
            return text

        self._record_success(_elapsed_ms(started))
        return result

    def _record_success(self, duration_ms: float) -> None:
        stats = self._stats
        stats.successful_requests += 1
        n = stats.successful_requests
        stats.average_response_time = (stats.average_response_time * (n - 1) + duration_ms) / n
        stats.last_request_time = time.time()

    # ------------------------------------------------------------------
    # HTTP method helpers
    # ------------------------------------------------------------------

    async def get(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        return await self.request("GET", endpoint, None, options)

    async def post(self, endpoint: str, data: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request("POST", endpoint, data, options)

    async def put(self, endpoint: str, data: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request("PUT", endpoint, data, options)

    async def patch(self, endpoint: str, data: Any = None, options: RequestOptions | None = None) -> Any:
        return await self.request("PATCH", endpoint, data, options)

    async def delete(self, endpoint: str, options: RequestOptions | None = None) -> Any:
        return await self.request("DELETE", endpoint, None, options)

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    def validate_endpoint(self, endpoint: str) -> bool:
        return validate_endpoint(endpoint)

    def build_url(self, endpoint: str, params: dict[str, Any] | None = None) -> str:
        return f"{self._api_url}/{endpoint.lstrip('/')}{build_query(params)}"


def build_fallback_url(url: str) -> str:
    """Rewrite a ``/wp-json/wp/v2`` URL to the ``index.php?rest_route=`` form.

    e.g. https://site/blog/wp-json/wp/v2/posts?page=2
      -> https://site/blog/index.php?rest_route=/wp/v2/posts&page=2
    """
    parts = urlsplit(url)
    prefix, _, route = parts.path.partition(config.API_PREFIX)
    fallback = f"{parts.scheme}://{parts.netloc}{prefix}{config.FALLBACK_ROUTE}{route}"
    if parts.query:
        fallback += f"&{parts.query}"
    return fallback


def _is_retryable_status(status: int | None) -> bool:
    return status not in NON_RETRYABLE_STATUSES


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


def _error_message(response: httpx.Response) -> str:
    text = response.text
    try:
        data = json.loads(text)
    except ValueError:
        return text or f"HTTP {response.status_code}: {response.reason_phrase}"
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if message:
            return str(message)
    return f"HTTP {response.status_code}"
