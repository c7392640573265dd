"""Exception types raised by the WordPress REST client."""

from __future__ import annotations


class WordPressError(Exception):
    """Base class for every error raised by the client."""


class WordPressAPIError(WordPressError):
    """The WordPress REST API answered with an error, or a request failed for good."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(WordPressAPIError):
    """Credentials were rejected or the server refused the operation."""

    def __init__(self, message: str, method: str, status_code: int | None = 401):
        super().__init__(message, status_code)
        self.method = method


class RateLimitError(WordPressAPIError):
    """HTTP 429. ``retry_after`` is an epoch timestamp estimate."""

    def __init__(self, message: str, retry_after: float):
        super().__init__(message, 429)
        self.retry_after = retry_after


class TransportError(WordPressError):
    """The request never produced an HTTP response."""


class RequestTimeoutError(TransportError):
    pass


class ConnectionLostError(TransportError):
    pass
