"""Pytest configuration and shared fixtures."""

import httpx
import pytest

from wordpress_rest_mcp import client as client_module
from wordpress_rest_mcp.auth import AppPasswordAuth
from wordpress_rest_mcp.client import WordPressClient


class RecordingHandler:
    """MockTransport handler that records requests and replays responses.

    Responses are consumed in order; the last one repeats. An exception
    instance is raised instead of returned, and a callable is invoked with
    the request.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def recorder():
    """Factory for RecordingHandler instances."""
    return RecordingHandler


@pytest.fixture
def sleeps(monkeypatch):
    """Record asyncio.sleep delays instead of waiting."""
    delays: list[float] = []

    async def fake_sleep(delay, *args, **kwargs):
        delays.append(delay)

    monkeypatch.setattr(client_module.asyncio, "sleep", fake_sleep)
    return delays


@pytest.fixture
def make_client(sleeps):
    """Factory: a WordPressClient whose HTTP traffic goes to ``handler``."""

    def _make(handler, **kwargs) -> WordPressClient:
        base_url = kwargs.pop("base_url", "https://example.com")
        kwargs.setdefault("auth", AppPasswordAuth("admin", "app-pass"))
        kwargs.setdefault("rate_limit", 60000)
        kwargs.setdefault("max_retries", 3)
        kwargs.setdefault("production", False)
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return WordPressClient(base_url, http_client=http, **kwargs)

    return _make


@pytest.fixture
def sample_post():
    """A trimmed WordPress post object."""
    return {
        "id": 42,
        "title": {"rendered": "Hello World"},
        "status": "publish",
        "link": "https://example.com/hello-world/",
    }
