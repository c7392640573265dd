"""Tests for MCP tool registration, schemas and behavior."""

import json

import httpx
import pytest

from wordpress_rest_mcp import connection
from wordpress_rest_mcp.server import mcp

EXPECTED_TOOLS = [
    # Posts
    "wp_list_posts",
    "wp_get_post",
    "wp_create_post",
    "wp_update_post",
    "wp_delete_post",
    "wp_get_post_revisions",
    # Pages
    "wp_list_pages",
    "wp_get_page",
    "wp_create_page",
    "wp_update_page",
    "wp_delete_page",
    "wp_get_page_revisions",
    # Media
    "wp_list_media",
    "wp_get_media",
    "wp_upload_media",
    "wp_update_media",
    "wp_delete_media",
    # Users
    "wp_list_users",
    "wp_get_user",
    "wp_get_current_user",
    "wp_create_user",
    "wp_update_user",
    "wp_delete_user",
    # Comments
    "wp_list_comments",
    "wp_get_comment",
    "wp_create_comment",
    "wp_update_comment",
    "wp_delete_comment",
    "wp_approve_comment",
    "wp_spam_comment",
    # Taxonomies
    "wp_list_categories",
    "wp_get_category",
    "wp_create_category",
    "wp_update_category",
    "wp_delete_category",
    "wp_list_tags",
    "wp_get_tag",
    "wp_create_tag",
    "wp_update_tag",
    "wp_delete_tag",
    # Site
    "wp_get_site_settings",
    "wp_update_site_settings",
    "wp_search_site",
    "wp_get_application_passwords",
    "wp_create_application_password",
    "wp_delete_application_password",
    # Auth
    "wp_test_auth",
    "wp_get_auth_status",
]


def tools():
    return mcp._tool_manager._tools


class TestToolRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(self):
        """All expected tools should be registered."""
        registered_tools = list(tools().keys())

        for tool_name in EXPECTED_TOOLS:
            assert tool_name in registered_tools, f"Tool '{tool_name}' not registered"

    def test_tool_count(self):
        """Should have exactly 48 tools registered."""
        assert len(tools()) == 48


class TestToolSchemas:
    """Tests for tool parameter schemas (Cursor compatibility)."""

    def _get_tool_schema(self, tool_name: str) -> dict:
        """Get the parameter schema for a tool."""
        tool = tools().get(tool_name)
        assert tool is not None, f"Tool '{tool_name}' not found"
        return tool.parameters

    def test_schemas_have_flat_parameters(self):
        """All tool schemas should have flat parameters, not nested 'params' object."""
        for tool_name, tool in tools().items():
            schema = tool.parameters
            properties = schema.get("properties", {})

            assert "params" not in properties, (
                f"Tool '{tool_name}' has nested 'params' object - "
                "use individual parameters for Cursor compatibility"
            )

            required = schema.get("required", [])
            assert "ctx" not in required, f"Tool '{tool_name}' has 'ctx' in required fields"

    def test_wp_create_post_schema(self):
        """wp_create_post should require only a title."""
        schema = self._get_tool_schema("wp_create_post")
        assert "title" in schema["properties"]
        assert schema.get("required", []) == ["title"]

    def test_wp_update_post_schema(self):
        """wp_update_post should require the post id."""
        schema = self._get_tool_schema("wp_update_post")
        assert "id" in schema.get("required", [])
        assert "title" not in schema.get("required", [])

    def test_wp_upload_media_schema(self):
        schema = self._get_tool_schema("wp_upload_media")
        assert "file_path" in schema.get("required", [])

    def test_wp_search_site_schema(self):
        schema = self._get_tool_schema("wp_search_site")
        assert "term" in schema.get("required", [])

    def test_wp_list_posts_schema(self):
        """wp_list_posts should have no required parameters."""
        schema = self._get_tool_schema("wp_list_posts")
        assert schema.get("required", []) == []


class TestToolAnnotations:
    """Tests for tool annotations."""

    def test_all_tools_are_open_world(self):
        for tool_name, tool in tools().items():
            annotations = tool.annotations
            assert annotations is not None, f"Tool '{tool_name}' has no annotations"
            assert annotations.openWorldHint is True

    def test_read_tools_are_read_only(self):
        """List and get tools should have readOnlyHint=True."""
        for tool_name, tool in tools().items():
            if tool_name.startswith(("wp_list_", "wp_get_")):
                assert tool.annotations.readOnlyHint is True, (
                    f"Tool '{tool_name}' should have readOnlyHint=True"
                )

    def test_write_tools_are_not_read_only(self):
        for tool_name in ("wp_create_post", "wp_update_page", "wp_upload_media", "wp_approve_comment"):
            assert tools()[tool_name].annotations.readOnlyHint is False

    def test_delete_tools_are_destructive(self):
        """Delete tools should have destructiveHint=True, others False."""
        for tool_name, tool in tools().items():
            expected = "_delete_" in tool_name
            assert tool.annotations.destructiveHint is expected, (
                f"Tool '{tool_name}' should have destructiveHint={expected}"
            )

    def test_create_tools_are_not_idempotent(self):
        for tool_name, tool in tools().items():
            if tool_name.startswith("wp_create_"):
                assert tool.annotations.idempotentHint is False, (
                    f"Tool '{tool_name}' should have idempotentHint=False"
                )


class TestToolCalls:
    """Tests for calling tool functions against a mocked site."""

    @pytest.fixture
    def use_client(self, monkeypatch, make_client):
        """Install a mocked client as the server's active client."""

        def _use(handler, **kwargs):
            client = make_client(handler, **kwargs)
            monkeypatch.setattr(connection, "_client", client)
            return client

        return _use

    async def call(self, tool_name: str, **kwargs) -> dict:
        return json.loads(await tools()[tool_name].fn(**kwargs))

    async def test_not_initialized(self, monkeypatch):
        """Tools report a runtime error before the lifespan has started."""
        monkeypatch.setattr(connection, "_client", None)
        result = await self.call("wp_list_posts")
        assert result["code"] == "runtime_error"
        assert "not initialized" in result["error"]

    async def test_list_posts(self, use_client, recorder, sample_post):
        handler = recorder(httpx.Response(200, json=[sample_post]))
        use_client(handler)

        result = await self.call("wp_list_posts", status="publish", per_page=5)

        assert result["count"] == 1
        assert result["posts"][0]["id"] == 42
        params = handler.requests[0].url.params
        assert params["status"] == "publish"
        assert params["per_page"] == "5"

    async def test_list_custom_post_type(self, use_client, recorder):
        handler = recorder(httpx.Response(200, json=[]))
        use_client(handler)

        result = await self.call("wp_list_posts", post_type="products")

        assert result == {"post_type": "products", "count": 0, "posts": []}
        assert handler.paths == ["/wp-json/wp/v2/products"]

    async def test_get_post_not_found(self, use_client, recorder):
        """A 404 whose fallback also fails maps to not_found."""
        handler = recorder(httpx.Response(404, json={"message": "Invalid post ID."}))
        use_client(handler)

        result = await self.call("wp_get_post", id=999)

        assert result["code"] == "not_found"
        assert "Invalid post ID." in result["error"]

    async def test_create_post(self, use_client, recorder, sample_post):
        handler = recorder(httpx.Response(201, json=sample_post))
        use_client(handler)

        result = await self.call("wp_create_post", title="Hello World", categories=[3])

        assert result["id"] == 42
        request = handler.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {
            "title": "Hello World",
            "status": "draft",
            "categories": [3],
        }

    async def test_create_post_validation_error(self, use_client, recorder):
        handler = recorder(httpx.Response(201, json={}))
        use_client(handler)

        result = await self.call("wp_create_post", title="   ")

        assert result["code"] == "validation_error"
        assert handler.requests == []

    async def test_update_site_settings_requires_fields(self, use_client, recorder):
        handler = recorder(httpx.Response(200, json={}))
        use_client(handler)

        result = await self.call("wp_update_site_settings")

        assert result["code"] == "validation_error"
        assert handler.requests == []

    async def test_upload_missing_file(self, use_client, recorder, tmp_path):
        handler = recorder(httpx.Response(201, json={}))
        use_client(handler)

        result = await self.call("wp_upload_media", file_path=str(tmp_path / "missing.png"))

        assert result["code"] == "file_not_found"
        assert handler.requests == []

    async def test_rate_limited(self, use_client, recorder):
        handler = recorder(httpx.Response(429, json={"message": "Too many requests"}))
        use_client(handler)

        result = await self.call("wp_list_tags")

        assert result["code"] == "rate_limited"

    async def test_auth_status(self, use_client, recorder):
        handler = recorder(httpx.Response(200, json={"id": 1}))
        use_client(handler)

        result = await self.call("wp_test_auth")
        assert result == {
            "authenticated": True,
            "method": "app-password",
            "site": "https://example.com",
        }

        status = await self.call("wp_get_auth_status")
        assert status["authenticated"] is True
        assert status["stats"]["total_requests"] == 1
        assert status["stats"]["successful_requests"] == 1

    async def test_timeout(self, use_client, recorder):
        """A timed out request reaches the agent as a timeout."""
        handler = recorder(httpx.ReadTimeout("timed out"))
        use_client(handler, timeout=5000)

        result = await self.call("wp_list_posts")

        assert result["code"] == "timeout"
        assert "Request timeout after 5000ms" in result["error"]

    async def test_connection_lost(self, use_client, recorder):
        handler = recorder(httpx.RemoteProtocolError("Server disconnected"))
        use_client(handler)

        result = await self.call("wp_get_site_settings")

        assert result["code"] == "connection_error"
        assert "Network connection lost" in result["error"]

    async def test_unreachable_site(self, use_client, recorder):
        """Connection failures are retried, then reported as connection errors."""
        handler = recorder(httpx.ConnectError("Name or service not known"))
        use_client(handler)

        result = await self.call("wp_list_tags")

        assert result["code"] == "connection_error"
        assert len(handler.requests) == 3
