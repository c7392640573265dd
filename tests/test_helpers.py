"""Tests for helper functions and request bodies."""

import json

import pytest
from pydantic import ValidationError

from wordpress_rest_mcp.body import (
    BinaryBody,
    EmptyBody,
    JsonBody,
    MultipartBody,
    StreamBody,
    TextBody,
    coerce_body,
)
from wordpress_rest_mcp.errors import (
    AuthenticationError,
    ConnectionLostError,
    RateLimitError,
    RequestTimeoutError,
    TransportError,
    WordPressAPIError,
)
from wordpress_rest_mcp.models import CreatePostRequest, PostStatus
from wordpress_rest_mcp.utils import (
    build_query,
    dump_body,
    error_response,
    handle_api_exception,
    serialize,
    tool_annotations,
)


class TestSerialize:
    """Tests for serialize function."""

    def test_serialize_bool(self):
        """Booleans use WordPress spelling."""
        assert serialize(True) == "true"
        assert serialize(False) == "false"

    def test_serialize_list(self):
        """Lists become comma-separated values."""
        assert serialize([1, 2, 3]) == "1,2,3"
        assert serialize(["publish", "draft"]) == "publish,draft"

    def test_serialize_enum(self):
        assert serialize(PostStatus.DRAFT) == "draft"

    def test_serialize_passthrough(self):
        """Other types should pass through unchanged."""
        assert serialize("string") == "string"
        assert serialize(123) == 123


class TestBuildQuery:
    """Tests for build_query function."""

    def test_empty(self):
        assert build_query(None) == ""
        assert build_query({}) == ""
        assert build_query({"search": None}) == ""

    def test_drops_none(self):
        assert build_query({"per_page": 10, "search": None}) == "?per_page=10"

    def test_encodes_values(self):
        query = build_query({"search": "hello world", "status": ["publish", "draft"], "force": True})
        assert query == "?search=hello+world&status=publish%2Cdraft&force=true"


class TestDumpBody:
    """Tests for dump_body function."""

    def test_model(self):
        body = dump_body(CreatePostRequest(title="Hi", status="draft"))
        assert body == {"title": "Hi", "status": "draft"}

    def test_dict(self):
        assert dump_body({"a": 1, "b": None}) == {"a": 1}


class TestErrorResponse:
    """Tests for error_response function."""

    def test_basic_error(self):
        result = json.loads(error_response("Something went wrong"))
        assert result == {"error": "Something went wrong", "code": "error"}

    def test_custom_code(self):
        result = json.loads(error_response("Not found", "not_found"))
        assert result["code"] == "not_found"


class TestHandleApiException:
    """Tests for mapping exceptions to error codes."""

    @pytest.mark.parametrize(
        "exc, code",
        [
            (RateLimitError("slow down", 0.0), "rate_limited"),
            (AuthenticationError("nope", "basic"), "authentication_error"),
            (WordPressAPIError("missing", 404), "not_found"),
            (WordPressAPIError("bad", 400), "api_error"),
            (RequestTimeoutError("timeout"), "timeout"),
            (ConnectionLostError("reset"), "connection_error"),
            (FileNotFoundError("File not found: x.png"), "file_not_found"),
            (RuntimeError("not initialized"), "runtime_error"),
            (ValueError("Post ID is required for updates"), "runtime_error"),
        ],
    )
    def test_codes(self, exc, code):
        result = json.loads(handle_api_exception(exc))
        assert result["code"] == code
        assert result["error"] == str(exc)

    @pytest.mark.parametrize(
        "cause, code",
        [
            (RequestTimeoutError("Request timeout after 30000ms"), "timeout"),
            (ConnectionLostError("Network connection lost"), "connection_error"),
            (TransportError("Name or service not known"), "connection_error"),
        ],
    )
    def test_wrapped_transport_errors(self, cause, code):
        """Final pipeline errors are classified by the transport failure behind them."""
        try:
            raise WordPressAPIError(f"Request failed after 1 attempt: {cause}") from cause
        except WordPressAPIError as e:
            result = json.loads(handle_api_exception(e))
        assert result["code"] == code
        assert str(cause) in result["error"]

    def test_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            CreatePostRequest(title="Hi", bogus=1)
        result = json.loads(handle_api_exception(exc_info.value))
        assert result["code"] == "validation_error"

    def test_unknown_error_is_sanitized(self):
        result = json.loads(handle_api_exception(KeyError("secret detail")))
        assert result["code"] == "internal_error"
        assert "secret" not in result["error"]


class TestToolAnnotations:
    def test_defaults(self):
        annotations = tool_annotations("List Posts", read_only=True)
        assert annotations["title"] == "List Posts"
        assert annotations["readOnlyHint"] is True
        assert annotations["destructiveHint"] is False
        assert annotations["openWorldHint"] is True


class TestRequestBodies:
    """Tests for body variants and coercion."""

    def test_replayable_flags(self):
        assert EmptyBody.replayable
        assert TextBody.replayable
        assert BinaryBody.replayable
        assert JsonBody.replayable
        assert not MultipartBody.replayable
        assert not StreamBody.replayable

    def test_coerce(self):
        assert coerce_body(None) == EmptyBody()
        assert coerce_body("raw") == TextBody("raw")
        assert coerce_body(b"\x00\x01") == BinaryBody(b"\x00\x01")
        assert coerce_body({"title": "Hi"}) == JsonBody({"title": "Hi"})
        assert coerce_body([1, 2]) == JsonBody([1, 2])

    def test_coerce_keeps_variants(self):
        body = MultipartBody(files={"file": ("a.txt", b"x", "text/plain")})
        assert coerce_body(body) is body

    def test_coerce_model(self):
        body = coerce_body(CreatePostRequest(title="Hi"))
        assert isinstance(body, JsonBody)
        assert body.payload["title"] == "Hi"

    def test_to_httpx(self):
        assert TextBody("é").to_httpx() == {"content": "é".encode()}
        assert JsonBody({"a": 1}).to_httpx() == {"json": {"a": 1}}
        assert MultipartBody(files={"f": b"x"}, fields={"title": "T"}).to_httpx() == {
            "files": {"f": b"x"},
            "data": {"title": "T"},
        }
