"""Tests for resource operations: endpoint shaping and request bodies."""

import json

import httpx
import pytest

from wordpress_rest_mcp.errors import WordPressAPIError
from wordpress_rest_mcp.models import MediaMeta, UpdatePostRequest
from wordpress_rest_mcp.options import RequestOptions


@pytest.fixture
def site(make_client, recorder):
    """A client whose site answers every request with an empty JSON object."""
    handler = recorder(httpx.Response(200, json={"id": 7}))
    return make_client(handler), handler


class TestPosts:
    """Tests for PostsOperations."""

    async def test_get_posts_params(self, site):
        client, handler = site
        await client.posts.get_posts({"status": ["publish", "draft"], "per_page": 10, "search": None})

        url = handler.requests[0].url
        assert url.path == "/wp-json/wp/v2/posts"
        assert url.params["status"] == "publish,draft"
        assert url.params["per_page"] == "10"
        assert "search" not in url.params

    async def test_custom_post_type(self, site):
        client, handler = site
        await client.posts.get_post(5, "edit", post_type="products")

        url = handler.requests[0].url
        assert url.path == "/wp-json/wp/v2/products/5"
        assert url.params["context"] == "edit"

    async def test_update_post(self, site):
        """The id goes in the path, not the body."""
        client, handler = site
        await client.posts.update_post(UpdatePostRequest(id=5, title="New"))

        request = handler.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/wp-json/wp/v2/posts/5"
        assert json.loads(request.content) == {"title": "New"}

    async def test_update_without_id(self, site):
        client, handler = site
        with pytest.raises(ValueError, match="Post ID is required for updates"):
            await client.posts.update_post({"title": "New"})
        assert handler.requests == []

    async def test_delete_post(self, site):
        client, handler = site
        await client.posts.delete_post(5, force=True)

        request = handler.requests[0]
        assert request.method == "DELETE"
        assert request.url.params["force"] == "true"

    async def test_revisions(self, site):
        client, handler = site
        await client.posts.get_post_revisions(5)
        assert handler.paths == ["/wp-json/wp/v2/posts/5/revisions"]


class TestPagesUsersComments:
    async def test_create_page(self, site):
        client, handler = site
        await client.pages.create_page({"title": "About", "parent": None})

        assert handler.paths == ["/wp-json/wp/v2/pages"]
        assert json.loads(handler.requests[0].content) == {"title": "About"}

    async def test_delete_user_reassign(self, site):
        """Users are always deleted with force."""
        client, handler = site
        await client.users.delete_user(3, reassign=1)

        params = handler.requests[0].url.params
        assert params["force"] == "true"
        assert params["reassign"] == "1"

    async def test_current_user(self, site):
        client, handler = site
        await client.users.get_current_user()
        assert handler.paths == ["/wp-json/wp/v2/users/me"]

    @pytest.mark.parametrize(
        "action, status",
        [("approve_comment", "approved"), ("reject_comment", "hold"), ("spam_comment", "spam")],
    )
    async def test_comment_moderation(self, site, action, status):
        client, handler = site
        await getattr(client.comments, action)(9)

        request = handler.requests[0]
        assert request.method == "PUT"
        assert request.url.path == "/wp-json/wp/v2/comments/9"
        assert json.loads(request.content) == {"status": status}

    async def test_delete_tag(self, site):
        client, handler = site
        await client.taxonomies.delete_tag(4, force=True)
        assert handler.paths == ["/wp-json/wp/v2/tags/4"]
        assert handler.requests[0].url.params["force"] == "true"


class TestMedia:
    """Tests for MediaOperations."""

    async def test_upload_media_multipart(self, site, tmp_path):
        client, handler = site
        path = tmp_path / "photo.png"
        path.write_bytes(b"\x89PNG fake")

        await client.media.upload_media(path, MediaMeta(title="Photo", alt_text="A photo"))

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/wp-json/wp/v2/media"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'filename="photo.png"' in request.content
        assert b"image/png" in request.content
        assert b'name="alt_text"' in request.content

    async def test_upload_media_missing_file(self, site, tmp_path):
        client, handler = site
        with pytest.raises(FileNotFoundError):
            await client.media.upload_media(tmp_path / "nope.jpg")
        assert handler.requests == []

    async def test_upload_media_sent_once(self, make_client, recorder, tmp_path):
        handler = recorder(httpx.Response(500))
        client = make_client(handler)
        path = tmp_path / "doc.pdf"
        path.write_bytes(b"%PDF")

        with pytest.raises(WordPressAPIError):
            await client.media.upload_media(path)

        assert len(handler.requests) == 1

    async def test_upload_file_applies_meta(self, site):
        """Raw uploads send disposition headers, then set metadata."""
        client, handler = site

        result = await client.media.upload_file(
            b"GIF89a", "pixel.gif", "image/gif", {"alt_text": "Pixel"},
            RequestOptions(headers={"X-Trace": "1"}),
        )

        assert result == {"id": 7}
        upload, meta = handler.requests
        assert upload.headers["content-type"] == "image/gif"
        assert upload.headers["content-disposition"] == 'attachment; filename="pixel.gif"'
        assert upload.headers["x-trace"] == "1"
        assert upload.content == b"GIF89a"
        assert meta.url.path == "/wp-json/wp/v2/media/7"
        assert json.loads(meta.content) == {"alt_text": "Pixel"}

    async def test_update_media_uses_post(self, site):
        client, handler = site
        await client.media.update_media({"id": 7, "caption": "Hi"})

        request = handler.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/wp-json/wp/v2/media/7"


class TestSite:
    """Tests for SiteOperations."""

    async def test_site_info_uses_rest_index(self, site):
        client, handler = site
        await client.site.get_site_info()
        assert str(handler.requests[0].url) == "https://example.com/wp-json"

    async def test_search(self, site):
        client, handler = site
        await client.site.search("hello", types=["post"], subtype="page")

        url = handler.requests[0].url
        assert url.path == "/wp-json/wp/v2/search"
        assert url.params["search"] == "hello"
        assert url.params["type"] == "post"
        assert url.params["subtype"] == "page"

    async def test_application_passwords(self, site):
        client, handler = site
        await client.site.create_application_password("me", "CI bot")
        await client.site.delete_application_password(1, "abc-123")

        create, delete = handler.requests
        assert create.url.path == "/wp-json/wp/v2/users/me/application-passwords"
        assert json.loads(create.content) == {"name": "CI bot"}
        assert delete.method == "DELETE"
        assert delete.url.path == "/wp-json/wp/v2/users/1/application-passwords/abc-123"

    async def test_ping(self, make_client, recorder):
        up = make_client(recorder(httpx.Response(200, json={"name": "Site"})))
        down = make_client(recorder(httpx.Response(503)))

        assert await up.site.ping() is True
        assert await down.site.ping() is False

    async def test_server_info(self, make_client, recorder):
        index = {
            "name": "My Site",
            "description": "Just another WordPress site",
            "url": "https://example.com",
            "namespaces": ["oembed/1.0", "wp/v2"],
            "authentication": {"application-passwords": {}},
            "routes": {"/": {}, "/wp/v2/posts": {}},
        }
        client = make_client(recorder(httpx.Response(200, json=index)))

        info = await client.site.get_server_info()

        assert info["name"] == "My Site"
        assert info["namespaces"] == ["oembed/1.0", "wp/v2"]
        assert info["authentication"] == ["application-passwords"]
        assert info["route_count"] == 2
