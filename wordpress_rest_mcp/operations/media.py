"""Media library operations."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any

from ..body import BinaryBody, MultipartBody
from ..options import RequestOptions
from ..models import Context, MediaMeta, UpdateMediaRequest
from ..utils import build_query, dump_body
from .base import ResourceOperations, split_id


class MediaOperations(ResourceOperations):
    """Listing, uploading and editing attachments under ``/wp/v2/media``."""

    async def get_media(self, params: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._client.get(f"media{build_query(params)}")

    async def get_media_item(self, media_id: int, context: Context = "view") -> dict[str, Any]:
        return await self._client.get(f"media/{media_id}?context={context}")

    async def upload_media(
        self,
        file_path: str | Path,
        meta: MediaMeta | dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Upload a file from disk as multipart/form-data.

        The file is streamed from its handle, so the request is sent at most
        once.

        Raises:
            FileNotFoundError: If ``file_path`` does not exist.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")

        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        fields = {k: str(v) for k, v in dump_body(meta or {}).items()}

        with path.open("rb") as handle:
            body = MultipartBody(files={"file": (path.name, handle, mime_type)}, fields=fields)
            return await self._client.post("media", body)

    async def upload_file(
        self,
        data: bytes,
        filename: str,
        mime_type: str,
        meta: MediaMeta | dict[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> dict[str, Any]:
        """Upload raw bytes, then apply ``meta`` to the new attachment.

        Raw uploads are replayable, so they keep the normal retry budget.
        """
        headers = {
            "Content-Type": mime_type,
            "Content-Disposition": f'attachment; filename="{filename}"',
        }
        if options is not None and options.headers:
            headers = {**options.headers, **headers}
        request_options = RequestOptions(
            headers=headers,
            timeout=options.timeout if options else None,
            retries=options.retries if options else None,
            params=options.params if options else None,
        )

        media = await self._client.post("media", BinaryBody(data), request_options)

        fields = dump_body(meta or {})
        if fields and isinstance(media, dict) and media.get("id"):
            media = await self._client.post(f"media/{media['id']}", fields)
        return media

    async def update_media(self, data: UpdateMediaRequest | dict[str, Any]) -> dict[str, Any]:
        media_id, body = split_id(data, "Media")
        return await self._client.post(f"media/{media_id}", body)

    async def delete_media(self, media_id: int, force: bool = False) -> dict[str, Any]:
        """Delete an attachment. WordPress requires ``force`` since media has no trash."""
        return await self._client.delete(f"media/{media_id}{build_query({'force': force})}")
