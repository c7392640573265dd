"""Request body variants.

Whether a body can be sent again on retry is a property of its type:
text, bytes and JSON can; multipart uploads and streams cannot, since the
first attempt consumes the underlying file object or iterator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class EmptyBody:
    replayable: ClassVar[bool] = True

    def to_httpx(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class TextBody:
    replayable: ClassVar[bool] = True

    text: str

    def to_httpx(self) -> dict[str, Any]:
        return {"content": self.text.encode("utf-8")}


@dataclass(frozen=True)
class BinaryBody:
    replayable: ClassVar[bool] = True

    data: bytes

    def to_httpx(self) -> dict[str, Any]:
        return {"content": self.data}


@dataclass(frozen=True)
class JsonBody:
    replayable: ClassVar[bool] = True

    payload: Any

    def to_httpx(self) -> dict[str, Any]:
        return {"json": self.payload}


@dataclass(frozen=True)
class MultipartBody:
    """multipart/form-data upload; ``files`` follows the httpx ``files`` format."""

    replayable: ClassVar[bool] = False

    files: dict[str, Any]
    fields: dict[str, str] = field(default_factory=dict)

    def to_httpx(self) -> dict[str, Any]:
        return {"files": self.files, "data": self.fields}


@dataclass(frozen=True)
class StreamBody:
    """A one-shot byte stream (async iterator or file-like object)."""

    replayable: ClassVar[bool] = False

    stream: Any

    def to_httpx(self) -> dict[str, Any]:
        return {"content": self.stream}


RequestBody = Union[EmptyBody, TextBody, BinaryBody, JsonBody, MultipartBody, StreamBody]

BODY_TYPES = (EmptyBody, TextBody, BinaryBody, JsonBody, MultipartBody, StreamBody)


def coerce_body(data: Any) -> RequestBody:
    """Map a raw value to its body variant.

    ``None`` is empty, ``str`` is text, ``bytes`` is binary, and mappings or
    sequences are JSON. Streams and uploads must be passed as explicit
    ``StreamBody``/``MultipartBody`` values.
    """
    if data is None:
        return EmptyBody()
    if isinstance(data, BODY_TYPES):
        return data
    if isinstance(data, str):
        return TextBody(data)
    if isinstance(data, (bytes, bytearray)):
        return BinaryBody(bytes(data))
    if hasattr(data, "model_dump"):
        return JsonBody(data.model_dump(exclude_none=True, mode="json"))
    return JsonBody(data)
