"""Shared plumbing for resource operation wrappers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..utils import dump_body

if TYPE_CHECKING:
    from ..client import WordPressClient


class ResourceOperations:
    """Base for wrappers that delegate to a ``WordPressClient``."""

    def __init__(self, client: WordPressClient):
        self._client = client


def split_id(data: Any, resource: str) -> tuple[int, dict[str, Any]]:
    """Separate the ``id`` of an update request from the fields to send.

    Raises:
        ValueError: If no id is present.
    """
    body = dump_body(data)
    resource_id = body.pop("id", None)
    if resource_id is None:
        raise ValueError(f"{resource} ID is required for updates")
    return resource_id, body
