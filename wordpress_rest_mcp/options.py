"""Per-call request options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RequestOptions:
    """Per-call overrides for ``WordPressClient.request``."""

    headers: dict[str, str] | None = None
    timeout: int | None = None  # milliseconds
    retries: int | None = None
    params: dict[str, Any] | None = None
