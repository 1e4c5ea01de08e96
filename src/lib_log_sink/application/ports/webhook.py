"""Port for the HTTP client posting payloads to a webhook."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class WebhookPort(Protocol):
    """POST a body to ``url`` within ``timeout`` seconds."""

    def post(self, url: str, *, headers: Mapping[str, str], body: str, timeout: float) -> None:
        """Issue the request; raise on transport failure."""


__all__ = ["WebhookPort"]
