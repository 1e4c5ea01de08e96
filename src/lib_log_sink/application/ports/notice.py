"""Port for operator-facing administrative notices."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NoticePort(Protocol):
    """Surface a message to whoever administers the host application."""

    def notify(self, message: str, *, level: str = "error") -> None:
        """Record ``message`` for display to the operator."""


__all__ = ["NoticePort"]
