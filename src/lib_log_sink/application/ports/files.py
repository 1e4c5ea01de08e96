"""Port for append-only log file targets."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSinkPort(Protocol):
    """Append complete records to named files inside the logs directory."""

    def append(self, filename: str, text: str) -> None:
        """Append ``text`` to ``filename`` without interleaving other writers."""


__all__ = ["FileSinkPort"]
