"""Error taxonomy shared across layers."""

from __future__ import annotations


class SettingsUnavailableError(RuntimeError):
    """The configuration provider is missing or could not be read."""


class SinkError(RuntimeError):
    """A delivery target failed; contained at the dispatch boundary."""

    def __init__(self, sink: str, message: str) -> None:
        super().__init__(f"{sink} sink failed: {message}")
        self.sink = sink


__all__ = ["SettingsUnavailableError", "SinkError"]
