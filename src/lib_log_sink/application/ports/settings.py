"""Port describing the key-value configuration provider."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsProviderPort(Protocol):
    """Read grouped settings such as ``("general", "enabled")``.

    Implementations may raise
    :class:`~lib_log_sink.domain.errors.SettingsUnavailableError` when the
    backing store cannot be reached; the facility then behaves as disabled.
    """

    def get_option(self, group: str, key: str) -> Any:
        """Return the stored value or ``None`` when unset."""


__all__ = ["SettingsProviderPort"]
