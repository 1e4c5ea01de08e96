"""Configuration providers implementing :class:`SettingsProviderPort`.

Purpose
-------
Give host applications ready-made settings sources: an in-memory store that
can be flipped at runtime, a grouped mapping (as persisted by admin panels),
and a reader over ``LOG_SINK_*`` environment variables.

Contents
--------
* :class:`StaticSettings` - thread-safe in-memory values.
* :class:`MappingSettings` - ``{"general": {"enabled": {"value": ...}}}`` stores.
* :class:`EnvironmentSettings` - environment variables read on every call.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from typing import Any

from lib_log_sink.application.ports.settings import SettingsProviderPort
from lib_log_sink.domain.settings import KEY_EMAIL, KEY_ENABLED, KEY_WEBHOOK_URL, SETTINGS_GROUP

ENV_ENABLED = "LOG_SINK_ENABLED"
ENV_EMAIL = "LOG_SINK_EMAIL"
ENV_WEBHOOK_URL = "LOG_SINK_WEBHOOK_URL"

_ENV_KEYS = {
    KEY_ENABLED: ENV_ENABLED,
    KEY_EMAIL: ENV_EMAIL,
    KEY_WEBHOOK_URL: ENV_WEBHOOK_URL,
}


class StaticSettings(SettingsProviderPort):
    """Hold the three general settings in memory.

    Examples
    --------
    >>> settings = StaticSettings(enabled=True)
    >>> settings.get_option("general", "enabled")
    True
    >>> settings.update(enabled=False)
    >>> settings.get_option("general", "enabled")
    False
    """

    def __init__(self, *, enabled: bool = True, email: str = "", webhook_url: str = "") -> None:
        self._lock = threading.Lock()
        self._values: dict[str, Any] = {
            KEY_ENABLED: enabled,
            KEY_EMAIL: email,
            KEY_WEBHOOK_URL: webhook_url,
        }

    def update(self, *, enabled: bool | None = None, email: str | None = None, webhook_url: str | None = None) -> None:
        """Replace the supplied values; takes effect on the next log call."""
        changes = {KEY_ENABLED: enabled, KEY_EMAIL: email, KEY_WEBHOOK_URL: webhook_url}
        with self._lock:
            for key, value in changes.items():
                if value is not None:
                    self._values[key] = value

    def get_option(self, group: str, key: str) -> Any:
        if group != SETTINGS_GROUP:
            return None
        with self._lock:
            return self._values.get(key)


class MappingSettings(SettingsProviderPort):
    """Read settings from a grouped mapping.

    Leaf values may be stored directly or wrapped as ``{"value": ..., "type": ...}``.
    The mapping is consulted live, so mutations by the owner are visible.

    Examples
    --------
    >>> store = {"general": {"enabled": {"value": "on", "type": "switch"}}}
    >>> MappingSettings(store).get_option("general", "enabled")
    'on'
    >>> MappingSettings(store).get_option("general", "email") is None
    True
    """

    def __init__(self, store: Mapping[str, Mapping[str, Any]]) -> None:
        self._store = store

    def get_option(self, group: str, key: str) -> Any:
        section = self._store.get(group) or {}
        value = section.get(key)
        if isinstance(value, Mapping):
            return value.get("value")
        return value


class EnvironmentSettings(SettingsProviderPort):
    """Read ``LOG_SINK_ENABLED`` / ``LOG_SINK_EMAIL`` / ``LOG_SINK_WEBHOOK_URL``.

    ``LOG_SINK_ENABLED`` defaults to enabled when unset.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get_option(self, group: str, key: str) -> Any:
        if group != SETTINGS_GROUP:
            return None
        name = _ENV_KEYS.get(key)
        if name is None:
            return None
        environ = self._environ if self._environ is not None else os.environ
        value = environ.get(name)
        if key == KEY_ENABLED and value is None:
            return True
        return value


__all__ = [
    "ENV_EMAIL",
    "ENV_ENABLED",
    "ENV_WEBHOOK_URL",
    "EnvironmentSettings",
    "MappingSettings",
    "StaticSettings",
]
