"""Upgrade legacy flat option stores to the grouped settings layout."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .settings import KEY_EMAIL, KEY_ENABLED, KEY_WEBHOOK_URL, SETTINGS_GROUP

SETTINGS_KEY = "log_sink_settings"
LEGACY_ENABLED_KEY = "log_sink_enabled"


def migrate_legacy_settings(
    store: Mapping[str, Any],
    *,
    settings_key: str = SETTINGS_KEY,
    legacy_key: str = LEGACY_ENABLED_KEY,
) -> dict[str, Any]:
    """Return a copy of ``store`` with grouped settings derived from the legacy flag.

    Nothing changes when grouped settings already exist or no legacy flag is
    present. The legacy on/off flag becomes the ``enabled`` switch; email and
    webhook start empty.

    Examples
    --------
    >>> migrated = migrate_legacy_settings({"log_sink_enabled": True})
    >>> migrated["log_sink_settings"]["general"]["enabled"]
    {'value': 'on', 'type': 'switch'}
    >>> migrate_legacy_settings({"log_sink_settings": {}, "log_sink_enabled": True})["log_sink_settings"]
    {}
    >>> migrate_legacy_settings({})
    {}
    """

    result = dict(store)
    if settings_key in result or legacy_key not in result:
        return result
    enabled = "on" if result[legacy_key] else ""
    result[settings_key] = {
        SETTINGS_GROUP: {
            KEY_ENABLED: {"value": enabled, "type": "switch"},
            KEY_EMAIL: {"value": "", "type": "email"},
            KEY_WEBHOOK_URL: {"value": "", "type": "url"},
        }
    }
    return result


__all__ = ["LEGACY_ENABLED_KEY", "SETTINGS_KEY", "migrate_legacy_settings"]
