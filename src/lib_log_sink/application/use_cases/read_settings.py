"""Take a fresh configuration snapshot from the provider."""

from __future__ import annotations

from lib_log_sink.application.ports.settings import SettingsProviderPort
from lib_log_sink.domain.errors import SettingsUnavailableError
from lib_log_sink.domain.settings import (
    KEY_EMAIL,
    KEY_ENABLED,
    KEY_WEBHOOK_URL,
    SETTINGS_GROUP,
    SettingsSnapshot,
    coerce_flag,
)


def _as_text(value: object) -> str:
    return "" if value is None else str(value).strip()


def read_settings(provider: SettingsProviderPort | None) -> SettingsSnapshot:
    """Query ``provider`` for every setting the pipeline needs.

    Raises
    ------
    SettingsUnavailableError
        When no provider is bound or the provider fails to answer.
    """

    if provider is None:
        raise SettingsUnavailableError("no settings provider is bound")
    try:
        enabled = provider.get_option(SETTINGS_GROUP, KEY_ENABLED)
        email = provider.get_option(SETTINGS_GROUP, KEY_EMAIL)
        webhook_url = provider.get_option(SETTINGS_GROUP, KEY_WEBHOOK_URL)
    except SettingsUnavailableError:
        raise
    except Exception as exc:
        raise SettingsUnavailableError(f"settings provider failed: {exc!r}") from exc
    return SettingsSnapshot(
        enabled=coerce_flag(enabled),
        email=_as_text(email),
        webhook_url=_as_text(webhook_url),
    )


__all__ = ["read_settings"]
