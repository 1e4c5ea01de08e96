"""Configuration snapshot consulted once per dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

SETTINGS_GROUP = "general"
KEY_ENABLED = "enabled"
KEY_EMAIL = "email"
KEY_WEBHOOK_URL = "pipedream-url"

_TRUTHY = {"1", "true", "yes", "on"}


def coerce_flag(value: object) -> bool:
    """Interpret switch-style setting values (``"on"``, ``"1"``, ``True``).

    Examples
    --------
    >>> coerce_flag("on"), coerce_flag(""), coerce_flag(None), coerce_flag(1)
    (True, False, False, True)
    """

    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def is_valid_url(value: str) -> bool:
    """Return ``True`` for absolute URLs with a scheme and a host.

    Examples
    --------
    >>> is_valid_url("https://example.m.pipedream.net")
    True
    >>> is_valid_url("not-a-url")
    False
    >>> is_valid_url("http:///path-only")
    False
    """

    if not value or any(char.isspace() for char in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc) and bool(parts.hostname)


def split_recipients(value: str) -> tuple[str, ...]:
    """Split a comma-separated address list, dropping blanks.

    Examples
    --------
    >>> split_recipients(" ops@example.com, ,dev@example.com ")
    ('ops@example.com', 'dev@example.com')
    """

    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(slots=True, frozen=True)
class SettingsSnapshot:
    """Values read from the configuration provider for a single call."""

    enabled: bool = False
    email: str = ""
    webhook_url: str = ""

    @property
    def recipients(self) -> tuple[str, ...]:
        """Configured override recipients (may be empty)."""

        return split_recipients(self.email)

    @property
    def valid_webhook_url(self) -> str | None:
        """Return the webhook URL when it passes validation, else ``None``."""

        return self.webhook_url if is_valid_url(self.webhook_url) else None


DISABLED = SettingsSnapshot()


__all__ = [
    "DISABLED",
    "KEY_EMAIL",
    "KEY_ENABLED",
    "KEY_WEBHOOK_URL",
    "SETTINGS_GROUP",
    "SettingsSnapshot",
    "coerce_flag",
    "is_valid_url",
    "split_recipients",
]
