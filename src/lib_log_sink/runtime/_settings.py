"""Composition settings for the facility, with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from lib_log_sink.application.use_cases._diagnostics import DiagnosticHook

DEFAULT_LOGS_DIRNAME = "wp-logs"
DEFAULT_WEBHOOK_TIMEOUT = 5.0
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class FacilitySettings:
    """Resolved wiring options consumed by :func:`build_facility`."""

    logs_dir: Path
    site_name: str
    admin_email: str
    webhook_timeout: float
    smtp_host: str
    smtp_port: int
    smtp_sender: str
    email_enabled: bool
    webhook_enabled: bool
    diagnostic_hook: DiagnosticHook = None


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_SINK_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_SINK_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_SINK_EXAMPLE_BOOL'] = 'off'
    >>> _env_bool('LOG_SINK_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from exc


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def build_facility_settings(
    *,
    app_root: str | Path | None = None,
    logs_dir: str | Path | None = None,
    site_name: str = "",
    admin_email: str = "",
    webhook_timeout: float = DEFAULT_WEBHOOK_TIMEOUT,
    smtp_host: str = "localhost",
    smtp_port: int = 25,
    smtp_sender: str = "",
    email_enabled: bool = True,
    webhook_enabled: bool = True,
    diagnostic_hook: DiagnosticHook = None,
) -> FacilitySettings:
    """Merge keyword arguments with ``LOG_SINK_*`` environment overrides.

    Environment variables win over arguments, mirroring how deployments tune
    an embedded library without code changes.

    Raises
    ------
    ValueError
        When numeric overrides cannot be parsed or are out of range.
    """

    root = Path(app_root) if app_root is not None else Path.cwd()
    default_dir = Path(logs_dir) if logs_dir is not None else root / DEFAULT_LOGS_DIRNAME
    resolved_dir = Path(os.getenv("LOG_SINK_DIR") or default_dir)

    timeout = _env_float("LOG_SINK_WEBHOOK_TIMEOUT", webhook_timeout)
    if timeout <= 0:
        raise ValueError("webhook timeout must be positive")
    port = _env_int("LOG_SINK_SMTP_PORT", smtp_port)
    if not 0 < port < 65536:
        raise ValueError("SMTP port must be between 1 and 65535")

    return FacilitySettings(
        logs_dir=resolved_dir,
        site_name=os.getenv("LOG_SINK_SITE_NAME", site_name),
        admin_email=os.getenv("LOG_SINK_ADMIN_EMAIL", admin_email),
        webhook_timeout=timeout,
        smtp_host=os.getenv("LOG_SINK_SMTP_HOST", smtp_host),
        smtp_port=port,
        smtp_sender=os.getenv("LOG_SINK_SMTP_SENDER", smtp_sender),
        email_enabled=_env_bool("LOG_SINK_EMAIL_ENABLED", email_enabled),
        webhook_enabled=_env_bool("LOG_SINK_WEBHOOK_ENABLED", webhook_enabled),
        diagnostic_hook=diagnostic_hook,
    )


__all__ = ["DEFAULT_LOGS_DIRNAME", "DEFAULT_WEBHOOK_TIMEOUT", "FacilitySettings", "build_facility_settings"]
