"""Runtime façade: build, hold, and call the process-wide logging facility.

Purpose
-------
Expose a stable entry point (``init``, ``get_facility``, the nine severity
functions, and the positional ``log`` adapter) so host applications never
import the inner layers directly.

Contents
--------
* ``init`` - composition root installing the singleton once.
* ``get_facility`` - lazy, thread-safe access (builds an environment-driven
  facility on first use when ``init`` was never called).
* ``emergency`` … ``success`` - module-level shortcuts to the singleton.
* ``log`` - positional compatibility wrapper defaulting to debug.

System Role
-----------
Owns the only mutable global in the package. Everything below receives its
collaborators through constructors.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from lib_log_sink.adapters import LoggingNotice
from lib_log_sink.application.ports import (
    ClockPort,
    FileSinkPort,
    MailerPort,
    NoticePort,
    SettingsProviderPort,
    WebhookPort,
)
from lib_log_sink.application.use_cases._diagnostics import DiagnosticHook
from lib_log_sink.domain import LogOptions, LogRequest, SettingsSnapshot

from . import _state
from ._composition import _UNSET, SystemClock, build_facility
from ._facility import ENTRY_DEFAULTS, LogFacility, OptionsArg
from ._settings import FacilitySettings, build_facility_settings

logger = logging.getLogger(__name__)


def init(
    *,
    settings_provider: SettingsProviderPort | None | object = _UNSET,
    app_root: str | Path | None = None,
    logs_dir: str | Path | None = None,
    site_name: str = "",
    admin_email: str = "",
    webhook_timeout: float = 5.0,
    smtp_host: str = "localhost",
    smtp_port: int = 25,
    smtp_sender: str = "",
    email_enabled: bool = True,
    webhook_enabled: bool = True,
    file_sink: FileSinkPort | None = None,
    mailer: MailerPort | None | object = _UNSET,
    webhook: WebhookPort | None | object = _UNSET,
    clock: ClockPort | None = None,
    notice: NoticePort | None = None,
    diagnostic_hook: DiagnosticHook = None,
) -> LogFacility:
    """Compose the facility and install it as the process singleton.

    Why
    ---
    Hosts call ``init`` once during startup so the settings provider and the
    sink adapters are chosen in one place. Later calls to the severity
    functions reuse that instance.

    Inputs
    ------
    settings_provider:
        Key-value source for ``enabled``/``email``/``pipedream-url``. Defaults
        to :class:`~lib_log_sink.adapters.EnvironmentSettings`.
    app_root, logs_dir:
        Log files go to ``logs_dir`` or ``<app_root>/wp-logs``
        (``LOG_SINK_DIR`` overrides both).
    site_name, admin_email:
        Alert subject prefix and fallback recipient.
    webhook_timeout:
        Seconds allowed for one webhook POST.
    smtp_*, email_enabled, webhook_enabled:
        Settings for the bundled SMTP and HTTP adapters.
    file_sink, mailer, webhook, clock, notice:
        Adapter overrides; ``None`` for ``mailer``/``webhook`` disables the sink.
    diagnostic_hook:
        Callback receiving internal milestones and sink failures.

    Outputs
    -------
    The installed :class:`LogFacility`.

    Side Effects
    ------------
    Raises :class:`RuntimeError` when a facility is already installed and
    :class:`ValueError` for invalid numeric configuration.
    """

    settings = build_facility_settings(
        app_root=app_root,
        logs_dir=logs_dir,
        site_name=site_name,
        admin_email=admin_email,
        webhook_timeout=webhook_timeout,
        smtp_host=smtp_host,
        smtp_port=smtp_port,
        smtp_sender=smtp_sender,
        email_enabled=email_enabled,
        webhook_enabled=webhook_enabled,
        diagnostic_hook=diagnostic_hook,
    )
    facility = build_facility(
        settings,
        settings_provider=settings_provider,
        file_sink=file_sink,
        mailer=mailer,
        webhook=webhook,
        clock=clock,
        notice=notice,
    )
    _state.install_facility(facility)
    return facility


def _default_facility() -> LogFacility:
    try:
        settings = build_facility_settings()
    except ValueError as exc:
        logger.error("Invalid LOG_SINK_* configuration; logging stays disabled: %s", exc)
        return LogFacility(settings_provider=None, dispatch=_discard, notice=LoggingNotice())
    return build_facility(settings)


def _discard(request: LogRequest, settings: SettingsSnapshot) -> dict[str, Any]:
    return {}


def get_facility() -> LogFacility:
    """Return the singleton, creating an environment-configured one if needed."""

    return _state.ensure_facility(_default_facility)


def is_initialised() -> bool:
    """Return ``True`` once the singleton exists."""

    return _state.is_initialised()


def _reset_for_testing() -> None:
    """Drop the singleton so test cases start from the uninitialised state."""

    _state.clear_facility()


def emergency(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at emergency severity through the singleton."""
    get_facility().emergency(payload, options, **overrides)


def alert(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at alert severity through the singleton."""
    get_facility().alert(payload, options, **overrides)


def critical(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at critical severity through the singleton."""
    get_facility().critical(payload, options, **overrides)


def error(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at error severity through the singleton."""
    get_facility().error(payload, options, **overrides)


def warning(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at warning severity through the singleton."""
    get_facility().warning(payload, options, **overrides)


def notice(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at notice severity through the singleton."""
    get_facility().notice(payload, options, **overrides)


def info(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at info severity through the singleton."""
    get_facility().info(payload, options, **overrides)


def debug(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at debug severity through the singleton."""
    get_facility().debug(payload, options, **overrides)


def success(payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
    """Log ``payload`` at success severity through the singleton."""
    get_facility().success(payload, options, **overrides)


def log(payload: Any, flag: str = "d", file: str = "", instance_id: str = "") -> None:
    """Positional wrapper kept for older call sites.

    Routes through the debug entry point with ``flag`` selecting the actual
    severity, so ``log("boom", "c")`` still writes ``critical.log``.
    """

    get_facility().debug(payload, LogOptions(flag=flag, target_file=file, instance_id=instance_id))


__all__ = [
    "ENTRY_DEFAULTS",
    "FacilitySettings",
    "LogFacility",
    "SystemClock",
    "alert",
    "build_facility",
    "build_facility_settings",
    "critical",
    "debug",
    "emergency",
    "error",
    "get_facility",
    "info",
    "init",
    "is_initialised",
    "log",
    "notice",
    "success",
    "warning",
]
