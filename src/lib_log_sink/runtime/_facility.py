"""The logging facility: enabled gate plus the nine severity entry points.

Purpose
-------
Give application code one object to call. Every entry point merges the
caller's options over its own defaults, checks the ``enabled`` switch, and
hands the request to the dispatcher. Nothing raised below this layer reaches
the caller.

Contents
--------
* :class:`LogFacility` - the facility instance.
* :data:`ENTRY_DEFAULTS` - per-severity default options.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from typing import Any

from lib_log_sink.application.ports import NoticePort, SettingsProviderPort
from lib_log_sink.application.use_cases import DispatchCallable, read_settings
from lib_log_sink.application.use_cases._diagnostics import build_diagnostic_emitter
from lib_log_sink.domain import LogOptions, LogRequest, Severity, SettingsUnavailableError

logger = logging.getLogger(__name__)

ENTRY_DEFAULTS: dict[Severity, LogOptions] = {
    severity: LogOptions(flag=severity.flag, forward_to_webhook=severity is Severity.DEBUG) for severity in Severity
}
"""Default options per entry point; only ``debug`` forwards to the webhook."""

SETTINGS_NOTICE = "Logging is disabled because its settings provider is unavailable."

OptionsArg = LogOptions | Mapping[str, Any] | None
"""Entry point options: a :class:`LogOptions`, a plain mapping of its fields, or ``None``."""


class LogFacility:
    """Severity-named logging front door bound to one settings provider.

    Parameters
    ----------
    settings_provider:
        Source of ``enabled``/``email``/``pipedream-url``; read on every call.
        ``None`` (or a failing provider) makes every call a no-op.
    dispatch:
        Callable produced by
        :func:`~lib_log_sink.application.use_cases.create_dispatch`.
    notice:
        Optional operator notice channel told once when settings are missing.
    diagnostic:
        Optional ``(event_name, payload)`` callback.
    """

    def __init__(
        self,
        *,
        settings_provider: SettingsProviderPort | None,
        dispatch: DispatchCallable,
        notice: NoticePort | None = None,
        diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
    ) -> None:
        self._settings_provider = settings_provider
        self._dispatch = dispatch
        self._notice = notice
        self._emit = build_diagnostic_emitter(diagnostic)
        self._notice_lock = threading.Lock()
        self._notice_sent = False

    @property
    def settings_provider(self) -> SettingsProviderPort | None:
        """Return the bound settings provider."""

        return self._settings_provider

    def emergency(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``EMERGENCY``; also mails the operator."""
        self._entry(Severity.EMERGENCY, payload, options, overrides)

    def alert(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``ALERT``."""
        self._entry(Severity.ALERT, payload, options, overrides)

    def critical(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``CRITICAL``; also mails the operator."""
        self._entry(Severity.CRITICAL, payload, options, overrides)

    def error(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``ERROR``."""
        self._entry(Severity.ERROR, payload, options, overrides)

    def warning(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``Warning``."""
        self._entry(Severity.WARNING, payload, options, overrides)

    def notice(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``Notice``."""
        self._entry(Severity.NOTICE, payload, options, overrides)

    def info(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``Info``."""
        self._entry(Severity.INFO, payload, options, overrides)

    def debug(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``Debug``; forwards to the webhook unless told otherwise."""
        self._entry(Severity.DEBUG, payload, options, overrides)

    def success(self, payload: Any, options: OptionsArg = None, **overrides: Any) -> None:
        """Log at ``Success``."""
        self._entry(Severity.SUCCESS, payload, options, overrides)

    def _entry(
        self,
        severity: Severity,
        payload: Any,
        options: OptionsArg,
        overrides: dict[str, Any],
    ) -> None:
        """Resolve options for ``severity`` and run the shared log routine.

        Keyword overrides (``instance_id``, ``target_file``,
        ``forward_to_webhook``, ``flag``) take precedence over ``options``,
        which take precedence over the entry point defaults. ``options`` may be a
        mapping of :class:`LogOptions` field names. Malformed options are logged
        and the call is dropped.
        """
        try:
            if isinstance(options, Mapping):
                options = LogOptions(**options)
            resolved = ENTRY_DEFAULTS[severity].merged_with(options).merged_with(LogOptions(**overrides))
        except (TypeError, AttributeError):
            logger.error("Unsupported logging options %r %s; call ignored", options, sorted(overrides), exc_info=True)
            return
        self._log(payload, resolved)

    def _log(self, payload: Any, options: LogOptions) -> None:
        try:
            settings = read_settings(self._settings_provider)
        except SettingsUnavailableError as exc:
            self._report_settings_unavailable(exc)
            return
        if not settings.enabled:
            return
        try:
            request = LogRequest.build(payload, options)
            self._dispatch(request, settings)
        except Exception as exc:  # noqa: BLE001
            logger.error("Log dispatch raised unexpectedly; call dropped", exc_info=exc)
            self._emit("dispatch_error", {"exception": repr(exc)})

    def _report_settings_unavailable(self, exc: SettingsUnavailableError) -> None:
        with self._notice_lock:
            if self._notice_sent:
                return
            self._notice_sent = True
        logger.warning("%s (%s)", SETTINGS_NOTICE, exc)
        self._emit("settings_unavailable", {"exception": repr(exc)})
        if self._notice is None:
            return
        try:
            self._notice.notify(SETTINGS_NOTICE, level="error")
        except Exception:  # noqa: BLE001
            logger.error("Admin notice channel raised; continuing", exc_info=True)


__all__ = ["ENTRY_DEFAULTS", "LogFacility", "OptionsArg", "SETTINGS_NOTICE"]
