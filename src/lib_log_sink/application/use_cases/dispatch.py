"""Use case delivering one classified record to the file, email, and webhook sinks.

Purpose
-------
Turn a :class:`LogRequest` plus the current settings snapshot into side
effects. Each sink is attempted on its own: a failing mail server must not
cost the log line, and a dead webhook must not cost the alert.

Contents
--------
* :func:`create_dispatch` - factory freezing the sink wiring into a callable.
* :data:`EMAIL_SUBJECT_SUFFIX` / :data:`JSON_HEADERS` constants.

System Role
-----------
Invoked by :class:`lib_log_sink.runtime.LogFacility` after the enabled gate.
Nothing raised inside a sink escapes :func:`create_dispatch`'s callable.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from lib_log_sink.application.ports import ClockPort, FileSinkPort, MailerPort, WebhookPort
from lib_log_sink.domain.filenames import build_filename
from lib_log_sink.domain.payload import payload_to_json, render_payload
from lib_log_sink.domain.request import LogRequest
from lib_log_sink.domain.settings import SettingsSnapshot
from lib_log_sink.domain.severity import Severity, classify

from ._diagnostics import DiagnosticHook, build_diagnostic_emitter
from .format_record import format_record

logger = logging.getLogger(__name__)

EMAIL_SUBJECT_SUFFIX = "has encountered a critical error!"
JSON_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}

DispatchResult = dict[str, Any]
DispatchCallable = Callable[[LogRequest, SettingsSnapshot], DispatchResult]


@dataclass(frozen=True)
class _SinkToolkit:
    file_sink: FileSinkPort
    mailer: MailerPort | None
    webhook: WebhookPort | None
    clock: ClockPort
    site_name: str
    admin_email: str
    webhook_timeout: float
    emit: Callable[[str, dict[str, Any]], None]


def create_dispatch(
    *,
    file_sink: FileSinkPort,
    mailer: MailerPort | None,
    webhook: WebhookPort | None,
    clock: ClockPort,
    site_name: str,
    admin_email: str,
    webhook_timeout: float = 5.0,
    diagnostic: DiagnosticHook = None,
) -> DispatchCallable:
    """Build the dispatcher capturing the sink wiring.

    Parameters
    ----------
    file_sink:
        Append-only target for formatted records.
    mailer:
        Transport for critical/emergency alerts; ``None`` skips the email sink.
    webhook:
        HTTP client for the webhook sink; ``None`` skips it.
    clock:
        Source of the local timestamp stamped on each line.
    site_name:
        Name used in the alert subject.
    admin_email:
        Fallback recipient when no override address is configured.
    webhook_timeout:
        Upper bound in seconds for a single webhook request.
    diagnostic:
        Optional callback receiving ``(event_name, payload)`` milestones.

    Returns
    -------
    Callable[[LogRequest, SettingsSnapshot], dict[str, Any]]
        Function returning a per-sink outcome map such as
        ``{"severity": "ERROR", "file": "written", "email": "skipped",
        "webhook": "skipped"}``.

    Examples
    --------
    >>> from datetime import datetime
    >>> from lib_log_sink.domain.request import LogOptions
    >>> class Files:
    ...     def __init__(self):
    ...         self.lines = []
    ...     def append(self, filename, text):
    ...         self.lines.append((filename, text))
    >>> class Clock:
    ...     def now(self):
    ...         return datetime(2024, 3, 7, 13, 5, 9)
    >>> files = Files()
    >>> dispatch = create_dispatch(file_sink=files, mailer=None, webhook=None, clock=Clock(),
    ...                            site_name="Shop", admin_email="ops@example.com")
    >>> request = LogRequest.build("disk full", LogOptions(flag="e", instance_id="db1"))
    >>> dispatch(request, SettingsSnapshot(enabled=True))["file"]
    'written'
    >>> files.lines
    [('error-db1.log', 'ERROR 03-07-24 01:05:09: disk full\\n')]
    """

    if webhook_timeout <= 0:
        raise ValueError("webhook_timeout must be positive")

    toolkit = _SinkToolkit(
        file_sink=file_sink,
        mailer=mailer,
        webhook=webhook,
        clock=clock,
        site_name=site_name,
        admin_email=admin_email,
        webhook_timeout=webhook_timeout,
        emit=build_diagnostic_emitter(diagnostic),
    )

    def dispatch(request: LogRequest, settings: SettingsSnapshot) -> DispatchResult:
        severity = classify(request.flag)
        result: DispatchResult = {"severity": severity.display_name}
        result["file"] = _deliver_file(toolkit, request, severity)
        result["email"] = _deliver_email(toolkit, request, severity, settings)
        result["webhook"] = _deliver_webhook(toolkit, request, settings)
        toolkit.emit("dispatched", dict(result))
        return result

    return dispatch


def _deliver_file(toolkit: _SinkToolkit, request: LogRequest, severity: Severity) -> str:
    filename = build_filename(severity, target_file=request.target_file, instance_id=request.instance_id)
    try:
        line = format_record(severity, toolkit.clock.now(), request.payload)
        toolkit.file_sink.append(filename, line)
    except Exception as exc:  # noqa: BLE001
        _report_failure(toolkit, "file", exc, {"filename": filename})
        return "failed"
    return "written"


def _deliver_email(
    toolkit: _SinkToolkit,
    request: LogRequest,
    severity: Severity,
    settings: SettingsSnapshot,
) -> str:
    if not severity.sends_email or toolkit.mailer is None:
        return "skipped"
    recipients = settings.recipients or _fallback_recipients(toolkit.admin_email)
    if not recipients:
        logger.warning("No recipient available for %s alert; email skipped", severity.display_name)
        return "skipped"
    subject = f"{toolkit.site_name} {EMAIL_SUBJECT_SUFFIX}".strip()
    try:
        body = render_payload(request.payload)
        toolkit.mailer.send(recipients, subject, body)
    except Exception as exc:  # noqa: BLE001
        _report_failure(toolkit, "email", exc, {"recipients": list(recipients)})
        return "failed"
    return "sent"


def _deliver_webhook(toolkit: _SinkToolkit, request: LogRequest, settings: SettingsSnapshot) -> str:
    if not request.forward_to_webhook or toolkit.webhook is None:
        return "skipped"
    url = settings.valid_webhook_url
    if url is None:
        if settings.webhook_url:
            toolkit.emit("webhook_skipped_invalid_url", {"url": settings.webhook_url})
        return "skipped"
    try:
        body = payload_to_json(request.payload)
        toolkit.webhook.post(url, headers=dict(JSON_HEADERS), body=body, timeout=toolkit.webhook_timeout)
    except Exception as exc:  # noqa: BLE001
        _report_failure(toolkit, "webhook", exc, {"url": url})
        return "failed"
    return "posted"


def _fallback_recipients(admin_email: str) -> tuple[str, ...]:
    address = admin_email.strip()
    return (address,) if address else ()


def _report_failure(toolkit: _SinkToolkit, sink: str, exc: Exception, details: dict[str, Any]) -> None:
    logger.error("Log %s sink failed; record dropped for this sink", sink, exc_info=exc)
    toolkit.emit(f"{sink}_sink_error", {**details, "exception": repr(exc)})


__all__ = [
    "DispatchCallable",
    "DispatchResult",
    "EMAIL_SUBJECT_SUFFIX",
    "JSON_HEADERS",
    "create_dispatch",
]
