"""Wire adapters and use cases into a :class:`LogFacility`."""

from __future__ import annotations

from datetime import datetime

from lib_log_sink.adapters import AppendFileSink, EnvironmentSettings, LoggingNotice, RequestsWebhook, SmtpMailer
from lib_log_sink.application.ports import (
    ClockPort,
    FileSinkPort,
    MailerPort,
    NoticePort,
    SettingsProviderPort,
    WebhookPort,
)
from lib_log_sink.application.use_cases import create_dispatch

from ._facility import LogFacility
from ._settings import FacilitySettings


class SystemClock(ClockPort):
    """Local wall-clock time, as written into log lines."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


_UNSET = object()


def build_facility(
    settings: FacilitySettings,
    *,
    settings_provider: SettingsProviderPort | None | object = _UNSET,
    file_sink: FileSinkPort | None = None,
    mailer: MailerPort | None | object = _UNSET,
    webhook: WebhookPort | None | object = _UNSET,
    clock: ClockPort | None = None,
    notice: NoticePort | None = None,
) -> LogFacility:
    """Assemble a facility from resolved settings and optional adapter overrides.

    Omitted collaborators fall back to the bundled adapters. Passing ``None``
    explicitly for ``mailer`` or ``webhook`` disables that sink; passing
    ``None`` for ``settings_provider`` leaves the facility without settings,
    which keeps it silent.
    """

    provider = EnvironmentSettings() if settings_provider is _UNSET else settings_provider
    if mailer is _UNSET:
        mailer = _default_mailer(settings)
    if webhook is _UNSET:
        webhook = RequestsWebhook() if settings.webhook_enabled else None

    dispatch = create_dispatch(
        file_sink=file_sink or AppendFileSink(settings.logs_dir),
        mailer=mailer,  # type: ignore[arg-type]
        webhook=webhook,  # type: ignore[arg-type]
        clock=clock or SystemClock(),
        site_name=settings.site_name,
        admin_email=settings.admin_email,
        webhook_timeout=settings.webhook_timeout,
        diagnostic=settings.diagnostic_hook,
    )
    return LogFacility(
        settings_provider=provider,  # type: ignore[arg-type]
        dispatch=dispatch,
        notice=notice or LoggingNotice(),
        diagnostic=settings.diagnostic_hook,
    )


def _default_mailer(settings: FacilitySettings) -> MailerPort | None:
    if not settings.email_enabled:
        return None
    return SmtpMailer(host=settings.smtp_host, port=settings.smtp_port, sender=settings.smtp_sender)


__all__ = ["SystemClock", "build_facility"]
