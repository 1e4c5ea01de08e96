from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any, Callable

import pytest

from lib_log_sink import runtime
from lib_log_sink.adapters import AppendFileSink, StaticSettings
from lib_log_sink.application.use_cases import create_dispatch
from lib_log_sink.runtime import LogFacility
from tests.fakes import FakeFiles, FakeMailer, FakeWebhook, FixedClock, Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def settings() -> StaticSettings:
    return StaticSettings(enabled=True, email="", webhook_url="https://hooks.example.net/abc")


@pytest.fixture
def facility_factory(recorder: Recorder, settings: StaticSettings) -> Callable[..., LogFacility]:
    """Build facilities wired to recording fakes; keyword arguments swap parts."""

    def _build(
        *,
        provider: Any = settings,
        files: Any = None,
        mailer: Any = None,
        webhook: Any = None,
        notice: Any = None,
        diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
        site_name: str = "Shop",
        admin_email: str = "admin@example.com",
    ) -> LogFacility:
        dispatch = create_dispatch(
            file_sink=files or FakeFiles(recorder),
            mailer=mailer or FakeMailer(recorder),
            webhook=webhook or FakeWebhook(recorder),
            clock=FixedClock(),
            site_name=site_name,
            admin_email=admin_email,
            webhook_timeout=2.5,
            diagnostic=diagnostic,
        )
        return LogFacility(settings_provider=provider, dispatch=dispatch, notice=notice, diagnostic=diagnostic)

    return _build


@pytest.fixture
def disk_facility(tmp_path: Path, recorder: Recorder, settings: StaticSettings) -> LogFacility:
    """Facility writing real files under ``tmp_path`` with fake mail/webhook."""

    dispatch = create_dispatch(
        file_sink=AppendFileSink(tmp_path),
        mailer=FakeMailer(recorder),
        webhook=FakeWebhook(recorder),
        clock=FixedClock(),
        site_name="Shop",
        admin_email="admin@example.com",
    )
    return LogFacility(settings_provider=settings, dispatch=dispatch)


@pytest.fixture(autouse=True)
def _reset_singleton() -> Iterator[None]:
    runtime._reset_for_testing()
    yield
    runtime._reset_for_testing()


@pytest.fixture(autouse=True)
def _clear_sink_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_SINK_ENABLED",
        "LOG_SINK_EMAIL",
        "LOG_SINK_WEBHOOK_URL",
        "LOG_SINK_DIR",
        "LOG_SINK_SITE_NAME",
        "LOG_SINK_ADMIN_EMAIL",
        "LOG_SINK_WEBHOOK_TIMEOUT",
        "LOG_SINK_SMTP_HOST",
        "LOG_SINK_SMTP_PORT",
        "LOG_SINK_SMTP_SENDER",
        "LOG_SINK_EMAIL_ENABLED",
        "LOG_SINK_WEBHOOK_ENABLED",
        "LOG_SINK_USE_DOTENV",
    ):
        monkeypatch.delenv(name, raising=False)
