from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from lib_log_sink.adapters import StaticSettings
from lib_log_sink.domain import LogOptions
from lib_log_sink.runtime import ENTRY_DEFAULTS, LogFacility
from lib_log_sink.runtime._facility import SETTINGS_NOTICE
from tests.fakes import ExplodingSettings, Recorder, RecordingNotice
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]

ENTRY_POINTS = ["emergency", "alert", "critical", "error", "warning", "notice", "info", "debug", "success"]

Factory = Callable[..., LogFacility]


@pytest.mark.parametrize(
    "entry, filename, prefix",
    [
        ("emergency", "emergency.log", "EMERGENCY "),
        ("alert", "alert.log", "ALERT "),
        ("critical", "critical.log", "CRITICAL "),
        ("error", "error.log", "ERROR "),
        ("warning", "warning.log", "Warning "),
        ("notice", "notice.log", "Notice "),
        ("info", "info.log", "Info "),
        ("debug", "debug.log", "Debug "),
        ("success", "success.log", "Success "),
    ],
)
def test_each_entry_point_writes_its_own_file(
    facility_factory: Factory, recorder: Recorder, entry: str, filename: str, prefix: str
) -> None:
    getattr(facility_factory(), entry)("hello")
    (written,) = recorder.named("file")
    assert written["filename"] == filename
    assert written["text"].startswith(prefix)


@pytest.mark.parametrize("entry", ENTRY_POINTS)
def test_disabled_logging_has_no_effects(facility_factory: Factory, recorder: Recorder, entry: str) -> None:
    facility = facility_factory(provider=StaticSettings(enabled=False, webhook_url="https://h.example"))
    result = getattr(facility, entry)({"code": 500})
    assert result is None
    assert recorder.calls == []


def test_only_debug_forwards_to_the_webhook_by_default(facility_factory: Factory, recorder: Recorder) -> None:
    facility = facility_factory()
    for entry in ENTRY_POINTS:
        getattr(facility, entry)("x")
    assert len(recorder.named("webhook")) == 1
    assert [severity.flag for severity, options in ENTRY_DEFAULTS.items() if options.forward_to_webhook] == ["d"]


def test_debug_webhook_can_be_switched_off(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().debug("x", forward_to_webhook=False)
    assert recorder.named("webhook") == []


def test_error_can_opt_into_the_webhook(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().error("payload", LogOptions(forward_to_webhook=True))
    assert recorder.named("webhook")[0]["body"] == '"payload"'


def test_keyword_overrides_beat_options(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().error("x", LogOptions(instance_id="a", target_file="orders"), instance_id="b")
    assert recorder.named("file")[0]["filename"] == "orders-b.log"


def test_flag_override_changes_severity(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().debug("x", flag="c")
    assert recorder.named("file")[0]["filename"] == "critical.log"
    assert len(recorder.named("email")) == 1


def test_sanitised_instance_id_is_applied(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().error("x", instance_id="../db 1")
    assert recorder.named("file")[0]["filename"] == "error-db-1.log"


def test_unknown_keyword_is_logged_and_ignored(
    facility_factory: Factory, recorder: Recorder, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR):
        facility_factory().error("x", colour="red")
    assert recorder.calls == []
    assert any("Unsupported logging options" in record.getMessage() for record in caplog.records)


def test_options_may_be_passed_as_a_mapping(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().error("disk full", {"instance_id": "db1", "forward_to_webhook": True})
    assert recorder.named("file")[0]["filename"] == "error-db1.log"
    assert recorder.named("webhook")[0]["body"] == '"disk full"'


def test_mapping_keywords_still_win_over_mapping_options(facility_factory: Factory, recorder: Recorder) -> None:
    facility_factory().warning("x", {"instance_id": "a"}, instance_id="b")
    assert recorder.named("file")[0]["filename"] == "warning-b.log"


@pytest.mark.parametrize("options", [{"colour": "red"}, 42, "db1", object()])
def test_malformed_options_are_logged_and_ignored(
    facility_factory: Factory, recorder: Recorder, caplog: pytest.LogCaptureFixture, options: object
) -> None:
    with caplog.at_level(logging.ERROR):
        facility_factory().critical("x", options)  # type: ignore[arg-type]
    assert recorder.calls == []
    assert any("Unsupported logging options" in record.getMessage() for record in caplog.records)


def test_settings_changes_apply_to_the_next_call(facility_factory: Factory, recorder: Recorder, settings: StaticSettings) -> None:
    facility = facility_factory()
    facility.info("first")
    settings.update(enabled=False)
    facility.info("second")
    settings.update(enabled=True)
    facility.info("third")
    texts = [call["text"] for call in recorder.named("file")]
    assert [text.rsplit(": ", 1)[1] for text in texts] == ["first\n", "third\n"]


def test_missing_settings_notify_once_and_log_nothing(facility_factory: Factory, recorder: Recorder) -> None:
    notice = RecordingNotice()
    events: list[str] = []
    facility = facility_factory(provider=None, notice=notice, diagnostic=lambda name, payload: events.append(name))
    for entry in ENTRY_POINTS:
        getattr(facility, entry)("x")
    assert recorder.calls == []
    assert notice.messages == [("error", SETTINGS_NOTICE)]
    assert events.count("settings_unavailable") == 1


def test_failing_settings_provider_behaves_like_a_missing_one(facility_factory: Factory, recorder: Recorder) -> None:
    notice = RecordingNotice()
    provider = ExplodingSettings()
    facility = facility_factory(provider=provider, notice=notice)
    facility.critical("x")
    facility.critical("y")
    assert recorder.calls == []
    assert len(notice.messages) == 1
    assert provider.lookups == 2


def test_broken_notice_channel_is_contained(facility_factory: Factory) -> None:
    class Broken:
        def notify(self, message: str, *, level: str = "error") -> None:
            raise RuntimeError("no admin screen")

    facility_factory(provider=None, notice=Broken()).error("x")


def test_unexpected_dispatch_errors_never_reach_the_caller(settings: StaticSettings) -> None:
    events: list[tuple[str, dict[str, Any]]] = []

    def dispatch(request: Any, snapshot: Any) -> dict[str, Any]:
        raise RuntimeError("boom")

    facility = LogFacility(
        settings_provider=settings,
        dispatch=dispatch,
        diagnostic=lambda name, payload: events.append((name, payload)),
    )
    facility.error("x")
    assert events[0][0] == "dispatch_error"


def test_real_files_receive_formatted_lines(disk_facility: LogFacility, tmp_path: Path) -> None:
    disk_facility.error("disk full", instance_id="db1")
    disk_facility.error("still full", instance_id="db1")
    assert (tmp_path / "error-db1.log").read_text(encoding="utf-8") == (
        "ERROR 03-07-24 01:05:09: disk full\nERROR 03-07-24 01:05:09: still full\n"
    )
