from __future__ import annotations

from lib_log_sink.domain.migration import migrate_legacy_settings
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_legacy_flag_on_becomes_enabled_switch() -> None:
    migrated = migrate_legacy_settings({"log_sink_enabled": 1})
    general = migrated["log_sink_settings"]["general"]
    assert general["enabled"] == {"value": "on", "type": "switch"}
    assert general["email"] == {"value": "", "type": "email"}
    assert general["pipedream-url"] == {"value": "", "type": "url"}


def test_legacy_flag_off_becomes_empty_switch() -> None:
    migrated = migrate_legacy_settings({"log_sink_enabled": ""})
    assert migrated["log_sink_settings"]["general"]["enabled"]["value"] == ""


def test_existing_grouped_settings_are_left_alone() -> None:
    store = {"log_sink_settings": {"general": {}}, "log_sink_enabled": True}
    assert migrate_legacy_settings(store) == store


def test_input_mapping_is_not_mutated() -> None:
    store = {"log_sink_enabled": True}
    migrate_legacy_settings(store)
    assert store == {"log_sink_enabled": True}


def test_custom_keys_are_honoured() -> None:
    migrated = migrate_legacy_settings({"old": True}, settings_key="new", legacy_key="old")
    assert "new" in migrated
