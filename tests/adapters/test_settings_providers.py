from __future__ import annotations

from lib_log_sink.adapters import EnvironmentSettings, MappingSettings, StaticSettings
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_static_settings_answer_only_the_general_group() -> None:
    settings = StaticSettings(enabled=True, email="ops@example.com")
    assert settings.get_option("general", "email") == "ops@example.com"
    assert settings.get_option("advanced", "email") is None


def test_static_settings_update_ignores_unspecified_fields() -> None:
    settings = StaticSettings(enabled=True, email="ops@example.com")
    settings.update(webhook_url="https://h.example")
    assert settings.get_option("general", "email") == "ops@example.com"
    assert settings.get_option("general", "pipedream-url") == "https://h.example"


def test_mapping_settings_accept_plain_and_wrapped_values() -> None:
    store = {"general": {"enabled": "on", "email": {"value": "ops@example.com", "type": "email"}}}
    settings = MappingSettings(store)
    assert settings.get_option("general", "enabled") == "on"
    assert settings.get_option("general", "email") == "ops@example.com"
    assert settings.get_option("missing", "enabled") is None


def test_mapping_settings_see_later_mutations() -> None:
    store: dict[str, dict[str, object]] = {"general": {"enabled": ""}}
    settings = MappingSettings(store)
    store["general"]["enabled"] = "on"
    assert settings.get_option("general", "enabled") == "on"


def test_environment_settings_default_to_enabled() -> None:
    settings = EnvironmentSettings(environ={})
    assert settings.get_option("general", "enabled") is True
    assert settings.get_option("general", "email") is None


def test_environment_settings_read_log_sink_variables() -> None:
    environ = {
        "LOG_SINK_ENABLED": "off",
        "LOG_SINK_EMAIL": "ops@example.com",
        "LOG_SINK_WEBHOOK_URL": "https://h.example",
    }
    settings = EnvironmentSettings(environ=environ)
    assert settings.get_option("general", "enabled") == "off"
    assert settings.get_option("general", "email") == "ops@example.com"
    assert settings.get_option("general", "pipedream-url") == "https://h.example"
    assert settings.get_option("general", "unknown") is None
