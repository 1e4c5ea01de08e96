"""Domain value objects used by the dispatch pipeline."""

from __future__ import annotations

from .errors import SettingsUnavailableError, SinkError
from .filenames import build_filename, sanitize_segment
from .migration import migrate_legacy_settings
from .payload import Payload, ScalarPayload, StructuredPayload, payload_to_json, render_payload, wrap_payload
from .request import LogOptions, LogRequest
from .settings import SettingsSnapshot, is_valid_url
from .severity import Severity, classify

__all__ = [
    "LogOptions",
    "LogRequest",
    "Payload",
    "ScalarPayload",
    "Severity",
    "SettingsSnapshot",
    "SettingsUnavailableError",
    "SinkError",
    "StructuredPayload",
    "build_filename",
    "classify",
    "is_valid_url",
    "migrate_legacy_settings",
    "payload_to_json",
    "render_payload",
    "sanitize_segment",
    "wrap_payload",
]
