"""Use cases composing the dispatch pipeline."""

from __future__ import annotations

from .dispatch import EMAIL_SUBJECT_SUFFIX, JSON_HEADERS, DispatchCallable, create_dispatch
from .format_record import TIMESTAMP_FORMAT, format_record, format_timestamp
from .read_settings import read_settings

__all__ = [
    "DispatchCallable",
    "EMAIL_SUBJECT_SUFFIX",
    "JSON_HEADERS",
    "TIMESTAMP_FORMAT",
    "create_dispatch",
    "format_record",
    "format_timestamp",
    "read_settings",
]
