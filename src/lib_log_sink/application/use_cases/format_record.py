"""Render one log line from severity, timestamp, and payload."""

from __future__ import annotations

from datetime import datetime

from lib_log_sink.domain.payload import Payload, render_payload, wrap_payload
from lib_log_sink.domain.severity import Severity

#: Month-day-year with a 12-hour clock and no AM/PM marker, as in existing log files.
TIMESTAMP_FORMAT = "%m-%d-%y %I:%M:%S"


def format_timestamp(timestamp: datetime) -> str:
    """Return ``MM-DD-YY hh:mm:ss`` for ``timestamp``.

    Examples
    --------
    >>> format_timestamp(datetime(2024, 3, 7, 13, 5, 9))
    '03-07-24 01:05:09'
    """

    return timestamp.strftime(TIMESTAMP_FORMAT)


def format_record(severity: Severity, timestamp: datetime, payload: Payload | object) -> str:
    """Return ``<DISPLAY_NAME> <timestamp>: <payload>`` terminated by a newline.

    Examples
    --------
    >>> format_record(Severity.ERROR, datetime(2024, 3, 7, 13, 5, 9), "disk full")
    'ERROR 03-07-24 01:05:09: disk full\\n'
    """

    rendered = render_payload(wrap_payload(payload))
    return f"{severity.display_name} {format_timestamp(timestamp)}: {rendered}\n"


__all__ = ["TIMESTAMP_FORMAT", "format_record", "format_timestamp"]
