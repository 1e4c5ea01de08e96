"""Public package surface of the severity-leveled logging facility.

Import the nine severity functions (``emergency`` through ``success``) and
call them anywhere; use :func:`init` at startup to pick the settings provider
and the sink adapters.
"""

from __future__ import annotations

from .domain import LogOptions, Severity, classify
from .runtime import (
    LogFacility,
    alert,
    critical,
    debug,
    emergency,
    error,
    get_facility,
    info,
    init,
    is_initialised,
    log,
    notice,
    success,
    warning,
)

__all__ = [
    "LogFacility",
    "LogOptions",
    "Severity",
    "alert",
    "classify",
    "critical",
    "debug",
    "emergency",
    "error",
    "get_facility",
    "info",
    "init",
    "is_initialised",
    "log",
    "notice",
    "success",
    "warning",
]
