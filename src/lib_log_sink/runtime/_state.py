"""Process-wide facility holder and access helpers."""

from __future__ import annotations

from collections.abc import Callable
from threading import RLock

from ._facility import LogFacility

_FACILITY: LogFacility | None = None
_FACILITY_LOCK = RLock()


def install_facility(facility: LogFacility) -> None:
    """Install ``facility`` as the process singleton; refuse a second one."""

    global _FACILITY
    with _FACILITY_LOCK:
        if _FACILITY is not None:
            raise RuntimeError("lib_log_sink is already initialised; init() may only run once per process")
        _FACILITY = facility


def ensure_facility(factory: Callable[[], LogFacility]) -> LogFacility:
    """Return the singleton, building it with ``factory`` on first access.

    Concurrent first callers race on the lock; exactly one runs ``factory``.
    """

    global _FACILITY
    current = _FACILITY
    if current is not None:
        return current
    with _FACILITY_LOCK:
        if _FACILITY is None:
            _FACILITY = factory()
        return _FACILITY


def is_initialised() -> bool:
    """Return ``True`` once a facility has been installed."""

    with _FACILITY_LOCK:
        return _FACILITY is not None


def clear_facility() -> None:
    """Forget the singleton; only test suites need this."""

    global _FACILITY
    with _FACILITY_LOCK:
        _FACILITY = None


__all__ = ["clear_facility", "ensure_facility", "install_facility", "is_initialised"]
