"""Severity descriptors and flag classification.

Purpose
-------
Map the short flag tokens accepted by the public API onto the nine fixed
severities, each carrying its display name and default log file stem.

Contents
--------
* :class:`Severity` enum with presentation metadata.
* :func:`classify` - total flag lookup falling back to :attr:`Severity.DEBUG`.

System Role
-----------
Consulted by the dispatch use case before formatting so the record prefix, the
target filename, and the email decision all derive from one descriptor.
"""

from __future__ import annotations

from enum import Enum


class Severity(Enum):
    """Enumerated severities keyed by their short flag token.

    Display names keep the historical mixed casing of the log format: the four
    loud levels are upper-case, the remaining ones are capitalised.

    Examples
    --------
    >>> Severity.ERROR.display_name
    'ERROR'
    >>> Severity.WARNING.file_stem
    'warning'
    """

    EMERGENCY = "em"
    ALERT = "a"
    CRITICAL = "c"
    ERROR = "e"
    WARNING = "w"
    NOTICE = "n"
    INFO = "i"
    DEBUG = "d"
    SUCCESS = "s"

    @property
    def flag(self) -> str:
        """Return the short token selecting this severity."""

        return self.value

    @property
    def display_name(self) -> str:
        """Return the label written at the start of each log line."""

        return _DISPLAY_NAMES[self]

    @property
    def file_stem(self) -> str:
        """Return the default log file stem (lower-cased display name)."""

        return self.display_name.lower()

    @property
    def sends_email(self) -> bool:
        """Return ``True`` for the severities that alert the operator by mail."""

        return self in (Severity.CRITICAL, Severity.EMERGENCY)


_DISPLAY_NAMES = {
    Severity.EMERGENCY: "EMERGENCY",
    Severity.ALERT: "ALERT",
    Severity.CRITICAL: "CRITICAL",
    Severity.ERROR: "ERROR",
    Severity.WARNING: "Warning",
    Severity.NOTICE: "Notice",
    Severity.INFO: "Info",
    Severity.DEBUG: "Debug",
    Severity.SUCCESS: "Success",
}


def classify(flag: str | None) -> Severity:
    """Resolve ``flag`` to its :class:`Severity`, defaulting to ``DEBUG``.

    Unknown, empty, or ``None`` flags never raise; they select the debug
    descriptor. Surrounding whitespace is ignored, case is not.

    Examples
    --------
    >>> classify("em") is Severity.EMERGENCY
    True
    >>> classify(" c ") is Severity.CRITICAL
    True
    >>> classify("verbose") is Severity.DEBUG
    True
    >>> classify(None) is Severity.DEBUG
    True
    """

    if not flag:
        return Severity.DEBUG
    try:
        return Severity(str(flag).strip())
    except ValueError:
        return Severity.DEBUG


__all__ = ["Severity", "classify"]
