"""Admin notice adapter backed by the standard logging module."""

from __future__ import annotations

import logging

from lib_log_sink.application.ports.notice import NoticePort

_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "success": logging.INFO,
}


class LoggingNotice(NoticePort):
    """Forward operator notices to a stdlib logger and keep them for display."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("lib_log_sink.notice")
        self.messages: list[tuple[str, str]] = []

    def notify(self, message: str, *, level: str = "error") -> None:
        self.messages.append((level, message))
        self._logger.log(_LEVELS.get(level, logging.ERROR), message)


__all__ = ["LoggingNotice"]
