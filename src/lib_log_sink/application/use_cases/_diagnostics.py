"""Guarded diagnostic hook shared by the use cases."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None

logger = logging.getLogger(__name__)


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Wrap ``diagnostic`` so hook failures never reach the logging caller.

    Examples
    --------
    >>> seen = []
    >>> emit = build_diagnostic_emitter(lambda name, payload: seen.append(name))
    >>> emit("dispatched", {})
    >>> seen
    ['dispatched']
    >>> build_diagnostic_emitter(None)("dispatched", {}) is None
    True
    """

    if diagnostic is None:

        def _noop(name: str, payload: dict[str, Any]) -> None:
            return None

        return _noop

    def _emit(name: str, payload: dict[str, Any]) -> None:
        try:
            diagnostic(name, payload)
        except Exception:  # noqa: BLE001
            logger.error("Diagnostic hook raised while reporting %s", name, exc_info=True)

    return _emit


__all__ = ["DiagnosticHook", "build_diagnostic_emitter"]
