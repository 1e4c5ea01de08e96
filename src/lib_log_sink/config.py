"""Optional ``.env`` loading for hosts and the CLI.

Values already present in the environment always win over the file so a
deployment can pin settings while developers keep local defaults in ``.env``.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_SINK_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)

_LOADED_PATH: Path | None = None
_LOCK = threading.Lock()


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the env toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` found by walking up from the working directory.

    Returns the resolved file path, or ``None`` when no file was found. Only
    the first successful load per process touches the environment.
    """

    global _LOADED_PATH
    with _LOCK:
        if _LOADED_PATH is not None:
            return _LOADED_PATH
        candidate = find_dotenv(usecwd=True)
        if not candidate:
            logger.debug("No .env file found")
            return None
        path = Path(candidate).resolve()
        load_dotenv(path, override=False)
        _LOADED_PATH = path
        return path


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` was loaded."""

    global _LOADED_PATH
    with _LOCK:
        _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
