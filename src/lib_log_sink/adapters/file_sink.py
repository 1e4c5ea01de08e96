"""Append-only file adapter implementing :class:`FileSinkPort`.

Purpose
-------
Write complete records to ``<logs_dir>/<filename>`` so concurrent callers in
one process never interleave partial lines, while separate processes rely on
``O_APPEND`` semantics for small writes.

Contents
--------
* :class:`AppendFileSink` - striped per-file mutex plus one ``os.write`` loop per record.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path

from lib_log_sink.application.ports.files import FileSinkPort

_FLAGS = os.O_WRONLY | os.O_APPEND | os.O_CREAT | getattr(os, "O_BINARY", 0)
_LOCK_STRIPES = 64


class AppendFileSink(FileSinkPort):
    """Append encoded records to files inside ``logs_dir``.

    Examples
    --------
    >>> import tempfile
    >>> sink = AppendFileSink(Path(tempfile.mkdtemp()))
    >>> sink.append("debug.log", "Debug 01-02-24 03:04:05: one\\n")
    >>> sink.append("debug.log", "Debug 01-02-24 03:04:06: two\\n")
    >>> (sink.logs_dir / "debug.log").read_text(encoding="utf-8").count("\\n")
    2
    """

    def __init__(self, logs_dir: Path, *, file_mode: int = 0o640, create_dir: bool = True) -> None:
        """Bind the adapter to ``logs_dir``; the directory is created lazily."""
        self._logs_dir = Path(logs_dir)
        self._file_mode = file_mode
        self._create_dir = create_dir
        self._locks = tuple(threading.Lock() for _ in range(_LOCK_STRIPES))

    @property
    def logs_dir(self) -> Path:
        """Return the directory receiving log files."""

        return self._logs_dir

    def append(self, filename: str, text: str) -> None:
        """Append ``text`` to ``filename`` atomically with respect to this process."""
        if not filename or Path(filename).name != filename:
            raise ValueError(f"filename must be a bare file name: {filename!r}")
        target = self._logs_dir / filename
        data = text.encode("utf-8")
        with self._lock_for(filename):
            if self._create_dir:
                self._logs_dir.mkdir(parents=True, exist_ok=True)
            fd = os.open(target, _FLAGS, self._file_mode)
            try:
                view = memoryview(data)
                while view:
                    written = os.write(fd, view)
                    view = view[written:]
            finally:
                os.close(fd)

    def _lock_for(self, filename: str) -> threading.Lock:
        """Map ``filename`` onto a fixed pool so the lock table never grows."""

        return self._locks[hash(filename) % len(self._locks)]


__all__ = ["AppendFileSink"]
