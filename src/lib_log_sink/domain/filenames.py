"""Filesystem-safe naming for log targets."""

from __future__ import annotations

import re

from .severity import Severity

_FORBIDDEN = re.compile(r"""[?\[\]/\\=<>:;,'"&$#*()|~`!{}%+\x00-\x1f\x7f]""")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-{2,}")


def sanitize_segment(value: str) -> str:
    """Strip path separators and shell-hostile characters from ``value``.

    Whitespace runs become a single dash and leading/trailing dots, dashes,
    and underscores are removed so the segment can never climb directories.

    Examples
    --------
    >>> sanitize_segment("../../etc/passwd")
    'etcpasswd'
    >>> sanitize_segment(" my report ")
    'my-report'
    >>> sanitize_segment("db:1")
    'db1'
    """

    cleaned = _FORBIDDEN.sub("", value)
    cleaned = _WHITESPACE.sub("-", cleaned.strip())
    cleaned = _DASHES.sub("-", cleaned)
    return cleaned.strip(".-_")


def build_filename(severity: Severity, *, target_file: str = "", instance_id: str = "") -> str:
    """Return ``<stem>[-<id>].log`` for the given request fields.

    The explicit ``target_file`` wins when it survives sanitising; otherwise the
    severity's default stem is used.

    Examples
    --------
    >>> build_filename(Severity.ERROR, instance_id="db1")
    'error-db1.log'
    >>> build_filename(Severity.DEBUG, target_file="checkout")
    'checkout.log'
    >>> build_filename(Severity.INFO, target_file="///")
    'info.log'
    """

    stem = sanitize_segment(target_file) or severity.file_stem
    suffix = sanitize_segment(instance_id)
    if suffix:
        return f"{stem}-{suffix}.log"
    return f"{stem}.log"


__all__ = ["build_filename", "sanitize_segment"]
