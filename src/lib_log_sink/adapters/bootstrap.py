"""Provision the logs directory with web-server protection files."""

from __future__ import annotations

from pathlib import Path

INDEX_STUB = "<?php\n// Silence is golden"
DENY_ALL_RULES = "Order Allow,Deny\nDeny from All"


def prepare_logs_dir(path: Path, *, mode: int = 0o755) -> bool:
    """Create ``path`` with an index stub and a deny-all ``.htaccess``.

    Returns ``True`` when the directory was created, ``False`` when it already
    existed (existing directories are left untouched).

    Examples
    --------
    >>> import tempfile
    >>> target = Path(tempfile.mkdtemp()) / "wp-logs"
    >>> prepare_logs_dir(target), prepare_logs_dir(target)
    (True, False)
    >>> sorted(item.name for item in target.iterdir())
    ['.htaccess', 'index.php']
    """

    target = Path(path)
    if target.exists():
        return False
    target.mkdir(mode=mode, parents=True)
    (target / "index.php").write_text(INDEX_STUB, encoding="utf-8")
    (target / ".htaccess").write_text(DENY_ALL_RULES, encoding="utf-8")
    return True


__all__ = ["DENY_ALL_RULES", "INDEX_STUB", "prepare_logs_dir"]
