"""Per-call options and the immutable log request.

Purpose
-------
Replace loose option bags with a typed structure: each entry point owns a set
of defaults and callers override individual fields. ``None`` means "not
supplied" so an explicit ``False`` or empty string still wins over a default.

Contents
--------
* :class:`LogOptions` - optional overrides with field-wise merging.
* :class:`LogRequest` - frozen unit of work handed to the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from .payload import Payload, wrap_payload


@dataclass(slots=True, frozen=True)
class LogOptions:
    """Caller-facing knobs accepted by every severity entry point.

    Attributes
    ----------
    flag:
        Short severity token; entry points supply their own default.
    instance_id:
        Suffix appended to the target file as ``-<id>``.
    target_file:
        Explicit file stem overriding the severity-derived one.
    forward_to_webhook:
        Opt into posting the payload to the configured webhook.
    """

    flag: str | None = None
    instance_id: str | None = None
    target_file: str | None = None
    forward_to_webhook: bool | None = None

    def merged_with(self, overrides: "LogOptions | None") -> "LogOptions":
        """Return a copy where every non-``None`` field of ``overrides`` wins.

        Examples
        --------
        >>> defaults = LogOptions(flag="e", forward_to_webhook=False)
        >>> defaults.merged_with(LogOptions(instance_id="db1"))
        LogOptions(flag='e', instance_id='db1', target_file=None, forward_to_webhook=False)
        >>> defaults.merged_with(None) == defaults
        True
        """

        if overrides is None:
            return self
        values: dict[str, Any] = {}
        for item in fields(self):
            override = getattr(overrides, item.name)
            values[item.name] = getattr(self, item.name) if override is None else override
        return LogOptions(**values)


def _clean(value: str | None) -> str:
    return "" if value is None else str(value).strip()


@dataclass(slots=True, frozen=True)
class LogRequest:
    """Fully defaulted description of one logging call."""

    payload: Payload
    flag: str
    instance_id: str = ""
    target_file: str = ""
    forward_to_webhook: bool = False

    @classmethod
    def build(cls, payload: Any, options: LogOptions) -> "LogRequest":
        """Create a request from a raw payload and resolved options.

        String fields are trimmed; missing values collapse to empty strings.

        Examples
        --------
        >>> request = LogRequest.build("disk full", LogOptions(flag=" e ", instance_id=" db1 "))
        >>> request.flag, request.instance_id, request.forward_to_webhook
        ('e', 'db1', False)
        """

        return cls(
            payload=wrap_payload(payload),
            flag=_clean(options.flag),
            instance_id=_clean(options.instance_id),
            target_file=_clean(options.target_file),
            forward_to_webhook=bool(options.forward_to_webhook),
        )


__all__ = ["LogOptions", "LogRequest"]
