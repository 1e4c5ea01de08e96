"""Tagged payload representation and rendering.

Purpose
-------
Callers hand the facility anything from a plain string to nested records. The
payload is wrapped once into a :class:`ScalarPayload` or
:class:`StructuredPayload` so every sink renders it through the same rules.

Contents
--------
* :class:`ScalarPayload` / :class:`StructuredPayload` - the tagged union.
* :func:`wrap_payload` - classify an arbitrary value.
* :func:`render_payload` - deterministic human-readable text.
* :func:`payload_to_json` - webhook body serialisation.

System Role
-----------
Shared by the record formatter (file line), the email body, and the webhook
body so the three sinks never disagree on what was logged.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from rich.pretty import pretty_repr


@dataclass(slots=True, frozen=True)
class ScalarPayload:
    """Payload rendered through its plain string form."""

    value: Any


@dataclass(slots=True, frozen=True)
class StructuredPayload:
    """Payload rendered through a multi-line deep print."""

    value: Any


Payload = Union[ScalarPayload, StructuredPayload]


def _is_structured(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray, Enum, BaseException)):
        return False
    if isinstance(value, (Mapping, list, tuple, Set)):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return hasattr(value, "__dict__") and not callable(value)


def _normalise_structure(value: Any) -> Any:
    """Turn plain objects into mappings so the deep print shows their fields."""

    if isinstance(value, (Mapping, list, tuple, Set)):
        return value
    if dataclasses.is_dataclass(value):
        return value
    return {type(value).__name__: dict(vars(value))}


def wrap_payload(value: Any) -> Payload:
    """Classify ``value`` into the tagged union.

    Examples
    --------
    >>> wrap_payload("disk full")
    ScalarPayload(value='disk full')
    >>> wrap_payload({"code": 500})
    StructuredPayload(value={'code': 500})
    """

    if isinstance(value, (ScalarPayload, StructuredPayload)):
        return value
    if _is_structured(value):
        return StructuredPayload(_normalise_structure(value))
    return ScalarPayload(value)


def render_payload(payload: Payload) -> str:
    """Return the text form of ``payload``.

    Scalars use ``str()`` (``None`` becomes the empty string); structured
    values are expanded one field per line with insertion order preserved.

    Examples
    --------
    >>> render_payload(ScalarPayload(42))
    '42'
    >>> render_payload(ScalarPayload(None))
    ''
    >>> print(render_payload(StructuredPayload({"code": 500, "path": "/"})))
    {
        'code': 500,
        'path': '/'
    }
    """

    if isinstance(payload, StructuredPayload):
        return pretty_repr(payload.value, expand_all=True)
    if payload.value is None:
        return ""
    if isinstance(payload.value, (bytes, bytearray)):
        return payload.value.decode("utf-8", errors="replace")
    return str(payload.value)


def is_empty(payload: Payload) -> bool:
    """Return ``True`` when there is nothing worth forwarding."""

    value = payload.value
    if value is None:
        return True
    if isinstance(value, (str, bytes, bytearray, Mapping, list, tuple, Set)):
        return len(value) == 0
    return False


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseException):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Set):
        return list(value)
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8", errors="replace")
    if hasattr(value, "__dict__"):
        return dict(vars(value))
    return str(value)


def payload_to_json(payload: Payload) -> str:
    """Serialise ``payload`` for the webhook; empty payloads give ``""``.

    Examples
    --------
    >>> payload_to_json(wrap_payload("payload"))
    '"payload"'
    >>> payload_to_json(wrap_payload({"code": 500}))
    '{"code": 500}'
    >>> payload_to_json(wrap_payload(""))
    ''
    """

    if is_empty(payload):
        return ""
    return json.dumps(payload.value, default=_json_default)


__all__ = [
    "Payload",
    "ScalarPayload",
    "StructuredPayload",
    "is_empty",
    "payload_to_json",
    "render_payload",
    "wrap_payload",
]
