"""Port for the outbound mail transport used by the alert sink."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class MailerPort(Protocol):
    """Deliver a plain-text message to one or more recipients."""

    def send(self, to: Sequence[str], subject: str, body: str) -> None:
        """Send the message; raise on transport failure."""


__all__ = ["MailerPort"]
