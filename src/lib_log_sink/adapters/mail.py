"""SMTP adapter implementing :class:`MailerPort`."""

from __future__ import annotations

import smtplib
from collections.abc import Sequence
from email.message import EmailMessage

from lib_log_sink.application.ports.mail import MailerPort
from lib_log_sink.domain.errors import SinkError


class SmtpMailer(MailerPort):
    """Send plain-text alerts through an SMTP relay.

    Examples
    --------
    >>> mailer = SmtpMailer(host="localhost", sender="alerts@example.com")
    >>> message = mailer.build_message(["ops@example.com"], "Shop has encountered a critical error!", "boom")
    >>> message["To"], message["From"]
    ('ops@example.com', 'alerts@example.com')
    """

    def __init__(
        self,
        *,
        host: str = "localhost",
        port: int = 25,
        sender: str = "",
        timeout: float = 10.0,
        use_starttls: bool = False,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._sender = sender
        self._timeout = timeout
        self._use_starttls = use_starttls
        self._username = username
        self._password = password

    def build_message(self, to: Sequence[str], subject: str, body: str) -> EmailMessage:
        """Return the :class:`EmailMessage` that :meth:`send` would deliver."""
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = self._sender or (to[0] if to else "")
        message["To"] = ", ".join(to)
        message.set_content(body)
        return message

    def send(self, to: Sequence[str], subject: str, body: str) -> None:
        """Deliver the message once; failures propagate to the dispatcher."""
        if not to:
            raise ValueError("at least one recipient is required")
        message = self.build_message(to, subject, body)
        try:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as client:
                if self._use_starttls:
                    client.starttls()
                if self._username:
                    client.login(self._username, self._password or "")
                client.send_message(message)
        except (smtplib.SMTPException, OSError) as exc:
            raise SinkError("email", str(exc)) from exc


__all__ = ["SmtpMailer"]
