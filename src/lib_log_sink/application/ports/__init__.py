"""Protocols the application layer depends on."""

from __future__ import annotations

from .files import FileSinkPort
from .mail import MailerPort
from .notice import NoticePort
from .settings import SettingsProviderPort
from .time import ClockPort
from .webhook import WebhookPort

__all__ = [
    "ClockPort",
    "FileSinkPort",
    "MailerPort",
    "NoticePort",
    "SettingsProviderPort",
    "WebhookPort",
]
