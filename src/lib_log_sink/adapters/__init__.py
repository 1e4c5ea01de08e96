"""Concrete adapters for files, mail, webhooks, settings, and notices."""

from __future__ import annotations

from .bootstrap import prepare_logs_dir
from .file_sink import AppendFileSink
from .mail import SmtpMailer
from .notice import LoggingNotice
from .settings import EnvironmentSettings, MappingSettings, StaticSettings
from .webhook import RequestsWebhook

__all__ = [
    "AppendFileSink",
    "EnvironmentSettings",
    "LoggingNotice",
    "MappingSettings",
    "RequestsWebhook",
    "SmtpMailer",
    "StaticSettings",
    "prepare_logs_dir",
]
