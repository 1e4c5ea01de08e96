"""Requests-based webhook adapter implementing :class:`WebhookPort`."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from lib_log_sink.application.ports.webhook import WebhookPort
from lib_log_sink.domain.errors import SinkError

logger = logging.getLogger(__name__)


class RequestsWebhook(WebhookPort):
    """POST log payloads with a bounded timeout.

    Transport errors (and non-2xx answers when ``raise_for_status`` is on)
    surface as :class:`SinkError` so the dispatcher records a sink failure.
    """

    def __init__(self, *, session: requests.Session | None = None, raise_for_status: bool = False) -> None:
        self._session = session
        self._raise_for_status = raise_for_status

    def post(self, url: str, *, headers: Mapping[str, str], body: str, timeout: float) -> None:
        """Send ``body`` to ``url``; the response content is not inspected."""
        sender = self._session.post if self._session is not None else requests.post
        try:
            response = sender(url, data=body.encode("utf-8"), headers=dict(headers), timeout=timeout)
            logger.debug("Webhook %s answered %s", url, response.status_code)
            if self._raise_for_status:
                response.raise_for_status()
        except requests.RequestException as exc:
            raise SinkError("webhook", str(exc)) from exc


__all__ = ["RequestsWebhook"]
