"""Webhook integration for posting article links to a chat channel."""

from __future__ import annotations

import logging
from typing import Optional

import requests

LOGGER = logging.getLogger(__name__)


class NotificationError(RuntimeError):
    """Raised when the webhook call fails."""


def send_webhook_message(text: str, webhook_url: Optional[str], timeout: int = 10) -> None:
    """Post ``text`` to the configured webhook as ``{"text": ...}``."""

    if not webhook_url:
        raise NotificationError("Webhook URL is not configured")

    try:
        response = requests.post(webhook_url, json={"text": text}, timeout=timeout)
    except requests.RequestException as exc:
        raise NotificationError(f"Failed to send notification: {exc}") from exc

    if response.status_code != 200:
        LOGGER.error("Webhook returned status %s", response.status_code)
        raise NotificationError(
            f"Failed to send notification: {response.status_code} {response.text}"
        )
