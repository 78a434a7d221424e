"""Discord incoming-webhook sender.

Posts one JSON message per call. Delivery is attempted once; callers decide
what to do with a :class:`DiscordDeliveryError`.
"""

from __future__ import annotations

import logging

import httpx

from src.models import DiscordWebhookPayload

logger = logging.getLogger(__name__)

_TIMEOUT_SECONDS = 10.0


class DiscordDeliveryError(Exception):
    """Raised when Discord rejects a message or cannot be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DiscordSender:
    """Sends notifications to a single Discord incoming webhook."""

    def __init__(self, webhook_url: str) -> None:
        self._webhook_url = webhook_url

    async def send(self, payload: DiscordWebhookPayload) -> None:
        """POST ``payload`` to the webhook.

        Any status >= 400 and any transport failure raise DiscordDeliveryError;
        transport failures keep the httpx exception as ``__cause__``.
        """
        headers = {"Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(verify=True) as client:
                resp = await client.post(
                    self._webhook_url,
                    json=payload.to_json_body(),
                    headers=headers,
                    timeout=_TIMEOUT_SECONDS,
                )
        except httpx.HTTPError as exc:
            raise DiscordDeliveryError(f"Discord request failed: {exc}") from exc

        if resp.status_code >= 400:
            raise DiscordDeliveryError(
                f"Discord returned status {resp.status_code}",
                status_code=resp.status_code,
            )
        logger.debug("Discord accepted message (status %d)", resp.status_code)
