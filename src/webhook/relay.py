"""Pull request relay pipeline.

Pipeline stages:
1. Action filter (opened, reopened, synchronize)
2. Terminal notification via logging
3. Forward to Discord when a webhook URL is configured

Forwarding failures are logged and reported in the outcome, never raised.
"""

from __future__ import annotations

import logging

from src.config import RelayConfig
from src.models import PullRequestEvent
from src.webhook.discord import DiscordDeliveryError, DiscordSender
from src.webhook.models import RelayOutcome
from src.webhook.notification import (
    build_discord_payload,
    format_terminal_notification,
    is_actionable,
)

logger = logging.getLogger(__name__)


class PullRequestRelay:
    def __init__(
        self,
        sender: DiscordSender | None,
        bot_username: str,
        avatar_url: str | None = None,
    ) -> None:
        self._sender = sender
        self._bot_username = bot_username
        self._avatar_url = avatar_url

    @classmethod
    def from_config(cls, config: RelayConfig) -> PullRequestRelay:
        sender = (
            DiscordSender(config.discord_webhook_url)
            if config.discord_webhook_url
            else None
        )
        return cls(
            sender=sender,
            bot_username=config.bot_username,
            avatar_url=config.avatar_url,
        )

    async def relay(self, event: PullRequestEvent) -> RelayOutcome:
        """Run the pipeline for one decoded event."""

        # Stage 1: Action filter
        if not is_actionable(event):
            logger.debug("Ignoring pull request action %r", event.action)
            return RelayOutcome(actionable=False)

        # Stage 2: Terminal notification
        logger.info("\n%s\n", format_terminal_notification(event))

        # Stage 3: Forward to Discord
        if self._sender is None:
            logger.warning(
                "Discord notification skipped: DISCORD_WEBHOOK_URL is not configured",
            )
            return RelayOutcome(actionable=True)

        payload = build_discord_payload(
            event, username=self._bot_username, avatar_url=self._avatar_url,
        )
        try:
            await self._sender.send(payload)
        except DiscordDeliveryError as exc:
            logger.error(
                "Failed to send PR #%d notification to Discord: %s", event.number, exc,
            )
            return RelayOutcome(actionable=True, error=str(exc))

        logger.info("✅ Notification for PR #%d sent to Discord", event.number)
        return RelayOutcome(actionable=True, forwarded=True)
