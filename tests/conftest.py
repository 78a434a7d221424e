"""Shared test fixtures for the GitHub → Discord relay."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.models import PullRequestEvent
from src.webhook.discord import DiscordSender

DISCORD_URL = "https://discord.test/api/webhooks/1/abc"


@pytest.fixture
def mock_sender() -> MagicMock:
    sender = MagicMock(spec=DiscordSender)
    sender.send = AsyncMock(return_value=None)
    return sender


# --- Factory functions for test data ---


def make_event_payload(
    action: str = "opened",
    number: int = 42,
    title: str = "Fix bug",
    html_url: str = "http://x/42",
    login: str = "alice",
    full_name: str = "acme/widgets",
    **kwargs: Any,
) -> dict[str, Any]:
    """Factory for a GitHub pull_request webhook body with sensible defaults."""
    payload: dict[str, Any] = {
        "action": action,
        "number": number,
        "pull_request": {
            "title": title,
            "html_url": html_url,
            "body": "Some description",
            "user": {"login": login, "id": 1},
            "head": {"ref": "fix-bug"},
            "base": {"ref": "main"},
        },
        "repository": {"full_name": full_name, "private": False},
        "sender": {"login": login},
    }
    payload.update(kwargs)
    return payload


def make_event(**kwargs: Any) -> PullRequestEvent:
    """Factory for PullRequestEvent built from make_event_payload."""
    return PullRequestEvent.model_validate(make_event_payload(**kwargs))
