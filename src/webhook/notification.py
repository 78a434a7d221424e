"""Rendering of pull request events into terminal text and Discord embeds."""

from __future__ import annotations

from dataclasses import dataclass

from src.models import (
    DiscordEmbed,
    DiscordEmbedAuthor,
    DiscordWebhookPayload,
    PullRequestAction,
    PullRequestEvent,
)


@dataclass(frozen=True)
class ActionStyle:
    label: str
    color: int


ACTION_STYLES: dict[PullRequestAction, ActionStyle] = {
    PullRequestAction.OPENED: ActionStyle(label="creado", color=5814783),
    PullRequestAction.REOPENED: ActionStyle(label="reabierto", color=16750899),
    PullRequestAction.SYNCHRONIZE: ActionStyle(label="actualizado", color=5763719),
}

DEFAULT_STYLE = ACTION_STYLES[PullRequestAction.OPENED]

_NOTIFIED_ACTIONS = frozenset(a.value for a in PullRequestAction)


def is_actionable(event: PullRequestEvent) -> bool:
    return event.action in _NOTIFIED_ACTIONS


def style_for(action: str) -> ActionStyle:
    """Label and embed color for ``action``; unknown actions get the opened style."""
    try:
        return ACTION_STYLES[PullRequestAction(action)]
    except ValueError:
        return DEFAULT_STYLE


def format_terminal_notification(event: PullRequestEvent) -> str:
    pr = event.pull_request
    return "\n".join([
        f"🔔 New PR #{event.number} in {event.repository.full_name}",
        f"📝 {pr.title}",
        f"👤 {pr.user.login}",
        f"🔗 {pr.html_url}",
    ])


def build_discord_payload(
    event: PullRequestEvent,
    username: str,
    avatar_url: str | None = None,
) -> DiscordWebhookPayload:
    """Build the single-embed Discord message for a pull request event."""
    style = style_for(event.action)
    pr = event.pull_request
    embed = DiscordEmbed(
        title=f"Pull Request #{event.number} {style.label}",
        description=pr.title,
        url=pr.html_url,
        color=style.color,
        author=DiscordEmbedAuthor(name=pr.user.login),
    )
    return DiscordWebhookPayload(
        username=username,
        avatar_url=avatar_url,
        embeds=[embed],
    )
