"""Click CLI for running and exercising the GitHub → Discord relay."""

from __future__ import annotations

import asyncio
import json
import logging
import os

import click
import uvicorn

from src.config import LOG_LEVELS, ConfigError, RelayConfig, configure_logging
from src.models import PullRequestEvent
from src.server.app import WEBHOOK_PATH, create_app
from src.webhook.notification import build_discord_payload, is_actionable
from src.webhook.relay import PullRequestRelay

logger = logging.getLogger(__name__)


def _load_config() -> RelayConfig:
    try:
        return RelayConfig.from_env()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _load_event(path: str) -> PullRequestEvent:
    with open(path, encoding="utf-8") as f:
        try:
            return PullRequestEvent.model_validate(json.load(f))
        except (ValueError, RecursionError) as exc:
            raise click.ClickException(f"Invalid pull request event in {path}: {exc}") from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=lambda: os.environ.get("LOG_LEVEL", "INFO"),
    show_default="INFO or $LOG_LEVEL",
    help="Logging level.",
)
def cli(log_level: str) -> None:
    """GitHub pull request → Discord relay."""
    try:
        configure_logging(log_level)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command()
@click.option("--host", default=None, help="Bind address (overrides $HOST).")
@click.option(
    "--port",
    type=click.IntRange(0, 65535),
    default=None,
    help="Listening port (overrides $PORT).",
)
def serve(host: str | None, port: int | None) -> None:
    """Run the webhook HTTP server."""
    config = _load_config()
    bind_host = host if host is not None else config.host
    bind_port = port if port is not None else config.port

    if not config.forwarding_enabled:
        logger.warning(
            "⚠️ DISCORD_WEBHOOK_URL is not configured. Notifications will only "
            "appear in the terminal.",
        )
        logger.warning(
            "   Set it with: export DISCORD_WEBHOOK_URL='https://discord.com/api/webhooks/...'",
        )

    logger.info("🚀 Starting GitHub notification server on port %d", bind_port)
    logger.info(
        "🔧 Point your repository's webhook at http://<public-host>:%d%s "
        "(content type application/json, pull request events)",
        bind_port,
        WEBHOOK_PATH,
    )
    uvicorn.run(create_app(config), host=bind_host, port=bind_port)


@cli.command()
@click.argument("event_file", type=click.Path(exists=True, dir_okay=False))
def preview(event_file: str) -> None:
    """Print the Discord message that EVENT_FILE would produce."""
    config = _load_config()
    event = _load_event(event_file)
    if not is_actionable(event):
        click.echo(f"Action {event.action!r} is not notified.", err=True)
        return
    payload = build_discord_payload(
        event, username=config.bot_username, avatar_url=config.avatar_url,
    )
    click.echo(json.dumps(payload.to_json_body(), indent=2, ensure_ascii=False))


@cli.command()
@click.argument("event_file", type=click.Path(exists=True, dir_okay=False))
def send(event_file: str) -> None:
    """Relay EVENT_FILE once, as if GitHub had delivered it."""
    config = _load_config()
    event = _load_event(event_file)
    outcome = asyncio.run(PullRequestRelay.from_config(config).relay(event))
    if not outcome.actionable:
        click.echo(f"Action {event.action!r} is not notified.", err=True)
    elif outcome.error:
        raise click.ClickException(outcome.error)
    elif outcome.forwarded:
        click.echo(f"Sent PR #{event.number} to Discord")
    else:
        click.echo("Discord webhook not configured; logged to terminal only", err=True)


if __name__ == "__main__":
    cli()
