"""Relay configuration read once from the environment at startup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_BOT_USERNAME = "GitHub PR Bot"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class RelayConfig:
    discord_webhook_url: str | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    bot_username: str = DEFAULT_BOT_USERNAME
    avatar_url: str | None = None

    @property
    def forwarding_enabled(self) -> bool:
        return bool(self.discord_webhook_url)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RelayConfig:
        """Build the configuration from ``environ`` (defaults to ``os.environ``).

        Empty strings count as unset, so ``DISCORD_WEBHOOK_URL=""`` disables
        forwarding just like leaving it out.
        """
        env = os.environ if environ is None else environ
        return cls(
            discord_webhook_url=env.get("DISCORD_WEBHOOK_URL") or None,
            host=env.get("HOST") or DEFAULT_HOST,
            port=_parse_port(env.get("PORT")),
            bot_username=env.get("DISCORD_USERNAME") or DEFAULT_BOT_USERNAME,
            avatar_url=env.get("DISCORD_AVATAR_URL") or None,
        )


def _parse_port(raw: str | None) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"PORT must be between 1 and 65535, got {port}")
    return port


def configure_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the root logger at ``level`` (or $LOG_LEVEL).

    No-op when the root logger already has handlers.
    """
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if name not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {name!r}")
    logging.basicConfig(level=name, format=LOG_FORMAT)
