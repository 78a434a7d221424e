"""FastAPI application receiving GitHub pull request webhooks."""

from __future__ import annotations

import json
import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from src.config import RelayConfig, configure_logging
from src.models import PullRequestEvent
from src.webhook.relay import PullRequestRelay

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhook"
ACK_TEXT = "Webhook recibido correctamente"

# GitHub caps webhook deliveries at 25 MB
_MAX_WEBHOOK_BODY_SIZE = 25 * 1024 * 1024


def create_app_from_env() -> FastAPI:
    """Build the relay from the DISCORD_* variables (see RelayConfig.from_env).

    Also sets up root logging from LOG_LEVEL, so the PR notifications reach the
    terminal when the app is started with `uvicorn --factory`.
    """
    configure_logging()
    return create_app(RelayConfig.from_env())


def create_app(
    config: RelayConfig,
    relay: PullRequestRelay | None = None,
) -> FastAPI:
    """Create the relay app. ``relay`` defaults to one built from ``config``."""
    app = FastAPI(docs_url=None, redoc_url=None)
    pipeline = relay or PullRequestRelay.from_config(config)
    app.state.config = config
    app.state.relay = pipeline

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(WEBHOOK_PATH)
    async def github_webhook(request: Request) -> Response:
        body = await request.body()
        if len(body) > _MAX_WEBHOOK_BODY_SIZE:
            return PlainTextResponse("Payload too large", status_code=413)

        try:
            event = PullRequestEvent.model_validate(json.loads(body))
        except (ValueError, RecursionError, ValidationError) as exc:
            logger.warning("Error decoding webhook payload: %s", exc)
            return PlainTextResponse("Error decoding payload", status_code=400)

        await pipeline.relay(event)
        return PlainTextResponse(ACK_TEXT)

    return app
