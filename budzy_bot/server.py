"""
HTTP surfaces for both operating modes.

DEGRADED: /health plus a no-op /slack/events that always answers 200, so
health checks pass and Slack stops retrying while credentials are missing.

FULL: /health plus /slack/events handed to slack-bolt, which verifies the
signature before any listener runs.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler
from slack_bolt.async_app import AsyncApp

from .config import BotConfig, BotMode, select_mode
from .slack_adapter import create_slack_app

logger = logging.getLogger(__name__)

SLACK_EVENTS_PATH = "/slack/events"
HEALTH_PATH = "/health"


def create_degraded_app() -> FastAPI:
    """Health server used when Slack credentials are not configured."""
    app = FastAPI(title="budzy-bot (unconfigured)")

    @app.get(HEALTH_PATH, response_class=PlainTextResponse)
    async def health() -> str:
        return "ok (Slack not configured yet)"

    @app.post(SLACK_EVENTS_PATH, response_class=PlainTextResponse)
    async def slack_events() -> str:
        logger.warning("Received /slack/events but Slack env vars are missing")
        return "Slack app not configured yet"

    return app


def create_bot_app(slack_app: AsyncApp) -> FastAPI:
    """Bot server wrapping a bolt app."""
    app = FastAPI(title="budzy-bot")
    handler = AsyncSlackRequestHandler(slack_app)

    @app.get(HEALTH_PATH, response_class=PlainTextResponse)
    async def health() -> str:
        return "ok"

    @app.post(SLACK_EVENTS_PATH)
    async def slack_events(req: Request):
        return await handler.handle(req)

    return app


def create_web_app(config: BotConfig, mode: Optional[BotMode] = None) -> FastAPI:
    """
    Build the web app for the given mode.

    Args:
        config: Bot configuration
        mode: Operating mode. Derived from config when omitted.
    """
    if mode is None:
        mode = select_mode(config)

    if mode is BotMode.FULL:
        return create_bot_app(create_slack_app(config))
    return create_degraded_app()
