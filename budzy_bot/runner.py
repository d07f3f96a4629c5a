"""
Process entry point: read config once, pick the mode, serve.
"""

import logging

import uvicorn

from .config import BotConfig, BotMode, load_config, select_mode
from .server import create_web_app

logger = logging.getLogger(__name__)


def log_startup(config: BotConfig, mode: BotMode):
    if mode is BotMode.FULL:
        logger.info(f"Slack app running on port {config.port}")
    else:
        logger.info(f"Safe server running on port {config.port}")
        logger.info("Set SLACK_SIGNING_SECRET and SLACK_BOT_TOKEN to enable Slack features.")


def main():
    """Start the bot (or the degraded health server)."""
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    mode = select_mode(config)
    app = create_web_app(config, mode)

    log_startup(config, mode)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
