"""
Bot configuration and operating-mode selection.

Configuration is read once at startup from the environment (optionally
populated from a .env file). The mode is a plain value derived from it:
FULL when both Slack secrets are set, DEGRADED otherwise.
"""

import enum
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT = 10000
DEFAULT_HOST = "0.0.0.0"
BOT_NAME = "Budzy Onboarding Bot"
ONBOARD_COMMAND = "/onboard"

DEFAULT_LOG_LEVEL = "INFO"
# Names understood by both logging.basicConfig and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class BotMode(enum.Enum):
    """Operating mode, fixed for the lifetime of the process."""

    DEGRADED = "degraded"
    FULL = "full"


@dataclass(frozen=True)
class BotConfig:
    """Configuration for the onboarding bot.

    Slack credentials:
        signing_secret: Verifies inbound webhooks (SLACK_SIGNING_SECRET)
        bot_token: Authenticates outbound Web API calls (SLACK_BOT_TOKEN)

    Server:
        port: Listener port (PORT, default 10000)
        host: Bind address (HOST)
        log_level: Root log level (LOG_LEVEL)
    """

    signing_secret: Optional[str] = None
    bot_token: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    bot_name: str = BOT_NAME
    command: str = ONBOARD_COMMAND


def _parse_port(value: Optional[str]) -> int:
    if value is None or not value.strip():
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        raise ValueError(f"Invalid PORT: {value!r}") from None
    if not 0 < port < 65536:
        raise ValueError(f"Invalid PORT: {value!r}")
    return port


def _parse_log_level(value: Optional[str]) -> str:
    """Normalize LOG_LEVEL to a name both logging and uvicorn accept.

    Unknown values fall back to INFO so a typo never stops the process.
    """
    if value is None or not value.strip():
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        logger.warning(f"Invalid LOG_LEVEL {value!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def load_config(environ: Optional[Mapping[str, str]] = None) -> BotConfig:
    """
    Read the bot configuration.

    Args:
        environ: Mapping to read from. Defaults to os.environ, after loading
            a .env file (existing variables are not overridden).

    Returns:
        BotConfig

    Raises:
        ValueError: If PORT is not a valid port number
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    return BotConfig(
        signing_secret=environ.get("SLACK_SIGNING_SECRET"),
        bot_token=environ.get("SLACK_BOT_TOKEN"),
        port=_parse_port(environ.get("PORT")),
        host=environ.get("HOST") or DEFAULT_HOST,
        log_level=_parse_log_level(environ.get("LOG_LEVEL")),
    )


def select_mode(config: BotConfig) -> BotMode:
    """FULL if both Slack secrets are non-empty, DEGRADED otherwise."""
    has_slack_config = bool(
        config.signing_secret and config.signing_secret.strip()
        and config.bot_token and config.bot_token.strip()
    )
    return BotMode.FULL if has_slack_config else BotMode.DEGRADED
