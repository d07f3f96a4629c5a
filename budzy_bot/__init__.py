"""
budzy-bot: Slack onboarding bot over HTTP webhooks.

Usage:
    from budzy_bot import load_config, create_web_app

    app = create_web_app(load_config())

Or run it directly:
    python -m budzy_bot
"""

from .config import BotConfig, BotMode, load_config, select_mode
from .events import HomeOpened, SlashCommand, TeamJoin, UnknownEvent, parse_command, parse_event
from .messages import build_home_view
from .server import create_bot_app, create_degraded_app, create_web_app
from .slack_adapter import SlackAdapter, create_slack_app

__all__ = [
    "BotConfig",
    "BotMode",
    "load_config",
    "select_mode",
    "SlashCommand",
    "HomeOpened",
    "TeamJoin",
    "UnknownEvent",
    "parse_command",
    "parse_event",
    "build_home_view",
    "SlackAdapter",
    "create_slack_app",
    "create_degraded_app",
    "create_bot_app",
    "create_web_app",
]
__version__ = "0.1.0"
