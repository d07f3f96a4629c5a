"""
Message texts and Block Kit documents sent by the bot.
"""

from typing import Dict, List

from .config import BOT_NAME, ONBOARD_COMMAND


def mention(user_id: str) -> str:
    return f"<@{user_id}>"


def onboard_greeting(user_id: str) -> str:
    """Ephemeral reply to the /onboard command."""
    return f"👋 Hi {mention(user_id)}! I'll help onboard folks here."


def team_welcome(user_id: str) -> str:
    """DM sent to a member who just joined the workspace."""
    return f"🎉 Welcome to the team, {mention(user_id)}!"


def _section(text: str) -> Dict:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def build_home_blocks(bot_name: str = BOT_NAME, command: str = ONBOARD_COMMAND) -> List[Dict]:
    return [
        _section(f"*Welcome to {bot_name}* 🎉"),
        _section(f"Use `{command}` in a channel to welcome new teammates."),
    ]


def build_home_view(bot_name: str = BOT_NAME, command: str = ONBOARD_COMMAND) -> Dict:
    """
    Home tab view for views.publish.

    Built fresh on every call; Slack replaces the whole tab on publish.
    """
    return {
        "type": "home",
        "blocks": build_home_blocks(bot_name, command),
    }
