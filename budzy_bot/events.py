"""
Inbound Slack payloads as a small tagged union.

Bolt hands listeners raw dicts; these types pin down the fields the bot
actually reads so handlers never poke at payload shapes themselves.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class SlashCommand:
    command: str
    user_id: str
    channel_id: str = ""


@dataclass(frozen=True)
class HomeOpened:
    user_id: str
    tab: str = "home"


@dataclass(frozen=True)
class TeamJoin:
    user_id: str


@dataclass(frozen=True)
class UnknownEvent:
    """Any event kind the bot does not handle. Acked and ignored."""

    type: str


InboundEvent = Union[HomeOpened, TeamJoin, UnknownEvent]


def parse_command(command: Dict[str, Any]) -> SlashCommand:
    """Build a SlashCommand from a slash-command payload."""
    return SlashCommand(
        command=command.get("command", ""),
        user_id=command.get("user_id", ""),
        channel_id=command.get("channel_id", ""),
    )


def parse_event(event: Dict[str, Any]) -> InboundEvent:
    """
    Classify an Events API `event` dict.

    app_home_opened carries the viewer in `user`; team_join carries a full
    user object whose `id` is the new member. Payloads missing the user are
    treated as unknown.
    """
    event_type = event.get("type", "")

    if event_type == "app_home_opened":
        user_id = event.get("user")
        if user_id:
            return HomeOpened(user_id=user_id, tab=event.get("tab", "home"))

    elif event_type == "team_join":
        user = event.get("user")
        if isinstance(user, dict) and user.get("id"):
            return TeamJoin(user_id=user["id"])

    return UnknownEvent(type=event_type or "unknown")
