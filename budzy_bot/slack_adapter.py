"""
SlackAdapter — Slack interface for the onboarding bot.

Builds the slack-bolt AsyncApp (signature verification, acks, payload
parsing) and registers the three listeners: the /onboard command, the
App Home tab and the team_join welcome DM.
"""

import logging
import re
from typing import Any, Dict, Optional

from slack_bolt.async_app import AsyncApp
from slack_sdk.web.async_client import AsyncWebClient

from .config import BotConfig
from .events import HomeOpened, TeamJoin, UnknownEvent, parse_command, parse_event
from .messages import build_home_view, onboard_greeting, team_welcome

logger = logging.getLogger(__name__)

ALL_EVENTS = re.compile(".*")


class SlackAdapter:
    """Slack HTTP-mode adapter. Routes verified payloads to the handlers."""

    def __init__(self, config: BotConfig, client: Optional[AsyncWebClient] = None):
        if not config.signing_secret or not config.bot_token:
            raise ValueError("Missing SLACK_SIGNING_SECRET or SLACK_BOT_TOKEN")

        self.config = config
        self.client = client or AsyncWebClient(token=config.bot_token)
        self.app = AsyncApp(
            signing_secret=config.signing_secret,
            client=self.client,
        )
        self._register_handlers()

    def _register_handlers(self):
        """Register Slack listeners."""

        @self.app.command(self.config.command)
        async def handle_command(ack, command, respond):
            await self.handle_onboard_command(ack, command, respond)

        # Catch-all so unhandled event kinds are acked instead of 404'd
        @self.app.event(ALL_EVENTS)
        async def handle_event(event, client):
            await self.dispatch_event(event, client)

    async def handle_onboard_command(self, ack, command: Dict[str, Any], respond):
        """Ack the slash command, then reply to the caller only.

        Ack failures propagate to bolt so Slack reports the command as failed.
        """
        await ack()
        invocation = parse_command(command)
        logger.info(f"{invocation.command} invoked by {invocation.user_id} in {invocation.channel_id}")
        await respond(
            response_type="ephemeral",
            text=onboard_greeting(invocation.user_id),
        )

    async def dispatch_event(self, event: Dict[str, Any], client: AsyncWebClient):
        """Route an Events API event to its handler."""
        inbound = parse_event(event)

        if isinstance(inbound, HomeOpened):
            await self.handle_app_home_opened(inbound, client)
        elif isinstance(inbound, TeamJoin):
            await self.handle_team_join(inbound, client)
        elif isinstance(inbound, UnknownEvent):
            logger.debug(f"Ignoring event: {inbound.type}")
        else:
            raise TypeError(f"Unhandled event variant: {inbound!r}")

    async def handle_app_home_opened(self, event: HomeOpened, client: AsyncWebClient):
        """Publish the home tab for the viewing user. Best effort.

        app_home_opened also fires for the Messages tab, which has no view.
        """
        if event.tab != "home":
            logger.debug(f"Skipping App Home publish for {event.user_id} on tab {event.tab}")
            return
        try:
            await client.views_publish(
                user_id=event.user_id,
                view=build_home_view(self.config.bot_name, self.config.command),
            )
        except Exception as e:
            logger.error(f"Error publishing App Home for {event.user_id}: {e}", exc_info=True)

    async def handle_team_join(self, event: TeamJoin, client: AsyncWebClient):
        """DM a welcome to the new member. Best effort."""
        try:
            # Posting to a user ID opens the DM with that user
            await client.chat_postMessage(
                channel=event.user_id,
                text=team_welcome(event.user_id),
            )
        except Exception as e:
            logger.error(f"Error handling team_join for {event.user_id}: {e}", exc_info=True)


def create_slack_app(config: BotConfig, client: Optional[AsyncWebClient] = None) -> AsyncApp:
    """Build the bolt app with all listeners registered."""
    return SlackAdapter(config, client=client).app
