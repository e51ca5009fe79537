"""Bolt listener registration.

Wires the mention pipeline into an AsyncApp, shared by the Socket Mode and
Events API entry points.
"""

from slack_bolt.async_app import AsyncApp

from ..log import get_logger
from ..pipeline.run import MentionPipeline

logger = get_logger("listeners")

def register_listeners(app: AsyncApp, pipeline: MentionPipeline) -> None:
    @app.event("app_mention")
    async def handle_app_mention(event, say):
        """Handle a mention of the bot by summarizing the linked article in-thread."""
        logger.info(f"Received app_mention {event.get('ts')} from {event.get('user')} in {event.get('channel')}")
        await pipeline.handle_mention(event, say)
