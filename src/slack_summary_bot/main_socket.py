"""
Socket Mode entry point for the Slack Summary Bot.
Connects to Slack via WebSocket - no public URL needed.

Usage:
    python -m slack_summary_bot.main_socket
"""
import asyncio
import sys
from slack_bolt.adapter.socket_mode.async_handler import AsyncSocketModeHandler
from .bootstrap import build_bolt_app, build_pipeline
from .config import Settings, get_settings
from .log import get_logger, setup_logging

logger = get_logger("socket_listener")

async def run(settings: Settings) -> None:
    pipeline = build_pipeline(settings)
    app = build_bolt_app(settings, pipeline)
    handler = AsyncSocketModeHandler(app, settings.SLACK_APP_TOKEN)
    try:
        await handler.start_async()
    finally:
        await pipeline.fetcher.aclose()
        await pipeline.generator.aclose()

def main():
    """Start the Socket Mode handler."""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    if not settings.SLACK_APP_TOKEN:
        logger.error("Missing required environment variable: SLACK_APP_TOKEN")
        sys.exit(1)

    logger.info("Starting Slack Summary Bot (Socket Mode)...")
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        logger.info("Stopping Socket Mode listener...")

if __name__ == "__main__":
    main()
