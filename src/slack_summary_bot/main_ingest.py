"""
Events API entry point: Slack posts events to /slack/events over HTTP.
Bolt verifies request signatures and answers url_verification handshakes.

Usage:
    python -m slack_summary_bot.main_ingest
"""
import sys
from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI, Request
from slack_bolt.adapter.fastapi.async_handler import AsyncSlackRequestHandler
from .bootstrap import build_bolt_app, build_pipeline
from .config import Settings, get_settings
from .log import setup_logging, get_logger

logger = get_logger("ingest")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    pipeline = build_pipeline(settings)
    bolt_app = build_bolt_app(settings, pipeline)
    slack_handler = AsyncSlackRequestHandler(bolt_app)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await pipeline.fetcher.aclose()
        await pipeline.generator.aclose()

    app = FastAPI(title="Slack Summary Bot", lifespan=lifespan)

    @app.post("/slack/events")
    async def slack_events(request: Request):
        return await slack_handler.handle(request)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app

def main():
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    if not settings.SLACK_SIGNING_SECRET:
        logger.error("Missing required environment variable: SLACK_SIGNING_SECRET")
        sys.exit(1)

    logger.info(f"Starting Slack Summary Bot (Events API) on port {settings.PORT}...")
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)

if __name__ == "__main__":
    main()
