"""Explicit construction of the bot's dependencies from Settings.

Each entry point builds its clients here once and passes them down; nothing
is created at import time.
"""

from typing import Optional

from openai import AsyncOpenAI
from slack_bolt.async_app import AsyncApp

from .config import Settings
from .llm.client import SummaryGenerator
from .pipeline.run import MentionPipeline
from .retrieval.fetch import ArticleFetcher
from .slack.listeners import register_listeners


def build_fetcher(settings: Settings) -> ArticleFetcher:
    return ArticleFetcher(
        timeout=settings.FETCH_TIMEOUT_SECONDS,
        max_redirects=settings.FETCH_MAX_REDIRECTS,
        min_content_length=settings.MIN_CONTENT_LENGTH,
    )


def build_generator(settings: Settings, client: Optional[AsyncOpenAI] = None) -> SummaryGenerator:
    return SummaryGenerator(
        client or AsyncOpenAI(api_key=settings.OPENAI_API_KEY),
        model=settings.OPENAI_MODEL,
        temperature=settings.OPENAI_TEMPERATURE,
        max_tokens=settings.OPENAI_MAX_TOKENS,
    )


def build_pipeline(settings: Settings) -> MentionPipeline:
    return MentionPipeline(build_fetcher(settings), build_generator(settings))


def build_bolt_app(settings: Settings, pipeline: MentionPipeline) -> AsyncApp:
    """AsyncApp with the mention listener registered. Signing secret is only used over HTTP."""
    app = AsyncApp(
        token=settings.SLACK_BOT_TOKEN,
        signing_secret=settings.SLACK_SIGNING_SECRET or None,
    )
    register_listeners(app, pipeline)
    return app
