"""Mention handling pipeline.

Acknowledges a mention, extracts its URL, fetches the article, asks the LLM
for a summary and posts everything back in the mention's thread.
"""

from typing import Any, Awaitable, Callable, Dict

from openai import OpenAIError

from ..llm.client import SummaryGenerationError, SummaryGenerator
from ..log import get_logger
from ..retrieval.fetch import ArticleFetchError, ArticleFetcher
from ..retrieval.url import MessageParseError, parse_message
from ..schemas.messages import IncomingMention
from ..slack import replies
from ..slack.parse import parse_mention
from ..slack.post_blocks import build_post_payload

logger = get_logger("pipeline")

Say = Callable[..., Awaitable[Any]]

class MentionPipeline:
    def __init__(self, fetcher: ArticleFetcher, generator: SummaryGenerator):
        self.fetcher = fetcher
        self.generator = generator

    async def handle_mention(self, event: Dict[str, Any], say: Say) -> None:
        mention = parse_mention(event)
        logger.info(f"Processing mention {mention.timestamp} in {mention.channel_id}")

        await self._reply(say, mention, replies.ACKNOWLEDGEMENT)

        try:
            parsed = parse_message(mention)
        except MessageParseError as e:
            logger.warning(f"Could not parse mention {mention.timestamp}: [{e.kind.value}] {e} {e.details}")
            await self._reply(say, mention, replies.PARSE_ERROR_REPLIES[e.kind])
            return

        logger.info(f"Parsed mention {parsed.mention_id}: {[u.url for u in parsed.urls]}")

        for extracted in parsed.urls:
            try:
                content = await self.fetcher.fetch(extracted.url)
            except ArticleFetchError as e:
                await self._reply(say, mention, replies.FETCH_ERROR_REPLIES[e.kind])
                continue

            try:
                summary = await self.generator.summarize(
                    content,
                    extracted.url,
                    extracted.context_before,
                    extracted.context_after,
                )
            except (SummaryGenerationError, OpenAIError):
                logger.exception(f"Summary generation failed for {extracted.url}")
                await self._reply(say, mention, replies.SUMMARY_FAILED)
                continue

            await self._reply(say, mention, summary, reply_broadcast=True)
            logger.info(f"Posted summary for {extracted.url} to {mention.channel_id}/{mention.reply_thread_ts}")

    async def _reply(self, say: Say, mention: IncomingMention, text: str, reply_broadcast: bool = False) -> None:
        await say(**build_post_payload(
            mention.channel_id,
            text,
            thread_ts=mention.reply_thread_ts,
            reply_broadcast=reply_broadcast,
        ))
