"""OpenAI client wrapper for article summaries.

Renders the summary prompt and requests a single chat completion.
The AsyncOpenAI client is injected so callers control its lifetime.
"""

from typing import Optional
from openai import AsyncOpenAI
from .prompts import build_summary_messages
from ..log import get_logger

logger = get_logger("llm_client")

DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1500

class SummaryGenerationError(Exception):
    pass

class SummaryGenerator:
    def __init__(
        self,
        client: AsyncOpenAI,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def summarize(
        self,
        content: str,
        url: str,
        context_before: Optional[str] = None,
        context_after: Optional[str] = None,
    ) -> str:
        """
        Returns a Slack mrkdwn summary of `content`.
        Raises SummaryGenerationError if the model returns no text; API errors propagate.
        """
        logger.info(
            f"Generating summary for {url} ({len(content)} chars, "
            f"context={'yes' if context_before or context_after else 'no'})"
        )
        messages = build_summary_messages(content, url, context_before, context_after)

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        text = response.choices[0].message.content if response.choices else None
        if not text:
            raise SummaryGenerationError("No response generated by the model")

        logger.info(f"Generated summary for {url} ({len(text)} chars)")
        return text

    async def aclose(self) -> None:
        await self.client.close()
