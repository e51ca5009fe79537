#!/usr/bin/env python3
"""
Run the extract -> fetch -> summarize chain locally and print the result.
Nothing is posted to Slack.

Usage:
  python scripts/summarize_url.py "Please summarize https://example.com/post, focus on costs"
  python scripts/summarize_url.py --no-llm "https://example.com/post"
"""
from __future__ import annotations
import argparse
import asyncio
import sys

from dotenv import load_dotenv

from slack_summary_bot.bootstrap import build_fetcher, build_generator
from slack_summary_bot.config import get_settings
from slack_summary_bot.log import setup_logging
from slack_summary_bot.retrieval.fetch import ArticleFetchError
from slack_summary_bot.retrieval.url import MessageParseError, extract_url


async def run(text: str, use_llm: bool) -> int:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    try:
        extracted = extract_url(text)
    except MessageParseError as e:
        print(f"Parse failed [{e.kind.value}]: {e} {e.details}")
        return 1

    print(f"URL: {extracted.url}")
    print(f"Context before: {extracted.context_before!r}")
    print(f"Context after:  {extracted.context_after!r}")

    async with build_fetcher(settings) as fetcher:
        try:
            content = await fetcher.fetch(extracted.url)
        except ArticleFetchError as e:
            print(f"Fetch failed [{e.kind.value}]: {e}")
            return 1

    print(f"\nFetched {len(content)} characters. Preview:\n{content[:500]}\n")
    if not use_llm:
        return 0

    generator = build_generator(settings)
    try:
        summary = await generator.summarize(
            content, extracted.url, extracted.context_before, extracted.context_after
        )
    finally:
        await generator.aclose()
    print("--- Summary ---")
    print(summary)
    return 0


def main():
    load_dotenv()
    p = argparse.ArgumentParser(description="Summarize the URL in a message without Slack")
    p.add_argument("text", help="Message text containing exactly one URL")
    p.add_argument("--no-llm", action="store_true", help="Stop after fetching the article text")
    args = p.parse_args()
    sys.exit(asyncio.run(run(args.text, use_llm=not args.no_llm)))


if __name__ == "__main__":
    main()
