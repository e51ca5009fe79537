"""Slack Summary Bot - A Slack bot that summarizes a linked article when mentioned.

Mention the bot with one URL and it replies in-thread with an LLM-written
summary of the page.

Components:
- main_socket: Socket Mode entry point
- main_ingest: Events API (HTTP) entry point
- pipeline: mention handling (extract -> fetch -> summarize -> reply)
- retrieval: URL extraction, page fetching, paywall heuristic
- llm: OpenAI summary generation
- slack: event parsing, reply payloads, Bolt listeners
"""
