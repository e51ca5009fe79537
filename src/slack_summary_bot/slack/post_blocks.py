"""Slack message payload builders.

Builds keyword arguments for chat.postMessage (or Bolt's `say`) with mrkdwn formatting.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


def build_post_payload(
    channel: str,
    text: str,
    thread_ts: Optional[str] = None,
    reply_broadcast: bool = False,
) -> Dict[str, Any]:
    """
    Payload for chat.postMessage.
    Posts as plain text with mrkdwn enabled (no blocks) to avoid the 3000-char block limit.
    `reply_broadcast` also shows a threaded reply in the channel.
    """
    payload: Dict[str, Any] = {
        "channel": channel,
        "text": text,
        "mrkdwn": True,
        "unfurl_links": False,
        "unfurl_media": False,
    }
    if thread_ts:
        payload["thread_ts"] = thread_ts
        if reply_broadcast:
            payload["reply_broadcast"] = True
    return payload
