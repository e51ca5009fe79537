from typing import Dict, Any
from ..schemas.messages import IncomingMention

def parse_mention(event: Dict[str, Any]) -> IncomingMention:
    """
    Parse a Slack app_mention event into an IncomingMention.
    Only the fields needed for URL extraction and reply addressing are kept.
    """
    return IncomingMention(
        text=event.get("text", ""),
        user_id=event.get("user", ""),
        channel_id=event["channel"],
        timestamp=event["ts"],
        thread_ts=event.get("thread_ts"),  # set if the mention is already in a thread
        event_ts=event.get("event_ts"),
    )
