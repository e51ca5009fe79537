"""Pydantic schemas for mention events and parsed messages.

Defines IncomingMention, ExtractedUrl, and ParsedMessage models.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class IncomingMention(BaseModel):
    text: str
    user_id: str
    channel_id: str
    timestamp: str
    thread_ts: Optional[str] = None
    event_ts: Optional[str] = None

    @property
    def reply_thread_ts(self) -> str:
        """Replies stay in the mention's existing thread, or start one under it."""
        return self.thread_ts or self.timestamp

class ExtractedUrl(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    context_before: str = ""
    context_after: str = ""

class ParsedMessage(BaseModel):
    urls: List[ExtractedUrl] = Field(..., min_length=1)
    full_text: str
    mention_id: str
    channel_id: str
    user_id: str
    timestamp: str
    thread_ts: Optional[str] = None
