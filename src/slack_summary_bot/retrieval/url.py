"""URL extraction from Slack mention text.

Finds exactly one URL in a mention (bare or Slack rich-link form), validates
it, and captures the text around it so the summary can honour whatever the
user asked for.
"""

import re
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from ..log import get_logger
from ..schemas.messages import ExtractedUrl, IncomingMention, ParsedMessage

logger = get_logger("url_extract")

# Either a Slack rich link <https://url|label> (group 1 is the URL) or a bare
# http(s) URL. The bare form is permissive: trailing "." or ")" can end up in
# the match. Word boundaries are ASCII-only: a URL directly followed by
# non-ASCII text (CJK without a space) still matches.
URL_PATTERN = re.compile(
    r"<(https?://[^|>]+)\|[^>]+>"
    r"|https?://(?:www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"[-a-zA-Z0-9()@:%_+.~#?&/=]*",
    re.ASCII,
)
BOT_MENTION_PATTERN = re.compile(r"<@[A-Z0-9]+>\s*")
CONTEXT_CHARS = 100

_URL_VALIDATOR = TypeAdapter(AnyHttpUrl)


class ParseErrorKind(str, Enum):
    NO_URLS = "NO_URLS"
    INVALID_URL = "INVALID_URL"
    MULTIPLE_URLS = "MULTIPLE_URLS"
    PARSING_ERROR = "PARSING_ERROR"


class MessageParseError(Exception):
    def __init__(self, kind: ParseErrorKind, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.kind = kind
        self.details = details or {}


class UrlMatch(NamedTuple):
    url: str
    start: int
    end: int


def clean_mention_text(text: str) -> str:
    """Drop the bot mention token and surrounding whitespace."""
    return BOT_MENTION_PATTERN.sub("", text, count=1).strip()


def find_urls(text: str) -> List[UrlMatch]:
    """
    Returns every URL occurrence in order. For rich links the span covers the
    whole <url|label> token but only the URL is kept.
    """
    return [
        UrlMatch(match.group(1) or match.group(0), match.start(), match.end())
        for match in URL_PATTERN.finditer(text)
    ]


def extract_url(text: str) -> ExtractedUrl:
    """
    Extracts the single URL in a raw mention text along with its context.
    Raises MessageParseError when there is not exactly one valid URL.
    """
    with _classified_errors():
        return _extract_single(clean_mention_text(text))


def parse_message(mention: IncomingMention) -> ParsedMessage:
    logger.info(f"Parsing mention {mention.timestamp} in {mention.channel_id}")
    with _classified_errors():
        clean_text = clean_mention_text(mention.text)
        extracted = _extract_single(clean_text)
        logger.debug(
            f"Extracted {extracted.url} (before={extracted.context_before!r}, "
            f"after={extracted.context_after!r})"
        )
        return ParsedMessage(
            urls=[extracted],
            full_text=clean_text,
            mention_id=mention.event_ts or mention.timestamp,
            channel_id=mention.channel_id,
            user_id=mention.user_id,
            timestamp=mention.timestamp,
            thread_ts=mention.thread_ts,
        )


def _extract_single(clean_text: str) -> ExtractedUrl:
    matches = find_urls(clean_text)

    if not matches:
        raise MessageParseError(ParseErrorKind.NO_URLS, "No URLs found in message")

    if len(matches) > 1:
        logger.warning(f"Multiple URLs found in message ({len(matches)})")
        raise MessageParseError(
            ParseErrorKind.MULTIPLE_URLS,
            "Multiple URLs found in message",
            details={"url_count": len(matches)},
        )

    url, start, end = matches[0]
    try:
        _URL_VALIDATOR.validate_python(url)
    except ValidationError as e:
        logger.warning(f"Invalid URL found: {url} ({e.error_count()} validation errors)")
        raise MessageParseError(
            ParseErrorKind.INVALID_URL, "Invalid URL detected", details={"url": url}
        ) from e

    context_before = clean_text[max(0, start - CONTEXT_CHARS):start].strip()
    context_after = clean_text[end:min(len(clean_text), end + CONTEXT_CHARS)].strip()

    return ExtractedUrl(url=url, context_before=context_before, context_after=context_after)


@contextmanager
def _classified_errors():
    # Callers switch on ParseErrorKind, so nothing unclassified may escape
    try:
        yield
    except MessageParseError:
        raise
    except Exception as e:
        logger.exception("Failed to parse message")
        raise MessageParseError(
            ParseErrorKind.PARSING_ERROR,
            "Failed to parse message",
            details={"original_error": repr(e)},
        ) from e
