"""User-facing reply texts.

Every parse and fetch failure kind maps to exactly one fixed message.
"""

from typing import Dict

from ..retrieval.fetch import FetchErrorKind
from ..retrieval.url import ParseErrorKind

ACKNOWLEDGEMENT = ":wave: I received your mention! I'm processing your request..."

PARSE_ERROR_REPLIES: Dict[ParseErrorKind, str] = {
    ParseErrorKind.NO_URLS: (
        "I couldn't find any URLs in your message. "
        "Please mention me along with the URL you'd like me to summarize!"
    ),
    ParseErrorKind.INVALID_URL: (
        "I found a URL in your message, but it doesn't seem to be valid. "
        "Please check the URL and try again!"
    ),
    ParseErrorKind.MULTIPLE_URLS: (
        "I found multiple URLs in your message. For now, I can only summarize one article at a time. "
        "Please send me one URL at a time!"
    ),
    ParseErrorKind.PARSING_ERROR: (
        "Sorry, I encountered an error while processing your request. Please try again later."
    ),
}

FETCH_ERROR_REPLIES: Dict[FetchErrorKind, str] = {
    FetchErrorKind.PAYWALL_DETECTED: (
        "Sorry, but this article appears to be behind a paywall. I can't access its content."
    ),
    FetchErrorKind.FETCH_ERROR: (
        "I couldn't fetch the article. Please make sure the URL is accessible."
    ),
    FetchErrorKind.INVALID_CONTENT: (
        "The link doesn't point to a readable web page, so I can't summarize it."
    ),
    FetchErrorKind.EMPTY_CONTENT: (
        "I couldn't find any meaningful content in the article. "
        "The page might be empty or require JavaScript to load."
    ),
}

SUMMARY_FAILED = "I encountered an error while processing the article."
