"""HTTP fetching and article text extraction.

Downloads a page with a fixed user-agent, rejects paywalled or non-textual
responses, and reduces the HTML to plain text. Every failure surfaces as an
ArticleFetchError tagged with a FetchErrorKind.
"""

from enum import Enum
from typing import Iterable, Optional

import httpx

from ..log import get_logger
from .extract import html_to_text
from .paywall import find_paywall_phrase, load_paywall_phrases

logger = get_logger("fetch")

USER_AGENT = "Mozilla/5.0 (compatible; SlackSummaryBot/1.0)"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_MAX_REDIRECTS = 5
MIN_CONTENT_LENGTH = 50

_TEXTUAL_TYPES = ("application/xhtml+xml", "application/xml")

class FetchErrorKind(str, Enum):
    PAYWALL_DETECTED = "PAYWALL_DETECTED"
    FETCH_ERROR = "FETCH_ERROR"
    INVALID_CONTENT = "INVALID_CONTENT"
    EMPTY_CONTENT = "EMPTY_CONTENT"

class ArticleFetchError(Exception):
    def __init__(self, message: str, kind: FetchErrorKind, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

class ArticleFetcher:
    def __init__(
        self,
        *,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
        min_content_length: int = MIN_CONTENT_LENGTH,
        paywall_phrases: Optional[Iterable[str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if paywall_phrases is None:
            paywall_phrases = load_paywall_phrases()
        self.paywall_phrases = tuple(p.lower() for p in paywall_phrases)
        self.min_content_length = min_content_length
        self.client = httpx.AsyncClient(
            headers={"User-Agent": user_agent},
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            max_redirects=max_redirects,
            transport=transport,
        )

    async def __aenter__(self) -> "ArticleFetcher":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def fetch(self, url: str) -> str:
        """
        Fetches the article at `url` and returns its plain text.
        Raises ArticleFetchError; nothing else escapes.
        """
        logger.info(f"Fetching article content from {url}")
        try:
            html = await self._download(url)

            if find_paywall_phrase(html, self.paywall_phrases):
                raise ArticleFetchError(
                    "This article appears to be behind a paywall",
                    FetchErrorKind.PAYWALL_DETECTED,
                )

            content = html_to_text(html)
            if len(content) < self.min_content_length:
                raise ArticleFetchError(
                    "Could not extract meaningful content from the article",
                    FetchErrorKind.EMPTY_CONTENT,
                )
        except ArticleFetchError as e:
            logger.warning(f"Fetch failed for {url}: [{e.kind.value}] {e}")
            raise
        except Exception as e:
            logger.exception(f"Error fetching article content from {url}")
            raise ArticleFetchError(
                str(e) or "Failed to fetch article content", FetchErrorKind.FETCH_ERROR
            ) from e

        logger.info(f"Fetched {url} ({len(content)} chars of text)")
        return content

    async def _download(self, url: str) -> str:
        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
        except httpx.TimeoutException as e:
            raise ArticleFetchError(
                "Request timed out while fetching the article", FetchErrorKind.FETCH_ERROR
            ) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise ArticleFetchError(
                f"Failed to fetch article: {status} {e.response.reason_phrase}",
                FetchErrorKind.FETCH_ERROR,
                status_code=status,
            ) from e
        except httpx.TooManyRedirects as e:
            raise ArticleFetchError(
                "Too many redirects while fetching the article", FetchErrorKind.FETCH_ERROR
            ) from e
        except httpx.RequestError as e:
            raise ArticleFetchError(
                "Failed to reach the article URL", FetchErrorKind.FETCH_ERROR
            ) from e

        if not _is_textual(resp.headers.get("content-type")):
            raise ArticleFetchError(
                f"Unsupported content type: {resp.headers.get('content-type')}",
                FetchErrorKind.INVALID_CONTENT,
            )
        return resp.text

def _is_textual(content_type: Optional[str]) -> bool:
    if not content_type:
        return True
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type.startswith("text/") or media_type in _TEXTUAL_TYPES or media_type.endswith("+xml")
