"""Paywall heuristic backed by a configurable phrase list."""

import functools
from pathlib import Path
from typing import Iterable, Optional, Tuple

import yaml

from ..log import get_logger

logger = get_logger("paywall")

_PHRASES_PATH = Path(__file__).resolve().parent / "paywall_phrases.yaml"


@functools.lru_cache()
def load_paywall_phrases() -> Tuple[str, ...]:
    """Load the packaged paywall phrases, lower-cased. Result is cached."""
    with open(_PHRASES_PATH, "r") as f:
        data = yaml.safe_load(f) or {}
    return tuple(str(p).lower() for p in data.get("phrases", []))


def find_paywall_phrase(html: str, phrases: Iterable[str]) -> Optional[str]:
    """
    Returns the first phrase found in the body (case-insensitive), or None.
    A hit is only a hint: false positives and misses are expected.
    """
    lower_html = html.lower()
    for phrase in phrases:
        if phrase.lower() in lower_html:
            logger.info(f"Paywall detected (matched phrase: {phrase!r})")
            return phrase
    return None
