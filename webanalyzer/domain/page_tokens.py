"""Token scan result data model."""
from typing import Dict, List, NamedTuple


class PageTokens(NamedTuple):
    """What a single pass over the page's tokens collected.

    A scan that stopped early on malformed markup still returns whatever it
    gathered up to that point.
    """
    title: str
    """Trimmed text of the first title element, or the no-title sentinel"""

    headings: Dict[str, int]
    """Start-tag counts for h1..h6; all six keys are always present"""

    hrefs: List[str]
    """Non-empty href values of anchor tags in document order, duplicates kept"""
