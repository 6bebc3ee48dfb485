import logging
from typing import Iterator, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from webanalyzer.domain.analysis_result import HEADING_TAGS, empty_heading_counts
from webanalyzer.domain.page_tokens import PageTokens

logger = logging.getLogger(__name__)

NO_TITLE = "No title found"
UNKNOWN_HTML_VERSION = "Unknown or custom HTML version"

# Checked in order; the first marker found in the lower-cased markup wins.
HTML_VERSION_MARKERS = (
    ("<!doctype html>", "HTML5"),
    ("xhtml 1.0", "XHTML 1.0"),
    ("xhtml 1.1", "XHTML 1.1"),
    ("html 4.01", "HTML 4.01"),
    ("html 3.2", "HTML 3.2"),
    ("html 2.0", "HTML 2.0"),
)


def detect_html_version(content: Optional[str]) -> str:
    lowered = (content or "").lower()
    for marker, version in HTML_VERSION_MARKERS:
        if marker in lowered:
            return version
    return UNKNOWN_HTML_VERSION


def _is_text_token(node: PageElement) -> bool:
    # Comments, doctypes, CDATA and processing instructions are not text.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


class HtmlTokenScanner:
    """Single pass over a parsed page collecting title, heading counts and hrefs.

    The document is walked in document order, so each `Tag` is a start tag and
    each plain string is a text token. Anything that goes wrong mid-stream ends
    the scan; the partial results are returned.
    """

    def _iter_tokens(self, document: BeautifulSoup) -> Iterator[Union[Tag, NavigableString]]:
        yield from document.descendants

    def scan(self, document: Optional[BeautifulSoup]) -> PageTokens:
        title: Optional[str] = None
        awaiting_title_text = False
        headings = empty_heading_counts()
        hrefs: list[str] = []

        if document is None:
            return PageTokens(NO_TITLE, headings, hrefs)

        try:
            for node in self._iter_tokens(document):
                if awaiting_title_text:
                    awaiting_title_text = False
                    if _is_text_token(node):
                        title = str(node).strip()
                        continue

                if not isinstance(node, Tag):
                    continue

                name = node.name
                if name == "title" and title is None:
                    awaiting_title_text = True
                elif name in HEADING_TAGS:
                    headings[name] += 1
                elif name == "a":
                    href = node.get("href")
                    if href:
                        hrefs.append(href)
        except Exception:
            logger.exception("HTML token scan stopped early; returning partial results")

        if title is None:
            title = NO_TITLE
        logger.info("Token scan found title=%r headings=%s links=%d", title, headings, len(hrefs))
        return PageTokens(title, headings, hrefs)
