import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class HtmlDocumentParser:
    """Builds the document tree shared by the token scanner and the form detector."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def parse(self, body: Optional[str]) -> Optional[BeautifulSoup]:
        if not body:
            return None

        try:
            return self._soup_factory(body)
        except Exception:
            logger.exception("Error parsing HTML body")
            return None
