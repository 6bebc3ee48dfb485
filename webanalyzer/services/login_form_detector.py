import logging
from typing import Iterator, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)


def _iter_elements(root: Tag) -> Iterator[Tag]:
    """Depth-first, document-order walk over element descendants of `root`.

    Iterative, so nesting depth is not bounded by the recursion limit.
    """
    stack = [child for child in reversed(root.contents) if isinstance(child, Tag)]
    while stack:
        element = stack.pop()
        yield element
        stack.extend(child for child in reversed(element.contents) if isinstance(child, Tag))


def _is_password_input(element: Tag) -> bool:
    if element.name != "input":
        return False
    input_type = element.get("type")
    return isinstance(input_type, str) and input_type.strip().lower() == "password"


class LoginFormDetector:
    """Decides whether a page contains a login form.

    A login form is a `form` element with an `input type="password"` somewhere
    among its descendants. Password fields outside any form do not count.
    """

    def _form_has_password(self, form: Tag) -> bool:
        return any(_is_password_input(element) for element in _iter_elements(form))

    def detect(self, document: Optional[BeautifulSoup]) -> bool:
        if document is None:
            logger.info("Login form detection skipped: no document")
            return False

        forms = 0
        for element in _iter_elements(document):
            if element.name != "form":
                continue
            forms += 1
            if self._form_has_password(element):
                logger.info("Login form detection - forms seen: %d, result: True", forms)
                return True

        logger.info("Login form detection - forms seen: %d, result: False", forms)
        return False
