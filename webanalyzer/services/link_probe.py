import logging
from typing import Callable, Protocol

import requests

logger = logging.getLogger(__name__)


class LinkProbe(Protocol):
    def is_accessible(self, url: str) -> bool: ...


class HttpHeadProbe:
    """Liveness check for a single URL using a HEAD request.

    Redirects are followed by the client; the terminal status decides. A
    transport error or a status >= 400 means the link is inaccessible. Probe
    failures are never raised to the caller.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 3):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def is_accessible(self, url: str) -> bool:
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            logger.debug("Probe failed for %s: %s", url, e)
            return False

        try:
            status = int(resp.status_code)
        finally:
            close = getattr(resp, "close", None)
            if callable(close):
                close()

        if status >= 400:
            logger.debug("Probe for %s returned status %s", url, status)
            return False
        return True
