import logging
import re
from typing import Callable, Optional

import requests
from bs4.dammit import EncodingDetector

from webanalyzer.domain.http_response import HttpResponse
from webanalyzer.exceptions import HttpFetchError

logger = logging.getLogger(__name__)

_CHARSET_PARAM = re.compile(r"charset\s*=", re.IGNORECASE)


def has_declared_charset(content_type: Optional[str]) -> bool:
    return bool(content_type) and _CHARSET_PARAM.search(content_type) is not None


def decode_body(content: bytes, fallback_text: str) -> str:
    """Decode a body whose Content-Type carries no charset.

    A `<meta charset>` (or XML declaration) in the markup wins, then UTF-8.
    Bytes that are not valid UTF-8 keep the client's own decoding.
    """
    declared = EncodingDetector.find_declared_encoding(content, is_html=True)
    if declared:
        try:
            return content.decode(declared, errors="replace")
        except LookupError:
            logger.warning("Unknown declared encoding %r; trying UTF-8", declared)
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        return fallback_text


class HttpService:
    """
    HTTP client wrapper for fetching the page under analysis.

    `http_client` is a requests-style callable (`requests.get` in production).
    Error statuses are returned as-is; only transport failures raise.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text, Content-Type and reason.

        requests falls back to ISO-8859-1 for text/* without a charset, so in
        that case the raw bytes are decoded here instead.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Let real exceptions from headers bubble up.
        ct = resp.headers.get('Content-Type')

        if has_declared_charset(ct):
            text = resp.text
        else:
            text = decode_body(resp.content, resp.text)

        return HttpResponse(resp.status_code, text, ct, getattr(resp, 'reason', None))
