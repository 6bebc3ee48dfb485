"""Custom exceptions for WebAnalyzer services."""
from typing import Optional


class WebAnalyzerError(Exception):
    """Base class for errors that abort a page analysis."""


class InvalidTargetUrlError(WebAnalyzerError):
    """Raised when the URL to analyze cannot be used as a base URL."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(reason)


class HttpFetchError(WebAnalyzerError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class PageFetchError(WebAnalyzerError):
    """Raised when the target page answers with an error status (>= 400)."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"HTTP error: Received status {status} for URL {url}")
