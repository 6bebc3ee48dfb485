import re
from urllib.parse import urlsplit

from webanalyzer.exceptions import InvalidTargetUrlError

MISSING_URL_MESSAGE = "missing URL: please provide a valid URL like https://example.com"
INVALID_URL_MESSAGE = "invalid URL format: please enter a valid URL like https://example.com"

ALLOWED_SCHEMES = ("http", "https")

_SCHEME_WITH_AUTHORITY = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*)://")
_SCHEME_PREFIX = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):(.*)$", re.DOTALL)
# "localhost:8080/path" reads as host and port, not as a scheme.
_PORT_AFTER_HOST = re.compile(r"^\d+(?:[/?#]|$)")


def normalize_target_url(raw_url: str) -> str:
    """Trim the URL and default its scheme to https.

    Raises `InvalidTargetUrlError` when nothing usable is left, the scheme is
    not http(s), or no host can be found.
    """
    url = (raw_url or "").strip()
    if not url:
        raise InvalidTargetUrlError(url, MISSING_URL_MESSAGE)

    match = _SCHEME_WITH_AUTHORITY.match(url)
    if match:
        if match.group(1).lower() not in ALLOWED_SCHEMES:
            raise InvalidTargetUrlError(url, INVALID_URL_MESSAGE)
    else:
        prefixed = _SCHEME_PREFIX.match(url)
        if prefixed and not _PORT_AFTER_HOST.match(prefixed.group(2)):
            raise InvalidTargetUrlError(url, INVALID_URL_MESSAGE)
        url = "https://" + url

    try:
        parsed = urlsplit(url)
        hostname = parsed.hostname
        parsed.port
    except ValueError as e:
        raise InvalidTargetUrlError(url, INVALID_URL_MESSAGE) from e
    if not hostname or any(ch.isspace() for ch in parsed.netloc):
        raise InvalidTargetUrlError(url, INVALID_URL_MESSAGE)
    return url
