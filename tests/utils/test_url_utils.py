import pytest

from webanalyzer.exceptions import InvalidTargetUrlError
from webanalyzer.utils.url_utils import INVALID_URL_MESSAGE, MISSING_URL_MESSAGE, normalize_target_url


def test_keeps_explicit_scheme():
    assert normalize_target_url("http://example.com") == "http://example.com"
    assert normalize_target_url("HTTPS://Example.com/path") == "HTTPS://Example.com/path"


def test_adds_https_when_scheme_missing():
    assert normalize_target_url("example.com") == "https://example.com"
    assert normalize_target_url("  example.com/a?b=1  ") == "https://example.com/a?b=1"


def test_host_and_port_without_scheme_get_https():
    assert normalize_target_url("localhost:8080") == "https://localhost:8080"
    assert normalize_target_url("example.com:8443/login") == "https://example.com:8443/login"


def test_empty_url_is_rejected():
    for raw in ("", "   ", None):
        with pytest.raises(InvalidTargetUrlError) as excinfo:
            normalize_target_url(raw)
        assert str(excinfo.value) == MISSING_URL_MESSAGE


@pytest.mark.parametrize("raw", [
    "https://",
    "http://[::1",
    "https://example.com:port",
    "exa mple.com",
    "ftp://example.com",
    "mailto:user@example.com",
    "javascript:alert(1)",
    "file:///etc/passwd",
])
def test_unusable_urls_are_rejected(raw):
    with pytest.raises(InvalidTargetUrlError) as excinfo:
        normalize_target_url(raw)
    assert str(excinfo.value) == INVALID_URL_MESSAGE
