"""End-to-end analysis against pages served by local HTTP servers (no external network)."""
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
import requests

from webanalyzer.exceptions import PageFetchError
from webanalyzer.services.accessibility_cache import AccessibilityCache
from webanalyzer.services.accessibility_checker import AccessibilityChecker
from webanalyzer.services.http_service import HttpService
from webanalyzer.services.link_probe import HttpHeadProbe
from webanalyzer.services.page_analyzer import PageAnalyzer


def _make_handler(pages):
    """`pages` maps a request path to `(status, body)` or `(status, body, content_type)`.

    A str body is sent as UTF-8; bytes are sent untouched.
    """
    class Handler(BaseHTTPRequestHandler):
        def _respond(self, with_body):
            status, body, *rest = pages.get(self.path, (404, "<h1>not found</h1>"))
            content_type = rest[0] if rest else "text/html; charset=utf-8"
            payload = body if isinstance(body, bytes) else body.encode("utf-8")
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(payload)))
            self.end_headers()
            if with_body:
                self.wfile.write(payload)

        def do_GET(self):
            self._respond(True)

        def do_HEAD(self):
            self._respond(False)

        def log_message(self, format, *args):
            pass

    return Handler


@pytest.fixture
def serve():
    servers = []

    def _serve(pages):
        server = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(pages))
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}"

    yield _serve
    for server in servers:
        server.shutdown()
        server.server_close()


@pytest.fixture
def analyzer():
    # Ignore proxy settings from the environment; everything here is local.
    session = requests.Session()
    session.trust_env = False
    probe = HttpHeadProbe(user_agent="TestAgent", http_client=session.head, timeout=3)
    checker = AccessibilityChecker(probe, AccessibilityCache(), concurrency=10)
    http = HttpService(user_agent="TestAgent", http_client=session.get, timeout=10)
    yield PageAnalyzer(http_service=http, accessibility_checker=checker)
    session.close()


def test_analyze_page_from_mock_origin(serve, analyzer):
    other_origin = serve({"/": (200, "<html>other</html>")})
    page = f"""
    <!DOCTYPE html>
    <html>
    <head><title>Integration Test</title></head>
    <body>
        <h1>Main</h1>
        <h2>Sub</h2>
        <a href="/">Home</a>
        <a href="{other_origin}/">External</a>
        <a>Broken</a>
        <form>
            <input type="text" name="user"/>
            <input type="password" name="pass"/>
        </form>
    </body>
    </html>
    """
    origin = serve({"/": (200, page)})

    result = analyzer.analyze(origin)

    assert result.html_version == "HTML5"
    assert result.page_title == "Integration Test"
    assert result.headings == {"h1": 1, "h2": 1, "h3": 0, "h4": 0, "h5": 0, "h6": 0}
    assert result.links.total == 2
    assert result.links.internal == 1
    assert result.links.external == 1
    assert result.links.inaccessible == 0
    assert result.contains_login_form is True


def test_broken_internal_links_are_inaccessible(serve, analyzer):
    page = '<a href="/ok">ok</a><a href="/missing">missing</a><a href="/error">error</a>'
    origin = serve({"/": (200, page), "/ok": (200, "fine"), "/error": (500, "oops")})

    result = analyzer.analyze(origin)

    assert result.links.total == 3
    assert result.links.internal == 1
    assert result.links.inaccessible == 2
    assert set(result.links.inaccessible_urls) == {f"{origin}/missing", f"{origin}/error"}


def test_target_returning_404_fails_analysis(serve, analyzer):
    origin = serve({})

    with pytest.raises(PageFetchError) as excinfo:
        analyzer.analyze(f"{origin}/nowhere")

    assert excinfo.value.status_code == 404


def test_utf8_page_without_charset_header_is_decoded_as_utf8(serve, analyzer):
    page = """<!DOCTYPE html>
    <html><head><title>Café – Zürich</title></head>
    <body><h1>Über uns</h1><a href="/café">Menü</a></body></html>
    """
    origin = serve({
        "/": (200, page, "text/html"),
        "/caf%C3%A9": (200, "<p>ok</p>", "text/html"),
    })

    result = analyzer.analyze(origin)

    assert result.page_title == "Café – Zürich"
    assert result.links.total == 1
    assert result.links.internal == 1
    assert result.links.inaccessible == 0


def test_meta_charset_is_honoured_without_charset_header(serve, analyzer):
    page = '<html><head><meta charset="windows-1252"><title>“Smart” quotes</title></head></html>'
    origin = serve({"/": (200, page.encode("cp1252"), "text/html")})

    result = analyzer.analyze(origin)

    assert result.page_title == "“Smart” quotes"
