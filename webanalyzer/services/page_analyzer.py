import logging
from typing import Optional

from webanalyzer.domain.analysis_result import AnalysisResult
from webanalyzer.domain.http_response import HttpResponse
from webanalyzer.exceptions import PageFetchError
from webanalyzer.services.accessibility_checker import AccessibilityChecker
from webanalyzer.services.html_document import HtmlDocumentParser
from webanalyzer.services.http_service import HttpService
from webanalyzer.services.link_resolver import LinkResolver
from webanalyzer.services.login_form_detector import LoginFormDetector
from webanalyzer.services.token_scanner import HtmlTokenScanner, detect_html_version
from webanalyzer.utils.url_utils import normalize_target_url

logger = logging.getLogger(__name__)


class PageAnalyzer:
    """Fetches one page and assembles its `AnalysisResult`.

    The target page is fetched exactly once. Only a failed fetch aborts the
    analysis; scan, link and form problems degrade into result fields.
    """

    def __init__(
        self,
        *,
        http_service: HttpService,
        accessibility_checker: AccessibilityChecker,
        document_parser: Optional[HtmlDocumentParser] = None,
        token_scanner: Optional[HtmlTokenScanner] = None,
        link_resolver: Optional[LinkResolver] = None,
        login_form_detector: Optional[LoginFormDetector] = None,
    ):
        self.http_service = http_service
        self.accessibility_checker = accessibility_checker
        self.document_parser = document_parser or HtmlDocumentParser()
        self.token_scanner = token_scanner or HtmlTokenScanner()
        self.link_resolver = link_resolver or LinkResolver()
        self.login_form_detector = login_form_detector or LoginFormDetector()

    def fetch_page(self, url: str) -> str:
        """Fetch the target page body, raising on transport failure or an error status."""
        logger.info("Fetching content from %s with %ss timeout", url, self.http_service.timeout)
        response: HttpResponse = self.http_service.fetch(url)
        if response.status_code >= 400:
            logger.warning("Fetch of %s returned status %s", url, response.status_code)
            raise PageFetchError(url, response.status_code, response.reason)
        body = response.text or ""
        logger.info(
            "Fetched %s -> status %s, %s, %d characters",
            url,
            response.status_code,
            response.content_type or "unknown content type",
            len(body),
        )
        return body

    def analyze(self, target_url: str) -> AnalysisResult:
        logger.info("Starting web page analysis for %s", target_url)
        url = normalize_target_url(target_url)
        if url != target_url:
            logger.info("Normalized target URL %r -> %s", target_url, url)

        body = self.fetch_page(url)
        document = self.document_parser.parse(body)

        html_version = detect_html_version(body)
        tokens = self.token_scanner.scan(document)
        resolution = self.link_resolver.resolve(url, tokens.hrefs)
        links = self.accessibility_checker.check(resolution)
        contains_login_form = self.login_form_detector.detect(document)

        result = AnalysisResult(
            html_version=html_version,
            page_title=tokens.title,
            headings=tokens.headings,
            links=links,
            contains_login_form=contains_login_form,
        )
        logger.info("Finished analysis of %s: version=%s, links=%d", url, html_version, links.total)
        return result
