"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from webanalyzer.services.accessibility_cache import AccessibilityCache
from webanalyzer.services.accessibility_checker import AccessibilityChecker
from webanalyzer.services.html_document import HtmlDocumentParser
from webanalyzer.services.http_service import HttpService
from webanalyzer.services.link_probe import HttpHeadProbe
from webanalyzer.services.link_resolver import LinkResolver
from webanalyzer.services.login_form_detector import LoginFormDetector
from webanalyzer.services.page_analyzer import PageAnalyzer
from webanalyzer.services.token_scanner import HtmlTokenScanner
from webanalyzer import config as env


# Environment variables used by the container (read via `webanalyzer.config` helpers).
#
# Notes:
# - Types are enforced by the helper used (`get_int_env`, `get_float_env`, etc.).
# - Defaults shown here are the effective defaults used when the env var is unset.
# - These are injected into services via `config = providers.Configuration(default=ENV)`.
#
# USER_AGENT (str, default: "WebAnalyzer/0.1")
#   User-Agent header for the page fetch and for link probes.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for fetching the page under analysis.
#
# WEBANALYZER_PROBE_TIMEOUT (float seconds, default: 3.0)
#   Timeout for each HEAD liveness probe.
#
# WEBANALYZER_PROBE_CONCURRENCY (int, default: 10)
#   Maximum number of probes in flight for one analysis. The limiter is created
#   per analysis, so concurrent analyses can together exceed it.
#
# WEBANALYZER_LINK_CACHE_MAX_SIZE (int, default: 10000)
#   Max number of URLs kept in the in-memory accessibility cache (LRU eviction).
#
# WEBANALYZER_LINK_CACHE_TTL_SECONDS (int seconds, default: 600)
#   TTL for accessibility cache entries. Entries older than TTL are treated as missing.
#
# WEBANALYZER_HOST / WEBANALYZER_PORT (str / int, default: "0.0.0.0" / 8080)
#   Bind address for the API server started by run.py.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "WebAnalyzer/0.1"),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "WEBANALYZER_PROBE_TIMEOUT": env.get_float_env("WEBANALYZER_PROBE_TIMEOUT", 3.0),
    "WEBANALYZER_PROBE_CONCURRENCY": env.get_int_env("WEBANALYZER_PROBE_CONCURRENCY", 10),
    "WEBANALYZER_LINK_CACHE_MAX_SIZE": env.get_int_env("WEBANALYZER_LINK_CACHE_MAX_SIZE", 10_000),
    "WEBANALYZER_LINK_CACHE_TTL_SECONDS": env.get_int_env("WEBANALYZER_LINK_CACHE_TTL_SECONDS", 600),
    "WEBANALYZER_HOST": env.get_str_env("WEBANALYZER_HOST", "0.0.0.0"),
    "WEBANALYZER_PORT": env.get_int_env("WEBANALYZER_PORT", 8080),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WebAnalyzer application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    link_probe = providers.Singleton(
        HttpHeadProbe,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.head),
        timeout=config.WEBANALYZER_PROBE_TIMEOUT.as_(float),
    )

    # Shared by every analysis for the lifetime of the process
    accessibility_cache = providers.Singleton(
        AccessibilityCache,
        max_size=config.WEBANALYZER_LINK_CACHE_MAX_SIZE.as_(int),
        ttl_seconds=config.WEBANALYZER_LINK_CACHE_TTL_SECONDS.as_(int),
    )

    accessibility_checker = providers.Singleton(
        AccessibilityChecker,
        probe=link_probe,
        cache=accessibility_cache,
        concurrency=config.WEBANALYZER_PROBE_CONCURRENCY.as_(int),
    )

    document_parser = providers.Singleton(HtmlDocumentParser)

    token_scanner = providers.Singleton(HtmlTokenScanner)

    link_resolver = providers.Singleton(LinkResolver)

    login_form_detector = providers.Singleton(LoginFormDetector)

    page_analyzer = providers.Singleton(
        PageAnalyzer,
        http_service=http_service,
        accessibility_checker=accessibility_checker,
        document_parser=document_parser,
        token_scanner=token_scanner,
        link_resolver=link_resolver,
        login_form_detector=login_form_detector,
    )
