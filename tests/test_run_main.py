"""
Test for run.py main() function with dependency injection.
"""
from unittest.mock import patch

from run import main
from webanalyzer.container import Container
from webanalyzer.services.accessibility_cache import AccessibilityCache
from webanalyzer.services.page_analyzer import PageAnalyzer


def test_container_creates_services():
    container = Container()
    container.config.USER_AGENT.from_value("TestBot/1.0")
    container.config.HTTP_TIMEOUT.from_value(5)

    analyzer = container.page_analyzer()

    assert isinstance(analyzer, PageAnalyzer)
    assert analyzer.http_service.user_agent == "TestBot/1.0"
    assert analyzer.http_service.timeout == 5


def test_container_shares_one_cache_across_analyses():
    container = Container()
    cache = container.accessibility_cache()

    assert isinstance(cache, AccessibilityCache)
    assert container.accessibility_checker().cache is cache
    assert container.page_analyzer().accessibility_checker.cache is cache


def test_container_applies_probe_settings():
    container = Container()
    container.config.WEBANALYZER_PROBE_CONCURRENCY.from_value(4)
    container.config.WEBANALYZER_PROBE_TIMEOUT.from_value(1.5)

    checker = container.accessibility_checker()

    assert checker.concurrency == 4
    assert checker.probe.timeout == 1.5


def test_main_accepts_injected_container():
    container = Container()
    container.config.WEBANALYZER_HOST.from_value("127.0.0.1")
    container.config.WEBANALYZER_PORT.from_value(9999)

    with patch('run.uvicorn.run') as mock_uvicorn:
        main(container=container)

    assert mock_uvicorn.called
    assert mock_uvicorn.call_args.kwargs == {"host": "127.0.0.1", "port": 9999}
