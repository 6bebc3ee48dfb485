import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Dict

from webanalyzer.domain.analysis_result import LinkAnalysis
from webanalyzer.domain.link import LinkResolution, ResolvedLink
from webanalyzer.services.accessibility_cache import AccessibilityCache
from webanalyzer.services.link_probe import LinkProbe

logger = logging.getLogger(__name__)


class _LinkTally:
    """Aggregate owned by the thread running `check`; workers never touch it."""

    def __init__(self, total: int):
        self.total = total
        self.internal = 0
        self.external = 0
        self.inaccessible_urls: list[str] = []

    def record(self, link: ResolvedLink, accessible: bool) -> None:
        if not accessible:
            self.inaccessible_urls.append(link.url)
        elif link.internal:
            self.internal += 1
        else:
            self.external += 1

    def record_malformed(self, href: str) -> None:
        self.inaccessible_urls.append(href)

    def to_analysis(self) -> LinkAnalysis:
        return LinkAnalysis(
            total=self.total,
            internal=self.internal,
            external=self.external,
            inaccessible=len(self.inaccessible_urls),
            inaccessible_urls=tuple(self.inaccessible_urls),
        )


class AccessibilityChecker:
    """Classifies resolved links as internal, external or inaccessible.

    Cached decisions are used as-is. Every other link gets a liveness probe;
    probes run on a thread pool created for this call and a fresh semaphore
    keeps at most `concurrency` of them in flight. Outcomes flow back to the
    calling thread, which is the only one updating the aggregate, and the
    call returns once every probe has finished.
    """

    def __init__(self, probe: LinkProbe, cache: AccessibilityCache, concurrency: int = 10):
        self.probe = probe
        self.cache = cache
        self.concurrency = max(1, int(concurrency))

    def _probe_and_store(self, link: ResolvedLink, limiter: threading.BoundedSemaphore) -> bool:
        with limiter:
            accessible = self.probe.is_accessible(link.url)
        self.cache.store(link.url, accessible)
        return accessible

    def check(self, resolution: LinkResolution) -> LinkAnalysis:
        logger.info("Starting link accessibility check for %s", resolution.base_url)
        tally = _LinkTally(resolution.total)
        for href in resolution.malformed:
            tally.record_malformed(href)

        pending: list[ResolvedLink] = []
        for link in resolution.resolved:
            accessible, found = self.cache.lookup(link.url)
            if found:
                logger.debug("Cache hit for %s (accessible: %s)", link.url, accessible)
                tally.record(link, accessible)
            else:
                pending.append(link)

        if pending:
            limiter = threading.BoundedSemaphore(self.concurrency)
            with ThreadPoolExecutor(max_workers=self.concurrency, thread_name_prefix="link-probe") as executor:
                futures: Dict[Future, ResolvedLink] = {
                    executor.submit(self._probe_and_store, link, limiter): link for link in pending
                }
                for done, future in enumerate(as_completed(futures), start=1):
                    link = futures[future]
                    try:
                        accessible = future.result()
                    except Exception:
                        logger.exception("Probe crashed for %s; treating as inaccessible", link.url)
                        accessible = False
                    logger.debug("Processed link %d/%d: %s (accessible: %s)", done, len(pending), link.url, accessible)
                    tally.record(link, accessible)

        analysis = tally.to_analysis()
        logger.info(
            "Analysis complete. Total: %d, Internal: %d, External: %d, Inaccessible: %d.",
            analysis.total,
            analysis.internal,
            analysis.external,
            analysis.inaccessible,
        )
        return analysis
