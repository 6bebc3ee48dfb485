import logging
import re
from typing import Iterable, Optional
from urllib.parse import SplitResult, urljoin, urlsplit

from webanalyzer.domain.link import LinkResolution, ResolvedLink

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def host_of(parts: SplitResult) -> str:
    """Authority without userinfo; port kept, case untouched."""
    return parts.netloc.rpartition("@")[2]


def parse_href(href: str) -> Optional[SplitResult]:
    """Parse an href, returning None when it is not a usable URL reference."""
    if _CONTROL_CHARS.search(href) or _BAD_PERCENT_ESCAPE.search(href):
        return None
    try:
        parts = urlsplit(href)
        # Accessing the port validates it.
        parts.port
    except ValueError:
        return None
    if any(ch.isspace() for ch in parts.netloc):
        return None
    return parts


class LinkResolver:
    """Turns raw hrefs into absolute URLs relative to the analyzed page.

    Host affinity is exact string equality of the resolved host against the
    page's host: no `www.` folding and no subdomain matching.
    """

    def resolve(self, base_url: str, hrefs: Iterable[str]) -> LinkResolution:
        base_parts = urlsplit(base_url)
        base_host = host_of(base_parts)
        resolution = LinkResolution(base_url=base_url, base_host=base_host)

        for href in hrefs:
            resolution.total += 1
            reference = href.strip()
            if parse_href(reference) is None:
                logger.warning("Malformed link %r on %s", href, base_url)
                resolution.malformed.append(href)
                continue

            absolute = urljoin(base_url, reference)
            host = host_of(urlsplit(absolute))
            resolution.resolved.append(
                ResolvedLink(href=href, url=absolute, host=host, internal=host == base_host)
            )

        logger.info(
            "Resolved %d links for %s (%d malformed)",
            resolution.total,
            base_url,
            len(resolution.malformed),
        )
        return resolution
