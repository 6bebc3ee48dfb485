from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

HEADING_TAGS: Tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")


def empty_heading_counts() -> Dict[str, int]:
    return {tag: 0 for tag in HEADING_TAGS}


@dataclass(frozen=True)
class LinkAnalysis:
    """Classification counts for the hyperlinks found on a page.

    Every extracted href lands in exactly one of internal, external or
    inaccessible, so the three counters always add up to `total`.
    """

    total: int = 0
    internal: int = 0
    external: int = 0
    inaccessible: int = 0
    inaccessible_urls: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "internal": self.internal,
            "external": self.external,
            "inaccessible": self.inaccessible,
            "inaccessibleURLs": list(self.inaccessible_urls),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Summary of a single analyzed page."""

    html_version: str
    page_title: str
    headings: Dict[str, int] = field(default_factory=empty_heading_counts)
    links: LinkAnalysis = field(default_factory=LinkAnalysis)
    contains_login_form: bool = False

    def to_dict(self) -> dict:
        return {
            "htmlVersion": self.html_version,
            "pageTitle": self.page_title,
            "headings": dict(self.headings),
            "links": self.links.to_dict(),
            "containsLoginForm": self.contains_login_form,
        }
