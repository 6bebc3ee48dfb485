from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ResolvedLink:
    """An href turned into an absolute URL, ready to be probed."""

    href: str
    url: str
    host: str
    internal: bool


@dataclass
class LinkResolution:
    """Outcome of resolving every href harvested from one page.

    `total` counts all harvested hrefs; `malformed` holds the ones that could
    not be parsed (already terminal, never probed) and `resolved` the rest.
    """

    base_url: str
    base_host: str
    total: int = 0
    malformed: List[str] = field(default_factory=list)
    resolved: List[ResolvedLink] = field(default_factory=list)
