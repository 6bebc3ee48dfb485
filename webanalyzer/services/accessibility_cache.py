import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Tuple


@dataclass(frozen=True)
class _AccessibilityCacheEntry:
    accessible: bool
    stored_at: float


class AccessibilityCache:
    """
    Process-wide memo of "is this absolute URL reachable" decisions.

    Shared by every analysis and by every probe thread within one analysis,
    so all access goes through a single lock. Entries are atomic per key;
    nothing is guaranteed across keys. Staleness and memory are bounded by:
    - `ttl_seconds`: entries older than the TTL read as missing
    - `max_size`: least recently used entries are evicted first
    """

    def __init__(self, *, max_size: int = 10_000, ttl_seconds: int = 600, clock: Callable[[], float] = time.monotonic):
        """Create a link accessibility cache.

        - `max_size` bounds the number of URLs cached (LRU eviction).
        - `ttl_seconds` bounds staleness; a non-positive TTL disables caching.
        """
        self._max_size = int(max_size) if max_size is not None else 10_000
        if self._max_size <= 0:
            self._max_size = 1

        self._ttl_seconds = int(ttl_seconds) if ttl_seconds is not None else 600
        if self._ttl_seconds <= 0:
            # Treat non-positive TTL as "don't cache" by expiring immediately.
            self._ttl_seconds = 0

        self._clock = clock
        self._lock = threading.Lock()
        self._cache: "OrderedDict[str, _AccessibilityCacheEntry]" = OrderedDict()

    def _is_expired(self, entry: _AccessibilityCacheEntry) -> bool:
        if self._ttl_seconds == 0:
            return True
        return (self._clock() - entry.stored_at) > self._ttl_seconds

    def _evict_if_needed(self) -> None:
        while len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def lookup(self, url: str) -> Tuple[bool, bool]:
        """Return `(accessible, found)`; `found` is False on a miss or an expired entry."""
        with self._lock:
            entry = self._cache.get(url)
            if entry is None:
                return False, False
            if self._is_expired(entry):
                del self._cache[url]
                return False, False
            # Refresh LRU order on hit
            self._cache.move_to_end(url)
            return entry.accessible, True

    def store(self, url: str, accessible: bool) -> None:
        """Record a probe outcome; an existing entry is overwritten (last writer wins)."""
        with self._lock:
            self._cache[url] = _AccessibilityCacheEntry(accessible=bool(accessible), stored_at=self._clock())
            self._cache.move_to_end(url)
            self._evict_if_needed()

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def _purge_expired(self) -> None:
        expired = [url for url, entry in self._cache.items() if self._is_expired(entry)]
        for url in expired:
            del self._cache[url]

    def __len__(self) -> int:
        """Number of live entries; expired ones are dropped first."""
        with self._lock:
            self._purge_expired()
            return len(self._cache)
