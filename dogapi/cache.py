# dogapi/cache.py
import logging
import threading
from typing import Dict, List, Tuple

from .fetcher import BreedFetcher, BreedNotFound

logger = logging.getLogger(__name__)


class _InFlight:
    # one per breed with a lookup running or queued
    def __init__(self):
        self.lock = threading.Lock()
        self.waiters = 0


class CachingBreedFetcher(BreedFetcher):
    """Memoizes successful lookups of an inner fetcher.

    Failed lookups are never cached, so a breed that raised BreedNotFound is
    fetched again on the next call. `calls_made` counts every lookup that
    reached the inner fetcher, whatever its outcome.

    Cached entries are stored as tuples and every caller gets its own list.

    At most one inner call per breed is in flight at a time; concurrent
    callers for the same breed wait for it and then read the cache.
    """

    def __init__(self, fetcher: BreedFetcher):
        self.fetcher = fetcher
        self._cache: Dict[str, Tuple[str, ...]] = {}
        self._calls_made = 0
        self._lock = threading.Lock()
        self._inflight: Dict[str, _InFlight] = {}

    @property
    def calls_made(self) -> int:
        return self._calls_made

    def __contains__(self, breed: str) -> bool:
        with self._lock:
            return breed in self._cache

    def close(self):
        self.fetcher.close()

    def fetch_sub_breeds(self, breed: str) -> List[str]:
        # Simple cache first
        with self._lock:
            if breed in self._cache:
                logger.debug("cache hit for %s", breed)
                return list(self._cache[breed])
            entry = self._inflight.setdefault(breed, _InFlight())
            entry.waiters += 1

        try:
            with entry.lock:
                with self._lock:
                    # filled in while we waited on another caller
                    if breed in self._cache:
                        return list(self._cache[breed])
                    self._calls_made += 1

                logger.debug("cache miss for %s, calling %s", breed, type(self.fetcher).__name__)
                try:
                    sub_breeds = self.fetcher.fetch_sub_breeds(breed)
                except BreedNotFound as e:
                    logger.info("lookup failed for %s, not cached: %s", breed, e)
                    raise

                with self._lock:
                    self._cache[breed] = tuple(sub_breeds)
                return list(sub_breeds)
        finally:
            with self._lock:
                entry.waiters -= 1
                if entry.waiters == 0:
                    del self._inflight[breed]
