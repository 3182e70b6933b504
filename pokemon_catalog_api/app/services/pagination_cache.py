"""
Memoization of listing pages.

Pages are cached under the key ``"<limit>-<page>"``.  A hit returns the
very list object stored on the first computation, without copying.
The lock is held across lookup, computation and store, so concurrent
first requests for a key compute it exactly once.

Writes to the store do not touch this cache; the service decides
whether to clear it.  With ``max_entries`` set, the least recently
used page is evicted once the bound is exceeded.
"""

import logging
import threading
from collections import OrderedDict
from typing import Callable, List, Optional

from pokemon_catalog_api.app.schemas.pokemon import Pokemon

logger = logging.getLogger(__name__)

PageLoader = Callable[[int, int], List[Pokemon]]


def cache_key(limit: int, page: int) -> str:
    return f"{limit}-{page}"


class PaginationCache:
    """Listing results keyed by ``(limit, page)``."""

    def __init__(self, max_entries: int = 0) -> None:
        # 0 or a negative value means unbounded
        self.max_entries = max_entries
        self._pages: "OrderedDict[str, List[Pokemon]]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._pages

    def get(self, key: str) -> Optional[List[Pokemon]]:
        with self._lock:
            return self._pages.get(key)

    def get_or_compute(self, limit: int, page: int, compute: PageLoader) -> List[Pokemon]:
        """Return the cached page, computing and storing it on a miss."""
        key = cache_key(limit, page)
        with self._lock:
            cached = self._pages.get(key)
            if cached is not None:
                self._pages.move_to_end(key)
                logger.debug("Pagination cache hit for %s", key)
                return cached
            logger.debug("Pagination cache miss for %s", key)
            result = compute(limit, page)
            self._pages[key] = result
            if self.max_entries > 0 and len(self._pages) > self.max_entries:
                evicted, _ = self._pages.popitem(last=False)
                logger.debug("Evicted cached page %s", evicted)
            return result

    def clear(self) -> None:
        with self._lock:
            self._pages.clear()
