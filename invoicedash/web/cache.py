"""Invalidation record for cached dashboard pages."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class PageCache:
    """Per-path generation counter bumped whenever a page's data changes.

    A renderer holding output tagged with an older generation must treat it
    as stale.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generations: dict[str, int] = {}

    def generation(self, path: str) -> int:
        with self._lock:
            return self._generations.get(path, 0)

    def invalidate(self, path: str) -> None:
        with self._lock:
            self._generations[path] = self._generations.get(path, 0) + 1
        logger.info("page_cache.invalidated", extra={"event": "page_cache.invalidated", "path": path})
