from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Dict, Optional, Tuple

from ..models.aggregates import AggregatedUserData

logger = logging.getLogger(__name__)

CacheKey = Tuple[date, date, int]


class AggregationCache:
    """Memoizes aggregates per window and data version.

    Seeing a newer version evicts every entry computed from older data, so the
    cache never holds more than the windows requested since the last write.
    """

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, AggregatedUserData] = {}
        self._version = 0
        self._lock = threading.Lock()

    def _observe(self, version: int) -> None:
        if version > self._version:
            if self._entries:
                logger.debug(
                    "Data version %d -> %d, dropping %d cached aggregates",
                    self._version,
                    version,
                    len(self._entries),
                )
            self._entries = {k: v for k, v in self._entries.items() if k[2] >= version}
            self._version = version

    def get(self, start: date, end: date, version: int) -> Optional[AggregatedUserData]:
        with self._lock:
            self._observe(version)
            hit = self._entries.get((start, end, version))
        logger.debug("Aggregation cache %s for %s..%s v%d", "hit" if hit else "miss", start, end, version)
        return hit

    def put(self, start: date, end: date, version: int, value: AggregatedUserData) -> None:
        with self._lock:
            self._observe(version)
            if version < self._version:
                return
            self._entries[(start, end, version)] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
