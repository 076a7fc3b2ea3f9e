"""In-memory catalog with copy-on-read enumeration.

Writers (catalog refresh, seed loading) and readers (search, stats) run on
different requests; every public method takes the lock, and origins()
hands out copies so a reader's walk never sees a dict change size.
"""

from __future__ import annotations

import logging
import threading

from app.domain.entities import Metric, Origin, Source

logger = logging.getLogger(__name__)


class InMemoryCatalog:
    """Process-wide catalog of origins → sources → metrics."""

    def __init__(self) -> None:
        self._origins: dict[str, Origin] = {}
        self._lock = threading.RLock()

    def origins(self) -> list[Origin]:
        """Return a snapshot of all origins in insertion order."""
        with self._lock:
            return [origin.copy() for origin in self._origins.values()]

    def insert_metric(self, origin_name: str, source_name: str, metric_name: str) -> Metric:
        """Record a metric, creating its origin and source when missing."""
        with self._lock:
            origin = self._origins.get(origin_name)
            if origin is None:
                origin = self._origins[origin_name] = Origin(name=origin_name)
            source = origin.sources.get(source_name)
            if source is None:
                source = origin.sources[source_name] = Source(
                    name=source_name, origin=origin_name
                )
            metric = source.metrics.get(metric_name)
            if metric is None:
                metric = source.metrics[metric_name] = Metric(
                    name=metric_name, source=source_name
                )
            return metric

    def replace_origin(self, origin: Origin) -> None:
        """Swap in a freshly collected origin (e.g. after a connector refresh)."""
        with self._lock:
            self._origins[origin.name] = origin.copy()
        logger.info("Catalog origin %s refreshed (%d sources)", origin.name, len(origin.sources))
