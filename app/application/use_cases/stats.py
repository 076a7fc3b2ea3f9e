"""Stats use case: distinct source/metric counts and library sizes."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from app.application.dtos.stats import CardinalityReport
from app.shared.telemetry.tracing import traced
from app.shared.utils.concurrent_set import ConcurrentSet

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ICatalog, ILibrary
    from app.domain.entities import Origin

logger = logging.getLogger(__name__)


def _walk_origin(origin: "Origin", source_keys: ConcurrentSet, metric_keys: ConcurrentSet) -> None:
    for source_key, source in origin.sources.items():
        source_keys.add(source_key)
        metric_keys.update(source.metrics.keys())


class CardinalityEstimator:
    """Count distinct catalog keys and library items, fresh on every call.

    Source and metric keys are deduplicated globally: a key recurring under
    several origins (or sources) counts once. With max_workers > 1 origins
    are walked concurrently into the same lock-guarded sets.
    """

    def __init__(
        self,
        catalog: "ICatalog",
        library: "ILibrary",
        max_workers: int = 1,
    ) -> None:
        self.catalog = catalog
        self.library = library
        self.max_workers = max(1, max_workers)

    @traced("stats.estimate")
    def estimate(self) -> CardinalityReport:
        origins = self.catalog.origins()
        source_keys = ConcurrentSet()
        metric_keys = ConcurrentSet()

        if self.max_workers > 1 and len(origins) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                futures = [
                    executor.submit(_walk_origin, origin, source_keys, metric_keys)
                    for origin in origins
                ]
                for future in futures:
                    future.result()
        else:
            for origin in origins:
                _walk_origin(origin, source_keys, metric_keys)

        report = CardinalityReport(
            origins=len(origins),
            sources=len(source_keys),
            metrics=len(metric_keys),
            graphs=len(self.library.graphs()),
            collections=len(self.library.collections()),
            groups=len(self.library.groups()),
        )
        logger.debug("Stats computed: %s", report)
        return report
