"""Domain entities: catalog and library models.

Pure domain models; no storage or presentation concerns.
"""

from app.domain.entities.catalog import Metric, Origin, Source
from app.domain.entities.library import Collection, CollectionEntry, Graph, Group

__all__ = [
    "Collection",
    "CollectionEntry",
    "Graph",
    "Group",
    "Metric",
    "Origin",
    "Source",
]
