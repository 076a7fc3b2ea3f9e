"""Application DTOs (no storage dependency)."""

from app.application.dtos.browse import (
    ROOT_PARENT,
    BrowseRoute,
    CollectionView,
    SearchResult,
)
from app.application.dtos.stats import CardinalityReport

__all__ = [
    "ROOT_PARENT",
    "BrowseRoute",
    "CardinalityReport",
    "CollectionView",
    "SearchResult",
]
