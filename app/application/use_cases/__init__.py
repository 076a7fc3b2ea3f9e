"""Application use cases: one entry point per workflow."""

from app.application.use_cases.browse import CollectionResolver
from app.application.use_cases.search import SearchService
from app.application.use_cases.stats import CardinalityEstimator

__all__ = [
    "CardinalityEstimator",
    "CollectionResolver",
    "SearchService",
]
