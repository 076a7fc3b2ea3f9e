"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (catalog, library, rendering).
"""

from app.application.interfaces import ICatalog, ILibrary, ITemplateRenderer
from app.application.services import BrowseDispatcher, matches, tokenize
from app.application.use_cases import (
    CardinalityEstimator,
    CollectionResolver,
    SearchService,
)

__all__ = [
    "BrowseDispatcher",
    "CardinalityEstimator",
    "CollectionResolver",
    "ICatalog",
    "ILibrary",
    "ITemplateRenderer",
    "SearchService",
    "matches",
    "tokenize",
]
