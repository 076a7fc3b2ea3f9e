"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    Collection,
    CollectionEntry,
    Graph,
    Group,
    Metric,
    Origin,
    Source,
)
from app.domain.enums import BrowseView, LibraryItemType
from app.domain.exceptions import (
    MethodNotAllowedException,
    RequestTimeoutException,
    ResourceNotFoundException,
    ValidationException,
    VantageException,
)

__all__ = [
    # Entities
    "Collection",
    "CollectionEntry",
    "Graph",
    "Group",
    "Metric",
    "Origin",
    "Source",
    # Enums
    "BrowseView",
    "LibraryItemType",
    # Exceptions
    "MethodNotAllowedException",
    "RequestTimeoutException",
    "ResourceNotFoundException",
    "ValidationException",
    "VantageException",
]
