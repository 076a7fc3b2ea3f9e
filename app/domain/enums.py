"""Domain enumerations for the Vantage application.

Enums represent fixed sets of domain values (e.g. library item type).
"""

from enum import Enum


class LibraryItemType(str, Enum):
    """Kind of item stored in the library.

    Used for typed lookups: the same ID namespace is never shared across types.
    """

    COLLECTION = "collection"
    GRAPH = "graph"
    SOURCE_GROUP = "sourcegroup"
    METRIC_GROUP = "metricgroup"


class BrowseView(str, Enum):
    """Terminal views of the browse front end."""

    INDEX = "index"
    COLLECTION = "collection"
    SEARCH = "search"
