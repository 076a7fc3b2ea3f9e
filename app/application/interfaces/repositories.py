"""Collaborator interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Enumerations return snapshots: callers may iterate them while other requests
mutate the underlying store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities import Collection, Graph, Group, Origin
    from app.domain.enums import LibraryItemType


class ICatalog(Protocol):
    """Protocol for the time-series catalog (origins → sources → metrics)."""

    def origins(self) -> list[Origin]:
        """Return a snapshot of all origins in stored order."""


class ILibrary(Protocol):
    """Protocol for the library of collections, graphs and groups."""

    def get_item(
        self, item_id: str, item_type: LibraryItemType
    ) -> Collection | Graph | Group:
        """Return the item by exact ID. Raises ResourceNotFoundException if absent."""

    def filter_collection(self, collection: Collection, query: str) -> Collection:
        """Return a new collection holding only the items matching query."""

    def collections(self) -> list[Collection]:
        """Return a snapshot of all collections in stored order."""

    def graphs(self) -> list[Graph]:
        """Return a snapshot of all graphs in stored order."""

    def groups(self) -> list[Group]:
        """Return a snapshot of all source and metric groups."""
