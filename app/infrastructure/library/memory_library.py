"""In-memory library of graphs, collections and groups.

Items are keyed by ID per type. Enumeration returns list snapshots taken
under the lock; filter_collection builds transient copies and never
touches stored collections.
"""

from __future__ import annotations

import logging
import threading

from app.domain.entities import Collection, Graph, Group
from app.domain.enums import LibraryItemType
from app.domain.exceptions import ResourceNotFoundException, ValidationException

logger = logging.getLogger(__name__)


class InMemoryLibrary:
    """Process-wide library store."""

    def __init__(self) -> None:
        self._graphs: dict[str, Graph] = {}
        self._collections: dict[str, Collection] = {}
        self._groups: dict[str, Group] = {}
        self._lock = threading.RLock()

    def _store_for(self, item_type: LibraryItemType) -> dict:
        if item_type == LibraryItemType.COLLECTION:
            return self._collections
        if item_type == LibraryItemType.GRAPH:
            return self._graphs
        return self._groups

    # ---- Reads ----

    def get_item(
        self, item_id: str, item_type: LibraryItemType
    ) -> Collection | Graph | Group:
        """Return the item by exact ID.

        Raises:
            ResourceNotFoundException: No item of item_type has this ID.
        """
        with self._lock:
            item = self._store_for(item_type).get(item_id)
        if item is None or (isinstance(item, Group) and item.type != item_type):
            raise ResourceNotFoundException(item_type.value, item_id)
        return item

    def collections(self) -> list[Collection]:
        with self._lock:
            return list(self._collections.values())

    def graphs(self) -> list[Graph]:
        with self._lock:
            return list(self._graphs.values())

    def groups(self) -> list[Group]:
        with self._lock:
            return list(self._groups.values())

    def filter_collection(self, collection: Collection, query: str) -> Collection:
        """Return a copy of collection keeping only entries whose graph matches query.

        An entry is kept when its graph is a template or its graph name
        contains query (case-insensitive); entries pointing to unknown graphs
        are dropped. Children are filtered recursively and kept only when
        they still hold entries or children.
        """
        with self._lock:
            return self._filter(collection, query.lower())

    def _filter(self, collection: Collection, needle: str) -> Collection:
        filtered = collection.copy()
        filtered.entries = []
        filtered.children = []

        for entry in collection.entries:
            graph = self._graphs.get(entry.id)
            if graph is None:
                continue
            if graph.template or needle in graph.name.lower():
                filtered.entries.append(entry)

        for child in collection.children:
            filtered_child = self._filter(child, needle)
            if filtered_child.entries or filtered_child.children:
                filtered.children.append(filtered_child)

        return filtered

    # ---- Writes ----

    def store_graph(self, graph: Graph) -> None:
        with self._lock:
            self._graphs[graph.id] = graph

    def store_group(self, group: Group) -> None:
        with self._lock:
            self._groups[group.id] = group

    def store_collection(self, collection: Collection, parent_id: str | None = None) -> None:
        """Store collection, linking it under parent_id when given.

        Raises:
            ResourceNotFoundException: parent_id is not a stored collection.
            ValidationException: Linking would make the collection its own ancestor.
        """
        with self._lock:
            if parent_id is not None:
                parent = self._collections.get(parent_id)
                if parent is None:
                    raise ResourceNotFoundException(
                        LibraryItemType.COLLECTION.value, parent_id
                    )
                ancestor: Collection | None = parent
                while ancestor is not None:
                    if ancestor.id == collection.id:
                        raise ValidationException(
                            f"Collection {collection.id} cannot be its own ancestor",
                            field="parent",
                        )
                    ancestor = ancestor.parent
                collection.parent = parent
                if all(child is not collection for child in parent.children):
                    parent.children.append(collection)
            self._collections[collection.id] = collection
