"""Browse use case: resolve a collection path and optional content filter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.browse import ROOT_PARENT, CollectionView
from app.domain.enums import LibraryItemType
from app.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ILibrary

logger = logging.getLogger(__name__)


class CollectionResolver:
    """Map a path identifier to a collection view; read-only."""

    def __init__(self, library: "ILibrary") -> None:
        self.library = library

    @traced("browse.resolve_collection")
    def resolve(self, path_id: str, raw_query: str = "") -> CollectionView:
        """Look up the collection and filter it when raw_query is non-empty.

        Raises:
            ResourceNotFoundException: No collection has ID path_id.
        """
        collection = self.library.get_item(path_id, LibraryItemType.COLLECTION)
        if raw_query:
            collection = self.library.filter_collection(collection, raw_query)
            logger.debug(
                "Filtered collection %s by %r: %d entries kept",
                path_id,
                raw_query,
                len(collection.entries),
            )
        parent = collection.parent.id if collection.parent is not None else ROOT_PARENT
        return CollectionView(collection=collection, parent=parent)
