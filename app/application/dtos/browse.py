"""DTOs for browse views: resolved collection and search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.domain.enums import BrowseView

if TYPE_CHECKING:
    from app.domain.entities import Collection, Source

# Parent marker of a collection at the root of the tree.
ROOT_PARENT = "null"


@dataclass(frozen=True)
class BrowseRoute:
    """Dispatch outcome: which view to render and the path identifier it needs."""

    view: BrowseView
    identifier: str | None = None


@dataclass(frozen=True)
class CollectionView:
    """Collection (possibly a filtered copy) plus its parent marker.

    parent is the parent collection ID, or ROOT_PARENT for a root collection.
    """

    collection: "Collection"
    parent: str

    @property
    def id(self) -> str:
        return self.collection.id

    @property
    def name(self) -> str:
        return self.collection.name


@dataclass(frozen=True)
class SearchResult:
    """Matches from both corpora, each in stored order."""

    query: str
    sources: list["Source"] = field(default_factory=list)
    collections: list["Collection"] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.sources) + len(self.collections)
