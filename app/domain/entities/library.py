"""Library domain entities: graphs, collections and groups.

Collections form a tree through parent/children references and list
graph entries by graph ID.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from app.domain.enums import LibraryItemType
from app.domain.exceptions import ValidationException


def _require_id(item_id: str, kind: str) -> None:
    if not item_id:
        raise ValidationException(f"{kind} ID is required", field="id")


@dataclass
class Graph:
    """A graph definition; template graphs are rendered per source/metric."""

    id: str
    name: str
    description: str = ""
    template: bool = False

    def __post_init__(self) -> None:
        _require_id(self.id, "Graph")


@dataclass
class CollectionEntry:
    """Reference from a collection to a graph, with display options."""

    id: str
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(eq=False)
class Collection:
    """A named, nestable set of graph entries.

    Equality is identity: two collections are the same only if they are the
    same stored object (parent/children references would otherwise recurse).
    """

    id: str
    name: str
    description: str = ""
    parent: Collection | None = field(default=None, repr=False)
    children: list[Collection] = field(default_factory=list, repr=False)
    entries: list[CollectionEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require_id(self.id, "Collection")

    def copy(self) -> Collection:
        """Return a shallow copy with private children/entries lists.

        The parent reference is shared; children are not copied.
        """
        return replace(
            self,
            children=list(self.children),
            entries=list(self.entries),
        )


@dataclass
class Group:
    """A source group or metric group: a named set of match patterns."""

    id: str
    name: str
    type: LibraryItemType
    entries: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require_id(self.id, "Group")
        if self.type not in (LibraryItemType.SOURCE_GROUP, LibraryItemType.METRIC_GROUP):
            raise ValidationException(
                f"Group type must be sourcegroup or metricgroup, got: {self.type!r}",
                field="type",
            )
