"""Load catalog and library seed files into the in-memory stores."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from app.domain.entities import Collection, CollectionEntry, Graph, Group
from app.domain.enums import LibraryItemType
from app.domain.exceptions import ValidationException
from app.infrastructure.catalog.memory_catalog import InMemoryCatalog
from app.infrastructure.library.memory_library import InMemoryLibrary
from app.schemas.seed import CatalogSeed, CollectionSeed, LibrarySeed

logger = logging.getLogger(__name__)


def _read(path: str, model: type[CatalogSeed] | type[LibrarySeed]) -> CatalogSeed | LibrarySeed:
    try:
        return model.model_validate_json(Path(path).read_text(encoding="utf-8"))
    except ValidationError as e:
        raise ValidationException(f"Invalid seed file {path}: {e}", field="seed") from e


def load_catalog(catalog: InMemoryCatalog, seed: CatalogSeed) -> None:
    """Insert every origin/source/metric of seed into catalog."""
    for origin in seed.origins:
        for source in origin.sources:
            for metric in source.metrics:
                catalog.insert_metric(origin.name, source.name, metric)


def _order_collections(seeds: list[CollectionSeed]) -> list[CollectionSeed]:
    """Return seeds so that every parent precedes its children.

    Raises:
        ValidationException: A parent is missing or parents form a cycle.
    """
    ordered: list[CollectionSeed] = []
    placed: set[str] = set()
    pending = list(seeds)
    while pending:
        ready = [s for s in pending if s.parent is None or s.parent in placed]
        if not ready:
            ids = ", ".join(s.id for s in pending)
            raise ValidationException(
                f"Unresolvable collection parents for: {ids}", field="parent"
            )
        ordered.extend(ready)
        placed.update(s.id for s in ready)
        pending = [s for s in pending if s.id not in placed]
    return ordered


def load_library(library: InMemoryLibrary, seed: LibrarySeed) -> None:
    """Store graphs, groups and collections (parents first) of seed into library."""
    for graph in seed.graphs:
        library.store_graph(
            Graph(
                id=graph.id,
                name=graph.name,
                description=graph.description,
                template=graph.template,
            )
        )
    for group in seed.groups:
        library.store_group(
            Group(
                id=group.id,
                name=group.name,
                type=LibraryItemType(group.type),
                entries=group.entries,
            )
        )
    for item in _order_collections(seed.collections):
        library.store_collection(
            Collection(
                id=item.id,
                name=item.name,
                description=item.description,
                entries=[CollectionEntry(id=e.id, options=e.options) for e in item.entries],
            ),
            parent_id=item.parent,
        )


def load_seeds(
    catalog: InMemoryCatalog,
    library: InMemoryLibrary,
    catalog_path: str | None,
    library_path: str | None,
) -> None:
    """Load the configured seed files; unset paths are skipped."""
    if catalog_path:
        load_catalog(catalog, _read(catalog_path, CatalogSeed))
        logger.info("Catalog seeded from %s", catalog_path)
    if library_path:
        load_library(library, _read(library_path, LibrarySeed))
        logger.info("Library seeded from %s", library_path)
