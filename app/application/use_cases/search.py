"""Free-text search use case over catalog sources and library collections."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, TypeVar

from app.application.dtos.browse import SearchResult
from app.application.services.matcher import Searchable, matches
from app.application.services.tokenizer import tokenize
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ICatalog, ILibrary
    from app.domain.entities import Source

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Searchable)


def filter_corpus(entities: Iterable[S], tokens: list[str]) -> list[S]:
    """Return entities matching all tokens, in input order."""
    return [entity for entity in entities if matches(entity, tokens)]


def _iter_sources(catalog: "ICatalog") -> Iterator["Source"]:
    for origin in catalog.origins():
        yield from origin.sources.values()


class SearchService:
    """Search sources and collections by name (all tokens must match).

    The two corpora are filtered independently; a source and a collection
    with the same name both appear.
    """

    def __init__(self, catalog: "ICatalog", library: "ILibrary") -> None:
        self.catalog = catalog
        self.library = library

    @traced("search.run")
    def search(self, query: str) -> SearchResult:
        """Return matches for query. An empty (or blank) query matches nothing."""
        if not query.strip():
            return SearchResult(query=query)
        tokens = tokenize(query)
        result = SearchResult(
            query=query,
            sources=filter_corpus(_iter_sources(self.catalog), tokens),
            collections=filter_corpus(self.library.collections(), tokens),
        )
        add_span_attributes(
            tokens=len(tokens),
            matched_sources=len(result.sources),
            matched_collections=len(result.collections),
        )
        logger.debug("Search %r matched %d item(s)", query, result.count)
        return result
