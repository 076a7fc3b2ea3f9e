"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the shared catalog/library handles and the
use cases built on them. The handles live on app.state (set in create_app);
routes depend only on these dependencies, not on app.state directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from app.application.interfaces import ICatalog, ILibrary, ITemplateRenderer
from app.application.services.dispatcher import BrowseDispatcher
from app.application.use_cases import (
    CardinalityEstimator,
    CollectionResolver,
    SearchService,
)
from app.core.config import get_settings


def get_catalog(request: Request) -> ICatalog:
    """Process-wide catalog handle."""
    return request.app.state.catalog


def get_library(request: Request) -> ILibrary:
    """Process-wide library handle."""
    return request.app.state.library


def get_renderer(request: Request) -> ITemplateRenderer:
    """Template renderer for browse views."""
    return request.app.state.renderer


def get_dispatcher() -> BrowseDispatcher:
    return BrowseDispatcher(url_prefix=get_settings().url_prefix)


def get_collection_resolver(
    library: Annotated[ILibrary, Depends(get_library)],
) -> CollectionResolver:
    return CollectionResolver(library)


def get_search_service(
    catalog: Annotated[ICatalog, Depends(get_catalog)],
    library: Annotated[ILibrary, Depends(get_library)],
) -> SearchService:
    """Search use case (sources and collections by name)."""
    return SearchService(catalog, library)


def get_cardinality_estimator(
    catalog: Annotated[ICatalog, Depends(get_catalog)],
    library: Annotated[ILibrary, Depends(get_library)],
) -> CardinalityEstimator:
    """Stats use case; walks origins on stats_max_workers threads."""
    return CardinalityEstimator(
        catalog, library, max_workers=get_settings().stats_max_workers
    )
