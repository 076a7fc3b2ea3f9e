"""Pytest configuration and fixtures for vantage.

Builds a fresh app per test (create_app) and fills its catalog/library with
a small fixture data set. HTTP tests use httpx over ASGITransport (no
lifespan, so seed files are not read).
"""

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.config import get_settings
from app.domain.entities import Collection, CollectionEntry, Graph, Group
from app.domain.enums import LibraryItemType
from app.infrastructure.catalog import InMemoryCatalog
from app.infrastructure.library import InMemoryLibrary
from app.main import create_app

# origin → source → metrics; "web01.example.net" and "cpu.user" recur across origins.
CATALOG_DATA: dict[str, dict[str, list[str]]] = {
    "collectd": {
        "web01.example.net": ["cpu.user", "load.shortterm"],
        "db01.example.net": ["cpu.user", "disk.read"],
    },
    "graphite": {
        "web01.example.net": ["cpu.user", "net.rx"],
    },
}


def build_catalog(data: dict[str, dict[str, list[str]]] = CATALOG_DATA) -> InMemoryCatalog:
    catalog = InMemoryCatalog()
    for origin, sources in data.items():
        for source, metrics in sources.items():
            for metric in metrics:
                catalog.insert_metric(origin, source, metric)
    return catalog


def build_library() -> InMemoryLibrary:
    """Library tree: infra (root) → web, db; four graphs, two groups."""
    library = InMemoryLibrary()
    library.store_graph(Graph(id="g-cpu", name="CPU usage"))
    library.store_graph(Graph(id="g-load", name="Load average"))
    library.store_graph(Graph(id="g-disk", name="Disk IO"))
    library.store_graph(Graph(id="g-tpl", name="Per-host template", template=True))

    library.store_collection(
        Collection(
            id="infra",
            name="Infrastructure",
            entries=[CollectionEntry(id="g-cpu"), CollectionEntry(id="g-load")],
        )
    )
    library.store_collection(
        Collection(
            id="web",
            name="Web servers",
            entries=[
                CollectionEntry(id="g-cpu", options={"title": "Web CPU"}),
                CollectionEntry(id="g-disk"),
                CollectionEntry(id="g-tpl"),
            ],
        ),
        parent_id="infra",
    )
    library.store_collection(
        Collection(id="db", name="Database servers", entries=[CollectionEntry(id="g-disk")]),
        parent_id="infra",
    )

    library.store_group(
        Group(id="sg-web", name="web hosts", type=LibraryItemType.SOURCE_GROUP)
    )
    library.store_group(
        Group(id="mg-cpu", name="cpu metrics", type=LibraryItemType.METRIC_GROUP)
    )
    return library


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return build_catalog()


@pytest.fixture
def library() -> InMemoryLibrary:
    return build_library()


@pytest.fixture
def app(catalog: InMemoryCatalog, library: InMemoryLibrary) -> FastAPI:
    """FastAPI app whose shared handles point at the fixture catalog/library."""
    get_settings.cache_clear()
    application = create_app()
    application.state.catalog = catalog
    application.state.library = library
    yield application
    get_settings.cache_clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
