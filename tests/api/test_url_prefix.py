"""The front end can be mounted under a URL prefix."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import get_settings
from app.main import create_app


@pytest.fixture
async def prefixed_client(monkeypatch: pytest.MonkeyPatch, catalog, library):
    monkeypatch.setenv("URL_PREFIX", "/vantage")
    get_settings.cache_clear()
    app = create_app()
    app.state.catalog = catalog
    app.state.library = library
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    get_settings.cache_clear()


async def test_prefixed_routes(prefixed_client: AsyncClient) -> None:
    assert (await prefixed_client.get("/vantage/browse/")).status_code == 200
    assert (await prefixed_client.get("/vantage/stats")).json()["collections"] == 3
    response = await prefixed_client.get("/vantage/browse/collections/infra")
    assert "/vantage/browse/collections/web" in response.text


async def test_root_redirects_to_prefixed_browse(prefixed_client: AsyncClient) -> None:
    response = await prefixed_client.get("/", follow_redirects=False)
    assert response.headers["location"] == "/vantage/browse/"


async def test_unprefixed_browse_is_404(prefixed_client: AsyncClient) -> None:
    assert (await prefixed_client.get("/browse/")).status_code == 404
