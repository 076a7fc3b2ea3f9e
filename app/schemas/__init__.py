"""Pydantic request/response and seed schemas."""

from app.schemas.health import HealthResponse
from app.schemas.seed import CatalogSeed, LibrarySeed
from app.schemas.stats import StatsResponse

__all__ = [
    "CatalogSeed",
    "HealthResponse",
    "LibrarySeed",
    "StatsResponse",
]
