"""Router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.dependencies (no manual store/service construction).
"""

from fastapi import APIRouter

from app.api.endpoints import browse, health, stats

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
api_router.include_router(browse.router, prefix="/browse", tags=["browse"])
