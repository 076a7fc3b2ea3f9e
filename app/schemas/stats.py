"""Stats API schemas."""

from pydantic import BaseModel, Field


class StatsResponse(BaseModel):
    """Response for GET /stats: distinct catalog counts and library sizes."""

    origins: int = Field(..., ge=0, description="Number of catalog origins")
    sources: int = Field(..., ge=0, description="Distinct source names across origins")
    metrics: int = Field(..., ge=0, description="Distinct metric names across sources")
    graphs: int = Field(..., ge=0)
    collections: int = Field(..., ge=0)
    groups: int = Field(..., ge=0, description="Source groups plus metric groups")
