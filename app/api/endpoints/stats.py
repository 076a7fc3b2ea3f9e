"""Stats API: distinct catalog counts and library sizes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.dependencies import get_cardinality_estimator
from app.application.use_cases import CardinalityEstimator
from app.schemas.stats import StatsResponse

router = APIRouter()


@router.api_route("", methods=["GET", "HEAD"], response_model=StatsResponse)
def get_stats(
    estimator: Annotated[CardinalityEstimator, Depends(get_cardinality_estimator)],
) -> StatsResponse:
    """Return counts recomputed from the current catalog and library."""
    report = estimator.estimate()
    return StatsResponse(
        origins=report.origins,
        sources=report.sources,
        metrics=report.metrics,
        graphs=report.graphs,
        collections=report.collections,
        groups=report.groups,
    )
