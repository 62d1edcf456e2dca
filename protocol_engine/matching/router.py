"""
Matching Layer Endpoints

POST /api/v1/matching/nutritional-focus  - Aggregate guidance for selected ailments
POST /api/v1/matching/recommendations    - Rank protocols for selected ailments
GET  /api/v1/matching/health             - Health check

Version: matching_layer_v1
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..catalog.ailments import AILMENT_CATALOG
from ..catalog.protocols import PROTOCOL_CATALOG
from .aggregate import aggregate, resolve_ailments
from .models import (
    AilmentSelectionRequest,
    MatchingHealthResponse,
    NutritionalFocusResponse,
    RecommendationResponse,
)
from .recommend import recommend

router = APIRouter(
    prefix="/api/v1/matching",
    tags=["matching"],
)


@router.get("/health", response_model=MatchingHealthResponse)
async def matching_health():
    return MatchingHealthResponse(
        status="ok",
        module="matching_layer",
        version="matching_layer_v1",
        ailment_count=len(AILMENT_CATALOG),
        protocol_count=len(PROTOCOL_CATALOG),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/nutritional-focus", response_model=NutritionalFocusResponse)
async def nutritional_focus_endpoint(request: AilmentSelectionRequest):
    """
    Aggregate nutritional guidance for a selection.

    Unknown ids are ignored; resolved_ailment_ids shows which ids counted.
    """
    focus = aggregate(request.ailment_ids)
    return NutritionalFocusResponse(
        ailment_ids=request.ailment_ids,
        resolved_ailment_ids=[a.id for a in resolve_ailments(request.ailment_ids)],
        nutritional_focus=focus,
    )


@router.post("/recommendations", response_model=RecommendationResponse)
async def recommendations_endpoint(request: AilmentSelectionRequest):
    recommendations = recommend(request.ailment_ids)
    return RecommendationResponse(
        ailment_ids=request.ailment_ids,
        count=len(recommendations),
        recommendations=recommendations,
    )
