"""
Matching Layer Models

Value types produced by the nutritional aggregator and the protocol
recommender. All frozen; recomputed on demand, never cached.

Version: matching_layer_v1
"""

from typing import List, Tuple

from pydantic import BaseModel, Field

from ..catalog.models import Protocol


class NutritionalFocus(BaseModel):
    """
    Union of the guidance of several ailments.

    Each field is de-duplicated and ordered by first appearance while
    walking the selected ailments in catalog order.
    """
    beneficial_foods: Tuple[str, ...] = ()
    avoid_foods: Tuple[str, ...] = ()
    key_nutrients: Tuple[str, ...] = ()
    meal_plan_focus: Tuple[str, ...] = ()

    class Config:
        frozen = True
        extra = "forbid"

    def is_empty(self) -> bool:
        return not (self.beneficial_foods or self.avoid_foods or self.key_nutrients or self.meal_plan_focus)


class ProtocolRecommendation(BaseModel):
    protocol: Protocol
    match_score: int = Field(ge=0, le=100, description="Percent of selected ailments that recommend this protocol")
    matched_ailments: Tuple[str, ...] = ()
    reasoning: str

    class Config:
        frozen = True
        extra = "forbid"


# =============================================================================
# API MODELS
# =============================================================================

class AilmentSelectionRequest(BaseModel):
    ailment_ids: List[str] = Field(default_factory=list, description="Selected ailment ids, in selection order")


class NutritionalFocusResponse(BaseModel):
    success: bool = True
    ailment_ids: List[str]
    resolved_ailment_ids: List[str]
    nutritional_focus: NutritionalFocus


class RecommendationResponse(BaseModel):
    success: bool = True
    ailment_ids: List[str]
    count: int
    recommendations: List[ProtocolRecommendation]


class MatchingHealthResponse(BaseModel):
    status: str
    module: str
    version: str
    ailment_count: int
    protocol_count: int
    timestamp: str
