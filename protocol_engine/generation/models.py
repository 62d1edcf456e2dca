"""
Generation Layer Models

Outbound request payloads for the external plan generation service and
the best-effort persistence payload for the protocol store.

Request models serialise with camelCase aliases (model_dump(by_alias=True)),
the field names the generation service expects.

Version: generation_v1
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from ..catalog.models import Intensity
from ..session.models import PriorityLevel, ProtocolFamily, utc_now


class LongevityExperience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class CleanseExperience(str, Enum):
    FIRST_TIME = "first_time"
    EXPERIENCED = "experienced"
    ADVANCED = "advanced"


class StorageType(str, Enum):
    LONGEVITY = "longevity"
    PARASITE_CLEANSE = "parasite_cleanse"


class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "forbid"


# =============================================================================
# GENERATION REQUESTS
# =============================================================================

class NutritionalFocusPayload(_CamelModel):
    beneficial_foods: List[str] = Field(default_factory=list)
    avoid_foods: List[str] = Field(default_factory=list)
    key_nutrients: List[str] = Field(default_factory=list)
    meal_plan_focus: List[str] = Field(default_factory=list)


class LongevityGenerationRequest(_CamelModel):
    plan_name: str
    duration: int = Field(ge=7, le=365)
    fasting_protocol: str
    experience_level: LongevityExperience = LongevityExperience.BEGINNER
    primary_goals: List[str] = Field(default_factory=list)
    daily_calorie_target: int = Field(ge=1000, le=4000)
    client_name: str


class CleanseGenerationRequest(_CamelModel):
    plan_name: str
    duration: str = Field(description="Days, sent as a string")
    intensity: Intensity
    experience_level: CleanseExperience = CleanseExperience.FIRST_TIME
    healthcare_provider_consent: bool
    pregnancy_or_breastfeeding: bool = False
    client_name: str


class AilmentsGenerationRequest(_CamelModel):
    plan_name: str
    duration: int = Field(ge=1)
    selected_ailments: List[str]
    nutritional_focus: NutritionalFocusPayload
    priority_level: PriorityLevel
    daily_calorie_target: int = Field(ge=1000, le=4000)
    client_name: str


GenerationRequest = Union[LongevityGenerationRequest, CleanseGenerationRequest, AilmentsGenerationRequest]


# =============================================================================
# PERSISTENCE
# =============================================================================

class PersistencePayload(BaseModel):
    name: str
    description: str
    type: StorageType
    duration: int
    intensity: str
    config: Dict[str, Any] = Field(description="originalRequest and generatedPlan")
    tags: List[str] = Field(default_factory=list)


# =============================================================================
# OUTCOME
# =============================================================================

class GenerationOutcome(BaseModel):
    """
    Result of one generate call.

    persisted is False whenever the store was not written, either because
    the generated result was unusable (persistence_skipped) or because
    the store failed (persistence_error).
    """
    success: bool = True
    family: ProtocolFamily
    request: Dict[str, Any]
    result: Any = None
    persisted: bool = False
    persistence_skipped: bool = False
    persistence_error: Optional[str] = None
    generated_at: datetime = Field(default_factory=utc_now)
