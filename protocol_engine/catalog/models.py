"""
Catalog Models

Pydantic models for the two static knowledge bases: health conditions
("ailments") and cleanse protocols. Every model is frozen; list-valued
fields are tuples so catalog records cannot be mutated after load.

Version: catalog_v1
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field


class AilmentCategory(str, Enum):
    DIGESTIVE = "digestive"
    ENERGY_METABOLISM = "energy_metabolism"
    INFLAMMATORY = "inflammatory"
    MENTAL_HEALTH = "mental_health"
    HORMONAL = "hormonal"
    CARDIOVASCULAR = "cardiovascular"
    DETOX_CLEANSING = "detox_cleansing"
    IMMUNE_SYSTEM = "immune_system"
    SKIN_BEAUTY = "skin_beauty"


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class ProtocolType(str, Enum):
    TRADITIONAL = "traditional"
    AYURVEDIC = "ayurvedic"
    MODERN = "modern"
    COMBINATION = "combination"


class Intensity(str, Enum):
    GENTLE = "gentle"
    MODERATE = "moderate"
    INTENSIVE = "intensive"


class EvidenceLevel(str, Enum):
    TRADITIONAL = "traditional"
    CLINICAL_STUDIES = "clinical_studies"
    EXTENSIVE_RESEARCH = "extensive_research"
    WHO_APPROVED = "who_approved"


class Region(str, Enum):
    NORTH_AMERICA = "north_america"
    EUROPE = "europe"
    ASIA = "asia"
    LATIN_AMERICA = "latin_america"
    AFRICA = "africa"


class HerbPriority(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OPTIONAL = "optional"


class HerbForm(str, Enum):
    CAPSULE = "capsule"
    TINCTURE = "tincture"
    POWDER = "powder"
    TEA = "tea"
    OIL = "oil"
    FRESH = "fresh"


class GuidelineCategory(str, Enum):
    INCLUDE = "include"
    AVOID = "avoid"
    LIMIT = "limit"


# ---------------------------------------------------------------------------
# Ailments
# ---------------------------------------------------------------------------

class NutritionalSupport(BaseModel):
    """Per-ailment nutritional guidance. Order is catalog order."""
    beneficial_foods: Tuple[str, ...] = ()
    avoid_foods: Tuple[str, ...] = ()
    key_nutrients: Tuple[str, ...] = ()
    meal_plan_focus: Tuple[str, ...] = ()

    class Config:
        frozen = True
        extra = "forbid"


class Ailment(BaseModel):
    """A health condition with associated nutritional guidance."""
    id: str = Field(description="Unique ailment identifier e.g. 'ibs'")
    name: str
    description: str
    category: AilmentCategory
    severity: Severity
    common_symptoms: Tuple[str, ...] = ()
    nutritional_support: NutritionalSupport
    medical_disclaimer: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class AilmentCategoryInfo(BaseModel):
    id: AilmentCategory
    name: str
    description: str
    icon: str
    color: str

    class Config:
        frozen = True
        extra = "forbid"


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------

class DurationRange(BaseModel):
    """Protocol duration range in days."""
    min: int = Field(ge=1)
    max: int = Field(ge=1)
    recommended: int = Field(ge=1)

    class Config:
        frozen = True
        extra = "forbid"


class Phase(BaseModel):
    """
    One ordered phase of a protocol.

    Phase durations are not required to sum to the protocol's
    recommended duration.
    """
    name: str
    duration: int = Field(ge=1, description="Days")
    description: str
    objectives: Tuple[str, ...] = ()
    key_actions: Tuple[str, ...] = ()

    class Config:
        frozen = True
        extra = "forbid"


class Dosage(BaseModel):
    amount: str
    frequency: str
    timing: str

    class Config:
        frozen = True
        extra = "forbid"


class HerbComponent(BaseModel):
    name: str
    latin_name: Optional[str] = None
    active_compounds: Tuple[str, ...] = ()
    mechanism: str
    dosage: Dosage
    form: Optional[HerbForm] = None
    priority: HerbPriority
    evidence_level: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class SupportingSupplement(BaseModel):
    name: str
    purpose: str
    dosage: str
    timing: str
    optional: bool = False

    class Config:
        frozen = True
        extra = "forbid"


class DietaryGuideline(BaseModel):
    category: GuidelineCategory
    foods: Tuple[str, ...] = ()
    reasoning: str

    class Config:
        frozen = True
        extra = "forbid"


class RegionalAvailability(BaseModel):
    north_america: bool = False
    europe: bool = False
    asia: bool = False
    latin_america: bool = False
    africa: bool = False

    class Config:
        frozen = True
        extra = "forbid"

    def is_available_in(self, region: Region) -> bool:
        return bool(getattr(self, region.value))


class Protocol(BaseModel):
    """
    A phased cleanse protocol.

    target_ailments holds ailment ids but they are not required to
    resolve in the ailment catalog (e.g. 'sibo', 'mild_ibs').
    """
    id: str
    name: str
    type: ProtocolType
    description: str
    target_parasites: Tuple[str, ...] = ()
    target_ailments: Tuple[str, ...] = ()
    intensity: Intensity
    duration: DurationRange
    phases: Tuple[Phase, ...] = ()
    herbs: Tuple[HerbComponent, ...] = ()
    supporting_supplements: Tuple[SupportingSupplement, ...] = ()
    dietary_guidelines: Tuple[DietaryGuideline, ...] = ()
    contraindications: Tuple[str, ...] = ()
    side_effects: Tuple[str, ...] = ()
    monitoring_requirements: Tuple[str, ...] = ()
    evidence_level: EvidenceLevel
    success_rate: Optional[str] = None
    regional_availability: RegionalAvailability

    class Config:
        frozen = True
        extra = "forbid"
