"""
Session Configuration Models

The three protocol sub-configurations held by one client session
(longevity, cleanse, ailment targeting) plus the shared medical consent
record and the progress record.

Every model is frozen. The session replaces a sub-configuration
wholesale on each mutation, so a snapshot handed to a listener never
changes under it.

Version: session_v1
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from ..catalog.models import Intensity
from ..matching.models import NutritionalFocus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS
# =============================================================================

class ProtocolFamily(str, Enum):
    LONGEVITY = "longevity"
    CLEANSE = "cleanse"
    AILMENTS = "ailments"


class FastingStrategy(str, Enum):
    SIXTEEN_EIGHT = "16:8"
    EIGHTEEN_SIX = "18:6"
    TWENTY_FOUR = "20:4"
    OMAD = "OMAD"
    ADF = "ADF"
    NONE = "none"


class CalorieRestriction(str, Enum):
    NONE = "none"          # 0%
    MILD = "mild"          # 5-10%
    MODERATE = "moderate"  # 15-20%
    STRICT = "strict"      # 25-30%, medical supervision


class AntioxidantFocus(str, Enum):
    BERRIES = "berries"
    LEAFY_GREENS = "leafyGreens"
    TURMERIC = "turmeric"
    GREEN_TEA = "greenTea"
    COLORFUL = "colorful"
    ALL = "all"


class CleansePhase(str, Enum):
    PREPARATION = "preparation"
    ELIMINATION = "elimination"
    REBUILDING = "rebuilding"
    MAINTENANCE = "maintenance"


class PriorityLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class MeasurementType(str, Enum):
    WEIGHT = "weight"
    ENERGY = "energy"
    SLEEP = "sleep"
    DIGESTION = "digestion"
    MOOD = "mood"


class NoteCategory(str, Enum):
    GENERAL = "general"
    DIET = "diet"
    SYMPTOMS = "symptoms"
    IMPROVEMENTS = "improvements"


CLEANSE_DURATIONS = (7, 14, 30, 60, 90)


# =============================================================================
# SUB-CONFIGURATIONS
# =============================================================================

class TargetServings(BaseModel):
    vegetables: int = Field(default=5, ge=0, description="Daily servings")
    antioxidant_foods: int = Field(default=3, ge=0, description="Daily servings")
    omega3_sources: int = Field(default=2, ge=0, description="Weekly servings")

    class Config:
        frozen = True
        extra = "forbid"


class LongevityConfig(BaseModel):
    enabled: bool = False
    fasting_strategy: FastingStrategy = FastingStrategy.NONE
    calorie_restriction: CalorieRestriction = CalorieRestriction.NONE
    antioxidant_focus: Tuple[AntioxidantFocus, ...] = ()
    include_anti_inflammatory: bool = False
    include_brain_health: bool = False
    include_heart_health: bool = False
    target_servings: TargetServings = Field(default_factory=TargetServings)

    class Config:
        frozen = True
        extra = "forbid"


class CleanseTargetFoods(BaseModel):
    anti_parasitic: Tuple[str, ...] = ()
    probiotics: Tuple[str, ...] = ()
    fiber_rich: Tuple[str, ...] = ()
    exclude_foods: Tuple[str, ...] = ()

    class Config:
        frozen = True
        extra = "forbid"


class CleanseConfig(BaseModel):
    enabled: bool = False
    duration: int = Field(default=14, description="Days; one of 7, 14, 30, 60, 90")
    intensity: Intensity = Intensity.GENTLE
    current_phase: CleansePhase = CleansePhase.PREPARATION
    include_herbal_supplements: bool = False
    diet_only_cleanse: bool = True
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    target_foods: CleanseTargetFoods = Field(default_factory=CleanseTargetFoods)

    class Config:
        frozen = True
        extra = "forbid"

    @field_validator("duration")
    @classmethod
    def _check_duration(cls, v: int) -> int:
        if v not in CLEANSE_DURATIONS:
            raise ValueError(f"duration must be one of {CLEANSE_DURATIONS}")
        return v


class AilmentsConfig(BaseModel):
    """
    Ailment targeting. nutritional_focus is derived from
    selected_ailments and is None while the selection is empty.
    """
    selected_ailments: Tuple[str, ...] = ()
    nutritional_focus: Optional[NutritionalFocus] = None
    include_in_planning: bool = False
    priority_level: PriorityLevel = PriorityLevel.MEDIUM

    class Config:
        frozen = True
        extra = "forbid"


class MedicalConsent(BaseModel):
    """Written only by the consent gate's accept operation, as a whole record."""
    has_read_disclaimer: bool = False
    has_consented: bool = False
    consent_timestamp: Optional[datetime] = None
    acknowledged_risks: bool = False
    has_healthcare_provider_approval: bool = False
    pregnancy_screening_complete: bool = False
    medical_conditions_screened: bool = False

    class Config:
        frozen = True
        extra = "forbid"


# =============================================================================
# PROGRESS
# =============================================================================

class SymptomLog(BaseModel):
    id: str
    date: datetime
    symptoms: Tuple[str, ...] = ()
    severity: int = Field(ge=1, le=5, description="1 = mild, 5 = severe")
    notes: Optional[str] = None
    protocol_type: ProtocolFamily

    class Config:
        frozen = True
        extra = "forbid"

    @field_validator("protocol_type")
    @classmethod
    def _check_protocol_type(cls, v: ProtocolFamily) -> ProtocolFamily:
        if v == ProtocolFamily.AILMENTS:
            raise ValueError("symptoms are logged against longevity or cleanse protocols")
        return v


class ProgressMeasurement(BaseModel):
    id: str
    date: datetime
    type: MeasurementType
    value: float = Field(description="1-10 scale or an absolute measurement")
    unit: str
    notes: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class ProgressNote(BaseModel):
    id: str
    date: datetime
    content: str
    category: NoteCategory = NoteCategory.GENERAL

    class Config:
        frozen = True
        extra = "forbid"


class ProtocolProgress(BaseModel):
    start_date: datetime = Field(default_factory=utc_now)
    current_day: int = Field(default=1, ge=1)
    total_days: int = Field(default=14, ge=1)
    completion_percentage: float = Field(default=0.0, ge=0, le=100)
    symptoms_logged: Tuple[SymptomLog, ...] = ()
    measurements: Tuple[ProgressMeasurement, ...] = ()
    notes: Tuple[ProgressNote, ...] = ()

    class Config:
        frozen = True
        extra = "forbid"


# =============================================================================
# COMPOSED CONFIGURATION
# =============================================================================

ACTIVE_LABEL_LONGEVITY = "Longevity Mode"
ACTIVE_LABEL_CLEANSE = "Parasite Cleanse"


class SpecializedProtocolConfig(BaseModel):
    """
    Composed view of one session, passed to every change listener.

    The predicates below are pure functions of this snapshot.
    """
    longevity: LongevityConfig = Field(default_factory=LongevityConfig)
    cleanse: CleanseConfig = Field(default_factory=CleanseConfig)
    ailments: AilmentsConfig = Field(default_factory=AilmentsConfig)
    consent: MedicalConsent = Field(default_factory=MedicalConsent)
    progress: ProtocolProgress = Field(default_factory=ProtocolProgress)

    class Config:
        frozen = True
        extra = "forbid"

    def ailments_active(self) -> bool:
        return self.ailments.include_in_planning and len(self.ailments.selected_ailments) > 0

    def is_family_enabled(self, family: ProtocolFamily) -> bool:
        family = ProtocolFamily(family)
        if family == ProtocolFamily.LONGEVITY:
            return self.longevity.enabled
        if family == ProtocolFamily.CLEANSE:
            return self.cleanse.enabled
        return self.ailments_active()

    def has_active_protocols(self) -> bool:
        return self.longevity.enabled or self.cleanse.enabled or self.ailments_active()

    def active_protocol_labels(self) -> List[str]:
        labels = []
        if self.longevity.enabled:
            labels.append(ACTIVE_LABEL_LONGEVITY)
        if self.cleanse.enabled:
            labels.append(ACTIVE_LABEL_CLEANSE)
        if self.ailments_active():
            labels.append(f"Health Issues ({len(self.ailments.selected_ailments)})")
        return labels

    def requires_medical_consent(self) -> bool:
        return (
            (self.longevity.enabled and self.longevity.calorie_restriction != CalorieRestriction.NONE)
            or (self.cleanse.enabled and self.cleanse.intensity != Intensity.GENTLE)
        )

    def has_valid_consent(self) -> bool:
        if not self.requires_medical_consent():
            return True
        return self.consent.has_consented and self.consent.has_healthcare_provider_approval
