"""
Generation Request Builder

Turns a session configuration into the request payload for one protocol
family. A request is built only when

1. the family is enabled (for ailments: include_in_planning and at
   least one selected ailment), and
2. no enabled protocol needs medical consent that is missing.

Both checks run on the configuration as it is at call time. Nothing is
cached; each call is independent.

Version: generation_v1
"""

import logging
from datetime import date
from typing import Optional

from ..matching.aggregate import aggregate
from ..session.models import CalorieRestriction, FastingStrategy, ProtocolFamily, SpecializedProtocolConfig
from ..settings import DEFAULT_CLIENT_NAME
from ..shared.errors import ProtocolErrorCode, ValidationFailure
from .models import (
    AilmentsGenerationRequest,
    CleanseExperience,
    CleanseGenerationRequest,
    GenerationRequest,
    LongevityExperience,
    LongevityGenerationRequest,
    NutritionalFocusPayload,
)

logger = logging.getLogger(__name__)

CALORIE_TARGETS = {
    CalorieRestriction.STRICT: 1400,
    CalorieRestriction.MODERATE: 1600,
    CalorieRestriction.MILD: 1800,
    CalorieRestriction.NONE: 2000,
}

DEFAULT_PLAN_DURATION_DAYS = 30
DEFAULT_FASTING_PROTOCOL = FastingStrategy.SIXTEEN_EIGHT
AILMENTS_CALORIE_TARGET = 2000

PLAN_NAMES = {
    ProtocolFamily.LONGEVITY: "Longevity Protocol",
    ProtocolFamily.CLEANSE: "Parasite Cleanse Protocol",
    ProtocolFamily.AILMENTS: "Health-Targeted Plan",
}

NOT_ENABLED_MESSAGES = {
    ProtocolFamily.LONGEVITY: "Please enable and configure Longevity Mode first.",
    ProtocolFamily.CLEANSE: "Please enable and configure Parasite Cleanse Protocol first.",
    ProtocolFamily.AILMENTS: "Please select health issues and enable meal planning integration first.",
}


def plan_name(family: ProtocolFamily, today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{PLAN_NAMES[family]} - {today.strftime('%m/%d/%Y')}"


def calorie_target(restriction: CalorieRestriction) -> int:
    return CALORIE_TARGETS[CalorieRestriction(restriction)]


def check_buildable(config: SpecializedProtocolConfig, family: ProtocolFamily) -> None:
    """Raise ValidationFailure when no request may be built for family."""
    if not config.is_family_enabled(family):
        logger.warning(f"Generation rejected: {family.value} protocol is not enabled")
        raise ValidationFailure(
            ProtocolErrorCode.PROTOCOL_NOT_ENABLED,
            NOT_ENABLED_MESSAGES[family],
            details={"family": family.value},
        )
    if config.requires_medical_consent() and not config.has_valid_consent():
        logger.warning(f"Generation rejected: {family.value} requested without valid medical consent")
        raise ValidationFailure(
            ProtocolErrorCode.MEDICAL_CONSENT_REQUIRED,
            "Medical consent and healthcare provider approval required for the selected protocol intensity.",
            details={
                "family": family.value,
                "has_consented": config.consent.has_consented,
                "has_healthcare_provider_approval": config.consent.has_healthcare_provider_approval,
            },
        )


def _longevity_request(config: SpecializedProtocolConfig, name: str, client_name: str) -> LongevityGenerationRequest:
    longevity = config.longevity
    goals = []
    if longevity.include_anti_inflammatory:
        goals.append("inflammation_reduction")
    if longevity.include_brain_health:
        goals.append("cognitive_function")
    if longevity.include_heart_health:
        goals.append("metabolic_health")
    goals.extend(["anti_aging", "cellular_health"])

    fasting = longevity.fasting_strategy
    if fasting == FastingStrategy.NONE:
        fasting = DEFAULT_FASTING_PROTOCOL

    return LongevityGenerationRequest(
        plan_name=name,
        duration=DEFAULT_PLAN_DURATION_DAYS,
        fasting_protocol=fasting.value,
        experience_level=LongevityExperience.BEGINNER,
        primary_goals=goals,
        daily_calorie_target=calorie_target(longevity.calorie_restriction),
        client_name=client_name,
    )


def _cleanse_request(config: SpecializedProtocolConfig, name: str, client_name: str) -> CleanseGenerationRequest:
    return CleanseGenerationRequest(
        plan_name=name,
        duration=str(config.cleanse.duration),
        intensity=config.cleanse.intensity,
        experience_level=CleanseExperience.FIRST_TIME,
        healthcare_provider_consent=config.consent.has_healthcare_provider_approval,
        pregnancy_or_breastfeeding=False,
        client_name=client_name,
    )


def _ailments_request(config: SpecializedProtocolConfig, name: str, client_name: str) -> AilmentsGenerationRequest:
    ailments = config.ailments
    focus = ailments.nutritional_focus or aggregate(ailments.selected_ailments)
    return AilmentsGenerationRequest(
        plan_name=name,
        duration=DEFAULT_PLAN_DURATION_DAYS,
        selected_ailments=list(ailments.selected_ailments),
        nutritional_focus=NutritionalFocusPayload(**focus.model_dump()),
        priority_level=ailments.priority_level,
        daily_calorie_target=AILMENTS_CALORIE_TARGET,
        client_name=client_name,
    )


_BUILDERS = {
    ProtocolFamily.LONGEVITY: _longevity_request,
    ProtocolFamily.CLEANSE: _cleanse_request,
    ProtocolFamily.AILMENTS: _ailments_request,
}


def build_generation_request(
    config: SpecializedProtocolConfig,
    family: ProtocolFamily,
    client_name: Optional[str] = None,
    today: Optional[date] = None,
) -> GenerationRequest:
    """
    Build the generation request for one family or raise ValidationFailure.

    Raises before any external call is attempted.
    """
    family = ProtocolFamily(family)
    check_buildable(config, family)
    return _BUILDERS[family](config, plan_name(family, today), client_name or DEFAULT_CLIENT_NAME)
