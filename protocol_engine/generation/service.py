"""
Protocol Plan Generation

Orchestrates one generate call:

1. build the family request from the session configuration (may reject),
2. send it to the generation service (may fail; session is untouched),
3. save the generated plan to the protocol store, best effort.

A store failure is logged and reported in the outcome. It never turns a
successful generation into a failure.

Version: generation_v1
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from ..session.aggregator import ProtocolSession
from ..session.models import ProtocolFamily
from ..shared.errors import PersistenceFailure
from .builder import DEFAULT_PLAN_DURATION_DAYS, build_generation_request
from .client import GenerationServiceClient, ProtocolStoreClient
from .models import GenerationOutcome, PersistencePayload, StorageType

logger = logging.getLogger(__name__)

# family -> (label used in descriptions and tags, type stored with the protocol)
STORAGE_MAPPING = {
    ProtocolFamily.LONGEVITY: ("longevity", StorageType.LONGEVITY),
    ProtocolFamily.CLEANSE: ("parasite_cleanse", StorageType.PARASITE_CLEANSE),
    ProtocolFamily.AILMENTS: ("ailments-based", StorageType.LONGEVITY),
}

DEFAULT_STORED_INTENSITY = "moderate"


def _is_usable_result(result: Any) -> bool:
    return isinstance(result, dict) and len(result) > 0


def _stored_duration(meal_plan: Dict[str, Any], request: Dict[str, Any]) -> int:
    for candidate in (meal_plan.get("duration"), request.get("duration")):
        try:
            return int(candidate)
        except (TypeError, ValueError, OverflowError):
            continue
    return DEFAULT_PLAN_DURATION_DAYS


def build_persistence_payload(
    family: ProtocolFamily,
    request: Dict[str, Any],
    result: Dict[str, Any],
) -> PersistencePayload:
    """Map a generated plan onto the protocol store record."""
    family = ProtocolFamily(family)
    label, storage_type = STORAGE_MAPPING[family]

    meal_plan = result.get("mealPlan")
    if not isinstance(meal_plan, dict):
        meal_plan = {}
    meals = meal_plan.get("meals")
    meal_count = len(meals) if isinstance(meals, list) else 0

    if family == ProtocolFamily.CLEANSE:
        intensity = str(request.get("intensity") or DEFAULT_STORED_INTENSITY)
    else:
        intensity = DEFAULT_STORED_INTENSITY

    if family == ProtocolFamily.AILMENTS:
        tags = list(request.get("selectedAilments") or [])
    else:
        tags = [label]

    return PersistencePayload(
        name=request["planName"],
        description=f"Generated {label} protocol with {meal_count} meals",
        type=storage_type,
        duration=_stored_duration(meal_plan, request),
        intensity=intensity,
        config={"originalRequest": request, "generatedPlan": result},
        tags=tags,
    )


async def generate_protocol_plan(
    session: ProtocolSession,
    family: ProtocolFamily,
    generation_client: Optional[GenerationServiceClient] = None,
    store_client: Optional[ProtocolStoreClient] = None,
    client_name: Optional[str] = None,
    today: Optional[date] = None,
) -> GenerationOutcome:
    """
    Generate a plan for one protocol family of a session.

    Raises ValidationFailure before any external call when the family is
    not enabled or consent is missing, and ExternalServiceFailure when the
    generation service fails. Neither case modifies the session.
    """
    family = ProtocolFamily(family)
    generation_client = generation_client or GenerationServiceClient()
    store_client = store_client or ProtocolStoreClient()

    request = build_generation_request(session.snapshot(), family, client_name=client_name, today=today)
    payload = request.model_dump(mode="json", by_alias=True)

    logger.info(f"Session {session.session_id}: generating {family.value} plan '{payload['planName']}'")
    result = await generation_client.generate(family, payload)

    outcome = GenerationOutcome(family=family, request=payload, result=result)

    if not _is_usable_result(result):
        logger.warning(f"Session {session.session_id}: empty {family.value} result, protocol not saved")
        outcome.persistence_skipped = True
        return outcome

    try:
        record = build_persistence_payload(family, payload, result)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning(f"Session {session.session_id}: unusable {family.value} result, protocol not saved: {e}")
        outcome.persistence_error = f"Could not build protocol record: {e}"
        return outcome

    try:
        await store_client.save(record.model_dump(mode="json"))
    except PersistenceFailure as e:
        logger.warning(f"Session {session.session_id}: failed to save {family.value} protocol: {e.message}")
        outcome.persistence_error = e.message
        return outcome

    logger.info(f"Session {session.session_id}: saved {family.value} protocol '{record.name}'")
    outcome.persisted = True
    return outcome
