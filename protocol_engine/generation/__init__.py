"""
EvoFit Generation Layer

Builds family-specific plan requests from a session configuration,
calls the external plan generation service and saves the result to the
protocol store.

Version: generation_v1
"""

from .models import (
    LongevityGenerationRequest,
    CleanseGenerationRequest,
    AilmentsGenerationRequest,
    NutritionalFocusPayload,
    PersistencePayload,
    GenerationOutcome,
    StorageType,
)
from .builder import build_generation_request, check_buildable, calorie_target, plan_name
from .client import GenerationServiceClient, ProtocolStoreClient, GENERATION_ENDPOINTS, PROTOCOL_STORE_ENDPOINT
from .service import generate_protocol_plan, build_persistence_payload

__all__ = [
    "LongevityGenerationRequest",
    "CleanseGenerationRequest",
    "AilmentsGenerationRequest",
    "NutritionalFocusPayload",
    "PersistencePayload",
    "GenerationOutcome",
    "StorageType",
    "build_generation_request",
    "check_buildable",
    "calorie_target",
    "plan_name",
    "GenerationServiceClient",
    "ProtocolStoreClient",
    "GENERATION_ENDPOINTS",
    "PROTOCOL_STORE_ENDPOINT",
    "generate_protocol_plan",
    "build_persistence_payload",
]

__version__ = "generation_v1"
