"""
Session Endpoints

POST   /api/v1/sessions                                    - Create session
GET    /api/v1/sessions/{session_id}                       - Composed configuration, cleanse progress synced to now
DELETE /api/v1/sessions/{session_id}                       - Drop session
POST   /api/v1/sessions/{session_id}/ailments              - Select one ailment
PUT    /api/v1/sessions/{session_id}/ailments              - Replace selection
DELETE /api/v1/sessions/{session_id}/ailments/{ailment_id} - Deselect one ailment
POST   /api/v1/sessions/{session_id}/categories/{category} - Toggle a category
PATCH  /api/v1/sessions/{session_id}/ailments-config       - include_in_planning / priority_level
PATCH  /api/v1/sessions/{session_id}/longevity             - Longevity settings
PATCH  /api/v1/sessions/{session_id}/cleanse               - Cleanse settings
POST   /api/v1/sessions/{session_id}/cleanse/schedule      - Set cleanse start date
POST   /api/v1/sessions/{session_id}/protocols/{family}/enable|disable
POST   /api/v1/sessions/{session_id}/consent/accept|decline
GET    /api/v1/sessions/{session_id}/consent/disclaimer
POST   /api/v1/sessions/{session_id}/generate/{family}
POST   /api/v1/sessions/{session_id}/progress/symptoms|measurements|notes
PATCH  /api/v1/sessions/{session_id}/progress

Handlers hold the session lock for the whole mutation.

Version: session_v1
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ..catalog.models import AilmentCategory
from ..consent.disclaimer import GENERAL_SCREENING_QUESTIONS, ailment_disclaimers, disclaimer_for
from ..consent.models import AilmentDisclaimer, ConsentStatus, GateState, ProtocolDisclaimer, ScreeningQuestion
from ..generation.client import GenerationServiceClient, ProtocolStoreClient
from ..generation.models import GenerationOutcome
from ..generation.service import generate_protocol_plan
from ..matching.models import AilmentSelectionRequest
from .models import (
    MeasurementType,
    MedicalConsent,
    NoteCategory,
    PriorityLevel,
    ProgressMeasurement,
    ProgressNote,
    ProtocolFamily,
    SpecializedProtocolConfig,
    SymptomLog,
)
from .registry import SESSION_REGISTRY, SessionEntry, SessionRegistry
from .schedule import days_remaining

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/sessions",
    tags=["sessions"],
)


# =============================================================================
# REQUEST / RESPONSE MODELS
# =============================================================================

class CreateSessionRequest(BaseModel):
    max_selections: Optional[int] = Field(default=None, ge=1)


class SessionResponse(BaseModel):
    success: bool = True
    session_id: str
    created_at: datetime
    max_selections: int
    config: SpecializedProtocolConfig
    consent_status: ConsentStatus
    has_active_protocols: bool
    active_protocol_labels: List[str]
    cleanse_days_remaining: int


class SelectAilmentRequest(BaseModel):
    ailment_id: str


class AilmentsConfigUpdate(BaseModel):
    include_in_planning: Optional[bool] = None
    priority_level: Optional[PriorityLevel] = None


class ScheduleCleanseRequest(BaseModel):
    start_date: datetime


class GateResponse(BaseModel):
    success: bool = True
    family: ProtocolFamily
    state: GateState
    session: SessionResponse


class DisclaimerResponse(BaseModel):
    success: bool = True
    pending_family: Optional[ProtocolFamily] = None
    disclaimer: Optional[ProtocolDisclaimer] = None
    screening_questions: List[ScreeningQuestion]
    ailment_disclaimers: List[AilmentDisclaimer]


class GenerateRequest(BaseModel):
    client_name: Optional[str] = None


class SymptomLogRequest(BaseModel):
    symptoms: List[str] = Field(default_factory=list)
    severity: int
    protocol_type: ProtocolFamily
    notes: Optional[str] = None
    date: Optional[datetime] = None


class MeasurementRequest(BaseModel):
    type: MeasurementType
    value: float
    unit: str
    notes: Optional[str] = None
    date: Optional[datetime] = None


class NoteRequest(BaseModel):
    content: str
    category: NoteCategory = NoteCategory.GENERAL
    date: Optional[datetime] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_registry() -> SessionRegistry:
    return SESSION_REGISTRY


def get_generation_client() -> GenerationServiceClient:
    return GenerationServiceClient()


def get_store_client() -> ProtocolStoreClient:
    return ProtocolStoreClient()


def _entry(registry: SessionRegistry, session_id: str) -> SessionEntry:
    entry = registry.get(session_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return entry


def _session_response(entry: SessionEntry) -> SessionResponse:
    config = entry.session.snapshot()
    return SessionResponse(
        session_id=entry.session.session_id,
        created_at=entry.session.created_at,
        max_selections=entry.session.max_selections,
        config=config,
        consent_status=entry.gate.status(),
        has_active_protocols=config.has_active_protocols(),
        active_protocol_labels=config.active_protocol_labels(),
        cleanse_days_remaining=days_remaining(config.cleanse),
    )


# =============================================================================
# LIFECYCLE
# =============================================================================

@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(
    request: Optional[CreateSessionRequest] = None,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = registry.create(max_selections=request.max_selections if request else None)
    return _session_response(entry)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.sync_cleanse_progress()
        return _session_response(entry)


@router.delete("/{session_id}")
async def delete_session(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    if not registry.delete(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return {"success": True, "session_id": session_id}


# =============================================================================
# AILMENT TARGETING
# =============================================================================

@router.post("/{session_id}/ailments", response_model=SessionResponse)
async def select_ailment(
    session_id: str,
    request: SelectAilmentRequest,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.select_ailment(request.ailment_id)
        return _session_response(entry)


@router.put("/{session_id}/ailments", response_model=SessionResponse)
async def replace_ailments(
    session_id: str,
    request: AilmentSelectionRequest,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.set_selected_ailments(request.ailment_ids)
        return _session_response(entry)


@router.delete("/{session_id}/ailments/{ailment_id}", response_model=SessionResponse)
async def deselect_ailment(session_id: str, ailment_id: str, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.deselect_ailment(ailment_id)
        return _session_response(entry)


@router.post("/{session_id}/categories/{category}", response_model=SessionResponse)
async def toggle_category(
    session_id: str,
    category: AilmentCategory,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.select_category(category)
        return _session_response(entry)


@router.patch("/{session_id}/ailments-config", response_model=SessionResponse)
async def update_ailments_config(
    session_id: str,
    request: AilmentsConfigUpdate,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        with entry.session.batch():
            if request.include_in_planning is not None:
                entry.session.set_include_in_planning(request.include_in_planning)
            if request.priority_level is not None:
                entry.session.set_priority_level(request.priority_level)
        return _session_response(entry)


# =============================================================================
# LONGEVITY / CLEANSE
# =============================================================================

@router.patch("/{session_id}/longevity", response_model=SessionResponse)
async def update_longevity(
    session_id: str,
    changes: Dict[str, Any],
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.update_longevity(**changes)
        return _session_response(entry)


@router.patch("/{session_id}/cleanse", response_model=SessionResponse)
async def update_cleanse(
    session_id: str,
    changes: Dict[str, Any],
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.update_cleanse(**changes)
        return _session_response(entry)


@router.post("/{session_id}/cleanse/schedule", response_model=SessionResponse)
async def schedule_cleanse(
    session_id: str,
    request: ScheduleCleanseRequest,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.schedule_cleanse(request.start_date)
        return _session_response(entry)


# =============================================================================
# CONSENT GATE
# =============================================================================

@router.post("/{session_id}/protocols/{family}/enable", response_model=GateResponse)
async def enable_protocol(session_id: str, family: ProtocolFamily, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        state = entry.gate.request_enable(family)
        return GateResponse(family=family, state=state, session=_session_response(entry))


@router.post("/{session_id}/protocols/{family}/disable", response_model=GateResponse)
async def disable_protocol(session_id: str, family: ProtocolFamily, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        state = entry.gate.disable(family)
        return GateResponse(family=family, state=state, session=_session_response(entry))


@router.post("/{session_id}/consent/accept", response_model=SessionResponse)
async def accept_consent(
    session_id: str,
    consent: MedicalConsent,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.gate.accept(consent)
        return _session_response(entry)


@router.post("/{session_id}/consent/decline", response_model=SessionResponse)
async def decline_consent(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.gate.decline()
        return _session_response(entry)


@router.get("/{session_id}/consent/disclaimer", response_model=DisclaimerResponse)
async def get_disclaimer(session_id: str, registry: SessionRegistry = Depends(get_registry)):
    """Disclaimer for the family awaiting consent, if any, plus selected-ailment disclaimers."""
    entry = _entry(registry, session_id)
    pending = entry.gate.pending_family
    return DisclaimerResponse(
        pending_family=pending,
        disclaimer=disclaimer_for(pending) if pending is not None else None,
        screening_questions=GENERAL_SCREENING_QUESTIONS,
        ailment_disclaimers=ailment_disclaimers(entry.session.ailments.selected_ailments),
    )


# =============================================================================
# GENERATION
# =============================================================================

@router.post("/{session_id}/generate/{family}", response_model=GenerationOutcome)
async def generate_plan(
    session_id: str,
    family: ProtocolFamily,
    request: Optional[GenerateRequest] = None,
    registry: SessionRegistry = Depends(get_registry),
    generation_client: GenerationServiceClient = Depends(get_generation_client),
    store_client: ProtocolStoreClient = Depends(get_store_client),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        return await generate_protocol_plan(
            entry.session,
            family,
            generation_client=generation_client,
            store_client=store_client,
            client_name=request.client_name if request else None,
        )


# =============================================================================
# PROGRESS
# =============================================================================

@router.post("/{session_id}/progress/symptoms", response_model=SymptomLog, status_code=201)
async def log_symptom(session_id: str, request: SymptomLogRequest, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        return entry.session.log_symptom(
            request.symptoms,
            request.severity,
            request.protocol_type,
            notes=request.notes,
            date=request.date,
        )


@router.post("/{session_id}/progress/measurements", response_model=ProgressMeasurement, status_code=201)
async def add_measurement(
    session_id: str,
    request: MeasurementRequest,
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        return entry.session.add_measurement(
            request.type,
            request.value,
            request.unit,
            notes=request.notes,
            date=request.date,
        )


@router.post("/{session_id}/progress/notes", response_model=ProgressNote, status_code=201)
async def add_note(session_id: str, request: NoteRequest, registry: SessionRegistry = Depends(get_registry)):
    entry = _entry(registry, session_id)
    async with entry.lock:
        return entry.session.add_note(request.content, category=request.category, date=request.date)


@router.patch("/{session_id}/progress", response_model=SessionResponse)
async def update_progress(
    session_id: str,
    changes: Dict[str, Any],
    registry: SessionRegistry = Depends(get_registry),
):
    entry = _entry(registry, session_id)
    async with entry.lock:
        entry.session.update_progress(**changes)
        return _session_response(entry)
