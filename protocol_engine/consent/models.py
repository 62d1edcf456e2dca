"""
Consent Gate Models

Version: consent_gate_v1
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from ..session.models import ProtocolFamily, utc_now


class GateState(str, Enum):
    DISABLED = "disabled"
    PENDING_CONSENT = "pending_consent"
    ENABLED = "enabled"


@dataclass(frozen=True)
class GateTransition:
    """Emitted to gate listeners after every state change."""
    family: ProtocolFamily
    previous: GateState
    current: GateState
    reason: str
    occurred_at: datetime = field(default_factory=utc_now)


# =============================================================================
# DISCLAIMER CONTENT
# =============================================================================

class ProtocolDisclaimer(BaseModel):
    family: ProtocolFamily
    title: str
    risks: List[str]
    contraindications: List[str]
    requirements: List[str]


class ScreeningQuestion(BaseModel):
    key: str
    label: str
    description: str
    required: bool = True


class AilmentDisclaimer(BaseModel):
    ailment_id: str
    ailment_name: str
    disclaimer: str


class ConsentStatus(BaseModel):
    """What the presentation layer needs to render the gate."""
    pending_family: Optional[ProtocolFamily] = None
    longevity: GateState
    cleanse: GateState
    has_consented: bool
    requires_medical_consent: bool
    has_valid_consent: bool
