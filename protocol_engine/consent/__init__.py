"""
EvoFit Consent Gate

Medical-consent state machine in front of the longevity and cleanse
protocol configurations, plus the disclaimer content shown while a
consent request is pending.

Version: consent_gate_v1
"""

from .models import GateState, GateTransition, ConsentStatus, ProtocolDisclaimer
from .gate import ConsentGate, GATED_FAMILIES
from .disclaimer import (
    PROTOCOL_DISCLAIMERS,
    GENERAL_SCREENING_QUESTIONS,
    disclaimer_for,
    missing_consent_fields,
    ailment_disclaimers,
)

__all__ = [
    "GateState",
    "GateTransition",
    "ConsentStatus",
    "ProtocolDisclaimer",
    "ConsentGate",
    "GATED_FAMILIES",
    "PROTOCOL_DISCLAIMERS",
    "GENERAL_SCREENING_QUESTIONS",
    "disclaimer_for",
    "missing_consent_fields",
    "ailment_disclaimers",
]

__version__ = "consent_gate_v1"
