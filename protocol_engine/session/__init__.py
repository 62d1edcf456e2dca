"""
EvoFit Session Layer

Per-client configuration state: longevity, cleanse and ailment
targeting settings, the medical consent record and protocol progress,
composed into one SpecializedProtocolConfig and published to listeners
after every mutation.

Version: session_v1
"""

from .models import (
    ProtocolFamily,
    FastingStrategy,
    CalorieRestriction,
    AntioxidantFocus,
    CleansePhase,
    PriorityLevel,
    LongevityConfig,
    CleanseConfig,
    AilmentsConfig,
    MedicalConsent,
    ProtocolProgress,
    SpecializedProtocolConfig,
)
from .aggregator import ProtocolSession
from .schedule import cleanse_progress, days_remaining, phase_for_progress

__all__ = [
    "ProtocolFamily",
    "FastingStrategy",
    "CalorieRestriction",
    "AntioxidantFocus",
    "CleansePhase",
    "PriorityLevel",
    "LongevityConfig",
    "CleanseConfig",
    "AilmentsConfig",
    "MedicalConsent",
    "ProtocolProgress",
    "SpecializedProtocolConfig",
    "ProtocolSession",
    "cleanse_progress",
    "days_remaining",
    "phase_for_progress",
]

__version__ = "session_v1"
