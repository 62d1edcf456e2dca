"""EvoFit Shared Utilities"""

from .errors import (
    ProtocolErrorCode,
    ProtocolEngineException,
    ValidationFailure,
    ExternalServiceFailure,
    PersistenceFailure,
)

__all__ = [
    "ProtocolErrorCode",
    "ProtocolEngineException",
    "ValidationFailure",
    "ExternalServiceFailure",
    "PersistenceFailure",
]
