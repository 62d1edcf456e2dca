"""
EvoFit Protocol Engine - Error Taxonomy

Validation failures are recoverable and leave state untouched.
External service failures surface to the caller as displayable errors.
Persistence failures are logged by the generation service and never
turn a successful generation into a failure.

Unresolved ailment or protocol ids are NOT errors: catalog and
aggregation functions skip them.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ProtocolErrorCode(Enum):
    # Validation
    SELECTION_LIMIT_EXCEEDED = "SELECTION_LIMIT_EXCEEDED"
    PROTOCOL_NOT_ENABLED = "PROTOCOL_NOT_ENABLED"
    MEDICAL_CONSENT_REQUIRED = "MEDICAL_CONSENT_REQUIRED"
    CONSENT_INCOMPLETE = "CONSENT_INCOMPLETE"
    NO_PENDING_CONSENT = "NO_PENDING_CONSENT"
    PROTECTED_FIELD = "PROTECTED_FIELD"
    UNSUPPORTED_PROTOCOL_FAMILY = "UNSUPPORTED_PROTOCOL_FAMILY"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    # External generation service
    GENERATION_API_ERROR = "GENERATION_API_ERROR"
    GENERATION_UNAVAILABLE = "GENERATION_UNAVAILABLE"
    GENERATION_TIMEOUT = "GENERATION_TIMEOUT"
    GENERATION_INVALID_RESPONSE = "GENERATION_INVALID_RESPONSE"
    # External protocol store
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


class ProtocolEngineException(Exception):
    """Base exception for all engine failures."""

    def __init__(
        self,
        error_code: ProtocolErrorCode,
        message: str,
        http_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.error_code = error_code
        self.message = message
        self.http_code = http_code
        self.details = details or {}
        super().__init__(f"{error_code.value}: {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationFailure(ProtocolEngineException):
    """Rejected request. No state was changed."""

    def __init__(self, error_code: ProtocolErrorCode, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(error_code, message, http_code=422, details=details)


class ExternalServiceFailure(ProtocolEngineException):
    """The plan generation service failed. Retry by calling generate again."""

    def __init__(
        self,
        error_code: ProtocolErrorCode,
        message: str,
        http_code: int = 502,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(error_code, message, http_code=http_code, details=details)
        self.status_code = status_code


class PersistenceFailure(ProtocolEngineException):
    """The protocol store rejected or did not receive a save request."""

    def __init__(self, message: str, status_code: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(ProtocolErrorCode.PERSISTENCE_FAILED, message, http_code=502, details=details)
        self.status_code = status_code
