"""
EvoFit Protocol Engine - Runtime Configuration

All values come from environment variables and are read once at import.
"""

import os
from typing import List

# =============================================================================
# EXTERNAL SERVICES
# =============================================================================

GENERATION_SERVICE_URL = os.getenv("GENERATION_SERVICE_URL", "http://localhost:5000").rstrip("/")
PROTOCOL_STORE_URL = os.getenv("PROTOCOL_STORE_URL", GENERATION_SERVICE_URL).rstrip("/")

GENERATION_TIMEOUT_SECONDS = float(os.getenv("GENERATION_TIMEOUT_SECONDS", "120"))
PERSISTENCE_TIMEOUT_SECONDS = float(os.getenv("PERSISTENCE_TIMEOUT_SECONDS", "30"))

# =============================================================================
# SESSION DEFAULTS
# =============================================================================

MAX_AILMENT_SELECTIONS = int(os.getenv("MAX_AILMENT_SELECTIONS", "10"))
DEFAULT_CLIENT_NAME = os.getenv("DEFAULT_CLIENT_NAME", "Current User")

# Sessions untouched for this long are dropped from the in-memory registry
SESSION_IDLE_TTL_SECONDS = float(os.getenv("SESSION_IDLE_TTL_SECONDS", "86400"))

# =============================================================================
# HTTP / LOGGING
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def _parse_origins(raw: str) -> List[str]:
    if raw.strip() == "*":
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", "*"))
