"""
External Service Clients

Async httpx clients for the plan generation service and the protocol
store. Transport failures are mapped onto the engine error taxonomy:

    non-2xx response      -> GENERATION_API_ERROR (502)
    timeout               -> GENERATION_TIMEOUT (504)
    connection failure    -> GENERATION_UNAVAILABLE (503)
    undecodable JSON body -> GENERATION_INVALID_RESPONSE (502)

Store failures of any kind raise PersistenceFailure.

A custom httpx transport may be injected for testing.

Version: generation_v1
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..session.models import ProtocolFamily
from ..settings import (
    GENERATION_SERVICE_URL,
    GENERATION_TIMEOUT_SECONDS,
    PERSISTENCE_TIMEOUT_SECONDS,
    PROTOCOL_STORE_URL,
)
from ..shared.errors import ExternalServiceFailure, PersistenceFailure, ProtocolErrorCode

logger = logging.getLogger(__name__)

GENERATION_ENDPOINTS = {
    ProtocolFamily.LONGEVITY: "/api/specialized/longevity/generate",
    ProtocolFamily.CLEANSE: "/api/specialized/parasite-cleanse/generate",
    ProtocolFamily.AILMENTS: "/api/specialized/ailments-based/generate",
}

PROTOCOL_STORE_ENDPOINT = "/api/trainer/protocols"

DEFAULT_ERROR_MESSAGES = {
    ProtocolFamily.LONGEVITY: "Failed to generate longevity meal plan",
    ProtocolFamily.CLEANSE: "Failed to generate parasite cleanse protocol",
    ProtocolFamily.AILMENTS: "Failed to generate health-targeted meal plan",
}


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return default


# =============================================================================
# GENERATION SERVICE
# =============================================================================

class GenerationServiceClient:

    def __init__(
        self,
        base_url: str = GENERATION_SERVICE_URL,
        timeout: float = GENERATION_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def url_for(self, family: ProtocolFamily) -> str:
        return f"{self.base_url}{GENERATION_ENDPOINTS[ProtocolFamily(family)]}"

    async def generate(self, family: ProtocolFamily, payload: Dict[str, Any]) -> Any:
        """
        POST a generation request and return the decoded JSON body.

        The body is returned as-is; deciding whether it is usable is left
        to the caller.
        """
        family = ProtocolFamily(family)
        url = self.url_for(family)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload)
        except httpx.TimeoutException:
            logger.error(f"Generation service timed out after {self.timeout}s ({family.value})")
            raise ExternalServiceFailure(
                ProtocolErrorCode.GENERATION_TIMEOUT,
                f"Plan generation timed out after {self.timeout}s",
                http_code=504,
                details={"family": family.value},
            )
        except httpx.RequestError as e:
            logger.error(f"Cannot reach generation service at {url}: {e}")
            raise ExternalServiceFailure(
                ProtocolErrorCode.GENERATION_UNAVAILABLE,
                f"Cannot connect to plan generation service: {str(e)}",
                http_code=503,
                details={"family": family.value},
            )

        if not response.is_success:
            message = _error_message(response, DEFAULT_ERROR_MESSAGES[family])
            logger.error(f"Generation service returned HTTP {response.status_code} ({family.value}): {message}")
            raise ExternalServiceFailure(
                ProtocolErrorCode.GENERATION_API_ERROR,
                message,
                status_code=response.status_code,
                details={"family": family.value, "status_code": response.status_code},
            )

        try:
            return response.json()
        except ValueError:
            logger.error(f"Generation service returned a non-JSON body ({family.value})")
            raise ExternalServiceFailure(
                ProtocolErrorCode.GENERATION_INVALID_RESPONSE,
                "Plan generation service returned an unreadable response",
                status_code=response.status_code,
                details={"family": family.value},
            )


# =============================================================================
# PROTOCOL STORE
# =============================================================================

class ProtocolStoreClient:

    def __init__(
        self,
        base_url: str = PROTOCOL_STORE_URL,
        timeout: float = PERSISTENCE_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def save(self, payload: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{PROTOCOL_STORE_ENDPOINT}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload)
        except httpx.TimeoutException:
            raise PersistenceFailure(f"Protocol store timed out after {self.timeout}s")
        except httpx.RequestError as e:
            raise PersistenceFailure(f"Cannot connect to protocol store: {str(e)}")
        except ValueError as e:
            raise PersistenceFailure(f"Protocol record is not valid JSON: {str(e)}")

        if not response.is_success:
            raise PersistenceFailure(
                _error_message(response, f"Protocol store returned HTTP {response.status_code}"),
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            return None
