"""
HTTP API Tests

Exercises the FastAPI app end to end through TestClient. The generation
service and protocol store are replaced by httpx.MockTransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from protocol_engine.generation.client import GenerationServiceClient, ProtocolStoreClient
from protocol_engine.session.registry import SESSION_REGISTRY
from protocol_engine.session.router import get_generation_client, get_store_client

FULL_CONSENT = {
    "has_read_disclaimer": True,
    "acknowledged_risks": True,
    "has_healthcare_provider_approval": True,
    "pregnancy_screening_complete": True,
    "medical_conditions_screened": True,
}


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def upstream():
    """Mutable handler for the fake generation service and store."""
    state = {"generate_status": 200, "generate_body": {"mealPlan": {"duration": 30, "meals": [{}]}}, "calls": []}

    def handler(request: httpx.Request) -> httpx.Response:
        state["calls"].append(request.url.path)
        if request.url.path == "/api/trainer/protocols":
            return httpx.Response(201, json={"id": "stored"})
        return httpx.Response(state["generate_status"], json=state["generate_body"])

    transport = httpx.MockTransport(handler)
    app.dependency_overrides[get_generation_client] = lambda: GenerationServiceClient(
        base_url="http://generator.test", transport=transport
    )
    app.dependency_overrides[get_store_client] = lambda: ProtocolStoreClient(
        base_url="http://generator.test", transport=transport
    )
    yield state
    app.dependency_overrides.clear()


@pytest.fixture
def client(upstream):
    SESSION_REGISTRY.clear()
    yield TestClient(app)
    SESSION_REGISTRY.clear()


@pytest.fixture
def session_id(client):
    response = client.post("/api/v1/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


# ============================================================================
# Service
# ============================================================================

class TestService:

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["ailment_count"] == 25
        assert body["protocol_count"] == 4

    def test_matching_health(self, client):
        assert client.get("/api/v1/matching/health").json()["status"] == "ok"


# ============================================================================
# Catalog
# ============================================================================

class TestCatalogEndpoints:

    def test_list_ailments(self, client):
        assert client.get("/api/v1/catalog/ailments").json()["count"] == 25

    def test_filter_and_search(self, client):
        body = client.get("/api/v1/catalog/ailments", params={"category": "digestive", "q": "heartburn"}).json()
        assert [a["id"] for a in body["ailments"]] == ["acid_reflux"]

    def test_invalid_category_is_422(self, client):
        assert client.get("/api/v1/catalog/ailments", params={"category": "astrology"}).status_code == 422

    def test_get_ailment(self, client):
        assert client.get("/api/v1/catalog/ailments/ibs").json()["name"] == "Irritable Bowel Syndrome (IBS)"
        assert client.get("/api/v1/catalog/ailments/ghost").status_code == 404

    def test_categories(self, client):
        body = client.get("/api/v1/catalog/categories").json()
        assert body["count"] == 9
        assert sum(c["ailment_count"] for c in body["categories"]) == 25

    def test_protocol_filters(self, client):
        africa = client.get("/api/v1/catalog/protocols", params={"region": "africa", "type": "modern"}).json()
        assert [p["id"] for p in africa["protocols"]] == ["modern_integrative"]

        targeted = client.get("/api/v1/catalog/protocols", params={"ailment": ["sibo"]}).json()
        assert [p["id"] for p in targeted["protocols"]] == ["modern_integrative"]

    def test_get_protocol(self, client):
        assert client.get("/api/v1/catalog/protocols/gentle_digestive_cleanse").status_code == 200
        assert client.get("/api/v1/catalog/protocols/ghost").status_code == 404


# ============================================================================
# Matching
# ============================================================================

class TestMatchingEndpoints:

    def test_recommendations(self, client):
        payload = {"ailment_ids": ["ibs", "bloating"]}
        first = client.post("/api/v1/matching/recommendations", json=payload).json()
        second = client.post("/api/v1/matching/recommendations", json=payload).json()

        assert first["count"] == 3
        assert first["recommendations"][0]["protocol"]["id"] == "gentle_digestive_cleanse"
        assert first["recommendations"][0]["match_score"] == 100
        assert first == second

    def test_nutritional_focus(self, client):
        body = client.post("/api/v1/matching/nutritional-focus", json={"ailment_ids": ["ghost", "acne"]}).json()
        assert body["resolved_ailment_ids"] == ["acne"]
        assert body["nutritional_focus"]["beneficial_foods"]


# ============================================================================
# Sessions
# ============================================================================

class TestSessionEndpoints:

    def test_create_and_get(self, client, session_id):
        body = client.get(f"/api/v1/sessions/{session_id}").json()
        assert body["session_id"] == session_id
        assert body["active_protocol_labels"] == []

    def test_unknown_session(self, client):
        assert client.get("/api/v1/sessions/nope").status_code == 404

    def test_delete(self, client, session_id):
        assert client.delete(f"/api/v1/sessions/{session_id}").status_code == 200
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404

    def test_selection_limit_error_envelope(self, client):
        session_id = client.post("/api/v1/sessions", json={"max_selections": 1}).json()["session_id"]
        client.post(f"/api/v1/sessions/{session_id}/ailments", json={"ailment_id": "ibs"})

        response = client.post(f"/api/v1/sessions/{session_id}/ailments", json={"ailment_id": "acne"})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error_code"] == "SELECTION_LIMIT_EXCEEDED"
        assert body["details"]["max_selections"] == 1

    def test_replace_and_deselect(self, client, session_id):
        url = f"/api/v1/sessions/{session_id}/ailments"
        body = client.put(url, json={"ailment_ids": ["ibs", "acne"]}).json()
        assert body["active_protocol_labels"] == ["Health Issues (2)"]

        body = client.delete(f"{url}/ibs").json()
        assert body["config"]["ailments"]["selected_ailments"] == ["acne"]

    def test_category_toggle(self, client, session_id):
        body = client.post(f"/api/v1/sessions/{session_id}/categories/skin_beauty").json()
        assert body["config"]["ailments"]["selected_ailments"] == ["acne", "eczema"]

    def test_ailments_config(self, client, session_id):
        client.post(f"/api/v1/sessions/{session_id}/ailments", json={"ailment_id": "ibs"})
        body = client.patch(
            f"/api/v1/sessions/{session_id}/ailments-config",
            json={"include_in_planning": False, "priority_level": "high"},
        ).json()
        assert body["config"]["ailments"]["include_in_planning"] is False
        assert body["config"]["ailments"]["priority_level"] == "high"

    def test_enabled_flag_is_protected(self, client, session_id):
        response = client.patch(f"/api/v1/sessions/{session_id}/longevity", json={"enabled": True})
        assert response.status_code == 422
        assert response.json()["error_code"] == "PROTECTED_FIELD"

    def test_cleanse_schedule(self, client, session_id):
        client.patch(f"/api/v1/sessions/{session_id}/cleanse", json={"duration": 7})
        body = client.post(
            f"/api/v1/sessions/{session_id}/cleanse/schedule",
            json={"start_date": "2026-02-01T00:00:00Z"},
        ).json()
        assert body["config"]["cleanse"]["end_date"].startswith("2026-02-08")

    def test_get_syncs_cleanse_progress(self, client, session_id):
        client.patch(f"/api/v1/sessions/{session_id}/cleanse", json={"duration": 7})
        client.post(
            f"/api/v1/sessions/{session_id}/cleanse/schedule",
            json={"start_date": "2020-01-01T00:00:00Z"},
        )
        body = client.get(f"/api/v1/sessions/{session_id}").json()

        assert body["config"]["cleanse"]["current_phase"] == "maintenance"
        assert body["config"]["progress"]["current_day"] == 7
        assert body["config"]["progress"]["completion_percentage"] == 100.0
        assert body["cleanse_days_remaining"] == 0

    def test_unscheduled_cleanse_reports_full_duration(self, client, session_id):
        body = client.get(f"/api/v1/sessions/{session_id}").json()
        assert body["cleanse_days_remaining"] == body["config"]["cleanse"]["duration"]

    @pytest.mark.parametrize("field", ["start_date", "end_date"])
    def test_cleanse_dates_only_set_by_schedule(self, client, session_id, field):
        response = client.patch(
            f"/api/v1/sessions/{session_id}/cleanse",
            json={field: "2026-03-01T00:00:00Z"},
        )
        assert response.status_code == 422
        assert response.json()["error_code"] == "PROTECTED_FIELD"
        assert response.json()["details"] == {"fields": [field]}


class TestConsentFlow:

    def test_enable_accept_generate(self, client, session_id, upstream):
        base = f"/api/v1/sessions/{session_id}"

        enable = client.post(f"{base}/protocols/longevity/enable").json()
        assert enable["state"] == "pending_consent"
        assert enable["session"]["config"]["longevity"]["enabled"] is False

        disclaimer = client.get(f"{base}/consent/disclaimer").json()
        assert disclaimer["pending_family"] == "longevity"
        assert disclaimer["disclaimer"]["title"]
        assert len(disclaimer["screening_questions"]) == 3

        accepted = client.post(f"{base}/consent/accept", json=FULL_CONSENT).json()
        assert accepted["config"]["longevity"]["enabled"] is True
        assert accepted["consent_status"]["has_consented"] is True

        client.patch(f"{base}/longevity", json={"calorie_restriction": "moderate"})
        outcome = client.post(f"{base}/generate/longevity", json={"client_name": "Alex"}).json()

        assert outcome["persisted"] is True
        assert outcome["request"]["dailyCalorieTarget"] == 1600
        assert outcome["request"]["clientName"] == "Alex"
        assert upstream["calls"] == ["/api/specialized/longevity/generate", "/api/trainer/protocols"]

    def test_incomplete_consent(self, client, session_id):
        base = f"/api/v1/sessions/{session_id}"
        client.post(f"{base}/protocols/cleanse/enable")
        response = client.post(f"{base}/consent/accept", json={"has_read_disclaimer": True})
        assert response.status_code == 422
        assert response.json()["error_code"] == "CONSENT_INCOMPLETE"

    def test_decline(self, client, session_id):
        base = f"/api/v1/sessions/{session_id}"
        client.post(f"{base}/protocols/cleanse/enable")
        body = client.post(f"{base}/consent/decline").json()
        assert body["consent_status"]["cleanse"] == "disabled"
        assert client.post(f"{base}/consent/decline").status_code == 422

    def test_ailments_not_gated(self, client, session_id):
        response = client.post(f"/api/v1/sessions/{session_id}/protocols/ailments/enable")
        assert response.status_code == 422
        assert response.json()["error_code"] == "UNSUPPORTED_PROTOCOL_FAMILY"


class TestGenerateEndpoint:

    def test_not_enabled(self, client, session_id, upstream):
        response = client.post(f"/api/v1/sessions/{session_id}/generate/cleanse")
        assert response.status_code == 422
        assert response.json()["error_code"] == "PROTOCOL_NOT_ENABLED"
        assert upstream["calls"] == []

    def test_upstream_failure(self, client, session_id, upstream):
        client.put(f"/api/v1/sessions/{session_id}/ailments", json={"ailment_ids": ["ibs"]})
        upstream["generate_status"] = 500
        upstream["generate_body"] = {"error": "Generator crashed"}

        response = client.post(f"/api/v1/sessions/{session_id}/generate/ailments")

        assert response.status_code == 502
        assert response.json()["error_code"] == "GENERATION_API_ERROR"
        assert response.json()["message"] == "Generator crashed"


class TestProgressEndpoints:

    def test_log_entries(self, client, session_id):
        base = f"/api/v1/sessions/{session_id}/progress"
        symptom = client.post(
            f"{base}/symptoms",
            json={"symptoms": ["Headache"], "severity": 2, "protocol_type": "cleanse"},
        )
        assert symptom.status_code == 201
        assert client.post(f"{base}/measurements", json={"type": "sleep", "value": 7.5, "unit": "hours"}).status_code == 201
        assert client.post(f"{base}/notes", json={"content": "Day one", "category": "diet"}).status_code == 201

        progress = client.get(f"/api/v1/sessions/{session_id}").json()["config"]["progress"]
        assert len(progress["symptoms_logged"]) == 1
        assert len(progress["measurements"]) == 1
        assert len(progress["notes"]) == 1

    def test_invalid_severity(self, client, session_id):
        response = client.post(
            f"/api/v1/sessions/{session_id}/progress/symptoms",
            json={"symptoms": [], "severity": 9, "protocol_type": "longevity"},
        )
        assert response.status_code == 422
        assert response.json()["error_code"] == "INVALID_CONFIGURATION"
