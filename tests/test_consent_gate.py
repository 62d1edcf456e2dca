"""
Consent Gate Tests

Tests validate every transition:
- DISABLED -> PENDING_CONSENT when no consent is on record
- DISABLED -> ENABLED when consent is on record
- PENDING_CONSENT -> ENABLED on complete consent (single notification)
- PENDING_CONSENT stays pending on incomplete consent
- PENDING_CONSENT -> DISABLED on decline (nothing written)
- ENABLED -> DISABLED on disable (consent kept)
- Only one family pending at a time
"""

from datetime import datetime, timezone

import pytest

from protocol_engine.consent.disclaimer import (
    ailment_disclaimers,
    disclaimer_for,
    missing_consent_fields,
)
from protocol_engine.consent.gate import ConsentGate
from protocol_engine.consent.models import GateState
from protocol_engine.session.aggregator import ProtocolSession
from protocol_engine.session.models import MedicalConsent, ProtocolFamily
from protocol_engine.shared.errors import ProtocolErrorCode, ValidationFailure


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def session():
    return ProtocolSession(session_id="gate-session")


@pytest.fixture
def gate(session):
    return ConsentGate(session)


@pytest.fixture
def transitions(gate):
    received = []
    gate.subscribe(received.append)
    return received


@pytest.fixture
def full_consent():
    return MedicalConsent(
        has_read_disclaimer=True,
        acknowledged_risks=True,
        has_healthcare_provider_approval=True,
        pregnancy_screening_complete=True,
        medical_conditions_screened=True,
    )


# ============================================================================
# Enable Requests
# ============================================================================

class TestRequestEnable:

    def test_without_consent_goes_pending(self, gate, session, transitions):
        state = gate.request_enable(ProtocolFamily.LONGEVITY)
        assert state == GateState.PENDING_CONSENT
        assert gate.pending_family == ProtocolFamily.LONGEVITY
        assert session.longevity.enabled is False
        assert [(t.family, t.previous, t.current) for t in transitions] == [
            (ProtocolFamily.LONGEVITY, GateState.DISABLED, GateState.PENDING_CONSENT),
        ]

    def test_strict_longevity_waits_for_accept(self, gate, session):
        session.update_longevity(calorie_restriction="strict")
        assert gate.request_enable(ProtocolFamily.LONGEVITY) == GateState.PENDING_CONSENT
        assert session.longevity.enabled is False
        assert not session.requires_medical_consent()

    def test_gentle_settings_still_ask_for_consent(self, gate, session):
        assert session.cleanse.intensity.value == "gentle"
        assert gate.request_enable("cleanse") == GateState.PENDING_CONSENT

    def test_repeat_request_while_pending_is_a_no_op(self, gate, transitions):
        gate.request_enable(ProtocolFamily.CLEANSE)
        gate.request_enable(ProtocolFamily.CLEANSE)
        assert len(transitions) == 1

    def test_with_consent_on_record_enables_directly(self, gate, session, transitions, full_consent):
        gate.request_enable(ProtocolFamily.LONGEVITY)
        gate.accept(full_consent)
        transitions.clear()

        state = gate.request_enable(ProtocolFamily.CLEANSE)
        assert state == GateState.ENABLED
        assert session.cleanse.enabled is True
        assert gate.pending_family is None
        assert transitions[0].current == GateState.ENABLED

    def test_other_family_supersedes_pending(self, gate, transitions):
        gate.request_enable(ProtocolFamily.LONGEVITY)
        gate.request_enable(ProtocolFamily.CLEANSE)
        assert gate.pending_family == ProtocolFamily.CLEANSE
        assert gate.state(ProtocolFamily.LONGEVITY) == GateState.DISABLED
        assert [(t.family, t.current) for t in transitions] == [
            (ProtocolFamily.LONGEVITY, GateState.PENDING_CONSENT),
            (ProtocolFamily.LONGEVITY, GateState.DISABLED),
            (ProtocolFamily.CLEANSE, GateState.PENDING_CONSENT),
        ]

    def test_ailments_family_not_gated(self, gate):
        with pytest.raises(ValidationFailure) as exc:
            gate.request_enable(ProtocolFamily.AILMENTS)
        assert exc.value.error_code == ProtocolErrorCode.UNSUPPORTED_PROTOCOL_FAMILY

    def test_unknown_family_rejected(self, gate):
        with pytest.raises(ValidationFailure) as exc:
            gate.state("detox")
        assert exc.value.error_code == ProtocolErrorCode.UNSUPPORTED_PROTOCOL_FAMILY


# ============================================================================
# Accept / Decline
# ============================================================================

class TestAccept:

    def test_accept_records_consent_and_enables_in_one_notification(self, gate, session, full_consent):
        configs = []
        session.subscribe(configs.append)
        gate.request_enable(ProtocolFamily.CLEANSE)

        config = gate.accept(full_consent)

        assert len(configs) == 1
        assert configs[0].cleanse.enabled is True
        assert configs[0].consent.has_consented is True
        assert config.consent.consent_timestamp is not None
        assert gate.pending_family is None
        assert gate.state(ProtocolFamily.CLEANSE) == GateState.ENABLED
        assert session.has_valid_consent()
        assert session.longevity.enabled is False

    def test_accept_keeps_supplied_timestamp(self, gate, session, full_consent):
        stamp = datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc)
        gate.request_enable(ProtocolFamily.LONGEVITY)
        gate.accept(full_consent.model_copy(update={"consent_timestamp": stamp}))
        assert session.consent.consent_timestamp == stamp

    def test_incomplete_consent_stays_pending(self, gate, session):
        gate.request_enable(ProtocolFamily.LONGEVITY)
        with pytest.raises(ValidationFailure) as exc:
            gate.accept(MedicalConsent(has_read_disclaimer=True, acknowledged_risks=True))

        assert exc.value.error_code == ProtocolErrorCode.CONSENT_INCOMPLETE
        assert "has_healthcare_provider_approval" in exc.value.details["missing"]
        assert gate.pending_family == ProtocolFamily.LONGEVITY
        assert session.longevity.enabled is False
        assert session.consent.has_consented is False

    def test_accept_without_pending(self, gate, full_consent):
        with pytest.raises(ValidationFailure) as exc:
            gate.accept(full_consent)
        assert exc.value.error_code == ProtocolErrorCode.NO_PENDING_CONSENT

    def test_decline_writes_nothing(self, gate, session, transitions):
        configs = []
        session.subscribe(configs.append)
        gate.request_enable(ProtocolFamily.CLEANSE)

        assert gate.decline() == GateState.DISABLED
        assert gate.pending_family is None
        assert session.cleanse.enabled is False
        assert configs == []
        assert transitions[-1].reason == "consent declined"

    def test_decline_without_pending(self, gate):
        with pytest.raises(ValidationFailure) as exc:
            gate.decline()
        assert exc.value.error_code == ProtocolErrorCode.NO_PENDING_CONSENT


# ============================================================================
# Disable
# ============================================================================

class TestDisable:

    def test_disable_keeps_consent(self, gate, session, full_consent):
        gate.request_enable(ProtocolFamily.LONGEVITY)
        gate.accept(full_consent)

        assert gate.disable(ProtocolFamily.LONGEVITY) == GateState.DISABLED
        assert session.longevity.enabled is False
        assert session.consent.has_consented is True

        assert gate.request_enable(ProtocolFamily.LONGEVITY) == GateState.ENABLED

    def test_disable_withdraws_pending_request(self, gate):
        gate.request_enable(ProtocolFamily.CLEANSE)
        gate.disable(ProtocolFamily.CLEANSE)
        assert gate.pending_family is None

    def test_disable_when_disabled_is_silent(self, gate, transitions):
        gate.disable(ProtocolFamily.CLEANSE)
        assert transitions == []

    def test_status(self, gate):
        gate.request_enable(ProtocolFamily.CLEANSE)
        status = gate.status()
        assert status.pending_family == ProtocolFamily.CLEANSE
        assert status.cleanse == GateState.PENDING_CONSENT
        assert status.longevity == GateState.DISABLED
        assert status.has_consented is False


# ============================================================================
# Disclaimers
# ============================================================================

class TestDisclaimers:

    def test_family_disclaimers(self):
        assert disclaimer_for(ProtocolFamily.LONGEVITY).risks
        assert disclaimer_for(ProtocolFamily.CLEANSE).contraindications
        assert disclaimer_for(ProtocolFamily.AILMENTS) is None

    def test_missing_fields(self, full_consent):
        assert missing_consent_fields(full_consent) == ["has_consented"]
        assert len(missing_consent_fields(MedicalConsent())) == 6

    def test_ailment_disclaimers_in_selection_order(self):
        disclaimers = ailment_disclaimers(["diabetes", "bloating", "ibs", "diabetes"])
        assert [d.ailment_id for d in disclaimers] == ["diabetes", "ibs"]
