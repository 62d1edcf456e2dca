"""
Configuration Aggregator Tests

Tests validate:
- Initial state and derived predicates
- Ailment selection, limit enforcement and category toggling
- Selection side effects (nutritional focus, include_in_planning)
- Exactly one notification per mutation, one per batch, none on rejection
- Protected `enabled` flag and settings validation
- Active protocol labels and medical consent predicates
- Progress records
"""

from datetime import datetime, timezone

import pytest

from protocol_engine.matching.aggregate import aggregate
from protocol_engine.session.aggregator import ProtocolSession
from protocol_engine.session.models import (
    CalorieRestriction,
    CleansePhase,
    MedicalConsent,
    PriorityLevel,
    ProtocolFamily,
)
from protocol_engine.shared.errors import ProtocolErrorCode, ValidationFailure


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def session():
    return ProtocolSession(session_id="test-session")


@pytest.fixture
def notifications(session):
    received = []
    session.subscribe(received.append)
    return received


# ============================================================================
# Initial State
# ============================================================================

class TestInitialState:

    def test_nothing_active(self, session):
        assert not session.has_active_protocols()
        assert session.active_protocol_labels() == []
        assert session.ailments.selected_ailments == ()
        assert session.ailments.nutritional_focus is None

    def test_no_consent_needed(self, session):
        assert not session.requires_medical_consent()
        assert session.has_valid_consent()

    def test_defaults(self, session):
        assert session.max_selections == 10
        assert session.cleanse.duration == 14
        assert session.cleanse.current_phase == CleansePhase.PREPARATION
        assert session.ailments.priority_level == PriorityLevel.MEDIUM

    def test_invalid_limit_rejected(self):
        with pytest.raises(ValueError):
            ProtocolSession(max_selections=0)


# ============================================================================
# Ailment Selection
# ============================================================================

class TestAilmentSelection:

    def test_select_updates_focus_and_planning(self, session, notifications):
        config = session.select_ailment("ibs")
        assert config.ailments.selected_ailments == ("ibs",)
        assert config.ailments.include_in_planning is True
        assert config.ailments.nutritional_focus == aggregate(["ibs"])
        assert len(notifications) == 1
        assert notifications[0] == config

    def test_reselecting_is_a_no_op(self, session, notifications):
        session.select_ailment("ibs")
        session.select_ailment("ibs")
        assert session.ailments.selected_ailments == ("ibs",)
        assert len(notifications) == 1

    def test_unknown_ids_are_kept(self, session):
        session.select_ailment("not_in_catalog")
        assert session.ailments.selected_ailments == ("not_in_catalog",)
        assert session.ailments.nutritional_focus.is_empty()

    def test_deselect_last_clears_focus(self, session):
        session.select_ailment("ibs")
        session.deselect_ailment("ibs")
        assert session.ailments.selected_ailments == ()
        assert session.ailments.nutritional_focus is None
        assert session.ailments.include_in_planning is False

    def test_deselect_missing_is_a_no_op(self, session, notifications):
        session.deselect_ailment("ibs")
        assert notifications == []

    def test_limit_rejects_and_leaves_state(self):
        session = ProtocolSession(max_selections=2)
        received = []
        session.subscribe(received.append)
        session.select_ailment("ibs")
        session.select_ailment("bloating")

        with pytest.raises(ValidationFailure) as exc:
            session.select_ailment("acne")

        assert exc.value.error_code == ProtocolErrorCode.SELECTION_LIMIT_EXCEEDED
        assert exc.value.details["max_selections"] == 2
        assert session.ailments.selected_ailments == ("ibs", "bloating")
        assert len(received) == 2

    def test_set_selected_ailments_dedupes_and_enforces_limit(self):
        session = ProtocolSession(max_selections=2)
        session.set_selected_ailments(["ibs", "ibs", "acne"])
        assert session.ailments.selected_ailments == ("ibs", "acne")

        with pytest.raises(ValidationFailure):
            session.set_selected_ailments(["ibs", "acne", "eczema"])
        assert session.ailments.selected_ailments == ("ibs", "acne")

    def test_clear(self, session):
        session.set_selected_ailments(["ibs", "acne"])
        session.clear_ailments()
        assert session.ailments.selected_ailments == ()

    def test_include_in_planning_override(self, session):
        session.select_ailment("ibs")
        session.set_include_in_planning(False)
        assert not session.has_active_protocols()
        assert session.ailments.selected_ailments == ("ibs",)

    def test_priority_level(self, session):
        session.set_priority_level("high")
        assert session.ailments.priority_level == PriorityLevel.HIGH
        with pytest.raises(ValidationFailure) as exc:
            session.set_priority_level("urgent")
        assert exc.value.error_code == ProtocolErrorCode.INVALID_CONFIGURATION


class TestCategorySelection:

    def test_selects_missing_then_toggles_off(self, session, notifications):
        session.select_ailment("ibs")
        session.select_category("digestive")
        assert session.ailments.selected_ailments == ("ibs", "bloating", "constipation", "acid_reflux")

        session.select_category("digestive")
        assert session.ailments.selected_ailments == ()
        assert len(notifications) == 3

    def test_all_or_nothing_against_limit(self):
        session = ProtocolSession(max_selections=3)
        session.select_ailment("acne")
        with pytest.raises(ValidationFailure) as exc:
            session.select_category("digestive")
        assert exc.value.error_code == ProtocolErrorCode.SELECTION_LIMIT_EXCEEDED
        assert session.ailments.selected_ailments == ("acne",)

    def test_unknown_category_is_a_no_op(self, session, notifications):
        session.select_category("astrology")
        assert notifications == []


# ============================================================================
# Notifications
# ============================================================================

class TestNotifications:

    def test_batch_notifies_once(self, session, notifications):
        with session.batch():
            session.select_ailment("ibs")
            session.set_priority_level("low")
            session.update_longevity(include_brain_health=True)
        assert len(notifications) == 1
        assert notifications[0].ailments.priority_level == PriorityLevel.LOW
        assert notifications[0].longevity.include_brain_health is True

    def test_empty_batch_does_not_notify(self, session, notifications):
        with session.batch():
            pass
        assert notifications == []

    def test_rejected_mutation_does_not_notify(self, session, notifications):
        with pytest.raises(ValidationFailure):
            session.update_cleanse(duration=21)
        assert notifications == []

    def test_unsubscribe(self, session):
        received = []
        unsubscribe = session.subscribe(received.append)
        unsubscribe()
        session.select_ailment("ibs")
        assert received == []

    def test_snapshot_is_not_mutated_afterwards(self, session, notifications):
        session.select_ailment("ibs")
        first = notifications[0]
        session.select_ailment("acne")
        assert first.ailments.selected_ailments == ("ibs",)


# ============================================================================
# Longevity / Cleanse Settings
# ============================================================================

class TestSettings:

    @pytest.mark.parametrize("section", ["longevity", "cleanse"])
    def test_enabled_is_protected(self, session, section):
        update = getattr(session, f"update_{section}")
        with pytest.raises(ValidationFailure) as exc:
            update(enabled=True)
        assert exc.value.error_code == ProtocolErrorCode.PROTECTED_FIELD
        assert getattr(session, section).enabled is False

    def test_update_longevity(self, session):
        session.update_longevity(calorie_restriction="moderate", fasting_strategy="18:6")
        assert session.longevity.calorie_restriction == CalorieRestriction.MODERATE
        assert session.longevity.fasting_strategy.value == "18:6"

    def test_unknown_field_rejected(self, session):
        with pytest.raises(ValidationFailure) as exc:
            session.update_longevity(turbo_mode=True)
        assert exc.value.error_code == ProtocolErrorCode.INVALID_CONFIGURATION

    def test_cleanse_duration_must_be_allowed(self, session):
        session.update_cleanse(duration=30)
        assert session.cleanse.duration == 30
        with pytest.raises(ValidationFailure):
            session.update_cleanse(duration=21)
        assert session.cleanse.duration == 30

    def test_schedule_cleanse(self, session):
        start = datetime(2026, 1, 1, tzinfo=timezone.utc)
        session.schedule_cleanse(start)
        assert session.cleanse.start_date == start
        assert session.cleanse.end_date == datetime(2026, 1, 15, tzinfo=timezone.utc)
        assert session.progress.total_days == 14

    def test_duration_change_moves_end_date(self, session):
        session.schedule_cleanse(datetime(2026, 1, 1))
        session.update_cleanse(duration=7)
        assert session.cleanse.end_date == datetime(2026, 1, 8, tzinfo=timezone.utc)

    @pytest.mark.parametrize("field", ["start_date", "end_date"])
    def test_schedule_dates_are_protected(self, session, field):
        session.schedule_cleanse(datetime(2026, 1, 1, tzinfo=timezone.utc))
        with pytest.raises(ValidationFailure) as exc:
            session.update_cleanse(**{field: datetime(2026, 3, 1, tzinfo=timezone.utc)})
        assert exc.value.error_code == ProtocolErrorCode.PROTECTED_FIELD
        assert exc.value.details == {"fields": [field]}
        assert session.cleanse.start_date == datetime(2026, 1, 1, tzinfo=timezone.utc)
        assert session.cleanse.end_date == datetime(2026, 1, 15, tzinfo=timezone.utc)

    def test_sync_progress(self, session):
        session.schedule_cleanse(datetime(2026, 1, 1, tzinfo=timezone.utc))
        session.sync_cleanse_progress(datetime(2026, 1, 8, tzinfo=timezone.utc))
        assert session.cleanse.current_phase == CleansePhase.ELIMINATION
        assert session.progress.completion_percentage == 50.0
        assert session.progress.current_day == 8

    def test_sync_without_change_does_not_notify(self, session, notifications):
        session.schedule_cleanse(datetime(2026, 1, 1, tzinfo=timezone.utc))
        session.sync_cleanse_progress(datetime(2026, 1, 8, tzinfo=timezone.utc))
        notifications.clear()

        session.sync_cleanse_progress(datetime(2026, 1, 8, tzinfo=timezone.utc))
        assert notifications == []

    def test_sync_unscheduled_is_a_no_op(self, session, notifications):
        session.sync_cleanse_progress(datetime(2026, 1, 8, tzinfo=timezone.utc))
        assert notifications == []
        assert session.progress.current_day == 1


# ============================================================================
# Predicates
# ============================================================================

class TestPredicates:

    def test_active_labels_in_fixed_order(self, session):
        session._set_enabled(ProtocolFamily.CLEANSE, True)
        session._set_enabled(ProtocolFamily.LONGEVITY, True)
        session.set_selected_ailments(["ibs", "acne"])
        assert session.active_protocol_labels() == ["Longevity Mode", "Parasite Cleanse", "Health Issues (2)"]

    def test_disabled_protocol_settings_do_not_require_consent(self, session):
        session.update_longevity(calorie_restriction="strict")
        session.update_cleanse(intensity="intensive")
        assert not session.requires_medical_consent()

    def test_calorie_restriction_requires_consent_when_enabled(self, session):
        session._set_enabled(ProtocolFamily.LONGEVITY, True)
        assert not session.requires_medical_consent()
        session.update_longevity(calorie_restriction="mild")
        assert session.requires_medical_consent()
        assert not session.has_valid_consent()

    def test_cleanse_intensity_requires_consent_when_enabled(self, session):
        session._set_enabled(ProtocolFamily.CLEANSE, True)
        session.update_cleanse(intensity="moderate")
        assert session.requires_medical_consent()

    def test_valid_consent_needs_provider_approval(self, session):
        session._set_enabled(ProtocolFamily.CLEANSE, True)
        session.update_cleanse(intensity="intensive")
        session._record_consent(MedicalConsent(has_consented=True))
        assert not session.has_valid_consent()
        session._record_consent(MedicalConsent(has_consented=True, has_healthcare_provider_approval=True))
        assert session.has_valid_consent()

    def test_ailments_family_not_gate_switchable(self, session):
        with pytest.raises(ValidationFailure) as exc:
            session._set_enabled(ProtocolFamily.AILMENTS, True)
        assert exc.value.error_code == ProtocolErrorCode.UNSUPPORTED_PROTOCOL_FAMILY


# ============================================================================
# Progress
# ============================================================================

class TestProgress:

    def test_log_symptom(self, session, notifications):
        entry = session.log_symptom(["Headache"], 3, ProtocolFamily.CLEANSE, notes="day 2")
        assert session.progress.symptoms_logged == (entry,)
        assert entry.severity == 3
        assert len(notifications) == 1

    @pytest.mark.parametrize("severity", [0, 6])
    def test_severity_bounds(self, session, severity):
        with pytest.raises(ValidationFailure):
            session.log_symptom(["Headache"], severity, ProtocolFamily.CLEANSE)
        assert session.progress.symptoms_logged == ()

    def test_symptoms_not_logged_against_ailments(self, session):
        with pytest.raises(ValidationFailure):
            session.log_symptom(["Bloating"], 2, ProtocolFamily.AILMENTS)

    def test_measurement_and_note(self, session):
        measurement = session.add_measurement("energy", 7, "scale")
        note = session.add_note("Feeling better", category="improvements")
        assert session.progress.measurements == (measurement,)
        assert session.progress.notes == (note,)
        assert measurement.id != note.id

    def test_update_progress_scalars_only(self, session):
        session.update_progress(current_day=3)
        assert session.progress.current_day == 3
        with pytest.raises(ValidationFailure) as exc:
            session.update_progress(notes=[])
        assert exc.value.error_code == ProtocolErrorCode.PROTECTED_FIELD
