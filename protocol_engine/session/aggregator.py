"""
Configuration Aggregator

One ProtocolSession per client session. It holds the longevity, cleanse
and ailment-targeting sub-configurations together with the shared
medical consent and progress records, and publishes the composed
SpecializedProtocolConfig to its listeners.

Notification rules:
- every public mutation produces exactly ONE notification carrying the
  full composed configuration
- several mutations wrapped in batch() produce one notification in total
- a rejected mutation changes nothing and notifies nobody

The `enabled` flags of the longevity and cleanse configurations are not
settable here. Only the consent gate flips them, through
_set_enabled().

Version: session_v1
"""

import logging
import uuid
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from ..catalog.ailments import AILMENT_CATALOG, AilmentCatalog
from ..catalog.models import AilmentCategory
from ..matching.aggregate import aggregate
from ..settings import MAX_AILMENT_SELECTIONS
from ..shared.errors import ProtocolErrorCode, ValidationFailure
from . import schedule
from .models import (
    AilmentsConfig,
    CleanseConfig,
    LongevityConfig,
    MeasurementType,
    MedicalConsent,
    NoteCategory,
    PriorityLevel,
    ProgressMeasurement,
    ProgressNote,
    ProtocolFamily,
    ProtocolProgress,
    SpecializedProtocolConfig,
    SymptomLog,
    utc_now,
)

logger = logging.getLogger(__name__)

ConfigListener = Callable[[SpecializedProtocolConfig], None]

PROGRESS_SCALAR_FIELDS = frozenset(["start_date", "current_day", "total_days", "completion_percentage"])
CLEANSE_SCHEDULE_FIELDS = ("start_date", "end_date")


def _new_id() -> str:
    return uuid.uuid4().hex


class ProtocolSession:

    def __init__(
        self,
        session_id: Optional[str] = None,
        max_selections: Optional[int] = None,
        ailment_catalog: Optional[AilmentCatalog] = None,
    ):
        if max_selections is None:
            max_selections = MAX_AILMENT_SELECTIONS
        if max_selections < 1:
            raise ValueError("max_selections must be at least 1")

        self.session_id = session_id or str(uuid.uuid4())
        self.created_at = utc_now()
        self._max_selections = max_selections
        self._catalog = AILMENT_CATALOG if ailment_catalog is None else ailment_catalog

        self._longevity = LongevityConfig()
        self._cleanse = CleanseConfig()
        self._ailments = AilmentsConfig()
        self._consent = MedicalConsent()
        self._progress = ProtocolProgress(start_date=self.created_at)

        self._listeners: List[ConfigListener] = []
        self._batch_depth = 0
        self._dirty = False

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def max_selections(self) -> int:
        return self._max_selections

    @property
    def longevity(self) -> LongevityConfig:
        return self._longevity

    @property
    def cleanse(self) -> CleanseConfig:
        return self._cleanse

    @property
    def ailments(self) -> AilmentsConfig:
        return self._ailments

    @property
    def consent(self) -> MedicalConsent:
        return self._consent

    @property
    def progress(self) -> ProtocolProgress:
        return self._progress

    def snapshot(self) -> SpecializedProtocolConfig:
        return SpecializedProtocolConfig(
            longevity=self._longevity,
            cleanse=self._cleanse,
            ailments=self._ailments,
            consent=self._consent,
            progress=self._progress,
        )

    def has_active_protocols(self) -> bool:
        return self.snapshot().has_active_protocols()

    def active_protocol_labels(self) -> List[str]:
        return self.snapshot().active_protocol_labels()

    def requires_medical_consent(self) -> bool:
        return self.snapshot().requires_medical_consent()

    def has_valid_consent(self) -> bool:
        return self.snapshot().has_valid_consent()

    def is_family_enabled(self, family: ProtocolFamily) -> bool:
        return self.snapshot().is_family_enabled(family)

    # =========================================================================
    # NOTIFICATION
    # =========================================================================

    def subscribe(self, listener: ConfigListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @contextmanager
    def batch(self):
        """Group several mutations into a single notification."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._dirty:
                self._notify()

    def _notify(self) -> None:
        self._dirty = False
        composed = self.snapshot()
        for listener in list(self._listeners):
            listener(composed)

    def _apply(
        self,
        longevity: Optional[LongevityConfig] = None,
        cleanse: Optional[CleanseConfig] = None,
        ailments: Optional[AilmentsConfig] = None,
        consent: Optional[MedicalConsent] = None,
        progress: Optional[ProtocolProgress] = None,
    ) -> SpecializedProtocolConfig:
        if longevity is not None:
            self._longevity = longevity
        if cleanse is not None:
            self._cleanse = cleanse
        if ailments is not None:
            self._ailments = ailments
        if consent is not None:
            self._consent = consent
        if progress is not None:
            self._progress = progress

        self._dirty = True
        if self._batch_depth == 0:
            self._notify()
        return self.snapshot()

    # =========================================================================
    # AILMENT SELECTION
    # =========================================================================

    def _reject_over_limit(self, requested: int) -> None:
        logger.warning(
            f"Session {self.session_id}: selection of {requested} ailments exceeds "
            f"limit of {self._max_selections}"
        )
        raise ValidationFailure(
            ProtocolErrorCode.SELECTION_LIMIT_EXCEEDED,
            f"You can select up to {self._max_selections} health issues",
            details={
                "max_selections": self._max_selections,
                "requested": requested,
                "selected_ailments": list(self._ailments.selected_ailments),
            },
        )

    def _set_selection(self, selection: Iterable[str]) -> SpecializedProtocolConfig:
        selection = tuple(selection)
        ailments = self._ailments.model_copy(update={
            "selected_ailments": selection,
            "nutritional_focus": aggregate(selection, self._catalog) if selection else None,
            "include_in_planning": len(selection) > 0,
        })
        return self._apply(ailments=ailments)

    def select_ailment(self, ailment_id: str) -> SpecializedProtocolConfig:
        """
        Add one ailment to the selection.

        Already-selected ids are a no-op. Ids the catalog does not know are
        kept; aggregation skips them.
        """
        current = self._ailments.selected_ailments
        if ailment_id in current:
            return self.snapshot()
        if len(current) >= self._max_selections:
            self._reject_over_limit(len(current) + 1)
        return self._set_selection(current + (ailment_id,))

    def deselect_ailment(self, ailment_id: str) -> SpecializedProtocolConfig:
        current = self._ailments.selected_ailments
        if ailment_id not in current:
            return self.snapshot()
        return self._set_selection(a for a in current if a != ailment_id)

    def set_selected_ailments(self, ailment_ids: Iterable[str]) -> SpecializedProtocolConfig:
        selection = list(dict.fromkeys(ailment_ids))
        if len(selection) > self._max_selections:
            self._reject_over_limit(len(selection))
        return self._set_selection(selection)

    def clear_ailments(self) -> SpecializedProtocolConfig:
        return self._set_selection(())

    def select_category(self, category: AilmentCategory) -> SpecializedProtocolConfig:
        """
        Toggle a whole category.

        When every ailment of the category is already selected they are all
        removed. Otherwise the missing ones are appended in catalog order,
        all or nothing against max_selections.
        """
        category_ids = [a.id for a in self._catalog.by_category(category)]
        if not category_ids:
            return self.snapshot()

        current = self._ailments.selected_ailments
        if all(a in current for a in category_ids):
            return self._set_selection(a for a in current if a not in category_ids)

        additions = [a for a in category_ids if a not in current]
        if len(current) + len(additions) > self._max_selections:
            self._reject_over_limit(len(current) + len(additions))
        return self._set_selection(current + tuple(additions))

    def set_include_in_planning(self, include: bool) -> SpecializedProtocolConfig:
        return self._apply(ailments=self._ailments.model_copy(update={"include_in_planning": bool(include)}))

    def set_priority_level(self, level: PriorityLevel) -> SpecializedProtocolConfig:
        try:
            level = PriorityLevel(level)
        except ValueError:
            raise ValidationFailure(
                ProtocolErrorCode.INVALID_CONFIGURATION,
                f"Unknown priority level: {level}",
                details={"allowed": [p.value for p in PriorityLevel]},
            )
        return self._apply(ailments=self._ailments.model_copy(update={"priority_level": level}))

    # =========================================================================
    # LONGEVITY / CLEANSE SETTINGS
    # =========================================================================

    @staticmethod
    def _merge(current, changes: Dict[str, Any], section: str, protected: Tuple[str, ...] = ()):
        if "enabled" in changes:
            raise ValidationFailure(
                ProtocolErrorCode.PROTECTED_FIELD,
                f"{section} can only be enabled or disabled through the consent gate",
                details={"field": "enabled"},
            )
        scheduled = [f for f in protected if f in changes]
        if scheduled:
            raise ValidationFailure(
                ProtocolErrorCode.PROTECTED_FIELD,
                f"{section} dates are set by scheduling the {section}",
                details={"fields": scheduled},
            )
        merged = current.model_dump()
        merged.update(changes)
        try:
            return type(current).model_validate(merged)
        except ValidationError as e:
            raise ValidationFailure(
                ProtocolErrorCode.INVALID_CONFIGURATION,
                f"Invalid {section} settings",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            )

    def update_longevity(self, **changes: Any) -> SpecializedProtocolConfig:
        return self._apply(longevity=self._merge(self._longevity, changes, "longevity"))

    def update_cleanse(self, **changes: Any) -> SpecializedProtocolConfig:
        cleanse = self._merge(self._cleanse, changes, "cleanse", CLEANSE_SCHEDULE_FIELDS)
        if "duration" in changes and cleanse.start_date is not None:
            cleanse = cleanse.model_copy(update={
                "end_date": schedule.schedule_end_date(cleanse.start_date, cleanse.duration),
            })
        return self._apply(cleanse=cleanse)

    def schedule_cleanse(self, start_date: datetime) -> SpecializedProtocolConfig:
        """Set the cleanse window and restart progress tracking from start_date."""
        start_date = schedule.as_utc(start_date)
        cleanse = self._cleanse.model_copy(update={
            "start_date": start_date,
            "end_date": schedule.schedule_end_date(start_date, self._cleanse.duration),
        })
        cleanse = cleanse.model_copy(update={"current_phase": schedule.phase_for_progress(cleanse, start_date)})
        progress = self._progress.model_copy(update={
            "start_date": start_date,
            "current_day": 1,
            "total_days": cleanse.duration,
            "completion_percentage": 0.0,
        })
        return self._apply(cleanse=cleanse, progress=progress)

    def sync_cleanse_progress(self, now: Optional[datetime] = None) -> SpecializedProtocolConfig:
        """
        Recompute phase, day and completion of a scheduled cleanse as of now.

        Does nothing, and notifies no one, when the values are unchanged.
        """
        if self._cleanse.start_date is None:
            return self.snapshot()
        now = now or utc_now()
        cleanse = self._cleanse.model_copy(update={
            "current_phase": schedule.phase_for_progress(self._cleanse, now),
        })
        progress = self._progress.model_copy(update={
            "current_day": schedule.current_day(self._cleanse, now),
            "completion_percentage": round(schedule.cleanse_progress(self._cleanse, now), 2),
        })
        if cleanse == self._cleanse and progress == self._progress:
            return self.snapshot()
        return self._apply(cleanse=cleanse, progress=progress)

    # =========================================================================
    # PROGRESS
    # =========================================================================

    def _validated(self, model, **fields):
        try:
            return model(**fields)
        except ValidationError as e:
            raise ValidationFailure(
                ProtocolErrorCode.INVALID_CONFIGURATION,
                f"Invalid {model.__name__}",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            )

    def log_symptom(
        self,
        symptoms: Iterable[str],
        severity: int,
        protocol_type: ProtocolFamily,
        notes: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> SymptomLog:
        entry = self._validated(
            SymptomLog,
            id=_new_id(),
            date=date or utc_now(),
            symptoms=tuple(symptoms),
            severity=severity,
            notes=notes,
            protocol_type=protocol_type,
        )
        self._apply(progress=self._progress.model_copy(update={
            "symptoms_logged": self._progress.symptoms_logged + (entry,),
        }))
        return entry

    def add_measurement(
        self,
        measurement_type: MeasurementType,
        value: float,
        unit: str,
        notes: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> ProgressMeasurement:
        entry = self._validated(
            ProgressMeasurement,
            id=_new_id(),
            date=date or utc_now(),
            type=measurement_type,
            value=value,
            unit=unit,
            notes=notes,
        )
        self._apply(progress=self._progress.model_copy(update={
            "measurements": self._progress.measurements + (entry,),
        }))
        return entry

    def add_note(
        self,
        content: str,
        category: NoteCategory = NoteCategory.GENERAL,
        date: Optional[datetime] = None,
    ) -> ProgressNote:
        entry = self._validated(
            ProgressNote,
            id=_new_id(),
            date=date or utc_now(),
            content=content,
            category=category,
        )
        self._apply(progress=self._progress.model_copy(update={
            "notes": self._progress.notes + (entry,),
        }))
        return entry

    def update_progress(self, **changes: Any) -> SpecializedProtocolConfig:
        unknown = set(changes) - PROGRESS_SCALAR_FIELDS
        if unknown:
            raise ValidationFailure(
                ProtocolErrorCode.PROTECTED_FIELD,
                "Logs, measurements and notes are appended through their own operations",
                details={"fields": sorted(unknown)},
            )
        merged = self._progress.model_dump()
        merged.update(changes)
        try:
            progress = ProtocolProgress.model_validate(merged)
        except ValidationError as e:
            raise ValidationFailure(
                ProtocolErrorCode.INVALID_CONFIGURATION,
                "Invalid progress update",
                details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
            )
        return self._apply(progress=progress)

    # =========================================================================
    # CONSENT GATE HOOKS
    # =========================================================================

    def _set_enabled(self, family: ProtocolFamily, enabled: bool) -> SpecializedProtocolConfig:
        family = ProtocolFamily(family)
        if family == ProtocolFamily.LONGEVITY:
            return self._apply(longevity=self._longevity.model_copy(update={"enabled": enabled}))
        if family == ProtocolFamily.CLEANSE:
            return self._apply(cleanse=self._cleanse.model_copy(update={"enabled": enabled}))
        raise ValidationFailure(
            ProtocolErrorCode.UNSUPPORTED_PROTOCOL_FAMILY,
            "Ailment targeting is switched with include_in_planning, not the consent gate",
            details={"family": family.value},
        )

    def _record_consent(self, consent: MedicalConsent) -> SpecializedProtocolConfig:
        return self._apply(consent=consent)
