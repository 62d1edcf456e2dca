"""
Cleanse Schedule Helpers

Pure functions deriving progress, remaining days and the current phase
of a scheduled cleanse from its start/end dates.

Phase thresholds (percent complete):
    < 15  preparation
    < 75  elimination
    < 90  rebuilding
    else  maintenance
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Optional

from .models import CleanseConfig, CleansePhase, utc_now

PHASE_THRESHOLDS = (
    (15.0, CleansePhase.PREPARATION),
    (75.0, CleansePhase.ELIMINATION),
    (90.0, CleansePhase.REBUILDING),
)

SECONDS_PER_DAY = 24 * 60 * 60


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def schedule_end_date(start: datetime, duration_days: int) -> datetime:
    return as_utc(start) + timedelta(days=duration_days)


def cleanse_progress(config: CleanseConfig, now: Optional[datetime] = None) -> float:
    """Percent of the scheduled window elapsed, clamped to [0, 100]. 0 when unscheduled."""
    if config.start_date is None or config.end_date is None:
        return 0.0
    now = as_utc(now or utc_now())
    total = (as_utc(config.end_date) - as_utc(config.start_date)).total_seconds()
    if total <= 0:
        return 100.0
    elapsed = (now - as_utc(config.start_date)).total_seconds()
    return max(0.0, min(100.0, elapsed / total * 100))


def days_remaining(config: CleanseConfig, now: Optional[datetime] = None) -> int:
    """Whole days left, rounded up. The full duration while there is no end date."""
    if config.end_date is None:
        return config.duration
    now = as_utc(now or utc_now())
    remaining = (as_utc(config.end_date) - now).total_seconds() / SECONDS_PER_DAY
    return max(0, math.ceil(remaining))


def phase_for_progress(config: CleanseConfig, now: Optional[datetime] = None) -> CleansePhase:
    progress = cleanse_progress(config, now)
    for threshold, phase in PHASE_THRESHOLDS:
        if progress < threshold:
            return phase
    return CleansePhase.MAINTENANCE


def current_day(config: CleanseConfig, now: Optional[datetime] = None) -> int:
    """1-based day of the cleanse, capped at the duration."""
    if config.start_date is None:
        return 1
    now = as_utc(now or utc_now())
    elapsed_days = int((now - as_utc(config.start_date)).total_seconds() // SECONDS_PER_DAY)
    return max(1, min(config.duration, elapsed_days + 1))
