"""Overtime windows and durations."""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from ..common.datetime_utils import Moment, at_time, local_date, minutes_between, to_local
from ..core.constants import LONG_OVERTIME_THRESHOLD_MINUTES, OVERTIME_NEXT_DAY_CUTOFF
from ..core.exceptions import ValidationError
from .config import WorkHours
from .workday import HolidayPredicate, classify_workday, work_end_time


def is_after_regular_hours(
    now: datetime,
    reference_date: Moment,
    *,
    hours: Optional[WorkHours] = None,
    is_holiday: Optional[HolidayPredicate] = None,
    tz: Optional[tzinfo] = None,
) -> bool:
    day = local_date(reference_date, tz)
    end = work_end_time(classify_workday(day, is_holiday=is_holiday), hours)
    if end is None:
        return True
    # Strictly after: the end boundary itself is still regular time.
    return to_local(now, tz) > at_time(day, end)


def is_overtime_check_in(
    now: datetime,
    reference_date: Moment,
    *,
    hours: Optional[WorkHours] = None,
    is_holiday: Optional[HolidayPredicate] = None,
    tz: Optional[tzinfo] = None,
) -> bool:
    return is_after_regular_hours(now, reference_date, hours=hours, is_holiday=is_holiday, tz=tz)


def is_overtime_check_out(
    now: datetime,
    reference_date: Moment,
    *,
    hours: Optional[WorkHours] = None,
    is_holiday: Optional[HolidayPredicate] = None,
    tz: Optional[tzinfo] = None,
) -> bool:
    return is_after_regular_hours(now, reference_date, hours=hours, is_holiday=is_holiday, tz=tz)


def overtime_duration_minutes(start: datetime, end: datetime) -> int:
    if end < start:
        raise ValidationError("Overtime end cannot be earlier than its start")
    return minutes_between(start, end)


def overtime_range_minutes(
    start: Optional[datetime],
    end: Optional[datetime],
    work_date: date,
    *,
    tz: Optional[tzinfo] = None,
) -> int:
    """Minutes between overtime start and end, cut off at 07:00 the next day."""
    if start is None or end is None:
        return 0
    start_local = to_local(start, tz)
    end_local = to_local(end, tz)
    cutoff = at_time(work_date + timedelta(days=1), OVERTIME_NEXT_DAY_CUTOFF)
    effective_end = min(end_local, cutoff)
    if effective_end < start_local:
        return 0
    return minutes_between(start_local, effective_end)


def is_long_overtime(minutes: int, threshold: int = LONG_OVERTIME_THRESHOLD_MINUTES) -> bool:
    return minutes > threshold
