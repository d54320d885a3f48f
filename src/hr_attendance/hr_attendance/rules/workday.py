"""Workday classification and regular working hours."""

from __future__ import annotations

from datetime import date, time, tzinfo
from typing import Callable, Optional

from ..common.datetime_utils import Moment, local_date
from ..core.enums import WorkdayType
from .config import WorkHours

HolidayPredicate = Callable[[date], bool]

_SATURDAY = 5
_SUNDAY = 6


def classify_workday(
    moment: Moment,
    *,
    is_holiday: Optional[HolidayPredicate] = None,
    tz: Optional[tzinfo] = None,
) -> WorkdayType:
    """Classify the calendar day of ``moment`` in the deployment zone.

    Sunday always wins; a holiday predicate, when wired in, turns any other
    day into ``HOLIDAY``.
    """
    day = local_date(moment, tz)
    weekday = day.weekday()
    if weekday == _SUNDAY:
        return WorkdayType.SUNDAY
    if is_holiday is not None and is_holiday(day):
        return WorkdayType.HOLIDAY
    if weekday == _SATURDAY:
        return WorkdayType.SATURDAY
    return WorkdayType.WEEKDAY


def work_start_time(workday_type: WorkdayType, hours: Optional[WorkHours] = None) -> Optional[time]:
    hours = hours or WorkHours()
    if workday_type == WorkdayType.WEEKDAY:
        return hours.weekday_start
    if workday_type == WorkdayType.SATURDAY:
        return hours.saturday_start
    return None


def work_end_time(workday_type: WorkdayType, hours: Optional[WorkHours] = None) -> Optional[time]:
    """End of regular hours, or ``None`` when every minute is overtime."""
    hours = hours or WorkHours()
    if workday_type == WorkdayType.WEEKDAY:
        return hours.weekday_end
    if workday_type == WorkdayType.SATURDAY:
        return hours.saturday_end
    return None


def is_workday(moment: Moment, *, tz: Optional[tzinfo] = None) -> bool:
    return classify_workday(moment, tz=tz) != WorkdayType.SUNDAY


def is_sunday(moment: Moment, *, tz: Optional[tzinfo] = None) -> bool:
    return classify_workday(moment, tz=tz) == WorkdayType.SUNDAY
