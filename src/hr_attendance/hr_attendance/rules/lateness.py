from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional

from ..common.datetime_utils import at_time, minutes_between, to_local
from ..core.constants import LATE_PENALTY
from ..core.enums import AttendanceStatus, WorkdayType
from .config import WorkHours
from .workday import HolidayPredicate, classify_workday, work_start_time

_OFF_DAYS = (WorkdayType.SUNDAY, WorkdayType.HOLIDAY)


def attendance_status(
    check_in: Optional[datetime],
    work_date: date,
    *,
    off_day_work_approved: bool = False,
    hours: Optional[WorkHours] = None,
    is_holiday: Optional[HolidayPredicate] = None,
    tz: Optional[tzinfo] = None,
) -> AttendanceStatus:
    """Status for a check-in: off-day work counts only once approved."""
    if check_in is None:
        return AttendanceStatus.ABSENT

    if classify_workday(work_date, is_holiday=is_holiday) in _OFF_DAYS:
        return AttendanceStatus.PRESENT if off_day_work_approved else AttendanceStatus.ABSENT

    hours = hours or WorkHours()
    if to_local(check_in, tz) > at_time(work_date, hours.late_threshold):
        return AttendanceStatus.LATE
    return AttendanceStatus.PRESENT


def late_minutes(
    check_in: Optional[datetime],
    work_date: date,
    *,
    hours: Optional[WorkHours] = None,
    is_holiday: Optional[HolidayPredicate] = None,
    tz: Optional[tzinfo] = None,
) -> int:
    if check_in is None:
        return 0
    start = work_start_time(classify_workday(work_date, is_holiday=is_holiday), hours)
    if start is None:
        return 0
    return max(minutes_between(at_time(work_date, start), to_local(check_in, tz)), 0)


def late_penalty(status: AttendanceStatus, penalty: int = LATE_PENALTY) -> int:
    return penalty if status == AttendanceStatus.LATE else 0


def can_submit_late_reason(status: AttendanceStatus) -> bool:
    """A justification is accepted only for records counted as late or absent."""
    return status in (AttendanceStatus.LATE, AttendanceStatus.ABSENT)
