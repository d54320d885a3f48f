from __future__ import annotations

from datetime import date, datetime

from ...core.enums import AttendanceStatus
from ...rules.config import WorkHours
from ...rules.lateness import late_minutes
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, now: datetime, work_date: date, hours: WorkHours) -> StatusDecision:
        minutes = late_minutes(now, work_date, hours=hours)
        return StatusDecision(
            status=AttendanceStatus.LATE,
            is_late=True,
            late_minutes=minutes,
            note=f"Late by {minutes} minutes",
        )
