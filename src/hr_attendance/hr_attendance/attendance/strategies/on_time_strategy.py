from __future__ import annotations

from datetime import date, datetime

from ...core.enums import AttendanceStatus
from ...rules.config import WorkHours
from ...rules.lateness import late_minutes
from .base import AttendanceStrategy, StatusDecision


class OnTimeStrategy(AttendanceStrategy):
    """Check-in at or before the late threshold."""

    def decide_checkin(self, *, now: datetime, work_date: date, hours: WorkHours) -> StatusDecision:
        # Minutes past the start time are recorded even inside the grace window.
        return StatusDecision(
            status=AttendanceStatus.PRESENT,
            late_minutes=late_minutes(now, work_date, hours=hours),
        )
