from __future__ import annotations

from datetime import date, datetime

from ...core.enums import AttendanceStatus
from ...rules.config import WorkHours
from .base import AttendanceStrategy, StatusDecision


class OffDayStrategy(AttendanceStrategy):
    """Sunday/holiday work: absent until an approver accepts it."""

    def decide_checkin(self, *, now: datetime, work_date: date, hours: WorkHours) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.ABSENT,
            is_sunday_work=True,
            note="Sunday work (requires approval)",
        )
