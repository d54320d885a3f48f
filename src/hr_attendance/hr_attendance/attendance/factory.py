from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus, WorkdayType
from ..rules.config import WorkHours
from ..rules.lateness import attendance_status
from ..rules.workday import HolidayPredicate, classify_workday
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.off_day_strategy import OffDayStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    hours: WorkHours = field(default_factory=WorkHours)
    is_holiday: Optional[HolidayPredicate] = None

    def for_checkin(self, *, now: datetime, work_date: date) -> AttendanceStrategy:
        workday = classify_workday(work_date, is_holiday=self.is_holiday)
        if workday in (WorkdayType.SUNDAY, WorkdayType.HOLIDAY):
            return OffDayStrategy()

        status = attendance_status(now, work_date, hours=self.hours, is_holiday=self.is_holiday)
        if status == AttendanceStatus.LATE:
            return LateStrategy()
        return OnTimeStrategy()
