from __future__ import annotations

from typing import List, Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import minutes_between
from ...core.constants import NON_SHIFT_MEAL_ALLOWANCE, NON_SHIFT_TRANSPORT_ALLOWANCE
from ...core.enums import AllowanceType, AttendanceStatus, WorkdayType
from ..aggregation import hourly_rate, to_currency
from ..model import Employee, LineItem
from .base import PayrollCalculator, tiered

NON_SHIFT_WORK_HOURS = 8
MISSING_CHECKOUT_HOURS = 4
MAX_OFF_DAY_OVERTIME_HOURS = 11

_WORKED = (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


class NonShiftPayrollCalculator(PayrollCalculator):
    """Daily-paid workers: pay follows worked hours, allowances per present day."""

    def worked_hours(self, record: AttendanceRecord) -> float:
        if record.status == AttendanceStatus.LEAVE:
            return NON_SHIFT_WORK_HOURS
        if record.status not in _WORKED:
            return 0
        if not record.check_in or not record.check_out:
            return MISSING_CHECKOUT_HOURS
        hours = minutes_between(record.check_in, record.check_out) / 60
        return min(max(hours, 0), NON_SHIFT_WORK_HOURS)

    def base_salary(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> int:
        hours = sum(self.worked_hours(r) for r in attendance)
        return to_currency(hours * hourly_rate(employee.basic_salary, employee.hourly_rate))

    def attendance_allowances(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> List[LineItem]:
        days = sum(1 for r in attendance if r.status in _WORKED)
        if days == 0:
            return []
        return [
            LineItem(AllowanceType.MEAL.value, days * NON_SHIFT_MEAL_ALLOWANCE, f"Meal allowance x{days}"),
            LineItem(AllowanceType.TRANSPORT.value, days * NON_SHIFT_TRANSPORT_ALLOWANCE, f"Transport allowance x{days}"),
        ]

    def billable_overtime_hours(self, hours: float, workday_type: WorkdayType) -> float:
        if workday_type in (WorkdayType.SUNDAY, WorkdayType.HOLIDAY):
            return min(hours, MAX_OFF_DAY_OVERTIME_HOURS)
        return hours

    def overtime_multiplied_hours(self, hours: float, workday_type: WorkdayType) -> float:
        if workday_type in (WorkdayType.SUNDAY, WorkdayType.HOLIDAY):
            capped = self.billable_overtime_hours(hours, workday_type)
            return tiered(capped, [(8, 2.0), (1, 3.0), (None, 4.0)])
        if workday_type == WorkdayType.SATURDAY:
            return tiered(hours, [(5, 2.0), (None, 1.0)])
        return tiered(hours, [(1, 1.5), (None, 2.0)])
