from __future__ import annotations

from typing import List, Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import ABSENCE_PENALTY_PERCENT, SHIFT_FIXED_ALLOWANCE
from ...core.enums import AllowanceType, AttendanceStatus, DeductionType, WorkdayType
from ..aggregation import daily_rate, to_currency
from ..model import Employee, LineItem
from .base import PayrollCalculator, tiered


class ShiftPayrollCalculator(PayrollCalculator):
    """Monthly-paid shift workers: fixed salary, absences deducted per day."""

    def base_salary(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> int:
        return int(employee.basic_salary)

    def attendance_allowances(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> List[LineItem]:
        if SHIFT_FIXED_ALLOWANCE <= 0:
            return []
        return [LineItem(AllowanceType.SHIFT.value, SHIFT_FIXED_ALLOWANCE, "Fixed shift allowance")]

    def attendance_deductions(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> List[LineItem]:
        items = super().attendance_deductions(employee, attendance)
        per_day = to_currency(daily_rate(employee.basic_salary) * ABSENCE_PENALTY_PERCENT / 100)
        for r in attendance:
            # Unapproved Sunday work is also ABSENT but is not a missed workday.
            if r.status == AttendanceStatus.ABSENT and not r.is_sunday_work and per_day > 0:
                items.append(LineItem(DeductionType.ABSENCE.value, per_day, f"Absent {r.work_date.isoformat()}"))
        return items

    def overtime_multiplied_hours(self, hours: float, workday_type: WorkdayType) -> float:
        if workday_type in (WorkdayType.SUNDAY, WorkdayType.HOLIDAY):
            effective = hours - 1 if hours > 6 else hours
            return effective * 2.0
        if workday_type == WorkdayType.SATURDAY:
            return hours * 2.0
        return tiered(hours, [(1, 1.5), (None, 2.0)])
