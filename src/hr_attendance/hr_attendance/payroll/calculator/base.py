from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import List, Sequence

from ...attendance.model import AttendanceRecord
from ...core.constants import LATE_PENALTY
from ...core.enums import DeductionType, WorkdayType
from ...rules.lateness import late_penalty
from ..model import Employee, LineItem


def round_down_to_half_hour(minutes: int) -> float:
    """1h48m -> 1.5h, 1h24m -> 1.0h."""
    if minutes <= 0:
        return 0.0
    return math.floor(minutes / 30) / 2


def tiered(hours: float, tiers: Sequence[tuple]) -> float:
    """Multiply consecutive slices of ``hours`` by their rate.

    ``tiers`` is a sequence of ``(slice_hours, multiplier)``; ``None`` as the
    slice size takes whatever remains.
    """
    remaining = hours
    total = 0.0
    for size, multiplier in tiers:
        if remaining <= 0:
            break
        portion = remaining if size is None else min(remaining, size)
        total += portion * multiplier
        remaining -= portion
    return total


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern per work schedule type)."""

    def __init__(self, *, late_penalty: int = LATE_PENALTY):
        self.late_penalty = int(late_penalty)

    @abstractmethod
    def base_salary(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> int:
        raise NotImplementedError

    @abstractmethod
    def attendance_allowances(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> List[LineItem]:
        raise NotImplementedError

    @abstractmethod
    def overtime_multiplied_hours(self, hours: float, workday_type: WorkdayType) -> float:
        """Overtime hours after breaks, caps and multipliers."""
        raise NotImplementedError

    def attendance_deductions(self, employee: Employee, attendance: Sequence[AttendanceRecord]) -> List[LineItem]:
        items = []
        for r in attendance:
            amount = late_penalty(r.status, self.late_penalty)
            if amount > 0:
                items.append(LineItem(DeductionType.LATE.value, amount, f"Late {r.work_date.isoformat()}"))
        return items

    def overtime_pay(self, hours: float, workday_type: WorkdayType, hourly_rate: float) -> float:
        return self.overtime_multiplied_hours(hours, workday_type) * hourly_rate

    def billable_overtime_hours(self, hours: float, workday_type: WorkdayType) -> float:
        return hours
