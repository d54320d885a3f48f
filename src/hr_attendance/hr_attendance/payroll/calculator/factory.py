from __future__ import annotations

from ...core.constants import LATE_PENALTY
from ...core.enums import WorkScheduleType
from .base import PayrollCalculator
from .non_shift_calculator import NonShiftPayrollCalculator
from .shift_calculator import ShiftPayrollCalculator


def calculator_for(schedule_type: WorkScheduleType, *, late_penalty: int = LATE_PENALTY) -> PayrollCalculator:
    if schedule_type == WorkScheduleType.NON_SHIFT:
        return NonShiftPayrollCalculator(late_penalty=late_penalty)
    return ShiftPayrollCalculator(late_penalty=late_penalty)
