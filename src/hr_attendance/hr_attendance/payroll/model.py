from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional, Tuple

from ..core.enums import Role, WorkScheduleType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LineItem:
    """One itemized allowance or deduction, in whole currency units."""

    kind: str
    amount: int
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int) or self.amount < 0:
            raise ValidationError(f"{self.kind} amount must be a non-negative integer")


@dataclass(frozen=True)
class Employee:
    employee_id: int
    basic_salary: int
    work_schedule_type: WorkScheduleType = WorkScheduleType.SHIFT
    role: Role = Role.EMPLOYEE
    position: str = ""
    hourly_rate: Optional[float] = None
    bpjs_health: int = 0
    bpjs_employment: int = 0


@dataclass(frozen=True)
class OvertimeEntry:
    """An approved overtime request."""

    work_date: date
    start: datetime
    end: datetime


@dataclass(frozen=True)
class SoftLoan:
    loan_id: int
    monthly_amount: int
    remaining_amount: int
    start_month: int
    start_year: int

    def is_due(self, month: int, year: int) -> bool:
        return self.remaining_amount > 0 and (year, month) >= (self.start_year, self.start_month)


@dataclass(frozen=True)
class Payslip:
    employee_id: int
    month: int
    year: int
    base_salary: int
    overtime_amount: int
    allowances: Tuple[LineItem, ...] = ()
    deductions: Tuple[LineItem, ...] = ()
    overtime_hours: float = 0.0
    total_allowances: int = 0
    total_deductions: int = 0
    net_salary: int = 0
    deductions_by_kind: Dict[str, int] = field(default_factory=dict)
