from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence, Set

from ..attendance.model import AttendanceRecord
from .model import Employee, OvertimeEntry, SoftLoan


class PayrollSourceRepository(Protocol):
    """Every source a payroll run reads, queried for one (employee, period)."""

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_attendance(self, employee_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_approved_overtime(self, employee_id: int, start: date, end: date) -> Sequence[OvertimeEntry]:
        raise NotImplementedError

    def list_due_advances(self, employee_id: int, month: int, year: int) -> Sequence[int]:
        """Approved, not yet deducted advance amounts scheduled for this period."""

        raise NotImplementedError

    def list_active_soft_loans(self, employee_id: int) -> Sequence[SoftLoan]:
        raise NotImplementedError

    def list_holidays(self, start: date, end: date) -> Set[date]:
        raise NotImplementedError
