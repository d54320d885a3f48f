from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import List, Optional, Tuple

from ..common.datetime_utils import minutes_between
from ..core.constants import ASSISTANT_FOREMAN_ALLOWANCE, FOREMAN_ALLOWANCE, LATE_PENALTY
from ..core.enums import AllowanceType, DeductionType, Role
from ..core.exceptions import ValidationError
from ..rules.workday import classify_workday
from .aggregation import build_payslip, hourly_rate, soft_loan_installment, to_currency
from .calculator.base import PayrollCalculator, round_down_to_half_hour
from .calculator.factory import calculator_for
from .model import Employee, LineItem, OvertimeEntry, Payslip
from .repository import PayrollSourceRepository

logger = logging.getLogger(__name__)


def month_bounds(month: int, year: int) -> Tuple[date, date]:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def position_allowance(employee: Employee) -> Optional[LineItem]:
    position = (employee.position or "").lower()
    if "assistant foreman" in position or employee.role == Role.ASSISTANT_FOREMAN:
        return LineItem(AllowanceType.POSITION.value, ASSISTANT_FOREMAN_ALLOWANCE, "Assistant foreman allowance")
    if "foreman" in position or employee.role == Role.FOREMAN:
        return LineItem(AllowanceType.POSITION.value, FOREMAN_ALLOWANCE, "Foreman allowance")
    return None


class PayrollService:
    """Monthly payroll for one employee.

    All sources are read for the same (employee_id, month, year) window; the
    resulting payslip is returned for the caller to persist.
    """

    def __init__(self, sources: PayrollSourceRepository, *, late_penalty: int = LATE_PENALTY):
        self._sources = sources
        self._late_penalty = int(late_penalty)

    def _overtime(
        self,
        employee: Employee,
        entries: List[OvertimeEntry],
        holidays: set,
        calculator: PayrollCalculator,
    ) -> Tuple[float, int]:
        rate = hourly_rate(employee.basic_salary, employee.hourly_rate)
        total_hours = 0.0
        total_amount = 0.0
        for entry in entries:
            hours = round_down_to_half_hour(minutes_between(entry.start, entry.end))
            if hours <= 0:
                continue
            workday = classify_workday(entry.work_date, is_holiday=holidays.__contains__)
            total_hours += calculator.billable_overtime_hours(hours, workday)
            total_amount += calculator.overtime_pay(hours, workday, rate)
        return total_hours, to_currency(total_amount)

    def generate(self, employee_id: int, month: int, year: int) -> Payslip:
        start, end = month_bounds(month, year)

        employee = self._sources.get_employee(employee_id)
        if not employee:
            raise ValidationError("Employee not found")

        calculator = calculator_for(employee.work_schedule_type, late_penalty=self._late_penalty)
        attendance = list(self._sources.list_attendance(employee_id, start, end))
        holidays = set(self._sources.list_holidays(start, end))

        allowances: List[LineItem] = []
        position = position_allowance(employee)
        if position:
            allowances.append(position)
        allowances.extend(calculator.attendance_allowances(employee, attendance))

        deductions: List[LineItem] = list(calculator.attendance_deductions(employee, attendance))
        if employee.bpjs_health > 0:
            deductions.append(LineItem(DeductionType.BPJS_HEALTH.value, int(employee.bpjs_health), "BPJS health"))
        if employee.bpjs_employment > 0:
            deductions.append(
                LineItem(DeductionType.BPJS_EMPLOYMENT.value, int(employee.bpjs_employment), "BPJS employment")
            )
        for amount in self._sources.list_due_advances(employee_id, month, year):
            if amount > 0:
                deductions.append(LineItem(DeductionType.ADVANCE.value, int(amount), "Advance repayment"))
        for loan in self._sources.list_active_soft_loans(employee_id):
            if not loan.is_due(month, year):
                continue
            installment = soft_loan_installment(loan.monthly_amount, loan.remaining_amount)
            if installment > 0:
                deductions.append(
                    LineItem(DeductionType.SOFT_LOAN.value, installment, f"Soft loan #{loan.loan_id} installment")
                )

        overtime_entries = list(self._sources.list_approved_overtime(employee_id, start, end))
        overtime_hours, overtime_amount = self._overtime(employee, overtime_entries, holidays, calculator)

        payslip = build_payslip(
            employee_id=employee_id,
            month=month,
            year=year,
            base=calculator.base_salary(employee, attendance),
            allowances=allowances,
            overtime_amount=overtime_amount,
            deductions=deductions,
            overtime_hours=overtime_hours,
        )
        logger.info(
            "Payroll %s/%s generated for employee %s: net %s", month, year, employee_id, payslip.net_salary
        )
        return payslip
