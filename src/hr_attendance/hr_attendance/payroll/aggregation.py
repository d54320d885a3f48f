"""Net salary aggregation and payroll arithmetic helpers.

All amounts are whole currency units (Rupiah). A negative net salary is a
legitimate outcome (e.g. a large advance) and is reported, never clamped.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional, Union

from ..common.validators import require_non_negative_int
from ..core.constants import MONTHLY_WORK_DAYS, MONTHLY_WORK_HOURS
from .model import LineItem, Payslip

logger = logging.getLogger(__name__)

Amount = Union[int, LineItem]


def _amount(item: Amount) -> int:
    if isinstance(item, LineItem):
        return item.amount
    return require_non_negative_int(item, "amount")


def net_salary(
    base: int,
    allowances: Iterable[Amount] = (),
    overtime_amount: int = 0,
    deductions: Iterable[Amount] = (),
) -> int:
    require_non_negative_int(base, "base")
    require_non_negative_int(overtime_amount, "overtime_amount")
    total_allowances = sum(_amount(a) for a in allowances)
    total_deductions = sum(_amount(d) for d in deductions)
    return base + total_allowances + overtime_amount - total_deductions


def totals_by_kind(items: Iterable[LineItem]) -> Dict[str, int]:
    totals: Dict[str, int] = {}
    for item in items:
        totals[item.kind] = totals.get(item.kind, 0) + item.amount
    return totals


def build_payslip(
    *,
    employee_id: int,
    month: int,
    year: int,
    base: int,
    allowances: Iterable[LineItem] = (),
    overtime_amount: int = 0,
    deductions: Iterable[LineItem] = (),
    overtime_hours: float = 0.0,
) -> Payslip:
    allowances = tuple(allowances)
    deductions = tuple(deductions)
    net = net_salary(base, allowances, overtime_amount, deductions)
    if net < 0:
        logger.warning("Negative net salary for employee %s (%s/%s): %s", employee_id, month, year, net)

    return Payslip(
        employee_id=employee_id,
        month=month,
        year=year,
        base_salary=base,
        overtime_amount=overtime_amount,
        allowances=allowances,
        deductions=deductions,
        overtime_hours=overtime_hours,
        total_allowances=sum(a.amount for a in allowances),
        total_deductions=sum(d.amount for d in deductions),
        net_salary=net,
        deductions_by_kind=totals_by_kind(deductions),
    )


def to_currency(value: float) -> int:
    """Round to whole currency units, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def hourly_rate(basic_salary: int, explicit_rate: Optional[float] = None) -> float:
    if explicit_rate and explicit_rate > 0:
        return float(explicit_rate)
    return basic_salary / MONTHLY_WORK_HOURS


def daily_rate(basic_salary: int) -> float:
    return basic_salary / MONTHLY_WORK_DAYS


def soft_loan_installment(monthly_amount: int, remaining_amount: int) -> int:
    return max(min(monthly_amount, remaining_amount), 0)
