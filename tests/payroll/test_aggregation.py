import logging

import pytest

from src.hr_attendance.hr_attendance.core.exceptions import ValidationError
from src.hr_attendance.hr_attendance.payroll.aggregation import (
    build_payslip,
    daily_rate,
    hourly_rate,
    net_salary,
    soft_loan_installment,
    to_currency,
    totals_by_kind,
)
from src.hr_attendance.hr_attendance.payroll.model import LineItem


def test_net_salary_example():
    assert net_salary(5_000_000, [500_000], 200_000, [100_000, 50_000]) == 5_550_000
    assert net_salary(5_000_000, [500_000, 200_000], 300_000, [250_000, 200_000]) == 5_550_000


def test_each_deduction_lowers_net_by_its_amount():
    base = net_salary(4_000_000, [100_000], 50_000, [75_000])

    assert net_salary(4_000_000, [100_000], 50_000, [75_000, 12_345]) == base - 12_345
    assert net_salary(4_000_000, [100_000, 10_000], 50_000, [75_000]) == base + 10_000


@pytest.mark.parametrize("delta", [1, 12_345, 1_000_000])
def test_base_and_overtime_raise_net_by_their_delta(delta):
    reference = net_salary(5_000_000, [500_000], 200_000, [100_000, 50_000])

    assert net_salary(5_000_000 + delta, [500_000], 200_000, [100_000, 50_000]) == reference + delta
    assert net_salary(5_000_000, [500_000], 200_000 + delta, [100_000, 50_000]) == reference + delta
    assert net_salary(5_000_000, [500_000 + delta], 200_000, [100_000, 50_000]) == reference + delta
    assert net_salary(5_000_000, [500_000], 200_000, [100_000 + delta, 50_000]) == reference - delta


def test_negative_net_is_not_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        assert net_salary(1_000_000, deductions=[1_500_000]) == -500_000
    assert caplog.records == []

    with caplog.at_level(logging.WARNING):
        slip = build_payslip(
            employee_id=3,
            month=1,
            year=2025,
            base=1_000_000,
            deductions=[LineItem("ADVANCE", 1_500_000)],
        )
    assert slip.net_salary == -500_000
    assert "Negative net salary" in caplog.text


def test_inputs_must_be_non_negative_integers():
    with pytest.raises(ValidationError):
        net_salary(-1)
    with pytest.raises(ValidationError):
        net_salary(1_000, deductions=[-5])
    with pytest.raises(ValidationError):
        net_salary(1_000, overtime_amount=True)
    with pytest.raises(ValidationError):
        LineItem("LATE", -40_000)


def test_payslip_totals_by_kind():
    slip = build_payslip(
        employee_id=1,
        month=1,
        year=2025,
        base=5_000_000,
        allowances=[LineItem("POSITION", 600_000)],
        overtime_amount=135_000,
        deductions=[LineItem("LATE", 40_000), LineItem("LATE", 40_000), LineItem("BPJS_HEALTH", 100_000)],
        overtime_hours=2.5,
    )

    assert slip.total_allowances == 600_000
    assert slip.total_deductions == 180_000
    assert slip.net_salary == 5_555_000
    assert slip.deductions_by_kind == {"LATE": 80_000, "BPJS_HEALTH": 100_000}
    assert totals_by_kind(slip.allowances) == {"POSITION": 600_000}


def test_rates_and_rounding():
    assert hourly_rate(5_190_000) == 30_000
    assert hourly_rate(5_190_000, 25_000) == 25_000
    assert to_currency(daily_rate(5_190_000)) == 235_909
    assert to_currency(2.5) == 3
    assert to_currency(1.49) == 1


def test_soft_loan_installment_is_capped_by_remaining():
    assert soft_loan_installment(300_000, 1_000_000) == 300_000
    assert soft_loan_installment(300_000, 100_000) == 100_000
    assert soft_loan_installment(300_000, 0) == 0
