from dataclasses import dataclass

import pytest

from src.hr_attendance.hr_attendance.core.enums import Role
from src.hr_attendance.hr_attendance.core.exceptions import ApprovalNotAllowedError, AuthorizationError
from src.hr_attendance.hr_attendance.rules.approval import (
    ApprovalRole,
    approval_role_for,
    can_approve,
    ensure_can_approve,
)


@dataclass
class Request:
    is_sunday_work: bool = False
    overtime: int = 0


def test_foreman_approves_weekday_overtime():
    assert can_approve(Request(overtime=90), approval_role_for(Role.FOREMAN))


def test_sunday_work_needs_sunday_capability():
    role = ApprovalRole(can_approve=True, can_approve_long_overtime=True)

    assert not can_approve(Request(is_sunday_work=True, overtime=60), role)
    assert can_approve(Request(overtime=300), role)


def test_long_overtime_needs_long_capability():
    role = ApprovalRole(can_approve=True, can_approve_sunday_work=True)

    assert can_approve(Request(overtime=120), role)
    assert not can_approve(Request(overtime=121), role)
    assert can_approve(Request(overtime=121), role, long_overtime_threshold=180)


def test_employee_can_never_approve():
    role = approval_role_for(Role.EMPLOYEE)

    assert not can_approve(Request(), role)
    assert not can_approve(Request(overtime=30), role)


def test_assistant_foreman_limits():
    role = approval_role_for(Role.ASSISTANT_FOREMAN)

    assert can_approve(Request(overtime=120), role)
    assert not can_approve(Request(overtime=121), role)
    assert not can_approve(Request(is_sunday_work=True), role)


def test_full_approvers():
    for role in (Role.ADMIN, Role.MANAGER, Role.FOREMAN):
        assert can_approve(Request(is_sunday_work=True, overtime=600), approval_role_for(role))


def test_ensure_can_approve_names_the_failed_gate():
    with pytest.raises(ApprovalNotAllowedError, match="Sunday work"):
        ensure_can_approve(Request(is_sunday_work=True), approval_role_for(Role.ASSISTANT_FOREMAN))

    with pytest.raises(AuthorizationError, match="120 minutes"):
        ensure_can_approve(Request(overtime=150), approval_role_for(Role.ASSISTANT_FOREMAN))

    ensure_can_approve(Request(overtime=150), approval_role_for(Role.MANAGER))
