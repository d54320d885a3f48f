from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles relevant to attendance approvals."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    FOREMAN = "FOREMAN"
    ASSISTANT_FOREMAN = "ASSISTANT_FOREMAN"
    EMPLOYEE = "EMPLOYEE"


class WorkdayType(str, Enum):
    """Classification of a calendar day driving work-hour rules."""

    WEEKDAY = "WEEKDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"
    HOLIDAY = "HOLIDAY"


class AttendanceStatus(str, Enum):
    """Attendance status stored on the daily record."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    HALFDAY = "HALFDAY"
    LEAVE = "LEAVE"


class AttendanceAction(str, Enum):
    """Next action offered to an employee for today's record."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"
    OVERTIME_START = "OVERTIME_START"
    OVERTIME_END = "OVERTIME_END"
    COMPLETE = "COMPLETE"


class ApprovalStatus(str, Enum):
    """Decision on an overtime / Sunday work request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class LateApprovalStatus(str, Enum):
    """Decision on a late-arrival justification."""

    PENDING_LATE_APPROVAL = "PENDING_LATE_APPROVAL"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class WorkScheduleType(str, Enum):
    SHIFT = "SHIFT"
    NON_SHIFT = "NON_SHIFT"


class AllowanceType(str, Enum):
    POSITION = "POSITION"
    MEAL = "MEAL"
    TRANSPORT = "TRANSPORT"
    SHIFT = "SHIFT"


class DeductionType(str, Enum):
    LATE = "LATE"
    ABSENCE = "ABSENCE"
    BPJS_HEALTH = "BPJS_HEALTH"
    BPJS_EMPLOYMENT = "BPJS_EMPLOYMENT"
    ADVANCE = "ADVANCE"
    SOFT_LOAN = "SOFT_LOAN"
    OTHER = "OTHER"
