"""Attendance action state machine.

``check-in -> check-out -> overtime start -> overtime end``, with overtime
start also offered as the first action once regular hours are over (or on
Sunday). The action is derived from the persisted record on every call:
approval decisions arrive asynchronously and can move a record back to
``CHECK_IN``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from ..core.constants import REJECTION_MARKER
from ..core.enums import ApprovalStatus, AttendanceAction


class ActionState(Protocol):
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    overtime_start: Optional[datetime]
    overtime_end: Optional[datetime]
    overtime: int
    is_overtime_approved: bool
    is_sunday_work: bool
    is_sunday_work_approved: bool
    approved_at: Optional[datetime]
    approval_status: Optional[ApprovalStatus]
    notes: Optional[str]


def is_rejected_resubmission(record: ActionState, *, marker: str = REJECTION_MARKER) -> bool:
    if record.approval_status == ApprovalStatus.APPROVED:
        return False
    if record.approval_status == ApprovalStatus.REJECTED:
        return True
    if record.notes and marker in record.notes:
        return True
    if record.approved_at is None:
        return False
    overtime_rejected = int(record.overtime or 0) > 0 and not record.is_overtime_approved
    sunday_rejected = record.is_sunday_work and not record.is_sunday_work_approved
    return overtime_rejected or sunday_rejected


def next_action(
    record: Optional[ActionState],
    outside_regular_hours: bool = False,
    *,
    marker: str = REJECTION_MARKER,
) -> AttendanceAction:
    if record is None or (record.check_in is None and record.check_out is None):
        return AttendanceAction.OVERTIME_START if outside_regular_hours else AttendanceAction.CHECK_IN

    if is_rejected_resubmission(record, marker=marker):
        return AttendanceAction.CHECK_IN

    if record.check_in is not None and record.check_out is None:
        # Overtime-only day: overtime end also closes the record.
        if record.overtime_start is not None and record.overtime_end is None:
            return AttendanceAction.OVERTIME_END
        return AttendanceAction.CHECK_OUT

    if record.overtime_start is None:
        return AttendanceAction.OVERTIME_START if outside_regular_hours else AttendanceAction.COMPLETE
    if record.overtime_end is None:
        return AttendanceAction.OVERTIME_END
    return AttendanceAction.COMPLETE
