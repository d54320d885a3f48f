from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from ..core.enums import ApprovalStatus, AttendanceStatus, LateApprovalStatus
from .model import AttendanceRecord, CapturePayload


class AttendanceRepository(Protocol):
    """Persistence for attendance records.

    Implementations must keep (employee_id, work_date) unique so two racing
    check-ins cannot both create a row.
    """

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in: datetime,
        status: AttendanceStatus,
        is_late: bool,
        late_minutes: int,
        is_sunday_work: bool,
        capture: CapturePayload,
    ) -> int:
        raise NotImplementedError

    def resubmit_checkin(
        self,
        *,
        attendance_id: int,
        check_in: datetime,
        status: AttendanceStatus,
        is_late: bool,
        late_minutes: int,
        is_sunday_work: bool,
        notes: Optional[str],
        capture: CapturePayload,
    ) -> bool:
        """Re-open a rejected record: clears check-out and every approval field."""

        raise NotImplementedError

    def update_checkout(self, *, attendance_id: int, check_out: datetime, capture: CapturePayload) -> bool:
        raise NotImplementedError

    def create_overtime_start(
        self,
        *,
        employee_id: int,
        work_date: date,
        started_at: datetime,
        is_sunday_work: bool,
        capture: CapturePayload,
    ) -> int:
        """Overtime as the first action of the day; check-in is set to the start."""

        raise NotImplementedError

    def update_overtime_start(self, *, attendance_id: int, started_at: datetime, capture: CapturePayload) -> bool:
        """Set the overtime start; a missing check-in is filled with the same time."""

        raise NotImplementedError

    def update_overtime_end(
        self,
        *,
        attendance_id: int,
        ended_at: datetime,
        overtime_minutes: int,
        close_check_out: bool,
        capture: CapturePayload,
    ) -> bool:
        raise NotImplementedError

    def decide_overtime(
        self,
        *,
        attendance_id: int,
        decision: ApprovalStatus,
        decided_by: int,
        decided_at: datetime,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> bool:
        """Conditional update; returns False when the decision is already in place."""

        raise NotImplementedError

    def submit_late_reason(
        self,
        *,
        attendance_id: int,
        reason: str,
        photo_url: Optional[str],
        submitted_at: datetime,
    ) -> bool:
        """Store a late justification and mark it pending; an approved one is left untouched."""

        raise NotImplementedError

    def decide_late(
        self,
        *,
        attendance_id: int,
        decision: LateApprovalStatus,
        notes: Optional[str] = None,
    ) -> bool:
        """Conditional update; only a pending justification can be decided."""

        raise NotImplementedError
