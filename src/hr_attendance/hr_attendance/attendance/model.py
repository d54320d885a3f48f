from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ApprovalStatus, AttendanceStatus, LateApprovalStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class CapturePayload:
    """Data captured with an attendance action (photo, GPS, free text).

    Passed explicitly from the capture flow to the service; nothing is
    shared through globals.
    """

    photo_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    reason: Optional[str] = None
    consent_confirmed: bool = False


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per employee per calendar day."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    overtime_start: Optional[datetime] = None
    overtime_end: Optional[datetime] = None
    status: AttendanceStatus = AttendanceStatus.ABSENT
    is_late: bool = False
    late_minutes: int = 0
    overtime: int = 0
    is_overtime_approved: bool = False
    is_sunday_work: bool = False
    is_sunday_work_approved: bool = False
    approved_at: Optional[datetime] = None
    approved_by: Optional[int] = None
    approval_status: Optional[ApprovalStatus] = None
    overtime_reason: Optional[str] = None
    notes: Optional[str] = None
    late_reason: Optional[str] = None
    late_photo_url: Optional[str] = None
    late_submitted_at: Optional[datetime] = None
    late_approval_status: Optional[LateApprovalStatus] = None

    def __post_init__(self) -> None:
        if self.check_in and self.check_out and self.check_out < self.check_in:
            raise ValidationError("Check-out cannot be earlier than check-in")
        if self.overtime_start and self.overtime_end and self.overtime_end < self.overtime_start:
            raise ValidationError("Overtime end cannot be earlier than overtime start")

    @property
    def needs_approval(self) -> bool:
        return self.overtime > 0 or self.is_sunday_work
