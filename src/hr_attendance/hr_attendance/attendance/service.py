from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local, to_local
from ..common.validators import require_capture
from ..core.constants import LATE_REJECTION_PREFIX, MAX_REASON_LENGTH
from ..core.enums import ApprovalStatus, AttendanceAction, AttendanceStatus, LateApprovalStatus, Role
from ..core.exceptions import (
    ActionNotAllowedError,
    AlreadyCheckedInError,
    AlreadyCheckedOutError,
    ApprovalNotAllowedError,
    ConsentRequiredError,
    NotCheckedInError,
    ReasonTooShortError,
    RecordNotFoundError,
    ValidationError,
)
from ..rules.actions import next_action
from ..rules.approval import approval_role_for, ensure_can_approve
from ..rules.config import RulesConfig
from ..rules.lateness import attendance_status, can_submit_late_reason
from ..rules.overtime import is_after_regular_hours, overtime_duration_minutes
from ..rules.workday import HolidayPredicate, is_sunday
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, CapturePayload
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Server-side attendance workflow.

    Every mutation re-derives the allowed action from the persisted record and
    the server clock; whatever the client believed is not trusted.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        config: Optional[RulesConfig] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
        is_holiday: Optional[HolidayPredicate] = None,
    ):
        self._attendance = attendance
        self._config = config or RulesConfig()
        self._is_holiday = is_holiday
        self._factory = strategy_factory or AttendanceStrategyFactory(
            hours=self._config.work_hours, is_holiday=is_holiday
        )

    def _local_now(self, now: Optional[datetime]) -> datetime:
        tz = self._config.tz
        return to_local(now, tz) if now else now_local(tz)

    def _outside_regular_hours(self, now: datetime, work_date: date) -> bool:
        return is_after_regular_hours(
            now, work_date, hours=self._config.work_hours, is_holiday=self._is_holiday
        )

    def _derive(self, record: Optional[AttendanceRecord], now: datetime, work_date: date) -> AttendanceAction:
        return next_action(
            record,
            self._outside_regular_hours(now, work_date),
            marker=self._config.rejection_marker,
        )

    def _reload(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise RecordNotFoundError("Attendance record not found")
        return record

    def get_today_record(self, employee_id: int, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, self._local_now(now).date())

    def available_action(self, employee_id: int, *, now: Optional[datetime] = None) -> AttendanceAction:
        now = self._local_now(now)
        record = self._attendance.get_for_employee_and_date(employee_id, now.date())
        return self._derive(record, now, now.date())

    def check_in(
        self,
        employee_id: int,
        *,
        capture: Optional[CapturePayload] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = self._local_now(now)
        today = now.date()
        capture = capture or CapturePayload()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        fresh = record is None or (record.check_in is None and record.check_out is None)
        if not fresh and self._derive(record, now, today) != AttendanceAction.CHECK_IN:
            raise AlreadyCheckedInError("You have already checked in today")

        strategy = self._factory.for_checkin(now=now, work_date=today)
        decision = strategy.decide_checkin(now=now, work_date=today, hours=self._config.work_hours)

        if record is None:
            attendance_id = self._attendance.create_checkin(
                employee_id=employee_id,
                work_date=today,
                check_in=now,
                status=decision.status,
                is_late=decision.is_late,
                late_minutes=decision.late_minutes,
                is_sunday_work=decision.is_sunday_work,
                capture=capture,
            )
            logger.info("Check-in recorded for employee %s (%s)", employee_id, decision.note or decision.status.value)
            return self._reload(attendance_id)

        ok = self._attendance.resubmit_checkin(
            attendance_id=record.attendance_id,
            check_in=now,
            status=decision.status,
            is_late=decision.is_late,
            late_minutes=decision.late_minutes,
            is_sunday_work=decision.is_sunday_work,
            notes=self._clear_rejection(record.notes),
            capture=capture,
        )
        if not ok:
            raise ValidationError("Check-in failed")
        logger.info("Check-in resubmitted for employee %s on %s", employee_id, today)
        return self._reload(record.attendance_id)

    def check_out(self, employee_id: int, *, capture: CapturePayload, now: Optional[datetime] = None) -> AttendanceRecord:
        require_capture(capture.photo_url, capture.latitude, capture.longitude)
        now = self._local_now(now)
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        action = self._derive(record, now, today)
        if action != AttendanceAction.CHECK_OUT:
            if record is None or record.check_in is None or action == AttendanceAction.CHECK_IN:
                raise NotCheckedInError("You have not checked in today")
            if action == AttendanceAction.OVERTIME_END:
                raise ActionNotAllowedError("End your overtime to close today's attendance")
            raise AlreadyCheckedOutError("You have already checked out today")

        if not self._attendance.update_checkout(attendance_id=record.attendance_id, check_out=now, capture=capture):
            raise ValidationError("Check-out failed")
        logger.info("Check-out recorded for employee %s", employee_id)
        return self._reload(record.attendance_id)

    def _clear_rejection(self, notes: Optional[str]) -> Optional[str]:
        if notes and self._config.rejection_marker in notes:
            return ""
        return notes

    @staticmethod
    def _validate_reason(reason: Optional[str], label: str, min_len: int) -> str:
        text = (reason or "").strip()
        if len(text) < min_len:
            raise ReasonTooShortError(f"{label} must be at least {min_len} characters")
        if len(text) > MAX_REASON_LENGTH:
            raise ValidationError(f"{label} must be at most {MAX_REASON_LENGTH} characters")
        return text

    def _validate_overtime_request(self, capture: CapturePayload) -> CapturePayload:
        require_capture(capture.photo_url, capture.latitude, capture.longitude)
        reason = self._validate_reason(capture.reason, "Overtime reason", self._config.min_overtime_reason_length)
        if capture.consent_confirmed is not True:
            raise ConsentRequiredError("You must accept the company overtime policy")
        return replace(capture, reason=reason)

    def start_overtime(self, employee_id: int, *, capture: CapturePayload, now: Optional[datetime] = None) -> AttendanceRecord:
        capture = self._validate_overtime_request(capture)
        now = self._local_now(now)
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        action = self._derive(record, now, today)
        if action != AttendanceAction.OVERTIME_START:
            if action == AttendanceAction.CHECK_OUT:
                raise ActionNotAllowedError("Check out before starting overtime")
            if action == AttendanceAction.OVERTIME_END:
                raise ActionNotAllowedError("Overtime has already started")
            if action == AttendanceAction.CHECK_IN and record is not None and record.check_in is not None:
                raise ActionNotAllowedError("Your request was rejected; check in again first")
            if record is not None and record.overtime_end is not None:
                raise ActionNotAllowedError("Overtime has already ended today")
            raise ActionNotAllowedError("Overtime can only start after regular working hours")

        if record is None:
            attendance_id = self._attendance.create_overtime_start(
                employee_id=employee_id,
                work_date=today,
                started_at=now,
                is_sunday_work=is_sunday(today),
                capture=capture,
            )
        else:
            attendance_id = record.attendance_id
            if not self._attendance.update_overtime_start(attendance_id=attendance_id, started_at=now, capture=capture):
                raise ValidationError("Starting overtime failed")

        logger.info("Overtime started for employee %s", employee_id)
        return self._reload(attendance_id)

    def end_overtime(self, employee_id: int, *, capture: CapturePayload, now: Optional[datetime] = None) -> AttendanceRecord:
        require_capture(capture.photo_url, capture.latitude, capture.longitude)
        now = self._local_now(now)
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if record is None:
            raise NotCheckedInError("You have not checked in today")
        if self._derive(record, now, today) != AttendanceAction.OVERTIME_END:
            raise ActionNotAllowedError("Overtime has not been started")

        minutes = overtime_duration_minutes(record.overtime_start, now)
        ok = self._attendance.update_overtime_end(
            attendance_id=record.attendance_id,
            ended_at=now,
            overtime_minutes=minutes,
            close_check_out=record.check_out is None,
            capture=capture,
        )
        if not ok:
            raise ValidationError("Ending overtime failed")
        logger.info("Overtime ended for employee %s after %s minutes", employee_id, minutes)
        return self._reload(record.attendance_id)

    def approve_overtime(
        self,
        attendance_id: int,
        *,
        approver_id: int,
        approver_role: Role,
        note: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        record = self._reload(attendance_id)
        ensure_can_approve(
            record,
            approval_role_for(approver_role),
            long_overtime_threshold=self._config.long_overtime_threshold_minutes,
        )
        if not record.needs_approval:
            raise ValidationError("There is no overtime or Sunday work to approve")

        status = record.status
        if record.is_sunday_work:
            status = attendance_status(
                record.check_in,
                record.work_date,
                off_day_work_approved=True,
                hours=self._config.work_hours,
                is_holiday=self._is_holiday,
            )

        decided = self._attendance.decide_overtime(
            attendance_id=attendance_id,
            decision=ApprovalStatus.APPROVED,
            decided_by=approver_id,
            decided_at=self._local_now(now),
            status=status,
            notes=(note or "").strip() or self._clear_rejection(record.notes),
        )
        if not decided:
            raise ValidationError("Request has already been approved")
        logger.info("Overtime for attendance %s approved by %s (%s)", attendance_id, approver_id, approver_role.value)
        return self._reload(attendance_id)

    def reject_overtime(
        self,
        attendance_id: int,
        *,
        approver_id: int,
        approver_role: Role,
        reason: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        record = self._reload(attendance_id)
        if not approval_role_for(approver_role).can_approve:
            raise ApprovalNotAllowedError("You are not allowed to reject overtime")

        marker = self._config.rejection_marker
        rejection = f"{marker}: {reason.strip()}" if reason and reason.strip() else marker
        notes = f"{record.notes}. {rejection}" if record.notes else rejection

        decided = self._attendance.decide_overtime(
            attendance_id=attendance_id,
            decision=ApprovalStatus.REJECTED,
            decided_by=approver_id,
            decided_at=self._local_now(now),
            status=record.status,
            notes=notes,
        )
        if not decided:
            raise ValidationError("Request has already been rejected")
        logger.info("Overtime for attendance %s rejected by %s (%s)", attendance_id, approver_id, approver_role.value)
        return self._reload(attendance_id)

    def submit_late_reason(
        self,
        employee_id: int,
        *,
        reason: str,
        photo_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Justify today's late arrival or absence; it then waits for an approver."""
        text = self._validate_reason(reason, "Late reason", self._config.min_late_reason_length)
        if photo_url is not None and (not isinstance(photo_url, str) or not photo_url.strip()):
            raise ValidationError("Photo URL is invalid")
        now = self._local_now(now)

        record = self._attendance.get_for_employee_and_date(employee_id, now.date())
        if record is None:
            raise RecordNotFoundError("Today's attendance record was not found")
        if not can_submit_late_reason(record.status):
            raise ActionNotAllowedError("A late reason can only be submitted for a late or absent record")
        if record.late_approval_status == LateApprovalStatus.APPROVED:
            raise ActionNotAllowedError("Your late reason has already been approved")

        ok = self._attendance.submit_late_reason(
            attendance_id=record.attendance_id,
            reason=text,
            photo_url=photo_url.strip() if photo_url else None,
            submitted_at=now,
        )
        if not ok:
            raise ValidationError("Submitting the late reason failed")
        logger.info("Late reason submitted for employee %s on %s", employee_id, record.work_date)
        return self._reload(record.attendance_id)

    def _decide_late(
        self,
        attendance_id: int,
        decision: LateApprovalStatus,
        *,
        approver_id: int,
        approver_role: Role,
        notes: Optional[str],
    ) -> AttendanceRecord:
        if not approval_role_for(approver_role).can_approve:
            raise ApprovalNotAllowedError("You are not allowed to decide late reasons")
        record = self._reload(attendance_id)
        if record.late_approval_status != LateApprovalStatus.PENDING_LATE_APPROVAL:
            raise ValidationError("There is no pending late reason to decide")

        if not self._attendance.decide_late(attendance_id=attendance_id, decision=decision, notes=notes):
            raise ValidationError("Late reason has already been decided")
        logger.info(
            "Late reason for attendance %s %s by %s (%s)",
            attendance_id,
            decision.value.lower(),
            approver_id,
            approver_role.value,
        )
        return self._reload(attendance_id)

    def approve_late(self, attendance_id: int, *, approver_id: int, approver_role: Role) -> AttendanceRecord:
        # Approval only records the decision; status and payroll penalty are unchanged.
        record = self._reload(attendance_id)
        return self._decide_late(
            attendance_id,
            LateApprovalStatus.APPROVED,
            approver_id=approver_id,
            approver_role=approver_role,
            notes=record.notes,
        )

    def reject_late(
        self,
        attendance_id: int,
        *,
        approver_id: int,
        approver_role: Role,
        reason: Optional[str] = None,
    ) -> AttendanceRecord:
        record = self._reload(attendance_id)
        notes = record.notes
        if reason and reason.strip():
            rejection = f"{LATE_REJECTION_PREFIX}: {reason.strip()}"
            notes = f"{notes}. {rejection}" if notes else rejection
        return self._decide_late(
            attendance_id,
            LateApprovalStatus.REJECTED,
            approver_id=approver_id,
            approver_role=approver_role,
            notes=notes,
        )
