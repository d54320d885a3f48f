from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional

from mysql.connector import errors as mysql_errors

from ..core.enums import ApprovalStatus, AttendanceStatus, LateApprovalStatus
from ..core.exceptions import AlreadyCheckedInError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceRecord, CapturePayload
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, work_date, check_in, check_out, overtime_start, overtime_end,
    status, is_late, late_minutes, overtime, is_overtime_approved, is_sunday_work,
    is_sunday_work_approved, approved_at, approved_by, approval_status, overtime_reason, notes,
    late_reason, late_photo_url, late_submitted_at, late_approval_status
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        overtime_start=r.get("overtime_start"),
        overtime_end=r.get("overtime_end"),
        status=AttendanceStatus(r["status"]),
        is_late=bool(r.get("is_late")),
        late_minutes=int(r.get("late_minutes") or 0),
        overtime=int(r.get("overtime") or 0),
        is_overtime_approved=bool(r.get("is_overtime_approved")),
        is_sunday_work=bool(r.get("is_sunday_work")),
        is_sunday_work_approved=bool(r.get("is_sunday_work_approved")),
        approved_at=r.get("approved_at"),
        approved_by=int(r["approved_by"]) if r.get("approved_by") is not None else None,
        approval_status=ApprovalStatus(r["approval_status"]) if r.get("approval_status") else None,
        overtime_reason=r.get("overtime_reason"),
        notes=r.get("notes"),
        late_reason=r.get("late_reason"),
        late_photo_url=r.get("late_photo_url"),
        late_submitted_at=r.get("late_submitted_at"),
        late_approval_status=LateApprovalStatus(r["late_approval_status"]) if r.get("late_approval_status") else None,
    )


def _insert_capture(cur, *, attendance_id: int, stage: str, captured_at: datetime, capture: CapturePayload) -> None:
    if not (capture.photo_url or capture.latitude is not None or capture.reason):
        return
    cur.execute(
        """
        INSERT INTO attendance_captures(attendance_id, stage, captured_at, photo_url, latitude, longitude, reason)
        VALUES(%s,%s,%s,%s,%s,%s,%s)
        """,
        (
            attendance_id,
            stage,
            captured_at,
            capture.photo_url,
            capture.latitude,
            capture.longitude,
            capture.reason or None,
        ),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

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
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        employee_id, work_date, check_in, status, is_late, late_minutes, is_sunday_work
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (int(employee_id), work_date, check_in, status.value, int(is_late), int(late_minutes), int(is_sunday_work)),
                )
                attendance_id = int(cur.lastrowid)
                _insert_capture(cur, attendance_id=attendance_id, stage="CHECK_IN", captured_at=check_in, capture=capture)
                return attendance_id
        except mysql_errors.IntegrityError as exc:
            # A concurrent request created today's row first.
            raise AlreadyCheckedInError("You have already checked in today") from exc

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_in=%s, check_out=NULL, status=%s, is_late=%s, late_minutes=%s, is_sunday_work=%s,
                    approved_at=NULL, approved_by=NULL, approval_status=NULL,
                    is_overtime_approved=0, is_sunday_work_approved=0, notes=%s
                WHERE attendance_id=%s
                """,
                (check_in, status.value, int(is_late), int(late_minutes), int(is_sunday_work), notes, int(attendance_id)),
            )
            ok = cur.rowcount > 0
            if ok:
                _insert_capture(cur, attendance_id=attendance_id, stage="CHECK_IN", captured_at=check_in, capture=capture)
            return ok

    def update_checkout(self, *, attendance_id: int, check_out: datetime, capture: CapturePayload) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_records SET check_out=%s WHERE attendance_id=%s AND check_out IS NULL",
                (check_out, int(attendance_id)),
            )
            ok = cur.rowcount > 0
            if ok:
                _insert_capture(cur, attendance_id=attendance_id, stage="CHECK_OUT", captured_at=check_out, capture=capture)
            return ok

    def create_overtime_start(
        self,
        *,
        employee_id: int,
        work_date: date,
        started_at: datetime,
        is_sunday_work: bool,
        capture: CapturePayload,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        employee_id, work_date, check_in, overtime_start, status, is_sunday_work, overtime_reason
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        int(employee_id),
                        work_date,
                        started_at,
                        started_at,
                        AttendanceStatus.PRESENT.value,
                        int(is_sunday_work),
                        capture.reason,
                    ),
                )
                attendance_id = int(cur.lastrowid)
                _insert_capture(cur, attendance_id=attendance_id, stage="OVERTIME_START", captured_at=started_at, capture=capture)
                return attendance_id
        except mysql_errors.IntegrityError as exc:
            raise AlreadyCheckedInError("Today's attendance already exists") from exc

    def update_overtime_start(self, *, attendance_id: int, started_at: datetime, capture: CapturePayload) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET overtime_start=%s, check_in=COALESCE(check_in, %s), overtime_reason=%s
                WHERE attendance_id=%s AND overtime_start IS NULL
                """,
                (started_at, started_at, capture.reason, int(attendance_id)),
            )
            ok = cur.rowcount > 0
            if ok:
                _insert_capture(cur, attendance_id=attendance_id, stage="OVERTIME_START", captured_at=started_at, capture=capture)
            return ok

    def update_overtime_end(
        self,
        *,
        attendance_id: int,
        ended_at: datetime,
        overtime_minutes: int,
        close_check_out: bool,
        capture: CapturePayload,
    ) -> bool:
        set_checkout = ", check_out=%s" if close_check_out else ""
        params: list[object] = [ended_at, int(overtime_minutes)]
        if close_check_out:
            params.append(ended_at)
        params.append(int(attendance_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE attendance_records
                SET overtime_end=%s, overtime=%s{set_checkout}
                WHERE attendance_id=%s AND overtime_start IS NOT NULL AND overtime_end IS NULL
                """,
                tuple(params),
            )
            ok = cur.rowcount > 0
            if ok:
                _insert_capture(cur, attendance_id=attendance_id, stage="OVERTIME_END", captured_at=ended_at, capture=capture)
            return ok

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
        approved = decision == ApprovalStatus.APPROVED
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET is_overtime_approved=%s,
                    is_sunday_work_approved=IF(%s, is_sunday_work, 0),
                    approval_status=%s, approved_at=%s, approved_by=%s, status=%s, notes=%s
                WHERE attendance_id=%s AND (approval_status IS NULL OR approval_status <> %s)
                """,
                (
                    int(approved),
                    int(approved),
                    decision.value,
                    decided_at,
                    int(decided_by),
                    status.value,
                    notes,
                    int(attendance_id),
                    decision.value,
                ),
            )
            return cur.rowcount > 0

    def submit_late_reason(
        self,
        *,
        attendance_id: int,
        reason: str,
        photo_url: Optional[str],
        submitted_at: datetime,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET late_reason=%s, late_photo_url=%s, late_submitted_at=%s, late_approval_status=%s
                WHERE attendance_id=%s AND (late_approval_status IS NULL OR late_approval_status <> %s)
                """,
                (
                    reason,
                    photo_url,
                    submitted_at,
                    LateApprovalStatus.PENDING_LATE_APPROVAL.value,
                    int(attendance_id),
                    LateApprovalStatus.APPROVED.value,
                ),
            )
            return cur.rowcount > 0

    def decide_late(
        self,
        *,
        attendance_id: int,
        decision: LateApprovalStatus,
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET late_approval_status=%s, notes=%s
                WHERE attendance_id=%s AND late_approval_status=%s
                """,
                (decision.value, notes, int(attendance_id), LateApprovalStatus.PENDING_LATE_APPROVAL.value),
            )
            return cur.rowcount > 0
