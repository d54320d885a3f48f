from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus
from src.hr_attendance.hr_attendance.rules.lateness import (
    attendance_status,
    can_submit_late_reason,
    late_minutes,
    late_penalty,
)


def test_late_threshold_is_inclusive(monday, at):
    assert attendance_status(at(monday, 8, 30), monday) == AttendanceStatus.PRESENT
    assert attendance_status(at(monday, 8, 31), monday) == AttendanceStatus.LATE


def test_no_check_in_is_absent(monday):
    assert attendance_status(None, monday) == AttendanceStatus.ABSENT


def test_sunday_work_counts_only_when_approved(sunday, at):
    assert attendance_status(at(sunday, 9, 0), sunday) == AttendanceStatus.ABSENT
    assert attendance_status(at(sunday, 9, 0), sunday, off_day_work_approved=True) == AttendanceStatus.PRESENT


def test_late_minutes_from_start_time(monday, sunday, at):
    assert late_minutes(at(monday, 8, 45), monday) == 45
    assert late_minutes(at(monday, 7, 50), monday) == 0
    assert late_minutes(at(sunday, 10, 0), sunday) == 0


def test_late_penalty_only_for_late():
    assert late_penalty(AttendanceStatus.LATE) == 40000
    assert late_penalty(AttendanceStatus.LATE, 30000) == 30000
    assert late_penalty(AttendanceStatus.PRESENT) == 0


def test_late_reason_only_for_late_or_absent():
    assert can_submit_late_reason(AttendanceStatus.LATE)
    assert can_submit_late_reason(AttendanceStatus.ABSENT)
    assert not can_submit_late_reason(AttendanceStatus.PRESENT)
    assert not can_submit_late_reason(AttendanceStatus.LEAVE)
