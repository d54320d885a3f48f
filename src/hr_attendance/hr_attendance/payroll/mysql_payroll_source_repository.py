from __future__ import annotations

from datetime import date
from typing import List, Optional, Set

from ..attendance.model import AttendanceRecord
from ..attendance.mysql_attendance_repository import _COLUMNS, _to_record
from ..core.enums import Role, WorkScheduleType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, OvertimeEntry, SoftLoan
from .repository import PayrollSourceRepository


class MySQLPayrollSourceRepository(PayrollSourceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, role, position, work_schedule_type, basic_salary, hourly_rate,
                       bpjs_health, bpjs_employment
                FROM employees WHERE employee_id=%s
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=int(r["employee_id"]),
                basic_salary=int(r["basic_salary"] or 0),
                work_schedule_type=WorkScheduleType(r["work_schedule_type"]),
                role=Role(r["role"]),
                position=r.get("position") or "",
                hourly_rate=float(r["hourly_rate"]) if r.get("hourly_rate") is not None else None,
                bpjs_health=int(r.get("bpjs_health") or 0),
                bpjs_employment=int(r.get("bpjs_employment") or 0),
            )

    def list_attendance(self, employee_id: int, start: date, end: date) -> List[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (int(employee_id), start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_approved_overtime(self, employee_id: int, start: date, end: date) -> List[OvertimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, overtime_start, overtime_end FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                  AND is_overtime_approved=1
                  AND overtime_start IS NOT NULL AND overtime_end IS NOT NULL
                ORDER BY work_date
                """,
                (int(employee_id), start, end),
            )
            return [
                OvertimeEntry(work_date=r["work_date"], start=r["overtime_start"], end=r["overtime_end"])
                for r in fetchall(cur)
            ]

    def list_due_advances(self, employee_id: int, month: int, year: int) -> List[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT amount FROM salary_advances
                WHERE employee_id=%s AND deduction_month=%s AND deduction_year=%s
                  AND status='APPROVED' AND is_deducted=0
                """,
                (int(employee_id), int(month), int(year)),
            )
            return [int(r["amount"]) for r in fetchall(cur)]

    def list_active_soft_loans(self, employee_id: int) -> List[SoftLoan]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT loan_id, monthly_installment, remaining_amount, start_month, start_year
                FROM soft_loans WHERE employee_id=%s AND status='ACTIVE'
                """,
                (int(employee_id),),
            )
            return [
                SoftLoan(
                    loan_id=int(r["loan_id"]),
                    monthly_amount=int(r["monthly_installment"]),
                    remaining_amount=int(r["remaining_amount"]),
                    start_month=int(r["start_month"]),
                    start_year=int(r["start_year"]),
                )
                for r in fetchall(cur)
            ]

    def list_holidays(self, start: date, end: date) -> Set[date]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_date FROM holidays WHERE holiday_date BETWEEN %s AND %s", (start, end))
            return {r["holiday_date"] for r in fetchall(cur)}

    def is_holiday(self, day: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM holidays WHERE holiday_date=%s", (day,))
            return fetchone(cur) is not None
