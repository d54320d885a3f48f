from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .payroll.mysql_payroll_source_repository import MySQLPayrollSourceRepository
from .payroll.service import PayrollService
from .rules.config import RulesConfig


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    rules: RulesConfig

    attendance_repo: MySQLAttendanceRepository
    payroll_sources: MySQLPayrollSourceRepository

    attendance_service: AttendanceService
    payroll_service: PayrollService


def build_container(*, settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(getattr(settings, "DB_CONFIG")))
    rules = RulesConfig.from_settings(settings)

    attendance_repo = MySQLAttendanceRepository(conn)
    payroll_sources = MySQLPayrollSourceRepository(conn)

    attendance_service = AttendanceService(
        attendance_repo,
        config=rules,
        strategy_factory=AttendanceStrategyFactory(hours=rules.work_hours, is_holiday=payroll_sources.is_holiday),
        is_holiday=payroll_sources.is_holiday,
    )
    payroll_service = PayrollService(payroll_sources, late_penalty=rules.late_penalty)

    return Container(
        conn=conn,
        rules=rules,
        attendance_repo=attendance_repo,
        payroll_sources=payroll_sources,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
    )
