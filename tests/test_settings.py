import importlib
from datetime import time
from types import SimpleNamespace

from config import get_settings_module
from src.hr_attendance.hr_attendance.container import build_container
from src.hr_attendance.hr_attendance.attendance.service import AttendanceService
from src.hr_attendance.hr_attendance.database.connection import DatabaseConnection
from src.hr_attendance.hr_attendance.payroll.service import PayrollService
from src.hr_attendance.hr_attendance.rules.config import RulesConfig, WorkHours


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "testing")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_rules_config_from_testing_settings():
    rules = RulesConfig.from_settings(importlib.import_module("config.testing"))

    assert rules.timezone == "Asia/Jakarta"
    assert rules.work_hours == WorkHours()
    assert rules.long_overtime_threshold_minutes == 120
    assert rules.min_overtime_reason_length == 20
    assert rules.min_late_reason_length == 20


def test_work_hours_override_keeps_other_defaults():
    settings = SimpleNamespace(WORK_HOURS={"weekday_end": "16:30", "saturday_end": "14:00"}, LATE_PENALTY=30000)
    rules = RulesConfig.from_settings(settings)

    assert rules.work_hours.weekday_end == time(16, 30)
    assert rules.work_hours.saturday_end == time(14, 0)
    assert rules.work_hours.weekday_start == time(8, 0)
    assert rules.late_penalty == 30000
    assert rules.rejection_marker == "Di Tolak"


def test_build_container_wires_services(monkeypatch):
    monkeypatch.setattr(DatabaseConnection, "_instance", None)
    settings = SimpleNamespace(
        DB_CONFIG={"host": "db", "port": 3307, "user": "hr", "password": "x", "database": "hr_attendance"},
        WORK_HOURS={"weekday_end": "16:30"},
    )

    container = build_container(settings=settings)

    assert container.conn.config.port == 3307
    assert container.rules.work_hours.weekday_end == time(16, 30)
    assert isinstance(container.attendance_service, AttendanceService)
    assert isinstance(container.payroll_service, PayrollService)
