from datetime import date

from src.hr_attendance.hr_attendance.attendance.factory import AttendanceStrategyFactory
from src.hr_attendance.hr_attendance.attendance.strategies.late_strategy import LateStrategy
from src.hr_attendance.hr_attendance.attendance.strategies.off_day_strategy import OffDayStrategy
from src.hr_attendance.hr_attendance.attendance.strategies.on_time_strategy import OnTimeStrategy
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus
from src.hr_attendance.hr_attendance.rules.config import WorkHours


def test_factory_checkin_on_time_until_threshold(monday, at):
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=at(monday, 8, 30), work_date=monday)

    assert isinstance(strategy, OnTimeStrategy)
    decision = strategy.decide_checkin(now=at(monday, 8, 30), work_date=monday, hours=WorkHours())
    assert decision.status == AttendanceStatus.PRESENT
    assert decision.late_minutes == 30
    assert not decision.is_late


def test_factory_checkin_late_after_threshold(monday, at):
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(now=at(monday, 8, 31), work_date=monday)

    assert isinstance(strategy, LateStrategy)
    decision = strategy.decide_checkin(now=at(monday, 8, 31), work_date=monday, hours=WorkHours())
    assert decision.is_late
    assert decision.late_minutes == 31
    assert decision.note == "Late by 31 minutes"


def test_factory_off_day(sunday, at):
    strategy = AttendanceStrategyFactory().for_checkin(now=at(sunday, 9, 0), work_date=sunday)

    assert isinstance(strategy, OffDayStrategy)
    decision = strategy.decide_checkin(now=at(sunday, 9, 0), work_date=sunday, hours=WorkHours())
    assert decision.status == AttendanceStatus.ABSENT
    assert decision.is_sunday_work


def test_factory_holiday_is_off_day(at):
    new_year = date(2025, 1, 1)
    factory = AttendanceStrategyFactory(is_holiday={new_year}.__contains__)

    assert isinstance(factory.for_checkin(now=at(new_year, 8, 0), work_date=new_year), OffDayStrategy)
