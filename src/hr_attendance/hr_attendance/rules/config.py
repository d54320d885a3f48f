from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time, tzinfo
from typing import Any, Mapping

from ..common.datetime_utils import get_timezone, parse_hhmm
from ..core import constants


@dataclass(frozen=True)
class WorkHours:
    """Regular working hours per workday type (local wall-clock times)."""

    weekday_start: time = constants.DEFAULT_WEEKDAY_START
    weekday_end: time = constants.DEFAULT_WEEKDAY_END
    saturday_start: time = constants.DEFAULT_SATURDAY_START
    saturday_end: time = constants.DEFAULT_SATURDAY_END
    late_threshold: time = constants.DEFAULT_LATE_THRESHOLD

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "WorkHours":
        """Build from a settings mapping such as ``{"weekday_end": "16:30"}``."""
        defaults = cls()
        values = {}
        for name in ("weekday_start", "weekday_end", "saturday_start", "saturday_end", "late_threshold"):
            value = raw.get(name)
            values[name] = parse_hhmm(value) if value else getattr(defaults, name)
        return cls(**values)


@dataclass(frozen=True)
class RulesConfig:
    timezone: str = constants.DEFAULT_TIMEZONE
    work_hours: WorkHours = field(default_factory=WorkHours)
    long_overtime_threshold_minutes: int = constants.LONG_OVERTIME_THRESHOLD_MINUTES
    min_overtime_reason_length: int = constants.MIN_OVERTIME_REASON_LENGTH
    min_late_reason_length: int = constants.MIN_LATE_REASON_LENGTH
    late_penalty: int = constants.LATE_PENALTY
    rejection_marker: str = constants.REJECTION_MARKER

    @property
    def tz(self) -> tzinfo:
        return get_timezone(self.timezone)

    @classmethod
    def from_settings(cls, settings: Any) -> "RulesConfig":
        """Read rule values from a settings module (see ``config/``)."""
        return cls(
            timezone=str(getattr(settings, "TIMEZONE", constants.DEFAULT_TIMEZONE)),
            work_hours=WorkHours.from_mapping(getattr(settings, "WORK_HOURS", {}) or {}),
            long_overtime_threshold_minutes=int(
                getattr(settings, "LONG_OVERTIME_THRESHOLD_MINUTES", constants.LONG_OVERTIME_THRESHOLD_MINUTES)
            ),
            min_overtime_reason_length=int(
                getattr(settings, "MIN_OVERTIME_REASON_LENGTH", constants.MIN_OVERTIME_REASON_LENGTH)
            ),
            min_late_reason_length=int(
                getattr(settings, "MIN_LATE_REASON_LENGTH", constants.MIN_LATE_REASON_LENGTH)
            ),
            late_penalty=int(getattr(settings, "LATE_PENALTY", constants.LATE_PENALTY)),
            rejection_marker=str(getattr(settings, "REJECTION_MARKER", constants.REJECTION_MARKER)),
        )
