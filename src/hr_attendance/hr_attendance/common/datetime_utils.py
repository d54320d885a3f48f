from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from typing import Optional, Union

import pytz

from ..core.constants import DEFAULT_TIMEZONE

Moment = Union[datetime, date]


def get_timezone(name: Optional[str] = None) -> tzinfo:
    return pytz.timezone(name or DEFAULT_TIMEZONE)


def to_local(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Express ``moment`` as naive wall-clock time of the deployment zone.

    Aware datetimes are converted; naive datetimes are taken as already local.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz or get_timezone()).replace(tzinfo=None)


def local_date(moment: Moment, tz: Optional[tzinfo] = None) -> date:
    if isinstance(moment, datetime):
        return to_local(moment, tz).date()
    return moment


def at_time(day: date, clock: time) -> datetime:
    return datetime.combine(day, clock)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end (negative if end is earlier)."""
    seconds = (end - start).total_seconds()
    return int(seconds // 60) if seconds >= 0 else -int(-seconds // 60)


def parse_hhmm(value: Union[str, time]) -> time:
    if isinstance(value, time):
        return value
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local(tz: Optional[tzinfo] = None) -> datetime:
    """Current wall-clock time in the deployment zone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz or get_timezone()).replace(tzinfo=None)
