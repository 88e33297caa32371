"""
Timezone utilities for Week Planner.

Imported calendar times are converted to the configured local timezone
before they are reduced to a day of the week and an hhmm time.
"""

from datetime import datetime

import pytz

from .model import Day

# Default timezone - overridden from config at startup
_local_timezone_name: str = "UTC"


def set_timezone(timezone_name: str):
    """Set the local timezone for the application."""
    global _local_timezone_name
    _local_timezone_name = timezone_name


def get_local_timezone():
    """
    Get the local timezone as a pytz timezone object.

    Raises:
        pytz.UnknownTimeZoneError: if the configured name is not known.
    """
    return pytz.timezone(_local_timezone_name)


def to_local_datetime(dt: datetime) -> datetime:
    """
    Convert an aware datetime to the local timezone.

    Naive datetimes are taken to be local already and returned unchanged.
    """
    if dt.tzinfo is not None:
        return dt.astimezone(get_local_timezone())
    return dt


def to_day(dt: datetime) -> Day:
    """Local day of the week of a datetime."""
    return Day.from_weekday(to_local_datetime(dt).weekday())


def to_time_of_day(dt: datetime) -> int:
    """
    Local time of a datetime as an hhmm integer.

    Example: 14:30 becomes 1430.
    """
    local_dt = to_local_datetime(dt)
    return local_dt.hour * 100 + local_dt.minute
