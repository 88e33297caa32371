"""
Read-only schedule import from iCalendar files.

Every VEVENT is reduced to a weekly Event: the local day of the week and
hhmm time of its start and end, its organizer as host and its attendees.
Dates are otherwise discarded, so a file holding several weeks folds them
all onto one week grid. Nothing is ever written back.
"""

import logging
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Optional

from icalendar import Calendar as ICalCalendar, Event as ICalEvent

from .model import Day, Event, Planner, User
from .timezone_utils import to_day, to_local_datetime, to_time_of_day

logger = logging.getLogger(__name__)

# Last minute of the day, used as the end of all-day events
END_OF_DAY = 2359


def _user_from_address(address) -> Optional[User]:
    """Build a User from an ORGANIZER/ATTENDEE value (CN, else the address)."""
    if address is None:
        return None
    name = address.params.get('CN') if hasattr(address, 'params') else None
    if not name:
        name = str(address)
        if name.lower().startswith('mailto:'):
            name = name[len('mailto:'):]
    name = str(name).strip()
    return User(name) if name else None


def _attendees(component: ICalEvent) -> tuple[User, ...]:
    raw = component.get('ATTENDEE')
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raw = [raw]
    users = []
    for address in raw:
        user = _user_from_address(address)
        if user is not None and user not in users:
            users.append(user)
    return tuple(users)


def _folds_onto_week(start_day: Day, start_time: int, end_day: Day, end_time: int) -> bool:
    """True if the folded end does not come before the folded start."""
    return (end_day.index, end_time) >= (start_day.index, start_time)


def _span(component: ICalEvent, summary: str) -> Optional[tuple[Day, int, Day, int]]:
    """
    (start_day, start_time, end_day, end_time) of a VEVENT.

    Returns None (and logs) when the event cannot be shown on one week:
    it lasts a week or more, ends before it starts, or wraps from
    Saturday into Sunday.
    """
    start = component.get('DTSTART').dt
    end_prop = component.get('DTEND')
    if end_prop is not None:
        end = end_prop.dt
    elif component.get('DURATION') is not None:
        end = start + component.get('DURATION').dt
    else:
        end = start

    if not isinstance(start, datetime):
        # All-day event: DTEND is exclusive
        last = end if isinstance(end, date) and not isinstance(end, datetime) else start
        if last > start:
            last = last - timedelta(days=1)
        length = last - start
        span = (Day.from_weekday(start.weekday()), 0,
                Day.from_weekday(last.weekday()), END_OF_DAY)
    else:
        local_start = to_local_datetime(start)
        local_end = to_local_datetime(end)
        length = local_end - local_start
        if local_end > local_start and local_end.time() == time(0, 0):
            # Ends at midnight: last minute of the previous day
            span = (to_day(local_start), to_time_of_day(local_start),
                    to_day(local_end - timedelta(days=1)), END_OF_DAY)
        else:
            span = (to_day(local_start), to_time_of_day(local_start),
                    to_day(local_end), to_time_of_day(local_end))

    if length < timedelta(0):
        logger.warning("Skipping event %r: it ends before it starts", summary)
        return None
    if length >= timedelta(days=7):
        logger.warning("Skipping event %r: it lasts a week or longer", summary)
        return None
    if not _folds_onto_week(*span):
        logger.warning("Skipping event %r: %s to %s wraps past the end of the week",
                       summary, span[0].value, span[2].value)
        return None
    return span


def event_from_component(component: ICalEvent, default_host: str) -> Optional[Event]:
    """
    Convert one VEVENT to an Event.

    Returns None (and logs) for a VEVENT without DTSTART or one that does
    not fit on a single week.
    """
    summary = str(component.get('SUMMARY', '')).strip() or "(no title)"
    if component.get('DTSTART') is None:
        logger.warning("Skipping event %r without DTSTART", summary)
        return None

    span = _span(component, summary)
    if span is None:
        return None
    start_day, start_time, end_day, end_time = span
    host = _user_from_address(component.get('ORGANIZER')) or User(default_host)
    location = str(component.get('LOCATION', '')).strip()

    return Event(
        name=summary,
        start_day=start_day,
        start_time=start_time,
        end_day=end_day,
        end_time=end_time,
        host=host,
        attendees=_attendees(component),
        location=location,
        online=location.lower().startswith(('http://', 'https://')),
    )


def parse_schedule(ical_text: str, planner: Optional[Planner] = None,
                   default_host: str = "unknown") -> Planner:
    """
    Parse VCALENDAR text into a planner.

    Raises:
        ValueError: if the text is not valid iCalendar data.
    """
    if planner is None:
        planner = Planner()

    calendar = ICalCalendar.from_ical(ical_text)
    count = 0
    for component in calendar.walk('VEVENT'):
        event = event_from_component(component, default_host)
        if event is not None:
            planner.add_event(event)
            count += 1

    logger.debug("Imported %d events", count)
    return planner


def load_schedule(path: Path, planner: Optional[Planner] = None,
                  default_host: str = "unknown") -> Planner:
    """Read an .ics file into a planner (a new one unless given)."""
    text = Path(path).read_text(encoding='utf-8')
    logger.info("Loading schedule from %s", path)
    return parse_schedule(text, planner, default_host=default_host)
