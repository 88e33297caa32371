"""
Planner data model for Week Planner.

Days of the week, users, events and a read-only in-memory planner that
answers "what is on this user's schedule".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class Day(Enum):
    """Day of the week, Sunday first."""
    SUNDAY = "Sunday"
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @property
    def index(self) -> int:
        """Column index of this day in the week grid."""
        return DAYS.index(self)

    def successor(self) -> Optional['Day']:
        """The following day, or None for Saturday. The week does not wrap."""
        i = self.index + 1
        return DAYS[i] if i < len(DAYS) else None

    @classmethod
    def parse(cls, text: str) -> 'Day':
        """Parse a full or three-letter English day name, any case."""
        key = text.strip().lower()
        for day in DAYS:
            if key in (day.value.lower(), day.value[:3].lower()):
                return day
        raise ValueError(f"Unknown day: {text!r}")

    @classmethod
    def from_weekday(cls, weekday: int) -> 'Day':
        """Map Python's date.weekday() (0=Monday) to a Day."""
        return DAYS[(weekday + 1) % 7]


# Column order of the week grid. Shared, read-only.
DAYS: tuple[Day, ...] = (
    Day.SUNDAY, Day.MONDAY, Day.TUESDAY, Day.WEDNESDAY,
    Day.THURSDAY, Day.FRIDAY, Day.SATURDAY,
)


def format_time(value: int) -> str:
    """Format an hhmm integer (930) as "09:30"."""
    return f"{value // 100:02d}:{value % 100:02d}"


@dataclass(frozen=True)
class User:
    """A planner user, identified by name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Event:
    """
    A weekly event.

    Times are hhmm integers (1400 = 14:00). The caller guarantees that
    (start_day, start_time) does not come after (end_day, end_time);
    nothing here checks it.
    """
    name: str
    start_day: Day
    start_time: int
    end_day: Day
    end_time: int
    host: User
    attendees: tuple[User, ...] = ()
    location: str = ""
    online: bool = False

    def involves(self, username: str) -> bool:
        """True if the user hosts or attends this event."""
        if str(self.host) == username:
            return True
        return any(str(u) == username for u in self.attendees)

    def describe_span(self) -> str:
        """Human-readable span, e.g. "Monday 09:30 - Tuesday 11:00"."""
        return (f"{self.start_day.value} {format_time(self.start_time)} - "
                f"{self.end_day.value} {format_time(self.end_time)}")


class Planner:
    """
    Read-only view of users and their schedules.

    Populated once (from schedule files or code) and then only queried by
    the GUI.
    """

    def __init__(self, users: Iterable[User] = (), events: Iterable[Event] = ()):
        self._users: dict[str, User] = {}
        self._events: list[Event] = []
        for user in users:
            self.add_user(user)
        for event in events:
            self.add_event(event)

    def add_user(self, user: User) -> User:
        """Register a user; an existing user with the same name wins."""
        return self._users.setdefault(str(user), user)

    def add_event(self, event: Event):
        """Add an event and register its host and attendees."""
        self.add_user(event.host)
        for attendee in event.attendees:
            self.add_user(attendee)
        self._events.append(event)

    def get_list_of_users(self) -> list[User]:
        """All known users in registration order."""
        return list(self._users.values())

    def get_user(self, username: str) -> Optional[User]:
        return self._users.get(username)

    def get_schedule_for(self, username: str) -> list[Event]:
        """Events the user hosts or attends. Not sorted."""
        return [e for e in self._events if e.involves(username)]

    def __len__(self) -> int:
        return len(self._events)
