"""
Week grid layout engine.

Turns events into per-day rectangles on a 7 column x 24 hour grid and
computes the grid lines drawn behind them. Everything here is pure: it
works on plain numbers and never touches a widget or a painter, so the
GUI can recompute it on every repaint.

Pixel arithmetic is integer throughout. Rows are ``height // 23`` tall,
not ``height // 24``: the last hour boundary falls on the bottom edge of
the panel and grid lines and event rectangles both rely on that.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .model import DAYS, Day, Event, User

# Number of day columns and the divisor used for hour rows.
COLUMNS = 7
ROW_DIVISOR = 23

# Every fourth hour line is drawn thick.
THICK_LINE_EVERY = 4
THIN_STROKE = 2
THICK_STROKE = 4
DAY_SEPARATOR_STROKE = 1


class InvalidEventSpan(ValueError):
    """The end day of an event cannot be reached from its start day."""

    def __init__(self, event: Event, message: str):
        super().__init__(message)
        self.event = event


class Variant(Enum):
    """Visual variant of an event's segments."""
    HOST = "host"
    ATTENDEE = "attendee"


@dataclass(frozen=True)
class GridGeometry:
    """Pixel size of the surface and of one day column / hour row."""
    width: int
    height: int
    column_width: int
    row_height: int

    def row_offset(self, time_of_day: int) -> int:
        """Vertical offset of an hhmm time. Minutes are dropped."""
        return (time_of_day // 100) * self.row_height

    def column_offset(self, day: Day, day_order: Sequence[Day] = DAYS) -> int:
        """Horizontal offset of a day's column in the given day order."""
        return day_order.index(day) * self.column_width


@dataclass(frozen=True)
class Segment:
    """The part of an event that falls into one day column."""
    day: Day
    vertical_start: int
    vertical_end: int

    @property
    def height(self) -> int:
        return self.vertical_end - self.vertical_start

    def to_rect(self, geometry: GridGeometry,
                day_order: Sequence[Day] = DAYS) -> tuple[int, int, int, int]:
        """
        (x, y, width, height) of this segment on the given grid.

        Pass the same ``day_order`` that was given to segment().
        """
        return (geometry.column_offset(self.day, day_order), self.vertical_start,
                geometry.column_width, self.height)


@dataclass(frozen=True)
class GridLine:
    """One grid line from (x1, y1) to (x2, y2)."""
    x1: int
    y1: int
    x2: int
    y2: int
    thickness: int

    @property
    def horizontal(self) -> bool:
        return self.y1 == self.y2


def compute_geometry(width: int, height: int) -> GridGeometry:
    """
    Compute column width and row height for a surface of the given size.

    A zero (or negative) size gives zero offsets rather than an error.
    """
    width = max(0, int(width))
    height = max(0, int(height))
    return GridGeometry(
        width=width,
        height=height,
        column_width=width // COLUMNS,
        row_height=height // ROW_DIVISOR,
    )


def segment(event: Event, geometry: GridGeometry,
            day_order: Sequence[Day] = DAYS) -> list[Segment]:
    """
    Split an event into one segment per day it covers.

    A single-day event gives one segment from its start row to its end
    row. A multi-day event gives a segment from the start row to the
    bottom of the grid on the start day, a full-height segment for every
    day in between, and a segment from the top down to the end row on the
    end day, in that order.

    Raises:
        InvalidEventSpan: if either day is not in ``day_order`` or the end
            day comes before the start day (the week does not wrap).
    """
    try:
        start_index = day_order.index(event.start_day)
        end_index = day_order.index(event.end_day)
    except ValueError:
        raise InvalidEventSpan(
            event,
            f"Event {event.name!r}: {event.start_day.value} or "
            f"{event.end_day.value} is not in the displayed week"
        ) from None

    row_start = geometry.row_offset(event.start_time)
    row_end = geometry.row_offset(event.end_time)

    if event.start_day == event.end_day:
        return [Segment(event.start_day, row_start, row_end)]

    if end_index < start_index:
        raise InvalidEventSpan(
            event,
            f"Event {event.name!r} runs from {event.start_day.value} to "
            f"{event.end_day.value}, past the end of the week"
        )

    segments = [Segment(event.start_day, row_start, geometry.height)]
    for index in range(start_index + 1, end_index):
        segments.append(Segment(day_order[index], 0, geometry.height))
    segments.append(Segment(event.end_day, 0, row_end))
    return segments


def select_variant(event: Event, subject_user: User | str,
                   host_view: bool) -> Variant:
    """HOST if this is a host view and the subject hosts the event."""
    if host_view and str(subject_user) == str(event.host):
        return Variant.HOST
    return Variant.ATTENDEE


def grid_lines(geometry: GridGeometry) -> list[GridLine]:
    """
    Hour lines then day separators for the given geometry.

    Hour lines sit at every multiple of the row height below the bottom
    edge; the ones on a multiple of four rows are thick. Day separators
    sit at every multiple of the column width left of the right edge.
    """
    lines: list[GridLine] = []

    row = geometry.row_height
    if row > 0:
        for y in range(row, geometry.height, row):
            thickness = THICK_STROKE if y % (row * THICK_LINE_EVERY) == 0 else THIN_STROKE
            lines.append(GridLine(0, y, geometry.width, y, thickness))

    column = geometry.column_width
    if column > 0:
        for x in range(column, geometry.width, column):
            lines.append(GridLine(x, 0, x, geometry.height, DAY_SEPARATOR_STROKE))

    return lines
