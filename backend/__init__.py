"""
Week Planner Backend Module

This module provides everything below the GUI:
- Planner data model (model.py)
- Week grid layout engine (layout.py)
- Configuration parsing (config.py)
- Read-only iCalendar import (schedule_ics.py)
"""

from .config import Config
from .model import DAYS, Day, Event, Planner, User
from .layout import (
    GridGeometry, GridLine, InvalidEventSpan, Segment, Variant,
    compute_geometry, grid_lines, segment, select_variant,
)
from .schedule_ics import load_schedule, parse_schedule

__all__ = [
    'Config',
    'DAYS',
    'Day',
    'Event',
    'Planner',
    'User',
    'GridGeometry',
    'GridLine',
    'InvalidEventSpan',
    'Segment',
    'Variant',
    'compute_geometry',
    'grid_lines',
    'segment',
    'select_variant',
    'load_schedule',
    'parse_schedule',
]
