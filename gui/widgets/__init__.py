"""
Week Planner GUI Widgets

Custom widgets for displaying a weekly schedule.
"""

from .segment_widget import SegmentWidget
from .week_view import WeekViewPanel
from .grid_renderer import draw_grid_lines

__all__ = ['SegmentWidget', 'WeekViewPanel', 'draw_grid_lines']
