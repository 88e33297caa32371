"""
Week view panel: one user's schedule on a 7 day x 24 hour grid.

The panel owns its segment widgets and rebuilds all of them whenever the
size, the subject or the host-view flag changes. Geometry and segmentation
come from backend.layout; the panel only places widgets and paints lines.
"""

import logging

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Signal
from PySide6.QtGui import QColor, QPainter

from backend.config import ColorsConfig
from backend.layout import (
    GridGeometry, InvalidEventSpan, compute_geometry, segment, select_variant
)
from backend.model import DAYS, Event, Planner
from .grid_renderer import draw_grid_lines
from .segment_widget import SegmentWidget

logger = logging.getLogger(__name__)

# Module-level colors (set by MainWindow at startup)
_colors_config: ColorsConfig = ColorsConfig()


def set_week_view_colors_config(config: ColorsConfig):
    """Set the colors configuration for the week view."""
    global _colors_config
    _colors_config = config


class WeekViewPanel(QWidget):
    """
    Seven day columns, Sunday to Saturday, with 24 hour rows.

    Clicking a segment emits ``event_selected`` with the event; what
    happens next is up to whoever is connected.
    """

    event_selected = Signal(Event)

    def __init__(self, planner: Planner, username: str = "", host_view: bool = False,
                 parent=None):
        super().__init__(parent)
        self._planner = planner
        self._username = username
        self._host_view = host_view
        self._segment_widgets: list[SegmentWidget] = []
        self._skipped: list[InvalidEventSpan] = []
        self.setMinimumSize(350, 240)

    @property
    def username(self) -> str:
        return self._username

    @property
    def host_view(self) -> bool:
        return self._host_view

    def set_planner(self, planner: Planner):
        self._planner = planner
        self.refresh()

    def set_subject(self, username: str):
        """Show another user's schedule."""
        self._username = username
        self.refresh()

    def set_host_view(self, host_view: bool):
        self._host_view = host_view
        self.refresh()

    def geometry_for_size(self) -> GridGeometry:
        return compute_geometry(self.width(), self.height())

    def segment_widgets(self) -> list[SegmentWidget]:
        """Segment widgets currently on the panel, in creation order."""
        return list(self._segment_widgets)

    def skipped_spans(self) -> list[InvalidEventSpan]:
        """Errors for the events left out of the last rebuild."""
        return list(self._skipped)

    def clear_segments(self):
        for widget in self._segment_widgets:
            widget.hide()
            widget.deleteLater()
        self._segment_widgets.clear()
        self._skipped.clear()

    def refresh(self):
        """Discard every segment widget and lay the schedule out again."""
        self.clear_segments()
        if not self._username:
            self.update()
            return

        geometry = self.geometry_for_size()
        for event in self._planner.get_schedule_for(self._username):
            self._add_event(event, geometry)

        logger.debug("Laid out %d segments for %s (%dx%d)",
                     len(self._segment_widgets), self._username,
                     geometry.width, geometry.height)
        self.update()

    def _add_event(self, event: Event, geometry: GridGeometry):
        try:
            segments = segment(event, geometry, DAYS)
        except InvalidEventSpan as e:
            logger.warning("Not showing event for %s: %s", self._username, e)
            self._skipped.append(e)
            return

        variant = select_variant(event, self._username, self._host_view)
        for i, seg in enumerate(segments):
            widget = SegmentWidget(event, seg, variant, show_title=(i == 0), parent=self)
            widget.setGeometry(*seg.to_rect(geometry, DAYS))
            widget.clicked.connect(self.event_selected.emit)
            widget.show()
            self._segment_widgets.append(widget)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.refresh()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(_colors_config.panel_background))
        draw_grid_lines(painter, self.width(), self.height(), _colors_config.grid_line)
        painter.end()
