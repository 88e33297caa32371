"""
Main Window for Week Planner.

Day header, the week view panel and a bottom bar for picking whose
schedule is shown.
"""

import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QComboBox, QCheckBox, QStatusBar, QApplication
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont

from backend.config import Config
from backend.model import DAYS, Event, Planner
from .widgets.segment_widget import set_segment_colors_config, set_segment_layout_config
from .widgets.week_view import WeekViewPanel, set_week_view_colors_config

logger = logging.getLogger(__name__)


class DayHeader(QWidget):
    """Row of day names lined up with the week view columns."""

    def __init__(self, config: Config, font: QFont, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self.setStyleSheet(f"background: {config.colors.header_background};")

        self._labels: list[QLabel] = []
        for day in DAYS:
            label = QLabel(config.localization.get_day_name(day.index))
            label.setAlignment(Qt.AlignCenter)
            label.setFont(font)
            label.setStyleSheet("font-weight: bold; padding: 6px;")
            label.setToolTip(day.value)
            layout.addWidget(label, 1)
            self._labels.append(label)

    def labels(self) -> list[str]:
        return [label.text() for label in self._labels]


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config: Config, planner: Planner, username: str = "",
                 host_view: bool = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.planner = planner

        # Set module configs BEFORE creating widgets
        set_segment_layout_config(config.layout)
        set_segment_colors_config(config.colors)
        set_week_view_colors_config(config.colors)

        app = QApplication.instance()
        if app is not None:
            app.setFont(QFont(config.layout.text_font, config.layout.text_font_size))
        self._interface_font = QFont(config.layout.interface_font, config.layout.interface_font_size)

        if host_view is None:
            host_view = config.host_view
        users = [str(u) for u in planner.get_list_of_users()]
        if not username or username not in users:
            if username:
                logger.warning("User %r has no schedule, showing %s instead",
                               username, users[0] if users else "nobody")
            username = users[0] if users else ""

        self._setup_window()
        self._setup_ui(username, host_view)
        self._setup_statusbar()

    def _setup_window(self):
        """Configure main window properties."""
        self.setWindowTitle(self.config.labels.window_title)
        self.setMinimumSize(500, 400)
        self.resize(self.config.layout.window_width, self.config.layout.window_height)

    def _setup_ui(self, username: str, host_view: bool):
        """Set up the main UI layout."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._header = DayHeader(self.config, self._interface_font)
        layout.addWidget(self._header)

        self._week_view = WeekViewPanel(self.planner, username, host_view)
        self._week_view.event_selected.connect(self._on_event_selected)
        layout.addWidget(self._week_view, 1)

        # Bottom bar: user selection and host view toggle
        bottom = QWidget()
        bottom_layout = QHBoxLayout(bottom)
        bottom_layout.setContentsMargins(8, 6, 8, 6)

        user_label = QLabel(self.config.labels.user)
        user_label.setFont(self._interface_font)
        bottom_layout.addWidget(user_label)

        self._user_combo = QComboBox()
        self._user_combo.setFont(self._interface_font)
        self._populate_users(username)
        self._user_combo.currentTextChanged.connect(self._on_user_changed)
        bottom_layout.addWidget(self._user_combo, 1)

        self._host_view_check = QCheckBox(self.config.labels.host_view)
        self._host_view_check.setFont(self._interface_font)
        self._host_view_check.setChecked(host_view)
        self._host_view_check.toggled.connect(self._week_view.set_host_view)
        bottom_layout.addWidget(self._host_view_check)

        layout.addWidget(bottom)
        self.setCentralWidget(central)

    def _populate_users(self, selected: str):
        self._user_combo.blockSignals(True)
        self._user_combo.clear()
        users = [str(u) for u in self.planner.get_list_of_users()]
        if users:
            self._user_combo.addItems(users)
            self._user_combo.setCurrentText(selected)
        else:
            self._user_combo.addItem(self.config.labels.no_users)
            self._user_combo.setEnabled(False)
        self._user_combo.blockSignals(False)

    def _setup_statusbar(self):
        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)
        self._statusbar.showMessage(f"{len(self.planner)} events")

    @property
    def week_view(self) -> WeekViewPanel:
        return self._week_view

    @property
    def user_combo(self) -> QComboBox:
        return self._user_combo

    def _on_user_changed(self, username: str):
        logger.debug("Selected user %s", username)
        self._week_view.set_subject(username)

    def _on_event_selected(self, event: Event):
        message = f"{event.name}: {event.describe_span()} (host {event.host})"
        logger.info("Selected event %s", message)
        self._statusbar.showMessage(message)
