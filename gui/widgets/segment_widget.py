"""
Segment Widget for displaying one day's part of an event.

The same widget serves hosted and attended events; the variant only picks
the colour from the style table.
"""

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont, QMouseEvent

from backend.config import ColorsConfig, LayoutConfig
from backend.layout import Segment, Variant
from backend.model import Event

# Module-level configs (set by MainWindow at startup)
_layout_config: LayoutConfig = LayoutConfig()
_colors_config: ColorsConfig = ColorsConfig()


def set_segment_layout_config(config: LayoutConfig):
    """Set the layout configuration for segment widgets."""
    global _layout_config
    _layout_config = config


def set_segment_colors_config(config: ColorsConfig):
    """Set the colors configuration for segment widgets."""
    global _colors_config
    _colors_config = config


def get_text_font() -> QFont:
    """Get the configured text font for segments."""
    return QFont(_layout_config.text_font, _layout_config.text_font_size)


def variant_colors(colors: ColorsConfig) -> dict[Variant, str]:
    """Style table: background colour per variant."""
    return {
        Variant.HOST: colors.host_event,
        Variant.ATTENDEE: colors.attendee_event,
    }


def get_contrasting_text_color(bg_color: str) -> str:
    """Calculate whether black or white text contrasts better with the background."""
    # Parse hex color
    color = bg_color.lstrip('#')
    if len(color) == 3:
        color = ''.join([c*2 for c in color])

    try:
        r = int(color[0:2], 16)
        g = int(color[2:4], 16)
        b = int(color[4:6], 16)
    except (ValueError, IndexError):
        return "#000000"

    luminance = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "#000000" if luminance > 0.5 else "#ffffff"


def describe_event(event: Event) -> str:
    """Rich-text tooltip for an event."""
    lines = [f"<b>{event.name}</b>", event.describe_span(), f"Host: {event.host}"]
    if event.attendees:
        lines.append("Attendees: " + ", ".join(str(u) for u in event.attendees))
    if event.location:
        lines.append(("🌐 " if event.online else "📍 ") + event.location)
    return "<br>".join(lines)


class SegmentWidget(QFrame):
    """
    One rectangle of an event inside a single day column.

    Only the first segment of an event carries the title; continuation
    segments are plain colour blocks with the same tooltip.
    """

    # Signal emitted when the segment is clicked
    clicked = Signal(Event)

    def __init__(
        self,
        event_data: Event,
        segment: Segment,
        variant: Variant,
        show_title: bool = True,
        parent: QWidget = None
    ):
        super().__init__(parent)
        self.event_data = event_data
        self.segment = segment
        self.variant = variant
        self.show_title = show_title

        self._setup_ui()
        self._apply_style()

    @property
    def color(self) -> str:
        return variant_colors(_colors_config)[self.variant]

    def _setup_ui(self) -> None:
        self.setFont(get_text_font())
        self.setFrameStyle(QFrame.Box | QFrame.Plain)
        self.setCursor(Qt.PointingHandCursor)
        self.setToolTip(describe_event(self.event_data))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(0)
        layout.setAlignment(Qt.AlignTop)

        if self.show_title:
            title_label = QLabel(' '.join(self.event_data.name.split()))
            title_label.setWordWrap(False)
            title_label.setTextFormat(Qt.PlainText)
            title_font = QFont(get_text_font())
            title_font.setBold(True)
            title_label.setFont(title_font)
            layout.addWidget(title_label)

    def _apply_style(self) -> None:
        bg_color = self.color
        text_color = get_contrasting_text_color(bg_color)
        self.setStyleSheet(f"""
            SegmentWidget {{
                background-color: {bg_color};
                border: 1px solid {bg_color};
                color: {text_color};
            }}
            QLabel {{
                color: {text_color};
                background: transparent;
                border: none;
            }}
        """)

    def mousePressEvent(self, mouse_event: QMouseEvent) -> None:
        if mouse_event.button() == Qt.LeftButton:
            self.clicked.emit(self.event_data)
        super().mousePressEvent(mouse_event)
