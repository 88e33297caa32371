"""
Grid line drawing for the week view.

Line positions come from backend.layout; this module only turns them into
painter calls.
"""

from PySide6.QtGui import QColor, QPainter, QPen

from backend.layout import GridLine, compute_geometry, grid_lines


def make_pen(line: GridLine, color: str = "#000000") -> QPen:
    """Solid pen of the line's thickness."""
    pen = QPen(QColor(color))
    pen.setWidth(line.thickness)
    return pen


def draw_lines(painter: QPainter, lines: list[GridLine], color: str = "#000000") -> None:
    """Draw precomputed grid lines. Painter state is restored afterwards."""
    painter.save()
    for line in lines:
        painter.setPen(make_pen(line, color))
        painter.drawLine(line.x1, line.y1, line.x2, line.y2)
    painter.restore()


def draw_grid_lines(painter: QPainter, width: int, height: int, color: str = "#000000") -> None:
    """Draw hour lines and day separators for a surface of the given size."""
    draw_lines(painter, grid_lines(compute_geometry(width, height)), color)
