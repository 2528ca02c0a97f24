"""Pattern canvas: paints the stitch grid and offers per-cell recoloring."""

from typing import Optional, Tuple

from PyQt6 import QtWidgets
from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QAction, QColor, QPainter, QPen
from PyQt6.QtWidgets import QInputDialog, QMenu, QToolTip

from embroidery.catalog import ThreadCatalog
from models import Pattern, ThreadColor
from ui.styles import COLORS, SIZES


class PatternView(QtWidgets.QWidget):
    """Custom widget for rendering an embroidery grid."""

    # row, column, new thread
    cell_recolor_requested = pyqtSignal(int, int, object)

    def __init__(self, catalog: ThreadCatalog, parent=None):
        super().__init__(parent)
        self.catalog = catalog
        self.pattern: Optional[Pattern] = None
        self.show_grid = True
        self._hover: Optional[Tuple[int, int]] = None

        self.setMinimumSize(*SIZES.CANVAS_MIN_SIZE)
        self.setMouseTracking(True)

    def set_pattern(self, pattern: Optional[Pattern]):
        self.pattern = pattern
        self._hover = None
        self.update()

    def set_show_grid(self, show: bool):
        self.show_grid = show
        self.update()

    # === Geometry ===

    def _layout(self) -> Tuple[float, float, float]:
        """Get (cell size, x offset, y offset) in screen pixels.

        AIDEV-NOTE: Keeps cells square and centers the grid
        """
        grid = self.pattern.grid
        padding = SIZES.CANVAS_PADDING
        available_width = max(self.width() - 2 * padding, 1)
        available_height = max(self.height() - 2 * padding, 1)

        cell = min(available_width / grid.columns, available_height / grid.rows)
        offset_x = (self.width() - cell * grid.columns) / 2
        offset_y = (self.height() - cell * grid.rows) / 2
        return cell, offset_x, offset_y

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Get (row, column) under a widget position, or None outside the grid."""
        if self.pattern is None:
            return None
        cell, offset_x, offset_y = self._layout()
        column = int((x - offset_x) // cell)
        row = int((y - offset_y) // cell)
        if 0 <= row < self.pattern.grid.rows and 0 <= column < self.pattern.grid.columns:
            return row, column
        return None

    # === Painting ===

    def paintEvent(self, event):
        """Render the pattern grid."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), COLORS.BACKGROUND_DARK)

        if self.pattern is None:
            painter.setPen(QColor(150, 150, 150))
            painter.drawText(
                self.rect(),
                Qt.AlignmentFlag.AlignCenter,
                "Select an image and create a pattern",
            )
            painter.end()
            return

        grid = self.pattern.grid
        cell, offset_x, offset_y = self._layout()

        painter.setPen(Qt.PenStyle.NoPen)
        for row in range(grid.rows):
            for column in range(grid.columns):
                painter.fillRect(
                    QRectF(offset_x + column * cell, offset_y + row * cell, cell, cell),
                    QColor(*grid.cell(row, column)),
                )

        # Grid lines only when cells are big enough to see them
        if self.show_grid and cell >= 4:
            self._draw_grid_lines(painter, cell, offset_x, offset_y)

        if self._hover is not None:
            row, column = self._hover
            painter.setPen(QPen(COLORS.HOVER_OUTLINE, 2))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawRect(
                QRectF(offset_x + column * cell, offset_y + row * cell, cell, cell)
            )

        painter.end()

    def _draw_grid_lines(self, painter: QPainter, cell: float, ox: float, oy: float):
        grid = self.pattern.grid
        width = cell * grid.columns
        height = cell * grid.rows
        every = SIZES.MAJOR_GRID_EVERY

        for column in range(grid.columns + 1):
            major = column % every == 0 or column == grid.columns
            painter.setPen(QPen(COLORS.GRID_LINE_MAJOR if major else COLORS.GRID_LINE, 1))
            x = ox + column * cell
            painter.drawLine(int(x), int(oy), int(x), int(oy + height))

        for row in range(grid.rows + 1):
            major = row % every == 0 or row == grid.rows
            painter.setPen(QPen(COLORS.GRID_LINE_MAJOR if major else COLORS.GRID_LINE, 1))
            y = oy + row * cell
            painter.drawLine(int(ox), int(y), int(ox + width), int(y))

    # === Mouse ===

    def mouseMoveEvent(self, a0):
        if a0 is None:
            return
        position = a0.position()
        hover = self.cell_at(position.x(), position.y())
        if hover != self._hover:
            self._hover = hover
            self.update()
            if hover is not None:
                QToolTip.showText(a0.globalPosition().toPoint(), self._describe(*hover), self)

    def leaveEvent(self, a0):
        self._hover = None
        self.update()

    def _describe(self, row: int, column: int) -> str:
        rgb = self.pattern.grid.cell(row, column)
        entry = self.pattern.manifest.find(rgb)
        label = f"{entry.identifier}: DMC {entry.color.name}" if entry else str(rgb)
        return f"Row {row + 1}, column {column + 1}\n{label}"

    def contextMenuEvent(self, a0):
        """Right-click a cell to change its thread."""
        if a0 is None:
            return
        target = self.cell_at(a0.pos().x(), a0.pos().y())
        if target is None:
            return
        row, column = target
        current = self.pattern.grid.cell(row, column)

        menu = QMenu(self)
        for entry in self.pattern.manifest:
            action = QAction(f"{entry.identifier}  DMC {entry.color.name}", menu)
            action.setCheckable(True)
            action.setChecked(entry.color.rgb == current)
            action.triggered.connect(
                lambda _, t=entry.color: self.cell_recolor_requested.emit(row, column, t)
            )
            menu.addAction(action)

        menu.addSeparator()
        other = QAction("Other thread...", menu)
        other.triggered.connect(lambda: self._pick_other_thread(row, column))
        menu.addAction(other)

        menu.exec(a0.globalPos())

    def _pick_other_thread(self, row: int, column: int):
        thread = pick_catalog_thread(self, self.catalog, "Recolor Cell")
        if thread is not None:
            self.cell_recolor_requested.emit(row, column, thread)


def pick_catalog_thread(
    parent, catalog: ThreadCatalog, title: str
) -> Optional[ThreadColor]:
    """Ask the user for any catalog thread by DMC name."""
    names = [thread.name for thread in catalog]
    name, ok = QInputDialog.getItem(parent, title, "DMC thread:", names, 0, True)
    if not ok or not name:
        return None
    try:
        return catalog.get(name)
    except KeyError:
        return None
