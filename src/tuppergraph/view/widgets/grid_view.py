"""
Grid View
Draws a decoded 106 x 17 grid as one bordered rectangle per cell.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsScene, QGraphicsView, QWidget

from tuppergraph.config import (
    BORDER_COLOR, CELL_SIZE, EMPTY_COLOR, FILLED_COLOR, GRID_COLUMNS, GRID_ROWS,
)

if TYPE_CHECKING:
    from tuppergraph.model.decoder import Grid


def cell_position(column: int, row: int) -> tuple[int, int]:
    """
    Visual (column, row) of grid cell [column][row].

    The x axis is reversed and y = k sits on the top row; in this orientation
    the self-referential constant reads as the written formula.
    """
    return GRID_COLUMNS - 1 - column, row


class GridView(QGraphicsView):
    """Two-tone pixel view. The rectangles are created once and recoloured per plot."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing, False)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)

        self._filled = QBrush(QColor(FILLED_COLOR))
        self._empty = QBrush(QColor(EMPTY_COLOR))
        pen = QPen(QColor(BORDER_COLOR))
        pen.setWidthF(1.0)

        self._cells: list[list[QGraphicsRectItem]] = []
        for column in range(GRID_COLUMNS):
            items = []
            for row in range(GRID_ROWS):
                vx, vy = cell_position(column, row)
                item = self._scene.addRect(
                    vx * CELL_SIZE, vy * CELL_SIZE, CELL_SIZE, CELL_SIZE, pen, self._empty
                )
                items.append(item)
            self._cells.append(items)

    def set_grid(self, grid: Grid) -> None:
        """Recolour every cell from the grid (1 -> filled, 0 -> empty)."""
        for column in range(GRID_COLUMNS):
            for row in range(GRID_ROWS):
                brush = self._filled if grid[column][row] else self._empty
                self._cells[column][row].setBrush(brush)
