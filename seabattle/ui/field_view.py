import math
from typing import List, Optional, Sequence, Tuple

from PyQt5 import QtCore, QtGui, QtWidgets

from seabattle.domain.config import BOARD_SIZE
from seabattle.domain.types import Cell, CellState
from seabattle.ui.theme import Theme


def cell_at(px: float, py: float, width: float, height: float, board_size: int) -> Optional[Tuple[int, int]]:
    """Translate a point in widget pixels to grid (x, y); None outside the widget."""
    if width <= 0 or height <= 0:
        return None
    if not (0 <= px < width and 0 <= py < height):
        return None
    x = int(math.floor(px / (width / board_size)))
    y = int(math.floor(py / (height / board_size)))
    return min(x, board_size - 1), min(y, board_size - 1)


class FieldView(QtWidgets.QWidget):
    """Paints the sea grid plus a marker on every cell already fired upon."""

    cell_clicked = QtCore.pyqtSignal(int, int)

    CELL_PX = 40

    def __init__(self, board_size: int = BOARD_SIZE, parent=None):
        super().__init__(parent)
        self.board_size = board_size
        self.cells: List[Cell] = []
        side = self.CELL_PX * board_size
        self.setMinimumSize(side, side)
        self.setCursor(QtGui.QCursor(QtCore.Qt.CrossCursor))

    def set_cells(self, cells: Sequence[Cell], board_size: Optional[int] = None) -> None:
        if board_size is not None:
            self.board_size = board_size
        self.cells = list(cells)
        self.update()

    def mousePressEvent(self, event: QtGui.QMouseEvent):
        if event.button() != QtCore.Qt.LeftButton:
            return super().mousePressEvent(event)
        pos = cell_at(event.x(), event.y(), self.width(), self.height(), self.board_size)
        if pos is not None:
            self.cell_clicked.emit(*pos)
        event.accept()

    def paintEvent(self, event):
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        w = self.width() / self.board_size
        h = self.height() / self.board_size

        painter.fillRect(self.rect(), QtGui.QColor(Theme.WATER))
        painter.setPen(QtGui.QPen(QtGui.QColor(Theme.GRID_LINE), 1))
        for i in range(1, self.board_size):
            painter.drawLine(int(i * w), 0, int(i * w), self.height())
            painter.drawLine(0, int(i * h), self.width(), int(i * h))

        for cell in self.cells:
            rect = QtCore.QRectF(cell.x * w, cell.y * h, w, h).adjusted(w * 0.2, h * 0.2, -w * 0.2, -h * 0.2)
            if cell.state is CellState.HIT:
                painter.setPen(QtGui.QPen(QtGui.QColor(Theme.HIT_BORDER), 2))
                painter.setBrush(QtGui.QBrush(QtGui.QColor(Theme.HIT_BG)))
                painter.drawEllipse(rect)
                painter.drawLine(rect.topLeft(), rect.bottomRight())
                painter.drawLine(rect.topRight(), rect.bottomLeft())
            elif cell.state is CellState.MISS:
                painter.setPen(QtGui.QPen(QtGui.QColor(Theme.MISS_BORDER), 1))
                painter.setBrush(QtGui.QBrush(QtGui.QColor(Theme.MISS_BG)))
                painter.drawEllipse(rect.adjusted(w * 0.1, h * 0.1, -w * 0.1, -h * 0.1))
        painter.end()
