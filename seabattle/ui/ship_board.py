from typing import List, Sequence

from PyQt5 import QtCore, QtWidgets

from seabattle.domain.types import Ship
from seabattle.ui.theme import Theme


def hitpoint_flags(ship: Ship) -> List[bool]:
    """One flag per ship cell, True for cells counted as damaged (from the bow)."""
    return [ship.size - i > ship.life for i in range(ship.size)]


class ShipBoard(QtWidgets.QWidget):
    """Damage indicator: a row of hit-point boxes per ship."""

    HP_BOX = 14

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QtWidgets.QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setHorizontalSpacing(4)
        self._layout.setVerticalSpacing(6)
        self.hitpoint_boxes: List[List[QtWidgets.QLabel]] = []

    def _clear(self) -> None:
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.hitpoint_boxes = []

    def set_ships(self, ships: Sequence[Ship]) -> None:
        self._clear()
        for row, ship in enumerate(ships):
            label = QtWidgets.QLabel(ship.name or ship.image or f"Ship of size {ship.size}")
            label.setStyleSheet(f"color: {Theme.TEXT_MAIN};")
            self._layout.addWidget(label, row, 0, alignment=QtCore.Qt.AlignLeft)

            boxes = []
            for col, damaged in enumerate(hitpoint_flags(ship)):
                box = QtWidgets.QLabel("")
                box.setFixedSize(self.HP_BOX, self.HP_BOX)
                color = Theme.HP_HIT if damaged else Theme.HP_OK
                box.setStyleSheet(f"background-color: {color}; border: 1px solid {Theme.BG_DARK};")
                box.setProperty("damaged", damaged)
                self._layout.addWidget(box, row, col + 1)
                boxes.append(box)
            self.hitpoint_boxes.append(boxes)
