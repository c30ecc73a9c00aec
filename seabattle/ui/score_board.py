from typing import List, Sequence

from PyQt5 import QtCore, QtWidgets

from seabattle.ui.theme import Theme


def format_score(score: int = 0) -> str:
    """Zero-pad to two digits ("07"); longer numbers are left as they are."""
    text = str(score)
    return text if len(text) >= 2 else f"0{text}"


class ScoreBoard(QtWidgets.QWidget):
    def __init__(self, player_count: int = 2, parent=None):
        super().__init__(parent)
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(24)

        self.count_labels: List[QtWidgets.QLabel] = []
        for i in range(player_count):
            box = QtWidgets.QVBoxLayout()
            count = QtWidgets.QLabel(format_score(0))
            count.setAlignment(QtCore.Qt.AlignCenter)
            count.setStyleSheet(f"color: {Theme.SCORE}; font-size: 32px; font-weight: bold;")
            name = QtWidgets.QLabel(f"player {i + 1}")
            name.setAlignment(QtCore.Qt.AlignCenter)
            name.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            box.addWidget(count)
            box.addWidget(name)
            layout.addLayout(box)
            self.count_labels.append(count)

    def set_scores(self, scores: Sequence[int]) -> None:
        for label, value in zip(self.count_labels, scores):
            label.setText(format_score(value))
