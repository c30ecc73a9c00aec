import random
from typing import Optional

from PyQt5 import QtCore, QtWidgets

from seabattle.domain.board import marked_cells
from seabattle.domain.engine import InvalidCoordinate, fire, is_game_over, new_game, scores
from seabattle.domain.types import GameState
from seabattle.layouts import LayoutDefinition
from seabattle.ui.field_view import FieldView
from seabattle.ui.score_board import ScoreBoard
from seabattle.ui.ship_board import ShipBoard
from seabattle.ui.theme import Theme
from seabattle.utils import debug


class Dashboard(QtWidgets.QWidget):
    """Holds the current GameState and feeds player actions into the turn engine."""

    state_changed = QtCore.pyqtSignal(object)

    def __init__(self, layout: Optional[LayoutDefinition] = None, rng: Optional[random.Random] = None, parent=None):
        super().__init__(parent)
        self.rng = rng
        self.state: GameState = new_game(layout, rng)
        self._build_ui()
        self.refresh()

    def _build_ui(self):
        main_layout = QtWidgets.QHBoxLayout(self)
        main_layout.setContentsMargins(16, 16, 16, 16)
        main_layout.setSpacing(24)

        side_panel = QtWidgets.QWidget()
        side_layout = QtWidgets.QVBoxLayout(side_panel)
        side_layout.setSpacing(12)
        self.score_board = ScoreBoard()
        self.ship_board = ShipBoard()
        side_layout.addWidget(self.score_board)
        side_layout.addWidget(self.ship_board)
        side_layout.addStretch(1)
        main_layout.addWidget(side_panel, stretch=0)

        play_area = QtWidgets.QWidget()
        play_layout = QtWidgets.QGridLayout(play_area)
        play_layout.setContentsMargins(0, 0, 0, 0)

        self.field_view = FieldView(self.state.player.size)
        self.field_view.cell_clicked.connect(self.handle_action)
        play_layout.addWidget(self.field_view, 0, 0)

        # Sits on top of the field in the same grid slot.
        self.game_over_panel = QtWidgets.QWidget()
        self.game_over_panel.setStyleSheet(f"background-color: {Theme.OVERLAY_BG};")
        over_layout = QtWidgets.QVBoxLayout(self.game_over_panel)
        over_layout.setAlignment(QtCore.Qt.AlignCenter)
        over_label = QtWidgets.QLabel("Game over")
        over_label.setAlignment(QtCore.Qt.AlignCenter)
        over_label.setStyleSheet(f"color: {Theme.TEXT_MAIN}; font-size: 28px; font-weight: bold;")
        self.restart_button = QtWidgets.QPushButton("Restart")
        self.restart_button.clicked.connect(lambda: self.handle_action())
        over_layout.addWidget(over_label)
        over_layout.addWidget(self.restart_button, alignment=QtCore.Qt.AlignCenter)
        play_layout.addWidget(self.game_over_panel, 0, 0)

        main_layout.addWidget(play_area, stretch=1)

    def handle_action(self, x: Optional[int] = None, y: Optional[int] = None) -> None:
        if not is_game_over(self.state) and (x is None or y is None):
            return
        try:
            new_state = fire(self.state, x or 0, y or 0, self.rng)
        except InvalidCoordinate as exc:
            debug.debug_event(self, "Invalid shot", str(exc), level="error")
            return
        if new_state is self.state:
            return
        self.state = new_state
        self.refresh()
        self.state_changed.emit(self.state)

    def mousePressEvent(self, event):
        # Clicks on the game-over banner bubble up here.
        if is_game_over(self.state):
            self.handle_action()
            event.accept()
            return
        super().mousePressEvent(event)

    def refresh(self) -> None:
        player = self.state.player
        self.field_view.set_cells(marked_cells(player.grid), player.size)
        self.ship_board.set_ships(player.ships)
        self.score_board.set_scores(scores(self.state))
        self.game_over_panel.setVisible(is_game_over(self.state))
