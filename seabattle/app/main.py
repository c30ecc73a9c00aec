import sys
from typing import Optional

from PyQt5 import QtCore, QtGui, QtWidgets

from seabattle.domain.types import GameState, Mode
from seabattle.layouts import LayoutDefinition, classic_layout
from seabattle.ui.dashboard import Dashboard
from seabattle.ui.theme import Theme
from seabattle.utils import debug


def apply_dark_palette(app: QtWidgets.QApplication):
    """Apply a consistent dark theme using the Theme color palette."""
    QtWidgets.QApplication.setStyle("Fusion")
    palette = QtGui.QPalette()

    # Core backgrounds
    palette.setColor(QtGui.QPalette.Window, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.AlternateBase, QtGui.QColor(Theme.BG_PANEL))

    # Text colors
    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.ButtonText, QtGui.QColor(Theme.TEXT_MAIN))

    # Buttons
    palette.setColor(QtGui.QPalette.Button, QtGui.QColor(Theme.BG_BUTTON))

    # Links & selection
    palette.setColor(QtGui.QPalette.Link, QtGui.QColor(Theme.LINK))
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(Theme.HIGHLIGHT))
    palette.setColor(QtGui.QPalette.HighlightedText, QtCore.Qt.black)

    app.setPalette(palette)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, layout: Optional[LayoutDefinition] = None):
        super().__init__()
        self.layout_definition = layout or classic_layout()
        self.setWindowTitle(f"Sea Battle – {self.layout_definition.name}")

        self.dashboard = Dashboard(self.layout_definition)
        self.dashboard.state_changed.connect(self._on_state_changed)
        self.setCentralWidget(self.dashboard)
        self.statusBar().showMessage("Fire at will")

    def _on_state_changed(self, state: GameState):
        if state.mode is Mode.GAME_OVER:
            self.statusBar().showMessage("All ships sunk, click anywhere to restart")
        else:
            self.statusBar().showMessage("Fire at will")


def main():
    # Enable debug via flag or env var (SEABATTLE_DEBUG=1)
    enabled, argv = debug.debug_requested(sys.argv)
    if enabled:
        debug.enable_debug_log()

    app = QtWidgets.QApplication(argv)
    apply_dark_palette(app)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
