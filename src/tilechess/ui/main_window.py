"""MainWindow — top-level window around the board view."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from tilechess.config import EngineSettings
from tilechess.core.piece import Piece
from tilechess.core.types import Position
from tilechess.game.controller import SelectionController
from tilechess.game.outcome import Moved
from tilechess.ui.board.board_view import BoardView


class MainWindow(QMainWindow):
    """Main application window: the board plus a one-line status bar."""

    def __init__(self, settings: EngineSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Tilechess")
        self.setMinimumSize(560, 600)

        self._settings = settings if settings is not None else EngineSettings()
        self._controller = SelectionController(settings=self._settings)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_view = BoardView(self._controller, self._settings)
        root.addWidget(self._board_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Select a piece")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._act_highlights = QAction("Show move targets", self)
        self._act_highlights.setCheckable(True)
        self._act_highlights.setChecked(self._settings.show_highlights)
        self._act_highlights.toggled.connect(self._on_toggle_highlights)
        self._menu_game.addAction(self._act_highlights)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._board_view.move_made.connect(self._on_move_made)
        self._board_view.move_rejected.connect(self._on_move_rejected)
        self._controller.events.on_capture.append(self._on_capture)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.reset()
        self._board_view.board_scene.refresh()
        self._status_label.setText("New game")

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    def _on_toggle_highlights(self, checked: bool) -> None:
        self._settings.show_highlights = checked
        self._board_view.board_scene.set_show_highlights(checked)

    def _on_move_made(self, outcome: Moved) -> None:
        text = f"{outcome.piece.symbol} {outcome.from_pos} → {outcome.to_pos}"
        if outcome.captured is not None:
            text += f"  captures {outcome.captured.symbol}"
        self._status_label.setText(text)

    def _on_move_rejected(self, pos: Position) -> None:
        self._status_label.setText(f"{pos} is not a legal target")

    def _on_capture(self, piece: Piece, pos: Position) -> None:
        self._status.showMessage(f"{piece.symbol} captured on {pos}", 2000)

    @property
    def status_text(self) -> str:
        return self._status_label.text()
