"""BoardScene — QGraphicsScene that draws the board and routes clicks."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from tilechess.config import EngineSettings
from tilechess.core.enums import Team
from tilechess.core.piece import Piece
from tilechess.core.types import ALL_POSITIONS, Position
from tilechess.game.controller import SelectionController
from tilechess.game.interfaces import SelectionPhase
from tilechess.game.outcome import MoveOutcome, Moved
from tilechess.ui.board.piece_item import PieceItem
from tilechess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders tiles, coordinates, candidate highlights and piece items.

    The scene never decides legality itself: every click goes to the
    :class:`SelectionController`, and the scene redraws from the
    controller's events.

    Signals:
        move_made(Moved): Emitted after the controller applied a move.
        move_rejected(Position): Emitted when a non-candidate tile was chosen.
    """

    move_made = pyqtSignal(object)
    move_rejected = pyqtSignal(object)

    def __init__(
        self,
        controller: SelectionController | None = None,
        settings: EngineSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else EngineSettings()
        self._controller = (
            controller
            if controller is not None
            else SelectionController(settings=self._settings)
        )
        self._theme = BoardTheme.by_name(self._settings.board_theme)
        self._tile = self._settings.tile_size
        self._flipped = False
        self._interactive = True
        self._show_highlights = self._settings.show_highlights

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        events = self._controller.events
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_capture.append(self._on_capture)
        events.on_move.append(self._on_move)

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> SelectionController:
        return self._controller

    @property
    def tile_size(self) -> int:
        return self._tile

    def refresh(self) -> None:
        """Redraw pieces and highlights from the controller's board."""
        self._sync_pieces()
        self._on_selection_changed(self._controller.board_snapshot().highlighted())

    def handle_click(self, pos: Position | None) -> MoveOutcome | None:
        """Route a click on *pos* (None = outside the board) to the controller."""
        if not self._interactive:
            return None
        if pos is None:
            self._controller.cancel()
            return None

        if self._controller.phase == SelectionPhase.IDLE:
            self._controller.select(pos)
            return None

        outcome = self._controller.attempt_move(pos)
        if isinstance(outcome, Moved):
            self.move_made.emit(outcome)
        else:
            self.move_rejected.emit(pos)
        return outcome

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece interaction."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self.refresh()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self.refresh()

    def set_show_highlights(self, visible: bool) -> None:
        """Show or hide candidate-tile overlays."""
        self._show_highlights = visible
        if not visible:
            self._clear_items(self._highlight_items)
        else:
            self.refresh()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 tiles and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self._tile
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for pos in ALL_POSITIONS:
            vf, vr = self._visual_coords(pos)
            is_dark = (pos.file + pos.rank) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[pos] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            if pos.file == 0:
                x, y = vf * t + 2, vr * t + 1
                self._add_coord(str(pos.rank + 1), x, y, font, text_color)
            if pos.rank == 0:
                letter = chr(ord("a") + pos.file)
                x, y = vf * t + t - 12, vr * t + t - 16
                self._add_coord(letter, x, y, font, text_color)

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller's board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        for pos, tile in self._controller.board_snapshot().items():
            if tile.piece is not None:
                self._add_piece(tile.piece, pos)

    def _add_piece(self, piece: Piece, pos: Position) -> None:
        color = (
            self._theme.white_piece
            if piece.team == Team.WHITE
            else self._theme.black_piece
        )
        item = PieceItem(piece, pos, self._tile, color)
        self.addItem(item)
        self._place_item(item, pos)
        self._piece_items[pos] = item

    def _place_item(self, item: PieceItem, pos: Position) -> None:
        t = self._tile
        vf, vr = self._visual_coords(pos)
        dx, dy = item.offset_in_tile()
        item.setPos(vf * t + dx, vr * t + dy)
        item.position = pos

    # ── Controller events ────────────────────────────────────────────────

    def _on_selection_changed(self, targets: frozenset[Position]) -> None:
        self._clear_items(self._highlight_items)
        if not self._show_highlights:
            return

        selection = self._controller.selection
        if selection is not None:
            self._highlight_items.append(
                self._make_highlight(selection.origin, self._theme.highlight_from)
            )
        for pos in sorted(targets):
            is_capture = selection is not None and selection.candidates.is_capture(pos)
            color = (
                self._theme.highlight_capture
                if is_capture
                else self._theme.highlight_to
            )
            self._highlight_items.append(self._make_highlight(pos, color))

    def _on_capture(self, piece: Piece, pos: Position) -> None:
        item = self._piece_items.pop(pos, None)
        if item is None:
            _LOGGER.warning("No item to retire for captured %s on %s", piece, pos)
            return
        self.removeItem(item)

    def _on_move(self, outcome: Moved) -> None:
        item = self._piece_items.pop(outcome.from_pos, None)
        if item is None:
            self._sync_pieces()
            return
        self._place_item(item, outcome.to_pos)
        self._piece_items[outcome.to_pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        self.handle_click(self._pos_to_position(event.scenePos()))
        event.accept()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, pos: Position) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - pos.file, pos.rank
        return pos.file, 7 - pos.rank

    def _pos_to_position(self, point: QPointF) -> Position | None:
        """Scene point → board position."""
        t = self._tile
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            return Position(7 - col, row)
        return Position(col, 7 - row)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a tile."""
        t = self._tile
        vf, vr = self._visual_coords(pos)
        rect = QGraphicsRectItem(vf * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
