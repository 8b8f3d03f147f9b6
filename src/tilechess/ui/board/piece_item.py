"""PieceItem — a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from tilechess.core.piece import Piece
from tilechess.core.types import Position


class PieceItem(QGraphicsSimpleTextItem):
    """A single piece drawn as its Unicode symbol.

    Stores its logical *position* so the scene can move or retire it.
    """

    _FONT_RATIO = 0.7

    def __init__(
        self,
        piece: Piece,
        position: Position,
        tile_size: int,
        color: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.position = position
        self._tile_size = tile_size

        self.setBrush(QBrush(color))
        self.setPen(QPen(QColor(0, 0, 0, 160), 0.6))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_size(tile_size)

    def set_tile_size(self, size: int) -> None:
        self._update_size(size)

    def offset_in_tile(self) -> tuple[float, float]:
        """Top-left offset that centres the glyph inside its tile."""
        rect = self.boundingRect()
        return (
            (self._tile_size - rect.width()) / 2,
            (self._tile_size - rect.height()) / 2,
        )

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont()
        font.setPixelSize(max(int(size * self._FONT_RATIO), 1))
        self.setFont(font)
