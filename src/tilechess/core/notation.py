"""Text layout codec using the FEN piece-placement field.

Only the placement field is read and written. Side to move, castling and
en-passant fields have no meaning for this board and are rejected.
"""

from __future__ import annotations

from tilechess.core.board import Board
from tilechess.core.piece import Piece
from tilechess.core.types import Position

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_layout(layout: str) -> Board:
    """Parse a placement field into a :class:`Board`.

    A pawn read from a layout takes the tile it is read on as its origin.
    """
    layout = layout.strip()
    if not layout or " " in layout:
        raise ValueError(f"Invalid layout (expected placement field only): {layout!r}")

    ranks = layout.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid layout (must contain 8 ranks): {layout!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid layout digit {ch!r}: {layout!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid layout rank width: {layout!r}")
                pos = Position(file, rank)
                board.place(pos, Piece.from_char(ch, origin=pos))
                file += 1
            if file > 8:
                raise ValueError(f"Invalid layout rank width: {layout!r}")
        if file != 8:
            raise ValueError(f"Invalid layout rank width: {layout!r}")
    return board


def board_to_layout(board: Board) -> str:
    """Serialise piece placement; highlights and pawn origins are not kept."""
    ranks: list[str] = []
    for rank in range(7, -1, -1):
        text = ""
        empty = 0
        for file in range(8):
            piece = board.piece_at(Position(file, rank))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
