"""Core domain layer — board state and move generation, no external dependencies.

Quick start::

    from tilechess.core import Board, MoveGenerator, parse_position

    board = Board.initial()
    gen = MoveGenerator(board.snapshot())
    print(sorted(gen.generate(parse_position("b1"))))
"""

from tilechess.core.board import Board, BoardSnapshot, TileState
from tilechess.core.enums import (
    BISHOP_DIRECTIONS,
    QUEEN_DIRECTIONS,
    ROOK_DIRECTIONS,
    Direction,
    PieceKind,
    Team,
)
from tilechess.core.errors import InvalidState, OutOfBounds, TileChessError
from tilechess.core.move_generator import (
    EMPTY_CANDIDATES,
    CandidateSet,
    MoveGenerator,
    generate,
)
from tilechess.core.notation import STARTING_LAYOUT, board_from_layout, board_to_layout
from tilechess.core.piece import Piece
from tilechess.core.types import Position, parse_position, position_name

__all__ = [
    # Enums
    "BISHOP_DIRECTIONS",
    "QUEEN_DIRECTIONS",
    "ROOK_DIRECTIONS",
    "Direction",
    "PieceKind",
    "Team",
    # Errors
    "InvalidState",
    "OutOfBounds",
    "TileChessError",
    # Types / helpers
    "Position",
    "parse_position",
    "position_name",
    # Domain objects
    "Board",
    "BoardSnapshot",
    "CandidateSet",
    "EMPTY_CANDIDATES",
    "MoveGenerator",
    "Piece",
    "TileState",
    "generate",
    # Notation
    "STARTING_LAYOUT",
    "board_from_layout",
    "board_to_layout",
]
