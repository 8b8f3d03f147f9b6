"""Candidate-target generation, one rule per piece kind.

Every generator reads the board through :class:`TileLookup` only, so it
can run against a frozen :class:`~tilechess.core.board.BoardSnapshot` as
well as a live :class:`~tilechess.core.board.Board`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Protocol

from tilechess.core.enums import (
    BISHOP_DIRECTIONS,
    QUEEN_DIRECTIONS,
    ROOK_DIRECTIONS,
    Direction,
    PieceKind,
    Team,
)
from tilechess.core.errors import InvalidState
from tilechess.core.piece import Piece
from tilechess.core.types import ALL_POSITIONS, Position

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

_PAWN_CAPTURE_DIRECTIONS: dict[Team, tuple[Direction, Direction]] = {
    Team.WHITE: (Direction.NORTH_WEST, Direction.NORTH_EAST),
    Team.BLACK: (Direction.SOUTH_WEST, Direction.SOUTH_EAST),
}


class TileLookup(Protocol):
    """Read-only board access needed by the generators."""

    def piece_at(self, pos: Position) -> Piece | None: ...

    def neighbor(self, pos: Position, direction: Direction) -> Position | None: ...


@dataclass(frozen=True, slots=True)
class CandidateSet:
    """Target tiles for one selected piece.

    ``moves`` are empty tiles, ``captures`` hold an enemy piece. The two
    never overlap.
    """

    moves: frozenset[Position] = frozenset()
    captures: frozenset[Position] = frozenset()

    @property
    def targets(self) -> frozenset[Position]:
        return self.moves | self.captures

    def is_capture(self, pos: Position) -> bool:
        return pos in self.captures

    def __contains__(self, pos: object) -> bool:
        return pos in self.moves or pos in self.captures

    def __iter__(self) -> Iterator[Position]:
        return iter(sorted(self.targets))

    def __len__(self) -> int:
        return len(self.moves) + len(self.captures)


EMPTY_CANDIDATES = CandidateSet()


class _Collector:
    """Mutable accumulator that classifies each target as move or capture."""

    __slots__ = ("_board", "_team", "moves", "captures")

    def __init__(self, board: TileLookup, team: Team) -> None:
        self._board = board
        self._team = team
        self.moves: set[Position] = set()
        self.captures: set[Position] = set()

    def step(self, pos: Position) -> bool:
        """Add *pos* if reachable. Returns True when a ray may continue past it."""
        target = self._board.piece_at(pos)
        if target is None:
            self.moves.add(pos)
            return True
        if target.team != self._team:
            self.captures.add(pos)
        return False

    def freeze(self) -> CandidateSet:
        return CandidateSet(frozenset(self.moves), frozenset(self.captures))


# -- Piece-specific generators ---------------------------------------------


def knight_targets(board: TileLookup, pos: Position, piece: Piece) -> CandidateSet:
    out = _Collector(board, piece.team)
    for df, dr in KNIGHT_OFFSETS:
        to_pos = pos.offset(df, dr)
        if to_pos is not None:
            out.step(to_pos)
    return out.freeze()


def king_targets(board: TileLookup, pos: Position, piece: Piece) -> CandidateSet:
    out = _Collector(board, piece.team)
    for direction in QUEEN_DIRECTIONS:
        to_pos = board.neighbor(pos, direction)
        if to_pos is not None:
            out.step(to_pos)
    return out.freeze()


def ray_targets(
    board: TileLookup,
    pos: Position,
    piece: Piece,
    directions: tuple[Direction, ...],
) -> CandidateSet:
    """Walk each direction until the edge or the first occupied tile."""
    out = _Collector(board, piece.team)
    for direction in directions:
        to_pos = board.neighbor(pos, direction)
        while to_pos is not None and out.step(to_pos):
            to_pos = board.neighbor(to_pos, direction)
    return out.freeze()


def rook_targets(board: TileLookup, pos: Position, piece: Piece) -> CandidateSet:
    return ray_targets(board, pos, piece, ROOK_DIRECTIONS)


def bishop_targets(board: TileLookup, pos: Position, piece: Piece) -> CandidateSet:
    return ray_targets(board, pos, piece, BISHOP_DIRECTIONS)


def queen_targets(board: TileLookup, pos: Position, piece: Piece) -> CandidateSet:
    return ray_targets(board, pos, piece, QUEEN_DIRECTIONS)


def pawn_targets(board: TileLookup, pos: Position, piece: Piece) -> CandidateSet:
    moves: set[Position] = set()
    captures: set[Position] = set()
    forward = piece.team.forward

    one_step = board.neighbor(pos, forward)
    if one_step is not None and board.piece_at(one_step) is None:
        moves.add(one_step)
        if pos == piece.origin:
            two_step = board.neighbor(one_step, forward)
            if two_step is not None and board.piece_at(two_step) is None:
                moves.add(two_step)

    # Diagonals are capture-only.
    for direction in _PAWN_CAPTURE_DIRECTIONS[piece.team]:
        cap_pos = board.neighbor(pos, direction)
        if cap_pos is None:
            continue
        target = board.piece_at(cap_pos)
        if target is not None and target.team != piece.team:
            captures.add(cap_pos)

    return CandidateSet(frozenset(moves), frozenset(captures))


Generator = Callable[[TileLookup, Position, Piece], CandidateSet]

GENERATORS: dict[PieceKind, Generator] = {
    PieceKind.PAWN: pawn_targets,
    PieceKind.KNIGHT: knight_targets,
    PieceKind.BISHOP: bishop_targets,
    PieceKind.ROOK: rook_targets,
    PieceKind.QUEEN: queen_targets,
    PieceKind.KING: king_targets,
}


def generate(board: TileLookup, pos: Position) -> CandidateSet:
    """Candidate targets for the piece standing on *pos*."""
    piece = board.piece_at(pos)
    if piece is None:
        raise InvalidState(f"No piece at {pos} to generate targets for")
    return GENERATORS[piece.kind](board, pos, piece)


class MoveGenerator:
    """Generates candidate sets against one fixed board view."""

    __slots__ = ("_board",)

    def __init__(self, board: TileLookup) -> None:
        self._board = board

    def generate(self, pos: Position) -> CandidateSet:
        return generate(self._board, pos)

    def generate_all(self, team: Team) -> dict[Position, CandidateSet]:
        """Candidate set for every piece of *team*, keyed by its position."""
        result: dict[Position, CandidateSet] = {}
        for pos in ALL_POSITIONS:
            piece = self._board.piece_at(pos)
            if piece is not None and piece.team == team:
                result[pos] = GENERATORS[piece.kind](self._board, pos, piece)
        return result
