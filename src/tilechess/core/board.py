"""Board - tile occupancy and highlight state on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace

from tilechess.core.enums import Direction, PieceKind, Team
from tilechess.core.piece import Piece
from tilechess.core.types import ALL_POSITIONS, Position, index_of

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


@dataclass(frozen=True, slots=True)
class TileState:
    """Occupancy and highlight flag of a single tile."""

    piece: Piece | None = None
    highlighted: bool = False

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    @property
    def is_occupied(self) -> bool:
        return self.piece is not None


_EMPTY_TILE = TileState()


class BoardSnapshot(Mapping[Position, TileState]):
    """Read-only view of all 64 tiles, frozen at creation time."""

    __slots__ = ("_tiles",)

    def __init__(self, tiles: Iterable[TileState]) -> None:
        self._tiles: tuple[TileState, ...] = tuple(tiles)

    def __getitem__(self, pos: Position) -> TileState:
        # Off-board keys are missing keys here, not an out-of-range index.
        if pos not in self:
            raise KeyError(pos)
        return self._tiles[index_of(pos)]

    def __iter__(self) -> Iterator[Position]:
        return iter(ALL_POSITIONS)

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, pos: object) -> bool:
        return isinstance(pos, Position) and pos.is_valid()

    def tile_at(self, pos: Position) -> TileState:
        return self._tiles[index_of(pos)]

    def piece_at(self, pos: Position) -> Piece | None:
        return self._tiles[index_of(pos)].piece

    def neighbor(self, pos: Position, direction: Direction) -> Position | None:
        pos.require_valid()
        return pos.neighbor(direction)

    def highlighted(self) -> frozenset[Position]:
        return frozenset(
            pos for pos, tile in zip(ALL_POSITIONS, self._tiles) if tile.highlighted
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoardSnapshot):
            return self._tiles == other._tiles
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._tiles)


class Board:
    """Mutable 64-tile board.

    Every access goes through a :class:`Position`; positions off the board
    raise :class:`~tilechess.core.errors.OutOfBounds`.
    """

    __slots__ = ("_tiles",)

    def __init__(self) -> None:
        self._tiles: list[TileState] = [_EMPTY_TILE] * 64

    # -- Element access -----------------------------------------------------

    def tile_at(self, pos: Position) -> TileState:
        return self._tiles[index_of(pos)]

    def piece_at(self, pos: Position) -> Piece | None:
        return self._tiles[index_of(pos)].piece

    def __getitem__(self, pos: Position) -> Piece | None:
        return self.piece_at(pos)

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        if piece is None:
            self.clear(pos)
        else:
            self.place(pos, piece)

    def is_empty(self, pos: Position) -> bool:
        return self.tile_at(pos).is_empty

    def neighbor(self, pos: Position, direction: Direction) -> Position | None:
        """Adjacent position towards *direction*, None at the board edge."""
        pos.require_valid()
        return pos.neighbor(direction)

    # -- Mutation -----------------------------------------------------------

    def place(self, pos: Position, piece: Piece) -> None:
        """Occupy *pos* with *piece*, overwriting any current occupant."""
        idx = index_of(pos)
        self._tiles[idx] = replace(self._tiles[idx], piece=piece)

    def clear(self, pos: Position) -> None:
        """Empty *pos* and drop its highlight."""
        self._tiles[index_of(pos)] = _EMPTY_TILE

    def remove(self, pos: Position) -> Piece | None:
        """Empty *pos* and return the piece that stood there."""
        piece = self.piece_at(pos)
        self.clear(pos)
        return piece

    def highlight(self, positions: Iterable[Position]) -> None:
        for pos in positions:
            idx = index_of(pos)
            self._tiles[idx] = replace(self._tiles[idx], highlighted=True)

    def clear_highlights(self) -> None:
        self._tiles = [
            replace(tile, highlighted=False) if tile.highlighted else tile
            for tile in self._tiles
        ]

    def reset(self) -> None:
        self._tiles = [_EMPTY_TILE] * 64

    # -- Query helpers ------------------------------------------------------

    def highlighted(self) -> frozenset[Position]:
        return frozenset(
            pos for pos, tile in zip(ALL_POSITIONS, self._tiles) if tile.highlighted
        )

    def pieces(self, team: Team | None = None) -> list[tuple[Position, Piece]]:
        """(position, piece) pairs in a1..h8 order, optionally for one *team*."""
        return [
            (pos, tile.piece)
            for pos, tile in zip(ALL_POSITIONS, self._tiles)
            if tile.piece is not None and (team is None or tile.piece.team == team)
        ]

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(self._tiles)

    def copy(self) -> Board:
        b = Board()
        b._tiles = self._tiles.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout; each pawn's origin is its start tile."""
        b = cls()
        for f in range(8):
            white_pawn = Position(f, 1)
            black_pawn = Position(f, 6)
            b.place(white_pawn, Piece.pawn(Team.WHITE, white_pawn))
            b.place(black_pawn, Piece.pawn(Team.BLACK, black_pawn))

        for f, kind in enumerate(_BACK_RANK):
            b.place(Position(f, 0), Piece(kind, Team.WHITE))
            b.place(Position(f, 7), Piece(kind, Team.BLACK))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                tile = self._tiles[rank * 8 + file]
                if tile.piece is not None:
                    row.append(str(tile.piece))
                else:
                    row.append("*" if tile.highlighted else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
