"""Position value type and coordinate helpers.

Board layout:
    file 0-7 maps to a-h, rank 0-7 maps to 1-8.
    White's back rank is rank 0, black's back rank is rank 7.
"""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import Direction
from tilechess.core.errors import OutOfBounds

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A (file, rank) pair addressing one tile."""

    file: int
    rank: int

    @classmethod
    def of(cls, file: int, rank: int) -> Position:
        """Checked constructor, raises :class:`OutOfBounds` off the board."""
        pos = cls(file, rank)
        pos.require_valid()
        return pos

    def is_valid(self) -> bool:
        return 0 <= self.file < BOARD_SIZE and 0 <= self.rank < BOARD_SIZE

    def require_valid(self) -> None:
        if not self.is_valid():
            raise OutOfBounds(self.file, self.rank)

    def offset(self, df: int, dr: int) -> Position | None:
        """Position shifted by (*df*, *dr*), or None if that leaves the board."""
        moved = Position(self.file + df, self.rank + dr)
        return moved if moved.is_valid() else None

    def neighbor(self, direction: Direction) -> Position | None:
        """Adjacent position towards *direction*, or None at the edge."""
        return self.offset(direction.df, direction.dr)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. (4, 3) -> 'e4'."""
        return position_name(self)

    def __str__(self) -> str:
        return self.name if self.is_valid() else f"({self.file}, {self.rank})"


def position_name(pos: Position) -> str:
    """Human-readable name, e.g. Position(0, 0) -> 'a1'."""
    pos.require_valid()
    return chr(ord("a") + pos.file) + str(pos.rank + 1)


def parse_position(name: str) -> Position:
    """Parse a square name, e.g. 'e4' -> Position(4, 3)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Position(ord(name[0]) - ord("a"), int(name[1]) - 1)


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(file, rank) for rank in range(BOARD_SIZE) for file in range(BOARD_SIZE)
)


def index_of(pos: Position) -> int:
    """Flat 0-63 index (a1=0, h1=7, a8=56)."""
    pos.require_valid()
    return pos.rank * BOARD_SIZE + pos.file


# ── Named position constants ────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_POSITIONS[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_POSITIONS[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_POSITIONS[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_POSITIONS[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_POSITIONS[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_POSITIONS[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_POSITIONS[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_POSITIONS[56:64]
