"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Team(IntEnum):
    """Side a piece belongs to."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def forward(self) -> Direction:
        """Walking direction of this team's pawns."""
        return Direction.NORTH if self is Team.WHITE else Direction.SOUTH

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Direction(Enum):
    """Compass directions as (file delta, rank delta).

    North is increasing rank (towards black's back rank), east is
    increasing file.
    """

    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)
    NORTH_EAST = (1, 1)
    NORTH_WEST = (-1, 1)
    SOUTH_EAST = (1, -1)
    SOUTH_WEST = (-1, -1)

    @property
    def df(self) -> int:
        return self.value[0]

    @property
    def dr(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.df != 0 and self.dr != 0


ROOK_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)
BISHOP_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH_EAST,
    Direction.NORTH_WEST,
    Direction.SOUTH_EAST,
    Direction.SOUTH_WEST,
)
QUEEN_DIRECTIONS: tuple[Direction, ...] = ROOK_DIRECTIONS + BISHOP_DIRECTIONS
