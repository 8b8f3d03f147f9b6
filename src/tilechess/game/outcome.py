"""Results of a move attempt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from tilechess.core.piece import Piece
from tilechess.core.types import Position


@dataclass(frozen=True, slots=True)
class Rejected:
    """The chosen tile was not a candidate; the board is unchanged."""

    target: Position | None = None

    @property
    def is_move(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Moved:
    """A piece was relocated, possibly capturing an enemy."""

    from_pos: Position
    to_pos: Position
    piece: Piece
    captured: Piece | None = None

    @property
    def is_move(self) -> bool:
        return True

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        return f"{self.piece}{self.from_pos}{sep}{self.to_pos}"


MoveOutcome: TypeAlias = Rejected | Moved
