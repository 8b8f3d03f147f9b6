"""Abstract interfaces for the game layer.

The rendering and input surface depends on :class:`IBoardController`, not
on the concrete state machine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tilechess.core.board import BoardSnapshot
    from tilechess.core.types import Position
    from tilechess.game.outcome import MoveOutcome


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Finite-state-machine states of the selection controller."""

    IDLE = auto()
    SELECTING = auto()  # candidate set computed and highlighted


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IBoardController(ABC):
    """Interface the input surface talks to."""

    @property
    @abstractmethod
    def phase(self) -> SelectionPhase: ...

    @abstractmethod
    def select(self, pos: Position) -> frozenset[Position]:
        """Select the piece on *pos* and return the highlighted targets.

        Returns an empty set when nothing was selected.
        """

    @abstractmethod
    def attempt_move(self, pos: Position) -> MoveOutcome:
        """Move the selected piece to *pos* if it is a candidate."""

    @abstractmethod
    def board_snapshot(self) -> BoardSnapshot:
        """Read-only view of all 64 tiles, for redraws."""
