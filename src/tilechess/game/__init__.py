"""Game layer — the selection / move state machine and its outcomes.

Quick start::

    from tilechess.core import parse_position
    from tilechess.game import SelectionController

    ctrl = SelectionController()
    ctrl.select(parse_position("e2"))
    outcome = ctrl.attempt_move(parse_position("e4"))
"""

from tilechess.game.controller import (
    ActiveSelection,
    SelectionController,
    SelectionEvents,
)
from tilechess.game.interfaces import IBoardController, SelectionPhase
from tilechess.game.outcome import MoveOutcome, Moved, Rejected

__all__ = [
    # Interfaces
    "IBoardController",
    "SelectionPhase",
    # Outcomes
    "MoveOutcome",
    "Moved",
    "Rejected",
    # Concrete
    "ActiveSelection",
    "SelectionController",
    "SelectionEvents",
]
