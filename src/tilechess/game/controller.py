"""SelectionController — the select / move state machine.

Owns the board and the active selection. The input surface reports
clicks through :meth:`select` and :meth:`attempt_move`; listeners on
:attr:`SelectionController.events` are told about highlights, moves and
captures so the rendering layer can follow along.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tilechess.config import EngineSettings
from tilechess.core.board import Board, BoardSnapshot
from tilechess.core.errors import InvalidState
from tilechess.core.move_generator import CandidateSet, generate
from tilechess.core.piece import Piece
from tilechess.core.types import Position
from tilechess.game.interfaces import IBoardController, SelectionPhase
from tilechess.game.outcome import MoveOutcome, Moved, Rejected

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[frozenset[Position]], None]  # highlighted targets
MoveCallback = Callable[[Moved], None]
CaptureCallback = Callable[[Piece, Position], None]  # captured piece, its tile
RejectedCallback = Callable[[Position], None]
PhaseCallback = Callable[[SelectionPhase], None]


@dataclass
class SelectionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ActiveSelection:
    """The piece being moved and where it may go."""

    origin: Position
    piece: Piece
    candidates: CandidateSet


# ── Controller ───────────────────────────────────────────────────────────────


class SelectionController(IBoardController):
    """Tracks the highlighted candidate set and applies moves.

    Thread-safety: every method must be called from one thread (the UI
    thread). Each call runs to completion before the next one starts.
    """

    __slots__ = ("_board", "_selection", "_settings", "events")

    def __init__(
        self,
        board: Board | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._selection: ActiveSelection | None = None
        self._settings = settings if settings is not None else EngineSettings()
        self.events = SelectionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def phase(self) -> SelectionPhase:
        if self._selection is None:
            return SelectionPhase.IDLE
        return SelectionPhase.SELECTING

    @property
    def selection(self) -> ActiveSelection | None:
        return self._selection

    @property
    def board(self) -> Board:
        """The live board, for read access and setup while IDLE.

        Only the controller mutates it once a selection is active; use
        :meth:`board_snapshot` for a detached view.
        """
        return self._board

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # ── IBoardController impl ────────────────────────────────────────────

    def select(self, pos: Position) -> frozenset[Position]:
        pos.require_valid()
        if self._selection is not None:
            if self._settings.strict_sequencing:
                raise InvalidState(
                    f"select({pos}) called while {self._selection.origin} is selected"
                )
            _LOGGER.debug("Ignoring select(%s): selection already active", pos)
            return frozenset()

        piece = self._board.piece_at(pos)
        if piece is None:
            _LOGGER.debug("Ignoring select(%s): tile is empty", pos)
            return frozenset()

        candidates = generate(self._board.snapshot(), pos)
        targets = candidates.targets
        self._board.highlight(targets)
        self._selection = ActiveSelection(pos, piece, candidates)
        _LOGGER.debug(
            "Selected %s %s at %s: %d candidate(s)",
            piece.team,
            piece.kind.name.lower(),
            pos,
            len(targets),
        )

        self._emit_phase(SelectionPhase.SELECTING)
        self._emit_selection(targets)
        return targets

    def attempt_move(self, pos: Position) -> MoveOutcome:
        selection = self._selection
        if selection is None:
            raise InvalidState(f"attempt_move({pos}) called with no active selection")

        pos.require_valid()
        if pos not in selection.candidates:
            _LOGGER.debug("Rejected move %s -> %s", selection.origin, pos)
            self._finish_selection()
            for cb in self.events.on_rejected:
                cb(pos)
            return Rejected(pos)

        captured = self._board.remove(pos)
        self._board.clear(selection.origin)
        self._board.place(pos, selection.piece)
        outcome = Moved(selection.origin, pos, selection.piece, captured)
        self._finish_selection()

        # Listeners only ever see the finished board.
        if captured is not None:
            _LOGGER.debug("%s captured on %s", captured.symbol, pos)
            for cap_cb in self.events.on_capture:
                cap_cb(captured, pos)
        _LOGGER.debug("Moved %s", outcome)
        for cb in self.events.on_move:
            cb(outcome)
        return outcome

    def board_snapshot(self) -> BoardSnapshot:
        return self._board.snapshot()

    # ── Extra operations ─────────────────────────────────────────────────

    def cancel(self) -> None:
        """Drop the active selection without attempting a move."""
        if self._selection is None:
            return
        _LOGGER.debug("Selection at %s cancelled", self._selection.origin)
        self._finish_selection()

    def reset(self, board: Board | None = None) -> None:
        """Start over on *board* (default: the standard starting layout)."""
        self._selection = None
        self._board = board if board is not None else Board.initial()
        self._board.clear_highlights()
        self._emit_phase(SelectionPhase.IDLE)
        self._emit_selection(frozenset())

    # ── Internal helpers ─────────────────────────────────────────────────

    def _finish_selection(self) -> None:
        self._board.clear_highlights()
        self._selection = None
        self._emit_phase(SelectionPhase.IDLE)
        self._emit_selection(frozenset())

    def _emit_selection(self, targets: frozenset[Position]) -> None:
        for cb in self.events.on_selection_changed:
            cb(targets)

    def _emit_phase(self, phase: SelectionPhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
