"""Exceptions raised by the board core."""

from __future__ import annotations


class TileChessError(Exception):
    """Base class for all board-engine errors."""


class OutOfBounds(TileChessError, IndexError):
    """A position outside the 8x8 board was addressed."""

    def __init__(self, file: int, rank: int) -> None:
        super().__init__(f"Position ({file}, {rank}) is off the board")
        self.file = file
        self.rank = rank


class InvalidState(TileChessError, RuntimeError):
    """An operation was called out of sequence."""
