"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import PieceKind, Team
from tilechess.core.types import Position

# Layout character ↔ (Team, PieceKind)
_CHAR_MAP: dict[str, tuple[Team, PieceKind]] = {
    "P": (Team.WHITE, PieceKind.PAWN),
    "N": (Team.WHITE, PieceKind.KNIGHT),
    "B": (Team.WHITE, PieceKind.BISHOP),
    "R": (Team.WHITE, PieceKind.ROOK),
    "Q": (Team.WHITE, PieceKind.QUEEN),
    "K": (Team.WHITE, PieceKind.KING),
    "p": (Team.BLACK, PieceKind.PAWN),
    "n": (Team.BLACK, PieceKind.KNIGHT),
    "b": (Team.BLACK, PieceKind.BISHOP),
    "r": (Team.BLACK, PieceKind.ROOK),
    "q": (Team.BLACK, PieceKind.QUEEN),
    "k": (Team.BLACK, PieceKind.KING),
}

_UNICODE: dict[tuple[Team, PieceKind], str] = {
    (Team.WHITE, PieceKind.PAWN): "♙",
    (Team.WHITE, PieceKind.KNIGHT): "♘",
    (Team.WHITE, PieceKind.BISHOP): "♗",
    (Team.WHITE, PieceKind.ROOK): "♖",
    (Team.WHITE, PieceKind.QUEEN): "♕",
    (Team.WHITE, PieceKind.KING): "♔",
    (Team.BLACK, PieceKind.PAWN): "♟",
    (Team.BLACK, PieceKind.KNIGHT): "♞",
    (Team.BLACK, PieceKind.BISHOP): "♝",
    (Team.BLACK, PieceKind.ROOK): "♜",
    (Team.BLACK, PieceKind.QUEEN): "♛",
    (Team.BLACK, PieceKind.KING): "♚",
}

_LAYOUT_CHARS: dict[tuple[Team, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    ``origin`` is the tile a pawn was first placed on. It decides whether
    the pawn may still advance two tiles, and is ignored for other kinds.
    """

    kind: PieceKind
    team: Team
    origin: Position | None = None

    @classmethod
    def pawn(cls, team: Team, origin: Position) -> Piece:
        return cls(PieceKind.PAWN, team, origin)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Layout character (uppercase = white, lowercase = black)."""
        return _LAYOUT_CHARS[(self.team, self.kind)]

    @classmethod
    def from_char(cls, char: str, origin: Position | None = None) -> Piece:
        """Create piece from layout character, e.g. 'N' → white knight."""
        try:
            team, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, team, origin if kind == PieceKind.PAWN else None)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.team, self.kind)]

    def is_enemy_of(self, other: Piece) -> bool:
        return self.team != other.team
