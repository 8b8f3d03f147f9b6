"""Tests for candidate generation, one class per piece kind."""

import random

import pytest

from tilechess.core.board import Board
from tilechess.core.enums import QUEEN_DIRECTIONS, ROOK_DIRECTIONS, PieceKind, Team
from tilechess.core.errors import InvalidState
from tilechess.core.move_generator import (
    GENERATORS,
    KNIGHT_OFFSETS,
    CandidateSet,
    MoveGenerator,
    generate,
)
from tilechess.core.piece import Piece
from tilechess.core.types import (
    A1, A2, A5, A8, B3, C2, D4, E1, E2, E3, E4, E5, E8, H1, H8,
    ALL_POSITIONS,
    Position,
    parse_position,
)


def _board(**placements: Piece) -> Board:
    """Board from keyword square names, e.g. ``_board(e4=rook)``."""
    board = Board()
    for name, piece in placements.items():
        board.place(parse_position(name), piece)
    return board


def _p(*names: str) -> frozenset[Position]:
    return frozenset(parse_position(n) for n in names)


W_ROOK = Piece(PieceKind.ROOK, Team.WHITE)
W_KNIGHT = Piece(PieceKind.KNIGHT, Team.WHITE)
W_BISHOP = Piece(PieceKind.BISHOP, Team.WHITE)
W_QUEEN = Piece(PieceKind.QUEEN, Team.WHITE)
W_KING = Piece(PieceKind.KING, Team.WHITE)
B_ROOK = Piece(PieceKind.ROOK, Team.BLACK)
B_KNIGHT = Piece(PieceKind.KNIGHT, Team.BLACK)
B_KING = Piece(PieceKind.KING, Team.BLACK)


def _random_board(rng: random.Random, density: float = 0.3) -> Board:
    kinds = list(PieceKind)
    board = Board()
    for pos in ALL_POSITIONS:
        if rng.random() < density:
            team = rng.choice((Team.WHITE, Team.BLACK))
            kind = rng.choice(kinds)
            origin = pos if kind == PieceKind.PAWN else None
            board.place(pos, Piece(kind, team, origin))
    return board


# ── CandidateSet ─────────────────────────────────────────────────────────────


class TestCandidateSet:
    def test_membership_and_len(self) -> None:
        cs = CandidateSet(_p("e3", "e4"), _p("d3"))
        assert E3 in cs and E4 in cs and parse_position("d3") in cs
        assert E5 not in cs
        assert len(cs) == 3
        assert cs.targets == _p("e3", "e4", "d3")

    def test_is_capture(self) -> None:
        cs = CandidateSet(_p("e3"), _p("d3"))
        assert cs.is_capture(parse_position("d3"))
        assert not cs.is_capture(E3)

    def test_iteration_is_sorted(self) -> None:
        cs = CandidateSet(_p("h1", "a8"), _p("a1"))
        assert list(cs) == sorted([H1, A8, A1])


# ── Knight ───────────────────────────────────────────────────────────────────


class TestKnightTargets:
    def test_corner_has_two(self) -> None:
        board = _board(a1=W_KNIGHT)
        cs = generate(board.snapshot(), A1)
        assert cs.targets == frozenset({B3, C2})

    def test_open_board_has_eight(self) -> None:
        board = _board(e4=W_KNIGHT)
        assert len(generate(board.snapshot(), E4)) == 8

    def test_friendly_excluded_enemy_captured(self) -> None:
        board = _board(e4=W_KNIGHT, f6=W_ROOK, d6=B_ROOK)
        cs = generate(board.snapshot(), E4)
        assert parse_position("f6") not in cs
        assert cs.captures == _p("d6")
        assert len(cs) == 7

    def test_jumps_over_pieces(self) -> None:
        board = Board.initial()
        cs = generate(board.snapshot(), parse_position("b1"))
        assert cs.targets == _p("a3", "c3")

    @pytest.mark.parametrize("seed", range(10))
    def test_offsets_and_size_on_random_boards(self, seed: int) -> None:
        rng = random.Random(seed)
        for pos in ALL_POSITIONS:
            board = _random_board(rng)
            board.place(pos, W_KNIGHT)
            cs = generate(board.snapshot(), pos)
            for target in cs:
                delta = (target.file - pos.file, target.rank - pos.rank)
                assert delta in KNIGHT_OFFSETS
                occupant = board[target]
                assert occupant is None or occupant.team == Team.BLACK
            open_board = _board(**{pos.name: W_KNIGHT})
            assert 2 <= len(generate(open_board.snapshot(), pos)) <= 8


# ── King ─────────────────────────────────────────────────────────────────────


class TestKingTargets:
    def test_back_rank_edge(self) -> None:
        board = _board(e1=W_KING)
        cs = generate(board.snapshot(), E1)
        assert cs.targets == _p("d1", "f1", "d2", "e2", "f2")

    def test_open_board_all_neighbors(self) -> None:
        board = _board(e4=W_KING)
        cs = generate(board.snapshot(), E4)
        assert cs.targets == frozenset(E4.neighbor(d) for d in QUEEN_DIRECTIONS)

    def test_corner(self) -> None:
        board = _board(h8=B_KING)
        assert generate(board.snapshot(), H8).targets == _p("g8", "g7", "h7")

    def test_capture_and_friendly(self) -> None:
        board = _board(e4=W_KING, e5=B_ROOK, d4=W_ROOK)
        cs = generate(board.snapshot(), E4)
        assert cs.captures == _p("e5")
        assert D4 not in cs
        assert len(cs) == 7

    def test_boxed_in_at_start(self) -> None:
        assert len(generate(Board.initial().snapshot(), E1)) == 0


# ── Sliding pieces ───────────────────────────────────────────────────────────


class TestRookTargets:
    def test_open_file_to_enemy(self) -> None:
        board = _board(a1=W_ROOK, a8=B_ROOK)
        cs = generate(board.snapshot(), A1)
        north = {p for p in cs if p.file == 0}
        assert north == set(_p("a2", "a3", "a4", "a5", "a6", "a7", "a8"))
        assert cs.captures == _p("a8")

    def test_empty_board_has_fourteen(self) -> None:
        board = _board(d4=W_ROOK)
        assert len(generate(board.snapshot(), D4)) == 14

    def test_friendly_blocker_excluded(self) -> None:
        board = _board(a1=W_ROOK, a5=W_KNIGHT, a8=B_ROOK)
        cs = generate(board.snapshot(), A1)
        assert A5 not in cs
        assert A8 not in cs
        assert _p("a2", "a3", "a4") <= cs.targets

    def test_enemy_blocker_stops_ray(self) -> None:
        board = _board(a1=W_ROOK, a5=B_KNIGHT)
        cs = generate(board.snapshot(), A1)
        assert A5 in cs
        assert parse_position("a6") not in cs

    def test_no_targets_at_start(self) -> None:
        assert len(generate(Board.initial().snapshot(), A1)) == 0

    @pytest.mark.parametrize("seed", range(10))
    def test_rays_stop_at_first_occupied(self, seed: int) -> None:
        rng = random.Random(seed)
        board = _random_board(rng, density=0.25)
        board.place(D4, W_ROOK)
        cs = generate(board.snapshot(), D4)
        for direction in ROOK_DIRECTIONS:
            step = D4.neighbor(direction)
            while step is not None:
                occupant = board[step]
                if occupant is None:
                    assert step in cs
                else:
                    assert (step in cs) == (occupant.team == Team.BLACK)
                    step = step.neighbor(direction)
                    while step is not None:
                        assert step not in cs
                        step = step.neighbor(direction)
                    break
                step = step.neighbor(direction)


class TestBishopTargets:
    def test_empty_board_center(self) -> None:
        board = _board(d4=W_BISHOP)
        assert len(generate(board.snapshot(), D4)) == 13

    def test_diagonals_only(self) -> None:
        board = _board(d4=W_BISHOP)
        for target in generate(board.snapshot(), D4):
            assert abs(target.file - 3) == abs(target.rank - 3)

    def test_blocked(self) -> None:
        board = _board(a1=W_BISHOP, c3=B_ROOK)
        cs = generate(board.snapshot(), A1)
        assert cs.targets == _p("b2", "c3")
        assert cs.captures == _p("c3")


class TestQueenTargets:
    def test_empty_board_center(self) -> None:
        board = _board(d4=W_QUEEN)
        assert len(generate(board.snapshot(), D4)) == 27

    def test_union_of_rook_and_bishop(self) -> None:
        rng = random.Random(7)
        board = _random_board(rng)
        board.place(D4, W_QUEEN)
        queen = generate(board.snapshot(), D4)
        board.place(D4, W_ROOK)
        rook = generate(board.snapshot(), D4)
        board.place(D4, W_BISHOP)
        bishop = generate(board.snapshot(), D4)
        assert queen.moves == rook.moves | bishop.moves
        assert queen.captures == rook.captures | bishop.captures


# ── Pawn ─────────────────────────────────────────────────────────────────────


class TestPawnTargets:
    def test_double_step_from_origin(self) -> None:
        board = _board(e2=Piece.pawn(Team.WHITE, E2))
        cs = generate(board.snapshot(), E2)
        assert cs.moves == _p("e3", "e4")
        assert cs.captures == frozenset()

    def test_origin_with_diagonal_captures(self) -> None:
        board = _board(
            e2=Piece.pawn(Team.WHITE, E2),
            d3=B_KNIGHT,
            f3=B_ROOK,
        )
        cs = generate(board.snapshot(), E2)
        assert cs.moves == _p("e3", "e4")
        assert cs.captures == _p("d3", "f3")

    def test_friendly_diagonal_not_capturable(self) -> None:
        board = _board(e2=Piece.pawn(Team.WHITE, E2), d3=W_KNIGHT)
        assert parse_position("d3") not in generate(board.snapshot(), E2)

    def test_empty_diagonals_never_legal(self) -> None:
        board = _board(e4=Piece.pawn(Team.WHITE, E2))
        cs = generate(board.snapshot(), E4)
        assert cs.targets == _p("e5")

    def test_single_step_when_not_at_origin(self) -> None:
        board = _board(e3=Piece.pawn(Team.WHITE, E2))
        cs = generate(board.snapshot(), E3)
        assert cs.moves == _p("e4")

    def test_blocked_straight_ahead(self) -> None:
        board = _board(e2=Piece.pawn(Team.WHITE, E2), e3=B_ROOK)
        cs = generate(board.snapshot(), E2)
        assert len(cs) == 0

    def test_double_step_blocked_on_second_tile(self) -> None:
        board = _board(e2=Piece.pawn(Team.WHITE, E2), e4=B_ROOK)
        cs = generate(board.snapshot(), E2)
        assert cs.moves == _p("e3")
        assert cs.captures == frozenset()

    def test_black_walks_south(self) -> None:
        e7 = parse_position("e7")
        board = _board(e7=Piece.pawn(Team.BLACK, e7), d6=W_ROOK)
        cs = generate(board.snapshot(), e7)
        assert cs.moves == _p("e6", "e5")
        assert cs.captures == _p("d6")

    def test_last_rank_has_no_forward(self) -> None:
        board = _board(e8=Piece.pawn(Team.WHITE, E2))
        assert len(generate(board.snapshot(), E8)) == 0

    def test_pawn_without_origin_single_steps(self) -> None:
        board = _board(e2=Piece(PieceKind.PAWN, Team.WHITE))
        assert generate(board.snapshot(), E2).moves == _p("e3")

    def test_edge_file_one_diagonal(self) -> None:
        board = _board(a2=Piece.pawn(Team.WHITE, A2), b3=B_ROOK)
        cs = generate(board.snapshot(), A2)
        assert cs.captures == _p("b3")
        assert cs.moves == _p("a3", "a4")

    @pytest.mark.parametrize("file", range(8))
    def test_at_origin_scenario(self, file: int) -> None:
        origin = Position(file, 1)
        board = Board.initial()
        cs = generate(board.snapshot(), origin)
        assert cs.moves == frozenset({Position(file, 2), Position(file, 3)})
        assert cs.captures == frozenset()


# ── Dispatch ─────────────────────────────────────────────────────────────────


class TestDispatch:
    def test_every_kind_has_a_generator(self) -> None:
        assert set(GENERATORS) == set(PieceKind)

    def test_empty_tile_raises(self) -> None:
        with pytest.raises(InvalidState):
            generate(Board().snapshot(), E4)

    def test_live_board_works_too(self) -> None:
        board = _board(e4=W_ROOK)
        assert generate(board, E4) == generate(board.snapshot(), E4)

    def test_generate_all_initial(self) -> None:
        gen = MoveGenerator(Board.initial().snapshot())
        white = gen.generate_all(Team.WHITE)
        assert len(white) == 16
        assert sum(len(cs) for cs in white.values()) == 20
        assert E1 in white and len(white[E1]) == 0

    def test_generate_all_other_team(self) -> None:
        gen = MoveGenerator(Board.initial().snapshot())
        black = gen.generate_all(Team.BLACK)
        assert all(pos.rank >= 6 for pos in black)
