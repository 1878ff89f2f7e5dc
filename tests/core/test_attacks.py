"""Tests for reachability rays and attack detection."""

import pytest

from chessgame.core.attacks import (
    is_in_check,
    is_square_attacked,
    ray,
    reachable_squares,
)
from chessgame.core.board import Board
from chessgame.core.enums import Color, PieceType
from chessgame.core.errors import KingMissingError
from chessgame.core.piece import Piece
from chessgame.core.types import (
    A1,
    A2,
    A3,
    A4,
    B1,
    C3,
    D2,
    D3,
    E2,
    E3,
    E4,
    E5,
    E6,
    E7,
    H1,
    H2,
    H4,
)

WR = Piece(Color.WHITE, PieceType.ROOK)
WP = Piece(Color.WHITE, PieceType.PAWN)
WN = Piece(Color.WHITE, PieceType.KNIGHT)
BP = Piece(Color.BLACK, PieceType.PAWN)


def _board(*placements: tuple[int, Piece]) -> Board:
    board = Board()
    for sq, piece in placements:
        board.place(sq, piece)
    return board


class TestRay:
    def test_stops_before_friend(self) -> None:
        board = _board((A1, WR), (A3, WP))
        assert ray(board, A1, (0, 1), Color.WHITE) == [A2]

    def test_includes_enemy(self) -> None:
        board = _board((A1, WR), (A3, BP))
        assert ray(board, A1, (0, 1), Color.WHITE) == [A2, A3]

    def test_respects_limit(self) -> None:
        board = _board((A1, WR))
        assert ray(board, A1, (1, 0), Color.WHITE, limit=1) == [B1]

    def test_no_wrap_at_file_edge(self) -> None:
        board = _board((H1, WR))
        assert ray(board, H1, (1, 0), Color.WHITE) == []
        assert ray(board, H1, (1, 1), Color.WHITE) == []

    def test_full_rank(self) -> None:
        board = _board((A1, WR))
        assert ray(board, A1, (1, 0), Color.WHITE) == list(range(1, 8))


class TestKnight:
    def test_corner(self) -> None:
        board = _board((A1, WN))
        assert set(reachable_squares(board, A1)) == {10, 17}

    def test_no_wrap_from_h_file(self) -> None:
        board = _board((H4, WN))
        assert set(reachable_squares(board, H4)) == {14, 21, 37, 46}

    def test_from_b1(self) -> None:
        board = _board((B1, WN))
        assert set(reachable_squares(board, B1)) == {11, 16, C3}

    def test_friend_excluded(self) -> None:
        board = _board((B1, WN), (D2, WP))
        assert D2 not in reachable_squares(board, B1)


class TestPawn:
    def test_single_and_double_step(self) -> None:
        board = _board((E2, WP))
        assert set(reachable_squares(board, E2)) == {E3, E4}

    def test_blocked_intermediate_blocks_double(self) -> None:
        board = _board((E2, WP), (E3, BP))
        assert reachable_squares(board, E2) == []

    def test_blocked_destination(self) -> None:
        board = _board((E2, WP), (E4, BP))
        assert reachable_squares(board, E2) == [E3]

    def test_double_step_only_from_start_rank(self) -> None:
        board = _board((E3, WP))
        assert reachable_squares(board, E3) == [E4]

    def test_black_moves_down(self) -> None:
        board = _board((E7, BP))
        assert set(reachable_squares(board, E7)) == {E6, E5}

    def test_diagonal_needs_enemy(self) -> None:
        board = _board((E2, WP), (D3, BP))
        assert D3 in reachable_squares(board, E2)

    def test_no_capture_across_edge(self) -> None:
        # a2 + 7 would be h2 on the same rank.
        board = _board((A2, WP), (H2, BP))
        assert set(reachable_squares(board, A2)) == {A3, A4}

    def test_empty_square(self) -> None:
        assert reachable_squares(Board(), E4) == []


class TestSlidingPieces:
    def test_rook_in_initial_position_is_boxed(self) -> None:
        assert reachable_squares(Board.initial(), A1) == []

    def test_queen_open_board(self) -> None:
        board = Board.from_diagram("8/8/8/8/3Q4/8/8/8")
        assert len(reachable_squares(board, 27)) == 27

    def test_bishop_open_board(self) -> None:
        board = Board.from_diagram("8/8/8/8/3B4/8/8/8")
        assert len(reachable_squares(board, 27)) == 13

    def test_king_one_step(self) -> None:
        board = Board.from_diagram("8/8/8/8/3K4/8/8/8")
        assert set(reachable_squares(board, 27)) == {18, 19, 20, 26, 28, 34, 35, 36}


class TestCheck:
    def test_rook_on_open_file(self) -> None:
        board = Board.from_diagram("4r3/8/8/8/8/8/8/4K3")
        assert is_in_check(board, Color.WHITE)

    def test_blocked_by_own_piece(self) -> None:
        board = Board.from_diagram("4r3/8/8/8/8/8/4P3/4K3")
        assert not is_in_check(board, Color.WHITE)

    def test_knight_check(self) -> None:
        board = Board.from_diagram("8/8/8/8/8/3n4/8/4K3")
        assert is_in_check(board, Color.WHITE)

    def test_pawn_check(self) -> None:
        board = Board.from_diagram("8/8/8/8/8/8/3p4/4K3")
        assert is_in_check(board, Color.WHITE)

    def test_pawn_does_not_check_straight_ahead(self) -> None:
        board = Board.from_diagram("8/8/8/8/8/8/4p3/4K3")
        assert not is_in_check(board, Color.WHITE)

    def test_initial_position(self) -> None:
        board = Board.initial()
        assert not is_in_check(board, Color.WHITE)
        assert not is_in_check(board, Color.BLACK)

    def test_missing_king_raises(self) -> None:
        with pytest.raises(KingMissingError):
            is_in_check(Board(), Color.BLACK)

    def test_square_attacked(self) -> None:
        board = Board.from_diagram("4r3/8/8/8/8/8/8/4K3")
        assert is_square_attacked(board, 4, Color.BLACK)
        assert not is_square_attacked(board, 4, Color.WHITE)
