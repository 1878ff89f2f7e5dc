"""Per-kind reachability and attack detection.

All sliding and king movement goes through :func:`ray`, which walks a
precomputed line of squares from a start square. Lines are built from
(file, rank) deltas, so they end at the board edge instead of wrapping onto
the next rank.
"""

from __future__ import annotations

from collections.abc import Callable

from chessgame.core.board import Board
from chessgame.core.enums import Color, PieceType
from chessgame.core.errors import KingMissingError
from chessgame.core.types import Square, make_square, offset_square, rank_of

Direction = tuple[int, int]

ROOK_DIRS: tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
QUEEN_DIRS: tuple[Direction, ...] = ROOK_DIRS + BISHOP_DIRS

# ±6, ±10, ±15, ±17 in index terms.
KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

SLIDE_LIMIT = 7
KING_LIMIT = 1


# -- Precomputed lookup tables ---------------------------------------------


def _build_lines() -> dict[Direction, tuple[tuple[Square, ...], ...]]:
    lines: dict[Direction, tuple[tuple[Square, ...], ...]] = {}
    for df, dr in QUEEN_DIRS:
        per_square: list[tuple[Square, ...]] = []
        for sq in range(64):
            af = (sq % 8) + df
            ar = (sq // 8) + dr
            line: list[Square] = []
            while 0 <= af < 8 and 0 <= ar < 8:
                line.append(make_square(af, ar))
                af += df
                ar += dr
            per_square.append(tuple(line))
        lines[(df, dr)] = tuple(per_square)
    return lines


def _build_knight_targets() -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        jumps = (offset_square(sq, df, dr) for df, dr in KNIGHT_OFFSETS)
        targets.append(tuple(to_sq for to_sq in jumps if to_sq is not None))
    return tuple(targets)


_LINES = _build_lines()
_KNIGHT_TARGETS = _build_knight_targets()


# -- Ray primitive -----------------------------------------------------------


def ray(
    board: Board,
    from_sq: Square,
    direction: Direction,
    color: Color,
    limit: int = SLIDE_LIMIT,
) -> list[Square]:
    """Squares a *color* piece on *from_sq* reaches along *direction*.

    Stops at the first occupied square, which is included only when it
    holds an enemy piece.
    """
    reached: list[Square] = []
    for to_sq in _LINES[direction][from_sq][:limit]:
        target = board[to_sq]
        if target is None:
            reached.append(to_sq)
            continue
        if target.is_enemy_of(color):
            reached.append(to_sq)
        break
    return reached


def _rays(
    board: Board,
    from_sq: Square,
    color: Color,
    directions: tuple[Direction, ...],
    limit: int,
) -> list[Square]:
    reached: list[Square] = []
    for direction in directions:
        reached.extend(ray(board, from_sq, direction, color, limit))
    return reached


# -- Per-kind reachability ---------------------------------------------------


def _rook(board: Board, sq: Square, color: Color) -> list[Square]:
    return _rays(board, sq, color, ROOK_DIRS, SLIDE_LIMIT)


def _bishop(board: Board, sq: Square, color: Color) -> list[Square]:
    return _rays(board, sq, color, BISHOP_DIRS, SLIDE_LIMIT)


def _queen(board: Board, sq: Square, color: Color) -> list[Square]:
    return _rays(board, sq, color, QUEEN_DIRS, SLIDE_LIMIT)


def _king(board: Board, sq: Square, color: Color) -> list[Square]:
    return _rays(board, sq, color, QUEEN_DIRS, KING_LIMIT)


def _knight(board: Board, sq: Square, color: Color) -> list[Square]:
    reached: list[Square] = []
    for to_sq in _KNIGHT_TARGETS[sq]:
        target = board[to_sq]
        if target is None or target.is_enemy_of(color):
            reached.append(to_sq)
    return reached


def _pawn(board: Board, sq: Square, color: Color) -> list[Square]:
    reached: list[Square] = []
    step = color.forward

    one_step = offset_square(sq, 0, step)
    if one_step is not None and board.is_empty(one_step):
        reached.append(one_step)
        if rank_of(sq) == color.pawn_rank:
            two_step = offset_square(sq, 0, 2 * step)
            if two_step is not None and board.is_empty(two_step):
                reached.append(two_step)

    for df in (-1, 1):
        cap_sq = offset_square(sq, df, step)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None and target.is_enemy_of(color):
            reached.append(cap_sq)
    return reached


_REACH: dict[PieceType, Callable[[Board, Square, Color], list[Square]]] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


def reachable_squares(board: Board, sq: Square) -> list[Square]:
    """Destinations the piece on *sq* may move to by its movement rule.

    Friendly-occupied squares are never included. Castling is not a
    movement-rule destination and is handled by the move engine.
    """
    piece = board[sq]
    if piece is None:
        return []
    return _REACH[piece.kind](board, sq, piece.color)


# -- Attack detection ----------------------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Does any *by_color* piece reach the (occupied) square *sq*?

    Pawns only reach diagonally onto an enemy, so *sq* should hold a piece
    of the other color, as a king square does.
    """
    for attacker_sq in board.pieces(by_color):
        if sq in reachable_squares(board, attacker_sq):
            return True
    return False


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    king_sq = board.king_square(color)
    if king_sq is None:
        raise KingMissingError(color)
    return is_square_attacked(board, king_sq, color.opposite)
