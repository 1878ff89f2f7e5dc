"""MoveEngine: move validation, castling, promotion and checkmate.

The engine keeps no state of its own. Every call works on the board and
castling rights passed in; provisional moves used for king-safety tests are
always reverted before the call returns.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NamedTuple

from chessgame.core.attacks import is_in_check, reachable_squares
from chessgame.core.board import Board
from chessgame.core.castling import CastlingRights
from chessgame.core.enums import (
    PROMOTION_TYPES,
    CastleSide,
    CastlingBlock,
    Color,
    GameEndReason,
    OutcomeStatus,
    PieceType,
    RejectReason,
    SpecialMove,
)
from chessgame.core.errors import PromotionError
from chessgame.core.outcome import MoveOutcome
from chessgame.core.piece import Piece
from chessgame.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
    is_valid_square,
    rank_of,
    square_name,
)

_LOGGER = logging.getLogger(__name__)


class _CastleMove(NamedTuple):
    color: Color
    side: CastleSide
    rook_from: Square
    rook_to: Square


# (king from, king to) -> castling geometry
_CASTLE_MOVES: dict[tuple[Square, Square], _CastleMove] = {
    (E1, G1): _CastleMove(Color.WHITE, CastleSide.KINGSIDE, H1, F1),
    (E1, C1): _CastleMove(Color.WHITE, CastleSide.QUEENSIDE, A1, D1),
    (E8, G8): _CastleMove(Color.BLACK, CastleSide.KINGSIDE, H8, F8),
    (E8, C8): _CastleMove(Color.BLACK, CastleSide.QUEENSIDE, A8, D8),
}

_ROOK_CORNERS: dict[Square, tuple[Color, CastleSide]] = {
    A1: (Color.WHITE, CastleSide.QUEENSIDE),
    H1: (Color.WHITE, CastleSide.KINGSIDE),
    A8: (Color.BLACK, CastleSide.QUEENSIDE),
    H8: (Color.BLACK, CastleSide.KINGSIDE),
}


@contextmanager
def provisional_move(
    board: Board, from_sq: Square, to_sq: Square
) -> Iterator[Piece | None]:
    """Apply a raw move for the duration of the block, then undo it exactly.

    Yields the piece displaced from *to_sq* (if any).
    """
    captured = board.move_raw(from_sq, to_sq)
    try:
        yield captured
    finally:
        board.move_raw(to_sq, from_sq)
        if captured is not None:
            board.place(to_sq, captured)


def castle_geometry(from_sq: Square, to_sq: Square) -> _CastleMove | None:
    """Castling details if *from_sq* → *to_sq* is a canonical king castle."""
    return _CASTLE_MOVES.get((from_sq, to_sq))


class MoveEngine:
    """Static rule-checker that operates on a borrowed :class:`Board`."""

    # ── Move validation ──────────────────────────────────────────────────

    @staticmethod
    def try_move(
        board: Board,
        castling: CastlingRights,
        turn: Color,
        from_sq: Square,
        to_sq: Square,
    ) -> MoveOutcome:
        """Validate and, if legal, apply *from_sq* → *to_sq* for *turn*."""
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return MoveEngine._reject(RejectReason.OUT_OF_RANGE, from_sq, to_sq)

        piece = board[from_sq]
        if piece is None:
            return MoveEngine._reject(RejectReason.EMPTY_SQUARE, from_sq, to_sq)
        if piece.color != turn:
            return MoveEngine._reject(RejectReason.OUT_OF_TURN, from_sq, to_sq, piece)

        ended = MoveEngine._king_missing(board, from_sq, to_sq, piece)
        if ended is not None:
            return ended

        geometry = castle_geometry(from_sq, to_sq)
        if (
            geometry is not None
            and piece.kind == PieceType.KING
            and geometry.color == piece.color
        ):
            return MoveEngine.try_castle(board, castling, from_sq, to_sq)

        target = board[to_sq]
        if target is not None and target.color == piece.color:
            return MoveEngine._reject(
                RejectReason.OCCUPIED_BY_FRIEND, from_sq, to_sq, piece
            )

        if to_sq not in reachable_squares(board, from_sq):
            return MoveEngine._reject(RejectReason.ILLEGAL_SHAPE, from_sq, to_sq, piece)

        if MoveEngine.leaves_king_attacked(board, from_sq, to_sq):
            return MoveEngine._reject(RejectReason.SELF_CHECK, from_sq, to_sq, piece)

        captured = board.move_raw(from_sq, to_sq)
        MoveEngine._update_castling(castling, piece, from_sq, to_sq)

        special = SpecialMove.NONE
        if (
            piece.kind == PieceType.PAWN
            and rank_of(to_sq) == piece.color.promotion_rank
        ):
            special = SpecialMove.PROMOTION

        _LOGGER.debug(
            "%s %s %s-%s",
            piece.color,
            piece.kind.name.lower(),
            square_name(from_sq),
            square_name(to_sq),
        )
        outcome = MoveOutcome.applied(from_sq, to_sq, piece, captured, special)
        return MoveEngine.assess(board, castling, outcome)

    @staticmethod
    def try_castle(
        board: Board,
        castling: CastlingRights,
        from_sq: Square,
        to_sq: Square,
    ) -> MoveOutcome:
        """Castle the king on *from_sq* to *to_sq*, moving the rook with it.

        Nothing is mutated unless every precondition holds.
        """
        piece = board[from_sq]
        geometry = castle_geometry(from_sq, to_sq)
        if (
            piece is None
            or geometry is None
            or piece.kind != PieceType.KING
            or piece.color != geometry.color
        ):
            return MoveEngine._reject(RejectReason.ILLEGAL_SHAPE, from_sq, to_sq, piece)

        ended = MoveEngine._king_missing(board, from_sq, to_sq, piece)
        if ended is not None:
            return ended

        block = MoveEngine.castling_block(board, castling, from_sq, to_sq)
        if block is not None:
            _LOGGER.debug(
                "%s castling %s refused: %s",
                piece.color,
                geometry.side.name.lower(),
                block.name,
            )
            return MoveOutcome.rejected(
                RejectReason.CASTLING_UNAVAILABLE,
                from_sq,
                to_sq,
                piece,
                castling_block=block,
            )

        board.move_raw(from_sq, to_sq)
        board.move_raw(geometry.rook_from, geometry.rook_to)
        castling[piece.color].mark_castled()

        _LOGGER.debug("%s castles %s", piece.color, geometry.side.name.lower())
        outcome = MoveOutcome.applied(
            from_sq,
            to_sq,
            piece,
            special=SpecialMove.CASTLE,
            castle_side=geometry.side,
        )
        return MoveEngine.assess(board, castling, outcome)

    @staticmethod
    def castling_block(
        board: Board,
        castling: CastlingRights,
        king_sq: Square,
        to_sq: Square,
    ) -> CastlingBlock | None:
        """First failed castling precondition, or ``None`` if castling is legal."""
        geometry = castle_geometry(king_sq, to_sq)
        if geometry is None:
            return CastlingBlock.RIGHTS_LOST
        color = geometry.color

        if not castling[color].available(geometry.side):
            return CastlingBlock.RIGHTS_LOST

        if board[geometry.rook_from] != Piece(color, PieceType.ROOK):
            return CastlingBlock.NO_ROOK

        low, high = sorted((king_sq, geometry.rook_from))
        if any(not board.is_empty(sq) for sq in range(low + 1, high)):
            return CastlingBlock.PATH_BLOCKED

        if is_in_check(board, color):
            return CastlingBlock.KING_IN_CHECK

        step = 1 if to_sq > king_sq else -1
        for sq in range(king_sq + step, to_sq + step, step):
            with provisional_move(board, king_sq, sq):
                if is_in_check(board, color):
                    return CastlingBlock.PATH_ATTACKED
        return None

    # ── Promotion ────────────────────────────────────────────────────────

    @staticmethod
    def promote(board: Board, square: Square, kind: PieceType) -> Piece:
        """Replace the pawn on its last rank at *square* with a *kind* piece."""
        if kind not in PROMOTION_TYPES:
            raise PromotionError(f"Cannot promote to {kind.name}")
        pawn = board[square]
        if pawn is None or pawn.kind != PieceType.PAWN:
            raise PromotionError(f"No pawn to promote on square {square}")
        if rank_of(square) != pawn.color.promotion_rank:
            raise PromotionError(
                f"Pawn on {square_name(square)} is not on its last rank"
            )

        promoted = pawn.promoted(kind)
        board.place(square, promoted)
        _LOGGER.debug("%s pawn promoted to %s", pawn.color, kind.name.lower())
        return promoted

    @staticmethod
    def complete_promotion(
        board: Board,
        castling: CastlingRights,
        square: Square,
        kind: PieceType,
    ) -> MoveOutcome:
        """Promote, then report check / checkmate against the opponent."""
        ended = MoveEngine._king_missing(board, square, square, board.get(square))
        if ended is not None:
            return ended

        promoted = MoveEngine.promote(board, square, kind)
        outcome = MoveOutcome.applied(
            square,
            square,
            promoted,
            special=SpecialMove.PROMOTION,
            promoted_to=kind,
        )
        return MoveEngine.assess(board, castling, outcome)

    # ── Position queries ─────────────────────────────────────────────────

    @staticmethod
    def assess(
        board: Board, castling: CastlingRights, outcome: MoveOutcome
    ) -> MoveOutcome:
        """Annotate an applied move with check, checkmate or king capture."""
        mover = outcome.piece
        assert mover is not None

        captured = outcome.captured
        if captured is not None and captured.kind == PieceType.KING:
            _LOGGER.info("%s king captured", captured.color)
            return outcome.ended(GameEndReason.KING_CAPTURED, mover.color)

        if outcome.promotion_pending:
            return outcome

        opponent = mover.color.opposite
        if board.king_square(opponent) is None or not is_in_check(board, opponent):
            return outcome

        outcome = outcome.with_check()
        if not MoveEngine.has_legal_move(board, castling, opponent):
            _LOGGER.info("%s is checkmated", opponent)
            return outcome.ended(GameEndReason.CHECKMATE, mover.color)
        return outcome

    @staticmethod
    def leaves_king_attacked(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Would moving *from_sq* → *to_sq* leave the mover's king attacked?"""
        piece = board[from_sq]
        if piece is None:
            return False
        with provisional_move(board, from_sq, to_sq):
            return is_in_check(board, piece.color)

    @staticmethod
    def legal_destinations(
        board: Board, castling: CastlingRights, from_sq: Square
    ) -> list[Square]:
        """Every square the piece on *from_sq* may legally move to."""
        piece = board[from_sq]
        if piece is None or board.king_square(piece.color) is None:
            return []

        destinations = [
            to_sq
            for to_sq in reachable_squares(board, from_sq)
            if not MoveEngine.leaves_king_attacked(board, from_sq, to_sq)
        ]
        if piece.kind == PieceType.KING:
            for (king_sq, to_sq), geometry in _CASTLE_MOVES.items():
                if (
                    king_sq == from_sq
                    and geometry.color == piece.color
                    and MoveEngine.castling_block(board, castling, king_sq, to_sq)
                    is None
                ):
                    destinations.append(to_sq)
        return destinations

    @staticmethod
    def has_legal_move(board: Board, castling: CastlingRights, color: Color) -> bool:
        return any(
            MoveEngine.legal_destinations(board, castling, sq)
            for sq in board.pieces(color)
        )

    @staticmethod
    def is_checkmate(board: Board, castling: CastlingRights, color: Color) -> bool:
        """*color* is in check and no legal move escapes it."""
        if board.king_square(color) is None or not is_in_check(board, color):
            return False
        return not MoveEngine.has_legal_move(board, castling, color)

    @staticmethod
    def missing_king(board: Board) -> Color | None:
        """The first color without a king, if any."""
        for color in Color:
            if board.king_square(color) is None:
                return color
        return None

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _king_missing(
        board: Board, from_sq: Square, to_sq: Square, piece: Piece | None
    ) -> MoveOutcome | None:
        """Terminal outcome when either king is gone; the board is left as is."""
        missing = MoveEngine.missing_king(board)
        if missing is None:
            return None
        _LOGGER.warning("No %s king on board; game cannot continue", missing.name)
        return MoveOutcome(
            OutcomeStatus.GAME_OVER,
            from_sq,
            to_sq,
            piece,
            end_reason=GameEndReason.KING_MISSING,
            winner=MoveEngine._survivor(board),
        )

    @staticmethod
    def _survivor(board: Board) -> Color | None:
        kings = [color for color in Color if board.king_square(color) is not None]
        return kings[0] if len(kings) == 1 else None

    @staticmethod
    def _update_castling(
        castling: CastlingRights, piece: Piece, from_sq: Square, to_sq: Square
    ) -> None:
        if piece.kind == PieceType.KING:
            castling[piece.color].mark_king_moved()
        # A rook leaving its corner, or anything landing on one.
        for sq in (from_sq, to_sq):
            corner = _ROOK_CORNERS.get(sq)
            if corner is not None:
                color, side = corner
                castling[color].mark_rook_moved(side)

    @staticmethod
    def _reject(
        reason: RejectReason,
        from_sq: Square,
        to_sq: Square,
        piece: Piece | None = None,
    ) -> MoveOutcome:
        _LOGGER.debug("Move %s -> %s rejected: %s", from_sq, to_sq, reason.name)
        return MoveOutcome.rejected(reason, from_sq, to_sq, piece)
