"""Human-readable text for move outcomes."""

from __future__ import annotations

from chessgame.core.enums import (
    CastleSide,
    CastlingBlock,
    Color,
    GameEndReason,
    PieceType,
    RejectReason,
    SpecialMove,
)
from chessgame.core.outcome import MoveOutcome
from chessgame.core.piece import Piece
from chessgame.core.types import square_name
from chessgame.i18n import Strings, t

# Outcome codes → attribute names on :class:`Strings`
_SHAPE_KEYS: dict[PieceType, str] = {
    PieceType.KING: "shape_king",
    PieceType.QUEEN: "shape_queen",
    PieceType.ROOK: "shape_rook",
    PieceType.BISHOP: "shape_bishop",
    PieceType.KNIGHT: "shape_knight",
    PieceType.PAWN: "shape_pawn",
}

_CASTLING_KEYS: dict[CastlingBlock, str] = {
    CastlingBlock.RIGHTS_LOST: "castle_rights_lost",
    CastlingBlock.NO_ROOK: "castle_no_rook",
    CastlingBlock.PATH_BLOCKED: "castle_path_blocked",
    CastlingBlock.KING_IN_CHECK: "castle_in_check",
    CastlingBlock.PATH_ATTACKED: "castle_path_attacked",
}

_REJECT_KEYS: dict[RejectReason, str] = {
    RejectReason.OUT_OF_TURN: "not_your_turn",
    RejectReason.SELF_CHECK: "self_check",
    RejectReason.OUT_OF_RANGE: "out_of_range",
    RejectReason.EMPTY_SQUARE: "empty_square",
    RejectReason.PROMOTION_PENDING: "promotion_pending",
    RejectReason.NO_PROMOTION_PENDING: "no_promotion_pending",
    RejectReason.INVALID_PROMOTION: "invalid_promotion",
    RejectReason.GAME_OVER: "game_already_over",
}


def color_name(color: Color, strings: Strings | None = None) -> str:
    s = strings or t()
    return s.color_white if color == Color.WHITE else s.color_black


def rejection_message(outcome: MoveOutcome, strings: Strings | None = None) -> str:
    s = strings or t()
    reason = outcome.reason
    piece = outcome.piece

    if reason == RejectReason.OCCUPIED_BY_FRIEND and piece is not None:
        return s.own_piece.format(color=color_name(piece.color, s))
    if reason == RejectReason.ILLEGAL_SHAPE and piece is not None:
        return getattr(s, _SHAPE_KEYS[piece.kind])
    if reason == RejectReason.CASTLING_UNAVAILABLE:
        block = outcome.castling_block or CastlingBlock.RIGHTS_LOST
        return getattr(s, _CASTLING_KEYS[block])
    if reason in _REJECT_KEYS:
        return getattr(s, _REJECT_KEYS[reason])
    return ""


def game_over_message(outcome: MoveOutcome, strings: Strings | None = None) -> str:
    s = strings or t()
    winner = color_name(outcome.winner, s) if outcome.winner is not None else ""
    if outcome.end_reason == GameEndReason.CHECKMATE:
        return s.checkmate.format(color=winner)
    if outcome.end_reason == GameEndReason.KING_CAPTURED:
        return s.king_captured.format(color=winner)
    return s.king_missing


def applied_message(
    outcome: MoveOutcome,
    strings: Strings | None = None,
    *,
    announce_captures: bool = True,
) -> str:
    s = strings or t()
    piece = outcome.piece
    assert piece is not None

    if outcome.special == SpecialMove.CASTLE:
        template = (
            s.castled_kingside
            if outcome.castle_side == CastleSide.KINGSIDE
            else s.castled_queenside
        )
        text = template.format(color=color_name(piece.color, s))
    elif outcome.promoted_to is not None:
        text = s.promoted.format(symbol=piece.symbol)
        if outcome.captured is not None and announce_captures:
            pawn = Piece(piece.color, PieceType.PAWN)
            capture = s.captures.format(
                attacker=pawn.symbol, victim=outcome.captured.symbol
            )
            text = f"{capture} {text}"
    elif outcome.captured is not None and announce_captures:
        text = s.captures.format(attacker=piece.symbol, victim=outcome.captured.symbol)
    else:
        assert outcome.from_sq is not None and outcome.to_sq is not None
        text = s.moved.format(
            symbol=piece.symbol,
            src=square_name(outcome.from_sq),
            dst=square_name(outcome.to_sq),
        )

    if outcome.promotion_pending:
        return f"{text} {s.promote_title}"
    if outcome.gives_check and not outcome.is_game_over:
        return f"{text} {s.check.format(color=color_name(piece.color.opposite, s))}"
    return text


def describe(
    outcome: MoveOutcome,
    strings: Strings | None = None,
    *,
    announce_captures: bool = True,
) -> str:
    """One-line summary of *outcome* suitable for a toast or status bar."""
    if outcome.is_rejected:
        return rejection_message(outcome, strings)
    if not outcome.is_applied:
        return game_over_message(outcome, strings)

    text = applied_message(outcome, strings, announce_captures=announce_captures)
    if outcome.is_game_over:
        return f"{text} {game_over_message(outcome, strings)}"
    return text
