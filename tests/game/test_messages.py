"""Tests for outcome messages."""

from chessgame.core.enums import (
    CastleSide,
    CastlingBlock,
    Color,
    GameEndReason,
    OutcomeStatus,
    PieceType,
    RejectReason,
    SpecialMove,
)
from chessgame.core.outcome import MoveOutcome
from chessgame.core.piece import Piece
from chessgame.core.types import C3, D5, E1, E2, G1, G7, H7, H8
from chessgame.game.messages import color_name, describe
from chessgame.i18n import set_language, strings_for

WN = Piece(Color.WHITE, PieceType.KNIGHT)
WK = Piece(Color.WHITE, PieceType.KING)
WP = Piece(Color.WHITE, PieceType.PAWN)
BP = Piece(Color.BLACK, PieceType.PAWN)


class TestRejectionMessages:
    def test_not_your_turn(self) -> None:
        outcome = MoveOutcome.rejected(RejectReason.OUT_OF_TURN, 52, 36, BP)
        assert describe(outcome) == "It's not your turn!"

    def test_own_piece(self) -> None:
        outcome = MoveOutcome.rejected(RejectReason.OCCUPIED_BY_FRIEND, 1, 11, WN)
        assert describe(outcome) == "White cannot move to its own piece."

    def test_shape_per_piece(self) -> None:
        outcome = MoveOutcome.rejected(RejectReason.ILLEGAL_SHAPE, 1, 17, WN)
        assert describe(outcome) == "The Knight can only move in an L shape."

    def test_self_check(self) -> None:
        outcome = MoveOutcome.rejected(RejectReason.SELF_CHECK, E2, 19, WN)
        assert "would be in check" in describe(outcome)

    def test_castling_block(self) -> None:
        outcome = MoveOutcome.rejected(
            RejectReason.CASTLING_UNAVAILABLE,
            E1,
            G1,
            WK,
            castling_block=CastlingBlock.PATH_ATTACKED,
        )
        assert describe(outcome) == "The King cannot castle through or into check."

    def test_localised(self) -> None:
        outcome = MoveOutcome.rejected(RejectReason.OUT_OF_TURN, 52, 36, BP)
        assert describe(outcome, strings_for("Russian")) == "Сейчас не ваш ход!"

    def test_follows_global_language(self) -> None:
        set_language("Russian")
        outcome = MoveOutcome.rejected(RejectReason.GAME_OVER, 0, 8)
        assert describe(outcome) == "Партия окончена."


class TestAppliedMessages:
    def test_plain_move(self) -> None:
        outcome = MoveOutcome.applied(1, C3, WN)
        assert describe(outcome) == "♘ b1 → c3"

    def test_capture(self) -> None:
        outcome = MoveOutcome.applied(C3, D5, WN, captured=BP)
        assert describe(outcome) == "♘ attacks and captures ♟"

    def test_capture_not_announced(self) -> None:
        outcome = MoveOutcome.applied(C3, D5, WN, captured=BP)
        assert describe(outcome, announce_captures=False) == "♘ c3 → d5"

    def test_capturing_promotion(self) -> None:
        queen = Piece(Color.WHITE, PieceType.QUEEN)
        rook = Piece(Color.BLACK, PieceType.ROOK)
        outcome = MoveOutcome.applied(
            G7,
            H8,
            queen,
            captured=rook,
            special=SpecialMove.PROMOTION,
            promoted_to=PieceType.QUEEN,
        )
        assert describe(outcome) == (
            "♙ attacks and captures ♜ The Pawn Promoted to ♕"
        )
        assert describe(outcome, announce_captures=False) == (
            "The Pawn Promoted to ♕"
        )

    def test_castle(self) -> None:
        outcome = MoveOutcome.applied(
            E1, 2, WK, special=SpecialMove.CASTLE, castle_side=CastleSide.QUEENSIDE
        )
        assert describe(outcome) == "White castles queen side."

    def test_promotion_pending(self) -> None:
        outcome = MoveOutcome.applied(H7, H8, WP, special=SpecialMove.PROMOTION)
        assert describe(outcome) == "♙ h7 → h8 Promote Your Pawn"

    def test_promoted(self) -> None:
        queen = Piece(Color.WHITE, PieceType.QUEEN)
        outcome = MoveOutcome.applied(
            H8, H8, queen, special=SpecialMove.PROMOTION, promoted_to=PieceType.QUEEN
        )
        assert describe(outcome) == "The Pawn Promoted to ♕"

    def test_check_suffix(self) -> None:
        outcome = MoveOutcome.applied(1, C3, WN).with_check()
        assert describe(outcome) == "♘ b1 → c3 Black is in check."


class TestGameOverMessages:
    def test_checkmate(self) -> None:
        outcome = (
            MoveOutcome.applied(1, C3, WN)
            .with_check()
            .ended(GameEndReason.CHECKMATE, Color.WHITE)
        )
        assert describe(outcome) == "♘ b1 → c3 Checkmate! White wins."

    def test_king_captured(self) -> None:
        king = Piece(Color.BLACK, PieceType.KING)
        outcome = MoveOutcome.applied(C3, D5, WN, captured=king).ended(
            GameEndReason.KING_CAPTURED, Color.WHITE
        )
        assert describe(outcome).endswith("White captured the King and wins.")

    def test_king_missing(self) -> None:
        outcome = MoveOutcome(
            OutcomeStatus.GAME_OVER, E1, E2, WK, end_reason=GameEndReason.KING_MISSING
        )
        assert describe(outcome) == "A King is missing from the board."


class TestColorName:
    def test_english(self) -> None:
        assert color_name(Color.WHITE) == "White"
        assert color_name(Color.BLACK) == "Black"

    def test_russian(self) -> None:
        assert color_name(Color.BLACK, strings_for("Russian")) == "Чёрные"
