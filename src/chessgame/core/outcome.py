"""MoveOutcome: the result of every mutating engine call."""

from __future__ import annotations

from dataclasses import dataclass, replace

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
from chessgame.core.piece import Piece
from chessgame.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """Immutable description of what a move attempt did.

    ``APPLIED`` and ``GAME_OVER`` (apart from ``KING_MISSING``) mean the
    board changed; ``REJECTED`` and ``NOT_PLAYERS_TURN`` mean it did not.
    """

    status: OutcomeStatus
    from_sq: Square | None = None
    to_sq: Square | None = None
    piece: Piece | None = None
    captured: Piece | None = None
    special: SpecialMove = SpecialMove.NONE
    castle_side: CastleSide | None = None
    promoted_to: PieceType | None = None
    reason: RejectReason | None = None
    castling_block: CastlingBlock | None = None
    gives_check: bool = False
    end_reason: GameEndReason | None = None
    winner: Color | None = None
    message: str = ""

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def applied(
        cls,
        from_sq: Square,
        to_sq: Square,
        piece: Piece,
        captured: Piece | None = None,
        special: SpecialMove = SpecialMove.NONE,
        castle_side: CastleSide | None = None,
        promoted_to: PieceType | None = None,
    ) -> MoveOutcome:
        return cls(
            OutcomeStatus.APPLIED,
            from_sq,
            to_sq,
            piece,
            captured=captured,
            special=special,
            castle_side=castle_side,
            promoted_to=promoted_to,
        )

    @classmethod
    def rejected(
        cls,
        reason: RejectReason,
        from_sq: Square | None = None,
        to_sq: Square | None = None,
        piece: Piece | None = None,
        castling_block: CastlingBlock | None = None,
    ) -> MoveOutcome:
        status = (
            OutcomeStatus.NOT_PLAYERS_TURN
            if reason == RejectReason.OUT_OF_TURN
            else OutcomeStatus.REJECTED
        )
        return cls(
            status,
            from_sq,
            to_sq,
            piece,
            reason=reason,
            castling_block=castling_block,
        )

    def ended(self, end_reason: GameEndReason, winner: Color | None) -> MoveOutcome:
        """Copy of this outcome marked as the game-ending one."""
        return replace(
            self,
            status=OutcomeStatus.GAME_OVER,
            end_reason=end_reason,
            winner=winner,
        )

    def with_check(self) -> MoveOutcome:
        return replace(self, gives_check=True)

    def with_message(self, message: str) -> MoveOutcome:
        return replace(self, message=message)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_applied(self) -> bool:
        """Whether the board was changed by this call."""
        if self.status == OutcomeStatus.APPLIED:
            return True
        return (
            self.status == OutcomeStatus.GAME_OVER
            and self.end_reason != GameEndReason.KING_MISSING
        )

    @property
    def is_rejected(self) -> bool:
        return self.status in (OutcomeStatus.REJECTED, OutcomeStatus.NOT_PLAYERS_TURN)

    @property
    def is_game_over(self) -> bool:
        return self.status == OutcomeStatus.GAME_OVER

    @property
    def promotion_pending(self) -> bool:
        """A pawn reached the last rank and still waits for its new kind."""
        return (
            self.status == OutcomeStatus.APPLIED
            and self.special == SpecialMove.PROMOTION
            and self.promoted_to is None
        )
