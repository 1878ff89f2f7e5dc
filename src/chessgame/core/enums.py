"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step for this side."""
        return 1 if self == Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_rank(self) -> int:
        return 1 if self == Color.WHITE else 6

    @property
    def promotion_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class CastleSide(IntEnum):
    KINGSIDE = auto()
    QUEENSIDE = auto()


class SpecialMove(IntEnum):
    """Compound-move classification of an applied move."""

    NONE = 0
    CASTLE = auto()
    PROMOTION = auto()


class OutcomeStatus(IntEnum):
    APPLIED = auto()
    REJECTED = auto()
    NOT_PLAYERS_TURN = auto()
    GAME_OVER = auto()


class RejectReason(IntEnum):
    """Why a move (or promotion choice) was refused."""

    ILLEGAL_SHAPE = auto()
    OCCUPIED_BY_FRIEND = auto()
    OUT_OF_TURN = auto()
    SELF_CHECK = auto()
    CASTLING_UNAVAILABLE = auto()
    OUT_OF_RANGE = auto()
    EMPTY_SQUARE = auto()
    PROMOTION_PENDING = auto()
    NO_PROMOTION_PENDING = auto()
    INVALID_PROMOTION = auto()
    GAME_OVER = auto()


class GameEndReason(IntEnum):
    CHECKMATE = auto()
    KING_CAPTURED = auto()
    KING_MISSING = auto()


class CastlingBlock(IntEnum):
    """Which castling precondition failed."""

    RIGHTS_LOST = auto()
    NO_ROOK = auto()
    PATH_BLOCKED = auto()
    KING_IN_CHECK = auto()
    PATH_ATTACKED = auto()
