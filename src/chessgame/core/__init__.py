"""Core domain layer: pure chess rules with no external dependencies.

Quick start::

    from chessgame.core import Board, CastlingRights, Color, MoveEngine

    board = Board.initial()
    rights = CastlingRights()
    outcome = MoveEngine.try_move(board, rights, Color.WHITE, 12, 28)
    print(outcome.status)
"""

from chessgame.core.attacks import (
    is_in_check,
    is_square_attacked,
    ray,
    reachable_squares,
)
from chessgame.core.board import Board
from chessgame.core.castling import CastlingRights, CastlingTracker
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
from chessgame.core.errors import ChessError, KingMissingError, PromotionError
from chessgame.core.outcome import MoveOutcome
from chessgame.core.piece import Piece
from chessgame.core.rules import MoveEngine, provisional_move
from chessgame.core.types import (
    Square,
    file_of,
    is_valid_square,
    make_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "CastleSide",
    "CastlingBlock",
    "Color",
    "GameEndReason",
    "OutcomeStatus",
    "PROMOTION_TYPES",
    "PieceType",
    "RejectReason",
    "SpecialMove",
    # Types / helpers
    "Square",
    "file_of",
    "is_valid_square",
    "make_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "CastlingTracker",
    "MoveOutcome",
    "Piece",
    # Rules
    "MoveEngine",
    "is_in_check",
    "is_square_attacked",
    "provisional_move",
    "ray",
    "reachable_squares",
    # Errors
    "ChessError",
    "KingMissingError",
    "PromotionError",
]
