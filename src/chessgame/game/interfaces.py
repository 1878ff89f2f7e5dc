"""Abstract interfaces for the game layer.

Follows Dependency Inversion: players and UI adapters depend on
these ABCs, not on the concrete :class:`~chessgame.game.session.GameSession`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto

from chessgame.core.enums import Color, PieceType
from chessgame.core.outcome import MoveOutcome
from chessgame.core.piece import Piece
from chessgame.core.types import Square

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    AWAITING_MOVE = auto()
    AWAITING_PROMOTION = auto()  # pawn on the last rank, kind not chosen yet
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameSession(ABC):
    """Interface for the turn-owning game session."""

    @abstractmethod
    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        """Attempt a move for the side to move."""

    @abstractmethod
    def promote(self, square: Square, kind: PieceType) -> MoveOutcome:
        """Choose the piece kind for a pending promotion."""

    @abstractmethod
    def current_turn(self) -> Color:
        """Side to move."""

    @abstractmethod
    def piece_at(self, square: Square) -> Piece | None:
        """Piece on *square*, ``None`` when empty or off the board."""

    @abstractmethod
    def is_in_check(self, color: Color | None = None) -> bool:
        """Is *color* (default: side to move) in check?"""


class IPlayer(ABC):
    """Interface for a game participant (local or remote)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, session: IGameSession) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via UI).
        Remote players answer later through ``session.submit_move``.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Abandon an outstanding move request (remote only)."""
