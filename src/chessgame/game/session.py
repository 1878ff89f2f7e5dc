"""GameSession owns one game's board, castling rights and turn.

Coordinates: Players, MoveEngine, outcome messages.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessgame.core.attacks import is_in_check
from chessgame.core.board import Board
from chessgame.core.castling import CastlingRights, CastlingTracker
from chessgame.core.enums import (
    PROMOTION_TYPES,
    Color,
    GameEndReason,
    PieceType,
    RejectReason,
)
from chessgame.core.outcome import MoveOutcome
from chessgame.core.piece import Piece
from chessgame.core.rules import MoveEngine
from chessgame.core.types import Square
from chessgame.game.interfaces import GamePhase, IGameSession, IPlayer
from chessgame.game.messages import describe
from chessgame.i18n import Strings, strings_for
from chessgame.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

OutcomeCallback = Callable[[MoveOutcome], None]
SquareCallback = Callable[[Square], None]
TurnCallback = Callable[[Color], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[OutcomeCallback] = field(default_factory=list)
    on_rejected: list[OutcomeCallback] = field(default_factory=list)
    on_promotion_pending: list[SquareCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_game_over: list[OutcomeCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameSession):
    """Turn state machine for a single game.

    The board, castling rights and turn belong to this session alone;
    :class:`MoveEngine` only borrows them for the duration of a call.
    A rejected move leaves all three untouched.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). Remote players must hand their moves to that
    thread before calling :meth:`submit_move`.
    """

    __slots__ = (
        "_board",
        "_castling",
        "_turn",
        "_phase",
        "_pending_promotion",
        "_winner",
        "_end_reason",
        "_players",
        "_settings",
        "events",
    )

    def __init__(
        self,
        settings: GameSettings | None = None,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights | None = None,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()
        self._reset(board, turn, castling)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """A copy of the current board."""
        return self._board.copy()

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def winner(self) -> Color | None:
        return self._winner

    @property
    def end_reason(self) -> GameEndReason | None:
        return self._end_reason

    @property
    def pending_promotion(self) -> Square | None:
        return self._pending_promotion

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        castling: CastlingRights | None = None,
    ) -> None:
        """Set up a fresh game (standard position unless *board* is given)."""
        for previous in self._players.values():
            previous.cancel()
        self._players = {}
        if white is not None:
            self._players[Color.WHITE] = white
        if black is not None:
            self._players[Color.BLACK] = black

        self._reset(board, turn, castling)
        _LOGGER.info("New game, %s to move", self._turn)

        self._emit_turn_changed()
        self._prompt_current_player()

    # ── IGameSession impl ────────────────────────────────────────────────

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveOutcome:
        if self._phase == GamePhase.GAME_OVER:
            outcome = MoveOutcome.rejected(
                RejectReason.GAME_OVER, from_sq, to_sq, self._board.get(from_sq)
            )
        elif self._phase == GamePhase.AWAITING_PROMOTION:
            outcome = MoveOutcome.rejected(
                RejectReason.PROMOTION_PENDING, from_sq, to_sq, self._board.get(from_sq)
            )
        else:
            outcome = MoveEngine.try_move(
                self._board, self._castling, self._turn, from_sq, to_sq
            )
            if outcome.promotion_pending and self._settings.auto_promote is not None:
                outcome = self._auto_promote(outcome, self._settings.auto_promote)
        return self._handle(outcome)

    def promote(self, square: Square, kind: PieceType) -> MoveOutcome:
        if (
            self._phase != GamePhase.AWAITING_PROMOTION
            or square != self._pending_promotion
        ):
            return self._handle(
                MoveOutcome.rejected(
                    RejectReason.NO_PROMOTION_PENDING,
                    square,
                    square,
                    self._board.get(square),
                )
            )
        if kind not in PROMOTION_TYPES:
            return self._handle(
                MoveOutcome.rejected(
                    RejectReason.INVALID_PROMOTION,
                    square,
                    square,
                    self._board.get(square),
                )
            )

        outcome = MoveEngine.complete_promotion(
            self._board, self._castling, square, kind
        )
        self._pending_promotion = None
        self._phase = GamePhase.AWAITING_MOVE
        return self._handle(outcome)

    def current_turn(self) -> Color:
        return self._turn

    def piece_at(self, square: Square) -> Piece | None:
        return self._board.get(square)

    def is_in_check(self, color: Color | None = None) -> bool:
        side = self._turn if color is None else color
        if self._board.king_square(side) is None:
            return False
        return is_in_check(self._board, side)

    # ── Read-only helpers for the UI ─────────────────────────────────────

    def castling_rights(self, color: Color) -> CastlingTracker:
        """A copy of *color*'s castling flags."""
        return self._castling[color].copy()

    def legal_destinations(self, square: Square) -> list[Square]:
        """Legal targets for the side to move's piece on *square*."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return []
        piece = self._board.get(square)
        if piece is None or piece.color != self._turn:
            return []
        return MoveEngine.legal_destinations(self._board, self._castling, square)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reset(
        self,
        board: Board | None,
        turn: Color,
        castling: CastlingRights | None,
    ) -> None:
        self._board = board.copy() if board is not None else Board.initial()
        self._castling = castling.copy() if castling is not None else CastlingRights()
        self._turn = turn
        self._phase = GamePhase.AWAITING_MOVE
        self._pending_promotion: Square | None = None
        self._winner: Color | None = None
        self._end_reason: GameEndReason | None = None

    def _auto_promote(self, pawn_move: MoveOutcome, kind: PieceType) -> MoveOutcome:
        """Finish a pending promotion at once, keeping the pawn move's origin."""
        assert pawn_move.to_sq is not None
        promotion = MoveEngine.complete_promotion(
            self._board, self._castling, pawn_move.to_sq, kind
        )
        return replace(
            promotion, from_sq=pawn_move.from_sq, captured=pawn_move.captured
        )

    def _strings(self) -> Strings | None:
        language = self._settings.language
        return strings_for(language) if language else None

    def _handle(self, outcome: MoveOutcome) -> MoveOutcome:
        """Attach the message, update the FSM, and notify listeners."""
        outcome = outcome.with_message(
            describe(
                outcome,
                self._strings(),
                announce_captures=self._settings.announce_captures,
            )
        )

        if outcome.is_rejected:
            for cb in self.events.on_rejected:
                cb(outcome)
            return outcome

        if outcome.is_applied:
            for cb in self.events.on_move:
                cb(outcome)

        if outcome.is_game_over:
            self._finish_game(outcome)
            return outcome

        if outcome.promotion_pending:
            assert outcome.to_sq is not None
            self._pending_promotion = outcome.to_sq
            self._phase = GamePhase.AWAITING_PROMOTION
            for cb in self.events.on_promotion_pending:
                cb(outcome.to_sq)
            return outcome

        self._flip_turn()
        self._prompt_current_player()
        return outcome

    def _finish_game(self, outcome: MoveOutcome) -> None:
        if outcome.is_applied:
            self._flip_turn()
        self._phase = GamePhase.GAME_OVER
        self._pending_promotion = None
        self._winner = outcome.winner
        self._end_reason = outcome.end_reason
        _LOGGER.info(
            "Game over: %s (winner: %s)",
            outcome.end_reason.name if outcome.end_reason else "unknown",
            outcome.winner,
        )
        for cb in self.events.on_game_over:
            cb(outcome)

    def _flip_turn(self) -> None:
        self._turn = self._turn.opposite
        self._emit_turn_changed()

    def _emit_turn_changed(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._turn)

    def _prompt_current_player(self) -> None:
        """Ask the player whose turn it is to move."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.request_move(self)
