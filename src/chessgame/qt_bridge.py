"""Qt bridge exposing a GameSession through signals and slots."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessgame.core.enums import Color, PieceType
from chessgame.core.outcome import MoveOutcome
from chessgame.core.types import Square
from chessgame.game.session import GameSession
from chessgame.settings import GameSettings


class GameBridge(QObject):
    """Main-thread adapter between a board widget and a :class:`GameSession`.

    Slots take plain ints so they can be connected to view signals
    directly; results come back as :class:`MoveOutcome` objects.
    """

    move_applied = pyqtSignal(object)  # MoveOutcome
    move_rejected = pyqtSignal(str)
    promotion_pending = pyqtSignal(int)  # square
    turn_changed = pyqtSignal(object)  # Color
    game_over = pyqtSignal(object)  # MoveOutcome
    message = pyqtSignal(str)

    def __init__(
        self,
        session: GameSession | None = None,
        settings: GameSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._session = session if session is not None else GameSession(settings)
        events = self._session.events
        events.on_move.append(self._on_move)
        events.on_rejected.append(self._on_rejected)
        events.on_promotion_pending.append(self.promotion_pending.emit)
        events.on_turn_changed.append(self.turn_changed.emit)
        events.on_game_over.append(self._on_game_over)

    @property
    def session(self) -> GameSession:
        return self._session

    @pyqtSlot(int, int)
    def submit_move(self, from_sq: Square, to_sq: Square) -> None:
        self._session.submit_move(from_sq, to_sq)

    @pyqtSlot(int, int)
    def promote(self, square: Square, kind: int) -> None:
        """Complete a pending promotion; *kind* is a :class:`PieceType` value."""
        try:
            piece_type = PieceType(kind)
        except ValueError:
            self.move_rejected.emit(f"Unknown piece type: {kind}")
            return
        self._session.promote(square, piece_type)

    @pyqtSlot()
    def new_game(self) -> None:
        self._session.new_game()

    def current_turn(self) -> Color:
        return self._session.current_turn()

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_move(self, outcome: MoveOutcome) -> None:
        self.move_applied.emit(outcome)
        if outcome.message:
            self.message.emit(outcome.message)

    def _on_rejected(self, outcome: MoveOutcome) -> None:
        self.move_rejected.emit(outcome.message)
        if outcome.message:
            self.message.emit(outcome.message)

    def _on_game_over(self, outcome: MoveOutcome) -> None:
        self.game_over.emit(outcome)
        # An applied final move already sent its text through _on_move.
        if outcome.message and not outcome.is_applied:
            self.message.emit(outcome.message)
