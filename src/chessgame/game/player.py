"""Concrete player implementations."""

from __future__ import annotations

import re
from collections.abc import Callable

from chessgame.core.enums import Color
from chessgame.core.types import Square, is_valid_square
from chessgame.game.interfaces import IGameSession, IPlayer

_REPLY_RE = re.compile(r"^\s*(\d{1,2})\s*,\s*(\d{1,2})\s*$")


class HumanPlayer(IPlayer):
    """A human participant. Moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, session: IGameSession) -> None:
        pass  # Human moves arrive via session.submit_move()

    def cancel(self) -> None:
        pass


class RemotePlayer(IPlayer):
    """A participant whose moves come from outside the process.

    The transport is not part of the engine: ``RemotePlayer`` only stores
    a callback that will be invoked on ``request_move``. The embedder (an
    HTTP client, a script, a test) answers by calling
    ``session.submit_move(from_sq, to_sq)``.

    Args:
        color: Side the remote player plays.
        name: Display name.
        on_request_move: ``(IGameSession) -> None``, called when the
            session asks this player to move.
        on_cancel: ``() -> None``, called to abandon a pending request.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Remote",
        on_request_move: Callable[[IGameSession], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, session: IGameSession) -> None:
        if self._on_request_move is not None:
            self._on_request_move(session)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()


def parse_move_reply(text: str) -> tuple[Square, Square]:
    """Parse a remote reply such as ``"52, 36"`` into a square pair."""
    match = _REPLY_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid move reply: {text!r}")
    from_sq, to_sq = int(match.group(1)), int(match.group(2))
    if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        raise ValueError(f"Square out of range in move reply: {text!r}")
    return from_sq, to_sq
