"""Exceptions raised for misuse of the engine API.

Illegal moves are not exceptions: they come back as a rejected
:class:`~chessgame.core.outcome.MoveOutcome`.
"""

from __future__ import annotations

from chessgame.core.enums import Color


class ChessError(Exception):
    """Base class for engine errors."""


class KingMissingError(ChessError, ValueError):
    """Raised when a check test is asked about a side with no king."""

    def __init__(self, color: Color) -> None:
        super().__init__(f"No {color.name} king on board")
        self.color = color


class PromotionError(ChessError, ValueError):
    """Raised when a promotion request does not match the board."""
