"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgame.core.enums import PROMOTION_TYPES, Color, PieceType
from chessgame.core.errors import PromotionError

# kind -> (diagram letter, white glyph, black glyph)
_FORMS: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("p", "♙", "♟"),
    PieceType.KNIGHT: ("n", "♘", "♞"),
    PieceType.BISHOP: ("b", "♗", "♝"),
    PieceType.ROOK: ("r", "♖", "♜"),
    PieceType.QUEEN: ("q", "♕", "♛"),
    PieceType.KING: ("k", "♔", "♚"),
}

_KINDS_BY_LETTER: dict[str, PieceType] = {
    letter: kind for kind, (letter, _, _) in _FORMS.items()
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A chess piece of one color.

    Promotion does not mutate a piece; the board swaps in
    :meth:`promoted` on the same square.
    """

    color: Color
    kind: PieceType

    def __str__(self) -> str:
        return self.letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Parse a diagram letter: uppercase is White, lowercase is Black."""
        kind = _KINDS_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

    @property
    def letter(self) -> str:
        letter = _FORMS[self.kind][0]
        return letter.upper() if self.color == Color.WHITE else letter

    @property
    def symbol(self) -> str:
        """Unicode chess glyph, e.g. ♞."""
        _, white, black = _FORMS[self.kind]
        return white if self.color == Color.WHITE else black

    def is_enemy_of(self, color: Color) -> bool:
        return self.color != color

    def promoted(self, kind: PieceType) -> Piece:
        """The piece this pawn becomes on reaching its last rank.

        Raises :class:`PromotionError` for anything but a pawn, or for a
        target kind a pawn may not become.
        """
        if self.kind != PieceType.PAWN:
            raise PromotionError(f"Only pawns promote, not a {self.kind.name}")
        if kind not in PROMOTION_TYPES:
            raise PromotionError(f"Cannot promote to {kind.name}")
        return Piece(self.color, kind)
