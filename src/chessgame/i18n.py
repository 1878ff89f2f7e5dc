"""Internationalisation strings for move outcomes.

Usage::

    from chessgame.i18n import t, set_language

    set_language("Russian")
    print(t().not_your_turn)          # "Сейчас не ваш ход!"
    print(t().checkmate.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    color_white: str
    color_black: str

    # ── Rejections ───────────────────────────────────────────────────────
    not_your_turn: str
    own_piece: str  # "{color} cannot move to its own piece."
    self_check: str
    out_of_range: str
    empty_square: str
    promotion_pending: str
    no_promotion_pending: str
    invalid_promotion: str
    game_already_over: str

    # Movement rule per piece kind
    shape_king: str
    shape_queen: str
    shape_rook: str
    shape_bishop: str
    shape_knight: str
    shape_pawn: str

    # Castling preconditions
    castle_rights_lost: str
    castle_no_rook: str
    castle_path_blocked: str
    castle_in_check: str
    castle_path_attacked: str

    # ── Applied moves ────────────────────────────────────────────────────
    moved: str  # "{symbol} {src} → {dst}"
    captures: str  # "{attacker} attacks and captures {victim}"
    castled_kingside: str  # "{color} castles king side."
    castled_queenside: str
    promote_title: str
    promoted: str  # "The Pawn Promoted to {symbol}"
    check: str  # "{color} is in check."

    # ── Game over ────────────────────────────────────────────────────────
    checkmate: str  # "Checkmate! {color} wins."
    king_captured: str  # "{color} captured the king and wins."
    king_missing: str


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    color_white="White",
    color_black="Black",
    not_your_turn="It's not your turn!",
    own_piece="{color} cannot move to its own piece.",
    self_check="You cannot move there because your King would be in check.",
    out_of_range="That square is not on the board.",
    empty_square="There is no piece on that square.",
    promotion_pending="Choose a piece for your pawn first.",
    no_promotion_pending="No pawn is waiting to be promoted.",
    invalid_promotion="A pawn can only become a Queen, Rook, Bishop or Knight.",
    game_already_over="The game is over.",
    shape_king="The King can only move one square in any direction.",
    shape_queen="The Queen can move horizontally, vertically, or diagonally.",
    shape_rook="The Rook can only move horizontally or vertically.",
    shape_bishop="The Bishop can only move diagonally.",
    shape_knight="The Knight can only move in an L shape.",
    shape_pawn="The Pawn can only move forward, or capture diagonally.",
    castle_rights_lost="Castling is not possible: the King or Rook has already moved.",
    castle_no_rook="Castling is not possible: the Rook is missing.",
    castle_path_blocked="Castling is not possible: the path is not clear.",
    castle_in_check="You cannot castle while your King is in check.",
    castle_path_attacked="The King cannot castle through or into check.",
    moved="{symbol} {src} → {dst}",
    captures="{attacker} attacks and captures {victim}",
    castled_kingside="{color} castles king side.",
    castled_queenside="{color} castles queen side.",
    promote_title="Promote Your Pawn",
    promoted="The Pawn Promoted to {symbol}",
    check="{color} is in check.",
    checkmate="Checkmate! {color} wins.",
    king_captured="{color} captured the King and wins.",
    king_missing="A King is missing from the board.",
)

_RU = Strings(
    color_white="Белые",
    color_black="Чёрные",
    not_your_turn="Сейчас не ваш ход!",
    own_piece="{color} не могут ходить на свою фигуру.",
    self_check="Так ходить нельзя: ваш король окажется под шахом.",
    out_of_range="Такого поля нет на доске.",
    empty_square="На этом поле нет фигуры.",
    promotion_pending="Сначала выберите фигуру для пешки.",
    no_promotion_pending="Нет пешки, ожидающей превращения.",
    invalid_promotion="Пешка может стать только ферзём, ладьёй, слоном или конём.",
    game_already_over="Партия окончена.",
    shape_king="Король ходит только на одно поле в любом направлении.",
    shape_queen="Ферзь ходит по горизонтали, вертикали или диагонали.",
    shape_rook="Ладья ходит только по горизонтали или вертикали.",
    shape_bishop="Слон ходит только по диагонали.",
    shape_knight="Конь ходит только буквой «Г».",
    shape_pawn="Пешка ходит только вперёд и бьёт по диагонали.",
    castle_rights_lost="Рокировка невозможна: король или ладья уже ходили.",
    castle_no_rook="Рокировка невозможна: нет ладьи.",
    castle_path_blocked="Рокировка невозможна: путь не свободен.",
    castle_in_check="Нельзя рокироваться, когда король под шахом.",
    castle_path_attacked="Король не может рокироваться через битое поле или под шах.",
    moved="{symbol} {src} → {dst}",
    captures="{attacker} бьёт {victim}",
    castled_kingside="{color} делают короткую рокировку.",
    castled_queenside="{color} делают длинную рокировку.",
    promote_title="Превращение пешки",
    promoted="Пешка превратилась в {symbol}",
    check="{color}: шах.",
    checkmate="Мат! {color} побеждают.",
    king_captured="{color} взяли короля и побеждают.",
    king_missing="На доске нет одного из королей.",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def strings_for(language: str) -> Strings:
    """Locale strings for *language*. Unknown names fall back to English."""
    return _LOCALES.get(language, _EN)


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = strings_for(language)
