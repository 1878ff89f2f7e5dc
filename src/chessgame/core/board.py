"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Callable

from chessgame.core.enums import Color, PieceType
from chessgame.core.piece import Piece
from chessgame.core.types import BOARD_SIZE, Square, is_valid_square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board.

    The mutation primitives perform no legality checking. Squares outside
    0..63 read as empty and writes to them are ignored.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * BOARD_SIZE

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(sq)

    def get(self, sq: Square) -> Piece | None:
        if not is_valid_square(sq):
            return None
        return self._squares[sq]

    def is_empty(self, sq: Square) -> bool:
        return self.get(sq) is None

    # -- Mutation primitives ------------------------------------------------

    def place(self, sq: Square, piece: Piece) -> None:
        if is_valid_square(sq):
            self._squares[sq] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Empty *sq* and return whatever stood there."""
        if not is_valid_square(sq):
            return None
        piece = self._squares[sq]
        self._squares[sq] = None
        return piece

    def move_raw(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move the piece on *from_sq* to *to_sq*; return the piece displaced."""
        if not (is_valid_square(from_sq) and is_valid_square(to_sq)):
            return None
        piece = self._squares[from_sq]
        displaced = self._squares[to_sq]
        self._squares[to_sq] = piece
        self._squares[from_sq] = None
        return displaced

    # -- Query helpers ------------------------------------------------------

    def find(self, predicate: Callable[[Piece], bool]) -> Square | None:
        """First square (lowest index) whose piece satisfies *predicate*."""
        for sq, piece in enumerate(self._squares):
            if piece is not None and predicate(piece):
                return sq
        return None

    def king_square(self, color: Color) -> Square | None:
        return self.find(lambda p: p.kind == PieceType.KING and p.color == color)

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * BOARD_SIZE

    # -- Factories ----------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b.place(make_square(f, 1), Piece(Color.WHITE, PieceType.PAWN))
            b.place(make_square(f, 6), Piece(Color.BLACK, PieceType.PAWN))
        for f, kind in enumerate(_BACK_RANK):
            b.place(make_square(f, 0), Piece(Color.WHITE, kind))
            b.place(make_square(f, 7), Piece(Color.BLACK, kind))
        return b

    @classmethod
    def from_diagram(cls, text: str) -> Board:
        """Build a board from a piece-placement diagram.

        Eight ``/``-separated rows, rank 8 first; letters are pieces
        (uppercase white) and digits are runs of empty squares::

            Board.from_diagram("4k3/8/8/8/8/8/8/4K2R")
        """
        rows = text.strip().split("/")
        if len(rows) != 8:
            raise ValueError(f"Diagram must have 8 rows, got {len(rows)}")

        b = cls()
        for row_idx, row in enumerate(rows):
            rank = 7 - row_idx
            file = 0
            for ch in row:
                if ch.isdigit():
                    file += int(ch)
                    continue
                if file > 7:
                    raise ValueError(f"Diagram row {row!r} does not span 8 files")
                b.place(make_square(file, rank), Piece.from_char(ch))
                file += 1
            if file != 8:
                raise ValueError(f"Diagram row {row!r} does not span 8 files")
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.get(make_square(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
