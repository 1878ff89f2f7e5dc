"""Castling bookkeeping: which kings and rooks have moved."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessgame.core.enums import CastleSide, Color


@dataclass(slots=True)
class CastlingTracker:
    """Moved-flags for one side. Flags only ever go from False to True."""

    king_moved: bool = False
    queenside_rook_moved: bool = False
    kingside_rook_moved: bool = False

    def mark_king_moved(self) -> None:
        self.king_moved = True

    def mark_rook_moved(self, side: CastleSide) -> None:
        if side == CastleSide.KINGSIDE:
            self.kingside_rook_moved = True
        else:
            self.queenside_rook_moved = True

    def mark_castled(self) -> None:
        self.king_moved = True
        self.queenside_rook_moved = True
        self.kingside_rook_moved = True

    def king_side_available(self) -> bool:
        return not self.king_moved and not self.kingside_rook_moved

    def queen_side_available(self) -> bool:
        return not self.king_moved and not self.queenside_rook_moved

    def available(self, side: CastleSide) -> bool:
        if side == CastleSide.KINGSIDE:
            return self.king_side_available()
        return self.queen_side_available()

    def copy(self) -> CastlingTracker:
        return CastlingTracker(
            self.king_moved, self.queenside_rook_moved, self.kingside_rook_moved
        )


@dataclass(slots=True)
class CastlingRights:
    """Castling trackers for both colors."""

    white: CastlingTracker = field(default_factory=CastlingTracker)
    black: CastlingTracker = field(default_factory=CastlingTracker)

    def __getitem__(self, color: Color) -> CastlingTracker:
        return self.white if color == Color.WHITE else self.black

    def copy(self) -> CastlingRights:
        return CastlingRights(self.white.copy(), self.black.copy())

    @classmethod
    def revoked(cls) -> CastlingRights:
        """Rights with every flag already set (no castling for anyone)."""
        rights = cls()
        rights.white.mark_castled()
        rights.black.mark_castled()
        return rights
