"""User-configurable game settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from chessgame.core.enums import PROMOTION_TYPES, PieceType

_ENV_PREFIX = "CHESSGAME_"
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Outcome messages; ``None`` follows the global :func:`chessgame.i18n.t`
    language: str | None = None

    # Promote without asking (e.g. for remote players); ``None`` asks
    auto_promote: PieceType | None = None

    # "♘ attacks and captures ♟" instead of a plain move line
    announce_captures: bool = True

    def __post_init__(self) -> None:
        if self.auto_promote is not None and self.auto_promote not in PROMOTION_TYPES:
            raise ValueError(f"Cannot auto-promote to {self.auto_promote.name}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameSettings:
        """Read ``CHESSGAME_*`` variables; unset ones keep their defaults."""
        env = os.environ if environ is None else environ
        settings = cls()

        language = env.get(f"{_ENV_PREFIX}LANGUAGE")
        if language:
            settings.language = language

        promote = env.get(f"{_ENV_PREFIX}AUTO_PROMOTE")
        if promote:
            settings.auto_promote = _parse_promotion(promote)

        announce = env.get(f"{_ENV_PREFIX}ANNOUNCE_CAPTURES")
        if announce:
            settings.announce_captures = _parse_bool(announce)

        return settings


def _parse_promotion(value: str) -> PieceType:
    try:
        kind = PieceType[value.strip().upper()]
    except KeyError:
        raise ValueError(f"Invalid promotion piece: {value!r}") from None
    if kind not in PROMOTION_TYPES:
        raise ValueError(f"Invalid promotion piece: {value!r}")
    return kind


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Invalid boolean setting: {value!r}")
