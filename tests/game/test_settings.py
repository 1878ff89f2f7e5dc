"""Tests for GameSettings."""

import pytest

from chessgame.core.enums import PieceType
from chessgame.settings import GameSettings


class TestDefaults:
    def test_defaults(self) -> None:
        settings = GameSettings()
        assert settings.language is None
        assert settings.auto_promote is None
        assert settings.announce_captures

    def test_auto_promote_rejects_king(self) -> None:
        with pytest.raises(ValueError):
            GameSettings(auto_promote=PieceType.KING)


class TestFromEnv:
    def test_empty_environment(self) -> None:
        assert GameSettings.from_env({}) == GameSettings()

    def test_all_values(self) -> None:
        settings = GameSettings.from_env(
            {
                "CHESSGAME_LANGUAGE": "Russian",
                "CHESSGAME_AUTO_PROMOTE": "Queen",
                "CHESSGAME_ANNOUNCE_CAPTURES": "off",
            }
        )
        assert settings.language == "Russian"
        assert settings.auto_promote == PieceType.QUEEN
        assert not settings.announce_captures

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSGAME_AUTO_PROMOTE", "knight")
        assert GameSettings.from_env().auto_promote == PieceType.KNIGHT

    @pytest.mark.parametrize("value", ["king", "pawn", "dragon"])
    def test_invalid_promotion(self, value: str) -> None:
        with pytest.raises(ValueError, match="Invalid promotion piece"):
            GameSettings.from_env({"CHESSGAME_AUTO_PROMOTE": value})

    def test_invalid_bool(self) -> None:
        with pytest.raises(ValueError, match="Invalid boolean"):
            GameSettings.from_env({"CHESSGAME_ANNOUNCE_CAPTURES": "maybe"})
