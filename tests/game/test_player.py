"""Tests for player implementations and remote reply parsing."""

import pytest

from chessgame.core.enums import Color
from chessgame.game.player import HumanPlayer, RemotePlayer, parse_move_reply
from chessgame.game.session import GameSession


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Color.WHITE, "Alice")
        assert p.color == Color.WHITE
        assert p.name == "Alice"
        assert p.is_human

    def test_default_name(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert p.name == "Player (black)"

    def test_request_move_is_noop(self) -> None:
        session = GameSession()
        HumanPlayer(Color.WHITE).request_move(session)
        assert session.current_turn() == Color.WHITE


class TestRemotePlayer:
    def test_properties(self) -> None:
        p = RemotePlayer(Color.BLACK)
        assert p.name == "Remote"
        assert not p.is_human

    def test_request_move_invokes_callback(self) -> None:
        seen: list[GameSession] = []
        p = RemotePlayer(Color.BLACK, on_request_move=seen.append)
        session = GameSession()
        p.request_move(session)
        assert seen == [session]

    def test_cancel_invokes_callback(self) -> None:
        calls: list[bool] = []
        p = RemotePlayer(Color.BLACK, on_cancel=lambda: calls.append(True))
        p.cancel()
        assert calls == [True]

    def test_without_callbacks(self) -> None:
        p = RemotePlayer(Color.WHITE)
        p.request_move(GameSession())
        p.cancel()


class TestParseMoveReply:
    def test_simple(self) -> None:
        assert parse_move_reply("52, 36") == (52, 36)

    def test_whitespace(self) -> None:
        assert parse_move_reply("  1 ,18\n") == (1, 18)

    @pytest.mark.parametrize("text", ["", "52", "52 36", "e2, e4", "1, 2, 3"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_move_reply(text)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            parse_move_reply("12, 64")
