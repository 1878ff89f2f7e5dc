"""Tests for localisation tables."""

import inspect
from dataclasses import fields

from chessgame.game import messages
from chessgame.i18n import LANGUAGES, set_language, strings_for, t


class TestLanguages:
    def test_available(self) -> None:
        assert LANGUAGES == ["English", "Russian"]

    def test_default_is_english(self) -> None:
        assert t().not_your_turn == "It's not your turn!"

    def test_switch(self) -> None:
        set_language("Russian")
        assert t().color_white == "Белые"

    def test_unknown_falls_back_to_english(self) -> None:
        set_language("Klingon")
        assert t() is strings_for("English")

    def test_every_string_filled(self) -> None:
        for language in LANGUAGES:
            strings = strings_for(language)
            for f in fields(strings):
                assert getattr(strings, f.name), f"{language}.{f.name} is empty"

    def test_templates_share_placeholders(self) -> None:
        en, ru = strings_for("English"), strings_for("Russian")
        for f in fields(en):
            for key in ("{color}", "{symbol}", "{attacker}", "{victim}"):
                assert (key in getattr(en, f.name)) == (key in getattr(ru, f.name))

    def test_every_string_is_used(self) -> None:
        source = inspect.getsource(messages)
        for f in fields(strings_for("English")):
            assert f.name in source, f"{f.name} is never shown"
