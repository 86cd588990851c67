"""Tests for Flag and Word items."""

from __future__ import annotations

import dataclasses

import pytest

from optwalk import Flag, InvalidText, Word


class TestEquality:
    """Items compare by kind and value, never by origin."""

    def test_index_ignored(self) -> None:
        assert Flag("-v", 0) == Flag("-v", 5)
        assert Word("x", 1) == Word("x")
        assert hash(Flag("-v", 0)) == hash(Flag("-v", 5))

    def test_kinds_differ(self) -> None:
        assert Flag("-v") != Word("-v")

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Flag("-v").name = "-x"  # type: ignore[misc]


class TestMatching:
    """Items work with structural pattern matching."""

    @pytest.mark.parametrize(
        ("item", "expected"),
        [
            (Flag("-v"), "verbose"),
            (Flag("--fruit"), "fruit"),
            (Flag("-z"), "flag -z"),
            (Word("file"), "word file"),
        ],
    )
    def test_match(self, item: Flag | Word, expected: str) -> None:
        match item:
            case Flag("-v"):
                result = "verbose"
            case Flag("-f") | Flag("--fruit"):
                result = "fruit"
            case Flag(name):
                result = f"flag {name}"
            case Word(value):
                result = f"word {value}"
        assert result == expected


class TestViews:
    """Text, bytes and display views."""

    def test_str(self) -> None:
        assert str(Flag("--x")) == "--x"
        assert str(Word("a\udcffb")) == "a\\udcffb"

    def test_text(self) -> None:
        assert Word("ok").text() == "ok"
        assert Flag("-v").text() == "-v"
        with pytest.raises(InvalidText):
            Word("\udcff").text()

    def test_value_alias_on_flag(self) -> None:
        assert Flag("-v").value == "-v"

    def test_to_bytes(self) -> None:
        assert Word("abc").to_bytes() == b"abc"
        assert Flag("-é").to_bytes() == "-é".encode()
