"""Tests for ASCII classification."""

import pytest

from asciifold.classifier import is_ascii, is_ascii_char


class TestIsAsciiChar:
    """Tests for is_ascii_char."""

    def test_all_ascii_codepoints(self) -> None:
        assert all(is_ascii_char(chr(code)) for code in range(0x80))

    def test_first_non_ascii(self) -> None:
        assert not is_ascii_char("\x80")

    def test_accepts_codepoint(self) -> None:
        assert is_ascii_char(0x41)
        assert not is_ascii_char(0xE9)

    @pytest.mark.parametrize("char", ["é", "Ж", "①", "\U0001f600"])
    def test_non_ascii_chars(self, char: str) -> None:
        assert not is_ascii_char(char)


class TestIsAscii:
    """Tests for is_ascii."""

    def test_plain_string(self) -> None:
        assert is_ascii("Hello, World!")

    def test_empty_string(self) -> None:
        assert is_ascii("")

    def test_string_with_accent(self) -> None:
        assert not is_ascii("héllo")

    def test_astral_character(self) -> None:
        assert not is_ascii("smile \U0001f600")

    def test_bytes_without_encoding_checked_bytewise(self) -> None:
        assert is_ascii(b"abc")
        assert not is_ascii("é".encode("utf-8"))

    def test_bytes_with_source_encoding(self) -> None:
        assert not is_ascii("Привет".encode("cp1251"), "windows-1251")
        assert is_ascii(b"Privet", "windows-1251")

    def test_string_is_passed_through_source_encoding(self) -> None:
        """Characters the encoding lacks are replaced before the check."""
        assert is_ascii("héllo", "ascii")
        assert not is_ascii("héllo", "latin-1")
