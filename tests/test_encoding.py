"""Tests for source encoding resolution and decoding."""

import logging

import pytest

from asciifold.encoding import decode_source, get_codec_name, is_known_encoding


class TestGetCodecName:
    """Tests for get_codec_name."""

    @pytest.mark.parametrize(
        ("name", "codec"),
        [
            ("UTF-8", "utf-8"),
            ("utf8", "utf-8"),
            ("Unicode", "utf-16-le"),
            ("BigEndianUnicode", "utf-16-be"),
            ("us-ascii", "ascii"),
            ("Latin1", "latin-1"),
            ("CP1250", "cp1250"),
            ("windows-1251", "cp1251"),
            ("ISO-8859-2", "iso-8859-2"),
            ("ISO_8859-1", "iso-8859-1"),
            ("koi8-r", "koi8-r"),
        ],
    )
    def test_known_names(self, name: str, codec: str) -> None:
        assert get_codec_name(name) == codec

    def test_unknown_name_lowercased(self) -> None:
        assert get_codec_name(" Mac_Roman ") == "mac_roman"


class TestIsKnownEncoding:
    """Tests for is_known_encoding."""

    def test_known(self) -> None:
        assert is_known_encoding("windows-1252")

    def test_unknown(self) -> None:
        assert not is_known_encoding("no-such-encoding")

    def test_not_a_text_encoding(self) -> None:
        assert not is_known_encoding("rot13")


class TestDecodeSource:
    """Tests for decode_source."""

    def test_string_without_encoding_unchanged(self) -> None:
        assert decode_source("Ærø") == "Ærø"

    def test_bytes_without_encoding_are_utf8(self) -> None:
        assert decode_source("Ærø".encode("utf-8")) == "Ærø"

    def test_bytes_with_encoding(self) -> None:
        assert decode_source("Ærø".encode("cp1252"), "windows-1252") == "Ærø"

    def test_malformed_bytes_substituted(self) -> None:
        assert decode_source(b"caf\xff", "utf-8") == "caf\ufffd"

    def test_string_round_trip_replaces_unencodable(self) -> None:
        assert decode_source("Ærø", "ascii") == "?r?"
        assert decode_source("Æøé", "ascii") == "???"
        assert decode_source("Ærø", "latin-1") == "Ærø"

    def test_unknown_encoding_logs_and_continues(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.WARNING, logger="asciifold.encoding")
        assert decode_source("Ærø", "no-such-encoding") == "Ærø"
        assert decode_source("Ærø".encode("utf-8"), "no-such-encoding") == "Ærø"
        assert "Unknown source encoding 'no-such-encoding'" in caplog.text
