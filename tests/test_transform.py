"""Tests for the string transformation pipeline."""

import pytest

from asciifold.const import ConversionPolicy
from asciifold.fallback import FallbackDecomposer
from asciifold.transform import TransformState, convert


class TestConvert:
    """Tests for convert with the FULL policy."""

    def test_empty(self) -> None:
        assert convert("") == ""

    def test_ascii_unchanged(self) -> None:
        assert convert("Hello, World! 123") == "Hello, World! 123"

    def test_accented_phrase(self) -> None:
        assert convert("Déjà vu") == "Deja vu"

    def test_cyrillic_word(self) -> None:
        assert convert("Москва") == "Moskva"

    def test_elided_sign(self) -> None:
        assert convert("Объект") == "Obekt"

    def test_ligature_and_sharp_s(self) -> None:
        assert convert("Straße ﬁnal") == "Strasse final"

    def test_enclosed_numerals(self) -> None:
        assert convert("①②③ ⒈") == "123 1."

    def test_only_unmappable_characters(self) -> None:
        assert convert("中文") == ""

    def test_trims_one_space_at_each_end(self) -> None:
        assert convert(" hi ") == "hi"
        assert convert("  hi") == " hi"

    def test_policy_as_string(self) -> None:
        assert convert("a b", policy="alphanumeric") == "a_b"

    def test_policy_name_any_case(self) -> None:
        assert convert("a b", policy="ALPHANUMERIC") == "a_b"
        assert convert("x|y", policy=" Safe_File_Name ", platform="windows") == "x y"
        assert convert("Þe", policy="FULL") == "The"

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValueError):
            convert("abc", policy="lossless")

    @pytest.mark.parametrize("text", ["Déjà vu", "Ǆemal Þórr", "Straße", "①②③", "ЩУКА"])
    def test_full_output_is_stable(self, text: str) -> None:
        once = convert(text)
        assert convert(once) == once

    def test_trailing_space_output_is_not_stable(self) -> None:
        """Only one space is trimmed from each end, so a second pass trims again."""
        once = convert("a  ")
        assert once == "a "
        assert convert(once) == "a"


class TestCasingFixup:
    """Tests for the casing of multi-letter renderings."""

    def test_digraph_before_lowercase(self) -> None:
        assert convert("Þe") == "The"

    def test_digraph_before_uppercase(self) -> None:
        assert convert("ÞE") == "THE"

    def test_digraph_at_end_keeps_case(self) -> None:
        assert convert("Þ") == "TH"
        assert convert("aÞ") == "aTH"

    def test_digraph_before_digit(self) -> None:
        assert convert("Þ1") == "TH1"

    def test_cyrillic_word_casing(self) -> None:
        assert convert("Щука") == "Shchuka"
        assert convert("ЩУКА") == "SHCHUKA"
        assert convert("Жена") == "Zhena"

    def test_elided_sign_blocks_lookahead(self) -> None:
        """An empty rendering does not count as a lowercase successor."""
        assert convert("ЖЬa") == "ZHa"

    def test_fallback_output_takes_part(self, recording_normalizer) -> None:  # type: ignore[no-untyped-def]
        decomposer = FallbackDecomposer(recording_normalizer)
        assert convert("a€b", decomposer=decomposer) == "aEurb"

    def test_last_output_follows_itself(self, mixed_case_normalizer) -> None:  # type: ignore[no-untyped-def]
        decomposer = FallbackDecomposer(mixed_case_normalizer)
        assert convert("x€", decomposer=decomposer) == "xab"
        assert convert("€X", decomposer=decomposer) == "aBX"
        assert convert("€Þ", decomposer=decomposer) == "aBTH"


class TestSourceEncoding:
    """Tests for convert with a source encoding."""

    def test_utf8_bytes(self) -> None:
        assert convert("café".encode("utf-8"), "utf-8") == "cafe"

    def test_bytes_default_to_utf8(self) -> None:
        assert convert("café".encode("utf-8")) == "cafe"

    def test_windows_code_page(self) -> None:
        assert convert("Привет".encode("cp1251"), "windows-1251") == "Privet"

    def test_koi8(self) -> None:
        assert convert("Привет".encode("koi8-r"), "KOI8-R") == "Privet"

    def test_utf16_unicode_name(self) -> None:
        assert convert("Ærø".encode("utf-16-le"), "Unicode") == "Aero"

    def test_string_through_narrow_encoding(self) -> None:
        """A string is passed through the encoding before conversion."""
        assert convert("café", "ascii") == "caf?"


class TestTransformState:
    """Tests for TransformState."""

    def test_holds_back_one_output(self) -> None:
        state = TransformState(replacement=" ")
        state.push("TH")
        assert state.parts == []
        assert state.pending == "TH"
        state.push("e")
        assert state.parts == ["Th"]
        assert state.flush() == "The"
        assert state.pending is None

    def test_flush_lowercases_tail_of_lowercase_start(self) -> None:
        state = TransformState(replacement=" ")
        state.push("aB")
        assert state.flush() == "ab"

    def test_flush_keeps_uppercase_start(self) -> None:
        state = TransformState(replacement=" ")
        state.push("TH")
        assert state.flush() == "TH"

    def test_flush_empty(self) -> None:
        assert TransformState(replacement=" ").flush() == ""

    def test_replacement_from_policy(self) -> None:
        assert ConversionPolicy.ALPHANUMERIC.replacement_char == "_"
        assert ConversionPolicy.SAFE_PATH.replacement_char == " "
        assert ConversionPolicy.FULL.replacement_char == " "
