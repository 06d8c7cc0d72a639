"""Tests for the mapping table and single-character conversion."""

import logging

import pytest

from asciifold.mapping import (
    DIGRAPH_CLASSES,
    EQUIVALENCE_CLASSES,
    LETTER_CLASSES,
    clear_mapping_cache,
    convert_char,
    flatten_classes,
    get_mapping_table,
    get_unmappable_chars,
    lookup,
)


class TestConvertChar:
    """Tests for convert_char."""

    def test_ascii_identity(self) -> None:
        for code in range(0x80):
            assert convert_char(chr(code)) == chr(code)

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("À", "A"),
            ("ß", "ss"),
            ("Æ", "AE"),
            ("Ĳ", "IJ"),
            ("①", "1"),
            ("⒈", "1."),
            ("⑴", "(1)"),
            ("⑪", "11"),
            ("ǅ", "Dz"),
            ("ﬁ", "fi"),
            ("ﬃ", "ffi"),
            ("Þ", "TH"),
            ("þ", "th"),
            ("Щ", "SHCH"),
            ("щ", "shch"),
            ("Ж", "ZH"),
            ("«", '"'),
            ("’", "'"),
        ],
    )
    def test_table_entries(self, char: str, expected: str) -> None:
        assert convert_char(char) == expected

    @pytest.mark.parametrize("char", ["Ъ", "ъ", "Ь", "ь", "Ⱐ"])
    def test_hard_and_soft_signs_are_elided(self, char: str) -> None:
        assert convert_char(char) == ""

    @pytest.mark.parametrize(
        "char",
        [
            "A",  # LATIN CAPITAL LETTER A
            "Å",  # LATIN CAPITAL LETTER A WITH RING ABOVE
            "Α",  # GREEK CAPITAL LETTER ALPHA
            "А",  # CYRILLIC CAPITAL LETTER A
            "Ⰰ",  # GLAGOLITIC CAPITAL LETTER AZU
            "ᚨ",  # RUNIC LETTER ANSUZ A
            "Ａ",  # FULLWIDTH LATIN CAPITAL LETTER A
        ],
    )
    def test_scripts_fold_to_same_letter(self, char: str) -> None:
        assert convert_char(char) == "A"

    def test_missing_character_uses_fallback(self) -> None:
        assert lookup("№") is None
        assert convert_char("№") == "No"

    def test_astral_character_uses_fallback(self) -> None:
        """MATHEMATICAL BOLD CAPITAL A decomposes to a plain letter."""
        assert convert_char("\U0001d400") == "A"

    def test_unmappable_character_is_dropped(self) -> None:
        assert convert_char("中") == ""
        assert convert_char("€") == ""


class TestMappingTable:
    """Tests for the table built from the equivalence classes."""

    def test_table_is_cached(self) -> None:
        assert get_mapping_table() is get_mapping_table()

    def test_table_is_read_only(self, table) -> None:  # type: ignore[no-untyped-def]
        with pytest.raises(TypeError):
            table["À"] = "B"

    def test_clear_cache_rebuilds_equal_table(self, fresh_table_cache) -> None:  # type: ignore[no-untyped-def]
        first = get_mapping_table()
        clear_mapping_cache()
        second = get_mapping_table()
        assert first is not second
        assert dict(first) == dict(second)

    def test_no_codepoint_claimed_twice(self, table) -> None:  # type: ignore[no-untyped-def]
        declared = sum(
            len(chars) for group in EQUIVALENCE_CLASSES for chars in group.values()
        )
        assert len(table) == declared

    def test_keys_are_single_non_ascii_characters(self, table) -> None:  # type: ignore[no-untyped-def]
        assert all(len(key) == 1 and ord(key) >= 0x80 for key in table)

    def test_outputs_are_printable_ascii(self, table) -> None:  # type: ignore[no-untyped-def]
        for output in table.values():
            assert all(0x20 <= ord(char) <= 0x7E for char in output), output

    def test_every_class_is_in_table(self, table) -> None:  # type: ignore[no-untyped-def]
        for output, chars in LETTER_CLASSES.items():
            for char in chars:
                assert table[char] == output
        assert set(DIGRAPH_CLASSES[""]) <= {
            key for key, value in table.items() if value == ""
        }

    def test_lookup_hit_and_miss(self) -> None:
        assert lookup("À") == "A"
        assert lookup("中") is None


class TestFlattenClasses:
    """Tests for flatten_classes."""

    def test_groups_by_output(self) -> None:
        result = flatten_classes([{"A": ("À", "Á"), "B": ("Β",)}])
        assert result == {"À": "A", "Á": "A", "Β": "B"}

    def test_first_claim_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="asciifold.mapping.table")
        result = flatten_classes([{"A": ("À",)}, {"B": ("À",)}])
        assert result == {"À": "A"}
        assert "U+00C0 already maps to 'A'" in caplog.text


class TestGetUnmappableChars:
    """Tests for get_unmappable_chars."""

    def test_empty(self) -> None:
        assert get_unmappable_chars("") == []

    def test_ascii_and_table_characters(self) -> None:
        assert get_unmappable_chars("Ærø Ъ №") == []

    def test_unique_in_order(self) -> None:
        assert get_unmappable_chars("a中é€中") == ["中", "€"]
