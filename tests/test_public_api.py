"""Tests for the names exported by the package."""

import asciifold


def test_all_names_exported() -> None:
    for name in asciifold.__all__:
        assert hasattr(asciifold, name), name


def test_end_to_end() -> None:
    assert asciifold.is_ascii("plain text")
    assert asciifold.convert_char("Æ") == "AE"
    assert asciifold.convert("Déjà vu") == "Deja vu"
    assert asciifold.convert("naïve_123!", None, asciifold.ConversionPolicy.ALPHANUMERIC) == "naive_123"
    config = asciifold.load_config({"policy": "alphanumeric"})
    assert asciifold.convert_with_config("Þe End", config) == "The_End"
