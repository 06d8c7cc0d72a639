"""Tests for the fallback decomposer."""

import logging

import pytest

from asciifold.fallback import FallbackDecomposer
from asciifold.normalizer import UnicodedataNormalizer


class TestFallbackDecomposer:
    """Tests for FallbackDecomposer with the default normalizer."""

    @pytest.fixture
    def decomposer(self) -> FallbackDecomposer:
        return FallbackDecomposer()

    def test_default_normalizer(self, decomposer: FallbackDecomposer) -> None:
        assert isinstance(decomposer.normalizer, UnicodedataNormalizer)

    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("é", "e"),
            ("Å", "A"),
            ("ṩ", "s"),
            ("№", "No"),
            ("™", "TM"),
            ("㎏", "kg"),
            ("\u00a0", " "),
        ],
    )
    def test_decomposes_to_ascii(
        self, decomposer: FallbackDecomposer, char: str, expected: str
    ) -> None:
        assert decomposer.decompose(char) == expected

    @pytest.mark.parametrize("char", ["中", "€", "©", "\u0301"])
    def test_no_ascii_remainder(self, decomposer: FallbackDecomposer, char: str) -> None:
        assert decomposer.decompose(char) == ""


class TestInjectedNormalizer:
    """Tests for FallbackDecomposer with a replacement normalization service."""

    def test_uses_injected_normalizer(self, recording_normalizer) -> None:  # type: ignore[no-untyped-def]
        decomposer = FallbackDecomposer(recording_normalizer)
        assert decomposer.decompose("€") == "EUR"
        assert recording_normalizer.calls == ["€"]

    def test_failure_returns_empty_and_logs(
        self, broken_normalizer, caplog: pytest.LogCaptureFixture  # type: ignore[no-untyped-def]
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="asciifold.fallback")
        decomposer = FallbackDecomposer(broken_normalizer)
        assert decomposer.decompose("é") == ""
        assert "Fallback decomposition failed" in caplog.text
        assert "normalization service unavailable" in caplog.text
