from collections.abc import Generator, Mapping

import pytest

from asciifold.mapping import clear_mapping_cache, get_mapping_table
from asciifold.normalizer import UnicodeNormalizer


class RecordingNormalizer(UnicodeNormalizer):
    """Normalizer that returns a fixed decomposition and records its input."""

    def __init__(self, decomposition: str) -> None:
        self.decomposition = decomposition
        self.calls: list[str] = []

    def decompose(self, text: str) -> str:
        self.calls.append(text)
        return self.decomposition

    def is_non_spacing_mark(self, char: str) -> bool:
        return False


class BrokenNormalizer(UnicodeNormalizer):
    """Normalizer whose decomposition always fails."""

    def decompose(self, text: str) -> str:
        raise RuntimeError("normalization service unavailable")

    def is_non_spacing_mark(self, char: str) -> bool:
        return False


@pytest.fixture
def broken_normalizer() -> BrokenNormalizer:
    return BrokenNormalizer()


@pytest.fixture
def recording_normalizer() -> RecordingNormalizer:
    """Normalizer decomposing every character to "EUR"."""
    return RecordingNormalizer("EUR")


@pytest.fixture
def table() -> Mapping[str, str]:
    """Return the shared mapping table."""
    return get_mapping_table()


@pytest.fixture
def fresh_table_cache() -> Generator[None, None, None]:
    """Start and finish the test with an empty mapping table cache."""
    clear_mapping_cache()
    yield
    clear_mapping_cache()


@pytest.fixture
def mixed_case_normalizer() -> RecordingNormalizer:
    """Normalizer decomposing every character to "aB"."""
    return RecordingNormalizer("aB")
