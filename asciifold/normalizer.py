"""Unicode normalization service used by the fallback decomposer."""

from __future__ import annotations

from abc import ABC, abstractmethod
import unicodedata

NON_SPACING_MARK = "Mn"


class UnicodeNormalizer(ABC):
    """Compatibility decomposition and combining-mark classification."""

    @abstractmethod
    def decompose(self, text: str) -> str:
        """Return the NFKD decomposition of ``text``."""

    @abstractmethod
    def is_non_spacing_mark(self, char: str) -> bool:
        """Return True if ``char`` is a non-spacing combining mark."""


class UnicodedataNormalizer(UnicodeNormalizer):
    """Normalizer backed by the interpreter's Unicode database."""

    def decompose(self, text: str) -> str:
        return unicodedata.normalize("NFKD", text)

    def is_non_spacing_mark(self, char: str) -> bool:
        return unicodedata.category(char) == NON_SPACING_MARK
