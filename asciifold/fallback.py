"""Fallback conversion for characters missing from the mapping table."""

from __future__ import annotations

import logging

from .normalizer import UnicodedataNormalizer, UnicodeNormalizer

_LOGGER = logging.getLogger(__name__)


class FallbackDecomposer:
    """Strip diacritics from a character through compatibility decomposition.

    The character is decomposed (NFKD), non-spacing marks are removed and
    the remainder is narrowed to ASCII. Parts without an ASCII form are
    dropped, so the result may be empty. Errors are logged and reported as
    an empty result.
    """

    def __init__(self, normalizer: UnicodeNormalizer | None = None) -> None:
        self._normalizer: UnicodeNormalizer = normalizer or UnicodedataNormalizer()

    @property
    def normalizer(self) -> UnicodeNormalizer:
        """Return the normalization service in use."""
        return self._normalizer

    def decompose(self, char: str) -> str:
        """Return the ASCII remainder of ``char`` after decomposition."""
        try:
            decomposed = self._normalizer.decompose(char)
            remainder = "".join(
                part
                for part in decomposed
                if not self._normalizer.is_non_spacing_mark(part)
            )
            return remainder.encode("ascii", errors="ignore").decode("ascii")
        except Exception as err:  # noqa: BLE001
            _LOGGER.debug("Fallback decomposition failed for %r: %s", char, err)
            return ""
