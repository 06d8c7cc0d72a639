"""Codepoint to ASCII mapping table and per-character conversion.

The data modules of this package declare the table as equivalence classes
(output -> codepoints). The classes are flattened into a read-only
codepoint -> output mapping the first time a lookup needs it, and the
result is shared for the lifetime of the process.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
import logging
from types import MappingProxyType

from ..classifier import is_ascii_char
from ..fallback import FallbackDecomposer
from .digraphs import DIGRAPH_CLASSES
from .letters import LETTER_CLASSES
from .numerals import NUMERAL_CLASSES
from .symbols import SYMBOL_CLASSES

_LOGGER = logging.getLogger(__name__)

# A codepoint claimed by more than one class belongs to the first one listed
EQUIVALENCE_CLASSES: tuple[Mapping[str, tuple[str, ...]], ...] = (
    LETTER_CLASSES,
    NUMERAL_CLASSES,
    SYMBOL_CLASSES,
    DIGRAPH_CLASSES,
)

_DEFAULT_DECOMPOSER = FallbackDecomposer()


def flatten_classes(
    classes: Iterable[Mapping[str, tuple[str, ...]]],
) -> dict[str, str]:
    """Flatten equivalence classes into a codepoint -> output dictionary.

    Args:
        classes: Class mappings in priority order.

    Returns:
        Dictionary with one entry per codepoint.
    """
    table: dict[str, str] = {}
    for group in classes:
        for output, chars in group.items():
            for char in chars:
                if char in table:
                    _LOGGER.debug(
                        "U+%04X already maps to %r, ignoring %r",
                        ord(char),
                        table[char],
                        output,
                    )
                    continue
                table[char] = output
    return table


@lru_cache(maxsize=1)
def get_mapping_table() -> Mapping[str, str]:
    """Return the read-only mapping table (built on first use, cached)."""
    table = flatten_classes(EQUIVALENCE_CLASSES)
    _LOGGER.debug("Built transliteration table with %d entries", len(table))
    return MappingProxyType(table)


def clear_mapping_cache() -> None:
    """Clear the mapping table cache.

    The next lookup rebuilds the table from the class declarations.
    """
    get_mapping_table.cache_clear()


def lookup(char: str) -> str | None:
    """Return the table entry for ``char``, or None if it has none."""
    return get_mapping_table().get(char)


def convert_char(char: str, decomposer: FallbackDecomposer | None = None) -> str:
    """Convert a single character to its ASCII rendering.

    ASCII characters are returned unchanged. Other characters are looked up
    in the mapping table; characters missing from it go through the fallback
    decomposer. The result may be empty, never an error.

    Args:
        char: Character to convert.
        decomposer: Fallback to use instead of the default one.

    Returns:
        ASCII string of zero or more characters.
    """
    if is_ascii_char(char):
        return char
    output = get_mapping_table().get(char)
    if output is not None:
        return output
    return (decomposer or _DEFAULT_DECOMPOSER).decompose(char)


def get_unmappable_chars(text: str) -> list[str]:
    """Get list of characters that cannot be transliterated.

    Useful for debugging or warning users about characters that will be
    dropped. A character counts when it has no table entry and the fallback
    produces nothing for it.

    Args:
        text: Text to check.

    Returns:
        List of unique characters, in order of first appearance.
    """
    if not text:
        return []

    table = get_mapping_table()
    unmappable: list[str] = []

    for char in text:
        if char in unmappable or is_ascii_char(char) or char in table:
            continue
        if not _DEFAULT_DECOMPOSER.decompose(char):
            unmappable.append(char)

    return unmappable
