"""Transliteration table for Unicode to ASCII conversion.

Table Layout:
-------------
Entries are declared grouped by output rather than by source character.
Every codepoint that should read as "A" sits in one class, whatever its
script, so related glyphs across Latin, Greek, Coptic, Cyrillic, Glagolitic
and runic fold to the same ASCII text:

1. LETTER_CLASSES: Latin letters with their look-alikes and sound-alikes,
   ligatures and parenthesized letters.

2. NUMERAL_CLASSES: digit forms and enclosed numbers up to twenty.

3. SYMBOL_CLASSES: punctuation and symbol look-alikes.

4. DIGRAPH_CLASSES: multi-letter spellings for Greek, Coptic, Cyrillic and
   Glagolitic, and the elided hard and soft signs.

Characters not in the table are handled by the fallback decomposer.
"""

from __future__ import annotations

from .digraphs import DIGRAPH_CLASSES
from .letters import LETTER_CLASSES
from .numerals import NUMERAL_CLASSES
from .symbols import SYMBOL_CLASSES
from .table import (
    EQUIVALENCE_CLASSES,
    clear_mapping_cache,
    convert_char,
    flatten_classes,
    get_mapping_table,
    get_unmappable_chars,
    lookup,
)

__all__ = [
    "DIGRAPH_CLASSES",
    "EQUIVALENCE_CLASSES",
    "LETTER_CLASSES",
    "NUMERAL_CLASSES",
    "SYMBOL_CLASSES",
    "clear_mapping_cache",
    "convert_char",
    "flatten_classes",
    "get_mapping_table",
    "get_unmappable_chars",
    "lookup",
]
