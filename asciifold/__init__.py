"""Unicode to ASCII transliteration.

This package converts arbitrary text to an ASCII-only rendering. Letters are
rendered by their pronunciation with English notation in mind; symbols,
ligatures and enclosed numerals by their look or meaning. Conversion is
character by character and ignores context, except that a multi-letter
rendering followed by lowercase text is itself written in lowercase after
its first letter.

Character Mapping Strategy:
---------------------------
1. ASCII characters are kept as they are.

2. The mapping table (see :mod:`asciifold.mapping`) gives the rendering of
   about 1,750 characters from the Latin, Greek, Coptic, Cyrillic,
   Glagolitic and runic scripts, enclosed alphanumerics and punctuation.

3. Anything else is decomposed (NFKD), stripped of combining marks and
   narrowed to ASCII. Characters with no ASCII remainder are dropped.

After conversion, a ConversionPolicy decides which ASCII characters may stay:
all of them (FULL), those valid in a path (SAFE_PATH) or file name
(SAFE_FILE_NAME), or letters and digits only (ALPHANUMERIC).
"""

from __future__ import annotations

from .classifier import is_ascii, is_ascii_char
from .config import CONFIG_SCHEMA, ConverterConfig, convert_with_config, load_config
from .const import ConversionPolicy
from .encoding import decode_source, get_codec_name
from .fallback import FallbackDecomposer
from .mapping import (
    clear_mapping_cache,
    convert_char,
    get_mapping_table,
    get_unmappable_chars,
    lookup,
)
from .normalizer import UnicodedataNormalizer, UnicodeNormalizer
from .platform_chars import get_invalid_filename_chars, get_invalid_path_chars
from .transform import apply_policy, convert

__version__ = "1.0.0"

__all__ = [
    "CONFIG_SCHEMA",
    "ConversionPolicy",
    "ConverterConfig",
    "FallbackDecomposer",
    "UnicodeNormalizer",
    "UnicodedataNormalizer",
    "apply_policy",
    "clear_mapping_cache",
    "convert",
    "convert_char",
    "convert_with_config",
    "decode_source",
    "get_codec_name",
    "get_invalid_filename_chars",
    "get_invalid_path_chars",
    "get_mapping_table",
    "get_unmappable_chars",
    "is_ascii",
    "is_ascii_char",
    "load_config",
    "lookup",
]
