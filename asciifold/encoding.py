"""Source encoding resolution and decoding.

This module provides the ENCODING_TO_CODEC dictionary and get_codec_name
function for converting the encoding names callers pass (IANA names, Windows
code page names, .NET style names such as "Unicode") to Python codec names,
and decode_source for turning source text into a string of code points.
"""

from __future__ import annotations

import logging

from .const import DEFAULT_SOURCE_ENCODING, SOURCE_ERRORS

_LOGGER = logging.getLogger(__name__)

# Mapping from common encoding names to Python codec names
ENCODING_TO_CODEC: dict[str, str] = {
    "ASCII": "ascii",
    "US-ASCII": "ascii",
    "UNICODE": "utf-16-le",
    "BIGENDIANUNICODE": "utf-16-be",
    "UTF-7": "utf-7",
    "UTF-8": "utf-8",
    "UTF8": "utf-8",
    "UTF-16": "utf-16",
    "UTF-16LE": "utf-16-le",
    "UTF-16BE": "utf-16-be",
    "UTF-32": "utf-32",
    "UTF-32LE": "utf-32-le",
    "UTF-32BE": "utf-32-be",
    "LATIN1": "latin-1",
    "ISO_8859-1": "iso-8859-1",
    "KOI8-R": "koi8-r",
    "KOI8-U": "koi8-u",
    "SHIFT_JIS": "shift_jis",
    "GB2312": "gb2312",
    "BIG5": "big5",
}


def get_codec_name(encoding: str) -> str:
    """Get Python codec name for an encoding name.

    Args:
        encoding: Encoding name (e.g., "UTF-8", "Unicode", "windows-1251").

    Returns:
        Python codec name.
    """
    key = encoding.strip().upper()
    if key in ENCODING_TO_CODEC:
        return ENCODING_TO_CODEC[key]

    normalized = key.replace("-", "_").replace(" ", "")

    # Handle CP prefix
    if normalized.startswith("CP") and normalized[2:].isdigit():
        return f"cp{normalized[2:]}"

    # Handle WINDOWS prefix ("windows-1252" is code page 1252)
    if normalized.startswith("WINDOWS_") and normalized[8:].isdigit():
        return f"cp{normalized[8:]}"

    # Handle ISO_8859 prefix
    if normalized.startswith("ISO_8859_") or normalized.startswith("ISO8859_"):
        num = normalized.split("_")[-1]
        return f"iso-8859-{num}"

    # Fall back to lowercase
    return encoding.strip().lower()


def is_known_encoding(encoding: str) -> bool:
    """Check whether an encoding name resolves to a usable text codec."""
    try:
        "".encode(get_codec_name(encoding))
    except LookupError:
        return False
    return True


def _decode_default(text: str | bytes) -> str:
    if isinstance(text, bytes):
        return text.decode(DEFAULT_SOURCE_ENCODING, errors=SOURCE_ERRORS)
    return text


def decode_source(text: str | bytes, source_encoding: str | None = None) -> str:
    """Turn source text into a string of code points.

    Bytes are decoded with the source encoding. A string is passed through
    the encoding (encoded, then decoded back), so characters the encoding
    cannot represent come out the way a round trip through that encoding
    would produce them. Malformed or unencodable input is substituted, never
    raised.

    Args:
        text: Source text as str or bytes.
        source_encoding: Encoding name, or None for text already decoded
            (bytes default to UTF-8).

    Returns:
        Decoded text.
    """
    if source_encoding is None:
        return _decode_default(text)

    codec = get_codec_name(source_encoding)
    try:
        if isinstance(text, bytes):
            return text.decode(codec, errors=SOURCE_ERRORS)
        return text.encode(codec, errors=SOURCE_ERRORS).decode(
            codec, errors=SOURCE_ERRORS
        )
    except LookupError:
        _LOGGER.warning(
            "Unknown source encoding '%s', using %s",
            source_encoding,
            DEFAULT_SOURCE_ENCODING,
        )
    return _decode_default(text)
