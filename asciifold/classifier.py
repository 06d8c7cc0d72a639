"""ASCII classification for characters and strings."""

from __future__ import annotations

from .const import ASCII_LIMIT
from .encoding import decode_source


def is_ascii_char(char: str | int) -> bool:
    """Return True if a character or codepoint is below 0x80."""
    codepoint = char if isinstance(char, int) else ord(char)
    return codepoint < ASCII_LIMIT


def is_ascii(text: str | bytes, source_encoding: str | None = None) -> bool:
    """Return True if every character of ``text`` is ASCII.

    With a source encoding the text is decoded first (see
    :func:`asciifold.encoding.decode_source`); without one a string is
    checked as is and bytes are checked byte by byte.
    """
    if source_encoding is not None:
        text = decode_source(text, source_encoding)
    return text.isascii()
