"""Punctuation and symbol equivalence classes for the transliteration table.

Typographic quotes, dashes, brackets, ornaments and fullwidth forms fold to
the ASCII character they look like. Doubled marks such as "DOUBLE
EXCLAMATION MARK" keep both characters.
"""

from __future__ import annotations

# ==========================================================================
# PUNCTUATION AND SYMBOL LOOKALIKES
# ==========================================================================
SYMBOL_CLASSES: dict[str, tuple[str, ...]] = {
    '"': (
        "\u00ab",  # LEFT-POINTING DOUBLE ANGLE QUOTATION MARK
        "\u00bb",  # RIGHT-POINTING DOUBLE ANGLE QUOTATION MARK
        "\u201c",  # LEFT DOUBLE QUOTATION MARK
        "\u201d",  # RIGHT DOUBLE QUOTATION MARK
        "\u201e",  # DOUBLE LOW-9 QUOTATION MARK
        "\u2033",  # DOUBLE PRIME
        "\u2036",  # REVERSED DOUBLE PRIME
        "\u275d",  # HEAVY DOUBLE TURNED COMMA QUOTATION MARK ORNAMENT
        "\u275e",  # HEAVY DOUBLE COMMA QUOTATION MARK ORNAMENT
        "\u276e",  # HEAVY LEFT-POINTING ANGLE QUOTATION MARK ORNAMENT
        "\u276f",  # HEAVY RIGHT-POINTING ANGLE QUOTATION MARK ORNAMENT
        "\uff02",  # FULLWIDTH QUOTATION MARK
    ),
    "'": (
        "\u2018",  # LEFT SINGLE QUOTATION MARK
        "\u2019",  # RIGHT SINGLE QUOTATION MARK
        "\u201a",  # SINGLE LOW-9 QUOTATION MARK
        "\u201b",  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
        "\u2032",  # PRIME
        "\u2035",  # REVERSED PRIME
        "\u2039",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
        "\u203a",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
        "\u275b",  # HEAVY SINGLE TURNED COMMA QUOTATION MARK ORNAMENT
        "\u275c",  # HEAVY SINGLE COMMA QUOTATION MARK ORNAMENT
        "\uff07",  # FULLWIDTH APOSTROPHE
    ),
    "-": (
        "\u2010",  # HYPHEN
        "\u2011",  # NON-BREAKING HYPHEN
        "\u2012",  # FIGURE DASH
        "\u2013",  # EN DASH
        "\u2014",  # EM DASH
        "\u207b",  # SUPERSCRIPT MINUS
        "\u208b",  # SUBSCRIPT MINUS
        "\uff0d",  # FULLWIDTH HYPHEN-MINUS
    ),
    "[": (
        "\u2045",  # LEFT SQUARE BRACKET WITH QUILL
        "\u2772",  # LIGHT LEFT TORTOISE SHELL BRACKET ORNAMENT
        "\uff3b",  # FULLWIDTH LEFT SQUARE BRACKET
    ),
    "]": (
        "\u2046",  # RIGHT SQUARE BRACKET WITH QUILL
        "\u2773",  # LIGHT RIGHT TORTOISE SHELL BRACKET ORNAMENT
        "\uff3d",  # FULLWIDTH RIGHT SQUARE BRACKET
    ),
    "(": (
        "\u207d",  # SUPERSCRIPT LEFT PARENTHESIS
        "\u208d",  # SUBSCRIPT LEFT PARENTHESIS
        "\u2768",  # MEDIUM LEFT PARENTHESIS ORNAMENT
        "\u276a",  # MEDIUM FLATTENED LEFT PARENTHESIS ORNAMENT
        "\uff08",  # FULLWIDTH LEFT PARENTHESIS
    ),
    "((": (
        "\u2e28",  # LEFT DOUBLE PARENTHESIS
    ),
    ")": (
        "\u207e",  # SUPERSCRIPT RIGHT PARENTHESIS
        "\u208e",  # SUBSCRIPT RIGHT PARENTHESIS
        "\u2769",  # MEDIUM RIGHT PARENTHESIS ORNAMENT
        "\u276b",  # MEDIUM FLATTENED RIGHT PARENTHESIS ORNAMENT
        "\uff09",  # FULLWIDTH RIGHT PARENTHESIS
    ),
    "))": (
        "\u2e29",  # RIGHT DOUBLE PARENTHESIS
    ),
    "<": (
        "\u276c",  # MEDIUM LEFT-POINTING ANGLE BRACKET ORNAMENT
        "\u2770",  # HEAVY LEFT-POINTING ANGLE BRACKET ORNAMENT
        "\uff1c",  # FULLWIDTH LESS-THAN SIGN
    ),
    ">": (
        "\u276d",  # MEDIUM RIGHT-POINTING ANGLE BRACKET ORNAMENT
        "\u2771",  # HEAVY RIGHT-POINTING ANGLE BRACKET ORNAMENT
        "\uff1e",  # FULLWIDTH GREATER-THAN SIGN
    ),
    "{": (
        "\u2774",  # MEDIUM LEFT CURLY BRACKET ORNAMENT
        "\uff5b",  # FULLWIDTH LEFT CURLY BRACKET
    ),
    "}": (
        "\u2775",  # MEDIUM RIGHT CURLY BRACKET ORNAMENT
        "\uff5d",  # FULLWIDTH RIGHT CURLY BRACKET
    ),
    "+": (
        "\u207a",  # SUPERSCRIPT PLUS SIGN
        "\u208a",  # SUBSCRIPT PLUS SIGN
        "\uff0b",  # FULLWIDTH PLUS SIGN
        "\u2020",  # DAGGER
        "\u16ed",  # RUNIC CROSS PUNCTUATION
    ),
    "=": (
        "\u207c",  # SUPERSCRIPT EQUALS SIGN
        "\u208c",  # SUBSCRIPT EQUALS SIGN
        "\uff1d",  # FULLWIDTH EQUALS SIGN
    ),
    "!": (
        "\uff01",  # FULLWIDTH EXCLAMATION MARK
    ),
    "!!": (
        "\u203c",  # DOUBLE EXCLAMATION MARK
    ),
    "!?": (
        "\u2049",  # EXCLAMATION QUESTION MARK
    ),
    "#": (
        "\uff03",  # FULLWIDTH NUMBER SIGN
    ),
    "$": (
        "\uff04",  # FULLWIDTH DOLLAR SIGN
    ),
    "%": (
        "\u2052",  # COMMERCIAL MINUS SIGN
        "\uff05",  # FULLWIDTH PERCENT SIGN
    ),
    "&": (
        "\uff06",  # FULLWIDTH AMPERSAND
    ),
    "*": (
        "\u204e",  # LOW ASTERISK
        "\uff0a",  # FULLWIDTH ASTERISK
    ),
    ",": (
        "\uff0c",  # FULLWIDTH COMMA
    ),
    ".": (
        "\uff0e",  # FULLWIDTH FULL STOP
        "\u16eb",  # RUNIC SINGLE PUNCTUATION
    ),
    "/": (
        "\u2044",  # FRACTION SLASH
        "\uff0f",  # FULLWIDTH SOLIDUS
    ),
    ":": (
        "\uff1a",  # FULLWIDTH COLON
        "\u16ec",  # RUNIC MULTIPLE PUNCTUATION
    ),
    ";": (
        "\u204f",  # REVERSED SEMICOLON
        "\uff1b",  # FULLWIDTH SEMICOLON
    ),
    "?": (
        "\uff1f",  # FULLWIDTH QUESTION MARK
    ),
    "??": (
        "\u2047",  # DOUBLE QUESTION MARK
    ),
    "?!": (
        "\u2048",  # QUESTION EXCLAMATION MARK
    ),
    "@": (
        "\uff20",  # FULLWIDTH COMMERCIAL AT
    ),
    "\\": (
        "\uff3c",  # FULLWIDTH REVERSE SOLIDUS
    ),
    "^": (
        "\u2038",  # CARET
        "\uff3e",  # FULLWIDTH CIRCUMFLEX ACCENT
    ),
    "_": (
        "\uff3f",  # FULLWIDTH LOW LINE
    ),
    "~": (
        "\u2053",  # SWUNG DASH
        "\uff5e",  # FULLWIDTH TILDE
    ),
}
