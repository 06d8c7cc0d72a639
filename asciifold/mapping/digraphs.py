"""Multi-letter transliterations for Greek, Coptic, Cyrillic and Glagolitic.

These letters have no single-letter ASCII equivalent and are spelled out
phonetically (Cyrillic SHCHA becomes "SHCH"). The empty-string class holds
the hard and soft signs, which have no sound of their own and are elided.
"""

from __future__ import annotations

# ==========================================================================
# PHONETIC DIGRAPHS
# Uppercase classes are fully uppercase. Mixed case is restored by the
# string transformer when the next character is lowercase.
# ==========================================================================
DIGRAPH_CLASSES: dict[str, tuple[str, ...]] = {
    "KS": (
        "\u039e",  # GREEK CAPITAL LETTER XI
        "\u046e",  # CYRILLIC CAPITAL LETTER KSI
        "\u2c9c",  # COPTIC CAPITAL LETTER KSI
    ),
    "ks": (
        "\u03be",  # GREEK SMALL LETTER XI
        "\u046f",  # CYRILLIC SMALL LETTER KSI
        "\u2c9d",  # COPTIC SMALL LETTER KSI
    ),
    "PS": (
        "\u03a8",  # GREEK CAPITAL LETTER PSI
        "\u1d2a",  # GREEK LETTER SMALL CAPITAL PSI
        "\u2cae",  # COPTIC CAPITAL LETTER PSI
        "\u0470",  # CYRILLIC CAPITAL LETTER PSI
    ),
    "ps": (
        "\u03c8",  # GREEK SMALL LETTER PSI
        "\u2caf",  # COPTIC SMALL LETTER PSI
        "\u0471",  # CYRILLIC SMALL LETTER PSI
    ),
    "YO": (
        "\u0401",  # CYRILLIC CAPITAL LETTER IO
        "\u046c",  # CYRILLIC CAPITAL LETTER IOTIFIED BIG YUS
        "\u2c26",  # GLAGOLITIC CAPITAL LETTER YO
        "\u2c29",  # GLAGOLITIC CAPITAL LETTER IOTATED BIG YUS
    ),
    "yo": (
        "\u0451",  # CYRILLIC SMALL LETTER IO
        "\u046d",  # CYRILLIC SMALL LETTER IOTIFIED BIG YUS
        "\u2c56",  # GLAGOLITIC SMALL LETTER YO
        "\u2c59",  # GLAGOLITIC SMALL LETTER IOTATED BIG YUS
    ),
    "YE": (
        "\u0404",  # CYRILLIC CAPITAL LETTER UKRAINIAN IE
        "\u0464",  # CYRILLIC CAPITAL LETTER IOTIFIED E
        "\ua656",  # CYRILLIC CAPITAL LETTER IOTIFIED A
        "\u0462",  # CYRILLIC CAPITAL LETTER YAT
        "\ua652",  # CYRILLIC CAPITAL LETTER IOTIFIED YAT
        "\u2c21",  # GLAGOLITIC CAPITAL LETTER YATI
    ),
    "ye": (
        "\u0454",  # CYRILLIC SMALL LETTER UKRAINIAN IE
        "\u0465",  # CYRILLIC SMALL LETTER IOTIFIED E
        "\ua657",  # CYRILLIC SMALL LETTER IOTIFIED A
        "\u0463",  # CYRILLIC SMALL LETTER YAT
        "\u1c87",  # CYRILLIC SMALL LETTER TALL YAT
        "\ua653",  # CYRILLIC SMALL LETTER IOTIFIED YAT
        "\u2c51",  # GLAGOLITIC SMALL LETTER YATI
    ),
    "YEN": (
        "\u0468",  # CYRILLIC CAPITAL LETTER IOTIFIED LITTLE YUS
        "\ua65c",  # CYRILLIC CAPITAL LETTER IOTIFIED CLOSED LITTLE YUS
        "\u2c27",  # GLAGOLITIC CAPITAL LETTER IOTATED SMALL YUS
    ),
    "yen": (
        "\u0469",  # CYRILLIC SMALL LETTER IOTIFIED LITTLE YUS
        "\ua65d",  # CYRILLIC SMALL LETTER IOTIFIED CLOSED LITTLE YUS
        "\u2c57",  # GLAGOLITIC SMALL LETTER IOTATED SMALL YUS
    ),
    "YI": (
        "\u0407",  # CYRILLIC CAPITAL LETTER YI
    ),
    "yi": (
        "\u0457",  # CYRILLIC SMALL LETTER YI
    ),
    "ZH": (
        "\u0416",  # CYRILLIC CAPITAL LETTER ZHE
        "\u2c06",  # GLAGOLITIC CAPITAL LETTER ZHIVETE
    ),
    "zh": (
        "\u0436",  # CYRILLIC SMALL LETTER ZHE
        "\u2c36",  # GLAGOLITIC SMALL LETTER ZHIVETE
    ),
    "KH": (
        "\u03a7",  # GREEK CAPITAL LETTER CHI
        "\u2cac",  # COPTIC CAPITAL LETTER KHI
        "\u0425",  # CYRILLIC CAPITAL LETTER HA
        "\u2c18",  # GLAGOLITIC CAPITAL LETTER HERU
        "\u2c22",  # GLAGOLITIC CAPITAL LETTER SPIDERY HA
    ),
    "kh": (
        "\u03c7",  # GREEK SMALL LETTER CHI
        "\u1d61",  # MODIFIER LETTER SMALL CHI
        "\u1d6a",  # GREEK SUBSCRIPT SMALL LETTER CHI
        "\u2cad",  # COPTIC SMALL LETTER KHI
        "\u0445",  # CYRILLIC SMALL LETTER HA
        "\u2c48",  # GLAGOLITIC SMALL LETTER HERU
        "\u2c52",  # GLAGOLITIC SMALL LETTER SPIDERY HA
    ),
    "TS": (
        "\u0426",  # CYRILLIC CAPITAL LETTER TSE
        "\u040b",  # CYRILLIC CAPITAL LETTER TSHE
        "\u2c1c",  # GLAGOLITIC CAPITAL LETTER TSI
    ),
    "CH": (
        "\u0427",  # CYRILLIC CAPITAL LETTER CHE
        "\u2c1d",  # GLAGOLITIC CAPITAL LETTER CHRIVI
        "\u2c2f",  # GLAGOLITIC CAPITAL LETTER CAUDATE CHRIVI
    ),
    "ch": (
        "\u0447",  # CYRILLIC SMALL LETTER CHE
        "\u2c4d",  # GLAGOLITIC SMALL LETTER CHRIVI
        "\u2c5f",  # GLAGOLITIC SMALL LETTER CAUDATE CHRIVI
    ),
    "SH": (
        "\u0428",  # CYRILLIC CAPITAL LETTER SHA
        "\u2c1e",  # GLAGOLITIC CAPITAL LETTER SHA
        "\u16f2",  # RUNIC LETTER SH
    ),
    "sh": (
        "\u0448",  # CYRILLIC SMALL LETTER SHA
        "\u2c4e",  # GLAGOLITIC SMALL LETTER SHA
    ),
    "SHCH": (
        "\u0429",  # CYRILLIC CAPITAL LETTER SHCHA
    ),
    "shch": (
        "\u0449",  # CYRILLIC SMALL LETTER SHCHA
    ),
    "YU": (
        "\u042e",  # CYRILLIC CAPITAL LETTER YU
        "\u2c23",  # GLAGOLITIC CAPITAL LETTER YU
    ),
    "yu": (
        "\u044e",  # CYRILLIC SMALL LETTER YU
        "\u2c53",  # GLAGOLITIC SMALL LETTER YU
    ),
    "YA": (
        "\u042f",  # CYRILLIC CAPITAL LETTER YA
    ),
    "ya": (
        "\u044f",  # CYRILLIC SMALL LETTER YA
    ),
    "SHT": (
        "\u2c1b",  # GLAGOLITIC CAPITAL LETTER SHTA
    ),
    "sht": (
        "\u2c4b",  # GLAGOLITIC SMALL LETTER SHTA
    ),
    # Hard and soft signs, elided
    "": (
        "\u042a",  # CYRILLIC CAPITAL LETTER HARD SIGN
        "\u044a",  # CYRILLIC SMALL LETTER HARD SIGN
        "\u1c86",  # CYRILLIC SMALL LETTER TALL HARD SIGN
        "\u042c",  # CYRILLIC CAPITAL LETTER SOFT SIGN
        "\u044c",  # CYRILLIC SMALL LETTER SOFT SIGN
        "\u2c20",  # GLAGOLITIC CAPITAL LETTER YERI
        "\u2c50",  # GLAGOLITIC SMALL LETTER YERI
        "\u2c2c",  # GLAGOLITIC CAPITAL LETTER SHTAPIC
        "\u2c5c",  # GLAGOLITIC SMALL LETTER SHTAPIC
    ),
}
