"""Letter equivalence classes for the transliteration table.

Each key is the ASCII output and each value lists every codepoint that folds
to it, regardless of source script. Latin letters with diacritics, small
capitals, fullwidth and circled forms share a class with the Greek, Coptic,
Cyrillic, Glagolitic and runic letters pronounced the same way.

Parenthesized classes ("(a)") cover the parenthesized Latin letters, and the
multi-letter classes cover ligatures and letters whose sound needs more than
one ASCII letter.
"""

from __future__ import annotations

# ==========================================================================
# LATIN ALPHABET A-Z
# Keys appear in alphabetical order of their base letter. Uppercase and
# lowercase outputs are kept in separate classes.
# ==========================================================================
LETTER_CLASSES: dict[str, tuple[str, ...]] = {
    "A": (
        "\u00c0",  # LATIN CAPITAL LETTER A WITH GRAVE
        "\u00c1",  # LATIN CAPITAL LETTER A WITH ACUTE
        "\u00c2",  # LATIN CAPITAL LETTER A WITH CIRCUMFLEX
        "\u00c3",  # LATIN CAPITAL LETTER A WITH TILDE
        "\u00c4",  # LATIN CAPITAL LETTER A WITH DIAERESIS
        "\u00c5",  # LATIN CAPITAL LETTER A WITH RING ABOVE
        "\u0100",  # LATIN CAPITAL LETTER A WITH MACRON
        "\u0102",  # LATIN CAPITAL LETTER A WITH BREVE
        "\u0104",  # LATIN CAPITAL LETTER A WITH OGONEK
        "\u01cd",  # LATIN CAPITAL LETTER A WITH CARON
        "\u01de",  # LATIN CAPITAL LETTER A WITH DIAERESIS AND MACRON
        "\u01e0",  # LATIN CAPITAL LETTER A WITH DOT ABOVE AND MACRON
        "\u01fa",  # LATIN CAPITAL LETTER A WITH RING ABOVE AND ACUTE
        "\u0200",  # LATIN CAPITAL LETTER A WITH DOUBLE GRAVE
        "\u0202",  # LATIN CAPITAL LETTER A WITH INVERTED BREVE
        "\u0226",  # LATIN CAPITAL LETTER A WITH DOT ABOVE
        "\u023a",  # LATIN CAPITAL LETTER A WITH STROKE
        "\u1d00",  # LATIN LETTER SMALL CAPITAL A
        "\u1e00",  # LATIN CAPITAL LETTER A WITH RING BELOW
        "\u1ea0",  # LATIN CAPITAL LETTER A WITH DOT BELOW
        "\u1ea2",  # LATIN CAPITAL LETTER A WITH HOOK ABOVE
        "\u1ea4",  # LATIN CAPITAL LETTER A WITH CIRCUMFLEX AND ACUTE
        "\u1ea6",  # LATIN CAPITAL LETTER A WITH CIRCUMFLEX AND GRAVE
        "\u1ea8",  # LATIN CAPITAL LETTER A WITH CIRCUMFLEX AND HOOK ABOVE
        "\u1eaa",  # LATIN CAPITAL LETTER A WITH CIRCUMFLEX AND TILDE
        "\u1eac",  # LATIN CAPITAL LETTER A WITH CIRCUMFLEX AND DOT BELOW
        "\u1eae",  # LATIN CAPITAL LETTER A WITH BREVE AND ACUTE
        "\u1eb0",  # LATIN CAPITAL LETTER A WITH BREVE AND GRAVE
        "\u1eb2",  # LATIN CAPITAL LETTER A WITH BREVE AND HOOK ABOVE
        "\u1eb4",  # LATIN CAPITAL LETTER A WITH BREVE AND TILDE
        "\u1eb6",  # LATIN CAPITAL LETTER A WITH BREVE AND DOT BELOW
        "\u24b6",  # CIRCLED LATIN CAPITAL LETTER A
        "\uff21",  # FULLWIDTH LATIN CAPITAL LETTER A
        "\u0391",  # GREEK CAPITAL LETTER ALPHA
        "\u0386",  # GREEK CAPITAL LETTER ALPHA WITH TONOS
        "\u2c80",  # COPTIC CAPITAL LETTER ALFA
        "\u2c6d",  # LATIN CAPITAL LETTER ALPHA
        "\u0410",  # CYRILLIC CAPITAL LETTER A
        "\u2c00",  # GLAGOLITIC CAPITAL LETTER AZU
        "\u2c2d",  # GLAGOLITIC CAPITAL LETTER TROKUTASTI A
        "\u16a8",  # RUNIC LETTER ANSUZ A
        "\u16aa",  # RUNIC LETTER AC A
        "\u16ab",  # RUNIC LETTER AESC
        "\u16ac",  # RUNIC LETTER LONG-BRANCH-OSS O
        "\u16ad",  # RUNIC LETTER SHORT-TWIG-OSS O
        "\u16c6",  # RUNIC LETTER SHORT-TWIG-AR A
        "\u16f8",  # RUNIC LETTER FRANKS CASKET AESC
    ),
    "a": (
        "\u00e0",  # LATIN SMALL LETTER A WITH GRAVE
        "\u00e1",  # LATIN SMALL LETTER A WITH ACUTE
        "\u00e2",  # LATIN SMALL LETTER A WITH CIRCUMFLEX
        "\u00e3",  # LATIN SMALL LETTER A WITH TILDE
        "\u00e4",  # LATIN SMALL LETTER A WITH DIAERESIS
        "\u00e5",  # LATIN SMALL LETTER A WITH RING ABOVE
        "\u0101",  # LATIN SMALL LETTER A WITH MACRON
        "\u0103",  # LATIN SMALL LETTER A WITH BREVE
        "\u0105",  # LATIN SMALL LETTER A WITH OGONEK
        "\u01ce",  # LATIN SMALL LETTER A WITH CARON
        "\u01df",  # LATIN SMALL LETTER A WITH DIAERESIS AND MACRON
        "\u01e1",  # LATIN SMALL LETTER A WITH DOT ABOVE AND MACRON
        "\u01fb",  # LATIN SMALL LETTER A WITH RING ABOVE AND ACUTE
        "\u0201",  # LATIN SMALL LETTER A WITH DOUBLE GRAVE
        "\u0203",  # LATIN SMALL LETTER A WITH INVERTED BREVE
        "\u0227",  # LATIN SMALL LETTER A WITH DOT ABOVE
        "\u0250",  # LATIN SMALL LETTER TURNED A
        "\u1d8f",  # LATIN SMALL LETTER A WITH RETROFLEX HOOK
        "\u1e01",  # LATIN SMALL LETTER A WITH RING BELOW
        "\u1e9a",  # LATIN SMALL LETTER A WITH RIGHT HALF RING
        "\u1ea1",  # LATIN SMALL LETTER A WITH DOT BELOW
        "\u1ea3",  # LATIN SMALL LETTER A WITH HOOK ABOVE
        "\u1ea5",  # LATIN SMALL LETTER A WITH CIRCUMFLEX AND ACUTE
        "\u1ea7",  # LATIN SMALL LETTER A WITH CIRCUMFLEX AND GRAVE
        "\u1ea9",  # LATIN SMALL LETTER A WITH CIRCUMFLEX AND HOOK ABOVE
        "\u1eab",  # LATIN SMALL LETTER A WITH CIRCUMFLEX AND TILDE
        "\u1ead",  # LATIN SMALL LETTER A WITH CIRCUMFLEX AND DOT BELOW
        "\u1eaf",  # LATIN SMALL LETTER A WITH BREVE AND ACUTE
        "\u1eb1",  # LATIN SMALL LETTER A WITH BREVE AND GRAVE
        "\u1eb3",  # LATIN SMALL LETTER A WITH BREVE AND HOOK ABOVE
        "\u1eb5",  # LATIN SMALL LETTER A WITH BREVE AND TILDE
        "\u1eb7",  # LATIN SMALL LETTER A WITH BREVE AND DOT BELOW
        "\u2090",  # LATIN SUBSCRIPT SMALL LETTER A
        "\u24d0",  # CIRCLED LATIN SMALL LETTER A
        "\u2c65",  # LATIN SMALL LETTER A WITH STROKE
        "\u2c6f",  # LATIN CAPITAL LETTER TURNED A
        "\uff41",  # FULLWIDTH LATIN SMALL LETTER A
        "\u00aa",  # FEMININE ORDINAL INDICATOR
        "\u03b1",  # GREEK SMALL LETTER ALPHA
        "\u03ac",  # GREEK SMALL LETTER ALPHA WITH TONOS
        "\u2c81",  # COPTIC SMALL LETTER ALFA
        "\u0251",  # LATIN SMALL LETTER ALPHA
        "\u0252",  # LATIN SMALL LETTER TURNED ALPHA
        "\u1d90",  # LATIN SMALL LETTER ALPHA WITH RETROFLEX HOOK
        "\u1d45",  # MODIFIER LETTER SMALL ALPHA
        "\u1d9b",  # MODIFIER LETTER SMALL TURNED ALPHA
        "\u0430",  # CYRILLIC SMALL LETTER A
        "\u2c30",  # GLAGOLITIC SMALL LETTER AZU
        "\u2c5d",  # GLAGOLITIC SMALL LETTER TROKUTASTI A
    ),
    "AA": (
        "\ua732",  # LATIN CAPITAL LETTER AA
    ),
    "AC": (
        "\u16f7",  # RUNIC LETTER FRANKS CASKET AC
    ),
    "AE": (
        "\u00c6",  # LATIN CAPITAL LETTER AE
        "\u01e2",  # LATIN CAPITAL LETTER AE WITH MACRON
        "\u01fc",  # LATIN CAPITAL LETTER AE WITH ACUTE
        "\u1d01",  # LATIN LETTER SMALL CAPITAL AE
        "\u16c5",  # RUNIC LETTER LONG-BRANCH-AR AE
    ),
    "AO": (
        "\ua734",  # LATIN CAPITAL LETTER AO
    ),
    "AU": (
        "\ua736",  # LATIN CAPITAL LETTER AU
    ),
    "AV": (
        "\ua738",  # LATIN CAPITAL LETTER AV
        "\ua73a",  # LATIN CAPITAL LETTER AV WITH HORIZONTAL BAR
    ),
    "AY": (
        "\ua73c",  # LATIN CAPITAL LETTER AY
    ),
    "(a)": (
        "\u249c",  # PARENTHESIZED LATIN SMALL LETTER A
    ),
    "aa": (
        "\ua733",  # LATIN SMALL LETTER AA
    ),
    "ae": (
        "\u00e6",  # LATIN SMALL LETTER AE
        "\u01e3",  # LATIN SMALL LETTER AE WITH MACRON
        "\u01fd",  # LATIN SMALL LETTER AE WITH ACUTE
        "\u1d02",  # LATIN SMALL LETTER TURNED AE
    ),
    "ao": (
        "\ua735",  # LATIN SMALL LETTER AO
    ),
    "au": (
        "\ua737",  # LATIN SMALL LETTER AU
    ),
    "av": (
        "\ua739",  # LATIN SMALL LETTER AV
        "\ua73b",  # LATIN SMALL LETTER AV WITH HORIZONTAL BAR
    ),
    "ay": (
        "\ua73d",  # LATIN SMALL LETTER AY
    ),
    "B": (
        "\u0181",  # LATIN CAPITAL LETTER B WITH HOOK
        "\u0182",  # LATIN CAPITAL LETTER B WITH TOPBAR
        "\u0243",  # LATIN CAPITAL LETTER B WITH STROKE
        "\u0299",  # LATIN LETTER SMALL CAPITAL B
        "\u1d03",  # LATIN LETTER SMALL CAPITAL BARRED B
        "\u1e02",  # LATIN CAPITAL LETTER B WITH DOT ABOVE
        "\u1e04",  # LATIN CAPITAL LETTER B WITH DOT BELOW
        "\u1e06",  # LATIN CAPITAL LETTER B WITH LINE BELOW
        "\u24b7",  # CIRCLED LATIN CAPITAL LETTER B
        "\uff22",  # FULLWIDTH LATIN CAPITAL LETTER B
        "\u0392",  # GREEK CAPITAL LETTER BETA
        "\ua7b4",  # LATIN CAPITAL LETTER BETA
        "\u0411",  # CYRILLIC CAPITAL LETTER BE
        "\u2c01",  # GLAGOLITIC CAPITAL LETTER BUKY
        "\u16d2",  # RUNIC LETTER BERKANAN BEORC BJARKAN B
        "\u16d3",  # RUNIC LETTER SHORT-TWIG-BJARKAN B
    ),
    "b": (
        "\u0180",  # LATIN SMALL LETTER B WITH STROKE
        "\u0183",  # LATIN SMALL LETTER B WITH TOPBAR
        "\u0253",  # LATIN SMALL LETTER B WITH HOOK
        "\u1d6c",  # LATIN SMALL LETTER B WITH MIDDLE TILDE
        "\u1d80",  # LATIN SMALL LETTER B WITH PALATAL HOOK
        "\u1e03",  # LATIN SMALL LETTER B WITH DOT ABOVE
        "\u1e05",  # LATIN SMALL LETTER B WITH DOT BELOW
        "\u1e07",  # LATIN SMALL LETTER B WITH LINE BELOW
        "\u24d1",  # CIRCLED LATIN SMALL LETTER B
        "\uff42",  # FULLWIDTH LATIN SMALL LETTER B
        "\u03b2",  # GREEK SMALL LETTER BETA
        "\u03d0",  # GREEK BETA SYMBOL
        "\u1d5d",  # MODIFIER LETTER SMALL BETA
        "\u1d66",  # GREEK SUBSCRIPT SMALL LETTER BETA
        "\ua7b5",  # LATIN SMALL LETTER BETA
        "\u0431",  # CYRILLIC SMALL LETTER BE
        "\u2c31",  # GLAGOLITIC SMALL LETTER BUKY
    ),
    "(b)": (
        "\u249d",  # PARENTHESIZED LATIN SMALL LETTER B
    ),
    "C": (
        "\u00c7",  # LATIN CAPITAL LETTER C WITH CEDILLA
        "\u0106",  # LATIN CAPITAL LETTER C WITH ACUTE
        "\u0108",  # LATIN CAPITAL LETTER C WITH CIRCUMFLEX
        "\u010a",  # LATIN CAPITAL LETTER C WITH DOT ABOVE
        "\u010c",  # LATIN CAPITAL LETTER C WITH CARON
        "\u0187",  # LATIN CAPITAL LETTER C WITH HOOK
        "\u023b",  # LATIN CAPITAL LETTER C WITH STROKE
        "\u0297",  # LATIN LETTER STRETCHED C
        "\u1d04",  # LATIN LETTER SMALL CAPITAL C
        "\u1e08",  # LATIN CAPITAL LETTER C WITH CEDILLA AND ACUTE
        "\u24b8",  # CIRCLED LATIN CAPITAL LETTER C
        "\uff23",  # FULLWIDTH LATIN CAPITAL LETTER C
        "\u16cd",  # RUNIC LETTER C
        "\u16b3",  # RUNIC LETTER CEN
    ),
    "c": (
        "\u00e7",  # LATIN SMALL LETTER C WITH CEDILLA
        "\u0107",  # LATIN SMALL LETTER C WITH ACUTE
        "\u0109",  # LATIN SMALL LETTER C WITH CIRCUMFLEX
        "\u010b",  # LATIN SMALL LETTER C WITH DOT ABOVE
        "\u010d",  # LATIN SMALL LETTER C WITH CARON
        "\u0188",  # LATIN SMALL LETTER C WITH HOOK
        "\u023c",  # LATIN SMALL LETTER C WITH STROKE
        "\u0255",  # LATIN SMALL LETTER C WITH CURL
        "\u1e09",  # LATIN SMALL LETTER C WITH CEDILLA AND ACUTE
        "\u2184",  # LATIN SMALL LETTER REVERSED C
        "\u24d2",  # CIRCLED LATIN SMALL LETTER C
        "\ua73e",  # LATIN CAPITAL LETTER REVERSED C WITH DOT
        "\ua73f",  # LATIN SMALL LETTER REVERSED C WITH DOT
        "\uff43",  # FULLWIDTH LATIN SMALL LETTER C
        "\u00a2",  # CENT SIGN
    ),
    "(c)": (
        "\u249e",  # PARENTHESIZED LATIN SMALL LETTER C
    ),
    "D": (
        "\u00d0",  # LATIN CAPITAL LETTER ETH
        "\u010e",  # LATIN CAPITAL LETTER D WITH CARON
        "\u0110",  # LATIN CAPITAL LETTER D WITH STROKE
        "\u0189",  # LATIN CAPITAL LETTER AFRICAN D
        "\u018a",  # LATIN CAPITAL LETTER D WITH HOOK
        "\u018b",  # LATIN CAPITAL LETTER D WITH TOPBAR
        "\u1d05",  # LATIN LETTER SMALL CAPITAL D
        "\u1d06",  # LATIN LETTER SMALL CAPITAL ETH
        "\u1e0a",  # LATIN CAPITAL LETTER D WITH DOT ABOVE
        "\u1e0c",  # LATIN CAPITAL LETTER D WITH DOT BELOW
        "\u1e0e",  # LATIN CAPITAL LETTER D WITH LINE BELOW
        "\u1e10",  # LATIN CAPITAL LETTER D WITH CEDILLA
        "\u1e12",  # LATIN CAPITAL LETTER D WITH CIRCUMFLEX BELOW
        "\u24b9",  # CIRCLED LATIN CAPITAL LETTER D
        "\ua779",  # LATIN CAPITAL LETTER INSULAR D
        "\uff24",  # FULLWIDTH LATIN CAPITAL LETTER D
        "\u0394",  # GREEK CAPITAL LETTER DELTA
        "\u2c86",  # COPTIC CAPITAL LETTER DALDA
        "\u0414",  # CYRILLIC CAPITAL LETTER DE
        "\u2c04",  # GLAGOLITIC CAPITAL LETTER DOBRO
        "\u16de",  # RUNIC LETTER DAGAZ DAEG D
        "\u16d1",  # RUNIC LETTER D
    ),
    "d": (
        "\u00f0",  # LATIN SMALL LETTER ETH
        "\u010f",  # LATIN SMALL LETTER D WITH CARON
        "\u0111",  # LATIN SMALL LETTER D WITH STROKE
        "\u018c",  # LATIN SMALL LETTER D WITH TOPBAR
        "\u0221",  # LATIN SMALL LETTER D WITH CURL
        "\u0256",  # LATIN SMALL LETTER D WITH TAIL
        "\u0257",  # LATIN SMALL LETTER D WITH HOOK
        "\u1d6d",  # LATIN SMALL LETTER D WITH MIDDLE TILDE
        "\u1d81",  # LATIN SMALL LETTER D WITH PALATAL HOOK
        "\u1d91",  # LATIN SMALL LETTER D WITH HOOK AND TAIL
        "\u1e0b",  # LATIN SMALL LETTER D WITH DOT ABOVE
        "\u1e0d",  # LATIN SMALL LETTER D WITH DOT BELOW
        "\u1e0f",  # LATIN SMALL LETTER D WITH LINE BELOW
        "\u1e11",  # LATIN SMALL LETTER D WITH CEDILLA
        "\u1e13",  # LATIN SMALL LETTER D WITH CIRCUMFLEX BELOW
        "\u24d3",  # CIRCLED LATIN SMALL LETTER D
        "\ua77a",  # LATIN SMALL LETTER INSULAR D
        "\uff44",  # FULLWIDTH LATIN SMALL LETTER D
        "\u03b4",  # GREEK SMALL LETTER DELTA
        "\u1d5f",  # MODIFIER LETTER SMALL DELTA
        "\u2c87",  # COPTIC SMALL LETTER DALDA
        "\u1e9f",  # LATIN SMALL LETTER DELTA
        "\u018d",  # LATIN SMALL LETTER TURNED DELTA
        "\u0434",  # CYRILLIC SMALL LETTER DE
        "\u1c81",  # CYRILLIC SMALL LETTER LONG-LEGGED DE
        "\u2c34",  # GLAGOLITIC SMALL LETTER DOBRO
    ),
    "DZ": (
        "\u01c4",  # LATIN CAPITAL LETTER DZ WITH CARON
        "\u01f1",  # LATIN CAPITAL LETTER DZ
        "\ua682",  # CYRILLIC CAPITAL LETTER DZWE
        "\u0405",  # CYRILLIC CAPITAL LETTER DZE
        "\ua644",  # CYRILLIC CAPITAL LETTER REVERSED DZE
        "\u0402",  # CYRILLIC CAPITAL LETTER DJE
        "\u0403",  # CYRILLIC CAPITAL LETTER GJE
        "\ua648",  # CYRILLIC CAPITAL LETTER DJERV
        "\u040f",  # CYRILLIC CAPITAL LETTER DZHE
        "\ua642",  # CYRILLIC CAPITAL LETTER DZELO
        "\u2c07",  # GLAGOLITIC CAPITAL LETTER DZELO
        "\u2c0c",  # GLAGOLITIC CAPITAL LETTER DJERVI
    ),
    "Dz": (
        "\u01c5",  # LATIN CAPITAL LETTER D WITH SMALL LETTER Z WITH CARON
        "\u01f2",  # LATIN CAPITAL LETTER D WITH SMALL LETTER Z
    ),
    "(d)": (
        "\u249f",  # PARENTHESIZED LATIN SMALL LETTER D
    ),
    "db": (
        "\u0238",  # LATIN SMALL LETTER DB DIGRAPH
    ),
    "dz": (
        "\u01c6",  # LATIN SMALL LETTER DZ WITH CARON
        "\u01f3",  # LATIN SMALL LETTER DZ
        "\u02a3",  # LATIN SMALL LETTER DZ DIGRAPH
        "\u02a5",  # LATIN SMALL LETTER DZ DIGRAPH WITH CURL
        "\ua683",  # CYRILLIC SMALL LETTER DZWE
        "\u0455",  # CYRILLIC SMALL LETTER DZE
        "\ua645",  # CYRILLIC SMALL LETTER REVERSED DZE
        "\u0452",  # CYRILLIC SMALL LETTER DJE
        "\u0453",  # CYRILLIC SMALL LETTER GJE
        "\ua649",  # CYRILLIC SMALL LETTER DJERV
        "\u045f",  # CYRILLIC SMALL LETTER DZHE
        "\ua643",  # CYRILLIC SMALL LETTER DZELO
        "\u2c37",  # GLAGOLITIC SMALL LETTER DZELO
        "\u2c3c",  # GLAGOLITIC SMALL LETTER DJERVI
    ),
    "E": (
        "\u00c8",  # LATIN CAPITAL LETTER E WITH GRAVE
        "\u00c9",  # LATIN CAPITAL LETTER E WITH ACUTE
        "\u00ca",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX
        "\u00cb",  # LATIN CAPITAL LETTER E WITH DIAERESIS
        "\u0112",  # LATIN CAPITAL LETTER E WITH MACRON
        "\u0114",  # LATIN CAPITAL LETTER E WITH BREVE
        "\u0116",  # LATIN CAPITAL LETTER E WITH DOT ABOVE
        "\u0118",  # LATIN CAPITAL LETTER E WITH OGONEK
        "\u011a",  # LATIN CAPITAL LETTER E WITH CARON
        "\u018e",  # LATIN CAPITAL LETTER REVERSED E
        "\u0190",  # LATIN CAPITAL LETTER OPEN E
        "\u0204",  # LATIN CAPITAL LETTER E WITH DOUBLE GRAVE
        "\u0206",  # LATIN CAPITAL LETTER E WITH INVERTED BREVE
        "\u0228",  # LATIN CAPITAL LETTER E WITH CEDILLA
        "\u0246",  # LATIN CAPITAL LETTER E WITH STROKE
        "\u1d07",  # LATIN LETTER SMALL CAPITAL E
        "\u1e14",  # LATIN CAPITAL LETTER E WITH MACRON AND GRAVE
        "\u1e16",  # LATIN CAPITAL LETTER E WITH MACRON AND ACUTE
        "\u1e18",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX BELOW
        "\u1e1a",  # LATIN CAPITAL LETTER E WITH TILDE BELOW
        "\u1e1c",  # LATIN CAPITAL LETTER E WITH CEDILLA AND BREVE
        "\u1eb8",  # LATIN CAPITAL LETTER E WITH DOT BELOW
        "\u1eba",  # LATIN CAPITAL LETTER E WITH HOOK ABOVE
        "\u1ebc",  # LATIN CAPITAL LETTER E WITH TILDE
        "\u1ebe",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX AND ACUTE
        "\u1ec0",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX AND GRAVE
        "\u1ec2",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX AND HOOK ABOVE
        "\u1ec4",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX AND TILDE
        "\u1ec6",  # LATIN CAPITAL LETTER E WITH CIRCUMFLEX AND DOT BELOW
        "\u24ba",  # CIRCLED LATIN CAPITAL LETTER E
        "\u2c7b",  # LATIN LETTER SMALL CAPITAL TURNED E
        "\uff25",  # FULLWIDTH LATIN CAPITAL LETTER E
        "\u018f",  # LATIN CAPITAL LETTER SCHWA
        "\u0259",  # LATIN SMALL LETTER SCHWA
        "\u025a",  # LATIN SMALL LETTER SCHWA WITH HOOK
        "\u1d95",  # LATIN SMALL LETTER SCHWA WITH RETROFLEX HOOK
        "\u2094",  # LATIN SUBSCRIPT SMALL LETTER SCHWA
        "\u0395",  # GREEK CAPITAL LETTER EPSILON
        "\u0388",  # GREEK CAPITAL LETTER EPSILON WITH TONOS
        "\u2c88",  # COPTIC CAPITAL LETTER EIE
        "\u0415",  # CYRILLIC CAPITAL LETTER IE
        "\u0400",  # CYRILLIC CAPITAL LETTER IE WITH GRAVE
        "\u042d",  # CYRILLIC CAPITAL LETTER E
        "\u0466",  # CYRILLIC CAPITAL LETTER LITTLE YUS
        "\ua658",  # CYRILLIC CAPITAL LETTER CLOSED LITTLE YUS
        "\u2c05",  # GLAGOLITIC CAPITAL LETTER YESTU
        "\u2c24",  # GLAGOLITIC CAPITAL LETTER SMALL YUS
        "\u2c25",  # GLAGOLITIC CAPITAL LETTER SMALL YUS WITH TAIL
        "\u16d6",  # RUNIC LETTER EHWAZ EH E
        "\u16c2",  # RUNIC LETTER E
        "\u16b6",  # RUNIC LETTER ENG
        "\u16e0",  # RUNIC LETTER EAR
    ),
    "EH": (
        "\u16f6",  # RUNIC LETTER FRANKS CASKET EH
    ),
    "e": (
        "\u00e8",  # LATIN SMALL LETTER E WITH GRAVE
        "\u00e9",  # LATIN SMALL LETTER E WITH ACUTE
        "\u00ea",  # LATIN SMALL LETTER E WITH CIRCUMFLEX
        "\u00eb",  # LATIN SMALL LETTER E WITH DIAERESIS
        "\u0113",  # LATIN SMALL LETTER E WITH MACRON
        "\u0115",  # LATIN SMALL LETTER E WITH BREVE
        "\u0117",  # LATIN SMALL LETTER E WITH DOT ABOVE
        "\u0119",  # LATIN SMALL LETTER E WITH OGONEK
        "\u011b",  # LATIN SMALL LETTER E WITH CARON
        "\u01dd",  # LATIN SMALL LETTER TURNED E
        "\u0205",  # LATIN SMALL LETTER E WITH DOUBLE GRAVE
        "\u0207",  # LATIN SMALL LETTER E WITH INVERTED BREVE
        "\u0229",  # LATIN SMALL LETTER E WITH CEDILLA
        "\u0247",  # LATIN SMALL LETTER E WITH STROKE
        "\u0258",  # LATIN SMALL LETTER REVERSED E
        "\u025b",  # LATIN SMALL LETTER OPEN E
        "\u025c",  # LATIN SMALL LETTER REVERSED OPEN E
        "\u025d",  # LATIN SMALL LETTER REVERSED OPEN E WITH HOOK
        "\u025e",  # LATIN SMALL LETTER CLOSED REVERSED OPEN E
        "\u029a",  # LATIN SMALL LETTER CLOSED OPEN E
        "\u1d08",  # LATIN SMALL LETTER TURNED OPEN E
        "\u1d92",  # LATIN SMALL LETTER E WITH RETROFLEX HOOK
        "\u1d93",  # LATIN SMALL LETTER OPEN E WITH RETROFLEX HOOK
        "\u1d94",  # LATIN SMALL LETTER REVERSED OPEN E WITH RETROFLEX HOOK
        "\u1e15",  # LATIN SMALL LETTER E WITH MACRON AND GRAVE
        "\u1e17",  # LATIN SMALL LETTER E WITH MACRON AND ACUTE
        "\u1e19",  # LATIN SMALL LETTER E WITH CIRCUMFLEX BELOW
        "\u1e1b",  # LATIN SMALL LETTER E WITH TILDE BELOW
        "\u1e1d",  # LATIN SMALL LETTER E WITH CEDILLA AND BREVE
        "\u1eb9",  # LATIN SMALL LETTER E WITH DOT BELOW
        "\u1ebb",  # LATIN SMALL LETTER E WITH HOOK ABOVE
        "\u1ebd",  # LATIN SMALL LETTER E WITH TILDE
        "\u1ebf",  # LATIN SMALL LETTER E WITH CIRCUMFLEX AND ACUTE
        "\u1ec1",  # LATIN SMALL LETTER E WITH CIRCUMFLEX AND GRAVE
        "\u1ec3",  # LATIN SMALL LETTER E WITH CIRCUMFLEX AND HOOK ABOVE
        "\u1ec5",  # LATIN SMALL LETTER E WITH CIRCUMFLEX AND TILDE
        "\u1ec7",  # LATIN SMALL LETTER E WITH CIRCUMFLEX AND DOT BELOW
        "\u2091",  # LATIN SUBSCRIPT SMALL LETTER E
        "\u24d4",  # CIRCLED LATIN SMALL LETTER E
        "\u2c78",  # LATIN SMALL LETTER E WITH NOTCH
        "\uff45",  # FULLWIDTH LATIN SMALL LETTER E
        "\u03b5",  # GREEK SMALL LETTER EPSILON
        "\u03ad",  # GREEK SMALL LETTER EPSILON WITH TONOS
        "\u03f5",  # GREEK LUNATE EPSILON SYMBOL
        "\u03f6",  # GREEK REVERSED LUNATE EPSILON SYMBOL
        "\u2c89",  # COPTIC SMALL LETTER EIE
        "\u0435",  # CYRILLIC SMALL LETTER IE
        "\u0450",  # CYRILLIC SMALL LETTER IE WITH GRAVE
        "\u044d",  # CYRILLIC SMALL LETTER E
        "\u0467",  # CYRILLIC SMALL LETTER LITTLE YUS
        "\ua659",  # CYRILLIC SMALL LETTER CLOSED LITTLE YUS
        "\u2c35",  # GLAGOLITIC SMALL LETTER YESTU
        "\u2c54",  # GLAGOLITIC SMALL LETTER SMALL YUS
        "\u2c55",  # GLAGOLITIC SMALL LETTER SMALL YUS WITH TAIL
    ),
    "(e)": (
        "\u24a0",  # PARENTHESIZED LATIN SMALL LETTER E
    ),
    "F": (
        "\u0191",  # LATIN CAPITAL LETTER F WITH HOOK
        "\u1e1e",  # LATIN CAPITAL LETTER F WITH DOT ABOVE
        "\u24bb",  # CIRCLED LATIN CAPITAL LETTER F
        "\ua730",  # LATIN LETTER SMALL CAPITAL F
        "\ua77b",  # LATIN CAPITAL LETTER INSULAR F
        "\ua7fb",  # LATIN EPIGRAPHIC LETTER REVERSED F
        "\uff26",  # FULLWIDTH LATIN CAPITAL LETTER F
        "\u03a6",  # GREEK CAPITAL LETTER PHI
        "\u2caa",  # COPTIC CAPITAL LETTER FI
        "\u0424",  # CYRILLIC CAPITAL LETTER EF
        "\u2c17",  # GLAGOLITIC CAPITAL LETTER FRITU
        "\u16a0",  # RUNIC LETTER FEHU FEOH FE F
    ),
    "f": (
        "\u0192",  # LATIN SMALL LETTER F WITH HOOK
        "\u1d6e",  # LATIN SMALL LETTER F WITH MIDDLE TILDE
        "\u1d82",  # LATIN SMALL LETTER F WITH PALATAL HOOK
        "\u1e1f",  # LATIN SMALL LETTER F WITH DOT ABOVE
        "\u1e9b",  # LATIN SMALL LETTER LONG S WITH DOT ABOVE
        "\u24d5",  # CIRCLED LATIN SMALL LETTER F
        "\ua77c",  # LATIN SMALL LETTER INSULAR F
        "\uff46",  # FULLWIDTH LATIN SMALL LETTER F
        "\u03c6",  # GREEK SMALL LETTER PHI
        "\u2cab",  # COPTIC SMALL LETTER FI
        "\u2c77",  # LATIN SMALL LETTER TAILLESS PHI
        "\u0278",  # LATIN SMALL LETTER PHI
        "\u1d60",  # MODIFIER LETTER SMALL GREEK PHI
        "\u1d69",  # GREEK SUBSCRIPT SMALL LETTER PHI
        "\u1db2",  # MODIFIER LETTER SMALL PHI
        "\u0444",  # CYRILLIC SMALL LETTER EF
        "\u2c47",  # GLAGOLITIC SMALL LETTER FRITU
    ),
    "(f)": (
        "\u24a1",  # PARENTHESIZED LATIN SMALL LETTER F
    ),
    "ff": (
        "\ufb00",  # LATIN SMALL LIGATURE FF
    ),
    "ffi": (
        "\ufb03",  # LATIN SMALL LIGATURE FFI
    ),
    "ffl": (
        "\ufb04",  # LATIN SMALL LIGATURE FFL
    ),
    "fi": (
        "\ufb01",  # LATIN SMALL LIGATURE FI
    ),
    "fl": (
        "\ufb02",  # LATIN SMALL LIGATURE FL
    ),
    "G": (
        "\u011c",  # LATIN CAPITAL LETTER G WITH CIRCUMFLEX
        "\u011e",  # LATIN CAPITAL LETTER G WITH BREVE
        "\u0120",  # LATIN CAPITAL LETTER G WITH DOT ABOVE
        "\u0122",  # LATIN CAPITAL LETTER G WITH CEDILLA
        "\u0193",  # LATIN CAPITAL LETTER G WITH HOOK
        "\u01e4",  # LATIN CAPITAL LETTER G WITH STROKE
        "\u01e5",  # LATIN SMALL LETTER G WITH STROKE
        "\u01e6",  # LATIN CAPITAL LETTER G WITH CARON
        "\u01e7",  # LATIN SMALL LETTER G WITH CARON
        "\u01f4",  # LATIN CAPITAL LETTER G WITH ACUTE
        "\u0262",  # LATIN LETTER SMALL CAPITAL G
        "\u029b",  # LATIN LETTER SMALL CAPITAL G WITH HOOK
        "\u1e20",  # LATIN CAPITAL LETTER G WITH MACRON
        "\u24bc",  # CIRCLED LATIN CAPITAL LETTER G
        "\ua77d",  # LATIN CAPITAL LETTER INSULAR G
        "\ua77e",  # LATIN CAPITAL LETTER TURNED INSULAR G
        "\uff27",  # FULLWIDTH LATIN CAPITAL LETTER G
        "\u0393",  # GREEK CAPITAL LETTER GAMMA
        "\u1d26",  # GREEK LETTER SMALL CAPITAL GAMMA
        "\u2c84",  # COPTIC CAPITAL LETTER GAMMA
        "\u0413",  # CYRILLIC CAPITAL LETTER GHE
        "\u0490",  # CYRILLIC CAPITAL LETTER GHE WITH UPTURN
        "\u2c03",  # GLAGOLITIC CAPITAL LETTER GLAGOLI
        "\u16b7",  # RUNIC LETTER GEBO GYFU G
        "\u16b5",  # RUNIC LETTER G
        "\u16b8",  # RUNIC LETTER GAR
    ),
    "g": (
        "\u011d",  # LATIN SMALL LETTER G WITH CIRCUMFLEX
        "\u011f",  # LATIN SMALL LETTER G WITH BREVE
        "\u0121",  # LATIN SMALL LETTER G WITH DOT ABOVE
        "\u0123",  # LATIN SMALL LETTER G WITH CEDILLA
        "\u01f5",  # LATIN SMALL LETTER G WITH ACUTE
        "\u0260",  # LATIN SMALL LETTER G WITH HOOK
        "\u0261",  # LATIN SMALL LETTER SCRIPT G
        "\u1d77",  # LATIN SMALL LETTER TURNED G
        "\u1d79",  # LATIN SMALL LETTER INSULAR G
        "\u1d83",  # LATIN SMALL LETTER G WITH PALATAL HOOK
        "\u1e21",  # LATIN SMALL LETTER G WITH MACRON
        "\u24d6",  # CIRCLED LATIN SMALL LETTER G
        "\ua77f",  # LATIN SMALL LETTER TURNED INSULAR G
        "\uff47",  # FULLWIDTH LATIN SMALL LETTER G
        "\u03b3",  # GREEK SMALL LETTER GAMMA
        "\u1d5e",  # MODIFIER LETTER SMALL GREEK GAMMA
        "\u1d67",  # GREEK SUBSCRIPT SMALL LETTER GAMMA
        "\u2c85",  # COPTIC SMALL LETTER GAMMA
        "\u0433",  # CYRILLIC SMALL LETTER GHE
        "\u0491",  # CYRILLIC SMALL LETTER GHE WITH UPTURN
        "\u2c33",  # GLAGOLITIC SMALL LETTER GLAGOLI
    ),
    "(g)": (
        "\u24a2",  # PARENTHESIZED LATIN SMALL LETTER G
    ),
    "H": (
        "\u0124",  # LATIN CAPITAL LETTER H WITH CIRCUMFLEX
        "\u0126",  # LATIN CAPITAL LETTER H WITH STROKE
        "\u021e",  # LATIN CAPITAL LETTER H WITH CARON
        "\u029c",  # LATIN LETTER SMALL CAPITAL H
        "\u1e22",  # LATIN CAPITAL LETTER H WITH DOT ABOVE
        "\u1e24",  # LATIN CAPITAL LETTER H WITH DOT BELOW
        "\u1e26",  # LATIN CAPITAL LETTER H WITH DIAERESIS
        "\u1e28",  # LATIN CAPITAL LETTER H WITH CEDILLA
        "\u1e2a",  # LATIN CAPITAL LETTER H WITH BREVE BELOW
        "\u24bd",  # CIRCLED LATIN CAPITAL LETTER H
        "\u2c67",  # LATIN CAPITAL LETTER H WITH DESCENDER
        "\u2c75",  # LATIN CAPITAL LETTER HALF H
        "\uff28",  # FULLWIDTH LATIN CAPITAL LETTER H
        "\u0370",  # GREEK CAPITAL LETTER HETA
        "\u16ba",  # RUNIC LETTER HAGLAZ H
        "\u16bb",  # RUNIC LETTER HAEGL H
        "\u16bc",  # RUNIC LETTER LONG-BRANCH-HAGALL H
        "\u16bd",  # RUNIC LETTER SHORT-TWIG-HAGALL H
    ),
    "h": (
        "\u0125",  # LATIN SMALL LETTER H WITH CIRCUMFLEX
        "\u0127",  # LATIN SMALL LETTER H WITH STROKE
        "\u021f",  # LATIN SMALL LETTER H WITH CARON
        "\u0265",  # LATIN SMALL LETTER TURNED H
        "\u0266",  # LATIN SMALL LETTER H WITH HOOK
        "\u02ae",  # LATIN SMALL LETTER TURNED H WITH FISHHOOK
        "\u02af",  # LATIN SMALL LETTER TURNED H WITH FISHHOOK AND TAIL
        "\u1e23",  # LATIN SMALL LETTER H WITH DOT ABOVE
        "\u1e25",  # LATIN SMALL LETTER H WITH DOT BELOW
        "\u1e27",  # LATIN SMALL LETTER H WITH DIAERESIS
        "\u1e29",  # LATIN SMALL LETTER H WITH CEDILLA
        "\u1e2b",  # LATIN SMALL LETTER H WITH BREVE BELOW
        "\u1e96",  # LATIN SMALL LETTER H WITH LINE BELOW
        "\u24d7",  # CIRCLED LATIN SMALL LETTER H
        "\u2c68",  # LATIN SMALL LETTER H WITH DESCENDER
        "\u2c76",  # LATIN SMALL LETTER HALF H
        "\uff48",  # FULLWIDTH LATIN SMALL LETTER H
        "\u0371",  # GREEK SMALL LETTER HETA
    ),
    "HV": (
        "\u01f6",  # LATIN CAPITAL LETTER HWAIR
    ),
    "(h)": (
        "\u24a3",  # PARENTHESIZED LATIN SMALL LETTER H
    ),
    "hv": (
        "\u0195",  # LATIN SMALL LETTER HV
    ),
    "I": (
        "\u00cc",  # LATIN CAPITAL LETTER I WITH GRAVE
        "\u00cd",  # LATIN CAPITAL LETTER I WITH ACUTE
        "\u00ce",  # LATIN CAPITAL LETTER I WITH CIRCUMFLEX
        "\u00cf",  # LATIN CAPITAL LETTER I WITH DIAERESIS
        "\u0128",  # LATIN CAPITAL LETTER I WITH TILDE
        "\u012a",  # LATIN CAPITAL LETTER I WITH MACRON
        "\u012c",  # LATIN CAPITAL LETTER I WITH BREVE
        "\u012e",  # LATIN CAPITAL LETTER I WITH OGONEK
        "\u0130",  # LATIN CAPITAL LETTER I WITH DOT ABOVE
        "\u0196",  # LATIN CAPITAL LETTER IOTA
        "\u0197",  # LATIN CAPITAL LETTER I WITH STROKE
        "\u01cf",  # LATIN CAPITAL LETTER I WITH CARON
        "\u0208",  # LATIN CAPITAL LETTER I WITH DOUBLE GRAVE
        "\u020a",  # LATIN CAPITAL LETTER I WITH INVERTED BREVE
        "\u026a",  # LATIN LETTER SMALL CAPITAL I
        "\u1d7b",  # LATIN SMALL CAPITAL LETTER I WITH STROKE
        "\u1e2c",  # LATIN CAPITAL LETTER I WITH TILDE BELOW
        "\u1e2e",  # LATIN CAPITAL LETTER I WITH DIAERESIS AND ACUTE
        "\u1ec8",  # LATIN CAPITAL LETTER I WITH HOOK ABOVE
        "\u1eca",  # LATIN CAPITAL LETTER I WITH DOT BELOW
        "\u24be",  # CIRCLED LATIN CAPITAL LETTER I
        "\ua7fe",  # LATIN EPIGRAPHIC LETTER I LONGA
        "\uff29",  # FULLWIDTH LATIN CAPITAL LETTER I
        "\u0406",  # CYRILLIC CAPITAL LETTER BYELORUSSIAN-UKRAINIAN I
        "\u0397",  # GREEK CAPITAL LETTER ETA
        "\u0389",  # GREEK CAPITAL LETTER ETA WITH TONOS
        "\u0399",  # GREEK CAPITAL LETTER IOTA
        "\u038a",  # GREEK CAPITAL LETTER IOTA WITH TONOS
        "\u03aa",  # GREEK CAPITAL LETTER IOTA WITH DIALYTIKA
        "\u0418",  # CYRILLIC CAPITAL LETTER I
        "\u040d",  # CYRILLIC CAPITAL LETTER I WITH GRAVE
        "\u042b",  # CYRILLIC CAPITAL LETTER YERU
        "\ua650",  # CYRILLIC CAPITAL LETTER YERU WITH BACK YER
        "\ua65e",  # CYRILLIC CAPITAL LETTER YN
        "\u0474",  # CYRILLIC CAPITAL LETTER IZHITSA
        "\u0476",  # CYRILLIC CAPITAL LETTER IZHITSA WITH DOUBLE GRAVE ACCENT
        "\ua646",  # CYRILLIC CAPITAL LETTER IOTA
        "\u2c09",  # GLAGOLITIC CAPITAL LETTER IZHE
        "\u2c0a",  # GLAGOLITIC CAPITAL LETTER INITIAL IZHE
        "\u2c0b",  # GLAGOLITIC CAPITAL LETTER I
        "\u2c1f",  # GLAGOLITIC CAPITAL LETTER YERU
        "\u2c2b",  # GLAGOLITIC CAPITAL LETTER IZHITSA
        "\u16c1",  # RUNIC LETTER ISAZ IS ISS I
        "\u16c7",  # RUNIC LETTER IWAZ EOH
    ),
    "i": (
        "\u00ec",  # LATIN SMALL LETTER I WITH GRAVE
        "\u00ed",  # LATIN SMALL LETTER I WITH ACUTE
        "\u00ee",  # LATIN SMALL LETTER I WITH CIRCUMFLEX
        "\u00ef",  # LATIN SMALL LETTER I WITH DIAERESIS
        "\u0129",  # LATIN SMALL LETTER I WITH TILDE
        "\u012b",  # LATIN SMALL LETTER I WITH MACRON
        "\u012d",  # LATIN SMALL LETTER I WITH BREVE
        "\u012f",  # LATIN SMALL LETTER I WITH OGONEK
        "\u0131",  # LATIN SMALL LETTER DOTLESS I
        "\u01d0",  # LATIN SMALL LETTER I WITH CARON
        "\u0209",  # LATIN SMALL LETTER I WITH DOUBLE GRAVE
        "\u020b",  # LATIN SMALL LETTER I WITH INVERTED BREVE
        "\u0268",  # LATIN SMALL LETTER I WITH STROKE
        "\u1d09",  # LATIN SMALL LETTER TURNED I
        "\u1d62",  # LATIN SUBSCRIPT SMALL LETTER I
        "\u1d7c",  # LATIN SMALL LETTER IOTA WITH STROKE
        "\u1d96",  # LATIN SMALL LETTER I WITH RETROFLEX HOOK
        "\u1e2d",  # LATIN SMALL LETTER I WITH TILDE BELOW
        "\u1e2f",  # LATIN SMALL LETTER I WITH DIAERESIS AND ACUTE
        "\u1ec9",  # LATIN SMALL LETTER I WITH HOOK ABOVE
        "\u1ecb",  # LATIN SMALL LETTER I WITH DOT BELOW
        "\u2071",  # SUPERSCRIPT LATIN SMALL LETTER I
        "\u24d8",  # CIRCLED LATIN SMALL LETTER I
        "\uff49",  # FULLWIDTH LATIN SMALL LETTER I
        "\u0456",  # CYRILLIC SMALL LETTER BYELORUSSIAN-UKRAINIAN I
        "\u03b7",  # GREEK SMALL LETTER ETA
        "\u03ae",  # GREEK SMALL LETTER ETA WITH TONOS
        "\u03b9",  # GREEK SMALL LETTER IOTA
        "\u03af",  # GREEK SMALL LETTER IOTA WITH TONOS
        "\u03ca",  # GREEK SMALL LETTER IOTA WITH DIALYTIKA
        "\u0438",  # CYRILLIC SMALL LETTER I
        "\u045d",  # CYRILLIC SMALL LETTER I WITH GRAVE
        "\u044b",  # CYRILLIC SMALL LETTER YERU
        "\ua651",  # CYRILLIC SMALL LETTER YERU WITH BACK YER
        "\ua65f",  # CYRILLIC SMALL LETTER YN
        "\u0475",  # CYRILLIC SMALL LETTER IZHITSA
        "\u0477",  # CYRILLIC SMALL LETTER IZHITSA WITH DOUBLE GRAVE ACCENT
        "\ua647",  # CYRILLIC SMALL LETTER IOTA
        "\u2c39",  # GLAGOLITIC SMALL LETTER IZHE
        "\u2c3a",  # GLAGOLITIC SMALL LETTER INITIAL IZHE
        "\u2c3b",  # GLAGOLITIC SMALL LETTER I
        "\u2c4f",  # GLAGOLITIC SMALL LETTER YERU
        "\u2c5b",  # GLAGOLITIC SMALL LETTER IZHITSA
    ),
    "IJ": (
        "\u0132",  # LATIN CAPITAL LIGATURE IJ
    ),
    "(i)": (
        "\u24a4",  # PARENTHESIZED LATIN SMALL LETTER I
    ),
    "ij": (
        "\u0133",  # LATIN SMALL LIGATURE IJ
    ),
    "IS": (
        "\u16f5",  # RUNIC LETTER FRANKS CASKET IS
    ),
    "J": (
        "\u0134",  # LATIN CAPITAL LETTER J WITH CIRCUMFLEX
        "\u0248",  # LATIN CAPITAL LETTER J WITH STROKE
        "\u1d0a",  # LATIN LETTER SMALL CAPITAL J
        "\u24bf",  # CIRCLED LATIN CAPITAL LETTER J
        "\uff2a",  # FULLWIDTH LATIN CAPITAL LETTER J
        "\u16c3",  # RUNIC LETTER JERAN J
        "\u16c4",  # RUNIC LETTER GER
        "\u16e1",  # RUNIC LETTER IOR
    ),
    "j": (
        "\u0135",  # LATIN SMALL LETTER J WITH CIRCUMFLEX
        "\u01f0",  # LATIN SMALL LETTER J WITH CARON
        "\u0237",  # LATIN SMALL LETTER DOTLESS J
        "\u0249",  # LATIN SMALL LETTER J WITH STROKE
        "\u025f",  # LATIN SMALL LETTER DOTLESS J WITH STROKE
        "\u0284",  # LATIN SMALL LETTER DOTLESS J WITH STROKE AND HOOK
        "\u029d",  # LATIN SMALL LETTER J WITH CROSSED-TAIL
        "\u24d9",  # CIRCLED LATIN SMALL LETTER J
        "\u2c7c",  # LATIN SUBSCRIPT SMALL LETTER J
        "\uff4a",  # FULLWIDTH LATIN SMALL LETTER J
    ),
    "(j)": (
        "\u24a5",  # PARENTHESIZED LATIN SMALL LETTER J
    ),
    "K": (
        "\u0136",  # LATIN CAPITAL LETTER K WITH CEDILLA
        "\u0198",  # LATIN CAPITAL LETTER K WITH HOOK
        "\u01e8",  # LATIN CAPITAL LETTER K WITH CARON
        "\u1d0b",  # LATIN LETTER SMALL CAPITAL K
        "\u1e30",  # LATIN CAPITAL LETTER K WITH ACUTE
        "\u1e32",  # LATIN CAPITAL LETTER K WITH DOT BELOW
        "\u1e34",  # LATIN CAPITAL LETTER K WITH LINE BELOW
        "\u24c0",  # CIRCLED LATIN CAPITAL LETTER K
        "\u2c69",  # LATIN CAPITAL LETTER K WITH DESCENDER
        "\ua740",  # LATIN CAPITAL LETTER K WITH STROKE
        "\ua742",  # LATIN CAPITAL LETTER K WITH DIAGONAL STROKE
        "\ua744",  # LATIN CAPITAL LETTER K WITH STROKE AND DIAGONAL STROKE
        "\uff2b",  # FULLWIDTH LATIN CAPITAL LETTER K
        "\u039a",  # GREEK CAPITAL LETTER KAPPA
        "\u2c94",  # COPTIC CAPITAL LETTER KAPA
        "\u041a",  # CYRILLIC CAPITAL LETTER KA
        "\u040c",  # CYRILLIC CAPITAL LETTER KJE
        "\u2c0d",  # GLAGOLITIC CAPITAL LETTER KAKO
        "\u16b2",  # RUNIC LETTER KAUNA
        "\u16b4",  # RUNIC LETTER KAUN K
        "\u16e3",  # RUNIC LETTER CALC
        "\u16f1",  # RUNIC LETTER K
    ),
    "KK": (
        "\u16e4",  # RUNIC LETTER CEALC
    ),
    "KW": (
        "\u16e2",  # RUNIC LETTER CWEORTH
    ),
    "k": (
        "\u0137",  # LATIN SMALL LETTER K WITH CEDILLA
        "\u0199",  # LATIN SMALL LETTER K WITH HOOK
        "\u01e9",  # LATIN SMALL LETTER K WITH CARON
        "\u029e",  # LATIN SMALL LETTER TURNED K
        "\u1d84",  # LATIN SMALL LETTER K WITH PALATAL HOOK
        "\u1e31",  # LATIN SMALL LETTER K WITH ACUTE
        "\u1e33",  # LATIN SMALL LETTER K WITH DOT BELOW
        "\u1e35",  # LATIN SMALL LETTER K WITH LINE BELOW
        "\u24da",  # CIRCLED LATIN SMALL LETTER K
        "\u2c6a",  # LATIN SMALL LETTER K WITH DESCENDER
        "\ua741",  # LATIN SMALL LETTER K WITH STROKE
        "\ua743",  # LATIN SMALL LETTER K WITH DIAGONAL STROKE
        "\ua745",  # LATIN SMALL LETTER K WITH STROKE AND DIAGONAL STROKE
        "\uff4b",  # FULLWIDTH LATIN SMALL LETTER K
        "\u03ba",  # GREEK SMALL LETTER KAPPA
        "\u03f0",  # GREEK KAPPA SYMBOL
        "\u2c95",  # COPTIC SMALL LETTER KAPA
        "\u043a",  # CYRILLIC SMALL LETTER KA
        "\u045c",  # CYRILLIC SMALL LETTER KJE
        "\u2c3d",  # GLAGOLITIC SMALL LETTER KAKO
    ),
    "(k)": (
        "\u24a6",  # PARENTHESIZED LATIN SMALL LETTER K
    ),
    "L": (
        "\u0139",  # LATIN CAPITAL LETTER L WITH ACUTE
        "\u013b",  # LATIN CAPITAL LETTER L WITH CEDILLA
        "\u013d",  # LATIN CAPITAL LETTER L WITH CARON
        "\u013f",  # LATIN CAPITAL LETTER L WITH MIDDLE DOT
        "\u0141",  # LATIN CAPITAL LETTER L WITH STROKE
        "\u023d",  # LATIN CAPITAL LETTER L WITH BAR
        "\u029f",  # LATIN LETTER SMALL CAPITAL L
        "\u1d0c",  # LATIN LETTER SMALL CAPITAL L WITH STROKE
        "\u1e36",  # LATIN CAPITAL LETTER L WITH DOT BELOW
        "\u1e38",  # LATIN CAPITAL LETTER L WITH DOT BELOW AND MACRON
        "\u1e3a",  # LATIN CAPITAL LETTER L WITH LINE BELOW
        "\u1e3c",  # LATIN CAPITAL LETTER L WITH CIRCUMFLEX BELOW
        "\u24c1",  # CIRCLED LATIN CAPITAL LETTER L
        "\u2c60",  # LATIN CAPITAL LETTER L WITH DOUBLE BAR
        "\u2c62",  # LATIN CAPITAL LETTER L WITH MIDDLE TILDE
        "\ua746",  # LATIN CAPITAL LETTER BROKEN L
        "\ua748",  # LATIN CAPITAL LETTER L WITH HIGH STROKE
        "\ua780",  # LATIN CAPITAL LETTER TURNED L
        "\uff2c",  # FULLWIDTH LATIN CAPITAL LETTER L
        "\u039b",  # GREEK CAPITAL LETTER LAMDA
        "\u1d27",  # GREEK LETTER SMALL CAPITAL LAMDA
        "\u2c96",  # COPTIC CAPITAL LETTER LAULA
        "\u041b",  # CYRILLIC CAPITAL LETTER EL
        "\u0409",  # CYRILLIC CAPITAL LETTER LJE
        "\u2c0e",  # GLAGOLITIC CAPITAL LETTER LJUDIJE
        "\u16da",  # RUNIC LETTER LAUKAZ LAGU LOGR L
        "\u16db",  # RUNIC LETTER DOTTED-L
    ),
    "l": (
        "\u013a",  # LATIN SMALL LETTER L WITH ACUTE
        "\u013c",  # LATIN SMALL LETTER L WITH CEDILLA
        "\u013e",  # LATIN SMALL LETTER L WITH CARON
        "\u0140",  # LATIN SMALL LETTER L WITH MIDDLE DOT
        "\u0142",  # LATIN SMALL LETTER L WITH STROKE
        "\u019a",  # LATIN SMALL LETTER L WITH BAR
        "\u0234",  # LATIN SMALL LETTER L WITH CURL
        "\u026b",  # LATIN SMALL LETTER L WITH MIDDLE TILDE
        "\u026c",  # LATIN SMALL LETTER L WITH BELT
        "\u026d",  # LATIN SMALL LETTER L WITH RETROFLEX HOOK
        "\u1d85",  # LATIN SMALL LETTER L WITH PALATAL HOOK
        "\u1e37",  # LATIN SMALL LETTER L WITH DOT BELOW
        "\u1e39",  # LATIN SMALL LETTER L WITH DOT BELOW AND MACRON
        "\u1e3b",  # LATIN SMALL LETTER L WITH LINE BELOW
        "\u1e3d",  # LATIN SMALL LETTER L WITH CIRCUMFLEX BELOW
        "\u24db",  # CIRCLED LATIN SMALL LETTER L
        "\u2c61",  # LATIN SMALL LETTER L WITH DOUBLE BAR
        "\ua747",  # LATIN SMALL LETTER BROKEN L
        "\ua749",  # LATIN SMALL LETTER L WITH HIGH STROKE
        "\ua781",  # LATIN SMALL LETTER TURNED L
        "\uff4c",  # FULLWIDTH LATIN SMALL LETTER L
        "\u03bb",  # GREEK SMALL LETTER LAMDA
        "\u2c97",  # COPTIC SMALL LETTER LAULA
        "\u043b",  # CYRILLIC SMALL LETTER EL
        "\u0459",  # CYRILLIC SMALL LETTER LJE
        "\u2c3e",  # GLAGOLITIC SMALL LETTER LJUDIJE
    ),
    "LJ": (
        "\u01c7",  # LATIN CAPITAL LETTER LJ
    ),
    "LL": (
        "\u1efa",  # LATIN CAPITAL LETTER MIDDLE-WELSH LL
    ),
    "Lj": (
        "\u01c8",  # LATIN CAPITAL LETTER L WITH SMALL LETTER J
    ),
    "(l)": (
        "\u24a7",  # PARENTHESIZED LATIN SMALL LETTER L
    ),
    "lj": (
        "\u01c9",  # LATIN SMALL LETTER LJ
    ),
    "ll": (
        "\u1efb",  # LATIN SMALL LETTER MIDDLE-WELSH LL
    ),
    "ls": (
        "\u02aa",  # LATIN SMALL LETTER LS DIGRAPH
    ),
    "lz": (
        "\u02ab",  # LATIN SMALL LETTER LZ DIGRAPH
    ),
    "M": (
        "\u019c",  # LATIN CAPITAL LETTER TURNED M
        "\u1d0d",  # LATIN LETTER SMALL CAPITAL M
        "\u1e3e",  # LATIN CAPITAL LETTER M WITH ACUTE
        "\u1e40",  # LATIN CAPITAL LETTER M WITH DOT ABOVE
        "\u1e42",  # LATIN CAPITAL LETTER M WITH DOT BELOW
        "\u24c2",  # CIRCLED LATIN CAPITAL LETTER M
        "\u2c6e",  # LATIN CAPITAL LETTER M WITH HOOK
        "\ua7fd",  # LATIN EPIGRAPHIC LETTER INVERTED M
        "\ua7ff",  # LATIN EPIGRAPHIC LETTER ARCHAIC M
        "\uff2d",  # FULLWIDTH LATIN CAPITAL LETTER M
        "\u039c",  # GREEK CAPITAL LETTER MU
        "\u2c98",  # COPTIC CAPITAL LETTER MI
        "\u041c",  # CYRILLIC CAPITAL LETTER EM
        "\u2c0f",  # GLAGOLITIC CAPITAL LETTER MYSLITE
        "\u2c2e",  # GLAGOLITIC CAPITAL LETTER LATINATE MYSLITE
        "\u16d7",  # RUNIC LETTER MANNAZ MAN M
        "\u16d8",  # RUNIC LETTER LONG-BRANCH-MADR M
        "\u16d9",  # RUNIC LETTER SHORT-TWIG-MADR M
    ),
    "m": (
        "\u026f",  # LATIN SMALL LETTER TURNED M
        "\u0270",  # LATIN SMALL LETTER TURNED M WITH LONG LEG
        "\u0271",  # LATIN SMALL LETTER M WITH HOOK
        "\u1d6f",  # LATIN SMALL LETTER M WITH MIDDLE TILDE
        "\u1d86",  # LATIN SMALL LETTER M WITH PALATAL HOOK
        "\u1e3f",  # LATIN SMALL LETTER M WITH ACUTE
        "\u1e41",  # LATIN SMALL LETTER M WITH DOT ABOVE
        "\u1e43",  # LATIN SMALL LETTER M WITH DOT BELOW
        "\u24dc",  # CIRCLED LATIN SMALL LETTER M
        "\uff4d",  # FULLWIDTH LATIN SMALL LETTER M
        "\u03bc",  # GREEK SMALL LETTER MU
        "\u00b5",  # MICRO SIGN
        "\u2c99",  # COPTIC SMALL LETTER MI
        "\u043c",  # CYRILLIC SMALL LETTER EM
        "\u2c3f",  # GLAGOLITIC SMALL LETTER MYSLITE
        "\u2c5e",  # GLAGOLITIC SMALL LETTER LATINATE MYSLITE
    ),
    "(m)": (
        "\u24a8",  # PARENTHESIZED LATIN SMALL LETTER M
    ),
    "N": (
        "\u00d1",  # LATIN CAPITAL LETTER N WITH TILDE
        "\u0143",  # LATIN CAPITAL LETTER N WITH ACUTE
        "\u0145",  # LATIN CAPITAL LETTER N WITH CEDILLA
        "\u0147",  # LATIN CAPITAL LETTER N WITH CARON
        "\u014a",  # LATIN CAPITAL LETTER ENG
        "\u019d",  # LATIN CAPITAL LETTER N WITH LEFT HOOK
        "\u01f8",  # LATIN CAPITAL LETTER N WITH GRAVE
        "\u0220",  # LATIN CAPITAL LETTER N WITH LONG RIGHT LEG
        "\u0274",  # LATIN LETTER SMALL CAPITAL N
        "\u1d0e",  # LATIN LETTER SMALL CAPITAL REVERSED N
        "\u1e44",  # LATIN CAPITAL LETTER N WITH DOT ABOVE
        "\u1e46",  # LATIN CAPITAL LETTER N WITH DOT BELOW
        "\u1e48",  # LATIN CAPITAL LETTER N WITH LINE BELOW
        "\u1e4a",  # LATIN CAPITAL LETTER N WITH CIRCUMFLEX BELOW
        "\u24c3",  # CIRCLED LATIN CAPITAL LETTER N
        "\uff2e",  # FULLWIDTH LATIN CAPITAL LETTER N
        "\u039d",  # GREEK CAPITAL LETTER NU
        "\u2c9a",  # COPTIC CAPITAL LETTER NI
        "\u041d",  # CYRILLIC CAPITAL LETTER EN
        "\u040a",  # CYRILLIC CAPITAL LETTER NJE
        "\u2c10",  # GLAGOLITIC CAPITAL LETTER NASHI
        "\u16be",  # RUNIC LETTER NAUDIZ NYD NAUD N
        "\u16dc",  # RUNIC LETTER INGWAZ
        "\u16dd",  # RUNIC LETTER ING
        "\u16bf",  # RUNIC LETTER SHORT-TWIG-NAUD N
        "\u16c0",  # RUNIC LETTER DOTTED-N
    ),
    "n": (
        "\u00f1",  # LATIN SMALL LETTER N WITH TILDE
        "\u0144",  # LATIN SMALL LETTER N WITH ACUTE
        "\u0146",  # LATIN SMALL LETTER N WITH CEDILLA
        "\u0148",  # LATIN SMALL LETTER N WITH CARON
        "\u0149",  # LATIN SMALL LETTER N PRECEDED BY APOSTROPHE
        "\u014b",  # LATIN SMALL LETTER ENG
        "\u019e",  # LATIN SMALL LETTER N WITH LONG RIGHT LEG
        "\u01f9",  # LATIN SMALL LETTER N WITH GRAVE
        "\u0235",  # LATIN SMALL LETTER N WITH CURL
        "\u0272",  # LATIN SMALL LETTER N WITH LEFT HOOK
        "\u0273",  # LATIN SMALL LETTER N WITH RETROFLEX HOOK
        "\u1d70",  # LATIN SMALL LETTER N WITH MIDDLE TILDE
        "\u1d87",  # LATIN SMALL LETTER N WITH PALATAL HOOK
        "\u1e45",  # LATIN SMALL LETTER N WITH DOT ABOVE
        "\u1e47",  # LATIN SMALL LETTER N WITH DOT BELOW
        "\u1e49",  # LATIN SMALL LETTER N WITH LINE BELOW
        "\u1e4b",  # LATIN SMALL LETTER N WITH CIRCUMFLEX BELOW
        "\u207f",  # SUPERSCRIPT LATIN SMALL LETTER N
        "\u24dd",  # CIRCLED LATIN SMALL LETTER N
        "\uff4e",  # FULLWIDTH LATIN SMALL LETTER N
        "\u03bd",  # GREEK SMALL LETTER NU
        "\u2c9b",  # COPTIC SMALL LETTER NI
        "\u043d",  # CYRILLIC SMALL LETTER EN
        "\u045a",  # CYRILLIC SMALL LETTER NJE
        "\u2c40",  # GLAGOLITIC SMALL LETTER NASHI
    ),
    "NJ": (
        "\u01ca",  # LATIN CAPITAL LETTER NJ
    ),
    "Nj": (
        "\u01cb",  # LATIN CAPITAL LETTER N WITH SMALL LETTER J
    ),
    "(n)": (
        "\u24a9",  # PARENTHESIZED LATIN SMALL LETTER N
    ),
    "nj": (
        "\u01cc",  # LATIN SMALL LETTER NJ
    ),
    "O": (
        "\u00d2",  # LATIN CAPITAL LETTER O WITH GRAVE
        "\u00d3",  # LATIN CAPITAL LETTER O WITH ACUTE
        "\u00d4",  # LATIN CAPITAL LETTER O WITH CIRCUMFLEX
        "\u00d5",  # LATIN CAPITAL LETTER O WITH TILDE
        "\u00d6",  # LATIN CAPITAL LETTER O WITH DIAERESIS
        "\u00d8",  # LATIN CAPITAL LETTER O WITH STROKE
        "\u014c",  # LATIN CAPITAL LETTER O WITH MACRON
        "\u014e",  # LATIN CAPITAL LETTER O WITH BREVE
        "\u0150",  # LATIN CAPITAL LETTER O WITH DOUBLE ACUTE
        "\u0186",  # LATIN CAPITAL LETTER OPEN O
        "\u019f",  # LATIN CAPITAL LETTER O WITH MIDDLE TILDE
        "\u01a0",  # LATIN CAPITAL LETTER O WITH HORN
        "\u01d1",  # LATIN CAPITAL LETTER O WITH CARON
        "\u01ea",  # LATIN CAPITAL LETTER O WITH OGONEK
        "\u01ec",  # LATIN CAPITAL LETTER O WITH OGONEK AND MACRON
        "\u01fe",  # LATIN CAPITAL LETTER O WITH STROKE AND ACUTE
        "\u020c",  # LATIN CAPITAL LETTER O WITH DOUBLE GRAVE
        "\u020e",  # LATIN CAPITAL LETTER O WITH INVERTED BREVE
        "\u022a",  # LATIN CAPITAL LETTER O WITH DIAERESIS AND MACRON
        "\u022c",  # LATIN CAPITAL LETTER O WITH TILDE AND MACRON
        "\u022e",  # LATIN CAPITAL LETTER O WITH DOT ABOVE
        "\u0230",  # LATIN CAPITAL LETTER O WITH DOT ABOVE AND MACRON
        "\u1d0f",  # LATIN LETTER SMALL CAPITAL O
        "\u1d10",  # LATIN LETTER SMALL CAPITAL OPEN O
        "\u1e4c",  # LATIN CAPITAL LETTER O WITH TILDE AND ACUTE
        "\u1e4e",  # LATIN CAPITAL LETTER O WITH TILDE AND DIAERESIS
        "\u1e50",  # LATIN CAPITAL LETTER O WITH MACRON AND GRAVE
        "\u1e52",  # LATIN CAPITAL LETTER O WITH MACRON AND ACUTE
        "\u1ecc",  # LATIN CAPITAL LETTER O WITH DOT BELOW
        "\u1ece",  # LATIN CAPITAL LETTER O WITH HOOK ABOVE
        "\u1ed0",  # LATIN CAPITAL LETTER O WITH CIRCUMFLEX AND ACUTE
        "\u1ed2",  # LATIN CAPITAL LETTER O WITH CIRCUMFLEX AND GRAVE
        "\u1ed4",  # LATIN CAPITAL LETTER O WITH CIRCUMFLEX AND HOOK ABOVE
        "\u1ed6",  # LATIN CAPITAL LETTER O WITH CIRCUMFLEX AND TILDE
        "\u1ed8",  # LATIN CAPITAL LETTER O WITH CIRCUMFLEX AND DOT BELOW
        "\u1eda",  # LATIN CAPITAL LETTER O WITH HORN AND ACUTE
        "\u1edc",  # LATIN CAPITAL LETTER O WITH HORN AND GRAVE
        "\u1ede",  # LATIN CAPITAL LETTER O WITH HORN AND HOOK ABOVE
        "\u1ee0",  # LATIN CAPITAL LETTER O WITH HORN AND TILDE
        "\u1ee2",  # LATIN CAPITAL LETTER O WITH HORN AND DOT BELOW
        "\u24c4",  # CIRCLED LATIN CAPITAL LETTER O
        "\ua74a",  # LATIN CAPITAL LETTER O WITH LONG STROKE OVERLAY
        "\ua74c",  # LATIN CAPITAL LETTER O WITH LOOP
        "\uff2f",  # FULLWIDTH LATIN CAPITAL LETTER O
        "\u039f",  # GREEK CAPITAL LETTER OMICRON
        "\u038c",  # GREEK CAPITAL LETTER OMICRON WITH TONOS
        "\u2c9e",  # COPTIC CAPITAL LETTER O
        "\u03a9",  # GREEK CAPITAL LETTER OMEGA
        "\u038f",  # GREEK CAPITAL LETTER OMEGA WITH TONOS
        "\ua7b6",  # LATIN CAPITAL LETTER OMEGA
        "\u041e",  # CYRILLIC CAPITAL LETTER O
        "\u046a",  # CYRILLIC CAPITAL LETTER BIG YUS
        "\ua65a",  # CYRILLIC CAPITAL LETTER BLENDED YUS
        "\u0460",  # CYRILLIC CAPITAL LETTER OMEGA
        "\u047c",  # CYRILLIC CAPITAL LETTER OMEGA WITH TITLO
        "\ua64c",  # CYRILLIC CAPITAL LETTER BROAD OMEGA
        "\u047a",  # CYRILLIC CAPITAL LETTER ROUND OMEGA
        "\u2c11",  # GLAGOLITIC CAPITAL LETTER ONU
        "\u2c19",  # GLAGOLITIC CAPITAL LETTER OTU
        "\u2c28",  # GLAGOLITIC CAPITAL LETTER BIG YUS
        "\u16df",  # RUNIC LETTER OTHALAN ETHEL O
        "\u16ae",  # RUNIC LETTER O
        "\u16a9",  # RUNIC LETTER OS O
        "\u16b0",  # RUNIC LETTER ON
    ),
    "o": (
        "\u00f2",  # LATIN SMALL LETTER O WITH GRAVE
        "\u00f3",  # LATIN SMALL LETTER O WITH ACUTE
        "\u00f4",  # LATIN SMALL LETTER O WITH CIRCUMFLEX
        "\u00f5",  # LATIN SMALL LETTER O WITH TILDE
        "\u00f6",  # LATIN SMALL LETTER O WITH DIAERESIS
        "\u00f8",  # LATIN SMALL LETTER O WITH STROKE
        "\u014d",  # LATIN SMALL LETTER O WITH MACRON
        "\u014f",  # LATIN SMALL LETTER O WITH BREVE
        "\u0151",  # LATIN SMALL LETTER O WITH DOUBLE ACUTE
        "\u01a1",  # LATIN SMALL LETTER O WITH HORN
        "\u01d2",  # LATIN SMALL LETTER O WITH CARON
        "\u01eb",  # LATIN SMALL LETTER O WITH OGONEK
        "\u01ed",  # LATIN SMALL LETTER O WITH OGONEK AND MACRON
        "\u01ff",  # LATIN SMALL LETTER O WITH STROKE AND ACUTE
        "\u020d",  # LATIN SMALL LETTER O WITH DOUBLE GRAVE
        "\u020f",  # LATIN SMALL LETTER O WITH INVERTED BREVE
        "\u022b",  # LATIN SMALL LETTER O WITH DIAERESIS AND MACRON
        "\u022d",  # LATIN SMALL LETTER O WITH TILDE AND MACRON
        "\u022f",  # LATIN SMALL LETTER O WITH DOT ABOVE
        "\u0231",  # LATIN SMALL LETTER O WITH DOT ABOVE AND MACRON
        "\u0254",  # LATIN SMALL LETTER OPEN O
        "\u0275",  # LATIN SMALL LETTER BARRED O
        "\u1d16",  # LATIN SMALL LETTER TOP HALF O
        "\u1d17",  # LATIN SMALL LETTER BOTTOM HALF O
        "\u1d97",  # LATIN SMALL LETTER OPEN O WITH RETROFLEX HOOK
        "\u1e4d",  # LATIN SMALL LETTER O WITH TILDE AND ACUTE
        "\u1e4f",  # LATIN SMALL LETTER O WITH TILDE AND DIAERESIS
        "\u1e51",  # LATIN SMALL LETTER O WITH MACRON AND GRAVE
        "\u1e53",  # LATIN SMALL LETTER O WITH MACRON AND ACUTE
        "\u1ecd",  # LATIN SMALL LETTER O WITH DOT BELOW
        "\u1ecf",  # LATIN SMALL LETTER O WITH HOOK ABOVE
        "\u1ed1",  # LATIN SMALL LETTER O WITH CIRCUMFLEX AND ACUTE
        "\u1ed3",  # LATIN SMALL LETTER O WITH CIRCUMFLEX AND GRAVE
        "\u1ed5",  # LATIN SMALL LETTER O WITH CIRCUMFLEX AND HOOK ABOVE
        "\u1ed7",  # LATIN SMALL LETTER O WITH CIRCUMFLEX AND TILDE
        "\u1ed9",  # LATIN SMALL LETTER O WITH CIRCUMFLEX AND DOT BELOW
        "\u1edb",  # LATIN SMALL LETTER O WITH HORN AND ACUTE
        "\u1edd",  # LATIN SMALL LETTER O WITH HORN AND GRAVE
        "\u1edf",  # LATIN SMALL LETTER O WITH HORN AND HOOK ABOVE
        "\u1ee1",  # LATIN SMALL LETTER O WITH HORN AND TILDE
        "\u1ee3",  # LATIN SMALL LETTER O WITH HORN AND DOT BELOW
        "\u2092",  # LATIN SUBSCRIPT SMALL LETTER O
        "\u24de",  # CIRCLED LATIN SMALL LETTER O
        "\u2c7a",  # LATIN SMALL LETTER O WITH LOW RING INSIDE
        "\ua74b",  # LATIN SMALL LETTER O WITH LONG STROKE OVERLAY
        "\ua74d",  # LATIN SMALL LETTER O WITH LOOP
        "\uff4f",  # FULLWIDTH LATIN SMALL LETTER O
        "\u00ba",  # MASCULINE ORDINAL INDICATOR
        "\u03bf",  # GREEK SMALL LETTER OMICRON
        "\u03cc",  # GREEK SMALL LETTER OMICRON WITH TONOS
        "\u2c9f",  # COPTIC SMALL LETTER O
        "\u03c9",  # GREEK SMALL LETTER OMEGA
        "\u03ce",  # GREEK SMALL LETTER OMEGA WITH TONOS
        "\ua7b7",  # LATIN SMALL LETTER OMEGA
        "\u0277",  # LATIN SMALL LETTER CLOSED OMEGA
        "\u043e",  # CYRILLIC SMALL LETTER O
        "\u046b",  # CYRILLIC SMALL LETTER BIG YUS
        "\ua65b",  # CYRILLIC SMALL LETTER BLENDED YUS
        "\u0461",  # CYRILLIC SMALL LETTER OMEGA
        "\u047d",  # CYRILLIC SMALL LETTER OMEGA WITH TITLO
        "\ua64d",  # CYRILLIC SMALL LETTER BROAD OMEGA
        "\u047b",  # CYRILLIC SMALL LETTER ROUND OMEGA
        "\u2c41",  # GLAGOLITIC SMALL LETTER ONU
        "\u2c49",  # GLAGOLITIC SMALL LETTER OTU
        "\u2c58",  # GLAGOLITIC SMALL LETTER BIG YUS
    ),
    "OE": (
        "\u0152",  # LATIN CAPITAL LIGATURE OE
        "\u0276",  # LATIN LETTER SMALL CAPITAL OE
        "\u16af",  # RUNIC LETTER OE
    ),
    "OO": (
        "\ua74e",  # LATIN CAPITAL LETTER OO
        "\u16f3",  # RUNIC LETTER OO
    ),
    "OS": (
        "\u16f4",  # RUNIC LETTER FRANKS CASKET OS
    ),
    "OU": (
        "\u0222",  # LATIN CAPITAL LETTER OU
        "\u1d15",  # LATIN LETTER SMALL CAPITAL OU
    ),
    "(o)": (
        "\u24aa",  # PARENTHESIZED LATIN SMALL LETTER O
    ),
    "oe": (
        "\u0153",  # LATIN SMALL LIGATURE OE
        "\u1d14",  # LATIN SMALL LETTER TURNED OE
    ),
    "oo": (
        "\ua74f",  # LATIN SMALL LETTER OO
    ),
    "ou": (
        "\u0223",  # LATIN SMALL LETTER OU
    ),
    "P": (
        "\u01a4",  # LATIN CAPITAL LETTER P WITH HOOK
        "\u1d18",  # LATIN LETTER SMALL CAPITAL P
        "\u1e54",  # LATIN CAPITAL LETTER P WITH ACUTE
        "\u1e56",  # LATIN CAPITAL LETTER P WITH DOT ABOVE
        "\u24c5",  # CIRCLED LATIN CAPITAL LETTER P
        "\u2c63",  # LATIN CAPITAL LETTER P WITH STROKE
        "\ua750",  # LATIN CAPITAL LETTER P WITH STROKE THROUGH DESCENDER
        "\ua752",  # LATIN CAPITAL LETTER P WITH FLOURISH
        "\ua754",  # LATIN CAPITAL LETTER P WITH SQUIRREL TAIL
        "\uff30",  # FULLWIDTH LATIN CAPITAL LETTER P
        "\u03a0",  # GREEK CAPITAL LETTER PI
        "\u2ca0",  # COPTIC CAPITAL LETTER PI
        "\u041f",  # CYRILLIC CAPITAL LETTER PE
        "\u2c12",  # GLAGOLITIC CAPITAL LETTER POKOJI
        "\u2c1a",  # GLAGOLITIC CAPITAL LETTER PE
        "\u16c8",  # RUNIC LETTER PERTHO PEORTH P
        "\u16d4",  # RUNIC LETTER DOTTED-P
        "\u16d5",  # RUNIC LETTER OPEN-P
    ),
    "p": (
        "\u01a5",  # LATIN SMALL LETTER P WITH HOOK
        "\u1d71",  # LATIN SMALL LETTER P WITH MIDDLE TILDE
        "\u1d7d",  # LATIN SMALL LETTER P WITH STROKE
        "\u1d88",  # LATIN SMALL LETTER P WITH PALATAL HOOK
        "\u1e55",  # LATIN SMALL LETTER P WITH ACUTE
        "\u1e57",  # LATIN SMALL LETTER P WITH DOT ABOVE
        "\u24df",  # CIRCLED LATIN SMALL LETTER P
        "\ua751",  # LATIN SMALL LETTER P WITH STROKE THROUGH DESCENDER
        "\ua753",  # LATIN SMALL LETTER P WITH FLOURISH
        "\ua755",  # LATIN SMALL LETTER P WITH SQUIRREL TAIL
        "\ua7fc",  # LATIN EPIGRAPHIC LETTER REVERSED P
        "\uff50",  # FULLWIDTH LATIN SMALL LETTER P
        "\u03c0",  # GREEK SMALL LETTER PI
        "\u03d6",  # GREEK PI SYMBOL
        "\u2ca1",  # COPTIC SMALL LETTER PI
        "\u043f",  # CYRILLIC SMALL LETTER PE
        "\u2c42",  # GLAGOLITIC SMALL LETTER POKOJI
        "\u2c4a",  # GLAGOLITIC SMALL LETTER PE
    ),
    "(p)": (
        "\u24ab",  # PARENTHESIZED LATIN SMALL LETTER P
    ),
    "Q": (
        "\u024a",  # LATIN CAPITAL LETTER SMALL Q WITH HOOK TAIL
        "\u24c6",  # CIRCLED LATIN CAPITAL LETTER Q
        "\ua756",  # LATIN CAPITAL LETTER Q WITH STROKE THROUGH DESCENDER
        "\ua758",  # LATIN CAPITAL LETTER Q WITH DIAGONAL STROKE
        "\uff31",  # FULLWIDTH LATIN CAPITAL LETTER Q
        "\u03d8",  # GREEK LETTER ARCHAIC KOPPA
        "\u03de",  # GREEK LETTER KOPPA
        "\u16e9",  # RUNIC LETTER Q
    ),
    "q": (
        "\u0138",  # LATIN SMALL LETTER KRA
        "\u024b",  # LATIN SMALL LETTER Q WITH HOOK TAIL
        "\u02a0",  # LATIN SMALL LETTER Q WITH HOOK
        "\u24e0",  # CIRCLED LATIN SMALL LETTER Q
        "\ua757",  # LATIN SMALL LETTER Q WITH STROKE THROUGH DESCENDER
        "\ua759",  # LATIN SMALL LETTER Q WITH DIAGONAL STROKE
        "\uff51",  # FULLWIDTH LATIN SMALL LETTER Q
        "\u03d9",  # GREEK SMALL LETTER ARCHAIC KOPPA
        "\u03df",  # GREEK SMALL LETTER KOPPA
    ),
    "(q)": (
        "\u24ac",  # PARENTHESIZED LATIN SMALL LETTER Q
    ),
    "qp": (
        "\u0239",  # LATIN SMALL LETTER QP DIGRAPH
    ),
    "R": (
        "\u0154",  # LATIN CAPITAL LETTER R WITH ACUTE
        "\u0156",  # LATIN CAPITAL LETTER R WITH CEDILLA
        "\u0158",  # LATIN CAPITAL LETTER R WITH CARON
        "\u0210",  # LATIN CAPITAL LETTER R WITH DOUBLE GRAVE
        "\u0212",  # LATIN CAPITAL LETTER R WITH INVERTED BREVE
        "\u024c",  # LATIN CAPITAL LETTER R WITH STROKE
        "\u0280",  # LATIN LETTER SMALL CAPITAL R
        "\u0281",  # LATIN LETTER SMALL CAPITAL INVERTED R
        "\u1d19",  # LATIN LETTER SMALL CAPITAL REVERSED R
        "\u1d1a",  # LATIN LETTER SMALL CAPITAL TURNED R
        "\u1e58",  # LATIN CAPITAL LETTER R WITH DOT ABOVE
        "\u1e5a",  # LATIN CAPITAL LETTER R WITH DOT BELOW
        "\u1e5c",  # LATIN CAPITAL LETTER R WITH DOT BELOW AND MACRON
        "\u1e5e",  # LATIN CAPITAL LETTER R WITH LINE BELOW
        "\u24c7",  # CIRCLED LATIN CAPITAL LETTER R
        "\u2c64",  # LATIN CAPITAL LETTER R WITH TAIL
        "\ua75a",  # LATIN CAPITAL LETTER R ROTUNDA
        "\ua782",  # LATIN CAPITAL LETTER INSULAR R
        "\uff32",  # FULLWIDTH LATIN CAPITAL LETTER R
        "\u03a1",  # GREEK CAPITAL LETTER RHO
        "\u1fec",  # GREEK CAPITAL LETTER RHO WITH DASIA
        "\u1d29",  # GREEK LETTER SMALL CAPITAL RHO
        "\u2ca2",  # COPTIC CAPITAL LETTER RO
        "\u0420",  # CYRILLIC CAPITAL LETTER ER
        "\u2c13",  # GLAGOLITIC CAPITAL LETTER RITSI
        "\u16b1",  # RUNIC LETTER RAIDO RAD REID R
        "\u16e6",  # RUNIC LETTER LONG-BRANCH-YR
        "\u16e7",  # RUNIC LETTER SHORT-TWIG-YR
        "\u16e8",  # RUNIC LETTER ICELANDIC-YR
    ),
    "r": (
        "\u0155",  # LATIN SMALL LETTER R WITH ACUTE
        "\u0157",  # LATIN SMALL LETTER R WITH CEDILLA
        "\u0159",  # LATIN SMALL LETTER R WITH CARON
        "\u0211",  # LATIN SMALL LETTER R WITH DOUBLE GRAVE
        "\u0213",  # LATIN SMALL LETTER R WITH INVERTED BREVE
        "\u024d",  # LATIN SMALL LETTER R WITH STROKE
        "\u027c",  # LATIN SMALL LETTER R WITH LONG LEG
        "\u027d",  # LATIN SMALL LETTER R WITH TAIL
        "\u027e",  # LATIN SMALL LETTER R WITH FISHHOOK
        "\u027f",  # LATIN SMALL LETTER REVERSED R WITH FISHHOOK
        "\u1d63",  # LATIN SUBSCRIPT SMALL LETTER R
        "\u1d72",  # LATIN SMALL LETTER R WITH MIDDLE TILDE
        "\u1d73",  # LATIN SMALL LETTER R WITH FISHHOOK AND MIDDLE TILDE
        "\u1d89",  # LATIN SMALL LETTER R WITH PALATAL HOOK
        "\u1e59",  # LATIN SMALL LETTER R WITH DOT ABOVE
        "\u1e5b",  # LATIN SMALL LETTER R WITH DOT BELOW
        "\u1e5d",  # LATIN SMALL LETTER R WITH DOT BELOW AND MACRON
        "\u1e5f",  # LATIN SMALL LETTER R WITH LINE BELOW
        "\u24e1",  # CIRCLED LATIN SMALL LETTER R
        "\ua75b",  # LATIN SMALL LETTER R ROTUNDA
        "\ua783",  # LATIN SMALL LETTER INSULAR R
        "\uff52",  # FULLWIDTH LATIN SMALL LETTER R
        "\u03c1",  # GREEK SMALL LETTER RHO
        "\u1fe4",  # GREEK SMALL LETTER RHO WITH PSILI
        "\u1fe5",  # GREEK SMALL LETTER RHO WITH DASIA
        "\u03f1",  # GREEK RHO SYMBOL
        "\u03fc",  # GREEK RHO WITH STROKE SYMBOL
        "\u1d68",  # GREEK SUBSCRIPT SMALL LETTER RHO
        "\u2ca3",  # COPTIC SMALL LETTER RO
        "\u0440",  # CYRILLIC SMALL LETTER ER
        "\u2c43",  # GLAGOLITIC SMALL LETTER RITSI
    ),
    "(r)": (
        "\u24ad",  # PARENTHESIZED LATIN SMALL LETTER R
    ),
    "S": (
        "\u015a",  # LATIN CAPITAL LETTER S WITH ACUTE
        "\u015c",  # LATIN CAPITAL LETTER S WITH CIRCUMFLEX
        "\u015e",  # LATIN CAPITAL LETTER S WITH CEDILLA
        "\u0160",  # LATIN CAPITAL LETTER S WITH CARON
        "\u0218",  # LATIN CAPITAL LETTER S WITH COMMA BELOW
        "\u1e60",  # LATIN CAPITAL LETTER S WITH DOT ABOVE
        "\u1e62",  # LATIN CAPITAL LETTER S WITH DOT BELOW
        "\u1e64",  # LATIN CAPITAL LETTER S WITH ACUTE AND DOT ABOVE
        "\u1e66",  # LATIN CAPITAL LETTER S WITH CARON AND DOT ABOVE
        "\u1e68",  # LATIN CAPITAL LETTER S WITH DOT BELOW AND DOT ABOVE
        "\u24c8",  # CIRCLED LATIN CAPITAL LETTER S
        "\ua731",  # LATIN LETTER SMALL CAPITAL S
        "\ua785",  # LATIN SMALL LETTER INSULAR S
        "\uff33",  # FULLWIDTH LATIN CAPITAL LETTER S
        "\u03a3",  # GREEK CAPITAL LETTER SIGMA
        "\u03f9",  # GREEK CAPITAL LUNATE SIGMA SYMBOL
        "\u0421",  # CYRILLIC CAPITAL LETTER ES
        "\u2c14",  # GLAGOLITIC CAPITAL LETTER SLOVO
        "\u16ca",  # RUNIC LETTER SOWILO S
        "\u16cb",  # RUNIC LETTER SIGEL LONG-BRANCH-SOL S
        "\u16cc",  # RUNIC LETTER SHORT-TWIG-SOL S
    ),
    "s": (
        "\u015b",  # LATIN SMALL LETTER S WITH ACUTE
        "\u015d",  # LATIN SMALL LETTER S WITH CIRCUMFLEX
        "\u015f",  # LATIN SMALL LETTER S WITH CEDILLA
        "\u0161",  # LATIN SMALL LETTER S WITH CARON
        "\u017f",  # LATIN SMALL LETTER LONG S
        "\u0219",  # LATIN SMALL LETTER S WITH COMMA BELOW
        "\u023f",  # LATIN SMALL LETTER S WITH SWASH TAIL
        "\u0282",  # LATIN SMALL LETTER S WITH HOOK
        "\u1d74",  # LATIN SMALL LETTER S WITH MIDDLE TILDE
        "\u1d8a",  # LATIN SMALL LETTER S WITH PALATAL HOOK
        "\u1e61",  # LATIN SMALL LETTER S WITH DOT ABOVE
        "\u1e63",  # LATIN SMALL LETTER S WITH DOT BELOW
        "\u1e65",  # LATIN SMALL LETTER S WITH ACUTE AND DOT ABOVE
        "\u1e67",  # LATIN SMALL LETTER S WITH CARON AND DOT ABOVE
        "\u1e69",  # LATIN SMALL LETTER S WITH DOT BELOW AND DOT ABOVE
        "\u1e9c",  # LATIN SMALL LETTER LONG S WITH DIAGONAL STROKE
        "\u1e9d",  # LATIN SMALL LETTER LONG S WITH HIGH STROKE
        "\u24e2",  # CIRCLED LATIN SMALL LETTER S
        "\ua784",  # LATIN CAPITAL LETTER INSULAR S
        "\uff53",  # FULLWIDTH LATIN SMALL LETTER S
        "\u03c3",  # GREEK SMALL LETTER SIGMA
        "\u03c2",  # GREEK SMALL LETTER FINAL SIGMA
        "\u03f2",  # GREEK LUNATE SIGMA SYMBOL
        "\u0441",  # CYRILLIC SMALL LETTER ES
        "\u2c44",  # GLAGOLITIC SMALL LETTER SLOVO
    ),
    "SS": (
        "\u1e9e",  # LATIN CAPITAL LETTER SHARP S
    ),
    "ST": (
        "\u16e5",  # RUNIC LETTER STAN
    ),
    "(s)": (
        "\u24ae",  # PARENTHESIZED LATIN SMALL LETTER S
    ),
    "ss": (
        "\u00df",  # LATIN SMALL LETTER SHARP S
    ),
    "st": (
        "\ufb06",  # LATIN SMALL LIGATURE ST
    ),
    "T": (
        "\u0162",  # LATIN CAPITAL LETTER T WITH CEDILLA
        "\u0164",  # LATIN CAPITAL LETTER T WITH CARON
        "\u0166",  # LATIN CAPITAL LETTER T WITH STROKE
        "\u01ac",  # LATIN CAPITAL LETTER T WITH HOOK
        "\u01ae",  # LATIN CAPITAL LETTER T WITH RETROFLEX HOOK
        "\u021a",  # LATIN CAPITAL LETTER T WITH COMMA BELOW
        "\u023e",  # LATIN CAPITAL LETTER T WITH DIAGONAL STROKE
        "\u1d1b",  # LATIN LETTER SMALL CAPITAL T
        "\u1e6a",  # LATIN CAPITAL LETTER T WITH DOT ABOVE
        "\u1e6c",  # LATIN CAPITAL LETTER T WITH DOT BELOW
        "\u1e6e",  # LATIN CAPITAL LETTER T WITH LINE BELOW
        "\u1e70",  # LATIN CAPITAL LETTER T WITH CIRCUMFLEX BELOW
        "\u24c9",  # CIRCLED LATIN CAPITAL LETTER T
        "\ua786",  # LATIN CAPITAL LETTER INSULAR T
        "\uff34",  # FULLWIDTH LATIN CAPITAL LETTER T
        "\u03a4",  # GREEK CAPITAL LETTER TAU
        "\u2ca6",  # COPTIC CAPITAL LETTER TAU
        "\u0422",  # CYRILLIC CAPITAL LETTER TE
        "\u2c15",  # GLAGOLITIC CAPITAL LETTER TVRIDO
        "\u16cf",  # RUNIC LETTER TIWAZ TIR TYR T
        "\u16d0",  # RUNIC LETTER SHORT-TWIG-TYR T
    ),
    "t": (
        "\u0163",  # LATIN SMALL LETTER T WITH CEDILLA
        "\u0165",  # LATIN SMALL LETTER T WITH CARON
        "\u0167",  # LATIN SMALL LETTER T WITH STROKE
        "\u01ab",  # LATIN SMALL LETTER T WITH PALATAL HOOK
        "\u01ad",  # LATIN SMALL LETTER T WITH HOOK
        "\u021b",  # LATIN SMALL LETTER T WITH COMMA BELOW
        "\u0236",  # LATIN SMALL LETTER T WITH CURL
        "\u0287",  # LATIN SMALL LETTER TURNED T
        "\u0288",  # LATIN SMALL LETTER T WITH RETROFLEX HOOK
        "\u1d75",  # LATIN SMALL LETTER T WITH MIDDLE TILDE
        "\u1e6b",  # LATIN SMALL LETTER T WITH DOT ABOVE
        "\u1e6d",  # LATIN SMALL LETTER T WITH DOT BELOW
        "\u1e6f",  # LATIN SMALL LETTER T WITH LINE BELOW
        "\u1e71",  # LATIN SMALL LETTER T WITH CIRCUMFLEX BELOW
        "\u1e97",  # LATIN SMALL LETTER T WITH DIAERESIS
        "\u24e3",  # CIRCLED LATIN SMALL LETTER T
        "\u2c66",  # LATIN SMALL LETTER T WITH DIAGONAL STROKE
        "\uff54",  # FULLWIDTH LATIN SMALL LETTER T
        "\u03c4",  # GREEK SMALL LETTER TAU
        "\u2ca7",  # COPTIC SMALL LETTER TAU
        "\u0442",  # CYRILLIC SMALL LETTER TE
        "\u1c84",  # CYRILLIC SMALL LETTER TALL TE
        "\u1c85",  # CYRILLIC SMALL LETTER THREE-LEGGED TE
        "\u2c45",  # GLAGOLITIC SMALL LETTER TVRIDO
    ),
    "TH": (
        "\u00de",  # LATIN CAPITAL LETTER THORN
        "\ua766",  # LATIN CAPITAL LETTER THORN WITH STROKE THROUGH DESCENDER
        "\u0398",  # GREEK CAPITAL LETTER THETA
        "\u03f4",  # GREEK CAPITAL THETA SYMBOL
        "\u2c90",  # COPTIC CAPITAL LETTER THETHE
        "\u0472",  # CYRILLIC CAPITAL LETTER FITA
        "\u2c2a",  # GLAGOLITIC CAPITAL LETTER FITA
        "\u16a6",  # RUNIC LETTER THURISAZ THURS THORN
        "\u16a7",  # RUNIC LETTER ETH
    ),
    "TZ": (
        "\ua728",  # LATIN CAPITAL LETTER TZ
    ),
    "(t)": (
        "\u24af",  # PARENTHESIZED LATIN SMALL LETTER T
    ),
    "tc": (
        "\u02a8",  # LATIN SMALL LETTER TC DIGRAPH WITH CURL
    ),
    "th": (
        "\u00fe",  # LATIN SMALL LETTER THORN
        "\u1d7a",  # LATIN SMALL LETTER TH WITH STRIKETHROUGH
        "\ua767",  # LATIN SMALL LETTER THORN WITH STROKE THROUGH DESCENDER
        "\u03b8",  # GREEK SMALL LETTER THETA
        "\u03d1",  # GREEK THETA SYMBOL
        "\u1dbf",  # MODIFIER LETTER SMALL THETA
        "\u2c91",  # COPTIC SMALL LETTER THETHE
        "\u0473",  # CYRILLIC SMALL LETTER FITA
        "\u2c5a",  # GLAGOLITIC SMALL LETTER FITA
    ),
    "ts": (
        "\u02a6",  # LATIN SMALL LETTER TS DIGRAPH
        "\u0446",  # CYRILLIC SMALL LETTER TSE
        "\u045b",  # CYRILLIC SMALL LETTER TSHE
        "\u2c4c",  # GLAGOLITIC SMALL LETTER TSI
    ),
    "tz": (
        "\ua729",  # LATIN SMALL LETTER TZ
    ),
    "U": (
        "\u00d9",  # LATIN CAPITAL LETTER U WITH GRAVE
        "\u00da",  # LATIN CAPITAL LETTER U WITH ACUTE
        "\u00db",  # LATIN CAPITAL LETTER U WITH CIRCUMFLEX
        "\u00dc",  # LATIN CAPITAL LETTER U WITH DIAERESIS
        "\u0168",  # LATIN CAPITAL LETTER U WITH TILDE
        "\u016a",  # LATIN CAPITAL LETTER U WITH MACRON
        "\u016c",  # LATIN CAPITAL LETTER U WITH BREVE
        "\u016e",  # LATIN CAPITAL LETTER U WITH RING ABOVE
        "\u0170",  # LATIN CAPITAL LETTER U WITH DOUBLE ACUTE
        "\u0172",  # LATIN CAPITAL LETTER U WITH OGONEK
        "\u01af",  # LATIN CAPITAL LETTER U WITH HORN
        "\u01d3",  # LATIN CAPITAL LETTER U WITH CARON
        "\u01d5",  # LATIN CAPITAL LETTER U WITH DIAERESIS AND MACRON
        "\u01d7",  # LATIN CAPITAL LETTER U WITH DIAERESIS AND ACUTE
        "\u01d9",  # LATIN CAPITAL LETTER U WITH DIAERESIS AND CARON
        "\u01db",  # LATIN CAPITAL LETTER U WITH DIAERESIS AND GRAVE
        "\u0214",  # LATIN CAPITAL LETTER U WITH DOUBLE GRAVE
        "\u0216",  # LATIN CAPITAL LETTER U WITH INVERTED BREVE
        "\u0244",  # LATIN CAPITAL LETTER U BAR
        "\u1d1c",  # LATIN LETTER SMALL CAPITAL U
        "\u1d7e",  # LATIN SMALL CAPITAL LETTER U WITH STROKE
        "\u1e72",  # LATIN CAPITAL LETTER U WITH DIAERESIS BELOW
        "\u1e74",  # LATIN CAPITAL LETTER U WITH TILDE BELOW
        "\u1e76",  # LATIN CAPITAL LETTER U WITH CIRCUMFLEX BELOW
        "\u1e78",  # LATIN CAPITAL LETTER U WITH TILDE AND ACUTE
        "\u1e7a",  # LATIN CAPITAL LETTER U WITH MACRON AND DIAERESIS
        "\u1ee4",  # LATIN CAPITAL LETTER U WITH DOT BELOW
        "\u1ee6",  # LATIN CAPITAL LETTER U WITH HOOK ABOVE
        "\u1ee8",  # LATIN CAPITAL LETTER U WITH HORN AND ACUTE
        "\u1eea",  # LATIN CAPITAL LETTER U WITH HORN AND GRAVE
        "\u1eec",  # LATIN CAPITAL LETTER U WITH HORN AND HOOK ABOVE
        "\u1eee",  # LATIN CAPITAL LETTER U WITH HORN AND TILDE
        "\u1ef0",  # LATIN CAPITAL LETTER U WITH HORN AND DOT BELOW
        "\u24ca",  # CIRCLED LATIN CAPITAL LETTER U
        "\uff35",  # FULLWIDTH LATIN CAPITAL LETTER U
        "\u01b1",  # LATIN CAPITAL LETTER UPSILON
        "\u0423",  # CYRILLIC CAPITAL LETTER U
        "\u040e",  # CYRILLIC CAPITAL LETTER SHORT U
        "\u2ca8",  # COPTIC CAPITAL LETTER UA
        "\u0478",  # CYRILLIC CAPITAL LETTER UK
        "\ua64a",  # CYRILLIC CAPITAL LETTER MONOGRAPH UK
        "\u2c16",  # GLAGOLITIC CAPITAL LETTER UKU
        "\u16a2",  # RUNIC LETTER URUZ UR U
    ),
    "u": (
        "\u00f9",  # LATIN SMALL LETTER U WITH GRAVE
        "\u00fa",  # LATIN SMALL LETTER U WITH ACUTE
        "\u00fb",  # LATIN SMALL LETTER U WITH CIRCUMFLEX
        "\u00fc",  # LATIN SMALL LETTER U WITH DIAERESIS
        "\u0169",  # LATIN SMALL LETTER U WITH TILDE
        "\u016b",  # LATIN SMALL LETTER U WITH MACRON
        "\u016d",  # LATIN SMALL LETTER U WITH BREVE
        "\u016f",  # LATIN SMALL LETTER U WITH RING ABOVE
        "\u0171",  # LATIN SMALL LETTER U WITH DOUBLE ACUTE
        "\u0173",  # LATIN SMALL LETTER U WITH OGONEK
        "\u01b0",  # LATIN SMALL LETTER U WITH HORN
        "\u01d4",  # LATIN SMALL LETTER U WITH CARON
        "\u01d6",  # LATIN SMALL LETTER U WITH DIAERESIS AND MACRON
        "\u01d8",  # LATIN SMALL LETTER U WITH DIAERESIS AND ACUTE
        "\u01da",  # LATIN SMALL LETTER U WITH DIAERESIS AND CARON
        "\u01dc",  # LATIN SMALL LETTER U WITH DIAERESIS AND GRAVE
        "\u0215",  # LATIN SMALL LETTER U WITH DOUBLE GRAVE
        "\u0217",  # LATIN SMALL LETTER U WITH INVERTED BREVE
        "\u0289",  # LATIN SMALL LETTER U BAR
        "\u1d64",  # LATIN SUBSCRIPT SMALL LETTER U
        "\u1d99",  # LATIN SMALL LETTER U WITH RETROFLEX HOOK
        "\u1e73",  # LATIN SMALL LETTER U WITH DIAERESIS BELOW
        "\u1e75",  # LATIN SMALL LETTER U WITH TILDE BELOW
        "\u1e77",  # LATIN SMALL LETTER U WITH CIRCUMFLEX BELOW
        "\u1e79",  # LATIN SMALL LETTER U WITH TILDE AND ACUTE
        "\u1e7b",  # LATIN SMALL LETTER U WITH MACRON AND DIAERESIS
        "\u1ee5",  # LATIN SMALL LETTER U WITH DOT BELOW
        "\u1ee7",  # LATIN SMALL LETTER U WITH HOOK ABOVE
        "\u1ee9",  # LATIN SMALL LETTER U WITH HORN AND ACUTE
        "\u1eeb",  # LATIN SMALL LETTER U WITH HORN AND GRAVE
        "\u1eed",  # LATIN SMALL LETTER U WITH HORN AND HOOK ABOVE
        "\u1eef",  # LATIN SMALL LETTER U WITH HORN AND TILDE
        "\u1ef1",  # LATIN SMALL LETTER U WITH HORN AND DOT BELOW
        "\u24e4",  # CIRCLED LATIN SMALL LETTER U
        "\uff55",  # FULLWIDTH LATIN SMALL LETTER U
        "\u028a",  # LATIN SMALL LETTER UPSILON
        "\u1db7",  # MODIFIER LETTER SMALL UPSILON
        "\u1d7f",  # LATIN SMALL LETTER UPSILON WITH STROKE
        "\u0443",  # CYRILLIC SMALL LETTER U
        "\u045e",  # CYRILLIC SMALL LETTER SHORT U
        "\u2ca9",  # COPTIC SMALL LETTER UA
        "\u0479",  # CYRILLIC SMALL LETTER UK
        "\ua64b",  # CYRILLIC SMALL LETTER MONOGRAPH UK
        "\u2c46",  # GLAGOLITIC SMALL LETTER UKU
    ),
    "(u)": (
        "\u24b0",  # PARENTHESIZED LATIN SMALL LETTER U
    ),
    "ue": (
        "\u1d6b",  # LATIN SMALL LETTER UE
    ),
    "V": (
        "\u01b2",  # LATIN CAPITAL LETTER V WITH HOOK
        "\u0245",  # LATIN CAPITAL LETTER TURNED V
        "\u1d20",  # LATIN LETTER SMALL CAPITAL V
        "\u1e7c",  # LATIN CAPITAL LETTER V WITH TILDE
        "\u1e7e",  # LATIN CAPITAL LETTER V WITH DOT BELOW
        "\u1efc",  # LATIN CAPITAL LETTER MIDDLE-WELSH V
        "\u24cb",  # CIRCLED LATIN CAPITAL LETTER V
        "\ua75e",  # LATIN CAPITAL LETTER V WITH DIAGONAL STROKE
        "\ua768",  # LATIN CAPITAL LETTER VEND
        "\uff36",  # FULLWIDTH LATIN CAPITAL LETTER V
        "\u0412",  # CYRILLIC CAPITAL LETTER VE
        "\u2c02",  # GLAGOLITIC CAPITAL LETTER VEDE
        "\u16a1",  # RUNIC LETTER V
    ),
    "v": (
        "\u028b",  # LATIN SMALL LETTER V WITH HOOK
        "\u028c",  # LATIN SMALL LETTER TURNED V
        "\u1d65",  # LATIN SUBSCRIPT SMALL LETTER V
        "\u1d8c",  # LATIN SMALL LETTER V WITH PALATAL HOOK
        "\u1e7d",  # LATIN SMALL LETTER V WITH TILDE
        "\u1e7f",  # LATIN SMALL LETTER V WITH DOT BELOW
        "\u24e5",  # CIRCLED LATIN SMALL LETTER V
        "\u2c71",  # LATIN SMALL LETTER V WITH RIGHT HOOK
        "\u2c74",  # LATIN SMALL LETTER V WITH CURL
        "\ua75f",  # LATIN SMALL LETTER V WITH DIAGONAL STROKE
        "\uff56",  # FULLWIDTH LATIN SMALL LETTER V
        "\u0432",  # CYRILLIC SMALL LETTER VE
        "\u1c80",  # CYRILLIC SMALL LETTER ROUNDED VE
        "\u2c32",  # GLAGOLITIC SMALL LETTER VEDE
    ),
    "VY": (
        "\ua760",  # LATIN CAPITAL LETTER VY
    ),
    "(v)": (
        "\u24b1",  # PARENTHESIZED LATIN SMALL LETTER V
    ),
    "vy": (
        "\ua761",  # LATIN SMALL LETTER VY
    ),
    "W": (
        "\u0174",  # LATIN CAPITAL LETTER W WITH CIRCUMFLEX
        "\u01f7",  # LATIN CAPITAL LETTER WYNN
        "\u1d21",  # LATIN LETTER SMALL CAPITAL W
        "\u1e80",  # LATIN CAPITAL LETTER W WITH GRAVE
        "\u1e82",  # LATIN CAPITAL LETTER W WITH ACUTE
        "\u1e84",  # LATIN CAPITAL LETTER W WITH DIAERESIS
        "\u1e86",  # LATIN CAPITAL LETTER W WITH DOT ABOVE
        "\u1e88",  # LATIN CAPITAL LETTER W WITH DOT BELOW
        "\u24cc",  # CIRCLED LATIN CAPITAL LETTER W
        "\u2c72",  # LATIN CAPITAL LETTER W WITH HOOK
        "\uff37",  # FULLWIDTH LATIN CAPITAL LETTER W
        "\u16b9",  # RUNIC LETTER WUNJO WYNN W
        "\u16a5",  # RUNIC LETTER W
    ),
    "w": (
        "\u0175",  # LATIN SMALL LETTER W WITH CIRCUMFLEX
        "\u01bf",  # LATIN LETTER WYNN
        "\u028d",  # LATIN SMALL LETTER TURNED W
        "\u1e81",  # LATIN SMALL LETTER W WITH GRAVE
        "\u1e83",  # LATIN SMALL LETTER W WITH ACUTE
        "\u1e85",  # LATIN SMALL LETTER W WITH DIAERESIS
        "\u1e87",  # LATIN SMALL LETTER W WITH DOT ABOVE
        "\u1e89",  # LATIN SMALL LETTER W WITH DOT BELOW
        "\u1e98",  # LATIN SMALL LETTER W WITH RING ABOVE
        "\u24e6",  # CIRCLED LATIN SMALL LETTER W
        "\u2c73",  # LATIN SMALL LETTER W WITH HOOK
        "\uff57",  # FULLWIDTH LATIN SMALL LETTER W
    ),
    "(w)": (
        "\u24b2",  # PARENTHESIZED LATIN SMALL LETTER W
    ),
    "X": (
        "\u1e8a",  # LATIN CAPITAL LETTER X WITH DOT ABOVE
        "\u1e8c",  # LATIN CAPITAL LETTER X WITH DIAERESIS
        "\u24cd",  # CIRCLED LATIN CAPITAL LETTER X
        "\uff38",  # FULLWIDTH LATIN CAPITAL LETTER X
        "\u16ea",  # RUNIC LETTER X
    ),
    "x": (
        "\u1d8d",  # LATIN SMALL LETTER X WITH PALATAL HOOK
        "\u1e8b",  # LATIN SMALL LETTER X WITH DOT ABOVE
        "\u1e8d",  # LATIN SMALL LETTER X WITH DIAERESIS
        "\u2093",  # LATIN SUBSCRIPT SMALL LETTER X
        "\u24e7",  # CIRCLED LATIN SMALL LETTER X
        "\uff58",  # FULLWIDTH LATIN SMALL LETTER X
    ),
    "(x)": (
        "\u24b3",  # PARENTHESIZED LATIN SMALL LETTER X
    ),
    "Y": (
        "\u00dd",  # LATIN CAPITAL LETTER Y WITH ACUTE
        "\u0176",  # LATIN CAPITAL LETTER Y WITH CIRCUMFLEX
        "\u0178",  # LATIN CAPITAL LETTER Y WITH DIAERESIS
        "\u01b3",  # LATIN CAPITAL LETTER Y WITH HOOK
        "\u0232",  # LATIN CAPITAL LETTER Y WITH MACRON
        "\u024e",  # LATIN CAPITAL LETTER Y WITH STROKE
        "\u028f",  # LATIN LETTER SMALL CAPITAL Y
        "\u1e8e",  # LATIN CAPITAL LETTER Y WITH DOT ABOVE
        "\u1ef2",  # LATIN CAPITAL LETTER Y WITH GRAVE
        "\u1ef4",  # LATIN CAPITAL LETTER Y WITH DOT BELOW
        "\u1ef6",  # LATIN CAPITAL LETTER Y WITH HOOK ABOVE
        "\u1ef8",  # LATIN CAPITAL LETTER Y WITH TILDE
        "\u1efe",  # LATIN CAPITAL LETTER Y WITH LOOP
        "\u24ce",  # CIRCLED LATIN CAPITAL LETTER Y
        "\uff39",  # FULLWIDTH LATIN CAPITAL LETTER Y
        "\u03a5",  # GREEK CAPITAL LETTER UPSILON
        "\u03d2",  # GREEK UPSILON WITH HOOK SYMBOL
        "\u038e",  # GREEK CAPITAL LETTER UPSILON WITH TONOS
        "\u03ab",  # GREEK CAPITAL LETTER UPSILON WITH DIALYTIKA
        "\u0419",  # CYRILLIC CAPITAL LETTER SHORT I
        "\u16a4",  # RUNIC LETTER Y
        "\u16a3",  # RUNIC LETTER YR
    ),
    "y": (
        "\u00fd",  # LATIN SMALL LETTER Y WITH ACUTE
        "\u00ff",  # LATIN SMALL LETTER Y WITH DIAERESIS
        "\u0177",  # LATIN SMALL LETTER Y WITH CIRCUMFLEX
        "\u01b4",  # LATIN SMALL LETTER Y WITH HOOK
        "\u0233",  # LATIN SMALL LETTER Y WITH MACRON
        "\u024f",  # LATIN SMALL LETTER Y WITH STROKE
        "\u028e",  # LATIN SMALL LETTER TURNED Y
        "\u1e8f",  # LATIN SMALL LETTER Y WITH DOT ABOVE
        "\u1e99",  # LATIN SMALL LETTER Y WITH RING ABOVE
        "\u1ef3",  # LATIN SMALL LETTER Y WITH GRAVE
        "\u1ef5",  # LATIN SMALL LETTER Y WITH DOT BELOW
        "\u1ef7",  # LATIN SMALL LETTER Y WITH HOOK ABOVE
        "\u1ef9",  # LATIN SMALL LETTER Y WITH TILDE
        "\u1eff",  # LATIN SMALL LETTER Y WITH LOOP
        "\u24e8",  # CIRCLED LATIN SMALL LETTER Y
        "\uff59",  # FULLWIDTH LATIN SMALL LETTER Y
        "\u03c5",  # GREEK SMALL LETTER UPSILON
        "\u03cd",  # GREEK SMALL LETTER UPSILON WITH TONOS
        "\u03cb",  # GREEK SMALL LETTER UPSILON WITH DIALYTIKA
        "\u0439",  # CYRILLIC SMALL LETTER SHORT I
    ),
    "(y)": (
        "\u24b4",  # PARENTHESIZED LATIN SMALL LETTER Y
    ),
    "Z": (
        "\u0179",  # LATIN CAPITAL LETTER Z WITH ACUTE
        "\u017b",  # LATIN CAPITAL LETTER Z WITH DOT ABOVE
        "\u017d",  # LATIN CAPITAL LETTER Z WITH CARON
        "\u01b5",  # LATIN CAPITAL LETTER Z WITH STROKE
        "\u021c",  # LATIN CAPITAL LETTER YOGH
        "\u0224",  # LATIN CAPITAL LETTER Z WITH HOOK
        "\u1d22",  # LATIN LETTER SMALL CAPITAL Z
        "\u1e90",  # LATIN CAPITAL LETTER Z WITH CIRCUMFLEX
        "\u1e92",  # LATIN CAPITAL LETTER Z WITH DOT BELOW
        "\u1e94",  # LATIN CAPITAL LETTER Z WITH LINE BELOW
        "\u24cf",  # CIRCLED LATIN CAPITAL LETTER Z
        "\u2c6b",  # LATIN CAPITAL LETTER Z WITH DESCENDER
        "\ua762",  # LATIN CAPITAL LETTER VISIGOTHIC Z
        "\uff3a",  # FULLWIDTH LATIN CAPITAL LETTER Z
        "\u0396",  # GREEK CAPITAL LETTER ZETA
        "\u2c8a",  # COPTIC CAPITAL LETTER SOU
        "\u0417",  # CYRILLIC CAPITAL LETTER ZE
        "\ua640",  # CYRILLIC CAPITAL LETTER ZEMLYA
        "\u2c08",  # GLAGOLITIC CAPITAL LETTER ZEMLJA
        "\u16c9",  # RUNIC LETTER ALGIZ EOLHX
        "\u16ce",  # RUNIC LETTER Z
    ),
    "z": (
        "\u017a",  # LATIN SMALL LETTER Z WITH ACUTE
        "\u017c",  # LATIN SMALL LETTER Z WITH DOT ABOVE
        "\u017e",  # LATIN SMALL LETTER Z WITH CARON
        "\u01b6",  # LATIN SMALL LETTER Z WITH STROKE
        "\u021d",  # LATIN SMALL LETTER YOGH
        "\u0225",  # LATIN SMALL LETTER Z WITH HOOK
        "\u0240",  # LATIN SMALL LETTER Z WITH SWASH TAIL
        "\u0290",  # LATIN SMALL LETTER Z WITH RETROFLEX HOOK
        "\u0291",  # LATIN SMALL LETTER Z WITH CURL
        "\u1d76",  # LATIN SMALL LETTER Z WITH MIDDLE TILDE
        "\u1d8e",  # LATIN SMALL LETTER Z WITH PALATAL HOOK
        "\u1e91",  # LATIN SMALL LETTER Z WITH CIRCUMFLEX
        "\u1e93",  # LATIN SMALL LETTER Z WITH DOT BELOW
        "\u1e95",  # LATIN SMALL LETTER Z WITH LINE BELOW
        "\u24e9",  # CIRCLED LATIN SMALL LETTER Z
        "\u2c6c",  # LATIN SMALL LETTER Z WITH DESCENDER
        "\ua763",  # LATIN SMALL LETTER VISIGOTHIC Z
        "\uff5a",  # FULLWIDTH LATIN SMALL LETTER Z
        "\u03b6",  # GREEK SMALL LETTER ZETA
        "\u2c8b",  # COPTIC SMALL LETTER SOU
        "\u0437",  # CYRILLIC SMALL LETTER ZE
        "\ua641",  # CYRILLIC SMALL LETTER ZEMLYA
        "\u2c38",  # GLAGOLITIC SMALL LETTER ZEMLJA
    ),
    "(z)": (
        "\u24b5",  # PARENTHESIZED LATIN SMALL LETTER Z
    ),
}
