"""Numeral equivalence classes for the transliteration table.

Superscript, subscript, circled, negative circled, fullwidth and other
digit forms fold to the plain digit. Enclosed numbers keep their enclosure
in ASCII: "DIGIT ONE FULL STOP" becomes "1." and "PARENTHESIZED DIGIT ONE"
becomes "(1)". Circled numbers from ten to twenty become their decimal
spelling.
"""

from __future__ import annotations

# ==========================================================================
# DIGITS AND ENCLOSED NUMBERS 0-20
# ==========================================================================
NUMERAL_CLASSES: dict[str, tuple[str, ...]] = {
    "0": (
        "\u2070",  # SUPERSCRIPT ZERO
        "\u2080",  # SUBSCRIPT ZERO
        "\u24ea",  # CIRCLED DIGIT ZERO
        "\u24ff",  # NEGATIVE CIRCLED DIGIT ZERO
        "\uff10",  # FULLWIDTH DIGIT ZERO
    ),
    "1": (
        "\u00b9",  # SUPERSCRIPT ONE
        "\u2081",  # SUBSCRIPT ONE
        "\u2460",  # CIRCLED DIGIT ONE
        "\u24f5",  # DOUBLE CIRCLED DIGIT ONE
        "\u2776",  # DINGBAT NEGATIVE CIRCLED DIGIT ONE
        "\u2780",  # DINGBAT CIRCLED SANS-SERIF DIGIT ONE
        "\u278a",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT ONE
        "\uff11",  # FULLWIDTH DIGIT ONE
    ),
    "1.": (
        "\u2488",  # DIGIT ONE FULL STOP
    ),
    "(1)": (
        "\u2474",  # PARENTHESIZED DIGIT ONE
    ),
    "2": (
        "\u00b2",  # SUPERSCRIPT TWO
        "\u2082",  # SUBSCRIPT TWO
        "\u2461",  # CIRCLED DIGIT TWO
        "\u24f6",  # DOUBLE CIRCLED DIGIT TWO
        "\u2777",  # DINGBAT NEGATIVE CIRCLED DIGIT TWO
        "\u2781",  # DINGBAT CIRCLED SANS-SERIF DIGIT TWO
        "\u278b",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT TWO
        "\uff12",  # FULLWIDTH DIGIT TWO
    ),
    "2.": (
        "\u2489",  # DIGIT TWO FULL STOP
    ),
    "(2)": (
        "\u2475",  # PARENTHESIZED DIGIT TWO
    ),
    "3": (
        "\u00b3",  # SUPERSCRIPT THREE
        "\u2083",  # SUBSCRIPT THREE
        "\u2462",  # CIRCLED DIGIT THREE
        "\u24f7",  # DOUBLE CIRCLED DIGIT THREE
        "\u2778",  # DINGBAT NEGATIVE CIRCLED DIGIT THREE
        "\u2782",  # DINGBAT CIRCLED SANS-SERIF DIGIT THREE
        "\u278c",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT THREE
        "\uff13",  # FULLWIDTH DIGIT THREE
    ),
    "3.": (
        "\u248a",  # DIGIT THREE FULL STOP
    ),
    "(3)": (
        "\u2476",  # PARENTHESIZED DIGIT THREE
    ),
    "4": (
        "\u2074",  # SUPERSCRIPT FOUR
        "\u2084",  # SUBSCRIPT FOUR
        "\u2463",  # CIRCLED DIGIT FOUR
        "\u24f8",  # DOUBLE CIRCLED DIGIT FOUR
        "\u2779",  # DINGBAT NEGATIVE CIRCLED DIGIT FOUR
        "\u2783",  # DINGBAT CIRCLED SANS-SERIF DIGIT FOUR
        "\u278d",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT FOUR
        "\uff14",  # FULLWIDTH DIGIT FOUR
    ),
    "4.": (
        "\u248b",  # DIGIT FOUR FULL STOP
    ),
    "(4)": (
        "\u2477",  # PARENTHESIZED DIGIT FOUR
    ),
    "5": (
        "\u2075",  # SUPERSCRIPT FIVE
        "\u2085",  # SUBSCRIPT FIVE
        "\u2464",  # CIRCLED DIGIT FIVE
        "\u24f9",  # DOUBLE CIRCLED DIGIT FIVE
        "\u277a",  # DINGBAT NEGATIVE CIRCLED DIGIT FIVE
        "\u2784",  # DINGBAT CIRCLED SANS-SERIF DIGIT FIVE
        "\u278e",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT FIVE
        "\uff15",  # FULLWIDTH DIGIT FIVE
    ),
    "5.": (
        "\u248c",  # DIGIT FIVE FULL STOP
    ),
    "(5)": (
        "\u2478",  # PARENTHESIZED DIGIT FIVE
    ),
    "6": (
        "\u2076",  # SUPERSCRIPT SIX
        "\u2086",  # SUBSCRIPT SIX
        "\u2465",  # CIRCLED DIGIT SIX
        "\u24fa",  # DOUBLE CIRCLED DIGIT SIX
        "\u277b",  # DINGBAT NEGATIVE CIRCLED DIGIT SIX
        "\u2785",  # DINGBAT CIRCLED SANS-SERIF DIGIT SIX
        "\u278f",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT SIX
        "\uff16",  # FULLWIDTH DIGIT SIX
    ),
    "6.": (
        "\u248d",  # DIGIT SIX FULL STOP
    ),
    "(6)": (
        "\u2479",  # PARENTHESIZED DIGIT SIX
    ),
    "7": (
        "\u2077",  # SUPERSCRIPT SEVEN
        "\u2087",  # SUBSCRIPT SEVEN
        "\u2466",  # CIRCLED DIGIT SEVEN
        "\u24fb",  # DOUBLE CIRCLED DIGIT SEVEN
        "\u277c",  # DINGBAT NEGATIVE CIRCLED DIGIT SEVEN
        "\u2786",  # DINGBAT CIRCLED SANS-SERIF DIGIT SEVEN
        "\u2790",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT SEVEN
        "\uff17",  # FULLWIDTH DIGIT SEVEN
    ),
    "7.": (
        "\u248e",  # DIGIT SEVEN FULL STOP
    ),
    "(7)": (
        "\u247a",  # PARENTHESIZED DIGIT SEVEN
    ),
    "8": (
        "\u2078",  # SUPERSCRIPT EIGHT
        "\u2088",  # SUBSCRIPT EIGHT
        "\u2467",  # CIRCLED DIGIT EIGHT
        "\u24fc",  # DOUBLE CIRCLED DIGIT EIGHT
        "\u277d",  # DINGBAT NEGATIVE CIRCLED DIGIT EIGHT
        "\u2787",  # DINGBAT CIRCLED SANS-SERIF DIGIT EIGHT
        "\u2791",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT EIGHT
        "\uff18",  # FULLWIDTH DIGIT EIGHT
    ),
    "8.": (
        "\u248f",  # DIGIT EIGHT FULL STOP
    ),
    "(8)": (
        "\u247b",  # PARENTHESIZED DIGIT EIGHT
    ),
    "9": (
        "\u2079",  # SUPERSCRIPT NINE
        "\u2089",  # SUBSCRIPT NINE
        "\u2468",  # CIRCLED DIGIT NINE
        "\u24fd",  # DOUBLE CIRCLED DIGIT NINE
        "\u277e",  # DINGBAT NEGATIVE CIRCLED DIGIT NINE
        "\u2788",  # DINGBAT CIRCLED SANS-SERIF DIGIT NINE
        "\u2792",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF DIGIT NINE
        "\uff19",  # FULLWIDTH DIGIT NINE
    ),
    "9.": (
        "\u2490",  # DIGIT NINE FULL STOP
    ),
    "(9)": (
        "\u247c",  # PARENTHESIZED DIGIT NINE
    ),
    "10": (
        "\u2469",  # CIRCLED NUMBER TEN
        "\u24fe",  # DOUBLE CIRCLED NUMBER TEN
        "\u277f",  # DINGBAT NEGATIVE CIRCLED NUMBER TEN
        "\u2789",  # DINGBAT CIRCLED SANS-SERIF NUMBER TEN
        "\u2793",  # DINGBAT NEGATIVE CIRCLED SANS-SERIF NUMBER TEN
    ),
    "10.": (
        "\u2491",  # NUMBER TEN FULL STOP
    ),
    "(10)": (
        "\u247d",  # PARENTHESIZED NUMBER TEN
    ),
    "11": (
        "\u246a",  # CIRCLED NUMBER ELEVEN
        "\u24eb",  # NEGATIVE CIRCLED NUMBER ELEVEN
    ),
    "11.": (
        "\u2492",  # NUMBER ELEVEN FULL STOP
    ),
    "(11)": (
        "\u247e",  # PARENTHESIZED NUMBER ELEVEN
    ),
    "12": (
        "\u246b",  # CIRCLED NUMBER TWELVE
        "\u24ec",  # NEGATIVE CIRCLED NUMBER TWELVE
    ),
    "12.": (
        "\u2493",  # NUMBER TWELVE FULL STOP
    ),
    "(12)": (
        "\u247f",  # PARENTHESIZED NUMBER TWELVE
    ),
    "13": (
        "\u246c",  # CIRCLED NUMBER THIRTEEN
        "\u24ed",  # NEGATIVE CIRCLED NUMBER THIRTEEN
    ),
    "13.": (
        "\u2494",  # NUMBER THIRTEEN FULL STOP
    ),
    "(13)": (
        "\u2480",  # PARENTHESIZED NUMBER THIRTEEN
    ),
    "14": (
        "\u246d",  # CIRCLED NUMBER FOURTEEN
        "\u24ee",  # NEGATIVE CIRCLED NUMBER FOURTEEN
    ),
    "14.": (
        "\u2495",  # NUMBER FOURTEEN FULL STOP
    ),
    "(14)": (
        "\u2481",  # PARENTHESIZED NUMBER FOURTEEN
    ),
    "15": (
        "\u246e",  # CIRCLED NUMBER FIFTEEN
        "\u24ef",  # NEGATIVE CIRCLED NUMBER FIFTEEN
    ),
    "15.": (
        "\u2496",  # NUMBER FIFTEEN FULL STOP
    ),
    "(15)": (
        "\u2482",  # PARENTHESIZED NUMBER FIFTEEN
    ),
    "16": (
        "\u246f",  # CIRCLED NUMBER SIXTEEN
        "\u24f0",  # NEGATIVE CIRCLED NUMBER SIXTEEN
    ),
    "16.": (
        "\u2497",  # NUMBER SIXTEEN FULL STOP
    ),
    "(16)": (
        "\u2483",  # PARENTHESIZED NUMBER SIXTEEN
    ),
    "17": (
        "\u2470",  # CIRCLED NUMBER SEVENTEEN
        "\u24f1",  # NEGATIVE CIRCLED NUMBER SEVENTEEN
        "\u16ee",  # RUNIC ARLAUG SYMBOL
    ),
    "17.": (
        "\u2498",  # NUMBER SEVENTEEN FULL STOP
    ),
    "(17)": (
        "\u2484",  # PARENTHESIZED NUMBER SEVENTEEN
    ),
    "18": (
        "\u2471",  # CIRCLED NUMBER EIGHTEEN
        "\u24f2",  # NEGATIVE CIRCLED NUMBER EIGHTEEN
        "\u16ef",  # RUNIC TVIMADUR SYMBOL
    ),
    "18.": (
        "\u2499",  # NUMBER EIGHTEEN FULL STOP
    ),
    "(18)": (
        "\u2485",  # PARENTHESIZED NUMBER EIGHTEEN
    ),
    "19": (
        "\u2472",  # CIRCLED NUMBER NINETEEN
        "\u24f3",  # NEGATIVE CIRCLED NUMBER NINETEEN
        "\u16f0",  # RUNIC BELGTHOR SYMBOL
    ),
    "19.": (
        "\u249a",  # NUMBER NINETEEN FULL STOP
    ),
    "(19)": (
        "\u2486",  # PARENTHESIZED NUMBER NINETEEN
    ),
    "20": (
        "\u2473",  # CIRCLED NUMBER TWENTY
        "\u24f4",  # NEGATIVE CIRCLED NUMBER TWENTY
    ),
    "20.": (
        "\u249b",  # NUMBER TWENTY FULL STOP
    ),
    "(20)": (
        "\u2487",  # PARENTHESIZED NUMBER TWENTY
    ),
}
