"""ASCII look-alikes for code points an encoder cannot represent.

LOOKALIKE_MAP is keyed by code point. It is only consulted after the target
codec has rejected a code point, so characters native to the target (box
drawing in CP437, everything in UTF-8 and UTF-16) are never replaced.
"""

from __future__ import annotations

LOOKALIKE_MAP: dict[int, str] = {
    # Typographic quotes
    0x2018: "'",  # LEFT SINGLE QUOTATION MARK
    0x2019: "'",  # RIGHT SINGLE QUOTATION MARK
    0x201A: ",",  # SINGLE LOW-9 QUOTATION MARK
    0x201B: "'",  # SINGLE HIGH-REVERSED-9 QUOTATION MARK
    0x201C: '"',  # LEFT DOUBLE QUOTATION MARK
    0x201D: '"',  # RIGHT DOUBLE QUOTATION MARK
    0x201E: '"',  # DOUBLE LOW-9 QUOTATION MARK
    0x2032: "'",  # PRIME
    0x2033: '"',  # DOUBLE PRIME
    0x2039: "<",  # SINGLE LEFT-POINTING ANGLE QUOTATION MARK
    0x203A: ">",  # SINGLE RIGHT-POINTING ANGLE QUOTATION MARK
    # Dashes
    0x2010: "-",  # HYPHEN
    0x2011: "-",  # NON-BREAKING HYPHEN
    0x2012: "-",  # FIGURE DASH
    0x2013: "-",  # EN DASH
    0x2014: "--",  # EM DASH
    0x2015: "--",  # HORIZONTAL BAR
    0x2212: "-",  # MINUS SIGN
    # Spaces
    0x2002: " ",  # EN SPACE
    0x2003: " ",  # EM SPACE
    0x2009: " ",  # THIN SPACE
    0x200A: " ",  # HAIR SPACE
    0x200B: "",  # ZERO WIDTH SPACE
    0x202F: " ",  # NARROW NO-BREAK SPACE
    0x3000: " ",  # IDEOGRAPHIC SPACE
    0xFEFF: "",  # ZERO WIDTH NO-BREAK SPACE (BOM)
    # Ellipsis and bullets
    0x2026: "...",  # HORIZONTAL ELLIPSIS
    0x2022: "*",  # BULLET
    0x2023: ">",  # TRIANGULAR BULLET
    0x2043: "-",  # HYPHEN BULLET
    # Arrows
    0x2190: "<-",  # LEFTWARDS ARROW
    0x2191: "^",  # UPWARDS ARROW
    0x2192: "->",  # RIGHTWARDS ARROW
    0x2193: "v",  # DOWNWARDS ARROW
    0x2194: "<->",  # LEFT RIGHT ARROW
    0x21D2: "=>",  # RIGHTWARDS DOUBLE ARROW
    # Math
    0x00D7: "x",  # MULTIPLICATION SIGN
    0x2260: "!=",  # NOT EQUAL TO
    0x2030: "o/oo",  # PER MILLE SIGN
    0x00BE: "3/4",  # VULGAR FRACTION THREE QUARTERS
    0x2153: "1/3",  # VULGAR FRACTION ONE THIRD
    0x2044: "/",  # FRACTION SLASH
    # Currency
    0x20AC: "EUR",  # EURO SIGN
    0x20B9: "INR",  # INDIAN RUPEE SIGN
    0x20BF: "BTC",  # BITCOIN SIGN
    # Marks
    0x00A9: "(C)",  # COPYRIGHT SIGN
    0x00AE: "(R)",  # REGISTERED SIGN
    0x2122: "(TM)",  # TRADE MARK SIGN
    0x2116: "No.",  # NUMERO SIGN
    0x00A7: "S",  # SECTION SIGN
    0x00B6: "P",  # PILCROW SIGN
    0x00A6: "|",  # BROKEN BAR
    0x00B3: "3",  # SUPERSCRIPT THREE
    0x00B9: "1",  # SUPERSCRIPT ONE
    0x2103: "C",  # DEGREE CELSIUS
    # Box drawing without a CP437 slot
    0x2501: "-",  # BOX DRAWINGS HEAVY HORIZONTAL
    0x2503: "|",  # BOX DRAWINGS HEAVY VERTICAL
    0x250F: "+",  # BOX DRAWINGS HEAVY DOWN AND RIGHT
    0x2513: "+",  # BOX DRAWINGS HEAVY DOWN AND LEFT
    0x2517: "+",  # BOX DRAWINGS HEAVY UP AND RIGHT
    0x251B: "+",  # BOX DRAWINGS HEAVY UP AND LEFT
    # Misc symbols
    0x2605: "*",  # BLACK STAR
    0x2610: "[ ]",  # BALLOT BOX
    0x2611: "[x]",  # BALLOT BOX WITH CHECK
    0x2713: "v",  # CHECK MARK
    0x2717: "x",  # BALLOT X
    0x2764: "<3",  # HEAVY BLACK HEART
}
