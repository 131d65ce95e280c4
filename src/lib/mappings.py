"""
Mapping of ASCII characters to Unicode characters in a given context

Subscript and superscript equivalents come from the Unicode superscripts and
subscripts, phonetic extensions and spacing modifier blocks, which cover
only part of the alphabet. Bold, italic and bold-italic equivalents come from
the Mathematical Alphanumeric Symbols block.

Every lookup returns None when no equivalent exists; callers fall back to the
original character.
"""

from typing import Dict, Optional


SUBSCRIPTS: Dict[str, str] = {
    "0": "\u2080", "1": "\u2081", "2": "\u2082", "3": "\u2083", "4": "\u2084",
    "5": "\u2085", "6": "\u2086", "7": "\u2087", "8": "\u2088", "9": "\u2089",
    "+": "\u208a", "-": "\u208b", "=": "\u208c", "(": "\u208d", ")": "\u208e",
    "a": "\u2090", "e": "\u2091", "h": "\u2096", "i": "\u1d62", "j": "\u2c7c",
    "k": "\u2095", "l": "\u2097", "m": "\u2098", "n": "\u2099", "o": "\u2092",
    "p": "\u209a", "r": "\u1d63", "s": "\u209b", "t": "\u209c", "u": "\u1d64",
    "v": "\u1d65", "x": "\u2093",
}

SUPERSCRIPTS: Dict[str, str] = {
    "0": "\u2070", "1": "\u00b9", "2": "\u00b2", "3": "\u00b3", "4": "\u2074",
    "5": "\u2075", "6": "\u2076", "7": "\u2077", "8": "\u2078", "9": "\u2079",
    "+": "\u207a", "-": "\u207b", "=": "\u207c", "(": "\u207d", ")": "\u207e",
    "a": "\u1d43", "b": "\u1d47", "c": "\u1d9c", "d": "\u1d48", "e": "\u1d49",
    "f": "\u1da0", "g": "\u1d4d", "h": "\u02b0", "i": "\u2071", "j": "\u02b2",
    "k": "\u1d4f", "l": "\u02e1", "m": "\u1d50", "n": "\u207f", "o": "\u1d52",
    "p": "\u1d56", "r": "\u02b3", "s": "\u02e2", "t": "\u1d57", "u": "\u1d58",
    "v": "\u1d5b", "w": "\u02b7", "x": "\u02e3", "y": "\u02b8", "z": "\u1dbb",
}

# Modifier capitals; capitals missing here use the lower case superscript
SUPERSCRIPT_CAPITALS: Dict[str, str] = {
    "A": "\u1d2c", "B": "\u1d2e", "D": "\u1d30", "E": "\u1d31", "G": "\u1d33",
    "H": "\u1d34", "I": "\u1d35", "J": "\u1d36", "K": "\u1d37", "L": "\u1d38",
    "M": "\u1d39", "N": "\u1d3a", "O": "\u1d3c", "P": "\u1d3e", "R": "\u1d3f",
    "T": "\u1d40", "U": "\u1d41", "V": "\u2c7d", "W": "\u1d42",
}


def alphabet_build(
    upper: int,
    lower: int,
    digits: Optional[int] = None,
    holes: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Build a styled alphabet from the first code point of each run

    Args:
        upper: Code point for styled "A"
        lower: Code point for styled "a"
        digits: Code point for styled "0", if the style has digits
        holes: Characters whose styled form lives outside the run
               (e.g. italic "h" is U+210E PLANCK CONSTANT)

    Returns:
        Dict mapping ASCII letters (and digits) to styled characters
    """
    table = {}
    for offset in range(26):
        table[chr(ord("A") + offset)] = chr(upper + offset)
        table[chr(ord("a") + offset)] = chr(lower + offset)
    if digits is not None:
        for offset in range(10):
            table[chr(ord("0") + offset)] = chr(digits + offset)
    table.update(holes or {})
    return table


BOLD = alphabet_build(0x1D400, 0x1D41A, digits=0x1D7CE)
ITALIC = alphabet_build(0x1D434, 0x1D44E, holes={"h": chr(0x210E)})
# No bold-italic digits exist, so borrow the bold ones
BOLD_ITALIC = alphabet_build(0x1D468, 0x1D482, digits=0x1D7CE)


def subscript_get(ch: str) -> Optional[str]:
    """
    Get the subscripted equivalent of a character

    Example:
        >>> subscript_get("m")
        '\\u2098'
    """
    return SUBSCRIPTS.get(ch.lower())


def superscript_get(ch: str) -> Optional[str]:
    """
    Get the superscripted equivalent of a character

    Capitals map to modifier capitals where Unicode has one, otherwise to
    the lower case superscript.

    Example:
        >>> superscript_get("T")
        '\\u1d40'
    """
    if ch in SUPERSCRIPT_CAPITALS:
        return SUPERSCRIPT_CAPITALS[ch]
    return SUPERSCRIPTS.get(ch.lower())


def bold_get(ch: str) -> Optional[str]:
    return BOLD.get(ch)


def italic_get(ch: str) -> Optional[str]:
    return ITALIC.get(ch)


def boldItalic_get(ch: str) -> Optional[str]:
    return BOLD_ITALIC.get(ch)
