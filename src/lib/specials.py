"""
Special WordStar sequences: degrees, simple fractions and sub/superscripts

Degrees and fractions are matched as idioms wherever they occur; sub and
superscripts are taken as wrapper pairs matched left to right. Recognised
sequences become the closest Unicode characters. Transforms run in a fixed
order, each on the output of the one before:

    degrees -> fractions -> subscripts -> superscripts

Example:
    >>> process("-40\\x14o\\x14C")
    '-40\\u00b0C'
    >>> process("6\\x14\\x131\\x13\\x14\\x08\\x162\\x16")
    '6\\u00bd'
"""

from typing import Callable, Dict, Optional, Tuple

from ..models.controls import (
    COMB_UNDERLINE,
    DEGREE,
    HALF,
    ONE_QUARTER,
    OVERPRINT,
    REPLACEMENT,
    SUBSCRIPT,
    SUPERSCRIPT,
    THREE_QUARTERS,
    UNDERLINE,
    UNDERSCORE,
)
from .mappings import subscript_get, superscript_get
from .spans import char_only, wrapped_split


FRACTIONS: Dict[Tuple[str, str], str] = {
    ("1", "2"): HALF,
    ("1", "4"): ONE_QUARTER,
    ("3", "4"): THREE_QUARTERS,
}


def pairs_transform(
    line: str, wrapper: str, replace: Callable[[str], Optional[str]]
) -> Optional[str]:
    """
    Replace wrapper pairs according to their content

    Args:
        line: Line of text to be scanned
        wrapper: Wrapper character delimiting each span
        replace: Called with the text between each pair; returns the
                 replacement for the whole pair, or None to keep it

    Returns:
        Transformed line, or None if no pair was replaced
    """
    changed = False
    result = []
    rest = line
    while True:
        span = wrapped_split(rest, wrapper)
        if span is None:
            break
        result.append(span.before)
        replacement = replace(span.between)
        if replacement is None:
            result.append(f"{wrapper}{span.between}{wrapper}")
        else:
            result.append(replacement)
            changed = True
        rest = span.after

    if not changed:
        return None
    result.append(rest)
    return "".join(result)


def degrees_transform(line: str) -> Optional[str]:
    """
    Convert a superscripted lower case "o" to a degree sign

    The idiom is matched wherever it occurs, so an unpaired superscript
    earlier in the line does not hide it.

    Example:
        >>> degrees_transform("-40\\x14o\\x14F")
        '-40\\u00b0F'
    """
    idiom = f"{SUPERSCRIPT}o{SUPERSCRIPT}"
    if idiom not in line:
        return None
    return line.replace(idiom, DEGREE)


def digit_is(text: str) -> bool:
    return len(text) == 1 and text.isascii() and text.isdigit()


def fraction_get(numerator: str, denominator: str) -> str:
    """Precomposed fraction for two digits, or U+FFFD when there is none"""
    return FRACTIONS.get((numerator, denominator), REPLACEMENT)


def fraction_match(line: str, start: int, floor: int) -> Optional[Tuple[int, int, str]]:
    """
    Match a fraction idiom whose numerator opens at a superscript wrapper

    Args:
        line: Line of text to be scanned
        start: Index of the opening superscript wrapper
        floor: Lowest index an outer underline may be taken from

    Returns:
        (begin, end, glyph) for the slice the idiom covers, or None
    """
    close = line.find(SUPERSCRIPT, start + 1)
    if close < 0:
        return None
    numerator = line[start + 1:close].replace(UNDERLINE, "").replace(COMB_UNDERLINE, "")
    if not digit_is(numerator):
        return None
    begin, end = start, close + 1
    if begin > floor and line[begin - 1] == UNDERLINE and line[end:end + 1] == UNDERLINE:
        begin, end = begin - 1, end + 1
    tail = line[end:end + 4]
    if tail[:2] != OVERPRINT + SUBSCRIPT or not digit_is(tail[2:3]) or tail[3:4] != SUBSCRIPT:
        return None
    return begin, end + 4, fraction_get(numerator, tail[2])


def fractions_transform(line: str) -> Optional[str]:
    """
    Convert stacked fraction idioms to precomposed fraction characters

    WordStar users build a fraction by printing an (underlined) superscript
    numerator, backspacing with an overprint and printing a subscript
    denominator:

        "\\x14\\x131\\x13\\x14\\x08\\x162\\x16"  ->  "\\u00bd"

    The underline may sit inside the superscript pair, wrap around it, be a
    combining underline after the digit, or be absent. A digit pair without
    a precomposed character becomes U+FFFD, marking a fraction that was
    found but cannot be shown. Every superscript wrapper is tried as the
    start of an idiom, so stray wrappers before it do not get in the way.

    Returns:
        Transformed line, or None if no fraction idiom was found
    """
    result = []
    start = pos = 0
    while True:
        i = line.find(SUPERSCRIPT, pos)
        if i < 0:
            break
        match = fraction_match(line, i, start)
        if match is None:
            pos = i + 1
            continue
        begin, end, glyph = match
        result.append(line[start:begin])
        result.append(glyph)
        start = pos = end

    if not result:
        return None
    result.append(line[start:])
    return "".join(result)


def subscripts_transform(line: str) -> Optional[str]:
    """
    Map the content of each subscript pair to Unicode subscripts

    Characters with no subscript form are kept; the wrappers are consumed.

    Example:
        >>> subscripts_transform("H\\x162\\x16O")
        'H\\u2082O'
    """
    return pairs_transform(
        line,
        SUBSCRIPT,
        lambda text: "".join(subscript_get(ch) or ch for ch in text),
    )


def superscripts_transform(line: str) -> Optional[str]:
    """
    Map the content of each superscript pair to Unicode superscripts

    A run of underscores is the bar of an overline sequence and is left for
    the overline filter.

    Example:
        >>> superscripts_transform("E=mc\\x142\\x14")
        'E=mc\\u00b2'
    """
    def replace(text: str) -> Optional[str]:
        if text and char_only(text, UNDERSCORE):
            return None
        return "".join(superscript_get(ch) or ch for ch in text)

    return pairs_transform(line, SUPERSCRIPT, replace)


TRANSFORMS = (
    degrees_transform,
    fractions_transform,
    subscripts_transform,
    superscripts_transform,
)


def process(line: str) -> Optional[str]:
    """
    Apply every special sequence transform in turn

    Returns:
        Transformed line, or None if no transform applied
    """
    changed = False
    for transform in TRANSFORMS:
        transformed = transform(line)
        if transformed is not None:
            line = transformed
            changed = True
    return line if changed else None
