"""
WordStar "overline" sequences (a bar above text)

WordStar has no overline attribute, so users type the text, backspace over
it with N overprint characters and then print N underscores in superscript:

    "DAC\\x08\\x08\\x08\\x14___\\x14"

The same number N of printable characters must precede the overprints. A
matching sequence is reduced to the N characters, either wrapped in a pair of
OVERLINE wrapper characters (for the wrapper state machine to render) or
with a combining overline after each character. Anything that does not match
exactly is kept as written.

Example:
    >>> process("Q\\x08\\x14_\\x14")
    '\\x01Q\\x01'
    >>> process("Q\\x08\\x14_\\x14", combining=True)
    'Q\\u0305'
"""

from typing import Optional

from ..models.controls import (
    COMB_OVERLINE,
    OVERLINE,
    OVERPRINT,
    SUPERSCRIPT,
    UNDERSCORE,
)
from .spans import char_only, combiner_add, printable_only, suffix_splitTwice, wrapped_split


def overline_render(text: str, combining: bool) -> str:
    """Render overlined text as a wrapper pair or with combining overlines"""
    if combining:
        return combiner_add(text, COMB_OVERLINE)
    return f"{OVERLINE}{text}{OVERLINE}"


def process(line: str, combining: bool = False) -> Optional[str]:
    """
    Convert every exactly matching overline sequence in a line

    Args:
        line: Line of text to be processed
        combining: Emit combining overlines instead of OVERLINE wrappers

    Returns:
        Converted line, or None if no sequence matched
    """
    changed = False
    result = []
    rest = line
    while True:
        span = wrapped_split(rest, SUPERSCRIPT)
        if span is None:
            break
        if char_only(span.between, UNDERSCORE):
            parts = suffix_splitTwice(span.before, len(span.between))
            if parts is not None:
                prefix, text, overprints = parts
                if char_only(overprints, OVERPRINT) and printable_only(text):
                    result.append(prefix)
                    result.append(overline_render(text, combining))
                    rest = span.after
                    changed = True
                    continue
        # Not an exact match: keep the candidate as written
        result.append(span.before)
        result.append(SUPERSCRIPT)
        result.append(span.between)
        result.append(SUPERSCRIPT)
        rest = span.after

    if not changed:
        return None
    result.append(rest)
    return "".join(result)
