"""
Re-alignment of spaces outside pairs of WordStar "wrapper" characters

WordStar users often start or end an emphasised span with a space, e.g.
"\\x13 title \\x13". Rendered as Unicode or Markdown that would underline
the spaces (or produce "** bold **", which Markdown does not recognise), so
whitespace immediately inside each pair is moved to just outside it.

Example:
    >>> process("a\\x13  bc  \\x13d")
    'a  \\x13bc\\x13  d'
"""

from typing import Optional

from ..models.controls import WRAPPERS
from .spans import wrapped_split, whitespace_split


def wrapper_align(line: str, wrapper: str) -> Optional[str]:
    """
    Move whitespace just inside each pair of one wrapper kind outside it

    Pairs are matched left to right. A line holding an odd number of the
    wrapper cannot be paired unambiguously and is left alone.

    Args:
        line: Line of text to be scanned
        wrapper: Wrapper character to be aligned

    Returns:
        Re-aligned line, or None if nothing moved

    Example:
        >>> wrapper_align("a* bc d* e", "*")
        'a *bc d* e'
    """
    if line.count(wrapper) % 2:
        return None

    changed = False
    result = []
    rest = line
    while True:
        span = wrapped_split(rest, wrapper)
        if span is None:
            break
        padded = whitespace_split(span.between)
        result.append(span.before)
        result.append(padded.leading)
        result.append(wrapper)
        result.append(padded.middle)
        result.append(wrapper)
        result.append(padded.trailing)
        rest = span.after
        if padded.leading or padded.trailing:
            changed = True

    if not changed:
        return None
    result.append(rest)
    return "".join(result)


def wrappers_align(line: str) -> Optional[str]:
    """
    Run wrapper_align() once for every wrapper kind, in WRAPPERS order

    Returns:
        Re-aligned line, or None if nothing moved for any kind
    """
    changed = False
    for wrapper in WRAPPERS:
        aligned = wrapper_align(line, wrapper)
        if aligned is not None:
            line = aligned
            changed = True
    return line if changed else None


def process(line: str) -> Optional[str]:
    """
    Re-align whitespace outside all wrapper pairs, repeated to a fixed point

    Moving whitespace out of one kind of pair can leave it just inside a
    pair of another (enclosing) kind, so passes repeat until one changes
    nothing. Whitespace only ever moves outward across wrapper characters,
    so the loop always ends.

    Args:
        line: Line of text to be processed

    Returns:
        Re-aligned line, or None if no whitespace moved at all

    Example:
        >>> process(" \\x02  \\x13 abc \\x19 def \\x13 \\x19\\x02")
        '    \\x02\\x13abc  \\x19def\\x13\\x19\\x02  '
    """
    result = None
    while True:
        aligned = wrappers_align(line if result is None else result)
        if aligned is None:
            return result
        result = aligned
