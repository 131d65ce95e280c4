"""
Helper functions for cutting lines of WordStar text into spans

Every filter that works on wrapper-delimited text is built from these
primitives. All counts are in characters, never bytes.

Example:
    >>> wrapped_split("ab/cd/ef/g", "/")
    WrappedSpan(before='ab', between='cd', after='ef/g')
    >>> suffix_split("abcdefgh", 3)
    SuffixSplit(before='abcde', suffix='fgh')
"""

from typing import Callable, Optional, Tuple

from ..models.controls import control_is, whitespace_is
from ..models.spans import WrappedSpan, SuffixSplit, PaddedText


def wrapped_split(text: str, marker: str) -> Optional[WrappedSpan]:
    """
    Split text around the first pair of a marker character

    The text is scanned from left to right. The matched markers are dropped;
    any further markers remain in the after field.

    Args:
        text: Text to be scanned
        marker: Single "wrapper" character to be matched

    Returns:
        WrappedSpan, or None if the text holds fewer than two markers

    Example:
        >>> wrapped_split("//ab/cd", "/")
        WrappedSpan(before='', between='', after='ab/cd')
    """
    parts = text.split(marker, 2)
    if len(parts) < 3:
        return None
    return WrappedSpan(before=parts[0], between=parts[1], after=parts[2])


def suffix_split(text: str, count: int) -> Optional[SuffixSplit]:
    """
    Split a fixed number of characters off the end of text

    Args:
        text: Text to be split
        count: Number of characters wanted in the suffix

    Returns:
        SuffixSplit, or None if text is shorter than count. A count of zero
        gives the whole text as before and an empty suffix.
    """
    if count < 0 or count > len(text):
        return None
    if count == 0:
        return SuffixSplit(before=text, suffix="")
    return SuffixSplit(before=text[:-count], suffix=text[-count:])


def suffix_splitTwice(text: str, count: int) -> Optional[Tuple[str, str, str]]:
    """
    Split two runs of count characters off the end of text

    Returns:
        (left, middle, right) with middle and right both count characters
        long, or None if text is shorter than 2 * count

    Example:
        >>> suffix_splitTwice("abcdefgh", 3)
        ('ab', 'cde', 'fgh')
    """
    outer = suffix_split(text, count)
    if outer is None:
        return None
    inner = suffix_split(outer.before, count)
    if inner is None:
        return None
    return inner.before, inner.suffix, outer.suffix


def whitespace_split(text: str) -> PaddedText:
    """
    Split whitespace off both ends of text

    If text is nothing but whitespace, all of it is returned as leading and
    middle/trailing are empty.

    Example:
        >>> whitespace_split("  ab c ")
        PaddedText(leading='  ', middle='ab c', trailing=' ')
    """
    start = 0
    while start < len(text) and whitespace_is(text[start]):
        start += 1
    if start == len(text):
        return PaddedText(leading=text, middle="", trailing="")

    end = len(text)
    while whitespace_is(text[end - 1]):
        end -= 1
    return PaddedText(leading=text[:start], middle=text[start:end], trailing=text[end:])


def chars_allMatch(text: str, predicate: Callable[[str], bool]) -> bool:
    """True if every character satisfies predicate (vacuously true when empty)"""
    return all(predicate(ch) for ch in text)


def char_only(text: str, only: str) -> bool:
    """True if text contains nothing but the given character (or is empty)"""
    return chars_allMatch(text, lambda ch: ch == only)


def printable_only(text: str) -> bool:
    """True if text contains no control characters (or is empty)"""
    return chars_allMatch(text, lambda ch: not control_is(ch))


def combiner_add(text: str, combiner: str) -> str:
    """
    Append a combining modifier after every printable character

    Control characters are copied without a modifier.

    Example:
        >>> combiner_add("a b\\x08c", "*")
        'a* *b*\\x08c*'
    """
    result = []
    for ch in text:
        result.append(ch)
        if not control_is(ch):
            result.append(combiner)
    return "".join(result)
