"""
Span-specific data models

Type-safe structures returned by the text-span utilities in lib.spans.
"""

from dataclasses import dataclass


@dataclass
class WrappedSpan:
    """
    Result of splitting text around the first pair of a marker character

    Returned by spans.wrapped_split(). The pair of markers itself is not part
    of any field.

    Attributes:
        before: Text before the first marker
        between: Text between the first and second markers
        after: Text after the second marker (may contain further markers)

    Example:
        For text "ab/cd/ef/g" and marker "/":
        WrappedSpan(before="ab", between="cd", after="ef/g")
    """
    before: str
    between: str
    after: str


@dataclass
class SuffixSplit:
    """
    Result of splitting a fixed number of characters off the end of text

    Returned by spans.suffix_split().

    Attributes:
        before: Everything except the suffix
        suffix: The last N characters

    Example:
        For text "abcdefgh" and count 3:
        SuffixSplit(before="abcde", suffix="fgh")
    """
    before: str
    suffix: str


@dataclass
class PaddedText:
    """
    Result of splitting whitespace off both ends of text

    Returned by spans.whitespace_split(). Whitespace may still appear inside
    middle, just not at either end. Text made only of whitespace is returned
    entirely in leading.

    Example:
        For text " abc def  ":
        PaddedText(leading=" ", middle="abc def", trailing="  ")
    """
    leading: str
    middle: str
    trailing: str
