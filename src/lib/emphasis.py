"""
WordStar emphasis wrappers rendered as Markdown

Alternative to the wrappers state machine for output meant to be read as
Markdown. Pairs of wrappers are matched left to right per kind:

- bold and double-strike become "**"
- italic becomes "*"
- strikethrough becomes "~~"
- underline and overline have no Markdown form, so the characters between
  the pair get combining modifiers instead

Wrappers left unpaired stay in place for the control character filter.
Subscript and superscript pairs are handled by the specials filter.

Example:
    >>> process("The \\x02bold\\x02 and \\x19italic\\x19")
    'The **bold** and *italic*'
"""

from typing import Optional

from ..models.controls import (
    BOLD,
    COMB_OVERLINE,
    COMB_UNDERLINE,
    DOUBLE,
    ITALIC,
    OVERLINE,
    STRIKETHROUGH,
    UNDERLINE,
    spec_get,
)
from .spans import combiner_add, wrapped_split


# Combining wrappers are applied first so that "**" never gets a modifier
COMBINERS = (
    (UNDERLINE, COMB_UNDERLINE),
    (OVERLINE, COMB_OVERLINE),
)

MARKDOWN_WRAPPERS = (BOLD, ITALIC, STRIKETHROUGH, DOUBLE)


def wrapper_replace(line: str, wrapper: str, replacement: str) -> Optional[str]:
    """
    Replace each pair of a wrapper with a Markdown delimiter

    Example:
        >>> wrapper_replace(".a. .b.c", ".", "**")
        '**a** **b**c'

    Returns:
        Converted line, or None if the line holds no complete pair
    """
    changed = False
    result = []
    rest = line
    while True:
        span = wrapped_split(rest, wrapper)
        if span is None:
            break
        result.append(f"{span.before}{replacement}{span.between}{replacement}")
        rest = span.after
        changed = True

    if not changed:
        return None
    result.append(rest)
    return "".join(result)


def wrapper_combine(line: str, wrapper: str, combiner: str) -> Optional[str]:
    """
    Drop each pair of a wrapper, adding a combining modifier to the text between

    Returns:
        Converted line, or None if the line holds no complete pair
    """
    changed = False
    result = []
    rest = line
    while True:
        span = wrapped_split(rest, wrapper)
        if span is None:
            break
        result.append(span.before)
        result.append(combiner_add(span.between, combiner))
        rest = span.after
        changed = True

    if not changed:
        return None
    result.append(rest)
    return "".join(result)


def process(line: str) -> Optional[str]:
    """
    Render every paired emphasis wrapper in a line as Markdown

    Args:
        line: Line of text to be processed

    Returns:
        Converted line, or None if no pair was found
    """
    changed = False
    for wrapper, combiner in COMBINERS:
        combined = wrapper_combine(line, wrapper, combiner)
        if combined is not None:
            line = combined
            changed = True
    for wrapper in MARKDOWN_WRAPPERS:
        replaced = wrapper_replace(line, wrapper, spec_get(wrapper).markdown)
        if replaced is not None:
            line = replaced
            changed = True
    return line if changed else None
