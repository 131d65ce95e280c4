"""
WordStar dot commands

A line starting with a period followed by a two character command (a letter,
then a letter or digit) is a paragraph-level directive rather than text.
Headers and footers become Markdown-style headings, page breaks become a
horizontal rule, and every other command line is deleted.

The replacement may be "", meaning the line must be removed from the output
entirely rather than left blank.

Example:
    >>> process(".he abc")
    '## abc'
    >>> process(".op")
    ''
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional

from ..config import appsettings
from ..models.controls import control_is


class DotAction(Enum):
    """What happens to a recognised dot command line"""
    HEADING = "heading"
    SUBHEADING = "subheading"
    RULE = "rule"
    DELETE = "delete"


DOT_ACTIONS: Dict[str, DotAction] = {
    "he": DotAction.HEADING,
    "fo": DotAction.HEADING,
    **{f"h{n}": DotAction.SUBHEADING for n in range(1, 6)},
    **{f"f{n}": DotAction.SUBHEADING for n in range(1, 6)},
    "pa": DotAction.RULE,
    "xl": DotAction.RULE,
}


@dataclass
class DotCommand:
    """
    A dot command found at the start of a line

    Attributes:
        code: The two character command as written (e.g. "He")
        text: Everything after the command, or None if the line ends there

    Example:
        For line ".cw 8":
        DotCommand(code="cw", text=" 8")
    """
    code: str
    text: Optional[str]

    def action_get(self) -> DotAction:
        """Look up the action for this command (case-insensitive)"""
        return DOT_ACTIONS.get(self.code.lower(), DotAction.DELETE)


def dotCommand_check(line: str) -> Optional[DotCommand]:
    """
    Recognise a dot command at the start of a line

    Returns:
        DotCommand, or None if the line does not start with ".", an ASCII
        letter and an ASCII letter or digit
    """
    if len(line) < 3 or line[0] != ".":
        return None
    first, second = line[1], line[2]
    if not (first.isascii() and first.isalpha()):
        return None
    if not (second.isascii() and second.isalnum()):
        return None
    return DotCommand(code=line[1:3], text=line[3:] if len(line) > 3 else None)


def controls_strip(text: str) -> str:
    """Remove all control characters from text"""
    return "".join(ch for ch in text if not control_is(ch))


def header_make(prefix: str, text: Optional[str]) -> Optional[str]:
    """
    Build a heading line from a marker and the command's remaining text

    The text has its control characters removed and is trimmed; case is
    preserved. Blank text gives the bare marker.

    Example:
        >>> header_make("# ", " he\\x03llo ")
        '# hello'

    Returns:
        Heading line, or None if the command has no text at all
    """
    if text is None:
        return None
    return f"{prefix}{controls_strip(text).strip()}"


def process(line: str) -> Optional[str]:
    """
    Replace a dot command line

    Args:
        line: Line of text to be processed

    Returns:
        Replacement line, "" if the line is to be removed, or None if the
        line is not a dot command (or is a heading command with no text)
    """
    command = dotCommand_check(line)
    if command is None:
        return None

    action = command.action_get()
    if action is DotAction.HEADING:
        return header_make(appsettings.heading_marker, command.text)
    if action is DotAction.SUBHEADING:
        return header_make(appsettings.subheading_marker, command.text)
    if action is DotAction.RULE:
        return appsettings.rule_marker
    return ""
