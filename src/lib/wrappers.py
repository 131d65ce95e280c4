"""
WordStar "wrapper" characters rendered through a toggle state machine

WordStar wrappers are print-head toggles rather than matched brackets: each
occurrence flips an attribute on or off. The Wrappers filter scans a line
left to right, consuming wrapper characters and rendering printable
characters according to the attributes currently switched on:

- superscript / subscript / bold / italic use Unicode styled characters
- underline / overline / strikethrough append combining modifiers

Bold and double-strike both darken the print, so together they cancel out
(XOR), as on the printer.

The toggle state lives in a separate WrapperState owned by the caller, who
decides whether it carries over from one line to the next.

Example:
    >>> Wrappers().process("\\x02C\\x02")
    '\\U0001d402'
"""

from dataclasses import dataclass, fields
from typing import Optional

from ..models.controls import (
    BOLD,
    COMB_OVERLINE,
    COMB_STRIKETHROUGH,
    COMB_UNDERLINE,
    DOUBLE,
    ITALIC,
    OVERLINE,
    STRIKETHROUGH,
    SUBSCRIPT,
    SUPERSCRIPT,
    UNDERLINE,
    control_is,
)
from .mappings import bold_get, boldItalic_get, italic_get, subscript_get, superscript_get


TOGGLES = {
    OVERLINE: "overline",
    BOLD: "bold",
    DOUBLE: "double",
    UNDERLINE: "underline",
    SUBSCRIPT: "subscript",
    SUPERSCRIPT: "superscript",
    STRIKETHROUGH: "strikethrough",
    ITALIC: "italic",
}


@dataclass
class WrapperState:
    """
    On/off state of each WordStar wrapper attribute

    All attributes start off. Only toggle() and reset() change them.
    """
    overline: bool = False
    bold: bool = False
    double: bool = False
    underline: bool = False
    subscript: bool = False
    superscript: bool = False
    strikethrough: bool = False
    italic: bool = False

    def toggle(self, ch: str) -> bool:
        """
        Flip the attribute controlled by a wrapper character

        Returns:
            True if ch is a wrapper character (and was consumed), else False
        """
        name = TOGGLES.get(ch)
        if name is None:
            return False
        setattr(self, name, not getattr(self, name))
        return True

    def reset(self) -> None:
        """Switch every attribute off"""
        for f in fields(self):
            setattr(self, f.name, False)

    def is_clear(self) -> bool:
        """True if no attribute is switched on"""
        return not any(getattr(self, f.name) for f in fields(self))

    def lines_active(self) -> bool:
        """True if any line style (underline, overline, strikethrough) is on"""
        return self.underline or self.overline or self.strikethrough

    def mapped_get(self, ch: str) -> Optional[str]:
        """
        Map a printable character according to the current attributes

        Precedence: superscript, subscript, bold (XOR double, with or
        without italic), italic.

        Returns:
            The styled character, or None if no mapping applies
        """
        if self.superscript:
            return superscript_get(ch)
        if self.subscript:
            return subscript_get(ch)
        if self.bold != self.double:
            if self.italic:
                return boldItalic_get(ch)
            return bold_get(ch)
        if self.italic:
            return italic_get(ch)
        return None

    def combiners_get(self) -> str:
        """Combining modifiers for the active line styles, in fixed order"""
        combiners = []
        if self.underline:
            combiners.append(COMB_UNDERLINE)
        if self.overline:
            combiners.append(COMB_OVERLINE)
        if self.strikethrough:
            combiners.append(COMB_STRIKETHROUGH)
        return "".join(combiners)


class Wrappers:
    """
    Line filter applying WordStar wrapper toggles

    Args:
        state: Toggle state to use and update; a fresh one is created if
               not given
    """

    def __init__(self, state: Optional[WrapperState] = None) -> None:
        self.state = state if state is not None else WrapperState()

    def reset(self) -> None:
        self.state.reset()

    def process(self, line: str) -> Optional[str]:
        """
        Render a line under the current wrapper state

        Wrapper characters toggle the state and are consumed. Other control
        characters are kept. Printable characters are styled when no line
        style is active, otherwise followed by one combining modifier per
        active line style.

        Args:
            line: Line of text to be processed

        Returns:
            Rendered line, or None if nothing was consumed or altered
        """
        changed = False
        result = []
        for ch in line:
            if control_is(ch):
                if self.state.toggle(ch):
                    changed = True
                else:
                    result.append(ch)
                continue

            if not self.state.lines_active():
                mapped = self.state.mapped_get(ch)
                if mapped is not None:
                    result.append(mapped)
                    changed = True
                else:
                    result.append(ch)
                continue

            result.append(ch)
            result.append(self.state.combiners_get())
            changed = True

        return "".join(result) if changed else None
