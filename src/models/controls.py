"""
Control character classification

Defines the WordStar control codes understood by the converter, the role each
one plays, and the replacement text used when a code is rendered on its own.
Pure data, shared by every line filter.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class ControlRole(Enum):
    """
    Semantic role of a WordStar control character

    Each known control code has exactly one role.
    """
    WRAPPER = "wrapper"          # toggled on/off in pairs: bold, underline, ...
    MARKER = "marker"            # only meaningful inside idioms (overprint)
    STANDALONE = "standalone"    # unconditional substitution


@dataclass(frozen=True)
class ControlSpec:
    """
    Specification for a WordStar control character

    Attributes:
        code: The control character itself (e.g. "\\x02")
        name: Human-readable name used in diagnostics
        role: ControlRole of the character
        substitute: Replacement text for STANDALONE characters ("" deletes)
        markdown: Markdown wrapper emitted in "markdown" emphasis style
    """
    code: str
    name: str
    role: ControlRole
    substitute: Optional[str] = None
    markdown: Optional[str] = None


# Wrapper (paired toggle) characters
OVERLINE = "\x01"
BOLD = "\x02"
DOUBLE = "\x04"
UNDERLINE = "\x13"
SUPERSCRIPT = "\x14"
SUBSCRIPT = "\x16"
STRIKETHROUGH = "\x18"
ITALIC = "\x19"

# Idiom markers
OVERPRINT = "\x08"
UNDERSCORE = "_"

# Standalone characters
PHANTOM_SPACE = "\x06"   # daisywheel spare print slot
PHANTOM_RUBOUT = "\x07"  # daisywheel spare print slot
FORM_FEED = "\x0c"
NON_BREAKING_SPACE = "\x0f"
INACTIVE_SOFT_HYPHEN = "\x1e"
ACTIVE_SOFT_HYPHEN = "\x1f"
DELETE = "\x7f"

# Unicode output characters
COMB_OVERLINE = "\u0305"
COMB_UNDERLINE = "\u0332"
COMB_STRIKETHROUGH = "\u0336"
DEGREE = "\u00b0"
ONE_QUARTER = "\u00bc"
HALF = "\u00bd"
THREE_QUARTERS = "\u00be"
REPLACEMENT = "\ufffd"
NB_SPACE = "\u00a0"
HYPHEN = "\u2010"
BLOCK = "\u2588"

# Form feed substitute is a page-break marker; see AppSettings.page_break
PAGE_BREAK = "\n---\n"

# Order in which wrapper kinds are re-aligned
WRAPPERS: Tuple[str, ...] = (
    OVERLINE,
    BOLD,
    DOUBLE,
    UNDERLINE,
    SUPERSCRIPT,
    SUBSCRIPT,
    STRIKETHROUGH,
    ITALIC,
)

WHITESPACE = " \t\n\x0c\r"


CONTROL_SPECS: Dict[str, ControlSpec] = {
    spec.code: spec
    for spec in (
        ControlSpec(OVERLINE, "overline", ControlRole.WRAPPER),
        ControlSpec(BOLD, "bold", ControlRole.WRAPPER, markdown="**"),
        ControlSpec(DOUBLE, "double-strike", ControlRole.WRAPPER, markdown="**"),
        ControlSpec(UNDERLINE, "underline", ControlRole.WRAPPER),
        ControlSpec(SUPERSCRIPT, "superscript", ControlRole.WRAPPER),
        ControlSpec(SUBSCRIPT, "subscript", ControlRole.WRAPPER),
        ControlSpec(STRIKETHROUGH, "strikethrough", ControlRole.WRAPPER, markdown="~~"),
        ControlSpec(ITALIC, "italic", ControlRole.WRAPPER, markdown="*"),
        ControlSpec(OVERPRINT, "overprint", ControlRole.MARKER),
        ControlSpec(PHANTOM_SPACE, "phantom space", ControlRole.STANDALONE, substitute=BLOCK),
        ControlSpec(PHANTOM_RUBOUT, "phantom rubout", ControlRole.STANDALONE, substitute=BLOCK),
        ControlSpec(FORM_FEED, "form feed", ControlRole.STANDALONE, substitute=PAGE_BREAK),
        ControlSpec(NON_BREAKING_SPACE, "non-breaking space", ControlRole.STANDALONE, substitute=NB_SPACE),
        ControlSpec(INACTIVE_SOFT_HYPHEN, "inactive soft hyphen", ControlRole.STANDALONE, substitute=""),
        ControlSpec(ACTIVE_SOFT_HYPHEN, "active soft hyphen", ControlRole.STANDALONE, substitute=HYPHEN),
        ControlSpec(DELETE, "delete", ControlRole.STANDALONE, substitute=""),
    )
}


def control_is(ch: str) -> bool:
    """Check if a character is an ASCII control character (0x00-0x1F, 0x7F)"""
    return ch < " " or ch == DELETE


def whitespace_is(ch: str) -> bool:
    """Check if a character is ASCII whitespace"""
    return ch in WHITESPACE


def spec_get(ch: str) -> Optional[ControlSpec]:
    """Get the ControlSpec for a character, or None if it is not a known control"""
    return CONTROL_SPECS.get(ch)
