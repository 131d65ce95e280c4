"""
Stand-alone WordStar control characters

Runs last, after every paired and idiomatic use of control characters has
been converted. Known stand-alone codes (non-breaking space, soft hyphens,
form feed, phantom print-head codes, delete) get fixed substitutes; anything
else left over is shown as a caret escape such as "^C" so that no raw
control character reaches the output.

Example:
    >>> process("\\x14abc\\x16")
    '^Tabc^V'
"""

from typing import Optional

from ..config import appsettings
from ..models.controls import FORM_FEED, ControlRole, control_is, spec_get


def control_escape(ch: str) -> str:
    """
    Caret escape for a control character

    0x00-0x1F map to "^" followed by the character 0x40 higher ("^@" to
    "^_"); DEL (0x7F) maps to "^#".
    """
    code = ord(ch)
    if code < 0x20:
        return "^" + chr(code + 0x40)
    if code == 0x7F:
        return "^#"
    return "^?"


def substitute_get(ch: str) -> Optional[str]:
    """Fixed substitute for a stand-alone control, or None if it has none"""
    if ch == FORM_FEED:
        return appsettings.page_break
    spec = spec_get(ch)
    if spec is None or spec.role is not ControlRole.STANDALONE:
        return None
    return spec.substitute


def process(line: str, escape: bool = True) -> Optional[str]:
    """
    Substitute or escape every remaining control character in a line

    Args:
        line: Line of text to be processed
        escape: Render controls without a substitute as "^X"; if False
                they are passed through unchanged

    Returns:
        Converted line, or None if nothing needed changing
    """
    changed = False
    result = []
    for ch in line:
        if not control_is(ch):
            result.append(ch)
            continue
        substitute = substitute_get(ch)
        if substitute is not None:
            result.append(substitute)
            changed = True
        elif escape:
            result.append(control_escape(ch))
            changed = True
        else:
            result.append(ch)
    return "".join(result) if changed else None
