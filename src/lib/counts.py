"""
Counters for ASCII control characters

One ControlCount is kept per pipeline stage, so the diagnostic summary shows
which control characters each stage leaves behind. Counters never influence
the converted text.
"""

from typing import Dict, Optional

from ..models.controls import control_is


class ControlCount:
    """
    Named set of per-character counts for ASCII control characters

    Also keeps the total number of characters scanned, control or not.

    Example:
        >>> counts = ControlCount("Counts")
        >>> counts.scan("ab\\x03c\\x03")
        >>> str(counts)
        'Counts: [03]=2 => 5 chars, 1 types'
    """

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.counts: Dict[str, int] = {}
        self.total = 0

    def __str__(self) -> str:
        entries = ", ".join(
            f"[{ord(ch):02X}]={count}" for ch, count in sorted(self.counts.items())
        ) or "none"
        return f"{self.tag}: {entries} => {self.total} chars, {len(self.counts)} types"

    def __repr__(self) -> str:
        return f"ControlCount(tag={self.tag!r}, total={self.total}, counts={self.counts!r})"

    def up(self, ch: str) -> None:
        """Count one occurrence of ch if it is a control character"""
        if control_is(ch):
            self.counts[ch] = self.counts.get(ch, 0) + 1

    def get(self, ch: str) -> Optional[int]:
        """Current count for ch, or None if it has never been seen"""
        return self.counts.get(ch)

    def scan(self, text: str) -> None:
        """Count every control character in text and add its length to the total"""
        self.total += len(text)
        for ch in text:
            self.up(ch)

    def controls_total(self) -> int:
        """Number of control characters counted"""
        return sum(self.counts.values())
