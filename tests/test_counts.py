"""
Control character counter tests
"""

from wsconvert.lib.counts import ControlCount


class TestControlCount:
    """Test counting and the summary format"""

    def test_scan(self):
        counts = ControlCount("Counts")
        counts.scan("ab\x03c\x03")
        assert str(counts) == "Counts: [03]=2 => 5 chars, 1 types"

    def test_empty(self):
        assert str(ControlCount("Empty")) == "Empty: none => 0 chars, 0 types"

    def test_sorted_by_code(self):
        counts = ControlCount("X")
        counts.scan("\x13\x02\x7f")
        assert str(counts) == "X: [02]=1, [13]=1, [7F]=1 => 3 chars, 3 types"

    def test_get(self):
        counts = ControlCount("X")
        counts.scan("a\x03\x03")
        assert counts.get("\x03") == 2
        assert counts.get("a") is None
        assert counts.get("\x04") is None

    def test_up_ignores_printable(self):
        counts = ControlCount("X")
        counts.up("a")
        counts.up("\x08")
        assert counts.counts == {"\x08": 1}
        assert counts.total == 0

    def test_accumulates(self):
        counts = ControlCount("X")
        counts.scan("\x02a")
        counts.scan("\x02")
        assert counts.total == 3
        assert counts.controls_total() == 2
