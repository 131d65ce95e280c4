"""
Wrapper state machine tests

Tests styled alphabets, combining line styles, precedence and state carried
from one line to the next.
"""

from wsconvert.lib.mappings import bold_get
from wsconvert.lib.wrappers import WrapperState, Wrappers
from wsconvert.models.controls import COMB_OVERLINE, COMB_STRIKETHROUGH, COMB_UNDERLINE


class TestStyledText:
    """Test styled alphabet rendering"""

    def test_bold(self):
        assert Wrappers().process("\x02C\x02") == "\U0001d402"

    def test_bold_word(self):
        expected = "a " + "".join(bold_get(ch) for ch in "word") + " b"
        assert Wrappers().process("a \x02word\x02 b") == expected

    def test_italic(self):
        assert Wrappers().process("\x19a\x19") == "\U0001d44e"

    def test_bold_italic(self):
        assert Wrappers().process("\x02\x19A\x19\x02") == "\U0001d468"

    def test_double_strike_alone_is_bold(self):
        assert Wrappers().process("\x04C\x04") == "\U0001d402"

    def test_bold_and_double_cancel(self):
        """Bold XOR double-strike"""
        assert Wrappers().process("\x02\x04C\x04\x02") == "C"

    def test_superscript_wins_over_bold(self):
        assert Wrappers().process("\x02\x142\x14\x02") == chr(0xB2)

    def test_subscript(self):
        assert Wrappers().process("H\x162\x16O") == "H" + chr(0x2082) + "O"

    def test_unmappable_kept(self):
        assert Wrappers().process("\x02!\x02") == "!"


class TestLineStyles:
    """Test combining modifiers"""

    def test_underline(self):
        assert Wrappers().process("\x13ab\x13") == "a" + COMB_UNDERLINE + "b" + COMB_UNDERLINE

    def test_overline(self):
        assert Wrappers().process("\x01Q\x01") == "Q" + COMB_OVERLINE

    def test_underline_and_strikethrough(self):
        """Modifiers are appended in fixed order"""
        result = Wrappers().process("\x18\x13a\x13\x18")
        assert result == "a" + COMB_UNDERLINE + COMB_STRIKETHROUGH

    def test_line_style_suppresses_styling(self):
        """Bold is not applied while a line style is on"""
        assert Wrappers().process("\x02\x13a\x13\x02") == "a" + COMB_UNDERLINE


class TestState:
    """Test toggle state handling"""

    def test_other_controls_kept(self):
        assert Wrappers().process("\x02a\x03\x02") == bold_get("a") + "\x03"

    def test_plain_line(self):
        assert Wrappers().process("plain") is None

    def test_state_carries_over(self):
        """Emphasis opened on one line continues on the next"""
        wrappers = Wrappers()
        assert wrappers.process("\x02ab") == bold_get("a") + bold_get("b")
        assert wrappers.state.bold
        assert wrappers.process("c\x02d") == bold_get("c") + "d"
        assert wrappers.state.is_clear()

    def test_reset(self):
        wrappers = Wrappers()
        wrappers.process("\x02\x13open")
        assert not wrappers.state.is_clear()
        wrappers.reset()
        assert wrappers.state.is_clear()
        assert wrappers.process("ab") is None

    def test_shared_state(self):
        """Caller-owned state is updated in place"""
        state = WrapperState()
        Wrappers(state).process("\x19")
        assert state.italic

    def test_toggle(self):
        state = WrapperState()
        assert state.toggle("\x14")
        assert state.superscript
        assert state.toggle("\x14")
        assert not state.superscript
        assert not state.toggle("\x03")

    def test_lines_active(self):
        state = WrapperState(bold=True)
        assert not state.lines_active()
        state.toggle("\x18")
        assert state.lines_active()
