"""
Span utility tests

Tests splitting around marker pairs, suffix splitting and whitespace
trimming.
"""

from wsconvert.lib.spans import (
    char_only,
    chars_allMatch,
    combiner_add,
    printable_only,
    suffix_split,
    suffix_splitTwice,
    whitespace_split,
    wrapped_split,
)
from wsconvert.models.spans import PaddedText, SuffixSplit, WrappedSpan


class TestWrappedSplit:
    """Test splitting on the first marker pair"""

    def test_simple(self):
        """Before, between and after are separated"""
        assert wrapped_split("ab/cd/ef/g", "/") == WrappedSpan("ab", "cd", "ef/g")

    def test_adjacent_markers(self):
        """Empty spans are allowed"""
        assert wrapped_split("//ab/cd", "/") == WrappedSpan("", "", "ab/cd")

    def test_single_marker(self):
        """One marker is not a pair"""
        assert wrapped_split("ab/cd", "/") is None

    def test_no_marker(self):
        assert wrapped_split("abcd", "/") is None


class TestSuffixSplit:
    """Test fixed length suffix splitting"""

    def test_simple(self):
        assert suffix_split("abcdefgh", 3) == SuffixSplit("abcde", "fgh")

    def test_whole_text(self):
        """Suffix may be the entire text"""
        assert suffix_split("abc", 3) == SuffixSplit("", "abc")

    def test_zero(self):
        """Zero count gives an empty suffix"""
        assert suffix_split("abc", 0) == SuffixSplit("abc", "")

    def test_too_short(self):
        assert suffix_split("ab", 3) is None

    def test_counts_characters(self):
        """Counts are in characters, not bytes"""
        assert suffix_split("x\U0001d402\U0001d403", 2) == SuffixSplit("x", "\U0001d402\U0001d403")

    def test_twice(self):
        assert suffix_splitTwice("abcdefgh", 3) == ("ab", "cde", "fgh")

    def test_twice_too_short(self):
        assert suffix_splitTwice("abcde", 3) is None


class TestWhitespaceSplit:
    """Test trimming of outer whitespace"""

    def test_both_ends(self):
        assert whitespace_split("  ab c ") == PaddedText("  ", "ab c", " ")

    def test_no_whitespace(self):
        assert whitespace_split("abc") == PaddedText("", "abc", "")

    def test_all_whitespace_is_leading(self):
        """Text of only whitespace is all leading"""
        assert whitespace_split(" \t ") == PaddedText(" \t ", "", "")

    def test_empty(self):
        assert whitespace_split("") == PaddedText("", "", "")


class TestPredicates:
    """Test character class predicates"""

    def test_all_match_vacuous(self):
        """Empty text matches any predicate"""
        assert chars_allMatch("", lambda ch: False)

    def test_char_only(self):
        assert char_only("___", "_")
        assert not char_only("_a_", "_")

    def test_printable_only(self):
        assert printable_only("abc def")
        assert not printable_only("ab\x08")
        assert not printable_only("ab\x7f")

    def test_combiner_add_skips_controls(self):
        """Combiners follow printable characters only"""
        assert combiner_add("a b\x08c", "*") == "a* *b*\x08c*"
