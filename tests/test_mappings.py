"""
Unicode mapping table tests
"""

from wsconvert.lib.mappings import (
    alphabet_build,
    bold_get,
    boldItalic_get,
    italic_get,
    subscript_get,
    superscript_get,
)


class TestStyledAlphabets:
    """Test mathematical alphanumeric alphabets"""

    def test_bold_letters(self):
        assert bold_get("C") == "\U0001d402"
        assert bold_get("a") == "\U0001d41a"

    def test_bold_digits(self):
        assert bold_get("0") == "\U0001d7ce"
        assert bold_get("9") == "\U0001d7d7"

    def test_italic_letters(self):
        assert italic_get("A") == "\U0001d434"
        assert italic_get("a") == "\U0001d44e"

    def test_italic_h_is_planck_constant(self):
        """Italic small h lives outside the alphabet run"""
        assert italic_get("h") == chr(0x210E)

    def test_italic_has_no_digits(self):
        assert italic_get("1") is None

    def test_bold_italic(self):
        assert boldItalic_get("A") == "\U0001d468"
        assert boldItalic_get("z") == chr(0x1D482 + 25)

    def test_bold_italic_digits_are_bold(self):
        assert boldItalic_get("1") == bold_get("1")

    def test_punctuation_unmapped(self):
        assert bold_get("!") is None
        assert italic_get(" ") is None

    def test_alphabet_build_holes(self):
        """Holes override the computed code points"""
        table = alphabet_build(0x41, 0x61, holes={"b": "#"})
        assert table["A"] == "A"
        assert table["b"] == "#"
        assert "0" not in table


class TestSubSuperscripts:
    """Test sub- and superscript tables"""

    def test_subscript_digit(self):
        assert subscript_get("2") == chr(0x2082)

    def test_subscript_lowercases(self):
        """Capitals use the lower case subscript"""
        assert subscript_get("M") == chr(0x2098)

    def test_subscript_missing(self):
        assert subscript_get("b") is None

    def test_superscript_digits(self):
        assert superscript_get("1") == chr(0xB9)
        assert superscript_get("2") == chr(0xB2)
        assert superscript_get("4") == chr(0x2074)

    def test_superscript_capital(self):
        """Capitals use modifier capitals where they exist"""
        assert superscript_get("T") == chr(0x1D40)
        assert superscript_get("t") == chr(0x1D57)

    def test_superscript_capital_fallback(self):
        """Capitals without a modifier form use the lower case one"""
        assert superscript_get("C") == chr(0x1D9C)

    def test_superscript_missing(self):
        assert superscript_get("q") is None
