"""Unit tests for the tokenizer.

WHY: Every later stage trusts the tokenizer to hand over the report's
groups verbatim and in order. A dropped or merged group would silently
change what the classifier sees.

HOW: Tests split representative strings and check texts, offsets, and
the input type checks.

RULES:
- Offsets are character positions in the original string.
"""

import pytest

from metar_parser.core.tokenizer import tokenize
from metar_parser.core.tokens import RawToken


class TestWhitespaceSplitting:
    """tokenize() splits on any run of whitespace and keeps text verbatim."""

    def test_simple_report(self):
        tokens = tokenize("KJFK 211751Z 24015KT")
        assert [t.text for t in tokens] == ["KJFK", "211751Z", "24015KT"]

    def test_offsets_point_into_original(self):
        text = "KJFK 211751Z 24015KT"
        for token in tokenize(text):
            assert text[token.offset:token.offset + len(token.text)] == token.text

    def test_offsets_values(self):
        tokens = tokenize("KJFK 211751Z 24015KT")
        assert [t.offset for t in tokens] == [0, 5, 13]

    def test_mixed_whitespace(self):
        tokens = tokenize("  METAR\tKJFK\n\n211751Z   ")
        assert [t.text for t in tokens] == ["METAR", "KJFK", "211751Z"]
        assert tokens[0].offset == 2

    def test_empty_string(self):
        assert tokenize("") == []

    def test_whitespace_only(self):
        assert tokenize(" \t\n ") == []

    def test_case_is_preserved(self):
        tokens = tokenize("metar kjfk")
        assert [t.text for t in tokens] == ["metar", "kjfk"]


class TestTokenizerInput:
    """Non-string input is a caller error."""

    def test_none_raises_type_error(self):
        with pytest.raises(TypeError):
            tokenize(None)

    def test_bytes_raise_type_error(self):
        with pytest.raises(TypeError):
            tokenize(b"KJFK 211751Z")


class TestRawToken:

    def test_describe(self):
        assert RawToken("99XXZ", 5).describe() == "'99XXZ' at position 5"

    def test_is_immutable(self):
        token = RawToken("KJFK", 0)
        with pytest.raises(AttributeError):
            token.text = "EGLL"
