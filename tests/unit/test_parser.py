"""
Tests for the description language parser.
"""

import pytest

from pyfsm.core.errors import MalformedTransition, ParseError
from pyfsm.core.parser import parse
from pyfsm.core.types import AutomatonDescription


class TestParseSections:
    """Each section is recognized and tokenized."""

    def test_parse_full_description(self, example_text):
        """All five sections are read in input order."""
        desc = parse(example_text)
        assert desc.states == ("a", "b")
        assert desc.initial == "a"
        assert desc.accept == ("b",)
        assert desc.alphabet == ("0", "1")
        assert desc.transitions == (
            ("a", "0", "b"),
            ("a", "1", "b"),
            ("b", "0", "b"),
            ("b", "1", "a"),
        )

    def test_sections_in_any_order(self):
        """Section order does not matter."""
        desc = parse(":transitions:\nx, 0 > y\n:alphabet: 0\n:initial: x\n:states: x y")
        assert desc.states == ("x", "y")
        assert desc.initial == "x"
        assert desc.alphabet == ("0",)
        assert desc.transitions == (("x", "0", "y"),)

    def test_inline_and_multiline_tokens(self):
        """Tokens may share the tag line and span several lines."""
        desc = parse(":states: a   b\n\n c\n:initial:\n  a  ")
        assert desc.states == ("a", "b", "c")
        assert desc.initial == "a"

    def test_alphabet_without_separators(self):
        """Adjacent characters are separate symbols."""
        assert parse(":alphabet: 01ab").alphabet == ("0", "1", "a", "b")
        assert parse(":alphabet:\n0 1\n a").alphabet == ("0", "1", "a")

    def test_transitions_whitespace_tolerance(self):
        """Whitespace around ',' and '>' is ignored."""
        desc = parse(":transitions:\na,0>b\n  a ,  1  >   c\n\nc, 0 >a")
        assert desc.transitions == (("a", "0", "b"), ("a", "1", "c"), ("c", "0", "a"))

    def test_initial_takes_first_token(self):
        assert parse(":initial: a b").initial == "a"

    def test_text_before_first_tag_ignored(self):
        desc = parse("my machine\n:states: a\n:initial: a")
        assert desc.states == ("a",)

    def test_repeated_section_uses_first(self):
        desc = parse(":states: a\n:states: b\n:initial: a")
        assert desc.states == ("a",)


class TestParseMissingSections:
    """Missing sections are empty, never errors."""

    def test_empty_text(self):
        desc = parse("")
        assert desc == AutomatonDescription()
        assert desc.initial is None

    def test_missing_initial(self):
        desc = parse(":states: a b")
        assert desc.states == ("a", "b")
        assert desc.initial is None
        assert desc.accept == ()
        assert desc.alphabet == ()
        assert desc.transitions == ()

    def test_no_cross_checking(self):
        """Parser does not verify that initial is a state."""
        desc = parse(":states: a\n:initial: z\n:accept: y")
        assert desc.initial == "z"
        assert desc.accept == ("y",)


class TestParseMalformed:
    """Malformed transition lines raise with location."""

    def test_missing_arrow(self):
        with pytest.raises(MalformedTransition, match="line 3"):
            parse(":states: a b\n:transitions:\na, 0 b")

    def test_missing_comma(self):
        with pytest.raises(MalformedTransition):
            parse(":transitions:\na 0 > b")

    def test_empty_part(self):
        with pytest.raises(MalformedTransition):
            parse(":transitions:\n, 0 > b")

    def test_error_attributes(self):
        with pytest.raises(MalformedTransition) as info:
            parse(":transitions:\na, 0 > b\nbad line")
        assert info.value.line_number == 3
        assert info.value.line == "bad line"
        assert info.value.kind == "MalformedTransition"

    def test_malformed_is_parse_error(self):
        with pytest.raises(ParseError):
            parse(":transitions:\nnonsense")
