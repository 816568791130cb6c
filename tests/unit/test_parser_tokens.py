"""Unit tests for phpexpr.parser.tokens — identifiers, variables and names."""
from __future__ import annotations

import pytest

from phpexpr.ast.nodes import Name, NameKind, Slice, Variable
from phpexpr.grammar.tokens import TokenType
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError
from phpexpr.parser.tokens import identifier, name, qualified_name, variable


def _parts(*segments: bytes) -> tuple[Slice, ...]:
    return tuple(Slice.of(s) for s in segments)


# ---------------------------------------------------------------------------
# identifier
# ---------------------------------------------------------------------------


class TestIdentifier:
    def test_letters_digits_and_underscores(self) -> None:
        done = identifier(Cursor(b"_a1 rest"))
        assert done.value == b"_a1"
        assert done.remaining.rest == b" rest"

    def test_high_bytes_are_identifier_bytes(self) -> None:
        done = identifier(Cursor("café".encode("utf-8")))
        assert done.value.decode() == "café"
        assert done.remaining.at_end

    def test_cannot_start_with_digit(self) -> None:
        with pytest.raises(ParseError) as info:
            identifier(Cursor(b"1abc"))
        assert info.value.kind is ErrorKind.IDENTIFIER
        assert info.value.offset == 0

    def test_empty_input(self) -> None:
        with pytest.raises(ParseError) as info:
            identifier(Cursor(b""))
        assert info.value.kind is ErrorKind.IDENTIFIER

    def test_value_is_a_view_into_the_source(self) -> None:
        source = b"  foo"
        done = identifier(Cursor(source, 2))
        assert done.value.buffer is source
        assert (done.value.start, done.value.end) == (2, 5)


# ---------------------------------------------------------------------------
# variable
# ---------------------------------------------------------------------------


class TestVariable:
    def test_simple(self) -> None:
        done = variable(Cursor(b"$foo"))
        assert done.value == Variable(Slice.of(b"foo"))
        assert done.remaining.at_end

    def test_stops_at_non_identifier_byte(self) -> None:
        done = variable(Cursor(b"$foo bar"))
        assert done.value.name == b"foo"
        assert done.remaining.rest == b" bar"

    def test_keywords_are_valid_variable_names(self) -> None:
        assert variable(Cursor(b"$echo")).value.name == b"echo"
        assert variable(Cursor(b"$null")).value.name == b"null"

    def test_missing_sigil(self) -> None:
        with pytest.raises(ParseError) as info:
            variable(Cursor(b"foo"))
        assert info.value.kind is ErrorKind.TAG
        assert info.value.expected is TokenType.VARIABLE
        assert info.value.offset == 0

    def test_sigil_without_name(self) -> None:
        with pytest.raises(ParseError) as info:
            variable(Cursor(b"$1"))
        assert info.value.kind is ErrorKind.IDENTIFIER
        assert info.value.offset == 1

    def test_no_whitespace_after_sigil(self) -> None:
        with pytest.raises(ParseError) as info:
            variable(Cursor(b"$ foo"))
        assert info.value.kind is ErrorKind.IDENTIFIER

    def test_name_excludes_sigil_and_is_not_copied(self) -> None:
        source = b"$foo"
        done = variable(Cursor(source))
        assert done.value.name.buffer is source
        assert (done.value.name.start, done.value.name.end) == (1, 4)


# ---------------------------------------------------------------------------
# name
# ---------------------------------------------------------------------------


class TestName:
    def test_plain_identifier(self) -> None:
        assert name(Cursor(b"Foo")).value == b"Foo"

    @pytest.mark.parametrize("word", [b"echo", b"ECHO", b"isset", b"true", b"Null", b"namespace"])
    def test_reserved_words_are_rejected(self, word: bytes) -> None:
        with pytest.raises(ParseError) as info:
            name(Cursor(word))
        assert info.value.kind is ErrorKind.RESERVED
        assert info.value.offset == 0

    def test_reserved_word_prefix_is_allowed(self) -> None:
        assert name(Cursor(b"issetValue")).value == b"issetValue"


# ---------------------------------------------------------------------------
# qualified_name
# ---------------------------------------------------------------------------


class TestQualifiedName:
    def test_unqualified(self) -> None:
        done = qualified_name(Cursor(b"Foo"))
        assert done.value == Name(NameKind.UNQUALIFIED, _parts(b"Foo"))

    def test_qualified(self) -> None:
        done = qualified_name(Cursor(b"Foo\\Bar\\Baz"))
        assert done.value == Name(NameKind.QUALIFIED, _parts(b"Foo", b"Bar", b"Baz"))
        assert done.remaining.at_end

    def test_fully_qualified(self) -> None:
        done = qualified_name(Cursor(b"\\Foo\\Bar"))
        assert done.value == Name(NameKind.FULLY_QUALIFIED, _parts(b"Foo", b"Bar"))

    def test_fully_qualified_single_segment(self) -> None:
        done = qualified_name(Cursor(b"\\Foo"))
        assert done.value == Name(NameKind.FULLY_QUALIFIED, _parts(b"Foo"))

    @pytest.mark.parametrize("source", [b"namespace\\Foo", b"Namespace\\Foo"])
    def test_relative_qualified(self, source: bytes) -> None:
        done = qualified_name(Cursor(source))
        assert done.value == Name(NameKind.RELATIVE_QUALIFIED, _parts(b"Foo"))

    def test_trailing_separator_is_not_consumed(self) -> None:
        done = qualified_name(Cursor(b"Foo\\"))
        assert done.value == Name(NameKind.UNQUALIFIED, _parts(b"Foo"))
        assert done.remaining.rest == b"\\"

    def test_reserved_segment_ends_the_name(self) -> None:
        done = qualified_name(Cursor(b"Foo\\echo"))
        assert done.value == Name(NameKind.UNQUALIFIED, _parts(b"Foo"))
        assert done.remaining.rest == b"\\echo"

    def test_lone_separator(self) -> None:
        with pytest.raises(ParseError) as info:
            qualified_name(Cursor(b"\\"))
        assert info.value.kind is ErrorKind.IDENTIFIER
        assert info.value.offset == 1

    def test_reserved_word(self) -> None:
        with pytest.raises(ParseError) as info:
            qualified_name(Cursor(b"echo"))
        assert info.value.kind is ErrorKind.RESERVED

    def test_segments_are_views_into_the_source(self) -> None:
        source = b"Foo\\Bar"
        parts = qualified_name(Cursor(source)).value.parts
        assert all(part.buffer is source for part in parts)
        assert [(p.start, p.end) for p in parts] == [(0, 3), (4, 7)]
