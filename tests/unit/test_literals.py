"""Unit tests for phpexpr.parser.literals."""
from __future__ import annotations

import pytest

from phpexpr.ast.nodes import BoolLit, IntegerLit, NullLit, RealLit, StringLit
from phpexpr.parser.cursor import Cursor
from phpexpr.parser.errors import ErrorKind, ParseError
from phpexpr.parser.literals import INTEGER_MAX, literal, parse_literal


def _kinds_and_messages(error: ParseError) -> list[tuple[ErrorKind, str]]:
    return [(e.kind, e.message) for _, e in error.walk()]


class TestConstants:
    @pytest.mark.parametrize("source", [b"null", b"NULL", b"Null"])
    def test_null(self, source: bytes) -> None:
        assert parse_literal(source) == NullLit()

    @pytest.mark.parametrize(
        ("source", "expected"),
        [(b"true", True), (b"TRUE", True), (b"false", False), (b"False", False)],
    )
    def test_booleans(self, source: bytes, expected: bool) -> None:
        assert parse_literal(source) == BoolLit(expected)

    def test_constant_must_end_at_word_boundary(self) -> None:
        with pytest.raises(ParseError):
            parse_literal(b"nullable")


class TestIntegers:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (b"0", 0),
            (b"42", 42),
            (b"0x2A", 42),
            (b"0XFF", 255),
            (b"0b101", 5),
            (b"0B1", 1),
            (b"017", 15),
            (b"0o17", 15),
            (b"0O17", 15),
            (b"9223372036854775807", INTEGER_MAX),
        ],
    )
    def test_integer_forms(self, source: bytes, expected: int) -> None:
        assert parse_literal(source) == IntegerLit(expected)

    def test_decimal_overflow_becomes_real(self) -> None:
        assert parse_literal(b"9223372036854775808") == RealLit(9.223372036854775808e18)

    def test_hexadecimal_overflow_becomes_real(self) -> None:
        assert parse_literal(b"0x8000000000000000") == RealLit(float(2**63))

    @pytest.mark.parametrize("source", [b"09", b"1abc", b"0x1G"])
    def test_malformed_numbers(self, source: bytes) -> None:
        with pytest.raises(ParseError) as info:
            parse_literal(source)
        assert info.value.kind is ErrorKind.ALT
        assert any(
            kind is ErrorKind.LITERAL and message.startswith("invalid numeric literal")
            for kind, message in _kinds_and_messages(info.value)
        )

    def test_stops_at_punctuation(self) -> None:
        done = literal(Cursor(b"42;"))
        assert done.value == IntegerLit(42)
        assert done.remaining.rest == b";"


class TestReals:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (b"1.5", 1.5),
            (b".5", 0.5),
            (b"1.", 1.0),
            (b"1e3", 1000.0),
            (b"1.5E-3", 0.0015),
            (b"7E+2", 700.0),
        ],
    )
    def test_real_forms(self, source: bytes, expected: float) -> None:
        assert parse_literal(source) == RealLit(expected)


class TestSingleQuotedStrings:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (b"'foo'", b"foo"),
            (b"''", b""),
            (b"'It\\'s'", b"It's"),
            (b"'a\\\\b'", b"a\\b"),
            (b"'a\\nb'", b"a\\nb"),
            (b"'$foo'", b"$foo"),
            (b"'a\nb'", b"a\nb"),
        ],
    )
    def test_unescaping(self, source: bytes, expected: bytes) -> None:
        assert parse_literal(source) == StringLit(expected)

    def test_unterminated(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_literal(b"'abc")
        assert (ErrorKind.LITERAL, "unterminated string literal") in _kinds_and_messages(info.value)


class TestDoubleQuotedStrings:
    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (b'"foo"', b"foo"),
            (b'"a\\nb"', b"a\nb"),
            (b'"\\t\\v\\e\\f\\r"', b"\t\x0b\x1b\x0c\r"),
            (b'"\\x41\\101"', b"AA"),
            (b'"\\u{1F600}"', "\U0001F600".encode("utf-8")),
            (b'"$foo"', b"$foo"),
            (b'"\\$x"', b"$x"),
            (b'"say \\"hi\\""', b'say "hi"'),
            (b'"\\q"', b"\\q"),
            (b'"\\400"', b"\x00"),
        ],
    )
    def test_unescaping(self, source: bytes, expected: bytes) -> None:
        assert parse_literal(source) == StringLit(expected)

    def test_codepoint_out_of_range(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_literal(b'"\\u{110000}"')
        assert any(kind is ErrorKind.MAP_RES for kind, _ in _kinds_and_messages(info.value))

    def test_unterminated(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_literal(b'"abc')
        assert (ErrorKind.LITERAL, "unterminated string literal") in _kinds_and_messages(info.value)


class TestParseLiteral:
    def test_trailing_input(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_literal(b"42 ")
        assert info.value.kind is ErrorKind.EOF
        assert info.value.offset == 2

    def test_not_a_literal(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_literal(b"$foo")
        assert info.value.kind is ErrorKind.ALT
        assert len(info.value.causes) == 5
