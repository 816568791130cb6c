"""Unit tests for phpexpr.parser.parser — the parse entry points."""
from __future__ import annotations

import logging

import pytest

from phpexpr.ast.nodes import Echo, Empty, IntegerLit, Name, NameKind, Slice, StringLit, Unset, Variable
from phpexpr.parser import Cursor, ErrorKind, ParseError, parse, parse_prefix
from phpexpr.parser.expressions import expression


def var(name: bytes) -> Variable:
    return Variable(Slice.of(name))


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParse:
    def test_variable(self) -> None:
        assert parse(b"$foo") == var(b"foo")

    def test_echo(self) -> None:
        assert parse(b"echo 'a', $b, 3") == Echo((StringLit(b"a"), var(b"b"), IntegerLit(3)))

    def test_surrounding_trivia_is_allowed(self) -> None:
        assert parse(b"  /* lead */ unset($a)  // trailing\n") == Unset((var(b"a"),))

    def test_text_source_is_encoded(self) -> None:
        assert parse("empty('héllo')") == Empty(StringLit("héllo".encode("utf-8")))

    @pytest.mark.parametrize("source", [bytearray(b"$foo"), memoryview(b"$foo")])
    def test_buffer_types(self, source) -> None:
        assert parse(source) == var(b"foo")

    def test_unsupported_source_type(self) -> None:
        with pytest.raises(TypeError):
            parse(42)  # type: ignore[arg-type]

    def test_trailing_input_is_rejected(self) -> None:
        with pytest.raises(ParseError) as info:
            parse(b"$a $b")
        assert info.value.kind is ErrorKind.EOF
        assert info.value.offset == 3

    def test_empty_source(self) -> None:
        with pytest.raises(ParseError) as info:
            parse(b"")
        assert info.value.kind is ErrorKind.ALT
        assert info.value.offset == 0

    def test_failure_position_after_leading_trivia(self) -> None:
        with pytest.raises(ParseError) as info:
            parse(b"\n  unset()")
        assert info.value.kind is ErrorKind.ALT
        assert (info.value.line, info.value.column) == (2, 3)
        assert info.value.furthest().remaining == b")"

    def test_logs_at_debug_level(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="phpexpr.parser.parser"):
            parse(b"$foo")
        assert any("Parsed Variable" in record.getMessage() for record in caplog.records)


# ---------------------------------------------------------------------------
# parse_prefix
# ---------------------------------------------------------------------------


class TestParsePrefix:
    def test_returns_remaining_input(self) -> None:
        done = parse_prefix(b"unset($a); echo 1;")
        assert done.value == Unset((var(b"a"),))
        assert done.remaining.rest == b"; echo 1;"

    def test_remaining_is_not_parsed_again(self) -> None:
        done = parse_prefix(b"echo 1, 2; $x")
        assert done.value == Echo((IntegerLit(1), IntegerLit(2)))
        with pytest.raises(ParseError):
            expression(done.remaining)

    def test_remaining_can_be_resumed(self) -> None:
        done = parse_prefix(b"$a $b")
        again = expression(Cursor(done.remaining.source, done.remaining.offset + 1))
        assert again.value == var(b"b")
        assert again.remaining.at_end


# ---------------------------------------------------------------------------
# Input size and nesting depth
# ---------------------------------------------------------------------------


def _nested_empty(depth: int, operand: bytes) -> bytes:
    return b"empty(" * depth + operand + b")" * depth


class TestLimits:
    def test_long_operand_list_never_computes_positions(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def unexpected(self: Cursor) -> int:
            raise AssertionError("position computed while parsing")

        monkeypatch.setattr(Cursor, "line", property(unexpected))
        monkeypatch.setattr(Cursor, "column", property(unexpected))
        result = parse(b"echo " + b",\n".join([b"1"] * 5000))
        assert len(result.expressions) == 5000

    def test_moderate_nesting_parses(self) -> None:
        result = parse(_nested_empty(40, b"1"))
        for _ in range(40):
            assert isinstance(result, Empty)
            result = result.expression
        assert result == IntegerLit(1)

    @pytest.mark.parametrize("depth", [250, 1000])
    def test_deep_nesting_is_a_parse_error(self, depth: int) -> None:
        with pytest.raises(ParseError) as info:
            parse(_nested_empty(depth, b"1"))
        assert info.value.kind is ErrorKind.DEPTH
        assert info.value.offset == 0

    @pytest.mark.parametrize("depth", [250, 1000])
    def test_deep_invalid_nesting_is_a_parse_error(self, depth: int) -> None:
        with pytest.raises(ParseError) as info:
            parse(b"  " + _nested_empty(depth, b""))
        assert info.value.kind is ErrorKind.DEPTH
        assert info.value.offset == 2

    def test_parser_is_usable_after_depth_error(self) -> None:
        with pytest.raises(ParseError):
            parse_prefix(_nested_empty(300, b"$a"))
        assert parse(b"empty($a)") == Empty(var(b"a"))


# ---------------------------------------------------------------------------
# Zero-copy identifiers
# ---------------------------------------------------------------------------


class TestSourceViews:
    def test_identifiers_point_into_the_source(self) -> None:
        source = b"echo $foo, Bar\\Baz"
        result = parse(source)
        variable, name = result.expressions
        assert variable.name.buffer is source
        assert variable.name.start == source.index(b"foo")
        assert name == Name(NameKind.QUALIFIED, (Slice.of(b"Bar"), Slice.of(b"Baz")))
        assert all(part.buffer is source for part in name.parts)

    def test_string_literals_are_owned_copies(self) -> None:
        result = parse(b"'abc'")
        assert type(result.value) is bytes
        assert result.value == b"abc"
