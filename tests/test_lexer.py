#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the numeric lexer and tag helpers

Covers the integer widths, the three float alternatives, the sentinels,
whitespace handling and the distinction between syntax, range and
incomplete-input errors.
"""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pylhef.exceptions import IncompleteInputError, LHESyntaxError, RangeError
from pylhef.utils.lexer import (
    expect_tag,
    format_float,
    format_int,
    parse_float,
    parse_i8,
    parse_i16,
    parse_i32,
    parse_i64,
    parse_integer,
    parse_u8,
    parse_u64,
    parse_unsigned,
    peek_tag,
    skip_whitespace,
    take_delimited,
    take_until,
)


# -----------------------------------------------------------------------
# Integers
# -----------------------------------------------------------------------

class TestParseInteger:
    """Signed integers of every width"""

    @pytest.mark.parametrize("literal, value", [
        ("8 ", 8), ("+8 ", 8), ("-8 ", -8), ("0", 0), ("-128", -128), ("127", 127),
    ])
    def test_i8(self, literal: str, value: int) -> None:
        assert parse_i8(literal, 0) == (value, len(literal))

    def test_i8_overflow(self) -> None:
        with pytest.raises(RangeError) as info:
            parse_i8("128", 0)
        assert info.value.width == "i8"
        assert info.value.literal == "128"

    def test_i8_underflow(self) -> None:
        with pytest.raises(RangeError):
            parse_i8("-129", 0)

    def test_i16_limits(self) -> None:
        assert parse_i16("-32768", 0)[0] == -32768
        with pytest.raises(RangeError):
            parse_i16("32768", 0)

    def test_i32_limits(self) -> None:
        assert parse_i32("2147483647", 0)[0] == 2**31 - 1
        with pytest.raises(RangeError):
            parse_i32("-2147483649", 0)

    def test_i64_limits(self) -> None:
        assert parse_i64("-9223372036854775808", 0)[0] == -(2**63)
        with pytest.raises(RangeError):
            parse_i64("9223372036854775808", 0)

    def test_skips_surrounding_whitespace(self) -> None:
        text = " \t\r\n 42 \n\t next"
        value, pos = parse_i64(text, 0)
        assert value == 42
        assert text[pos:] == "next"

    def test_stops_at_non_digit(self) -> None:
        value, pos = parse_i64("12abc", 0)
        assert value == 12
        assert pos == 2

    def test_not_a_number(self) -> None:
        with pytest.raises(LHESyntaxError) as info:
            parse_i64("abc", 0)
        assert info.value.position == 0

    def test_empty_input_is_incomplete(self) -> None:
        with pytest.raises(IncompleteInputError):
            parse_i64("   ", 0)

    def test_sign_alone_is_syntax_error(self) -> None:
        with pytest.raises(LHESyntaxError):
            parse_i64("- 1", 0)

    def test_unsupported_width(self) -> None:
        with pytest.raises(ValueError):
            parse_integer("1", 0, bits=12)

    def test_range_error_position(self) -> None:
        text = "1\n  300"
        with pytest.raises(RangeError) as info:
            parse_i8(text, 2)
        assert info.value.position == 4
        assert info.value.line == 2
        assert info.value.column == 3


class TestParseUnsigned:
    """Unsigned integers never admit a minus sign"""

    def test_u8(self) -> None:
        assert parse_u8("255", 0) == (255, 3)
        assert parse_u8("+7", 0) == (7, 2)

    def test_u8_overflow(self) -> None:
        with pytest.raises(RangeError):
            parse_u8("256", 0)

    def test_minus_is_syntax_error(self) -> None:
        with pytest.raises(LHESyntaxError):
            parse_u8("-1", 0)

    def test_minus_zero_is_syntax_error(self) -> None:
        with pytest.raises(LHESyntaxError):
            parse_unsigned("-0", 0, bits=64)

    def test_u64_limit(self) -> None:
        assert parse_u64("18446744073709551615", 0)[0] == 2**64 - 1
        with pytest.raises(RangeError):
            parse_u64("18446744073709551616", 0)


# -----------------------------------------------------------------------
# Floats
# -----------------------------------------------------------------------

class TestParseFloat:
    """The three float alternatives and their priority"""

    @pytest.mark.parametrize("literal", [
        "1", "+1", "-1", "1.", "+1.", "-1.", "1e0", "+1e0", "-1e0",
        "1.0e0", "1.0e+0", "1.0e-0", "1.0E0",
    ])
    def test_unit_forms(self, literal: str) -> None:
        value, pos = parse_float(literal + " ", 0)
        assert abs(value) == 1.0
        assert pos == len(literal) + 1

    @pytest.mark.parametrize("literal, value", [
        ("4.705810011652687E+01", 4.705810011652687e01),
        ("-5.818122260105206E+00", -5.818122260105206),
        ("2.228997274254760E-08", 2.228997274254760e-08),
        ("-.20889051E+01", -0.20889051e01),
        (".20889051E+01", 0.20889051e01),
    ])
    def test_generator_output(self, literal: str, value: float) -> None:
        assert parse_float(literal, 0) == (value, len(literal))

    @pytest.mark.parametrize("literal", [
        "0", "0.", "0.0", "0.0E3", "0.0000E+00", "0.000000000000000E+00",
    ])
    def test_zero(self, literal: str) -> None:
        assert parse_float(literal, 0)[0] == 0.0

    def test_leading_dot(self) -> None:
        assert parse_float(".5", 0) == (0.5, 2)

    def test_trailing_dot(self) -> None:
        assert parse_float("5.", 0) == (5.0, 2)

    def test_integer_literal(self) -> None:
        assert parse_float("14 ", 0) == (14.0, 3)

    def test_infinity(self) -> None:
        assert parse_float("Infinity", 0) == (math.inf, 8)

    def test_negative_infinity(self) -> None:
        assert parse_float("-Infinity", 0) == (-math.inf, 9)

    def test_nan(self) -> None:
        value, pos = parse_float("NaN", 0)
        assert math.isnan(value)
        assert pos == 3

    def test_lone_dot_is_error(self) -> None:
        with pytest.raises(LHESyntaxError):
            parse_float(". 5", 0)

    def test_fortran_d_exponent_not_consumed(self) -> None:
        value, pos = parse_float("1.5D+03", 0)
        assert value == 1.5
        assert pos == 3

    def test_word_is_error(self) -> None:
        with pytest.raises(LHESyntaxError):
            parse_float("nan", 0)

    def test_end_of_input(self) -> None:
        with pytest.raises(IncompleteInputError):
            parse_float("\n", 0)


class TestFormat:
    """Number rendering"""

    def test_format_float_scientific(self) -> None:
        assert format_float(1.5) == "1.5e+00"
        assert format_float(3.0) == "3e+00"
        assert format_float(-0.000125) == "-1.25e-04"

    def test_format_sentinels(self) -> None:
        assert format_float(math.nan) == "NaN"
        assert format_float(math.inf) == "Infinity"
        assert format_float(-math.inf) == "-Infinity"

    def test_nan_round_trip(self) -> None:
        value, _ = parse_float("NaN", 0)
        assert format_float(value) == "NaN"

    def test_format_int(self) -> None:
        assert format_int(0) == "0"
        assert format_int(-42) == "-42"
        assert format_int(2**63 - 1) == "9223372036854775807"

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_finite_round_trip(self, x: float) -> None:
        text = format_float(x)
        assert parse_float(text, 0) == (x, len(text))

    @given(st.integers(-(2**63), 2**63 - 1))
    def test_integer_round_trip(self, n: int) -> None:
        text = format_int(n)
        assert parse_i64(text, 0) == (n, len(text))


# -----------------------------------------------------------------------
# Tags
# -----------------------------------------------------------------------

class TestTags:
    """Literal tags, peeking and raw spans"""

    def test_skip_whitespace(self) -> None:
        assert skip_whitespace(" \t\r\nx", 0) == 4
        assert skip_whitespace("x", 0) == 0
        assert skip_whitespace("", 0) == 0

    def test_expect_tag(self) -> None:
        assert expect_tag("  <init>\n1", 0, "<init>") == 9

    def test_expect_tag_without_skip(self) -> None:
        assert expect_tag(' "x', 1, '"', skip=False) == 2
        with pytest.raises(LHESyntaxError):
            expect_tag(' "x', 0, '"', skip=False)

    def test_expect_tag_mismatch(self) -> None:
        with pytest.raises(LHESyntaxError) as info:
            expect_tag("<event>", 0, "<init>")
        assert info.value.expected == "'<init>'"
        assert "found '<event>'" in str(info.value)

    def test_expect_tag_truncated(self) -> None:
        with pytest.raises(IncompleteInputError):
            expect_tag("</in", 0, "</init>")

    def test_peek_tag(self) -> None:
        assert peek_tag("\n <event>", 0, "<event>")
        assert not peek_tag("</LesHouchesEvents>", 0, "<event>")

    def test_take_until(self) -> None:
        text = "a b\n</init>"
        span, pos = take_until(text, 0, "</init>")
        assert span == "a b\n"
        assert text[pos:] == "</init>"

    def test_take_until_missing(self) -> None:
        with pytest.raises(IncompleteInputError):
            take_until("no close tag", 0, "</event>")

    def test_take_delimited(self) -> None:
        text = "\n<!-- x -->\n<init>"
        inner, pos = take_delimited(text, 0, "<!--", "-->")
        assert inner == " x "
        assert text[pos:] == "<init>"
