#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Numeric lexer and literal-tag helpers for LHE text

All low-level tokenisation lives here so that the reader, the writer and
every extension format agree on exactly one grammar for numbers and tags.

Cursor Convention
-----------------
Every ``parse_*`` function takes the full decoded buffer and a character
offset, and returns ``(value, new_offset)``.  The buffer is never sliced
or modified; the "remaining input" after a successful parse is simply
``text[new_offset:]``.  Whitespace (space, tab, carriage return, newline)
is skipped before **and** after every token.

Number Grammar
--------------
Integers are an optional sign followed by one or more decimal digits
(unsigned integers admit ``+`` but never ``-``).  The recognised literal is
range-checked against the requested width; a literal that does not fit is
a :class:`~pylhef.exceptions.RangeError`, never a syntax error.

Floats are tried in priority order:

1. *leading digit*: ``[+-]?[0-9]+(\\.[0-9]*)?([eE][+-]?[0-9]+)?``
2. *leading dot*: ``[+-]?\\.[0-9]+([eE][+-]?[0-9]+)?``
   (generator output such as ``-.20889051E+01``)
3. the sentinels ``Infinity``, ``-Infinity`` and ``NaN``

Only ``e`` / ``E`` are accepted as exponent markers.  Fortran-style ``D``
exponents are deliberately **not** recognised.

Output Formatting
-----------------
:func:`format_float` writes finite values in the shortest scientific
notation that still round-trips exactly, using
:func:`numpy.format_float_scientific` with ``unique=True``.
"""

from __future__ import annotations

import math
import re
from functools import partial
from typing import NoReturn

import numpy as np

from pylhef.exceptions import (
    IncompleteInputError,
    LHESyntaxError,
    RangeError,
)
from pylhef.utils.constants import SIGNED_LIMITS, UNSIGNED_LIMITS

# ---------------------------------------------------------------------------
# Token patterns
# ---------------------------------------------------------------------------

_WHITESPACE: re.Pattern[str] = re.compile(r"[ \t\r\n]*")

_SIGNED_INT: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT: re.Pattern[str] = re.compile(r"\+?[0-9]+")

_FLOAT_LEADING_DIGIT: re.Pattern[str] = re.compile(
    r"[+-]?[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?"
)
"""Float whose mantissa starts with a digit: ``1``, ``-1.``, ``2.5E+03``."""

_FLOAT_LEADING_DOT: re.Pattern[str] = re.compile(
    r"[+-]?\.[0-9]+(?:[eE][+-]?[0-9]+)?"
)
"""Float whose mantissa starts with the decimal point: ``.5``, ``-.2E+01``."""

_FLOAT_SENTINELS: tuple[tuple[str, float], ...] = (
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
    ("NaN", math.nan),
)


# ---------------------------------------------------------------------------
# Whitespace and tags
# ---------------------------------------------------------------------------

def skip_whitespace(text: str, pos: int) -> int:
    """Return the offset of the first non-whitespace character at or after *pos*"""
    return _WHITESPACE.match(text, pos).end()


def _fail(expected: str, text: str, pos: int) -> NoReturn:
    if pos >= len(text):
        raise IncompleteInputError(expected, text, pos)
    raise LHESyntaxError(expected, text, pos)


def expect_tag(text: str, pos: int, tag: str, *, skip: bool = True) -> int:
    """Consume the literal *tag* at *pos* and return the offset after it

    Parameters
    ----------
    text : str
        Buffer being parsed.
    pos : int
        Current offset.
    tag : str
        Literal to consume, e.g. ``"<init>"``.
    skip : bool, optional
        Skip whitespace before and after the tag (default ``True``).  Pass
        ``False`` inside attribute values, where whitespace is significant.

    Raises
    ------
    LHESyntaxError
        If something other than *tag* is found.
    IncompleteInputError
        If the buffer ends before *tag* is complete.
    """
    start = skip_whitespace(text, pos) if skip else pos
    if text.startswith(tag, start):
        end = start + len(tag)
        return skip_whitespace(text, end) if skip else end
    if len(text) - start < len(tag) and tag.startswith(text[start:]):
        raise IncompleteInputError(repr(tag), text, start)
    raise LHESyntaxError(repr(tag), text, start)


def peek_tag(text: str, pos: int, tag: str) -> bool:
    """Return ``True`` if *tag* follows *pos*, ignoring leading whitespace"""
    return text.startswith(tag, skip_whitespace(text, pos))


def take_until(text: str, pos: int, delimiter: str) -> tuple[str, int]:
    """Return the raw text from *pos* up to (not including) *delimiter*

    The delimiter itself is not consumed; the returned offset points at its
    first character.

    Raises
    ------
    IncompleteInputError
        If *delimiter* does not occur after *pos*.
    """
    end = text.find(delimiter, pos)
    if end < 0:
        raise IncompleteInputError(repr(delimiter), text, len(text))
    return text[pos:end], end


def take_delimited(
    text: str, pos: int, opening: str, closing: str
) -> tuple[str, int]:
    """Consume ``opening ... closing`` and return the raw text between them

    Leading whitespace before *opening* and trailing whitespace after
    *closing* are skipped; the enclosed text is returned untouched.
    """
    pos = expect_tag(text, skip_whitespace(text, pos), opening, skip=False)
    inner, pos = take_until(text, pos, closing)
    return inner, expect_tag(text, pos, closing)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

def parse_integer(text: str, pos: int, bits: int = 64) -> tuple[int, int]:
    """Parse a signed integer of the given width

    Parameters
    ----------
    text : str
        Buffer being parsed.
    pos : int
        Current offset.  Leading whitespace is skipped.
    bits : int, optional
        Target width, one of 8, 16, 32, 64 (default 64).

    Returns
    -------
    tuple[int, int]
        The value and the offset after the token and trailing whitespace.

    Raises
    ------
    LHESyntaxError
        If no integer literal starts at *pos*.
    RangeError
        If the literal does not fit a signed *bits*-wide integer.

    Examples
    --------
    >>> parse_integer("-8 rest", 0, 8)
    (-8, 3)
    >>> parse_integer("128", 0, 8)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pylhef.exceptions.RangeError: ...
    """
    if bits not in SIGNED_LIMITS:
        raise ValueError(f"Unsupported integer width: {bits}")
    start = skip_whitespace(text, pos)
    match = _SIGNED_INT.match(text, start)
    if match is None:
        _fail(f"i{bits} integer", text, start)
    literal = match.group()
    value = int(literal)
    lo, hi = SIGNED_LIMITS[bits]
    if not lo <= value <= hi:
        raise RangeError(f"i{bits}", literal, text, start)
    return value, skip_whitespace(text, match.end())


def parse_unsigned(text: str, pos: int, bits: int = 64) -> tuple[int, int]:
    """Parse an unsigned integer of the given width

    Identical to :func:`parse_integer` except that a ``-`` sign is a
    syntax error, not a range error: unsigned tokens never admit a minus.
    """
    if bits not in UNSIGNED_LIMITS:
        raise ValueError(f"Unsupported integer width: {bits}")
    start = skip_whitespace(text, pos)
    match = _UNSIGNED_INT.match(text, start)
    if match is None:
        _fail(f"u{bits} integer", text, start)
    literal = match.group()
    value = int(literal)
    if value > UNSIGNED_LIMITS[bits][1]:
        raise RangeError(f"u{bits}", literal, text, start)
    return value, skip_whitespace(text, match.end())


parse_i8 = partial(parse_integer, bits=8)
parse_i16 = partial(parse_integer, bits=16)
parse_i32 = partial(parse_integer, bits=32)
parse_i64 = partial(parse_integer, bits=64)

parse_u8 = partial(parse_unsigned, bits=8)
parse_u16 = partial(parse_unsigned, bits=16)
parse_u32 = partial(parse_unsigned, bits=32)
parse_u64 = partial(parse_unsigned, bits=64)


# ---------------------------------------------------------------------------
# Floats
# ---------------------------------------------------------------------------

def parse_float(text: str, pos: int) -> tuple[float, int]:
    """Parse a 64-bit float using the LHE literal grammar

    Returns
    -------
    tuple[float, int]
        The value and the offset after the token and trailing whitespace.

    Raises
    ------
    LHESyntaxError
        If none of the three alternatives matches at *pos*.

    Examples
    --------
    >>> parse_float("-.20889051E+01", 0)
    (-2.0889051, 14)
    >>> parse_float("5. ", 0)
    (5.0, 3)
    """
    start = skip_whitespace(text, pos)
    for pattern in (_FLOAT_LEADING_DIGIT, _FLOAT_LEADING_DOT):
        match = pattern.match(text, start)
        if match is not None:
            return float(match.group()), skip_whitespace(text, match.end())
    for token, value in _FLOAT_SENTINELS:
        if text.startswith(token, start):
            return value, skip_whitespace(text, start + len(token))
    _fail("float", text, start)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_float(value: float) -> str:
    """Render a float so that :func:`parse_float` reads back the same value

    Examples
    --------
    >>> format_float(1.5)
    '1.5e+00'
    >>> format_float(float("-inf"))
    '-Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return np.format_float_scientific(np.float64(value), unique=True, trim="-")


def format_int(value: int) -> str:
    """Render an integer in plain decimal, signed only when negative"""
    return str(int(value))
