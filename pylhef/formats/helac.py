#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HELAC-Dipoles dialects: structured ``#`` lines in the extra blocks

HELAC-Dipoles writes its generator-specific data as comment lines of the
form ``# KEYWORD field field ...`` after the process rows of ``<init>`` and
after the particle rows of each ``<event>``.  Which lines appear depends
on the kind of run:

============  =====================================  ==========================
Dialect       ``<init>`` extra                       ``<event>`` extra
============  =====================================  ==========================
RS            SUMPDF, DIPMAP, JETALGO                pdf, me (RS), jet
I             SUMPDF                                 pdf, me (I)
KP            SUMPDF (KP layout)                     pdf, me (KP)
1loop         SUMPDF, NORM                           pdf, me (1loop)
============  =====================================  ==========================

Within one extra block the lines may come in any order; they are matched
with :func:`~pylhef.utils.matcher.match_blocks`, all mandatory.

Fields documented as ``i8`` / ``u8`` are read with the corresponding
width, so an out-of-range value in a file is a
:class:`~pylhef.exceptions.RangeError`, and constructing a block with one
is a :class:`~pylhef.exceptions.ValidationError`.

Examples
--------
>>> JetInfo.parse("# jet 1 2 3\\n", 0)
(JetInfo(ibvjet1=1, ibvjet2=2, ibvflreco=3), 12)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, ClassVar, Optional, TextIO

from pylhef.exceptions import LHESyntaxError, ValidationError
from pylhef.utils.constants import TAG_COMMENT_CLOSE, TAG_COMMENT_OPEN
from pylhef.utils.lexer import (
    expect_tag,
    format_float,
    format_int,
    parse_float,
    parse_i8,
    parse_i64,
    parse_u8,
    parse_u64,
    peek_tag,
    skip_whitespace,
    take_delimited,
)
from pylhef.utils.matcher import SubParser, match_blocks
from pylhef.utils.validation import validate_integer_width

# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------

MARKER: str = "#"
"""Prefix of every HELAC-Dipoles data line."""


def _expect_keyword(text: str, pos: int, keyword: str) -> int:
    pos = expect_tag(text, pos, MARKER)
    return expect_tag(text, pos, keyword)


def _repeat(parse: Callable, text: str, pos: int, count: int) -> tuple[list, int]:
    values = []
    for _ in range(count):
        value, pos = parse(text, pos)
        values.append(value)
    return values, pos


def _pairs(parse: Callable, text: str, pos: int, count: int) -> tuple[list, int]:
    pairs = []
    for _ in range(count):
        first, pos = parse(text, pos)
        second, pos = parse(text, pos)
        pairs.append((first, second))
    return pairs, pos


def _write_line(sink: TextIO, keyword: str, tokens: list[str]) -> None:
    sink.write(" ".join([MARKER, keyword, *tokens]) + "\n")


def _check_i8(name: str, values) -> None:
    for value in values:
        validate_integer_width(name, value, 8)


def _check_u8(name: str, value: int) -> None:
    validate_integer_width(name, value, 8, signed=False)


def _check_i64(name: str, values) -> None:
    for value in values:
        validate_integer_width(name, value, 64)


def _as_pairs(record, name: str) -> None:
    object.__setattr__(record, name, [tuple(pair) for pair in getattr(record, name)])


# ---------------------------------------------------------------------------
# Comment and header
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Comment:
    """The ``<!-- ... -->`` block, trimmed

    An empty comment and a missing one are the same value and neither is
    written out.
    """

    text: str = ""

    @classmethod
    def absent(cls) -> Comment:
        return cls("")

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Comment, int]:
        inner, pos = take_delimited(text, pos, TAG_COMMENT_OPEN, TAG_COMMENT_CLOSE)
        return cls(inner.strip()), pos

    def serialize(self, sink: TextIO) -> None:
        if self.text:
            sink.write(f"{TAG_COMMENT_OPEN}\n{self.text}\n{TAG_COMMENT_CLOSE}\n")


@dataclass(frozen=True)
class Header:
    """HELAC-Dipoles writes no header; this block is always empty"""

    @classmethod
    def absent(cls) -> Header:
        return cls()

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Header, int]:
        return cls(), pos

    def serialize(self, sink: TextIO) -> None:
        pass


# ---------------------------------------------------------------------------
# <init> lines
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PdfSum:
    """``# SUMPDF n id id ...``: the n pairs of summed PDF flavours"""

    pdf_sum_pairs: list[tuple[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _as_pairs(self, "pdf_sum_pairs")
        for pair in self.pdf_sum_pairs:
            _check_i64("pdf_sum_pairs", pair)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[PdfSum, int]:
        pos = _expect_keyword(text, pos, "SUMPDF")
        n, pos = parse_u64(text, pos)
        pairs, pos = _pairs(parse_i64, text, pos, n)
        return cls(pairs), pos

    def serialize(self, sink: TextIO) -> None:
        tokens = [format_int(len(self.pdf_sum_pairs))]
        for a, b in self.pdf_sum_pairs:
            tokens += [format_int(a), format_int(b)]
        _write_line(sink, "SUMPDF", tokens)


@dataclass(frozen=True)
class JetAlgoInfo:
    """``# JETALGO algo n_bjets eta_max dr T|F pt_veto``

    ``pt_veto`` is ``None`` when the flag is ``F``; the value written after
    the flag is then ignored on reading.
    """

    algorithm_id: int
    n_bjets: int
    eta_max: float
    dr: float
    pt_veto: Optional[float] = None

    def __post_init__(self) -> None:
        _check_i8("algorithm_id", [self.algorithm_id])
        _check_u8("n_bjets", self.n_bjets)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[JetAlgoInfo, int]:
        pos = _expect_keyword(text, pos, "JETALGO")
        algorithm_id, pos = parse_i8(text, pos)
        n_bjets, pos = parse_u8(text, pos)
        eta_max, pos = parse_float(text, pos)
        dr, pos = parse_float(text, pos)
        if peek_tag(text, pos, "T"):
            has_veto = True
        elif peek_tag(text, pos, "F"):
            has_veto = False
        else:
            raise LHESyntaxError("'T' or 'F'", text, skip_whitespace(text, pos))
        pos = expect_tag(text, pos, "T" if has_veto else "F")
        pt_veto, pos = parse_float(text, pos)
        return cls(
            algorithm_id, n_bjets, eta_max, dr, pt_veto if has_veto else None
        ), pos

    def serialize(self, sink: TextIO) -> None:
        _write_line(sink, "JETALGO", [
            format_int(self.algorithm_id),
            format_int(self.n_bjets),
            format_float(self.eta_max),
            format_float(self.dr),
            "F" if self.pt_veto is None else "T",
            format_float(0.0 if self.pt_veto is None else self.pt_veto),
        ])


@dataclass(frozen=True)
class DipMapInfo:
    """``# DIPMAP type n i j ...``: the n emitter/spectator pairs"""

    dipole_type: int
    dipole_map: list[tuple[int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_i8("dipole_type", [self.dipole_type])
        _as_pairs(self, "dipole_map")
        _check_u8("len(dipole_map)", len(self.dipole_map))
        for pair in self.dipole_map:
            _check_i8("dipole_map", pair)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[DipMapInfo, int]:
        pos = _expect_keyword(text, pos, "DIPMAP")
        dipole_type, pos = parse_i8(text, pos)
        n, pos = parse_u8(text, pos)
        dipole_map, pos = _pairs(parse_i8, text, pos, n)
        return cls(dipole_type, dipole_map), pos

    def serialize(self, sink: TextIO) -> None:
        tokens = [format_int(self.dipole_type), format_int(len(self.dipole_map))]
        for i, j in self.dipole_map:
            tokens += [format_int(i), format_int(j)]
        _write_line(sink, "DIPMAP", tokens)


@dataclass(frozen=True)
class PdfSumKP:
    """``# SUMPDF g1 q1 g2 q2 gluon1 quark1... gluon2 quark2...`` (KP runs)

    A gluon id is ``None`` when its count is zero; a placeholder ``0`` is
    still written in its place.
    """

    beam_1_gluon_id: Optional[int] = None
    beam_2_gluon_id: Optional[int] = None
    beam_1_quark_ids: list[int] = field(default_factory=list)
    beam_2_quark_ids: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_i64("gluon_id", [
            g for g in (self.beam_1_gluon_id, self.beam_2_gluon_id) if g is not None
        ])
        _check_i64("beam_1_quark_ids", self.beam_1_quark_ids)
        _check_i64("beam_2_quark_ids", self.beam_2_quark_ids)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[PdfSumKP, int]:
        pos = _expect_keyword(text, pos, "SUMPDF")
        n_gluon_1, pos = parse_u64(text, pos)
        n_quark_1, pos = parse_u64(text, pos)
        n_gluon_2, pos = parse_u64(text, pos)
        n_quark_2, pos = parse_u64(text, pos)
        gluon_1, pos = parse_i64(text, pos)
        quarks_1, pos = _repeat(parse_i64, text, pos, n_quark_1)
        gluon_2, pos = parse_i64(text, pos)
        quarks_2, pos = _repeat(parse_i64, text, pos, n_quark_2)
        return cls(
            beam_1_gluon_id=gluon_1 if n_gluon_1 else None,
            beam_2_gluon_id=gluon_2 if n_gluon_2 else None,
            beam_1_quark_ids=quarks_1,
            beam_2_quark_ids=quarks_2,
        ), pos

    def serialize(self, sink: TextIO) -> None:
        g1, g2 = self.beam_1_gluon_id, self.beam_2_gluon_id
        tokens = [
            "0" if g1 is None else "1",
            format_int(len(self.beam_1_quark_ids)),
            "0" if g2 is None else "1",
            format_int(len(self.beam_2_quark_ids)),
            format_int(0 if g1 is None else g1),
            *map(format_int, self.beam_1_quark_ids),
            format_int(0 if g2 is None else g2),
            *map(format_int, self.beam_2_quark_ids),
        ]
        _write_line(sink, "SUMPDF", tokens)


@dataclass(frozen=True)
class Norm:
    """``# NORM n_unweighted alpha alpha_err``"""

    n_unweighted_events: int
    alpha: float
    alpha_err: float

    def __post_init__(self) -> None:
        validate_integer_width(
            "n_unweighted_events", self.n_unweighted_events, 64, signed=False
        )

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Norm, int]:
        pos = _expect_keyword(text, pos, "NORM")
        n, pos = parse_u64(text, pos)
        alpha, pos = parse_float(text, pos)
        alpha_err, pos = parse_float(text, pos)
        return cls(n, alpha, alpha_err), pos

    def serialize(self, sink: TextIO) -> None:
        _write_line(sink, "NORM", [
            format_int(self.n_unweighted_events),
            format_float(self.alpha),
            format_float(self.alpha_err),
        ])


# ---------------------------------------------------------------------------
# <event> lines
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PdfInfo:
    """``# pdf x1 x2 scale``"""

    x1: float
    x2: float
    scale: float

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[PdfInfo, int]:
        pos = _expect_keyword(text, pos, "pdf")
        x1, pos = parse_float(text, pos)
        x2, pos = parse_float(text, pos)
        scale, pos = parse_float(text, pos)
        return cls(x1, x2, scale), pos

    def serialize(self, sink: TextIO) -> None:
        _write_line(sink, "pdf", [
            format_float(self.x1), format_float(self.x2), format_float(self.scale)
        ])


@dataclass(frozen=True)
class JetInfo:
    """``# jet ibvjet1 ibvjet2 ibvflreco``"""

    ibvjet1: int
    ibvjet2: int
    ibvflreco: int

    def __post_init__(self) -> None:
        _check_i8("jet", [self.ibvjet1, self.ibvjet2, self.ibvflreco])

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[JetInfo, int]:
        pos = _expect_keyword(text, pos, "jet")
        values, pos = _repeat(parse_i8, text, pos, 3)
        return cls(*values), pos

    def serialize(self, sink: TextIO) -> None:
        _write_line(sink, "jet", [
            format_int(self.ibvjet1),
            format_int(self.ibvjet2),
            format_int(self.ibvflreco),
        ])


@dataclass(frozen=True)
class MeInfoRS:
    """``# me`` line of a real-subtraction (RS) run

    Layout: ``weight max_ew max_qcd real_weight scale irun n``, then ``n``
    dipole ids, ``n`` dipole weights and, when ``irun > 0``, ``n``
    renormalisation scales.  ``dipole_mu_rs`` is ``None`` exactly when
    ``irun`` is zero.

    Raises
    ------
    ValidationError
        If the dipole lists differ in length or hold more than 255 entries.
    """

    weight: float
    max_ew: int
    max_qcd: int
    real_weight: float
    scale: float
    dipole_ids: list[int] = field(default_factory=list)
    dipole_weights: list[float] = field(default_factory=list)
    dipole_mu_rs: Optional[list[float]] = None

    def __post_init__(self) -> None:
        _check_u8("max_ew", self.max_ew)
        _check_u8("max_qcd", self.max_qcd)
        _check_u8("len(dipole_ids)", len(self.dipole_ids))
        _check_i8("dipole_ids", self.dipole_ids)
        n = len(self.dipole_ids)
        if len(self.dipole_weights) != n:
            raise ValidationError(
                f"MeInfoRS has {n} dipole ids but "
                f"{len(self.dipole_weights)} dipole weights"
            )
        if self.dipole_mu_rs is not None and len(self.dipole_mu_rs) != n:
            raise ValidationError(
                f"MeInfoRS has {n} dipole ids but "
                f"{len(self.dipole_mu_rs)} dipole scales"
            )

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[MeInfoRS, int]:
        pos = _expect_keyword(text, pos, "me")
        weight, pos = parse_float(text, pos)
        max_ew, pos = parse_u8(text, pos)
        max_qcd, pos = parse_u8(text, pos)
        real_weight, pos = parse_float(text, pos)
        scale, pos = parse_float(text, pos)
        irun, pos = parse_u8(text, pos)
        n, pos = parse_u8(text, pos)
        dipole_ids, pos = _repeat(parse_i8, text, pos, n)
        dipole_weights, pos = _repeat(parse_float, text, pos, n)
        dipole_mu_rs = None
        if irun > 0:
            dipole_mu_rs, pos = _repeat(parse_float, text, pos, n)
        return cls(
            weight, max_ew, max_qcd, real_weight, scale,
            dipole_ids, dipole_weights, dipole_mu_rs,
        ), pos

    def serialize(self, sink: TextIO) -> None:
        tokens = [
            format_float(self.weight),
            format_int(self.max_ew),
            format_int(self.max_qcd),
            format_float(self.real_weight),
            format_float(self.scale),
            "0" if self.dipole_mu_rs is None else "1",
            format_int(len(self.dipole_ids)),
            *map(format_int, self.dipole_ids),
            *map(format_float, self.dipole_weights),
            *map(format_float, self.dipole_mu_rs or []),
        ]
        _write_line(sink, "me", tokens)


@dataclass(frozen=True)
class MeInfoI:
    """``# me max_ew max_qcd weight a b c log_term`` (I runs)"""

    max_ew: int
    max_qcd: int
    weight: float
    coeff_a: float
    coeff_b: float
    coeff_c: float
    log_term: int

    def __post_init__(self) -> None:
        _check_u8("max_ew", self.max_ew)
        _check_u8("max_qcd", self.max_qcd)
        _check_i8("log_term", [self.log_term])

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[MeInfoI, int]:
        pos = _expect_keyword(text, pos, "me")
        max_ew, pos = parse_u8(text, pos)
        max_qcd, pos = parse_u8(text, pos)
        floats, pos = _repeat(parse_float, text, pos, 4)
        log_term, pos = parse_i8(text, pos)
        return cls(max_ew, max_qcd, *floats, log_term), pos

    def serialize(self, sink: TextIO) -> None:
        _write_line(sink, "me", [
            format_int(self.max_ew),
            format_int(self.max_qcd),
            format_float(self.weight),
            format_float(self.coeff_a),
            format_float(self.coeff_b),
            format_float(self.coeff_c),
            format_int(self.log_term),
        ])


_KP_FLOAT_FIELDS: tuple[str, ...] = (
    "weight", "x1_prime", "x2_prime",
    "weight_a1g_l0", "weight_a1g_l1", "weight_a1q_l0", "weight_a1q_l1",
    "weight_b1g_l0", "weight_b1g_l1", "weight_b1q_l0", "weight_b1q_l1",
    "weight_a2g_l0", "weight_a2g_l1", "weight_a2q_l0", "weight_a2q_l1",
    "weight_b2g_l0", "weight_b2g_l1", "weight_b2q_l0", "weight_b2q_l1",
)
"""Float fields of the KP ``# me`` line, in file order."""


@dataclass(frozen=True)
class MeInfoKP:
    """``# me max_ew max_qcd`` followed by the 19 KP weights

    The weights are ``weight``, the rescaled momentum fractions
    ``x1_prime`` / ``x2_prime``, then the A, B coefficients per beam (1, 2),
    parton (g, q) and log power (l0, l1).
    """

    max_ew: int
    max_qcd: int
    weight: float
    x1_prime: float
    x2_prime: float
    weight_a1g_l0: float
    weight_a1g_l1: float
    weight_a1q_l0: float
    weight_a1q_l1: float
    weight_b1g_l0: float
    weight_b1g_l1: float
    weight_b1q_l0: float
    weight_b1q_l1: float
    weight_a2g_l0: float
    weight_a2g_l1: float
    weight_a2q_l0: float
    weight_a2q_l1: float
    weight_b2g_l0: float
    weight_b2g_l1: float
    weight_b2q_l0: float
    weight_b2q_l1: float

    def __post_init__(self) -> None:
        _check_u8("max_ew", self.max_ew)
        _check_u8("max_qcd", self.max_qcd)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[MeInfoKP, int]:
        pos = _expect_keyword(text, pos, "me")
        max_ew, pos = parse_u8(text, pos)
        max_qcd, pos = parse_u8(text, pos)
        floats, pos = _repeat(parse_float, text, pos, len(_KP_FLOAT_FIELDS))
        return cls(max_ew, max_qcd, *floats), pos

    def serialize(self, sink: TextIO) -> None:
        tokens = [format_int(self.max_ew), format_int(self.max_qcd)]
        tokens += [format_float(getattr(self, name)) for name in _KP_FLOAT_FIELDS]
        _write_line(sink, "me", tokens)


@dataclass(frozen=True)
class MeInfo1loop:
    """``# me`` line of a one-loop virtual run

    Layout: ``max_ew_lo max_qcd_lo weight_lo max_ew_1loop max_qcd_1loop
    weight_1loop a b c``.
    """

    max_ew_lo: int
    max_qcd_lo: int
    weight_lo: float
    max_ew_1loop: int
    max_qcd_1loop: int
    weight_1loop: float
    coeff_a: float
    coeff_b: float
    coeff_c: float

    def __post_init__(self) -> None:
        for name in ("max_ew_lo", "max_qcd_lo", "max_ew_1loop", "max_qcd_1loop"):
            _check_i64(name, [getattr(self, name)])

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[MeInfo1loop, int]:
        pos = _expect_keyword(text, pos, "me")
        max_ew_lo, pos = parse_i64(text, pos)
        max_qcd_lo, pos = parse_i64(text, pos)
        weight_lo, pos = parse_float(text, pos)
        max_ew_1loop, pos = parse_i64(text, pos)
        max_qcd_1loop, pos = parse_i64(text, pos)
        floats, pos = _repeat(parse_float, text, pos, 4)
        return cls(
            max_ew_lo, max_qcd_lo, weight_lo, max_ew_1loop, max_qcd_1loop,
            *floats,
        ), pos

    def serialize(self, sink: TextIO) -> None:
        _write_line(sink, "me", [
            format_int(self.max_ew_lo),
            format_int(self.max_qcd_lo),
            format_float(self.weight_lo),
            format_int(self.max_ew_1loop),
            format_int(self.max_qcd_1loop),
            format_float(self.weight_1loop),
            format_float(self.coeff_a),
            format_float(self.coeff_b),
            format_float(self.coeff_c),
        ])


# ---------------------------------------------------------------------------
# Composite extra blocks
# ---------------------------------------------------------------------------

class _BlockGroup:
    """Extra block made of several ``#`` lines in any order

    Subclasses are dataclasses whose fields match :attr:`_parts` one to
    one, in the same order.  Lines are written in field order.
    """

    _parts: ClassVar[tuple[tuple[str, type], ...]] = ()

    @classmethod
    def parse(cls, text: str, pos: int):
        values, pos = match_blocks(
            text,
            pos,
            [SubParser(name, codec.parse) for name, codec in cls._parts],
        )
        return cls(*values), pos

    def serialize(self, sink: TextIO) -> None:
        for name, _ in self._parts:
            getattr(self, name).serialize(sink)


@dataclass(frozen=True)
class InitExtraRS(_BlockGroup):
    """``<init>`` extra of an RS run"""

    pdf_sum: PdfSum
    dip_map: DipMapInfo
    jet_algo: JetAlgoInfo

    _parts = (("pdf_sum", PdfSum), ("dip_map", DipMapInfo), ("jet_algo", JetAlgoInfo))


@dataclass(frozen=True)
class EventExtraRS(_BlockGroup):
    """``<event>`` extra of an RS run"""

    pdf: PdfInfo
    me: MeInfoRS
    jet: JetInfo

    _parts = (("pdf", PdfInfo), ("me", MeInfoRS), ("jet", JetInfo))


@dataclass(frozen=True)
class EventExtraI(_BlockGroup):
    """``<event>`` extra of an I run"""

    pdf: PdfInfo
    me: MeInfoI

    _parts = (("pdf", PdfInfo), ("me", MeInfoI))


@dataclass(frozen=True)
class EventExtraKP(_BlockGroup):
    """``<event>`` extra of a KP run"""

    pdf: PdfInfo
    me: MeInfoKP

    _parts = (("pdf", PdfInfo), ("me", MeInfoKP))


@dataclass(frozen=True)
class InitExtra1loop(_BlockGroup):
    """``<init>`` extra of a one-loop run"""

    pdf_sum: PdfSum
    norm: Norm

    _parts = (("pdf_sum", PdfSum), ("norm", Norm))


@dataclass(frozen=True)
class EventExtra1loop(_BlockGroup):
    """``<event>`` extra of a one-loop run"""

    pdf: PdfInfo
    me: MeInfo1loop

    _parts = (("pdf", PdfInfo), ("me", MeInfo1loop))
