#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LHE (Les Houches Event) document reader

Parses the fixed skeleton of an LHE file and delegates the four
generator-specific regions to the codecs of an
:class:`~pylhef.models.codec.LHEFormat`.

Document Grammar
----------------
::

    <LesHouchesEvents version="...">
      {comment, header, <init> ... </init>}   any order, comment and header optional
      <event> ... </event>                    zero or more, in file order
    </LesHouchesEvents>

``<init>`` holds ten fixed fields (two beam ids, two energies, two PDF
group ids, two PDF ids, the weighting strategy and the process count),
one row per process, then the init extra.  ``<event>`` holds six fixed
fields (particle count, process id, weight, scale, alpha_ew, alpha_qcd),
one 13-field row per particle, then the event extra.

Only whitespace may follow the closing tag.

Error Wrapping
--------------
Any exception other than :class:`~pylhef.exceptions.ExtensionError`
raised by a codec is wrapped in an ``ExtensionError`` that keeps the
original as :attr:`~pylhef.exceptions.ExtensionError.inner`.

References
----------
.. [1] J. Alwall et al., "A standard format for Les Houches Event Files",
   Comput. Phys. Commun. 176 (2007) 300.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from pylhef.exceptions import ExtensionError, LHESyntaxError, RangeError
from pylhef.formats import get_format
from pylhef.models.codec import LHEFormat
from pylhef.models.records import (
    EventRecord,
    FourMomentum,
    InitBlock,
    LHEDocument,
    ParticleRecord,
    ProcessInfo,
)
from pylhef.readers.base import BaseReader
from pylhef.utils.constants import (
    TAG_EVENT_CLOSE,
    TAG_EVENT_OPEN,
    TAG_FILE_CLOSE,
    TAG_FILE_OPEN,
    TAG_INIT_CLOSE,
    TAG_INIT_OPEN,
    TAG_VERSION_ATTR,
)
from pylhef.utils.lexer import (
    expect_tag,
    parse_float,
    parse_i64,
    parse_u64,
    peek_tag,
    skip_whitespace,
    take_until,
)
from pylhef.utils.matcher import SubParser, match_blocks

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Extension boundary
# ---------------------------------------------------------------------------

def parse_extension(codec: type, text: str, pos: int) -> tuple[Any, int]:
    """Run ``codec.parse`` and wrap any failure in :class:`ExtensionError`"""
    try:
        return codec.parse(text, pos)
    except ExtensionError:
        raise
    except Exception as exc:
        raise ExtensionError(codec.__name__, exc) from exc


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def parse_process_info(text: str, pos: int) -> tuple[ProcessInfo, int]:
    """Parse one ``xsect xsect_err max_weight process_id`` row"""
    xsect, pos = parse_float(text, pos)
    xsect_err, pos = parse_float(text, pos)
    maximum_weight, pos = parse_float(text, pos)
    process_id, pos = parse_i64(text, pos)
    return ProcessInfo(xsect, xsect_err, maximum_weight, process_id), pos


def parse_particle(text: str, pos: int) -> tuple[ParticleRecord, int]:
    """Parse one 13-field particle row

    The first six fields (PDG id, status, two mothers, two colours) are
    signed 64-bit integers, the remaining seven are floats.
    """
    ints = []
    for _ in range(6):
        value, pos = parse_i64(text, pos)
        ints.append(value)
    floats = []
    for _ in range(7):
        value, pos = parse_float(text, pos)
        floats.append(value)
    px, py, pz, e, mass, proper_lifetime, spin = floats
    particle = ParticleRecord(
        *ints,
        momentum=FourMomentum(px, py, pz, e),
        mass=mass,
        proper_lifetime=proper_lifetime,
        spin=spin,
    )
    return particle, pos


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

def parse_init(text: str, pos: int, fmt: LHEFormat) -> tuple[InitBlock, int]:
    """Parse an ``<init>`` block

    Parameters
    ----------
    text : str
        Buffer being parsed.
    pos : int
        Offset of the block (leading whitespace allowed).
    fmt : LHEFormat
        Dialect supplying the init-extra codec.

    Returns
    -------
    tuple[InitBlock, int]
        The block and the offset after ``</init>``.

    Raises
    ------
    ParseError
        On any malformed field, a missing process row, or a failing
        init-extra codec.
    """
    pos = expect_tag(text, pos, TAG_INIT_OPEN)
    beam_1_id, pos = parse_i64(text, pos)
    beam_2_id, pos = parse_i64(text, pos)
    beam_1_energy, pos = parse_float(text, pos)
    beam_2_energy, pos = parse_float(text, pos)
    beam_1_pdf_group_id, pos = parse_i64(text, pos)
    beam_2_pdf_group_id, pos = parse_i64(text, pos)
    beam_1_pdf_id, pos = parse_i64(text, pos)
    beam_2_pdf_id, pos = parse_i64(text, pos)
    weighting_strategy, pos = parse_i64(text, pos)
    n_processes, pos = parse_u64(text, pos)

    process_info = []
    for _ in range(n_processes):
        info, pos = parse_process_info(text, pos)
        process_info.append(info)

    extra, pos = parse_extension(fmt.init_extra, text, pos)
    pos = expect_tag(text, pos, TAG_INIT_CLOSE)

    init = InitBlock(
        beam_1_id=beam_1_id,
        beam_2_id=beam_2_id,
        beam_1_energy=beam_1_energy,
        beam_2_energy=beam_2_energy,
        beam_1_pdf_group_id=beam_1_pdf_group_id,
        beam_2_pdf_group_id=beam_2_pdf_group_id,
        beam_1_pdf_id=beam_1_pdf_id,
        beam_2_pdf_id=beam_2_pdf_id,
        weighting_strategy=weighting_strategy,
        process_info=process_info,
        extra=extra,
    )
    return init, pos


def parse_event(text: str, pos: int, fmt: LHEFormat) -> tuple[EventRecord, int]:
    """Parse an ``<event>`` block

    The particle count is read as a signed 64-bit integer; a negative
    count is a :class:`~pylhef.exceptions.RangeError`.
    """
    pos = expect_tag(text, pos, TAG_EVENT_OPEN)
    count_at = pos
    n_particles, pos = parse_i64(text, pos)
    if n_particles < 0:
        raise RangeError("particle count", str(n_particles), text, count_at)
    process_id, pos = parse_i64(text, pos)
    weight, pos = parse_float(text, pos)
    scale, pos = parse_float(text, pos)
    alpha_ew, pos = parse_float(text, pos)
    alpha_qcd, pos = parse_float(text, pos)

    particles = []
    for _ in range(n_particles):
        particle, pos = parse_particle(text, pos)
        particles.append(particle)

    extra, pos = parse_extension(fmt.event_extra, text, pos)
    pos = expect_tag(text, pos, TAG_EVENT_CLOSE)

    event = EventRecord(
        process_id=process_id,
        weight=weight,
        scale=scale,
        alpha_ew=alpha_ew,
        alpha_qcd=alpha_qcd,
        particles=particles,
        extra=extra,
    )
    return event, pos


def _parse_version(text: str, pos: int) -> tuple[str, int]:
    pos = expect_tag(text, pos, TAG_FILE_OPEN)
    pos = expect_tag(text, pos, TAG_VERSION_ATTR)
    pos = expect_tag(text, pos, '"', skip=False)
    version, pos = take_until(text, pos, '"')
    pos = expect_tag(text, pos, '"', skip=False)
    pos = expect_tag(text, pos, ">")
    return version, pos


def parse_document(text: str, fmt: LHEFormat) -> LHEDocument:
    """Parse a complete LHE document

    Parameters
    ----------
    text : str
        Entire document.
    fmt : LHEFormat
        Dialect used for the comment, header and extra blocks.

    Returns
    -------
    LHEDocument
        The parsed document.

    Raises
    ------
    ParseError
        If any part of *text* is malformed, including non-whitespace
        after ``</LesHouchesEvents>``.

    Examples
    --------
    >>> from pylhef.formats import get_format
    >>> doc = parse_document(
    ...     '<LesHouchesEvents version="1.0">\\n'
    ...     '<init>\\n1 2 3. 4. 5 6 7 8 9 0\\n</init>\\n'
    ...     '</LesHouchesEvents>\\n',
    ...     get_format("plain"),
    ... )
    >>> doc.version, len(doc.events)
    ('1.0', 0)
    """
    version, pos = _parse_version(text, 0)

    (comment, header, init), pos = match_blocks(
        text,
        pos,
        (
            SubParser(
                "comment",
                partial(parse_extension, fmt.comment),
                mandatory=False,
                absent=fmt.comment.absent,
            ),
            SubParser(
                "header",
                partial(parse_extension, fmt.header),
                mandatory=False,
                absent=fmt.header.absent,
            ),
            SubParser("init", partial(parse_init, fmt=fmt)),
        ),
    )

    events = []
    while peek_tag(text, pos, TAG_EVENT_OPEN):
        event, pos = parse_event(text, pos, fmt)
        events.append(event)

    pos = expect_tag(text, pos, TAG_FILE_CLOSE)
    pos = skip_whitespace(text, pos)
    if pos != len(text):
        raise LHESyntaxError("end of input", text, pos)

    logger.debug(
        "Parsed LHE document (format=%s, version=%s): %d processes, %d events",
        fmt.name, version, len(init.process_info), len(events),
    )
    return LHEDocument(
        version=version,
        comment=comment,
        header=header,
        init=init,
        events=events,
    )


# ---------------------------------------------------------------------------
# Reader class
# ---------------------------------------------------------------------------

class LHEReader(BaseReader):
    """Reader for LHE files of one dialect

    Parameters
    ----------
    fmt : LHEFormat | str, optional
        Dialect, either an :class:`LHEFormat` or a registry name from
        :data:`pylhef.formats.FORMATS`.  Default ``"string"``.

    Examples
    --------
    >>> reader = LHEReader("helac-rs")
    >>> doc = reader.read("events.lhe")  # doctest: +SKIP
    >>> doc.init.extra.jet_algo.algorithm_id  # doctest: +SKIP
    1
    """

    def __init__(self, fmt: LHEFormat | str = "string") -> None:
        self.format = get_format(fmt) if isinstance(fmt, str) else fmt

    def parse(self, text: str) -> LHEDocument:
        return parse_document(text, self.format)


def read_lhe_file(
    path,
    fmt: LHEFormat | str = "string",
    *,
    encoding: str = "utf-8",
) -> LHEDocument:
    """Read an LHE file in one call

    Equivalent to ``LHEReader(fmt).read(path, encoding=encoding)``.
    """
    return LHEReader(fmt).read(path, encoding=encoding)
