#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LHE (Les Houches Event) document writer

Serialisation mirrors :mod:`pylhef.readers.lhe` field for field.  The
output is canonical: one line per fixed record, integers in plain decimal
and floats in the shortest scientific notation that reads back exactly
(see :func:`~pylhef.utils.lexer.format_float`).  Counts are always
derived from the lengths of the collections, never stored.

Output Layout
-------------
::

    <LesHouchesEvents version="1.0">
    <comment / header, as written by their codecs>
    <init>
    beam_1_id beam_2_id E1 E2 pdfg1 pdfg2 pdfid1 pdfid2 strategy n_proc
    xsect xsect_err max_weight process_id
    <init extra>
    </init>
    <event>
    n_particles process_id weight scale alpha_ew alpha_qcd
    pdg status m1 m2 c1 c2 px py pz e mass lifetime spin
    <event extra>
    </event>
    </LesHouchesEvents>
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, TextIO

from pylhef.exceptions import IOFailure, ValidationError
from pylhef.formats import get_format
from pylhef.models.codec import LHEFormat
from pylhef.models.records import (
    EventRecord,
    InitBlock,
    LHEDocument,
    ParticleRecord,
    ProcessInfo,
)
from pylhef.utils.constants import (
    TAG_EVENT_CLOSE,
    TAG_EVENT_OPEN,
    TAG_FILE_CLOSE,
    TAG_FILE_OPEN,
    TAG_INIT_CLOSE,
    TAG_INIT_OPEN,
    TAG_VERSION_ATTR,
)
from pylhef.utils.lexer import format_float, format_int
from pylhef.utils.validation import validate_version

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

def serialize_process_info(info: ProcessInfo, sink: TextIO) -> None:
    sink.write(" ".join((
        format_float(info.xsect),
        format_float(info.xsect_err),
        format_float(info.maximum_weight),
        format_int(info.process_id),
    )) + "\n")


def serialize_particle(particle: ParticleRecord, sink: TextIO) -> None:
    p = particle.momentum
    sink.write(" ".join((
        format_int(particle.pdg_id),
        format_int(particle.status),
        format_int(particle.mother_1_id),
        format_int(particle.mother_2_id),
        format_int(particle.color_1),
        format_int(particle.color_2),
        format_float(p.px),
        format_float(p.py),
        format_float(p.pz),
        format_float(p.e),
        format_float(particle.mass),
        format_float(particle.proper_lifetime),
        format_float(particle.spin),
    )) + "\n")


def serialize_init(init: InitBlock, sink: TextIO) -> None:
    """Write an ``<init>`` block, process count taken from ``process_info``"""
    sink.write(TAG_INIT_OPEN + "\n")
    sink.write(" ".join((
        format_int(init.beam_1_id),
        format_int(init.beam_2_id),
        format_float(init.beam_1_energy),
        format_float(init.beam_2_energy),
        format_int(init.beam_1_pdf_group_id),
        format_int(init.beam_2_pdf_group_id),
        format_int(init.beam_1_pdf_id),
        format_int(init.beam_2_pdf_id),
        format_int(init.weighting_strategy),
        format_int(len(init.process_info)),
    )) + "\n")
    for info in init.process_info:
        serialize_process_info(info, sink)
    init.extra.serialize(sink)
    sink.write(TAG_INIT_CLOSE + "\n")


def serialize_event(event: EventRecord, sink: TextIO) -> None:
    """Write an ``<event>`` block, particle count taken from ``particles``"""
    sink.write(TAG_EVENT_OPEN + "\n")
    sink.write(" ".join((
        format_int(len(event.particles)),
        format_int(event.process_id),
        format_float(event.weight),
        format_float(event.scale),
        format_float(event.alpha_ew),
        format_float(event.alpha_qcd),
    )) + "\n")
    for particle in event.particles:
        serialize_particle(particle, sink)
    event.extra.serialize(sink)
    sink.write(TAG_EVENT_CLOSE + "\n")


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

def check_document(doc: LHEDocument, fmt: LHEFormat) -> None:
    """Verify that the slot values of *doc* belong to dialect *fmt*

    Raises
    ------
    ValidationError
        If a slot value is not an instance of the dialect's codec, or the
        version contains a double quote.
    """
    validate_version(doc.version)
    slots = (
        ("comment", doc.comment, fmt.comment),
        ("header", doc.header, fmt.header),
        ("init extra", doc.init.extra, fmt.init_extra),
    )
    for name, value, codec in slots:
        if not isinstance(value, codec):
            raise ValidationError(
                f"{name} is {type(value).__name__}, format {fmt.name!r} "
                f"expects {codec.__name__}"
            )
    for index, event in enumerate(doc.events):
        if not isinstance(event.extra, fmt.event_extra):
            raise ValidationError(
                f"event {index} extra is {type(event.extra).__name__}, "
                f"format {fmt.name!r} expects {fmt.event_extra.__name__}"
            )


def serialize_document(
    doc: LHEDocument,
    sink: TextIO,
    fmt: Optional[LHEFormat] = None,
) -> None:
    """Write a complete document to a text sink

    Parameters
    ----------
    doc : LHEDocument
        Document to write.
    sink : TextIO
        Any writable text stream.
    fmt : LHEFormat, optional
        When given, the slot values of *doc* are checked against it
        before anything is written.

    Raises
    ------
    ValidationError
        If the version contains ``"`` or a slot value does not match
        *fmt*.  Nothing has been written in that case.
    """
    if fmt is not None:
        check_document(doc, fmt)
    else:
        validate_version(doc.version)

    sink.write(f'{TAG_FILE_OPEN} {TAG_VERSION_ATTR}"{doc.version}">\n')
    doc.comment.serialize(sink)
    doc.header.serialize(sink)
    serialize_init(doc.init, sink)
    for event in doc.events:
        serialize_event(event, sink)
    sink.write(TAG_FILE_CLOSE + "\n")


def dumps(doc: LHEDocument, fmt: Optional[LHEFormat] = None) -> str:
    """Return the canonical LHE text of *doc*

    Examples
    --------
    >>> from pylhef.formats import get_format
    >>> from pylhef.readers.lhe import parse_document
    >>> fmt = get_format("string")
    >>> text = '<LesHouchesEvents version="3.0"><init>1 2 3. 4. 5 6 7 8 9 0</init></LesHouchesEvents>'
    >>> print(dumps(parse_document(text, fmt), fmt), end="")
    <LesHouchesEvents version="3.0">
    <init>
    1 2 3e+00 4e+00 5 6 7 8 9 0
    </init>
    </LesHouchesEvents>
    """
    buffer = io.StringIO()
    serialize_document(doc, buffer, fmt)
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Writer class
# ---------------------------------------------------------------------------

class LHEWriter:
    """Writer for LHE files of one dialect

    Parameters
    ----------
    fmt : LHEFormat | str, optional
        Dialect, either an :class:`LHEFormat` or a registry name from
        :data:`pylhef.formats.FORMATS`.  Default ``"string"``.

    Examples
    --------
    >>> writer = LHEWriter("plain")
    >>> writer.write(doc, "out.lhe")  # doctest: +SKIP
    """

    def __init__(self, fmt: LHEFormat | str = "string") -> None:
        self.format = get_format(fmt) if isinstance(fmt, str) else fmt

    def write(
        self,
        doc: LHEDocument,
        path: Path | str,
        *,
        overwrite: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        """Write *doc* to *path*

        Parameters
        ----------
        doc : LHEDocument
            Document to write.
        path : Path | str
            Destination file.  Created, or truncated if it exists.
        overwrite : bool, optional
            If ``False``, refuse to replace an existing file.  Default
            ``True``.
        encoding : str, optional
            Text encoding.  Default ``"utf-8"``.

        Raises
        ------
        ValidationError
            If *doc* cannot be written in this dialect.  The file is not
            touched.
        IOFailure
            If the file cannot be created or written, including when it
            exists and *overwrite* is ``False``.
        """
        out = Path(path)
        check_document(doc, self.format)

        mode = "w" if overwrite else "x"
        try:
            with open(out, mode, encoding=encoding, newline="") as fh:
                serialize_document(doc, fh)
        except OSError as exc:
            raise IOFailure(f"Cannot write {out}: {exc}") from exc

        logger.debug(
            "Wrote LHE file %s (format=%s, %d events)",
            out, self.format.name, len(doc.events),
        )


def write_lhe_file(
    doc: LHEDocument,
    path: Path | str,
    fmt: LHEFormat | str = "string",
    *,
    overwrite: bool = True,
    encoding: str = "utf-8",
) -> None:
    """Write an LHE file in one call

    Equivalent to ``LHEWriter(fmt).write(doc, path, ...)``.
    """
    LHEWriter(fmt).write(doc, path, overwrite=overwrite, encoding=encoding)
