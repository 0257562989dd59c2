#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
pylhef - Python library for reading and writing Les Houches Event files

Parse LHE files produced by Monte Carlo event generators into typed,
immutable records, write them back in canonical form, and export their
numeric content to HDF5.

Generator-specific blocks (comment, header, the extra lines of ``<init>``
and ``<event>``) are handled by pluggable dialects:

* ``plain``: skipped
* ``string``: kept as text
* ``helac-rs``, ``helac-i``, ``helac-kp``, ``helac-1loop``: parsed into
  HELAC-Dipoles structures

Modules
-------
readers
    LHE reader and cursor-based block parsers.
writers
    LHE writer and block serialisers.
models
    Typed dataclass records and the codec protocol.
formats
    Dialect registry and the codec implementations.
converters
    Columnar NumPy / HDF5 export.
utils
    Numeric lexer, block matcher and validation.

Examples
--------
>>> from pylhef import read_lhe_file, write_lhe_file
>>> doc = read_lhe_file("events.lhe", "helac-rs")  # doctest: +SKIP
>>> doc.events[0].extra.pdf.scale  # doctest: +SKIP
91.188
>>> write_lhe_file(doc, "canonical.lhe", "helac-rs")  # doctest: +SKIP
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Melek Derman"

from pylhef.exceptions import (
    ConversionError,
    ExtensionError,
    IncompleteInputError,
    IOFailure,
    LHESyntaxError,
    ParseError,
    PyLHEFError,
    RangeError,
    ValidationError,
)
from pylhef.formats import FORMATS, get_format
from pylhef.models import (
    EventRecord,
    FourMomentum,
    InitBlock,
    LHECodec,
    LHEDocument,
    LHEFormat,
    ParticleRecord,
    ProcessInfo,
)
from pylhef.readers.lhe import LHEReader, parse_document, read_lhe_file
from pylhef.writers.lhe import LHEWriter, dumps, write_lhe_file

__all__ = [
    # Version
    "__version__",
    # Models
    "LHEDocument",
    "InitBlock",
    "EventRecord",
    "ProcessInfo",
    "ParticleRecord",
    "FourMomentum",
    "LHECodec",
    "LHEFormat",
    # Dialects
    "FORMATS",
    "get_format",
    # Reading and writing
    "LHEReader",
    "LHEWriter",
    "parse_document",
    "read_lhe_file",
    "write_lhe_file",
    "dumps",
    # Exceptions
    "PyLHEFError",
    "IOFailure",
    "ParseError",
    "LHESyntaxError",
    "RangeError",
    "IncompleteInputError",
    "ExtensionError",
    "ValidationError",
    "ConversionError",
]
