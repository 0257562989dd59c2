#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LHE readers

* :class:`~pylhef.readers.lhe.LHEReader`: reads any registered dialect
* :func:`~pylhef.readers.lhe.parse_document` and the per-block
  ``parse_*`` functions: cursor-based parsing of in-memory text

All readers share the :class:`~pylhef.readers.base.BaseReader` interface.
"""

from __future__ import annotations

from pylhef.readers.base import BaseReader
from pylhef.readers.lhe import (
    LHEReader,
    parse_document,
    parse_event,
    parse_extension,
    parse_init,
    parse_particle,
    parse_process_info,
    read_lhe_file,
)

__all__ = [
    "BaseReader",
    "LHEReader",
    "parse_document",
    "parse_event",
    "parse_extension",
    "parse_init",
    "parse_particle",
    "parse_process_info",
    "read_lhe_file",
]
