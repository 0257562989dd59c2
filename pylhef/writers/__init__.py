#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LHE writers

Serialisation mirrors the readers field for field; see
:mod:`pylhef.writers.lhe` for the canonical output layout.
"""

from __future__ import annotations

from pylhef.writers.lhe import (
    LHEWriter,
    check_document,
    dumps,
    serialize_document,
    serialize_event,
    serialize_init,
    serialize_particle,
    serialize_process_info,
    write_lhe_file,
)

__all__ = [
    "LHEWriter",
    "check_document",
    "dumps",
    "serialize_document",
    "serialize_event",
    "serialize_init",
    "serialize_particle",
    "serialize_process_info",
    "write_lhe_file",
]
