#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for LHE documents

All models are frozen ``dataclasses``.  They are the sole output format of
the reader layer and the sole input format accepted by the writer and
converter layers.  The generator-specific slots are filled by codec
classes bundled in an :class:`~pylhef.models.codec.LHEFormat`.
"""

from __future__ import annotations

from pylhef.models.codec import LHECodec, LHEFormat, OptionalBlockCodec
from pylhef.models.records import (
    EventRecord,
    FourMomentum,
    InitBlock,
    LHEDocument,
    ParticleRecord,
    ProcessInfo,
)

__all__ = [
    "LHECodec",
    "OptionalBlockCodec",
    "LHEFormat",
    "ProcessInfo",
    "FourMomentum",
    "ParticleRecord",
    "InitBlock",
    "EventRecord",
    "LHEDocument",
]
