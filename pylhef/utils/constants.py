#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Format constants shared by the LHE reader, writer and extension formats

Tag literals are kept here so the reader and writer can never disagree on
spelling, and integer width limits are tabulated once for the lexer.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Tag literals
# ---------------------------------------------------------------------------

TAG_FILE_OPEN: str = "<LesHouchesEvents"
"""Start of the opening document tag (the version attribute follows)."""

TAG_VERSION_ATTR: str = "version="
"""Name of the only attribute recognised on the opening document tag."""

TAG_FILE_CLOSE: str = "</LesHouchesEvents>"

TAG_INIT_OPEN: str = "<init>"
TAG_INIT_CLOSE: str = "</init>"

TAG_EVENT_OPEN: str = "<event>"
TAG_EVENT_CLOSE: str = "</event>"

TAG_COMMENT_OPEN: str = "<!--"
TAG_COMMENT_CLOSE: str = "-->"

TAG_HEADER_OPEN: str = "<header>"
TAG_HEADER_CLOSE: str = "</header>"

# ---------------------------------------------------------------------------
# Integer widths
# ---------------------------------------------------------------------------

SUPPORTED_BITS: tuple[int, ...] = (8, 16, 32, 64)
"""Fixed integer widths understood by the numeric lexer."""

SIGNED_LIMITS: dict[int, tuple[int, int]] = {
    bits: (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) for bits in SUPPORTED_BITS
}
"""Inclusive ``(min, max)`` range of a signed integer of each width."""

UNSIGNED_LIMITS: dict[int, tuple[int, int]] = {
    bits: (0, (1 << bits) - 1) for bits in SUPPORTED_BITS
}
"""Inclusive ``(min, max)`` range of an unsigned integer of each width."""

