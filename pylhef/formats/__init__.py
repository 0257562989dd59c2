#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
LHE dialects and their registry

A dialect fixes the codecs used for the four generator-specific slots of a
document.  Readers, writers and the CLI select dialects by name through
:data:`FORMATS`:

* ``plain``: comment, header and extras skipped
  (:mod:`pylhef.formats.plain`)
* ``string``: comment, header and extras kept as trimmed text
  (:mod:`pylhef.formats.string`)
* ``helac-rs``, ``helac-i``, ``helac-kp``, ``helac-1loop``: structured
  HELAC-Dipoles extras (:mod:`pylhef.formats.helac`)
"""

from __future__ import annotations

from pylhef.formats import helac, plain, string
from pylhef.models.codec import LHEFormat

FORMATS: dict[str, LHEFormat] = {
    "plain": LHEFormat(
        "plain", plain.Comment, plain.Header, plain.InitExtra, plain.EventExtra
    ),
    "string": LHEFormat(
        "string", string.Comment, string.Header, string.InitExtra, string.EventExtra
    ),
    "helac-rs": LHEFormat(
        "helac-rs", helac.Comment, helac.Header, helac.InitExtraRS, helac.EventExtraRS
    ),
    "helac-i": LHEFormat(
        "helac-i", helac.Comment, helac.Header, helac.PdfSum, helac.EventExtraI
    ),
    "helac-kp": LHEFormat(
        "helac-kp", helac.Comment, helac.Header, helac.PdfSumKP, helac.EventExtraKP
    ),
    "helac-1loop": LHEFormat(
        "helac-1loop",
        helac.Comment,
        helac.Header,
        helac.InitExtra1loop,
        helac.EventExtra1loop,
    ),
}
"""Registered dialects, keyed by name."""


def get_format(name: str) -> LHEFormat:
    """Look up a registered dialect

    Raises
    ------
    ValueError
        If *name* is not a key of :data:`FORMATS`.
    """
    try:
        return FORMATS[name]
    except KeyError:
        raise ValueError(
            f"Unknown LHE format {name!r}; expected one of: {', '.join(FORMATS)}"
        ) from None


__all__ = ["FORMATS", "get_format"]
