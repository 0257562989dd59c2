#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Write-side preconditions and NaN-aware value comparison

Every validation function raises :class:`~pylhef.exceptions.ValidationError`
when a constraint is violated.  The writer calls these functions before
emitting a single character, so a rejected document never leaves a
half-written file behind.

Checked Constraints
-------------------
* The document version must not contain a double quote.
* Narrow integer fields of extension blocks must fit their written width.

Design Note
-----------
Validation functions accept raw values, **not** dataclass model
instances, so that this module never imports from ``models``.  This keeps
the import graph acyclic::

    utils ← models ← readers / writers ← converters
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any

from pylhef.exceptions import ValidationError
from pylhef.utils.constants import SIGNED_LIMITS, UNSIGNED_LIMITS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Validation functions
# ---------------------------------------------------------------------------

def validate_version(version: str) -> None:
    """Verify that *version* can be written as the opening-tag attribute

    Parameters
    ----------
    version : str
        Value of the ``version`` attribute.

    Raises
    ------
    ValidationError
        If *version* is not a string or contains ``"``.

    Examples
    --------
    >>> validate_version("1.0")
    >>> validate_version('1"0')  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pylhef.exceptions.ValidationError: ...
    """
    if not isinstance(version, str):
        raise ValidationError(
            f"Version must be a string, got {type(version).__name__}"
        )
    if '"' in version:
        raise ValidationError(
            f"Version {version!r} contains a double quote, which would "
            f"terminate the version attribute"
        )


def validate_integer_width(
    name: str,
    value: int,
    bits: int,
    *,
    signed: bool = True,
) -> None:
    """Verify that *value* fits the integer width it is written with

    Parameters
    ----------
    name : str
        Field name, used in the error message.
    value : int
        Value to check.
    bits : int
        Width in bits, one of 8, 16, 32, 64.
    signed : bool, optional
        Check against the signed (default) or unsigned range.

    Raises
    ------
    ValidationError
        If *value* is outside the range of the width.
    """
    lo, hi = (SIGNED_LIMITS if signed else UNSIGNED_LIMITS)[bits]
    if not lo <= value <= hi:
        kind = "i" if signed else "u"
        raise ValidationError(
            f"{name}={value} does not fit {kind}{bits} [{lo}, {hi}]"
        )


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------

def values_equal(a: Any, b: Any) -> bool:
    """Structural equality that treats two NaN floats as equal

    Dataclasses are compared field by field, sequences element by element.
    Everything else falls back to ``==``.

    Examples
    --------
    >>> values_equal([1.0, float("nan")], [1.0, float("nan")])
    True
    >>> float("nan") == float("nan")
    False
    """
    if isinstance(a, float) and isinstance(b, float):
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        return a == b
    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        if type(a) is not type(b):
            return False
        return all(
            values_equal(getattr(a, f.name), getattr(b, f.name))
            for f in dataclasses.fields(a)
        )
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if type(a) is not type(b) or len(a) != len(b):
            return False
        return all(values_equal(x, y) for x, y in zip(a, b))
    return a == b
