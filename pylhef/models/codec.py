#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Codec protocol for the pluggable slots of an LHE document

A *codec* is any class that knows how to read one of its instances from
LHE text and write it back.  The core reader and writer treat the four
generator-specific slots of :class:`~pylhef.models.records.LHEDocument`
purely through this protocol and never look at their contents.

Contract
--------
``parse(text, pos) -> (value, new_pos)``
    Classmethod.  Consume one value starting at *pos*; leading whitespace
    may be skipped.  Raise :class:`~pylhef.exceptions.ParseError` when the
    text does not match.
``serialize(sink) -> None``
    Append the canonical text of the value to the writable text *sink*.
``absent() -> value``
    Classmethod, required only for the comment and header slots.  Value
    used when the block is missing from the file.

Round-trip law: ``cls.parse(dumps(v), 0) == (v, len(dumps(v)))`` for every
valid value ``v``, comparing NaN fields with an is-NaN predicate.

A dialect is the combination of four codecs, bundled as an
:class:`LHEFormat`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TextIO, runtime_checkable


@runtime_checkable
class LHECodec(Protocol):
    """Structural type of a value that can be parsed from and written to LHE"""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Any, int]:
        ...

    def serialize(self, sink: TextIO) -> None:
        ...


@runtime_checkable
class OptionalBlockCodec(LHECodec, Protocol):
    """A codec whose block may be missing from the file"""

    @classmethod
    def absent(cls) -> Any:
        ...


@dataclass(frozen=True)
class LHEFormat:
    """The four codecs that make up one LHE dialect

    Parameters
    ----------
    name : str
        Registry name of the dialect (e.g. ``"string"``, ``"helac-rs"``).
    comment : type
        Codec for the optional ``<!-- -->`` block.
    header : type
        Codec for the optional ``<header>`` block.
    init_extra : type
        Codec for the content between the process rows and ``</init>``.
    event_extra : type
        Codec for the content between the particle rows and ``</event>``.

    Raises
    ------
    TypeError
        If a slot does not provide the methods its role requires.
    """

    name: str
    comment: type
    header: type
    init_extra: type
    event_extra: type

    def __post_init__(self) -> None:
        for slot in ("comment", "header"):
            _require(self, slot, ("parse", "serialize", "absent"))
        for slot in ("init_extra", "event_extra"):
            _require(self, slot, ("parse", "serialize"))


def _require(fmt: LHEFormat, slot: str, methods: tuple[str, ...]) -> None:
    codec = getattr(fmt, slot)
    missing = [m for m in methods if not callable(getattr(codec, m, None))]
    if missing:
        raise TypeError(
            f"Format {fmt.name!r}: {slot} codec {codec.__name__} lacks "
            f"{', '.join(missing)}"
        )
