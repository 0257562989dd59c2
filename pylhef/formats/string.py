#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
String dialect: generator-specific content is kept as trimmed text

The comment and header blocks and the extra lines of ``<init>`` and
``<event>`` are stored verbatim apart from surrounding whitespace, which
is stripped.  This is the most general dialect: any well-formed LHE file
can be read with it and written back without losing information.

Round-trip Preconditions
------------------------
* Stored text carries no leading or trailing whitespace.
* Stored text never contains its own closing delimiter (``-->``,
  ``</header>``, ``</init>`` or ``</event>``).

Examples
--------
>>> Comment.parse("<!--\\n  made by HELAC  \\n-->", 0)
(Comment(comment='made by HELAC'), 26)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from pylhef.utils.constants import (
    TAG_COMMENT_CLOSE,
    TAG_COMMENT_OPEN,
    TAG_EVENT_CLOSE,
    TAG_HEADER_CLOSE,
    TAG_HEADER_OPEN,
    TAG_INIT_CLOSE,
)
from pylhef.utils.lexer import peek_tag, take_delimited, take_until


@dataclass(frozen=True)
class Comment:
    """Optional ``<!-- ... -->`` block

    Parameters
    ----------
    comment : str | None
        Trimmed comment text, ``None`` when the file has no comment.
    """

    comment: Optional[str] = None

    @classmethod
    def absent(cls) -> Comment:
        return cls(None)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Comment, int]:
        if not peek_tag(text, pos, TAG_COMMENT_OPEN):
            return cls(None), pos
        inner, pos = take_delimited(text, pos, TAG_COMMENT_OPEN, TAG_COMMENT_CLOSE)
        return cls(inner.strip()), pos

    def serialize(self, sink: TextIO) -> None:
        if self.comment is not None:
            sink.write(f"{TAG_COMMENT_OPEN}\n{self.comment}\n{TAG_COMMENT_CLOSE}\n")


@dataclass(frozen=True)
class Header:
    """Optional ``<header> ... </header>`` block

    Parameters
    ----------
    header : str | None
        Trimmed header text, ``None`` when the file has no header.
    """

    header: Optional[str] = None

    @classmethod
    def absent(cls) -> Header:
        return cls(None)

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Header, int]:
        if not peek_tag(text, pos, TAG_HEADER_OPEN):
            return cls(None), pos
        inner, pos = take_delimited(text, pos, TAG_HEADER_OPEN, TAG_HEADER_CLOSE)
        return cls(inner.strip()), pos

    def serialize(self, sink: TextIO) -> None:
        if self.header is not None:
            sink.write(f"{TAG_HEADER_OPEN}\n{self.header}\n{TAG_HEADER_CLOSE}\n")


@dataclass(frozen=True)
class InitExtra:
    """Text between the last process row and ``</init>``"""

    text: str = ""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[InitExtra, int]:
        span, pos = take_until(text, pos, TAG_INIT_CLOSE)
        return cls(span.strip()), pos

    def serialize(self, sink: TextIO) -> None:
        if self.text:
            sink.write(f"{self.text}\n")


@dataclass(frozen=True)
class EventExtra:
    """Text between the last particle row and ``</event>``"""

    text: str = ""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[EventExtra, int]:
        span, pos = take_until(text, pos, TAG_EVENT_CLOSE)
        return cls(span.strip()), pos

    def serialize(self, sink: TextIO) -> None:
        if self.text:
            sink.write(f"{self.text}\n")
