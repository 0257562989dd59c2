#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Plain dialect: generator-specific content is skipped

Use this dialect when only the beams, processes, events and particles
matter.  The comment and header blocks are consumed if present and the
extra lines of ``<init>`` and ``<event>`` are skipped up to the closing
tag.  Nothing of them is kept and nothing is written back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

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
class _Discarded:
    """Value type with no content that writes nothing"""

    @classmethod
    def absent(cls) -> _Discarded:
        return cls()

    def serialize(self, sink: TextIO) -> None:
        pass


class Comment(_Discarded):
    """Optional ``<!-- ... -->`` block, contents discarded"""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Comment, int]:
        if not peek_tag(text, pos, TAG_COMMENT_OPEN):
            return cls(), pos
        _, pos = take_delimited(text, pos, TAG_COMMENT_OPEN, TAG_COMMENT_CLOSE)
        return cls(), pos


class Header(_Discarded):
    """Optional ``<header> ... </header>`` block, contents discarded"""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[Header, int]:
        if not peek_tag(text, pos, TAG_HEADER_OPEN):
            return cls(), pos
        _, pos = take_delimited(text, pos, TAG_HEADER_OPEN, TAG_HEADER_CLOSE)
        return cls(), pos


class InitExtra(_Discarded):
    """Everything between the last process row and ``</init>``"""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[InitExtra, int]:
        _, pos = take_until(text, pos, TAG_INIT_CLOSE)
        return cls(), pos


class EventExtra(_Discarded):
    """Everything between the last particle row and ``</event>``"""

    @classmethod
    def parse(cls, text: str, pos: int) -> tuple[EventExtra, int]:
        _, pos = take_until(text, pos, TAG_EVENT_CLOSE)
        return cls(), pos
