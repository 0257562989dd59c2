#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Order-independent matching of a small set of named blocks

LHE files do not fix the relative order of several sections: the comment,
header and ``<init>`` blocks may come in any order, and generator-specific
extras such as ``# SUMPDF`` / ``# DIPMAP`` / ``# JETALGO`` may too.
:func:`match_blocks` consumes such a group and returns the results in
*declaration* order, whatever order they appeared in.

Algorithm
---------
Each round tries every unsatisfied sub-parser, in declaration order, at
the current offset:

1. The first one that succeeds **and consumes input** is recorded, the
   offset moves to its end, and a new round starts.
2. If none consumes input but some succeeded with a zero-length match,
   the first such one is recorded as satisfied (offset unchanged) and a
   new round starts.
3. If nothing succeeds, matching stops.

Every round satisfies one sub-parser or ends the loop, so at most
``n * (n + 1) / 2`` attempts are made for *n* sub-parsers, independent of
the input size.

After the loop an unsatisfied mandatory sub-parser re-raises the last
error its own parse produced.  An unsatisfied optional one resolves to
its ``absent()`` value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from pylhef.exceptions import LHESyntaxError, ParseError

logger = logging.getLogger(__name__)

ParseFn = Callable[[str, int], "tuple[Any, int]"]
"""Sub-parser signature: ``(text, pos) -> (value, new_pos)``."""


@dataclass(frozen=True)
class SubParser:
    """One named entry of a block group

    Parameters
    ----------
    name : str
        Name used in log messages and error reports.
    parse : ParseFn
        Parser for the block.  Must raise
        :class:`~pylhef.exceptions.ParseError` on failure.
    mandatory : bool, optional
        Whether the block must be present (default ``True``).
    absent : Callable[[], Any], optional
        Factory for the value used when an optional block is missing.
        Defaults to returning ``None``.
    """

    name: str
    parse: ParseFn
    mandatory: bool = True
    absent: Optional[Callable[[], Any]] = None

    def absent_value(self) -> Any:
        """Value recorded when an optional block never matches"""
        return self.absent() if self.absent is not None else None


def match_blocks(
    text: str,
    pos: int,
    parsers: Sequence[SubParser],
) -> tuple[tuple[Any, ...], int]:
    """Parse every block of *parsers* in any order starting at *pos*

    Parameters
    ----------
    text : str
        Buffer being parsed.
    pos : int
        Offset at which the group starts.
    parsers : Sequence[SubParser]
        The group, in declaration order.

    Returns
    -------
    tuple[tuple[Any, ...], int]
        The block values in declaration order and the offset after the
        last consumed block.

    Raises
    ------
    ParseError
        The last error of the first mandatory block that could not be
        matched.
    """
    results: dict[int, Any] = {}
    errors: dict[int, ParseError] = {}
    pending = list(range(len(parsers)))
    round_no = 0

    while pending:
        round_no += 1
        stalled: Optional[tuple[int, Any]] = None
        for index in pending:
            sub = parsers[index]
            try:
                value, end = sub.parse(text, pos)
            except ParseError as exc:
                errors[index] = exc
                continue
            if end > pos:
                logger.debug(
                    "Block %r matched in round %d at offset %d",
                    sub.name, round_no, pos,
                )
                results[index] = value
                pending.remove(index)
                pos = end
                break
            if stalled is None:
                stalled = (index, value)
        else:
            if stalled is None:
                break
            index, value = stalled
            logger.debug(
                "Block %r matched empty in round %d at offset %d",
                parsers[index].name, round_no, pos,
            )
            results[index] = value
            pending.remove(index)

    for index in pending:
        sub = parsers[index]
        if sub.mandatory:
            if index in errors:
                raise errors[index]
            raise LHESyntaxError(sub.name, text, pos)
        logger.debug("Optional block %r absent", sub.name)
        results[index] = sub.absent_value()

    return tuple(results[i] for i in range(len(parsers))), pos
