#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the pylhef package

All exceptions raised by pylhef inherit from :class:`PyLHEFError`, making it
possible to catch every library-specific error with a single ``except`` clause
while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyLHEFError
    ├── IOFailure                 # File could not be opened, read or written
    ├── ParseError                # Malformed LHE content (carries a position)
    │   ├── LHESyntaxError        # Expected tag / delimiter / number missing
    │   ├── RangeError            # Integer literal does not fit its width
    │   ├── IncompleteInputError  # Input ended before a mandatory item
    │   └── ExtensionError        # An extension codec failed
    ├── ValidationError           # Write-side precondition violated
    └── ConversionError           # HDF5 export failures
"""

from __future__ import annotations


class PyLHEFError(Exception):
    """Base exception for all pylhef errors

    Every exception raised by pylhef is a subclass of this type.
    Catching ``PyLHEFError`` therefore catches any library-specific failure
    while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class IOFailure(PyLHEFError):
    """Raised when the underlying storage cannot be opened, read or written

    The originating :class:`OSError` is always chained as ``__cause__``;
    the parser itself never raises this type.

    Parameters
    ----------
    message : str
        Description of the failure, including the path involved.
    """


class ParseError(PyLHEFError):
    """Base class for every failure to parse LHE text

    Parameters
    ----------
    message : str
        Human-readable description of the parse failure.
    text : str, optional
        The buffer being parsed.  Used only to derive line / column.
    position : int, optional
        Character offset into *text* at which the failure was detected.

    Attributes
    ----------
    position : int | None
        Character offset of the failure.
    line, column : int | None
        1-based line and column matching *position*.

    Notes
    -----
    Line and column are computed on first access only.
    """

    def __init__(
        self,
        message: str,
        text: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self._text = text

    @property
    def line(self) -> int | None:
        if self._text is None or self.position is None:
            return None
        return self._text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int | None:
        if self._text is None or self.position is None:
            return None
        return self.position - self._text.rfind("\n", 0, self.position)

    def __str__(self) -> str:
        line = self.line
        if line is None:
            return self.message
        return f"{self.message} (line {line}, column {self.column})"


class LHESyntaxError(ParseError):
    """Raised when an expected tag, delimiter or numeric token is not found

    Parameters
    ----------
    expected : str
        Name of the construct that was expected (e.g. ``"'<init>'"`` or
        ``"float"``).
    text : str, optional
        The buffer being parsed.
    position : int, optional
        Character offset of the failure.
    """

    def __init__(
        self,
        expected: str,
        text: str | None = None,
        position: int | None = None,
    ) -> None:
        self.expected = expected
        found = ""
        if text is not None and position is not None:
            snippet = text[position:position + 20].split("\n", 1)[0]
            found = f", found {snippet!r}"
        super().__init__(f"Expected {expected}{found}", text, position)


class RangeError(ParseError):
    """Raised when an integer literal does not fit the target width

    The literal is syntactically valid; this is never raised for text that
    is not an integer at all.

    Parameters
    ----------
    width : str
        Name of the target width (e.g. ``"i8"``, ``"u64"``).
    literal : str
        The recognised integer literal.
    """

    def __init__(
        self,
        width: str,
        literal: str,
        text: str | None = None,
        position: int | None = None,
    ) -> None:
        self.width = width
        self.literal = literal
        super().__init__(
            f"Integer literal {literal!r} is out of range for {width}",
            text,
            position,
        )


class IncompleteInputError(ParseError):
    """Raised when the input ends before a mandatory field, row or tag

    Parameters
    ----------
    expected : str
        Name of the construct that was still required.
    """

    def __init__(
        self,
        expected: str,
        text: str | None = None,
        position: int | None = None,
    ) -> None:
        self.expected = expected
        super().__init__(f"Input ended while expecting {expected}", text, position)


class ExtensionError(ParseError):
    """Raised when an extension codec (comment, header, extra block) fails

    The codec's original exception is kept unchanged in :attr:`inner` and
    chained as ``__cause__``.

    Parameters
    ----------
    codec : str
        Name of the extension type that failed.
    inner : BaseException
        The exception raised by the codec.
    """

    def __init__(self, codec: str, inner: BaseException) -> None:
        super().__init__(
            f"Extension {codec} failed",
            getattr(inner, "_text", None),
            getattr(inner, "position", None),
        )
        self.codec = codec
        self.inner = inner

    def __str__(self) -> str:
        return f"{self.message}: {self.inner}"


class ValidationError(PyLHEFError):
    """Raised when a value violates a precondition required for writing

    The only such precondition in the core is that the document version
    string must not contain a double quote, since the quote delimits the
    attribute in the opening ``<LesHouchesEvents>`` tag.

    Parameters
    ----------
    message : str
        Description of the failed check and the offending value.
    """


class ConversionError(PyLHEFError):
    """Raised when HDF5 conversion fails

    This covers any error during HDF5 file creation: permission denied,
    disk full, or an output file that already exists while
    ``overwrite=False``.

    Parameters
    ----------
    message : str
        Description of the conversion failure and the target HDF5 path.
    """
