#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for LHE readers

A reader is bound to one dialect (an
:class:`~pylhef.models.codec.LHEFormat`) and turns LHE text into an
:class:`~pylhef.models.records.LHEDocument`.  Subclasses implement
:meth:`BaseReader.parse`; :meth:`BaseReader.read` loads a file into memory
and hands its contents to :meth:`parse`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pylhef.exceptions import IOFailure, ParseError
from pylhef.models.records import LHEDocument

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Abstract base for LHE readers

    The whole file is read before parsing starts; parsing is
    all-or-nothing, so a failure never yields a partial document.

    Notes
    -----
    Readers must never call writing or HDF5 functions.  The dependency
    direction is::

        utils ← models ← readers ← converters
    """

    @abstractmethod
    def parse(self, text: str) -> LHEDocument:
        """Parse a complete LHE document held in memory

        Parameters
        ----------
        text : str
            Entire file contents.

        Returns
        -------
        LHEDocument
            The parsed document.

        Raises
        ------
        ParseError
            If the content is malformed.
        """
        ...

    def read(
        self,
        path: Path | str,
        *,
        encoding: str = "utf-8",
    ) -> LHEDocument:
        """Read an LHE file and return the parsed document

        Parameters
        ----------
        path : Path | str
            Filesystem path of the LHE file.
        encoding : str, optional
            Text encoding of the file.  Default ``"utf-8"``.

        Raises
        ------
        IOFailure
            If the file cannot be opened or read.
        ParseError
            If the file is not valid *encoding* text or the content is
            malformed.
        """
        filepath = Path(path)
        logger.debug("Opening LHE file: %s", filepath)

        try:
            with open(filepath, "r", encoding=encoding, newline="") as fh:
                text = fh.read()
        except OSError as exc:
            raise IOFailure(f"Cannot read {filepath}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ParseError(
                f"{filepath} is not valid {encoding} text: {exc.reason}"
            ) from exc

        logger.debug("Read %d characters from %s", len(text), filepath)
        return self.parse(text)
