#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
HDF5 converter for LHE documents

* :func:`~pylhef.converters.hdf5.document_to_arrays`
    Flatten events and particles into NumPy columns.
* :func:`~pylhef.converters.hdf5.convert_document_to_hdf5`
    Write those columns, the process table and metadata to HDF5.
"""

from __future__ import annotations

from pylhef.converters.hdf5 import (
    convert_document_to_hdf5,
    document_to_arrays,
)

__all__ = ["convert_document_to_hdf5", "document_to_arrays"]
