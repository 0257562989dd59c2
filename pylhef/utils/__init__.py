#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for lexing, block matching and validation

This sub-package centralises the numeric lexer, the order-independent
block matcher and the write-side checks so that the reader, the writer
and every extension format share a single implementation.
"""

from __future__ import annotations
