#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for pylhef tests

Provides small synthetic LHE documents, as text and as parsed models, so
that readers, writers, dialects and the HDF5 converter can be tested
without real generator output.
"""

from __future__ import annotations

import pytest

from pylhef.formats import get_format, helac, string
from pylhef.models.records import (
    EventRecord,
    InitBlock,
    LHEDocument,
    ProcessInfo,
)
from samples import (
    HELAC_RS_DOCUMENT_TEXT,
    PLAIN_DOCUMENT_TEXT,
    STRING_DOCUMENT_TEXT,
    make_particle,
)

# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def string_format():
    return get_format("string")


@pytest.fixture
def plain_format():
    return get_format("plain")


@pytest.fixture
def helac_rs_format():
    return get_format("helac-rs")


@pytest.fixture
def empty_document() -> LHEDocument:
    """Version 1.0, no comment, no header, no processes, no events"""
    return LHEDocument(
        version="1.0",
        comment=string.Comment(None),
        header=string.Header(None),
        init=InitBlock(
            beam_1_id=2212,
            beam_2_id=2212,
            beam_1_energy=6500.0,
            beam_2_energy=6500.0,
            beam_1_pdf_group_id=0,
            beam_2_pdf_group_id=0,
            beam_1_pdf_id=260000,
            beam_2_pdf_id=260000,
            weighting_strategy=3,
            process_info=[],
            extra=string.InitExtra(""),
        ),
        events=[],
    )


@pytest.fixture
def sample_document() -> LHEDocument:
    """String-dialect document with two processes and two events"""
    return LHEDocument(
        version="3.0",
        comment=string.Comment("made by a test"),
        header=string.Header("<MGVersion>\n3.5.0\n</MGVersion>"),
        init=InitBlock(
            beam_1_id=2212,
            beam_2_id=-2212,
            beam_1_energy=6500.0,
            beam_2_energy=6500.0,
            beam_1_pdf_group_id=0,
            beam_2_pdf_group_id=0,
            beam_1_pdf_id=260000,
            beam_2_pdf_id=260000,
            weighting_strategy=-4,
            process_info=[
                ProcessInfo(504.3, 1.25, 1.0, 1),
                ProcessInfo(12.5e-3, 0.1e-3, 1.0, 2),
            ],
            extra=string.InitExtra("# generator settings"),
        ),
        events=[
            EventRecord(
                process_id=1,
                weight=0.5,
                scale=91.188,
                alpha_ew=0.0078125,
                alpha_qcd=0.118,
                particles=[make_particle(21, -1), make_particle(-6, 1)],
                extra=string.EventExtra("# rwgt 1 2"),
            ),
            EventRecord(
                process_id=2,
                weight=-0.5,
                scale=173.0,
                alpha_ew=0.0078125,
                alpha_qcd=0.108,
                particles=[make_particle(11, 1)],
                extra=string.EventExtra(""),
            ),
        ],
    )


@pytest.fixture
def helac_rs_extra() -> helac.EventExtraRS:
    return helac.EventExtraRS(
        pdf=helac.PdfInfo(1.0, 2.0, 3.0),
        me=helac.MeInfoRS(
            weight=13.0,
            max_ew=1,
            max_qcd=6,
            real_weight=3.0,
            scale=4.0,
            dipole_ids=[7, 8],
            dipole_weights=[9.0, 10.0],
            dipole_mu_rs=[11.0, 12.0],
        ),
        jet=helac.JetInfo(1, 2, 3),
    )


@pytest.fixture
def lhe_file(tmp_path):
    """Write PLAIN_DOCUMENT_TEXT to a temporary file and return its path"""
    path = tmp_path / "events.lhe"
    path.write_text(PLAIN_DOCUMENT_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def string_lhe_file(tmp_path):
    path = tmp_path / "string.lhe"
    path.write_text(STRING_DOCUMENT_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def helac_lhe_file(tmp_path):
    path = tmp_path / "helac_rs.lhe"
    path.write_text(HELAC_RS_DOCUMENT_TEXT, encoding="utf-8")
    return path
