#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the LHE writer

Covers the canonical output layout, derived counts, write-side
validation and file handling.
"""

from __future__ import annotations

import dataclasses
import io
import math

import pytest

from pylhef.exceptions import IOFailure, ValidationError
from pylhef.formats import get_format, helac
from pylhef.models.records import LHEDocument
from pylhef.readers.lhe import parse_document, read_lhe_file
from pylhef.utils.validation import values_equal
from pylhef.writers import LHEWriter
from pylhef.writers.lhe import (
    check_document,
    dumps,
    serialize_event,
    serialize_init,
    serialize_particle,
    write_lhe_file,
)
from samples import make_particle


class TestSerializeRecords:

    def test_particle_line(self) -> None:
        sink = io.StringIO()
        serialize_particle(make_particle(21, -1), sink)
        assert sink.getvalue() == (
            "21 -1 1 2 501 0 1.5e+00 -2.25e+00 3e+01 3.012e+01 0e+00 0e+00 9e+00\n"
        )

    def test_init_count_is_derived(self, sample_document: LHEDocument) -> None:
        sink = io.StringIO()
        serialize_init(sample_document.init, sink)
        lines = sink.getvalue().splitlines()
        assert lines[0] == "<init>"
        assert lines[1].split()[-1] == "2"
        assert lines[2] == "5.043e+02 1.25e+00 1e+00 1"
        assert lines[-2] == "# generator settings"
        assert lines[-1] == "</init>"

    def test_event_count_is_derived(self, sample_document: LHEDocument) -> None:
        sink = io.StringIO()
        serialize_event(sample_document.events[0], sink)
        lines = sink.getvalue().splitlines()
        assert lines[1] == "2 1 5e-01 9.1188e+01 7.8125e-03 1.18e-01"
        assert len(lines) == 6

    def test_empty_extra_writes_nothing(self, sample_document: LHEDocument) -> None:
        sink = io.StringIO()
        serialize_event(sample_document.events[1], sink)
        assert sink.getvalue().splitlines()[-2].startswith("11 1 ")


class TestDumps:
    """Whole-document output"""

    def test_empty_document(self, empty_document, string_format) -> None:
        assert dumps(empty_document, string_format) == (
            '<LesHouchesEvents version="1.0">\n'
            "<init>\n"
            "2212 2212 6.5e+03 6.5e+03 0 0 260000 260000 3 0\n"
            "</init>\n"
            "</LesHouchesEvents>\n"
        )

    def test_empty_document_round_trip(self, empty_document, string_format) -> None:
        again = parse_document(dumps(empty_document, string_format), string_format)
        assert again == empty_document

    def test_sample_round_trip(self, sample_document, string_format) -> None:
        text = dumps(sample_document, string_format)
        assert text.startswith(
            '<LesHouchesEvents version="3.0">\n<!--\nmade by a test\n-->\n<header>\n'
        )
        assert parse_document(text, string_format) == sample_document

    def test_canonical_output_is_stable(self, string_format) -> None:
        from samples import STRING_DOCUMENT_TEXT

        once = dumps(parse_document(STRING_DOCUMENT_TEXT, string_format))
        twice = dumps(parse_document(once, string_format))
        assert once == twice

    def test_nan_weight(self, sample_document, string_format) -> None:
        event = dataclasses.replace(sample_document.events[0], weight=math.nan)
        doc = dataclasses.replace(sample_document, events=[event])
        text = dumps(doc, string_format)
        assert "\n2 1 NaN 9.1188e+01" in text
        again = parse_document(text, string_format)
        assert math.isnan(again.events[0].weight)
        assert values_equal(again, doc)

    def test_infinities(self, sample_document, string_format) -> None:
        event = dataclasses.replace(
            sample_document.events[0], scale=math.inf, alpha_ew=-math.inf
        )
        doc = dataclasses.replace(sample_document, events=[event])
        text = dumps(doc, string_format)
        assert " Infinity -Infinity " in text
        assert parse_document(text, string_format) == doc


class TestValidation:
    """Write-side preconditions"""

    def test_quote_in_version_rejected_on_construction(self, empty_document) -> None:
        with pytest.raises(ValidationError):
            dataclasses.replace(empty_document, version='1"0')

    def test_quote_in_version_rejected_on_write(self, empty_document) -> None:
        object.__setattr__(empty_document, "version", 'x" y="z')
        with pytest.raises(ValidationError):
            dumps(empty_document)

    def test_wrong_dialect(self, sample_document) -> None:
        with pytest.raises(ValidationError, match="expects Comment"):
            check_document(sample_document, get_format("plain"))

    def test_wrong_event_extra(self, sample_document, helac_rs_extra) -> None:
        event = dataclasses.replace(sample_document.events[1], extra=helac_rs_extra)
        doc = dataclasses.replace(sample_document, events=[event])
        with pytest.raises(ValidationError, match="event 0 extra"):
            check_document(doc, get_format("string"))

    def test_helac_block_width_checked(self) -> None:
        with pytest.raises(ValidationError):
            helac.JetInfo(1, 2, 300)
        with pytest.raises(ValidationError):
            helac.MeInfoI(-1, 2, 3.0, 4.0, 5.0, 6.0, 7)

    def test_pdg_id_beyond_i64_rejected(self) -> None:
        with pytest.raises(ValidationError, match="pdg_id"):
            make_particle(pdg_id=2**63)

    @pytest.mark.parametrize("field_name", [
        "status", "mother_1_id", "mother_2_id", "color_1", "color_2",
    ])
    def test_particle_ints_are_i64(self, field_name) -> None:
        particle = make_particle()
        with pytest.raises(ValidationError, match=field_name):
            dataclasses.replace(particle, **{field_name: -(2**63) - 1})

    def test_largest_i64_round_trips(self, sample_document, string_format) -> None:
        particle = dataclasses.replace(make_particle(), pdg_id=2**63 - 1)
        event = dataclasses.replace(sample_document.events[1], particles=[particle])
        doc = dataclasses.replace(sample_document, events=[event])
        again = parse_document(dumps(doc, string_format), string_format)
        assert again.events[0].particles[0].pdg_id == 2**63 - 1

    def test_record_ids_are_i64(self, sample_document) -> None:
        with pytest.raises(ValidationError, match="process_id"):
            dataclasses.replace(sample_document.init.process_info[0], process_id=2**63)
        with pytest.raises(ValidationError, match="process_id"):
            dataclasses.replace(sample_document.events[0], process_id=-(2**64))
        with pytest.raises(ValidationError, match="beam_1_pdf_id"):
            dataclasses.replace(sample_document.init, beam_1_pdf_id=2**70)
        with pytest.raises(ValidationError, match="weighting_strategy"):
            dataclasses.replace(sample_document.init, weighting_strategy=2**63)


class TestLHEWriter:
    """File output"""

    def test_write_and_read_back(self, tmp_path, sample_document) -> None:
        out = tmp_path / "out.lhe"
        LHEWriter("string").write(sample_document, out)
        assert read_lhe_file(out, "string") == sample_document

    def test_truncates_existing_file(self, tmp_path, empty_document) -> None:
        out = tmp_path / "out.lhe"
        out.write_text("x" * 1000)
        write_lhe_file(empty_document, out)
        assert not out.read_text().startswith("x")

    def test_no_overwrite(self, tmp_path, empty_document) -> None:
        out = tmp_path / "out.lhe"
        out.write_text("keep")
        with pytest.raises(IOFailure) as info:
            write_lhe_file(empty_document, out, overwrite=False)
        assert isinstance(info.value.__cause__, FileExistsError)
        assert out.read_text() == "keep"

    def test_invalid_document_leaves_no_file(self, tmp_path, sample_document) -> None:
        out = tmp_path / "out.lhe"
        with pytest.raises(ValidationError):
            LHEWriter("helac-rs").write(sample_document, out)
        assert not out.exists()

    def test_missing_directory(self, tmp_path, empty_document) -> None:
        with pytest.raises(IOFailure):
            write_lhe_file(empty_document, tmp_path / "no" / "such" / "out.lhe")

    def test_writes_lf_line_endings(self, tmp_path, empty_document) -> None:
        out = tmp_path / "out.lhe"
        write_lhe_file(empty_document, out)
        assert b"\r\n" not in out.read_bytes()
