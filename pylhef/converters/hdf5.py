#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Columnar NumPy and HDF5 export of LHE documents

Events hold a variable number of particles, so particles are stored
flattened across all events together with a per-event offset and count,
the usual "jagged array" layout.  Particles of event ``i`` are
``particle[offset[i] : offset[i] + n_particles[i]]``.

Generator-specific extras (comment, header, init and event extras) are
not exported.

HDF5 Layout
-----------
::

    /metadata/
        version             string
        format              string   (dialect name)
    /init/                  (group attributes: beam ids, energies, PDF ids,
                             weighting strategy)
        xsect               float64[n_proc]   units: pb
        xsect_err           float64[n_proc]   units: pb
        maximum_weight      float64[n_proc]
        process_id          int64[n_proc]
    /events/
        process_id          int64[n_ev]
        weight              float64[n_ev]
        scale               float64[n_ev]     units: GeV
        alpha_ew            float64[n_ev]
        alpha_qcd           float64[n_ev]
        n_particles         int64[n_ev]
        particle_offset     int64[n_ev]
        particles/
            pdg_id, status, mother_1, mother_2, color_1, color_2
                            int64[n_part]
            px, py, pz, e, mass
                            float64[n_part]   units: GeV
            proper_lifetime float64[n_part]   units: mm
            spin            float64[n_part]

References
----------
.. [1] HDF5 best practices, The HDF Group.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np

try:
    import h5py
except ImportError as _exc:  # pragma: no cover
    raise ImportError(
        "The 'h5py' package is required by the HDF5 converter.  "
        "Install it with: pip install h5py"
    ) from _exc

from pylhef.exceptions import ConversionError
from pylhef.models.records import InitBlock, LHEDocument

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Column definitions
# ---------------------------------------------------------------------------

EVENT_COLUMNS: tuple[tuple[str, type], ...] = (
    ("process_id", np.int64),
    ("weight", np.float64),
    ("scale", np.float64),
    ("alpha_ew", np.float64),
    ("alpha_qcd", np.float64),
)
"""Per-event scalar columns taken directly from :class:`EventRecord`."""

PARTICLE_INT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("pdg_id", "pdg_id"),
    ("status", "status"),
    ("mother_1", "mother_1_id"),
    ("mother_2", "mother_2_id"),
    ("color_1", "color_1"),
    ("color_2", "color_2"),
)
"""``(column, ParticleRecord attribute)`` pairs stored as int64."""

PARTICLE_FLOAT_COLUMNS: tuple[str, ...] = (
    "px", "py", "pz", "e", "mass", "proper_lifetime", "spin",
)
"""Particle columns stored as float64."""

PROCESS_COLUMNS: tuple[tuple[str, type], ...] = (
    ("xsect", np.float64),
    ("xsect_err", np.float64),
    ("maximum_weight", np.float64),
    ("process_id", np.int64),
)

UNITS: dict[str, str] = {
    "xsect": "pb",
    "xsect_err": "pb",
    "scale": "GeV",
    "px": "GeV",
    "py": "GeV",
    "pz": "GeV",
    "e": "GeV",
    "mass": "GeV",
    "proper_lifetime": "mm",
}


# ---------------------------------------------------------------------------
# Columnar conversion
# ---------------------------------------------------------------------------

def init_to_arrays(init: InitBlock) -> dict[str, np.ndarray]:
    """Return the process table of *init* as one array per column"""
    return {
        name: np.array(
            [getattr(info, name) for info in init.process_info], dtype=dtype
        )
        for name, dtype in PROCESS_COLUMNS
    }


def document_to_arrays(doc: LHEDocument) -> dict[str, np.ndarray]:
    """Flatten the events of *doc* into NumPy columns

    Parameters
    ----------
    doc : LHEDocument
        Parsed document of any dialect.

    Returns
    -------
    dict[str, numpy.ndarray]
        Per-event columns (``process_id``, ``weight``, ``scale``,
        ``alpha_ew``, ``alpha_qcd``, ``n_particles``,
        ``particle_offset``), flattened particle columns (``pdg_id``,
        ``status``, ``mother_1``, ``mother_2``, ``color_1``, ``color_2``,
        ``px``, ``py``, ``pz``, ``e``, ``mass``, ``proper_lifetime``,
        ``spin``) and the process table prefixed with ``init_``.

    Examples
    --------
    >>> arrays = document_to_arrays(doc)  # doctest: +SKIP
    >>> arrays["px"][arrays["particle_offset"][3]]  # doctest: +SKIP
    """
    events = doc.events
    arrays: dict[str, np.ndarray] = {
        name: np.array([getattr(ev, name) for ev in events], dtype=dtype)
        for name, dtype in EVENT_COLUMNS
    }

    counts = np.array([len(ev.particles) for ev in events], dtype=np.int64)
    offsets = np.zeros(len(events), dtype=np.int64)
    if len(events) > 1:
        np.cumsum(counts[:-1], out=offsets[1:])
    arrays["n_particles"] = counts
    arrays["particle_offset"] = offsets

    particles = [p for ev in events for p in ev.particles]
    for column, attr in PARTICLE_INT_COLUMNS:
        arrays[column] = np.array(
            [getattr(p, attr) for p in particles], dtype=np.int64
        )
    for column in ("px", "py", "pz", "e"):
        arrays[column] = np.array(
            [getattr(p.momentum, column) for p in particles], dtype=np.float64
        )
    for column in ("mass", "proper_lifetime", "spin"):
        arrays[column] = np.array(
            [getattr(p, column) for p in particles], dtype=np.float64
        )

    for name, values in init_to_arrays(doc.init).items():
        arrays[f"init_{name}"] = values
    return arrays


# ---------------------------------------------------------------------------
# HDF5 writers
# ---------------------------------------------------------------------------

def _create_dataset(
    group: h5py.Group,
    name: str,
    data: np.ndarray,
) -> h5py.Dataset:
    ds = group.create_dataset(name, data=data)
    if name in UNITS:
        ds.attrs["units"] = UNITS[name]
    return ds


def _write_metadata(h5f: h5py.File, doc: LHEDocument, fmt_name: str) -> None:
    meta = h5f.create_group("metadata")
    meta.create_dataset("version", data=doc.version)
    meta.create_dataset("format", data=fmt_name)


def _write_init(h5f: h5py.File, init: InitBlock) -> None:
    grp = h5f.create_group("init")
    grp.attrs["beam_1_id"] = np.int64(init.beam_1_id)
    grp.attrs["beam_2_id"] = np.int64(init.beam_2_id)
    grp.attrs["beam_1_energy"] = np.float64(init.beam_1_energy)
    grp.attrs["beam_2_energy"] = np.float64(init.beam_2_energy)
    grp.attrs["beam_1_pdf_group_id"] = np.int64(init.beam_1_pdf_group_id)
    grp.attrs["beam_2_pdf_group_id"] = np.int64(init.beam_2_pdf_group_id)
    grp.attrs["beam_1_pdf_id"] = np.int64(init.beam_1_pdf_id)
    grp.attrs["beam_2_pdf_id"] = np.int64(init.beam_2_pdf_id)
    grp.attrs["weighting_strategy"] = np.int64(init.weighting_strategy)
    for name, values in init_to_arrays(init).items():
        _create_dataset(grp, name, values)


def _write_events(h5f: h5py.File, arrays: dict[str, np.ndarray]) -> None:
    grp = h5f.create_group("events")
    for name, _ in EVENT_COLUMNS:
        _create_dataset(grp, name, arrays[name])
    _create_dataset(grp, "n_particles", arrays["n_particles"])
    _create_dataset(grp, "particle_offset", arrays["particle_offset"])

    particles = grp.create_group("particles")
    for column, _ in PARTICLE_INT_COLUMNS:
        _create_dataset(particles, column, arrays[column])
    for column in PARTICLE_FLOAT_COLUMNS:
        _create_dataset(particles, column, arrays[column])


def convert_document_to_hdf5(
    doc: LHEDocument,
    output_path: Path | str,
    *,
    overwrite: bool = False,
    format_name: Optional[str] = None,
) -> None:
    """Write the numeric content of *doc* to an HDF5 file

    Parameters
    ----------
    doc : LHEDocument
        Parsed document.
    output_path : Path | str
        Path for the output HDF5 file.  Parent directories are created
        automatically.
    overwrite : bool, optional
        If ``True``, overwrite an existing HDF5 file.  If ``False``
        (default), raise :class:`~pylhef.exceptions.ConversionError`
        when the output file already exists.
    format_name : str, optional
        Dialect name recorded in ``/metadata/format``.  Default
        ``"unknown"``.

    Raises
    ------
    ConversionError
        If *overwrite* is ``False`` and *output_path* exists, or if any
        HDF5 write operation fails.

    Examples
    --------
    >>> doc = read_lhe_file("events.lhe", "plain")  # doctest: +SKIP
    >>> convert_document_to_hdf5(doc, "events.h5", overwrite=True)  # doctest: +SKIP
    """
    out = Path(output_path)

    if out.exists() and not overwrite:
        raise ConversionError(
            f"Output file {out} already exists and overwrite=False."
        )

    arrays = document_to_arrays(doc)

    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        mode = "w" if overwrite else "w-"
        with h5py.File(str(out), mode) as h5f:
            _write_metadata(h5f, doc, format_name or "unknown")
            _write_init(h5f, doc.init)
            _write_events(h5f, arrays)
    except Exception as exc:
        raise ConversionError(
            f"Failed to write HDF5 file {out}: {exc}"
        ) from exc

    logger.info(
        "Wrote HDF5 file %s (%d events, %d particles)",
        out, len(doc.events), len(arrays["pdg_id"]),
    )
