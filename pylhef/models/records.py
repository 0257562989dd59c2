#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for parsed LHE documents

Every model is a frozen ``dataclass``.  Models are the sole output of the
reader layer and the sole input accepted by the writer and converter
layers.  Nothing is mutated during parsing: each record is built wholesale
once all of its fields have been read.

Integer fields are written as signed 64-bit values; constructing a record
with an integer outside that range raises
:class:`~pylhef.exceptions.ValidationError`.

The four generator-specific slots (comment, header, init extra, event
extra) are type parameters.  The core never looks inside them; see
:class:`~pylhef.models.codec.LHECodec` for what they must provide.

Hierarchy
---------
::

    LHEDocument[C, H, I, E]
    ├── comment : C
    ├── header  : H
    ├── init    : InitBlock[I]
    │   ├── process_info : list[ProcessInfo]
    │   └── extra        : I
    └── events  : list[EventRecord[E]]
        ├── particles : list[ParticleRecord]
        │   └── momentum : FourMomentum
        └── extra     : E

Units
-----
* Energies, momenta and masses are in **GeV**.
* Cross sections are in **pb**.
* Proper lifetimes are in **mm** (c·τ).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pylhef.utils.validation import validate_integer_width, validate_version

C = TypeVar("C")
H = TypeVar("H")
I = TypeVar("I")  # noqa: E741
E = TypeVar("E")


def _check_i64(record, names: tuple[str, ...]) -> None:
    for name in names:
        validate_integer_width(name, getattr(record, name), 64)


# ---------------------------------------------------------------------------
# Leaf records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProcessInfo:
    """One per-process row of the ``<init>`` block

    Parameters
    ----------
    xsect : float
        Cross section of the process.
    xsect_err : float
        Statistical error on *xsect*.
    maximum_weight : float
        Maximum event weight of the process.
    process_id : int
        Generator-assigned process identifier.
    """

    xsect: float
    xsect_err: float
    maximum_weight: float
    process_id: int

    def __post_init__(self) -> None:
        _check_i64(self, ("process_id",))


@dataclass(frozen=True)
class FourMomentum:
    """Cartesian four-momentum ``(px, py, pz, e)``"""

    px: float
    py: float
    pz: float
    e: float


@dataclass(frozen=True)
class ParticleRecord:
    """One particle row of an ``<event>`` block

    Parameters
    ----------
    pdg_id : int
        PDG identifier of the particle species.
    status : int
        Status code (-1 incoming, 1 outgoing, 2 intermediate, ...).
    mother_1_id, mother_2_id : int
        1-based indices of the mother particles within the event.
    color_1, color_2 : int
        Colour and anti-colour flow tags.
    momentum : FourMomentum
        Four-momentum of the particle.
    mass : float
        Invariant mass.
    proper_lifetime : float
        Proper lifetime.
    spin : float
        Spin (helicity) information, 9 if unknown.
    """

    pdg_id: int
    status: int
    mother_1_id: int
    mother_2_id: int
    color_1: int
    color_2: int
    momentum: FourMomentum
    mass: float
    proper_lifetime: float
    spin: float

    def __post_init__(self) -> None:
        _check_i64(self, (
            "pdg_id", "status", "mother_1_id", "mother_2_id", "color_1", "color_2",
        ))


# ---------------------------------------------------------------------------
# Blocks with an extension slot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InitBlock(Generic[I]):
    """The ``<init>`` block: beams, process table and an extension slot

    The process count written to the file is always
    ``len(process_info)``; it is not stored separately.

    Parameters
    ----------
    beam_1_id, beam_2_id : int
        PDG identifiers of the two beam particles.
    beam_1_energy, beam_2_energy : float
        Beam energies.
    beam_1_pdf_group_id, beam_2_pdf_group_id : int
        PDF author group identifiers.
    beam_1_pdf_id, beam_2_pdf_id : int
        PDF set identifiers.
    weighting_strategy : int
        Event weighting strategy code.
    process_info : list[ProcessInfo]
        One entry per process, in file order.
    extra : I
        Generator-specific initialisation data.
    """

    beam_1_id: int
    beam_2_id: int
    beam_1_energy: float
    beam_2_energy: float
    beam_1_pdf_group_id: int
    beam_2_pdf_group_id: int
    beam_1_pdf_id: int
    beam_2_pdf_id: int
    weighting_strategy: int
    process_info: list[ProcessInfo]
    extra: I

    def __post_init__(self) -> None:
        _check_i64(self, (
            "beam_1_id", "beam_2_id",
            "beam_1_pdf_group_id", "beam_2_pdf_group_id",
            "beam_1_pdf_id", "beam_2_pdf_id",
            "weighting_strategy",
        ))


@dataclass(frozen=True)
class EventRecord(Generic[E]):
    """One ``<event>`` block: event header, particles and an extension slot

    The particle count written to the file is always ``len(particles)``.
    """

    process_id: int
    weight: float
    scale: float
    alpha_ew: float
    alpha_qcd: float
    particles: list[ParticleRecord]
    extra: E

    def __post_init__(self) -> None:
        _check_i64(self, ("process_id",))


# ---------------------------------------------------------------------------
# Top-level document
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LHEDocument(Generic[C, H, I, E]):
    """A complete Les Houches Event file

    Instances are returned by :meth:`LHEReader.read` and consumed by
    :meth:`LHEWriter.write` and :func:`convert_document_to_hdf5`.

    Parameters
    ----------
    version : str
        Value of the ``version`` attribute of the opening tag.  Must not
        contain a double quote.
    comment : C
        Optional comment block (an "absent" value when missing).
    header : H
        Optional header block (an "absent" value when missing).
    init : InitBlock[I]
        The mandatory ``<init>`` block.
    events : list[EventRecord[E]]
        Events in file order.

    Raises
    ------
    ValidationError
        If *version* contains ``"``.
    """

    version: str
    comment: C
    header: H
    init: InitBlock[I]
    events: list[EventRecord[E]] = field(default_factory=list)

    def __post_init__(self) -> None:
        validate_version(self.version)
