#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
pylhef command-line interface

Commands:

1. **info**      Summarise an LHE file (version, beams, processes, events)
2. **check**     Parse, write back and re-parse; report whether they agree
3. **roundtrip** Rewrite an LHE file in canonical form
4. **hdf5**      Export the numeric content to HDF5

Usage
-----
::

    python -m pylhef.cli info events.lhe
    python -m pylhef.cli -f helac-rs check events.lhe
    python -m pylhef.cli roundtrip events.lhe canonical.lhe --overwrite
    python -m pylhef.cli -f plain hdf5 events.lhe events.h5
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from pylhef.exceptions import PyLHEFError
from pylhef.formats import FORMATS

logger = logging.getLogger("pylhef.cli")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_info(args):
    """Print a short summary of an LHE file."""
    from pylhef.readers.lhe import LHEReader

    doc = LHEReader(args.format).read(args.input)
    init = doc.init
    n_particles = sum(len(ev.particles) for ev in doc.events)

    print(f"File:        {args.input}")
    print(f"Format:      {args.format}")
    print(f"Version:     {doc.version}")
    print(f"Beam 1:      id={init.beam_1_id}  E={init.beam_1_energy:g} GeV")
    print(f"Beam 2:      id={init.beam_2_id}  E={init.beam_2_energy:g} GeV")
    print(f"Processes:   {len(init.process_info)}")
    print(f"Events:      {len(doc.events)}")
    print(f"Particles:   {n_particles}")
    return 0


def cmd_check(args):
    """Verify that a file survives a write / read cycle unchanged."""
    from pylhef.readers.lhe import LHEReader
    from pylhef.utils.validation import values_equal
    from pylhef.writers.lhe import dumps

    reader = LHEReader(args.format)
    doc = reader.read(args.input)
    again = reader.parse(dumps(doc, reader.format))

    if values_equal(doc, again):
        print(f"{args.input}: OK ({len(doc.events)} events)")
        return 0
    print(f"{args.input}: MISMATCH after write / read cycle")
    return 1


def cmd_roundtrip(args):
    """Rewrite an LHE file canonically."""
    from pylhef.readers.lhe import LHEReader
    from pylhef.writers.lhe import LHEWriter

    doc = LHEReader(args.format).read(args.input)
    LHEWriter(args.format).write(doc, args.output, overwrite=args.overwrite)
    print(f"{args.input} -> {args.output} ({len(doc.events)} events)")
    return 0


def cmd_hdf5(args):
    """Export an LHE file to HDF5."""
    from pylhef.converters.hdf5 import convert_document_to_hdf5
    from pylhef.readers.lhe import LHEReader

    doc = LHEReader(args.format).read(args.input)
    convert_document_to_hdf5(
        doc,
        args.output,
        overwrite=args.overwrite,
        format_name=args.format,
    )
    print(f"{args.input} -> {args.output} ({len(doc.events)} events)")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pylhef",
        description="Read, check and convert Les Houches Event files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
    python -m pylhef.cli info events.lhe                   # summary
    python -m pylhef.cli -f helac-rs check events.lhe      # HELAC RS extras
    python -m pylhef.cli roundtrip in.lhe out.lhe          # canonical rewrite
    python -m pylhef.cli hdf5 in.lhe out.h5 --overwrite    # HDF5 export
""",
    )

    parser.add_argument(
        "--format", "-f",
        default="string",
        choices=sorted(FORMATS),
        help="LHE dialect (default: string)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command", help="Command to run")

    p_info = sub.add_parser("info", help="Summarise an LHE file")
    p_info.add_argument("input", help="LHE file")

    p_check = sub.add_parser("check", help="Verify write / read round trip")
    p_check.add_argument("input", help="LHE file")

    for name, help_text in (
        ("roundtrip", "Rewrite an LHE file in canonical form"),
        ("hdf5", "Export to HDF5"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("input", help="LHE file")
        p.add_argument("output", help="Output file")
        p.add_argument(
            "--overwrite",
            action="store_true",
            help="Overwrite an existing output file",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "check": cmd_check,
        "roundtrip": cmd_roundtrip,
        "hdf5": cmd_hdf5,
    }

    t0 = time.time()
    try:
        rc = commands[args.command](args)
    except PyLHEFError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    logger.debug("Completed in %.1fs", time.time() - t0)
    return rc


if __name__ == "__main__":
    sys.exit(main())
