"""Command-line interface for renumbering LAMMPS data files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import RenumberConfig, VelocityPolicy
from ..pipeline import renumber_file
from ..utils.logging_setup import setup_logging


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Renumber atom ids of a LAMMPS data file to 1..N and remap "
        "velocities, bonds and angles"
    )
    parser.add_argument(
        "-i", "--input", type=Path, required=True, help="Input data file"
    )
    parser.add_argument(
        "-o", "--output", type=Path, required=True, help="Output data file"
    )
    parser.add_argument(
        "--velocity-policy",
        choices=[policy.value for policy in VelocityPolicy],
        default=VelocityPolicy.INDEPENDENT.value,
        help="'independent' numbers velocities 1..M in their own sorted order; "
        "'atom-map' gives each velocity the new id of its atom",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar while reading"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show detailed processing information"
    )
    parser.add_argument("--log-file", type=Path, help="Also write log messages here")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the renumbering CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    config = RenumberConfig(
        input_path=args.input,
        output_path=args.output,
        velocity_policy=VelocityPolicy(args.velocity_policy),
        show_progress=args.progress,
    )

    try:
        renumber_file(config)
    except OSError as e:
        logging.error(f"Renumbering failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
