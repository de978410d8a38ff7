#!/usr/bin/env python3
# src/lmprenumber/io/data_reader.py

"""
Reader that builds a Document from a LAMMPS data file.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from tqdm import tqdm

from ..domain.models.document import Document
from .section_parser import (
    ANGLES_PARSER,
    ATOMS_PARSER,
    BONDS_PARSER,
    VELOCITIES_PARSER,
    read_header,
)

logger = logging.getLogger(__name__)

# Undecodable bytes survive a read/write cycle unchanged
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"


class DataFileReader:
    """Handles reading of data files into Document objects."""

    def __init__(self, show_progress: bool = False):
        """Initialize the reader.

        Args:
            show_progress: Whether to display a progress bar while reading
        """
        self.show_progress = show_progress

    def read(self, path: Union[str, Path]) -> Document:
        """
        Read and parse a data file.

        Args:
            path: Path to the input file

        Returns:
            Parsed document

        Raises:
            OSError: If the file cannot be opened or read
        """
        path = Path(path)
        logger.info(f"Reading data file {path}")
        with open(path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS) as handle:
            lines = (line.rstrip("\r\n") for line in handle)
            if not self.show_progress:
                return self.parse_lines(lines)
            with tqdm(lines, desc=f"Reading {path.name}", unit=" lines") as progress:
                return self.parse_lines(progress)

    def parse_lines(self, lines: Iterable[str]) -> Document:
        """Parse lines (without line endings) in fixed section order."""
        line_iter = iter(lines)
        document = Document(
            header=read_header(line_iter),
            atoms=ATOMS_PARSER.parse(line_iter),
            velocities=VELOCITIES_PARSER.parse(line_iter),
            bonds=BONDS_PARSER.parse(line_iter),
            angles=ANGLES_PARSER.parse(line_iter),
        )
        logger.debug(
            f"Parsed {len(document.atoms)} atoms, {len(document.velocities)} velocities, "
            f"{len(document.bonds)} bonds, {len(document.angles)} angles"
        )
        return document
