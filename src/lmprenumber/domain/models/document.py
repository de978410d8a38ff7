#!/usr/bin/env python3
# src/lmprenumber/domain/models/document.py

"""
Domain model for a parsed data file.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Tuple, TypeVar

from .records import AngleRecord, AtomRecord, BondRecord, VelocityRecord

T = TypeVar("T")

ATOMS_HEADING = "Atoms # full"
VELOCITIES_HEADING = "Velocities"
BONDS_HEADING = "Bonds"
ANGLES_HEADING = "Angles"


@dataclass
class Section(Generic[T]):
    """Ordered records of one section plus its free-text note line."""

    note: str = ""
    records: List[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


@dataclass
class Document:
    """In-memory data file: verbatim header followed by the four sections."""

    header: str = ""
    atoms: Section[AtomRecord] = field(default_factory=Section)
    velocities: Section[VelocityRecord] = field(default_factory=Section)
    bonds: Section[BondRecord] = field(default_factory=Section)
    angles: Section[AngleRecord] = field(default_factory=Section)

    def sections(self) -> List[Tuple[str, Section]]:
        """Return ``(heading, section)`` pairs in file order."""
        return [
            (ATOMS_HEADING, self.atoms),
            (VELOCITIES_HEADING, self.velocities),
            (BONDS_HEADING, self.bonds),
            (ANGLES_HEADING, self.angles),
        ]
