"""Domain model classes."""

from .records import AngleRecord, AtomRecord, BondRecord, DataRecord, VelocityRecord
from .document import (
    ANGLES_HEADING,
    ATOMS_HEADING,
    BONDS_HEADING,
    VELOCITIES_HEADING,
    Document,
    Section,
)

__all__ = [
    "DataRecord",
    "AtomRecord",
    "VelocityRecord",
    "BondRecord",
    "AngleRecord",
    "Section",
    "Document",
    "ATOMS_HEADING",
    "VELOCITIES_HEADING",
    "BONDS_HEADING",
    "ANGLES_HEADING",
]
