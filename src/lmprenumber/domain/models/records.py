#!/usr/bin/env python3
# src/lmprenumber/domain/models/records.py

"""
Domain models for the per-line records of a LAMMPS data file.

Every record type declares its positional layout once in ``FIELDS``. Parsing
from tokens and rendering back to a line are both driven by that table.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence, Tuple, Type, TypeVar

from ...utils.converters import Converter, to_float64, to_int32, to_uint32
from ...utils.float_format import format_value

FIELD_SEPARATOR = " "

R = TypeVar("R", bound="DataRecord")


@dataclass
class DataRecord:
    """Base class for records laid out as space-separated positional fields."""

    FIELDS: ClassVar[Tuple[Tuple[str, Converter], ...]] = ()

    @classmethod
    def field_count(cls) -> int:
        return len(cls.FIELDS)

    @classmethod
    def from_tokens(cls: Type[R], tokens: Sequence[str]) -> Optional[R]:
        """
        Build a record from one token per field.

        Args:
            tokens: Tokens of a single line, already split on the separator

        Returns:
            New record, or None when the token count does not match the layout
        """
        if len(tokens) != cls.field_count():
            return None
        values = {
            name: convert(token) for (name, convert), token in zip(cls.FIELDS, tokens)
        }
        return cls(**values)

    def to_line(self) -> str:
        """Render the record as a single line without a trailing newline."""
        return FIELD_SEPARATOR.join(
            format_value(getattr(self, name)) for name, _ in self.FIELDS
        )


@dataclass
class AtomRecord(DataRecord):
    """One atom in ``full`` style: identity, charge, position and image flags."""

    atom_id: int
    molecule_id: int
    atom_type: int
    charge: float
    x: float
    y: float
    z: float
    image_m: int
    image_n: int
    image_k: int

    FIELDS: ClassVar[Tuple[Tuple[str, Converter], ...]] = (
        ("atom_id", to_uint32),
        ("molecule_id", to_uint32),
        ("atom_type", to_uint32),
        ("charge", to_float64),
        ("x", to_float64),
        ("y", to_float64),
        ("z", to_float64),
        ("image_m", to_int32),
        ("image_n", to_int32),
        ("image_k", to_int32),
    )


@dataclass
class VelocityRecord(DataRecord):
    """Velocity vector of the atom with ``atom_id``."""

    atom_id: int
    vx: float
    vy: float
    vz: float

    FIELDS: ClassVar[Tuple[Tuple[str, Converter], ...]] = (
        ("atom_id", to_uint32),
        ("vx", to_float64),
        ("vy", to_float64),
        ("vz", to_float64),
    )


@dataclass
class BondRecord(DataRecord):
    """Bond between two atoms."""

    bond_id: int
    bond_type: int
    atom1_id: int
    atom2_id: int

    FIELDS: ClassVar[Tuple[Tuple[str, Converter], ...]] = (
        ("bond_id", to_uint32),
        ("bond_type", to_uint32),
        ("atom1_id", to_uint32),
        ("atom2_id", to_uint32),
    )


@dataclass
class AngleRecord(DataRecord):
    """Angle spanned by three atoms, ``atom2_id`` being the vertex."""

    angle_id: int
    angle_type: int
    atom1_id: int
    atom2_id: int
    atom3_id: int

    FIELDS: ClassVar[Tuple[Tuple[str, Converter], ...]] = (
        ("angle_id", to_uint32),
        ("angle_type", to_uint32),
        ("atom1_id", to_uint32),
        ("atom2_id", to_uint32),
        ("atom3_id", to_uint32),
    )
