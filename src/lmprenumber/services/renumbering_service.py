#!/usr/bin/env python3
# src/lmprenumber/services/renumbering_service.py

"""
Service that makes atom ids contiguous and remaps every reference to them.
"""

import logging
from typing import Dict, List, Sequence, TypeVar

import numpy as np

from ..config import VelocityPolicy
from ..domain.models.document import Document
from ..domain.models.records import AngleRecord, AtomRecord, BondRecord, VelocityRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Lookup result for endpoints whose atom is absent from the Atoms section
MISSING_ATOM_ID = 0


def sorted_by_key(items: Sequence[T], keys: Sequence[int]) -> List[T]:
    """Return ``items`` stably sorted by the parallel ``keys``."""
    if not items:
        return []
    order = np.argsort(np.asarray(keys, dtype=np.int64), kind="stable")
    return [items[index] for index in order]


class RenumberingService:
    """
    Renumbers atoms to 1..N in ascending order of their original ids.

    Bond and angle endpoints are rewritten through the resulting old-to-new
    mapping. Velocities are handled according to the velocity policy.
    """

    def __init__(self, velocity_policy: VelocityPolicy = VelocityPolicy.INDEPENDENT):
        self.velocity_policy = velocity_policy

    def renumber(self, document: Document) -> Dict[int, int]:
        """
        Renumber the document in place.

        Args:
            document: Parsed document, modified in place

        Returns:
            Mapping from original atom id to new atom id
        """
        mapping = self.renumber_atoms(document.atoms.records)

        if self.velocity_policy is VelocityPolicy.ATOM_MAP:
            self.remap_velocities(document.velocities.records, mapping)
        else:
            self.renumber_velocities(document.velocities.records)

        self.remap_bonds(document.bonds.records, mapping)
        self.remap_angles(document.angles.records, mapping)

        logger.info(
            f"Renumbered {len(document.atoms)} atoms ({len(mapping)} distinct ids), "
            f"{len(document.velocities)} velocities, {len(document.bonds)} bonds, "
            f"{len(document.angles)} angles"
        )
        return mapping

    @staticmethod
    def renumber_atoms(atoms: List[AtomRecord]) -> Dict[int, int]:
        """Sort atoms by id, assign 1..N and return the old-to-new mapping."""
        atoms[:] = sorted_by_key(atoms, [atom.atom_id for atom in atoms])
        mapping: Dict[int, int] = {}
        for position, atom in enumerate(atoms):
            new_id = position + 1
            mapping[atom.atom_id] = new_id
            atom.atom_id = new_id
        return mapping

    @staticmethod
    def renumber_velocities(velocities: List[VelocityRecord]) -> None:
        """Sort velocities by atom id and assign 1..M by position."""
        velocities[:] = sorted_by_key(velocities, [v.atom_id for v in velocities])
        for position, velocity in enumerate(velocities):
            velocity.atom_id = position + 1

    @staticmethod
    def remap_velocities(velocities: List[VelocityRecord], mapping: Dict[int, int]) -> None:
        """Point each velocity at its atom's new id, then sort by that id."""
        for velocity in velocities:
            velocity.atom_id = mapping.get(velocity.atom_id, MISSING_ATOM_ID)
        velocities[:] = sorted_by_key(velocities, [v.atom_id for v in velocities])

    @staticmethod
    def remap_bonds(bonds: List[BondRecord], mapping: Dict[int, int]) -> None:
        for bond in bonds:
            bond.atom1_id = mapping.get(bond.atom1_id, MISSING_ATOM_ID)
            bond.atom2_id = mapping.get(bond.atom2_id, MISSING_ATOM_ID)

    @staticmethod
    def remap_angles(angles: List[AngleRecord], mapping: Dict[int, int]) -> None:
        for angle in angles:
            angle.atom1_id = mapping.get(angle.atom1_id, MISSING_ATOM_ID)
            angle.atom2_id = mapping.get(angle.atom2_id, MISSING_ATOM_ID)
            angle.atom3_id = mapping.get(angle.atom3_id, MISSING_ATOM_ID)
