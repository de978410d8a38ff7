#!/usr/bin/env python3
# src/lmprenumber/services/topology_service.py

"""
Service summarizing the bonded topology of a document before renumbering.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Set

import networkx as nx

from ..domain.models.document import Document

logger = logging.getLogger(__name__)


@dataclass
class TopologySummary:
    """Counts describing a document's sections and connectivity."""

    atom_count: int
    velocity_count: int
    bond_count: int
    angle_count: int
    fragment_count: int
    dangling_bond_endpoints: int
    dangling_angle_endpoints: int

    @property
    def has_dangling_references(self) -> bool:
        return bool(self.dangling_bond_endpoints or self.dangling_angle_endpoints)


def _count_missing(endpoints: Iterable[int], known_ids: Set[int]) -> int:
    return sum(1 for atom_id in endpoints if atom_id not in known_ids)


class TopologyService:
    """Builds a bond graph of the atoms and reports what renumbering will lose."""

    @staticmethod
    def build_bond_graph(document: Document) -> nx.Graph:
        """
        Create a NetworkX graph with atom ids as nodes and bonds as edges.

        Bonds whose endpoints are not both present in the Atoms section are
        left out of the graph.
        """
        graph = nx.Graph()
        graph.add_nodes_from(atom.atom_id for atom in document.atoms.records)
        for bond in document.bonds.records:
            if bond.atom1_id in graph and bond.atom2_id in graph:
                graph.add_edge(bond.atom1_id, bond.atom2_id, bond_type=bond.bond_type)
        return graph

    def summarize(self, document: Document) -> TopologySummary:
        """
        Summarize a document. Must run before renumbering to see original ids.

        Args:
            document: Parsed document, not modified

        Returns:
            TopologySummary for the document
        """
        graph = self.build_bond_graph(document)
        known_ids = set(graph.nodes)

        summary = TopologySummary(
            atom_count=len(document.atoms),
            velocity_count=len(document.velocities),
            bond_count=len(document.bonds),
            angle_count=len(document.angles),
            fragment_count=nx.number_connected_components(graph),
            dangling_bond_endpoints=_count_missing(
                (
                    atom_id
                    for bond in document.bonds.records
                    for atom_id in (bond.atom1_id, bond.atom2_id)
                ),
                known_ids,
            ),
            dangling_angle_endpoints=_count_missing(
                (
                    atom_id
                    for angle in document.angles.records
                    for atom_id in (angle.atom1_id, angle.atom2_id, angle.atom3_id)
                ),
                known_ids,
            ),
        )

        logger.info(
            f"Topology: {summary.atom_count} atoms in {summary.fragment_count} "
            f"bonded fragments, {summary.bond_count} bonds, {summary.angle_count} angles"
        )
        if summary.velocity_count and summary.velocity_count != summary.atom_count:
            logger.info(
                f"Velocities section has {summary.velocity_count} entries "
                f"for {summary.atom_count} atoms"
            )
        if summary.has_dangling_references:
            logger.warning(
                f"{summary.dangling_bond_endpoints} bond and "
                f"{summary.dangling_angle_endpoints} angle endpoints reference "
                f"missing atoms and will be renumbered to 0"
            )
        return summary
