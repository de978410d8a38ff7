import logging

import networkx as nx

from lmprenumber.domain.models import AngleRecord, AtomRecord, BondRecord, Document, Section
from lmprenumber.services.topology_service import TopologyService


def build_document() -> Document:
    atoms = [AtomRecord(atom_id, 1, 1, 0.0, 0.0, 0.0, 0.0, 0, 0, 0) for atom_id in (1, 2, 3, 7)]
    bonds = [BondRecord(1, 1, 1, 2), BondRecord(2, 1, 2, 3), BondRecord(3, 1, 3, 42)]
    angles = [AngleRecord(1, 1, 1, 2, 3), AngleRecord(2, 1, 2, 3, 42)]
    return Document(
        atoms=Section(records=atoms),
        bonds=Section(records=bonds),
        angles=Section(records=angles),
    )


def test_bond_graph_skips_dangling_bonds():
    graph = TopologyService.build_bond_graph(build_document())

    assert isinstance(graph, nx.Graph)
    assert set(graph.nodes) == {1, 2, 3, 7}
    assert graph.number_of_edges() == 2
    assert graph.edges[1, 2]["bond_type"] == 1


def test_summary_counts(sparse_document):
    summary = TopologyService().summarize(sparse_document)

    assert summary.atom_count == 3
    assert summary.velocity_count == 3
    assert summary.bond_count == 2
    assert summary.angle_count == 1
    assert summary.fragment_count == 1
    assert not summary.has_dangling_references


def test_summary_reports_dangling_endpoints(caplog):
    document = build_document()
    with caplog.at_level(logging.WARNING):
        summary = TopologyService().summarize(document)

    assert summary.fragment_count == 2
    assert summary.dangling_bond_endpoints == 1
    assert summary.dangling_angle_endpoints == 1
    assert summary.has_dangling_references
    assert "reference missing atoms" in caplog.text
    # Summarizing never modifies the document
    assert document.bonds.records[2].atom2_id == 42


def test_summary_of_empty_document():
    summary = TopologyService().summarize(Document())
    assert summary.fragment_count == 0
    assert summary.atom_count == 0
