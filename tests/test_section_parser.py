"""Tests for header and section parsing."""

from lmprenumber.domain.models import AngleRecord, AtomRecord, BondRecord, VelocityRecord
from lmprenumber.io.section_parser import (
    ANGLES_PARSER,
    ATOMS_PARSER,
    VELOCITIES_PARSER,
    SectionParser,
    read_header,
)


class TestReadHeader:
    def test_stops_at_atoms_line_and_drops_it(self):
        lines = iter(["title", "", "3 atoms", "Atoms # full", "after"])
        assert read_header(lines) == "title\n\n3 atoms\n"
        assert next(lines) == "after"

    def test_returns_everything_without_atoms_line(self):
        lines = iter(["title", "2 bonds"])
        assert read_header(lines) == "title\n2 bonds\n"

    def test_empty_input(self):
        assert read_header(iter([])) == ""


class TestSectionParser:
    def test_parses_atoms_until_velocities(self):
        lines = iter(
            [
                "",
                "3 1 2 -0.5 1.0 2.0 3.0 0 -1 1",
                "",
                "Velocities",
                "3 0.1 0.2 0.3",
            ]
        )
        section = ATOMS_PARSER.parse(lines)

        assert section.note == ""
        assert section.records == [
            AtomRecord(3, 1, 2, -0.5, 1.0, 2.0, 3.0, 0, -1, 1)
        ]
        # The iterator is left just after the terminating line
        assert next(lines) == "3 0.1 0.2 0.3"

    def test_last_note_line_wins(self):
        lines = iter(["# first", "1 0.1 0.2 0.3", "# second", "Bonds"])
        section = VELOCITIES_PARSER.parse(lines)

        assert section.note == "# second"
        assert section.records == [VelocityRecord(1, 0.1, 0.2, 0.3)]

    def test_wrong_token_count_is_dropped(self):
        lines = iter(["1 0.1 0.2", "2 0.1 0.2 0.3", "3 0.1 0.2 0.3 0.4", "Bonds"])
        section = VELOCITIES_PARSER.parse(lines)

        assert [v.atom_id for v in section.records] == [2]

    def test_multiple_spaces_and_tabs_are_not_tolerated(self):
        parser = SectionParser(BondRecord, terminator="Angles")
        lines = iter(["1  1 2 3", "2\t1\t2\t3", "3 1 2 3"])
        section = parser.parse(lines)

        assert section.records == [BondRecord(3, 1, 2, 3)]

    def test_bad_tokens_become_zero(self):
        lines = iter(["x 1 2.5 1.0 2.0 nope 3.0 0 0 q"])
        section = ATOMS_PARSER.parse(lines)

        assert section.records == [
            AtomRecord(0, 1, 0, 1.0, 2.0, 0.0, 3.0, 0, 0, 0)
        ]

    def test_angles_run_to_end_of_input(self):
        lines = iter(["1 1 2 3 4", "Dihedrals", "2 1 3 4 5"])
        section = ANGLES_PARSER.parse(lines)

        assert section.records == [AngleRecord(1, 1, 2, 3, 4), AngleRecord(2, 1, 3, 4, 5)]

    def test_end_of_input_without_terminator(self):
        section = VELOCITIES_PARSER.parse(iter(["1 0 0 0"]))
        assert len(section) == 1
