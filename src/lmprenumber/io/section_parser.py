"""Line-oriented parsing of the header and the record sections of a data file."""

from typing import Generic, Iterator, Optional, Type, TypeVar

from ..domain.models.document import Section
from ..domain.models.records import (
    FIELD_SEPARATOR,
    AngleRecord,
    AtomRecord,
    BondRecord,
    DataRecord,
    VelocityRecord,
)

R = TypeVar("R", bound=DataRecord)

NOTE_MARKER = "#"
ATOMS_KEYWORD = "Atoms"


def read_header(lines: Iterator[str]) -> str:
    """
    Collect every line before the Atoms section.

    The line naming the Atoms section is consumed and dropped. If the input
    ends first, whatever was collected is returned.

    Args:
        lines: Iterator of lines without line endings

    Returns:
        Header text, each line terminated by a newline
    """
    header = []
    for line in lines:
        if ATOMS_KEYWORD in line:
            break
        header.append(line + "\n")
    return "".join(header)


class SectionParser(Generic[R]):
    """Parses the body of one section into records of a single type."""

    def __init__(self, record_type: Type[R], terminator: Optional[str] = None):
        """
        Initialize the parser.

        Args:
            record_type: Record class whose field table drives tokenization
            terminator: Name of the following section, or None to run to the end
        """
        self.record_type = record_type
        self.terminator = terminator

    def parse(self, lines: Iterator[str]) -> Section[R]:
        """
        Consume lines up to and including the next section's heading.

        Lines with the wrong number of fields are dropped without notice.

        Args:
            lines: Iterator positioned just after this section's heading

        Returns:
            Section holding the parsed records and the last note line seen
        """
        section: Section[R] = Section()
        for line in lines:
            if not line:
                continue
            if NOTE_MARKER in line:
                section.note = line
                continue
            if self.terminator is not None and self.terminator in line:
                break
            record = self.record_type.from_tokens(line.split(FIELD_SEPARATOR))
            if record is not None:
                section.records.append(record)
        return section


ATOMS_PARSER = SectionParser(AtomRecord, terminator="Velocities")
VELOCITIES_PARSER = SectionParser(VelocityRecord, terminator="Bonds")
BONDS_PARSER = SectionParser(BondRecord, terminator="Angles")
ANGLES_PARSER = SectionParser(AngleRecord)
