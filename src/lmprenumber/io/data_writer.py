#!/usr/bin/env python3
# src/lmprenumber/io/data_writer.py

"""
Writer that renders a Document back to the data file format.
"""

import logging
from pathlib import Path
from typing import Union

from ..domain.models.document import Document, Section
from .data_reader import FILE_ENCODING, FILE_ERRORS

logger = logging.getLogger(__name__)


class DataFileWriter:
    """Handles rendering and saving of Document objects."""

    def render(self, document: Document) -> str:
        """Render the header followed by every section in file order."""
        parts = [document.header]
        for heading, section in document.sections():
            parts.append(self.render_section(heading, section))
        return "".join(parts)

    @staticmethod
    def render_section(heading: str, section: Section) -> str:
        """
        Render one section block.

        Layout: heading, blank line, note line, one line per record, blank line.
        """
        lines = [heading, "", section.note]
        lines.extend(record.to_line() for record in section.records)
        return "\n".join(lines) + "\n\n"

    def write(self, document: Document, path: Union[str, Path]) -> None:
        """
        Save the rendered document.

        Args:
            document: Document to save
            path: Output file path, created or truncated

        Raises:
            OSError: If the file cannot be created or written
        """
        text = self.render(document)
        with open(path, "w", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="\n") as handle:
            handle.write(text)
        logger.info(f"Wrote {len(text)} characters to {path}")
