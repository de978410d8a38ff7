"""Read, renumber and write one data file."""

import logging

from .config import RenumberConfig
from .io.data_reader import DataFileReader
from .io.data_writer import DataFileWriter
from .services.renumbering_service import RenumberingService
from .services.topology_service import TopologyService, TopologySummary

logger = logging.getLogger(__name__)


def renumber_file(config: RenumberConfig) -> TopologySummary:
    """
    Run the renumbering pipeline for a single file.

    Args:
        config: Input/output paths and renumbering options

    Returns:
        Topology summary of the input document

    Raises:
        OSError: If the input cannot be read or the output cannot be written
    """
    reader = DataFileReader(show_progress=config.show_progress)
    document = reader.read(config.input_path)

    summary = TopologyService().summarize(document)

    RenumberingService(velocity_policy=config.velocity_policy).renumber(document)

    DataFileWriter().write(document, config.output_path)
    logger.info(f"Renumbered {config.input_path} -> {config.output_path}")
    return summary
