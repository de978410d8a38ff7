"""Renumber atom ids of LAMMPS data files and remap their references."""

from .config import RenumberConfig, VelocityPolicy
from .domain.models import Document, Section
from .io import DataFileReader, DataFileWriter
from .pipeline import renumber_file
from .services import RenumberingService, TopologyService, TopologySummary

__version__ = "0.1.0"

__all__ = [
    "RenumberConfig",
    "VelocityPolicy",
    "Document",
    "Section",
    "DataFileReader",
    "DataFileWriter",
    "renumber_file",
    "RenumberingService",
    "TopologyService",
    "TopologySummary",
]
