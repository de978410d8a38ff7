"""Services operating on parsed documents."""

from .renumbering_service import RenumberingService
from .topology_service import TopologyService, TopologySummary

__all__ = [
    "RenumberingService",
    "TopologyService",
    "TopologySummary",
]
