"""Run configuration for the renumbering pipeline."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class VelocityPolicy(Enum):
    """How velocity atom ids are renumbered."""

    # Sort velocities by their own atom ids and number them 1..M
    INDEPENDENT = "independent"
    # Look each velocity atom id up in the atom mapping
    ATOM_MAP = "atom-map"


@dataclass
class RenumberConfig:
    """Paths and options for one renumbering run."""

    input_path: Path
    output_path: Path
    velocity_policy: VelocityPolicy = VelocityPolicy.INDEPENDENT
    show_progress: bool = False
