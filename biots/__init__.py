"""Biots: an artificial-life simulation on a toroidal plane.

Key modules:

- genetics: genes, genomes and derived properties
- entities: the Biot organism and its per-step lifecycle
- spatial: the per-step spatial index
- biot_collection: the population manager
- simulation: headless engine wiring everything together

The public API is intentionally small; import helpers from their modules.
"""

from biots.biot_collection import BiotCollection, StepResult
from biots.entities import Biot
from biots.environment import Environment
from biots.simulation import SimulationEngine

__all__ = [
    "Biot",
    "BiotCollection",
    "Environment",
    "SimulationEngine",
    "StepResult",
]
