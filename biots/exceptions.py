"""Biots exception hierarchy.

Centralised base classes so callers can catch simulation failures narrowly
instead of relying on bare ``except Exception`` blocks.
"""


class BiotsError(Exception):
    """Root of all biots domain exceptions."""


class SimulationError(BiotsError):
    """Errors during simulation execution (engine, collection, entities)."""


class EntityError(SimulationError):
    """An entity-level failure (energy, lifecycle, movement)."""


class GeneticsError(SimulationError):
    """Genome construction or mutation failure."""


class ConfigurationError(BiotsError):
    """Invalid or missing configuration."""
