"""Simulation entities."""

from biots.entities.biot import Biot, Stats

__all__ = ["Biot", "Stats"]
