"""Simulation engine: wires config, environment and population together."""

from biots.simulation.engine import SimulationEngine

__all__ = ["SimulationEngine"]
