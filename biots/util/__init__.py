"""Utilities for the simulation."""

from biots.util.rng import MissingRNGError, require_rng, require_rng_param

__all__ = [
    "require_rng",
    "require_rng_param",
    "MissingRNGError",
]
