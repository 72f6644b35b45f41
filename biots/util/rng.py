"""RNG utilities for reproducible simulation runs.

Every random draw in the simulation goes through a ``random.Random``
instance owned by the environment. These helpers fail loudly when that
instance is missing rather than silently creating an unseeded fallback.
"""

import random
from typing import Any, Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This error indicates a bug in the simulation setup - every biot
    should reach the engine's RNG through its environment.
    """


def require_rng(environment: Any, context: str = "unknown") -> random.Random:
    """Get the RNG from an environment, failing loudly if unavailable.

    Args:
        environment: The environment object that should have an ``rng`` attribute
        context: Description of where this is called from (for error messages)

    Returns:
        The environment's RNG

    Raises:
        MissingRNGError: If environment is None or doesn't have an RNG

    Example:
        rng = require_rng(self.environment, "Biot.step")
        if rng.random() < 0.2:
            ...
    """
    if environment is None:
        raise MissingRNGError(
            f"Cannot get RNG: environment is None (context: {context}). "
            "This biot may not have been created with an environment."
        )

    rng = getattr(environment, "rng", None)
    if rng is None:
        raise MissingRNGError(
            f"Cannot get RNG: environment has no 'rng' attribute (context: {context}). "
            "The environment should be an Environment with a seeded RNG."
        )

    return rng


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Use this in constructors and functions that take an RNG argument,
    instead of silently creating an unseeded fallback.

    Raises:
        MissingRNGError: If rng is None
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the environment RNG explicitly.")
    return rng
