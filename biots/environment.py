"""Environment module: world extent and the shared random source.

The simulation core never talks to a window or a global RNG. It asks its
``Environment`` for the current world extent and draws every random number
from the environment's ``random.Random``.
"""

import random
from typing import Optional, Protocol, runtime_checkable

from biots.math_utils import Vector2, floored_mod
from biots.util.rng import require_rng_param


@runtime_checkable
class World2D(Protocol):
    """Anything that can tell the simulation how big the world is and
    hand out random numbers."""

    width: float
    height: float
    rng: random.Random


class Environment:
    """The toroidal plane biots live on.

    Attributes:
        width: World width in pixels
        height: World height in pixels
        rng: Source of every random draw in the simulation
    """

    def __init__(
        self,
        width: float = 800,
        height: float = 600,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = float(width)
        self.height = float(height)
        self.rng = require_rng_param(rng, "Environment.__init__")

    def random_position(self) -> Vector2:
        """Return a uniformly random point inside the world."""
        return Vector2(
            self.rng.uniform(0.0, 1.0) * self.width,
            self.rng.uniform(0.0, 1.0) * self.height,
        )

    def wrap(self, pos: Vector2) -> None:
        """Fold ``pos`` back into ``[0, width) x [0, height)`` in place."""
        pos.x = floored_mod(pos.x, self.width)
        pos.y = floored_mod(pos.y, self.height)

    def __repr__(self) -> str:
        return f"Environment(width={self.width}, height={self.height})"
