"""Lightweight simulation configuration helpers."""

from dataclasses import dataclass, field
from typing import Optional

from biots.config.display import FRAME_RATE, INITIAL_POPULATION, SCREEN_HEIGHT, SCREEN_WIDTH, SEPARATOR_WIDTH
from biots.config.simulation import COLLISION_RADIUS, SPATIAL_CELL_SIZE
from biots.exceptions import ConfigurationError


@dataclass
class DisplayConfig:
    """World extent and run-loop pacing."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    separator_width: int = SEPARATOR_WIDTH
    frame_rate: int = FRAME_RATE


@dataclass
class SimulationConfig:
    """Configuration toggles for simulation runtime behavior.

    Attributes:
        headless: Whether to run without a window.
        initial_population: Number of random biots created by setup().
        seed: Seed for the simulation RNG; None draws one from the OS.
        collision_radius: Distance within which biots may fight.
        cell_size: Cell size of the per-step spatial index.
        require_contact: Also require bodies to touch before fighting.
        stop_on_extinction: End a headless run early once no biot is left.
    """

    headless: bool = True
    initial_population: int = INITIAL_POPULATION
    seed: Optional[int] = None
    collision_radius: float = COLLISION_RADIUS
    cell_size: float = SPATIAL_CELL_SIZE
    require_contact: bool = False
    stop_on_extinction: bool = True
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def validate(self) -> None:
        """Raise ConfigurationError if any value makes the simulation meaningless."""
        if self.display.screen_width <= 0 or self.display.screen_height <= 0:
            raise ConfigurationError(
                "World extent must be positive, got "
                f"{self.display.screen_width}x{self.display.screen_height}"
            )
        if self.display.frame_rate <= 0:
            raise ConfigurationError(f"frame_rate must be positive, got {self.display.frame_rate}")
        if self.initial_population < 0:
            raise ConfigurationError(
                f"initial_population must not be negative, got {self.initial_population}"
            )
        if self.collision_radius < 0:
            raise ConfigurationError(
                f"collision_radius must not be negative, got {self.collision_radius}"
            )
        if self.cell_size <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {self.cell_size}")
