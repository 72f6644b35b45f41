"""Headless simulation engine.

The engine owns everything a run needs: the configuration, the seeded RNG,
the environment and the biot collection. Renderers and the CLI only talk to
the engine.
"""

import logging
import random
import time
from typing import Optional

from biots.biot_collection import BiotCollection, StepResult
from biots.config.simulation_config import SimulationConfig
from biots.ecosystem_stats import EcosystemStats, PopulationStats
from biots.environment import Environment
from biots.exceptions import SimulationError

logger = logging.getLogger(__name__)


class SimulationEngine:
    """A headless simulation engine.

    Attributes:
        config: Aggregate simulation configuration
        rng: Source of every random draw in the run
        environment: World extent plus the RNG, shared by every biot
        biots: The population, available after setup()
        frame_count: Number of completed steps
        ecosystem: Running totals of births, deaths and kills
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the simulation engine.

        Args:
            config: Aggregate simulation configuration
            rng: Shared random number generator for reproducible runs
            seed: Optional seed (used if rng is not provided); overrides config.seed
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        # RNG handling: prefer explicit rng, then seed, then config seed
        if seed is None:
            seed = self.config.seed
        if rng is not None:
            self.rng: random.Random = rng
            self.seed = None
        else:
            self.rng = random.Random(seed)
            self.seed = seed

        display = self.config.display
        self.environment = Environment(display.screen_width, display.screen_height, rng=self.rng)
        self.biots: Optional[BiotCollection] = None
        self.frame_count: int = 0
        self.ecosystem = EcosystemStats()
        self.start_time: float = time.time()

    def setup(self) -> None:
        """Create the initial random population."""
        self.biots = BiotCollection.random(
            self.config.initial_population,
            self.environment,
            collision_radius=self.config.collision_radius,
            cell_size=self.config.cell_size,
            require_contact=self.config.require_contact,
        )
        self.frame_count = 0
        self.ecosystem = EcosystemStats()
        self.start_time = time.time()
        logger.info(
            "Created %d biots in a %.0fx%.0f world (seed=%s)",
            len(self.biots),
            self.environment.width,
            self.environment.height,
            self.seed,
        )

    def update(self) -> StepResult:
        """Advance the simulation by one frame."""
        if self.biots is None:
            raise SimulationError("SimulationEngine.update() called before setup()")
        result = self.biots.step()
        self.ecosystem.record(result)
        self.frame_count += 1
        return result

    def get_stats(self) -> PopulationStats:
        """Snapshot statistics of the current population."""
        if self.biots is None:
            return PopulationStats()
        return PopulationStats.from_biots(self.biots)

    def print_stats(self) -> None:
        """Log current simulation statistics."""
        stats = self.get_stats()
        elapsed = time.time() - self.start_time
        fps = self.frame_count / elapsed if elapsed > 0 else 0.0
        logger.info(
            f"Frame {self.frame_count}: population={stats.population} "
            f"(intelligent={stats.intelligent}, max generation={stats.max_generation}) "
            f"[{fps:.1f} steps/s]"
        )
        logger.info(
            f"  traits: attack={stats.mean_attack:.3f} defense={stats.mean_defense:.3f} "
            f"photosynthesis={stats.mean_photosynthesis:.3f} motion={stats.mean_motion:.3f}"
        )
        logger.info(f"  mean energy={stats.mean_energy:.2f} mean age={stats.mean_age:.1f}")
        logger.info(
            f"  totals: births={self.ecosystem.total_births} deaths={self.ecosystem.total_deaths} "
            f"kills={self.ecosystem.total_kills} peak={self.ecosystem.peak_population}"
        )

    def run_headless(self, max_frames: int = 10000, stats_interval: int = 300) -> None:
        """Run the simulation in headless mode without visualization."""
        if max_frames < 0:
            raise SimulationError(f"max_frames must not be negative, got {max_frames}")
        if stats_interval <= 0:
            raise SimulationError(f"stats_interval must be positive, got {stats_interval}")

        sep = self.config.display.separator_width
        logger.info("=" * sep)
        logger.info("HEADLESS BIOTS SIMULATION")
        logger.info("=" * sep)
        logger.info(f"Running for {max_frames} frames")
        logger.info(f"Stats will be printed every {stats_interval} frames")
        logger.info("=" * sep)

        self.setup()

        for frame in range(max_frames):
            result = self.update()

            if frame > 0 and frame % stats_interval == 0:
                self.print_stats()

            if result.population == 0 and self.config.stop_on_extinction:
                logger.warning("Population went extinct at frame %d", self.frame_count)
                break

        logger.info("")
        logger.info("=" * sep)
        logger.info("SIMULATION COMPLETE - Final Statistics")
        logger.info("=" * sep)
        self.print_stats()
