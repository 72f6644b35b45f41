"""Population manager: owns the live biots and runs one step at a time.

A step goes through four phases in a fixed order:

1. Snapshot every position into a fresh spatial index, tagged with the
   biot's index into the live list.
2. Find a feed direction for every intelligent biot and step each biot.
   Offspring land in a side buffer, never in the live list or the index.
3. Resolve combat for every pair of biots close together in the snapshot,
   each unordered pair once, in ascending index order.
4. Drop the dead and append the offspring.

Combat uses the positions from the snapshot, i.e. from before this step's
movement.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from biots.config.simulation import (
    COLLISION_RADIUS,
    FEED_DETECTION_FACTOR,
    FEED_DIRECTION_EPSILON,
    SPATIAL_CELL_SIZE,
)
from biots.entities import Biot
from biots.math_utils import Vector2
from biots.spatial import SpatialGrid, TreePoint

if TYPE_CHECKING:
    from biots.environment import Environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """What happened during one collection step.

    Attributes:
        births: Offspring appended at the end of the step
        deaths: Biots removed at the end of the step
        kills: Fights that left one side with no energy
        population: Live biots after the step
    """

    births: int = 0
    deaths: int = 0
    kills: int = 0
    population: int = 0


class BiotCollection:
    """A collection of biots. Responsible for handling interactions between biots."""

    def __init__(
        self,
        biots: Optional[Iterable[Biot]] = None,
        collision_radius: float = COLLISION_RADIUS,
        cell_size: float = SPATIAL_CELL_SIZE,
        require_contact: bool = False,
    ) -> None:
        """
        Args:
            biots: Initial live biots
            collision_radius: Pairs closer than this in the snapshot may fight
            cell_size: Cell size of the per-step spatial index
            require_contact: Additionally require bodies to touch before fighting
        """
        self._biots: List[Biot] = list(biots) if biots is not None else []
        self._offsprings: List[Biot] = []
        self.collision_radius = collision_radius
        self.cell_size = cell_size
        self.require_contact = require_contact

    @classmethod
    def random(cls, count: int, environment: "Environment", **kwargs) -> "BiotCollection":
        """Create ``count`` random biots."""
        return cls((Biot.random_biot(environment) for _ in range(count)), **kwargs)

    def build_index(self) -> SpatialGrid:
        """Snapshot current positions into a fresh spatial index."""
        return SpatialGrid.bulk_load(
            (
                TreePoint(biot.stats.pos.x, biot.stats.pos.y, idx)
                for idx, biot in enumerate(self._biots)
            ),
            cell_size=self.cell_size,
        )

    def feed_direction(self, idx: int, index: SpatialGrid) -> Optional[Vector2]:
        """Direction from ``biots[idx]`` towards the nearest biot it can beat.

        Only neighbours within the biot's detection reach are considered.
        Returns None for biots without intelligence or without prey in reach.
        """
        biot = self._biots[idx]
        intelligence = biot.properties.intelligence
        if intelligence <= 0.0:
            return None

        pos = biot.stats.pos
        max_detection_distance = (intelligence * intelligence) * FEED_DETECTION_FACTOR
        for neighbour, squared_distance in index.nearest_neighbor_iter_with_distance_2(pos.x, pos.y):
            if neighbour.idx == idx:
                continue
            if squared_distance > max_detection_distance:
                # Everything further along is even further away
                break
            if biot.is_stronger(self._biots[neighbour.idx]):
                return Vector2(
                    neighbour.x - pos.x + FEED_DIRECTION_EPSILON,
                    neighbour.y - pos.y + FEED_DIRECTION_EPSILON,
                ).normalize()
        return None

    def step(self) -> StepResult:
        """Compute one step of the simulation."""
        # Clear offsprings in case there are still some from last step.
        self._offsprings.clear()
        index = self.build_index()

        # Index loop over a fixed length: nothing is added or removed here.
        for idx in range(len(self._biots)):
            feed_dir = self.feed_direction(idx, index)
            offspring = self._biots[idx].step(index, feed_dir)
            if offspring is not None:
                self._offsprings.append(offspring)

        kills = 0
        for first, second in self.collision_pairs(index):
            if Biot.interact(self._biots, first, second, self.require_contact):
                kills += 1

        before = len(self._biots)
        self._biots = [biot for biot in self._biots if biot.is_alive()]
        deaths = before - len(self._biots)
        births = len(self._offsprings)
        self._biots.extend(self._offsprings)
        self._offsprings.clear()

        result = StepResult(births=births, deaths=deaths, kills=kills, population=len(self._biots))
        logger.debug(
            "Step: births=%d deaths=%d kills=%d population=%d",
            result.births,
            result.deaths,
            result.kills,
            result.population,
        )
        return result

    def collision_pairs(self, index: SpatialGrid) -> Iterator[Tuple[int, int]]:
        """Yield each unordered pair of indexed biots within the collision radius once.

        Pairs come out ordered by first index, then second index.
        """
        for first in index:
            for second in index.locate_within_distance(first.x, first.y, self.collision_radius):
                if first.idx < second.idx:
                    yield first.idx, second.idx

    @property
    def biots(self) -> Tuple[Biot, ...]:
        """Read-only snapshot of the live biots."""
        return tuple(self._biots)

    def __iter__(self) -> Iterator[Biot]:
        return iter(self._biots)

    def __len__(self) -> int:
        """The number of biots currently in our collection."""
        return len(self._biots)
