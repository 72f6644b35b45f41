"""The biot: one simulated organism.

A biot owns its genome, the properties derived from it and its mutable
runtime stats. It never shares any of them with another biot; the only
thing biots have in common is the environment they live in.
"""

import itertools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from biots.config.biot import (
    ADULT_FACTOR,
    BASE_LIFE_FACTOR,
    CONTACT_DISTANCE_FACTOR,
    CROWDING_DISTANCE_SQUARED,
    CROWDING_NEIGHBOR_RANK,
    ENERGY_GAIN_FACTOR,
    ENERGY_TRANSFER_RATIO,
    MAX_AGE,
    MOTION_CHANCE_FACTOR,
    MOTION_SPEED_FACTOR,
    MUTATION_CHANCE,
    OFFSPRING_SPEED,
    STRENGTH_DEFENSE_FACTOR,
    VELOCITY_DECAY,
)
from biots.exceptions import EntityError
from biots.genetics import Genome, Properties
from biots.math_utils import Vector2
from biots.util.rng import require_rng

if TYPE_CHECKING:
    from biots.environment import Environment
    from biots.spatial import SpatialGrid


@dataclass
class Stats:
    """The status values of a biot.

    Attributes:
        energy: Life points; zero or less means death
        pos: Position in world coordinates
        speed: Velocity added to the position every step
        age: Number of steps lived
    """

    energy: float = 0.0
    pos: Vector2 = field(default_factory=Vector2)
    speed: Vector2 = field(default_factory=Vector2)
    age: int = 0

    def copy(self) -> "Stats":
        return Stats(energy=self.energy, pos=self.pos.copy(), speed=self.speed.copy(), age=self.age)


class Biot:
    """A single organism on the toroidal plane.

    Attributes:
        environment: World extent and RNG shared by every biot
        genome: The genes this biot is made of
        properties: Traits derived from the genome, always in sync with it
        stats: Mutable runtime state
        generation: Number of ancestors between this biot and the initial population
    """

    def __init__(
        self,
        environment: "Environment",
        genome: Genome,
        stats: Optional[Stats] = None,
        generation: int = 0,
    ) -> None:
        self.environment = environment
        self.genome = genome
        self.properties = Properties.from_genome(genome)
        self.stats = stats if stats is not None else Stats()
        self.generation = generation

    @classmethod
    def random_biot(cls, environment: "Environment") -> "Biot":
        """Create a biot with a random genome at a random position, at base life."""
        rng = require_rng(environment, "Biot.random_biot")
        biot = cls(environment, Genome.random(rng))
        biot.stats.pos = environment.random_position()
        biot.stats.energy = biot.base_life()
        return biot

    def clone(self) -> "Biot":
        """Return a fully independent copy sharing only the environment."""
        return Biot(
            self.environment,
            self.genome.copy(),
            stats=self.stats.copy(),
            generation=self.generation,
        )

    def step(self, index: "SpatialGrid", feed_dir: Optional[Vector2] = None) -> Optional["Biot"]:
        """Compute the evolution of the biot for one simulation step.

        Args:
            index: This step's spatial index, built from pre-step positions
            feed_dir: Unit vector towards prey, if the collection found one

        Returns:
            The offspring produced this step, if any.
        """
        rng = require_rng(self.environment, "Biot.step")
        offspring = None

        if self.stats.energy >= self.base_life() * ADULT_FACTOR:
            close_by = next(
                itertools.islice(
                    index.nearest_neighbor_iter_with_distance_2(self.stats.pos.x, self.stats.pos.y),
                    CROWDING_NEIGHBOR_RANK,
                    None,
                ),
                None,
            )
            if close_by is None or close_by[1] > CROWDING_DISTANCE_SQUARED:
                offspring = self.reproduce()

        self.stats.pos += self.stats.speed
        self.environment.wrap(self.stats.pos)
        self.stats.speed *= VELOCITY_DECAY
        self.stats.energy += (
            self.properties.photosynthesis - self.properties.metabolism()
        ) * ENERGY_GAIN_FACTOR

        if rng.random() < MOTION_CHANCE_FACTOR * self.properties.motion:
            # weight >= motion > 0 here
            speed = MOTION_SPEED_FACTOR * self.properties.motion / self.properties.weight()
            if self.properties.intelligence > 0 and feed_dir is not None:
                self.accelerate(feed_dir, speed)
            else:
                self.random_move(speed)

        self.stats.age += 1
        return offspring

    def reproduce(self) -> "Biot":
        """Split off an offspring and pay for it.

        The offspring starts at age 0 with its own base life, carries a
        geometric number of mutations and gets a push in a random direction.
        The parent drops to one adult factor below its threshold.
        """
        rng = require_rng(self.environment, "Biot.reproduce")
        offspring = self.clone()
        offspring.stats.age = 0
        offspring.generation = self.generation + 1
        while rng.random() < MUTATION_CHANCE:
            offspring.mutate()
        offspring.stats.energy = offspring.base_life()
        offspring.random_move(OFFSPRING_SPEED)
        self.stats.energy = (ADULT_FACTOR - 1.0) * self.base_life()
        return offspring

    @staticmethod
    def interact(biots: List["Biot"], i: int, j: int, require_contact: bool = False) -> bool:
        """Resolve combat between ``biots[i]`` and ``biots[j]``.

        If exactly one of them is stronger, it absorbs most of the other's
        energy and the other is left with none. Energies are read as they are
        right now, so earlier fights in the same step compound.

        Args:
            biots: The live biots, addressed by snapshot index
            i: Index of the first biot
            j: Index of the second biot
            require_contact: Only fight if the bodies actually touch

        Returns:
            True if a biot that still had energy was killed.

        Raises:
            EntityError: If ``i`` and ``j`` name the same biot.
        """
        if i == j:
            raise EntityError(f"biot {i} cannot fight itself")
        first = biots[i]
        second = biots[j]
        if require_contact:
            dist = (first.stats.pos - second.stats.pos).length()
            contact = CONTACT_DISTANCE_FACTOR * (first.properties.weight() + second.properties.weight())
            if dist >= contact:
                return False

        if first.is_stronger(second):
            if second.is_stronger(first):
                return False
            winner, loser = first, second
        elif second.is_stronger(first):
            winner, loser = second, first
        else:
            return False

        killed = loser.stats.energy > 0.0
        winner.stats.energy += loser.stats.energy * ENERGY_TRANSFER_RATIO
        loser.stats.energy = 0.0
        return killed

    def is_dead(self) -> bool:
        return self.stats.energy <= 0.0 or self.stats.age >= MAX_AGE

    def is_alive(self) -> bool:
        return not self.is_dead()

    def is_stronger(self, other: "Biot") -> bool:
        """Return True if ``self`` beats ``other`` in a fight.

        Not symmetric: two biots may both be stronger than each other, or
        neither may be.
        """
        return self.properties.attack > (
            other.properties.attack + other.properties.defense * STRENGTH_DEFENSE_FACTOR
        )

    def random_move(self, speed: float) -> None:
        """Accelerate in a uniformly random direction."""
        rng = require_rng(self.environment, "Biot.random_move")
        direction = Vector2(rng.uniform(0.0, 1.0) - 0.5, rng.uniform(0.0, 1.0) - 0.5)
        self.accelerate(direction.normalize(), speed)

    def accelerate(self, direction: Vector2, speed: float) -> None:
        self.stats.speed += direction * speed

    def mutate(self) -> None:
        """Mutate a single gene and bring the properties back in sync."""
        self.genome.mutate(require_rng(self.environment, "Biot.mutate"))
        self.properties.adjust_to_genome(self.genome)

    def base_life(self) -> float:
        """Starting energy of a biot; also scales its reproduction threshold."""
        return BASE_LIFE_FACTOR * self.properties.weight()

    def __repr__(self) -> str:
        return (
            f"Biot(pos=({self.stats.pos.x:.1f}, {self.stats.pos.y:.1f}), "
            f"energy={self.stats.energy:.2f}, age={self.stats.age}, {self.genome!r})"
        )
