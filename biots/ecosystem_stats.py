"""Population statistics for logging and on-screen counters."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from biots.biot_collection import StepResult
    from biots.entities import Biot


@dataclass(frozen=True)
class PopulationStats:
    """Snapshot of the live population at one moment."""

    population: int = 0
    intelligent: int = 0
    mean_attack: float = 0.0
    mean_defense: float = 0.0
    mean_photosynthesis: float = 0.0
    mean_motion: float = 0.0
    mean_energy: float = 0.0
    mean_age: float = 0.0
    max_generation: int = 0

    @classmethod
    def from_biots(cls, biots: Iterable["Biot"]) -> "PopulationStats":
        count = 0
        intelligent = 0
        attack = defense = photosynthesis = motion = energy = age = 0.0
        max_generation = 0
        for biot in biots:
            props = biot.properties
            count += 1
            if props.intelligence > 0:
                intelligent += 1
            attack += props.attack
            defense += props.defense
            photosynthesis += props.photosynthesis
            motion += props.motion
            energy += biot.stats.energy
            age += biot.stats.age
            max_generation = max(max_generation, biot.generation)

        if count == 0:
            return cls()
        return cls(
            population=count,
            intelligent=intelligent,
            mean_attack=attack / count,
            mean_defense=defense / count,
            mean_photosynthesis=photosynthesis / count,
            mean_motion=motion / count,
            mean_energy=energy / count,
            mean_age=age / count,
            max_generation=max_generation,
        )


class EcosystemStats:
    """Running totals across every step of a run."""

    def __init__(self) -> None:
        self.steps = 0
        self.total_births = 0
        self.total_deaths = 0
        self.total_kills = 0
        self.peak_population = 0

    def record(self, result: "StepResult") -> None:
        self.steps += 1
        self.total_births += result.births
        self.total_deaths += result.deaths
        self.total_kills += result.kills
        self.peak_population = max(self.peak_population, result.population)
