"""Traits derived from a biot's genome.

Properties hold no state of their own: they are always exactly recomputable
from the genome, and recomputation starts from zero every time.
"""

from dataclasses import dataclass

from biots.config.biot import (
    INTELLIGENCE_INCREMENT,
    METABOLISM_ATTACK_COST,
    METABOLISM_DEFENSE_COST,
    METABOLISM_INTELLIGENCE_COST,
    METABOLISM_MOTION_COST,
    METABOLISM_SCALE,
    TRAIT_INCREMENT,
)
from biots.genetics.genome import Gene, Genome


@dataclass
class Properties:
    """The properties of a biot.

    Attributes:
        attack: Offensive strength in combat
        defense: Resistance against stronger attackers
        photosynthesis: Energy generated from sunlight each step
        motion: Chance and strength of movement impulses
        intelligence: Feeding detection reach; zero means no hunting
    """

    attack: float = 0.0
    defense: float = 0.0
    photosynthesis: float = 0.0
    motion: float = 0.0
    intelligence: float = 0.0

    @classmethod
    def from_genome(cls, genome: Genome) -> "Properties":
        properties = cls()
        properties.adjust_to_genome(genome)
        return properties

    def reset(self) -> None:
        """Reset properties to their default values."""
        self.attack = 0.0
        self.defense = 0.0
        self.photosynthesis = 0.0
        self.motion = 0.0
        self.intelligence = 0.0

    def adjust_to_genome(self, genome: Genome) -> None:
        """Recompute every trait from the genome.

        Must be called whenever the owning biot's genome changes.
        """
        self.reset()
        for gene in genome:
            if gene is Gene.ATTACK:
                self.attack += TRAIT_INCREMENT
            elif gene is Gene.DEFENSE:
                self.defense += TRAIT_INCREMENT
            elif gene is Gene.PHOTOSYNTHESIS:
                self.photosynthesis += TRAIT_INCREMENT
            elif gene is Gene.MOTION:
                self.motion += TRAIT_INCREMENT
            elif gene is Gene.INTELLIGENCE:
                self.intelligence += INTELLIGENCE_INCREMENT

    def metabolism(self) -> float:
        """Energy the biot burns every step just to stay alive."""
        return METABOLISM_SCALE * (
            METABOLISM_ATTACK_COST * self.attack
            + METABOLISM_DEFENSE_COST * self.defense
            + METABOLISM_MOTION_COST * self.motion
            + METABOLISM_INTELLIGENCE_COST * self.intelligence
        )

    def weight(self) -> float:
        """Total body weight. Drives size, base life and movement speed.

        Intelligence does not count, so an all-None or all-Intelligence
        genome weighs exactly zero.
        """
        return self.attack + self.defense + self.photosynthesis + self.motion

    def copy(self) -> "Properties":
        return Properties(
            attack=self.attack,
            defense=self.defense,
            photosynthesis=self.photosynthesis,
            motion=self.motion,
            intelligence=self.intelligence,
        )
