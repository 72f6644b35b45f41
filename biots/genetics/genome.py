"""Genome class for the biots simulation.

A genome is a fixed-length sequence of categorical genes. Gene order carries
no meaning beyond aggregation: the derived traits only depend on how many
genes of each kind a genome holds.
"""

import logging
import random as pyrandom
from enum import IntEnum
from typing import Iterator, List, Sequence, Tuple

from biots.config.biot import GENOME_LENGTH
from biots.exceptions import GeneticsError

logger = logging.getLogger(__name__)


class Gene(IntEnum):
    """A single genome slot.

    The value of each member is the index drawn from the RNG to produce it.
    """

    NONE = 0  # no observable effect
    ATTACK = 1
    DEFENSE = 2
    PHOTOSYNTHESIS = 3
    MOTION = 4
    INTELLIGENCE = 5

    @classmethod
    def from_index(cls, index: int) -> "Gene":
        """Map a drawn index onto a gene.

        Raises:
            GeneticsError: If ``index`` is outside the gene range. A bad draw
                is an internal bug, never something to paper over.
        """
        if not 0 <= index < len(cls):
            raise GeneticsError(f"encountered unexpected random gene index {index}")
        return cls(index)

    @classmethod
    def random(cls, rng: pyrandom.Random) -> "Gene":
        """Draw a gene, every variant with equal probability."""
        return cls.from_index(rng.randrange(len(cls)))


class Genome:
    """The set of genes a biot is made of.

    Attributes:
        genes: Exactly ``GENOME_LENGTH`` genes
    """

    __slots__ = ("_genes",)

    def __init__(self, genes: Sequence[Gene]) -> None:
        if len(genes) != GENOME_LENGTH:
            raise GeneticsError(
                f"genome must have exactly {GENOME_LENGTH} genes, got {len(genes)}"
            )
        self._genes: List[Gene] = [Gene(gene) for gene in genes]

    @classmethod
    def random(cls, rng: pyrandom.Random) -> "Genome":
        """Create a genome of independently drawn random genes."""
        return cls([Gene.random(rng) for _ in range(GENOME_LENGTH)])

    def mutate(self, rng: pyrandom.Random) -> int:
        """Overwrite one uniformly chosen slot with a fresh random gene.

        The redraw may coincide with the gene already there.

        Returns:
            The index of the mutated slot.
        """
        which_gene = rng.randrange(len(self._genes))
        old_gene = self._genes[which_gene]
        self._genes[which_gene] = Gene.random(rng)
        logger.debug(
            "Mutated gene %d: %s -> %s", which_gene, old_gene.name, self._genes[which_gene].name
        )
        return which_gene

    @property
    def genes(self) -> Tuple[Gene, ...]:
        """Read-only view of the genes."""
        return tuple(self._genes)

    def count(self, gene: Gene) -> int:
        return self._genes.count(gene)

    def copy(self) -> "Genome":
        return Genome(self._genes)

    def __iter__(self) -> Iterator[Gene]:
        return iter(self._genes)

    def __len__(self) -> int:
        return len(self._genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self._genes == other._genes

    def __repr__(self) -> str:
        return "Genome(" + "".join(gene.name[0] for gene in self._genes) + ")"

    def differing_slots(self, other: "Genome") -> List[int]:
        """Indices at which this genome and ``other`` hold different genes."""
        return [i for i, (a, b) in enumerate(zip(self._genes, other._genes)) if a != b]

