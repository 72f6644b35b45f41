"""Shared helpers for biots tests."""

import random

from biots.config.biot import GENOME_LENGTH
from biots.genetics import Gene, Genome


class FixedRandom(random.Random):
    """A Random whose ``random()`` always returns the same value.

    ``uniform()`` is built on ``random()``, so it is pinned too, while
    ``randrange()`` still draws real bits.
    """

    def __init__(self, value: float = 0.0, seed: int = 0) -> None:
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


def genome_of(**counts) -> Genome:
    """Build a genome from gene counts, padding with NONE genes.

    Example: ``genome_of(attack=3, motion=1)``
    """
    genes = []
    for name, count in counts.items():
        genes.extend([Gene[name.upper()]] * count)
    genes.extend([Gene.NONE] * (GENOME_LENGTH - len(genes)))
    return Genome(genes)


def accumulate(increment: float, count: int) -> float:
    """Sum ``increment`` ``count`` times, the same way trait accumulation does."""
    total = 0.0
    for _ in range(count):
        total += increment
    return total
