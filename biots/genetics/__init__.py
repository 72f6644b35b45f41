"""Genetics package: genes, genomes and the traits derived from them."""

from biots.genetics.genome import Gene, Genome
from biots.genetics.properties import Properties

__all__ = ["Gene", "Genome", "Properties"]
