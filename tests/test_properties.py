"""Tests for traits derived from genomes."""

import random

import pytest

from biots.config.biot import GENOME_LENGTH
from biots.genetics import Gene, Genome, Properties
from tests.helpers import accumulate, genome_of


def test_traits_accumulate_per_gene():
    genome = genome_of(attack=3, defense=2, photosynthesis=1, motion=4, intelligence=1)
    props = Properties.from_genome(genome)

    assert props.attack == accumulate(0.1, 3)
    assert props.defense == accumulate(0.1, 2)
    assert props.photosynthesis == accumulate(0.1, 1)
    assert props.motion == accumulate(0.1, 4)
    assert props.intelligence == 10.0


def test_gene_order_does_not_matter():
    genes = [Gene.ATTACK, Gene.MOTION, Gene.NONE, Gene.INTELLIGENCE] + [Gene.DEFENSE] * 9
    forward = Properties.from_genome(Genome(genes))
    backward = Properties.from_genome(Genome(list(reversed(genes))))

    assert forward == backward


def test_random_genomes_match_their_gene_counts(seeded_rng):
    for _ in range(100):
        genome = Genome.random(seeded_rng)
        props = Properties.from_genome(genome)

        assert props.attack == accumulate(0.1, genome.count(Gene.ATTACK))
        assert props.defense == accumulate(0.1, genome.count(Gene.DEFENSE))
        assert props.photosynthesis == accumulate(0.1, genome.count(Gene.PHOTOSYNTHESIS))
        assert props.motion == accumulate(0.1, genome.count(Gene.MOTION))
        assert props.intelligence == accumulate(10.0, genome.count(Gene.INTELLIGENCE))


def test_adjust_to_genome_is_idempotent(seeded_rng):
    for _ in range(50):
        genome = Genome.random(seeded_rng)
        props = Properties()
        props.adjust_to_genome(genome)
        first = props.copy()
        props.adjust_to_genome(genome)

        assert props == first


def test_adjust_to_genome_resets_previous_traits():
    props = Properties.from_genome(genome_of(attack=GENOME_LENGTH))
    props.adjust_to_genome(genome_of(motion=1))

    assert props.attack == 0.0
    assert props.motion == pytest.approx(0.1)


def test_weight_is_never_negative():
    rng = random.Random(7)
    for _ in range(200):
        assert Properties.from_genome(Genome.random(rng)).weight() >= 0.0


@pytest.mark.parametrize(
    "genome",
    [genome_of(), genome_of(intelligence=GENOME_LENGTH)],
    ids=["all-none", "all-intelligence"],
)
def test_weight_can_be_exactly_zero(genome):
    assert Properties.from_genome(genome).weight() == 0.0


def test_weight_ignores_intelligence():
    props = Properties.from_genome(genome_of(attack=1, defense=1, photosynthesis=1, motion=1, intelligence=5))
    assert props.weight() == pytest.approx(0.4)


def test_metabolism_formula():
    props = Properties(attack=0.3, defense=0.2, photosynthesis=0.5, motion=0.4, intelligence=10.0)
    expected = 0.2 * (4.5 * 0.3 + 2.3 * 0.2 + 2.5 * 0.4 + 0.1 * 10.0)
    assert props.metabolism() == pytest.approx(expected)


def test_photosynthesis_costs_no_metabolism():
    assert Properties.from_genome(genome_of(photosynthesis=GENOME_LENGTH)).metabolism() == 0.0
