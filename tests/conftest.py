"""Pytest configuration and fixtures for biots tests."""

import random

import pytest

from biots.config.biot import GENOME_LENGTH
from biots.entities import Biot, Stats
from biots.environment import Environment
from biots.math_utils import Vector2
from tests.helpers import genome_of


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def environment(seeded_rng):
    """Provide an 800x600 world backed by the seeded RNG."""
    return Environment(800, 600, rng=seeded_rng)


@pytest.fixture
def make_biot(environment):
    """Factory for biots with a chosen genome, position and energy.

    Defaults to an all-photosynthesis biot: no motion, so stepping it never
    triggers a movement impulse.
    """

    def _make(genome=None, x=100.0, y=100.0, energy=1.0, speed=(0.0, 0.0), age=0, env=None):
        return Biot(
            env if env is not None else environment,
            genome if genome is not None else genome_of(photosynthesis=GENOME_LENGTH),
            stats=Stats(energy=energy, pos=Vector2(x, y), speed=Vector2(*speed), age=age),
        )

    return _make
