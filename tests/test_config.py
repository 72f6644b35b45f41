"""Tests for simulation configuration validation."""

import pytest

from biots.config.display import INITIAL_POPULATION, SCREEN_HEIGHT, SCREEN_WIDTH
from biots.config.simulation import COLLISION_RADIUS
from biots.config.simulation_config import DisplayConfig, SimulationConfig
from biots.exceptions import BiotsError, ConfigurationError


def test_defaults_are_valid():
    config = SimulationConfig()
    config.validate()

    assert config.initial_population == INITIAL_POPULATION
    assert config.collision_radius == COLLISION_RADIUS
    assert config.display.screen_width == SCREEN_WIDTH
    assert config.display.screen_height == SCREEN_HEIGHT
    assert config.require_contact is False


@pytest.mark.parametrize(
    "config",
    [
        SimulationConfig(display=DisplayConfig(screen_width=0)),
        SimulationConfig(display=DisplayConfig(screen_height=-5)),
        SimulationConfig(display=DisplayConfig(frame_rate=0)),
        SimulationConfig(initial_population=-1),
        SimulationConfig(collision_radius=-0.1),
        SimulationConfig(cell_size=0),
    ],
)
def test_invalid_values_rejected(config):
    with pytest.raises(ConfigurationError):
        config.validate()


def test_configuration_error_is_a_biots_error():
    assert issubclass(ConfigurationError, BiotsError)


def test_empty_population_is_allowed():
    SimulationConfig(initial_population=0).validate()
