"""Pygame rendering for the biots simulation.

The renderer only reads biot state; it never changes anything in the
simulation.
"""

from typing import Iterable

import pygame

from biots.config.display import (
    ATTACK_COLOR,
    BACKGROUND_COLOR,
    BODY_SCALE,
    COUNTER_COLOR,
    DEFENSE_COLOR,
    INTELLIGENCE_COLOR,
    MOTION_COLOR,
    PHOTOSYNTHESIS_COLOR,
)
from biots.entities import Biot


class BiotRenderer:
    """Draws every biot as nested trait layers.

    From the outside in, each biot is a photosynthesis disc, an attack disc,
    a defense disc and a motion disc, each sized by the sum of the traits
    it and the layers inside it stand for. Intelligent biots get a square
    behind the discs.

    Attributes:
        screen: Pygame surface to render to
        font: Font for the population counter
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font

    def draw_biot(self, biot: Biot) -> None:
        """Draw a single biot."""
        props = biot.properties
        x = biot.stats.pos.x
        y = biot.stats.pos.y
        center = (int(x), int(y))

        if props.intelligence > 0:
            size = 2 * BODY_SCALE * props.weight()
            pygame.draw.rect(
                self.screen, INTELLIGENCE_COLOR, (x - size / 2, y - size / 2, size, size)
            )

        layers = (
            (PHOTOSYNTHESIS_COLOR, props.photosynthesis + props.attack + props.defense + props.motion),
            (ATTACK_COLOR, props.attack + props.defense + props.motion),
            (DEFENSE_COLOR, props.defense + props.motion),
            (MOTION_COLOR, props.motion),
        )
        for color, extent in layers:
            radius = BODY_SCALE * extent
            if radius >= 1:
                pygame.draw.circle(self.screen, color, center, int(radius))

    def draw_counter(self, population: int) -> None:
        text_surface = self.font.render(f"Biots: {population}", True, COUNTER_COLOR)
        self.screen.blit(text_surface, (10, 10))

    def draw(self, biots: Iterable[Biot], population: int) -> None:
        """Clear the screen and draw the whole population."""
        self.screen.fill(BACKGROUND_COLOR)
        for biot in biots:
            self.draw_biot(biot)
        self.draw_counter(population)
