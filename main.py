"""Main entry point for the biots simulation.

This module provides command-line options to run the simulation:
- Window mode (default): pygame window drawing every biot each frame
- Headless mode: Stats-only, as fast as the CPU allows
"""

import argparse
import logging
import sys

from biots.config.display import (
    COUNTER_FONT_SIZE,
    FRAME_RATE,
    INITIAL_POPULATION,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from biots.config.simulation_config import DisplayConfig, SimulationConfig
from biots.exceptions import ConfigurationError
from biots.logging_config import configure_logging

logger = logging.getLogger(__name__)


def run_window(config: SimulationConfig) -> None:
    """Run the simulation in a pygame window until it is closed.

    Args:
        config: Simulation configuration; the window matches the world extent
    """
    import pygame

    from biots.simulation import SimulationEngine
    from rendering.biot_renderer import BiotRenderer

    engine = SimulationEngine(config)
    engine.setup()

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (config.display.screen_width, config.display.screen_height)
        )
        pygame.display.set_caption("Biots")
    except pygame.error as e:
        logger.error("Couldn't set the display mode: %s", e)
        pygame.quit()
        sys.exit(1)

    renderer = BiotRenderer(screen, pygame.font.Font(None, COUNTER_FONT_SIZE))
    clock = pygame.time.Clock()
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            engine.update()
            renderer.draw(engine.biots, len(engine.biots))
            pygame.display.flip()
            clock.tick(config.display.frame_rate)
    finally:
        logger.info("Window closed after %d frames", engine.frame_count)
        engine.print_stats()
        pygame.quit()


def run_headless(config: SimulationConfig, max_frames: int, stats_interval: int) -> None:
    """Run the simulation in headless mode (no visualization).

    Args:
        config: Simulation configuration
        max_frames: Maximum number of frames to simulate
        stats_interval: Log stats every N frames
    """
    from biots.simulation import SimulationEngine

    engine = SimulationEngine(config)
    engine.run_headless(max_frames=max_frames, stats_interval=stats_interval)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    """Turn parsed command-line arguments into a validated configuration."""
    config = SimulationConfig(
        headless=args.headless,
        initial_population=args.population,
        seed=args.seed,
        require_contact=args.require_contact,
        display=DisplayConfig(
            screen_width=args.width,
            screen_height=args.height,
            frame_rate=args.frame_rate,
        ),
    )
    config.validate()
    return config


def main(argv=None):
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Biots Artificial Life Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Open a window (default)
  python main.py

  # Run headless for testing/benchmarking
  python main.py --headless --max-frames 10000 --stats-interval 500

  # Long run with a seed for reproducibility
  python main.py --headless --max-frames 100000 --seed 42
        """,
    )

    parser.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no window, stats only)"
    )
    parser.add_argument(
        "--max-frames",
        type=int,
        default=10000,
        help="Maximum frames to simulate in headless mode (default: 10000)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=300,
        help="Log stats every N frames in headless mode (default: 300)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducible runs (optional)"
    )
    parser.add_argument(
        "--population",
        type=int,
        default=INITIAL_POPULATION,
        help=f"Number of random biots at startup (default: {INITIAL_POPULATION})",
    )
    parser.add_argument(
        "--width", type=int, default=SCREEN_WIDTH, help=f"World width (default: {SCREEN_WIDTH})"
    )
    parser.add_argument(
        "--height", type=int, default=SCREEN_HEIGHT, help=f"World height (default: {SCREEN_HEIGHT})"
    )
    parser.add_argument(
        "--frame-rate",
        type=int,
        default=FRAME_RATE,
        help=f"Window frame rate cap (default: {FRAME_RATE})",
    )
    parser.add_argument(
        "--require-contact",
        action="store_true",
        help="Only let biots fight when their bodies touch",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: BIOTS_LOG_LEVEL env var or INFO)",
    )

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        parser.error(str(e))

    if config.headless:
        logger.info("Starting headless simulation...")
        logger.info(
            "Configuration: %d frames, stats every %d frames", args.max_frames, args.stats_interval
        )
        run_headless(config, args.max_frames, args.stats_interval)
    else:
        run_window(config)


if __name__ == "__main__":
    main()
