"""Command-line interface for the terminal Game of Life."""

import argparse
import sys
import time
from typing import Callable, Optional, Tuple

from ..core.config import LifeConfig
from ..core.engine import GameOfLife
from ..core.patterns import PatternLibrary
from .renderer import Renderer, TerminalRenderer


class CLIGameOfLife:
    """Runs a simulation and draws every generation."""

    def __init__(self, renderer_factory: Callable[[LifeConfig], Renderer] = TerminalRenderer) -> None:
        """Initialize CLI interface.

        Args:
            renderer_factory: Builds the renderer for a given configuration
        """
        self.pattern_library = PatternLibrary()
        self.renderer_factory = renderer_factory

    def run_simulation(self, config: LifeConfig, verbose: bool = False) -> Tuple[int, int]:
        """Run a simulation to completion.

        Each of ``config.generations`` iterations draws the current
        generation, advances and waits ``config.delay`` seconds. The final
        generation is drawn once more at the end.

        Args:
            config: Simulation configuration
            verbose: Print a summary when the run finishes

        Returns:
            Tuple of (final_generation, live_cells)

        Raises:
            ValueError: If the configuration is invalid
        """
        game = GameOfLife.from_config(config, self.pattern_library)
        renderer = self.renderer_factory(config)

        start_time = time.time()

        for _ in range(config.generations):
            renderer.show(game)
            game.advance()
            renderer.wait(config.delay)

        renderer.show(game, final=True)

        if verbose:
            duration = time.time() - start_time
            print(f"Ran {game.generation} generations on a {config.size}x{config.size} torus in {duration:.2f}s")

        return game.generation, game.population

    def list_patterns(self) -> None:
        """List available patterns."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            height, width = pattern.get_size()
            print(f"  {name}: {height}x{width}, {len(pattern.cells)} cells")
            if pattern.description:
                print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = LifeConfig()

    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a toroidal grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Glider on a 25x25 torus for 1000 generations
  lifeterm

  # Faster, larger and shorter
  lifeterm --size 40 --delay 0.05 --generations 200

  # Blinker in the top-left corner with custom glyphs
  lifeterm --pattern Blinker --row 0 --col 0 --live "#" --dead " "
        """,
    )

    parser.add_argument(
        "-s", "--size", type=int, default=defaults.size, help=f"Grid size (default: {defaults.size})"
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=defaults.generations,
        help=f"Generations to simulate (default: {defaults.generations})",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=defaults.delay,
        help=f"Seconds between generations (default: {defaults.delay})",
    )

    parser.add_argument("--live", type=str, default=defaults.live_glyph, help="Glyph for live cells")

    parser.add_argument("--dead", type=str, default=defaults.dead_glyph, help="Glyph for dead cells")

    parser.add_argument(
        "--pattern",
        type=str,
        default=defaults.pattern,
        help=f"Initial pattern (default: {defaults.pattern})",
    )

    parser.add_argument("--row", type=int, help="Row offset for the pattern (default: centre)")

    parser.add_argument("--col", type=int, help="Column offset for the pattern (default: centre)")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print configuration and a run summary",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> LifeConfig:
    """Build a configuration from parsed arguments.

    A missing ``--row`` or ``--col`` falls back to the grid centre.
    """
    offset = None
    if args.row is not None or args.col is not None:
        center = args.size // 2
        offset = (
            args.row if args.row is not None else center,
            args.col if args.col is not None else center,
        )

    return LifeConfig(
        size=args.size,
        live_glyph=args.live,
        dead_glyph=args.dead,
        delay=args.delay,
        generations=args.generations,
        pattern=args.pattern,
        offset=offset,
    )


def validate_args(args: argparse.Namespace) -> Optional[LifeConfig]:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        The resulting configuration, or None if the arguments are invalid
    """
    config = config_from_args(args)
    errors = config.validate()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return None

    return config


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    config = validate_args(args)
    if config is None:
        return 1

    if args.verbose:
        row, col = config.anchor()
        print(f"Grid: {config.size}x{config.size} (toroidal)")
        print(f"Pattern: {config.pattern} at ({row}, {col})")
        print(f"Generations: {config.generations}, delay: {config.delay}s")

    try:
        cli.run_simulation(config, verbose=args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
