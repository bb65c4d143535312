#!/usr/bin/env python3
"""
Example usage of the lifeterm package without a terminal.
"""

from lifeterm import GameOfLife, LifeConfig
from lifeterm.frontends import CLIGameOfLife, RecordingRenderer


def main():
    """Demonstrate programmatic usage of the lifeterm package."""
    config = LifeConfig(size=12, generations=8, delay=0)

    # Step a game by hand
    game = GameOfLife.from_config(config)
    for _ in range(4):
        game.advance()
    print(f"Generation {game.generation}, live cells: {game.population}")
    print(game.grid)
    print()

    # Run the whole loop headless and look at the recorded frames
    renderers = []

    def factory(cfg):
        renderers.append(RecordingRenderer(cfg))
        return renderers[-1]

    CLIGameOfLife(renderer_factory=factory).run_simulation(config)
    print(renderers[0].frames[-1], end="")


if __name__ == "__main__":
    main()
