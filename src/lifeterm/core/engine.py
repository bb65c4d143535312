"""Conway's Game of Life rules and generation stepping."""

from typing import Optional

import numpy as np

from .config import LifeConfig
from .grid import Grid
from .patterns import PatternLibrary


def next_state(alive: bool, neighbors: int) -> bool:
    """Apply Conway's rule to a single cell.

    Exactly 3 neighbors gives a live cell whether or not it was alive
    before; a live cell with 2 neighbors survives; everything else is dead.
    """
    return neighbors == 3 or (alive and neighbors == 2)


def live_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count the live toroidal neighbors of (row, col), in [0, 8]."""
    return grid.live_neighbors(row, col)


def advance(grid: Grid) -> Grid:
    """Compute the next generation of every cell and make it current.

    Neighbor counts are taken from the current buffer before anything is
    written, and the result goes into the back buffer, so no cell sees
    another cell's new value.

    Args:
        grid: Grid to advance

    Returns:
        The same grid, now holding the next generation
    """
    neighbor_counts = grid.count_all_neighbors()
    out = grid.back_buffer

    # Birth or survival on 3, survival on 2
    np.logical_or(neighbor_counts == 3, grid.cells & (neighbor_counts == 2), out=out)

    grid.swap_buffers()
    return grid


class GameOfLife:
    """Game of Life simulation state: a grid plus its generation counter.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @classmethod
    def from_config(cls, config: LifeConfig, library: Optional[PatternLibrary] = None) -> "GameOfLife":
        """Create a game with the configured pattern seeded into a fresh grid.

        Raises:
            ValueError: If the configuration is invalid
        """
        library = library or PatternLibrary()
        config.check(library)

        grid = Grid(config.size)
        library.get_pattern(config.pattern).apply_to_grid(grid, config.anchor())
        return cls(grid)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.count_live()

    def live_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell."""
        return live_neighbors(self.grid, row, col)

    def advance(self) -> None:
        """Advance the simulation by one generation."""
        advance(self.grid)
        self._generation += 1
