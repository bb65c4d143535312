"""Square toroidal grid for the Game of Life."""

from typing import Iterable, Set, Tuple
import numpy as np
import torch
import torch.nn.functional as F


class Grid:
    """A fixed-size square grid of live/dead cells with wraparound edges.

    Cells are stored in a numpy boolean array indexed ``[row, col]``. Every
    coordinate is reduced modulo the grid size, so there is no out-of-bounds
    access. The grid keeps a second buffer of the same shape so the engine
    can write the next generation without touching the current one and then
    swap the two.
    """

    def __init__(self, size: int) -> None:
        """Create an all-dead grid.

        Args:
            size: Number of rows and columns

        Raises:
            ValueError: If size is not a positive integer
        """
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")

        self.size = int(size)
        self._cells = np.zeros((self.size, self.size), dtype=bool)
        self._back = np.zeros((self.size, self.size), dtype=bool)

        # Single-threaded simulation
        torch.set_num_threads(1)

        self._torch_input = torch.zeros(1, 1, self.size, self.size, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @property
    def back_buffer(self) -> np.ndarray:
        """Scratch array the next generation is written into."""
        return self._back

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, cols)."""
        return (self.size, self.size)

    def swap_buffers(self) -> None:
        """Make the back buffer current."""
        self._cells, self._back = self._back, self._cells

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate, wrapped modulo size
            col: Column coordinate, wrapped modulo size

        Returns:
            True if cell is alive, False if dead
        """
        return bool(self._cells[row % self.size, col % self.size])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate, wrapped modulo size
            col: Column coordinate, wrapped modulo size
            alive: Whether the cell should be alive
        """
        self._cells[row % self.size, col % self.size] = bool(alive)

    def seed(self, cells: Iterable[Tuple[int, int]], offset: Tuple[int, int] = (0, 0)) -> None:
        """Set cells live, anchored at an offset.

        Other cells are left as they are.

        Args:
            cells: (row, col) coordinates relative to the offset
            offset: (row, col) anchor added to every coordinate
        """
        off_row, off_col = offset
        for row, col in cells:
            self.set_cell(row + off_row, col + off_col, True)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    def count_live(self) -> int:
        """Count living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return self.count_live()

    def live_cells(self) -> Set[Tuple[int, int]]:
        """Get coordinates of all living cells."""
        rows, cols = np.nonzero(self._cells)
        return {(int(r), int(c)) for r, c in zip(rows, cols)}

    def live_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue

                nr = (row + dr + self.size) % self.size
                nc = (col + dc + self.size) % self.size
                if self._cells[nr, nc]:
                    count += 1

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a circularly padded convolution.

        Returns:
            2D int array with the neighbor count of each cell
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))

        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)

        return neighbors[0, 0].numpy().astype(np.int8)

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        other = Grid(self.size)
        other._cells[:] = self._cells
        return other

    def to_text(self, live: str = "X", dead: str = ".") -> str:
        """Render the cells as lines of glyphs, one line per row."""
        return "\n".join("".join(live if cell else dead for cell in row) for row in self._cells)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.size == other.size and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as 'X' and dead as '.'."""
        return self.to_text()
