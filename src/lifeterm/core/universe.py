"""Fixed-size universe of cells for Conway's Game of Life."""

from enum import IntEnum
from typing import List, Tuple
import logging

import numpy as np
import torch
import torch.nn.functional as F

LOG = logging.getLogger(__name__)

DEFAULT_ROWS = 18
DEFAULT_COLS = 18

ALIVE_GLYPH = "[x]"
DEAD_GLYPH = "[ ]"

# Run convolutions single-threaded
torch.set_num_threads(1)

# 3x3 neighborhood without the center cell
_NEIGHBOR_KERNEL = torch.tensor(
    [[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32
).unsqueeze(0).unsqueeze(0)


class Cell(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


def neighbor_range(i: int, n: int) -> range:
    """Indices adjacent to ``i`` on an axis of length ``n``, including ``i``.

    The span is ``[i - 1, i + 1]`` clamped into ``[0, n - 1]``; edges do not
    wrap around.

    Args:
        i: Coordinate on the axis
        n: Axis length

    Returns:
        Inclusive span as a range

    Raises:
        ValueError: If ``n`` is not positive or ``i`` is outside ``[0, n)``
    """
    if n <= 0:
        raise ValueError(f"Axis length must be positive, got {n}")
    if not 0 <= i < n:
        raise ValueError(f"Coordinate {i} outside axis of length {n}")

    return range(max(i - 1, 0), min(i + 1, n - 1) + 1)


def next_state(cell: Cell, alive_neighbors: int) -> Cell:
    """Apply the B3/S23 rule to one cell.

    Args:
        cell: Current state
        alive_neighbors: Number of living neighbors (0-8)

    Returns:
        State in the next generation
    """
    if cell == Cell.ALIVE:
        return Cell.ALIVE if alive_neighbors in (2, 3) else Cell.DEAD
    return Cell.ALIVE if alive_neighbors == 3 else Cell.DEAD


class Universe:
    """A ``rows x cols`` grid of cells.

    The grid is allocated once and never resized. ``tick`` never mutates the
    receiver; it builds and returns the next generation as a new Universe.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> None:
        """Initialize an all-dead universe.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is not positive
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Universe dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self._cells = np.zeros((rows, cols), dtype=np.int8)

    @classmethod
    def new_empty(cls, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS) -> "Universe":
        """Create a universe with every cell dead."""
        return cls(rows, cols)

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def cells(self) -> np.ndarray:
        """Copy of the cell array, indexed [row, col]."""
        return self._cells.copy()

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) out of bounds for {self.rows}x{self.cols} universe"
            )

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return Cell(int(self._cells[row, col]))

    def set_cell(self, row: int, col: int, cell: Cell) -> None:
        """Overwrite the state of a cell.

        Args:
            row: Row index
            col: Column index
            cell: New state

        Raises:
            IndexError: If coordinates are out of bounds. Negative indices are
                rejected too rather than counted from the end.
        """
        self._check_bounds(row, col)
        self._cells[row, col] = Cell(cell)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a single cell.

        Returns:
            Number of living neighbors (0-8)
        """
        self._check_bounds(row, col)

        count = 0
        for r in neighbor_range(row, self.rows):
            for c in neighbor_range(col, self.cols):
                if (r, c) != (row, col):
                    count += int(self._cells[r, c])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a torch convolution.

        Zero padding leaves edge and corner cells with fewer neighbors, the
        same clamped behavior as ``count_neighbors``.

        Returns:
            Array of shape (rows, cols) with neighbor counts
        """
        board = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(board, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def tick(self) -> "Universe":
        """Compute the next generation.

        Returns:
            New Universe; this one is left unmodified
        """
        counts = self.count_all_neighbors()
        alive = self._cells == Cell.ALIVE

        survive = alive & ((counts == 2) | (counts == 3))
        birth = ~alive & (counts == 3)

        successor = Universe(self.rows, self.cols)
        successor._cells[survive | birth] = Cell.ALIVE

        LOG.debug("tick: population %d -> %d", self.population, successor.population)
        return successor

    def alive_cells(self) -> List[Tuple[int, int]]:
        """Coordinates of living cells in row-major order."""
        rows, cols = np.nonzero(self._cells)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def copy(self) -> "Universe":
        """Return an independent copy of this universe."""
        duplicate = Universe(self.rows, self.cols)
        duplicate._cells[:] = self._cells
        return duplicate

    def render(self) -> str:
        """Render as text, one line per row, each cell a 3-character glyph."""
        lines = []
        for row in self._cells:
            lines.append("".join(ALIVE_GLYPH if value else DEAD_GLYPH for value in row))
            lines.append("\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Universe(rows={self.rows}, cols={self.cols}, population={self.population})"

    def __eq__(self, other: object) -> bool:
        """Check if two universes hold the same cells."""
        if not isinstance(other, Universe):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)
