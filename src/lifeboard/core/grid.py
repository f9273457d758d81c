"""Grid data structure for the Game of Life board."""

from dataclasses import dataclass
import numbers
from typing import Iterable, Iterator, List, Tuple
import numpy as np
import torch
import torch.nn.functional as F


ALIVE_GLYPH = "x"
DEAD_GLYPH = " "


class InvalidArgument(ValueError):
    """Raised when a board is constructed with out-of-range parameters."""


@dataclass(frozen=True)
class Cell:
    """State of a single grid position."""

    alive: bool = False


class Grid:
    """A fixed-size rectangular grid of cells.

    Cells are stored in a numpy boolean array of shape ``(rows, columns)``
    and addressed as ``(row, column)``. Edges are bounded: positions outside
    the grid do not exist and are never wrapped around.
    """

    def __init__(self, rows: int, columns: int) -> None:
        """Initialize an all-dead grid.

        Args:
            rows: Number of rows
            columns: Number of columns

        Raises:
            InvalidArgument: If either dimension is not a positive integer
        """
        if not (_is_positive_int(rows) and _is_positive_int(columns)):
            raise InvalidArgument(f"Grid dimensions must be positive integers, got {rows!r}x{columns!r}")

        self._rows = rows
        self._columns = columns
        self._cells = np.zeros((rows, columns), dtype=bool)

        # Single-threaded, there is only ever one caller
        torch.set_num_threads(1)

        # Reused for every whole-grid neighbour count
        self._torch_input = torch.zeros(1, 1, rows, columns, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def from_rows(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from text rows.

        Each character is a cell: ``x`` (or ``X``/``*``/``O``) marks a live
        cell, anything else a dead one. All rows must have the same length.

        Args:
            lines: Row strings, top to bottom

        Returns:
            New Grid instance

        Raises:
            ValueError: If the rows are empty or ragged
        """
        lines = list(lines)
        if not lines or not lines[0]:
            raise ValueError("Cannot build a grid from empty rows")
        if any(len(line) != len(lines[0]) for line in lines):
            raise ValueError("All rows must have the same length")

        grid = cls(len(lines), len(lines[0]))
        for row, line in enumerate(lines):
            for col, char in enumerate(line):
                if char in "xX*O":
                    grid.set_cell(row, col, True)
        return grid

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, columns)."""
        return (self._rows, self._columns)

    @property
    def cells(self) -> np.ndarray:
        """Get the current cell array."""
        return self._cells

    @cells.setter
    def cells(self, value: np.ndarray) -> None:
        value = np.array(value, dtype=bool)
        if value.shape != self.shape:
            raise ValueError(f"Cell array shape {value.shape} doesn't match grid {self.shape}")
        self._cells = value

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def set_cell(self, row: int, col: int, alive: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self._cells[row, col] = alive

    def toggle_cell(self, row: int, col: int) -> bool:
        """Toggle the state of a cell and return its new state."""
        new_state = not self.get_cell(row, col)
        self.set_cell(row, col, new_state)
        return new_state

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        row, col = position
        return Cell(self.get_cell(row, col))

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(False)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def living_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (row, column) coordinates of living cells in row-major order."""
        for row, col in zip(*np.nonzero(self._cells)):
            yield (int(row), int(col))

    def count_alive_neighbours(self, row: int, col: int) -> int:
        """Count living neighbours of a cell.

        Neighbours outside the grid are absent, not wrapped.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbours (0-8)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)

        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, col + dc
                if 0 <= nr < self._rows and 0 <= nc < self._columns and self._cells[nr, nc]:
                    count += 1

        return count

    def count_all_neighbours(self) -> np.ndarray:
        """Count living neighbours for every cell at once.

        Uses a 3x3 convolution with zero padding, so cells beyond the edge
        count as dead, matching count_alive_neighbours().

        Returns:
            Integer array of shape (rows, columns) with neighbour counts
        """
        self._torch_input[0, 0] = torch.from_numpy(self._cells.astype(np.float32))
        neighbours = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbours[0, 0].numpy().astype(np.int8)

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested list of booleans, row by row."""
        return self._cells.tolist()

    def from_list(self, data: list) -> None:
        """Load grid from nested list.

        Args:
            data: 2D list with cell states, row by row

        Raises:
            ValueError: If data dimensions don't match grid
        """
        arr = np.array(data, dtype=bool)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")

        self._cells[:] = arr

    def render(self) -> str:
        """Render the grid as a bordered text board.

        A rule of dashes precedes the board and follows every row; each cell
        is drawn as ``x`` (alive) or a space (dead) between pipes.
        """
        separator = "- " * (self._columns + 1)
        lines = [separator]
        for row in self._cells:
            cells = "|".join(ALIVE_GLYPH if alive else DEAD_GLYPH for alive in row)
            lines.append(f"|{cells}|")
            lines.append(separator)
        return "\n".join(lines) + "\n"

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, columns={self._columns}, population={self.population})"


def _is_positive_int(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool) and value > 0
