"""Conway's Game of Life simulation engine."""

from typing import Deque, Dict, Optional, Tuple
from collections import deque
import numpy as np

from .grid import Grid, InvalidArgument


class GameOfLife:
    """Advances a bounded grid through Game of Life generations.

    Implements the classic rules:
    - Cell with fewer than 2 or more than 3 live neighbours dies
    - Cell with exactly 3 live neighbours is alive in the next generation
    - Cell with exactly 2 live neighbours keeps its state
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The grid to simulate; its cells are replaced on every step
        """
        self.grid = grid
        self._generation = 1
        # First entry is recorded lazily on the first step
        self._population_history: Deque[int] = deque(maxlen=100)

    @classmethod
    def new(
        cls,
        rows: int,
        columns: int,
        live_percentage: float,
        seed: Optional[int] = None,
        replace: bool = True,
    ) -> "GameOfLife":
        """Create a game on a fresh grid with a random initial population.

        Args:
            rows: Number of rows (positive)
            columns: Number of columns (positive)
            live_percentage: Share of the grid to seed, 0-100
            seed: Optional random seed for reproducible boards
            replace: Draw positions with replacement (see randomize_cells)

        Returns:
            New GameOfLife at generation 1

        Raises:
            InvalidArgument: If the dimensions or the percentage are out of range
        """
        _check_percentage(live_percentage)
        game = cls(Grid(rows, columns))
        game.randomize_cells(live_percentage, seed=seed, replace=replace)
        return game

    @property
    def generation(self) -> int:
        """Current generation number, starting at 1."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """Population counts of the most recent generations."""
        if not self._population_history:
            return [self.population]
        return list(self._population_history)

    def randomize_cells(
        self, live_percentage: float, seed: Optional[int] = None, replace: bool = True
    ) -> None:
        """Mark a percentage of the grid alive at random positions.

        ``floor(rows * columns * live_percentage / 100)`` positions are drawn.
        With ``replace=True`` each draw picks any position, so repeated draws
        land on an already-live cell and the realized population can fall
        short of the target. ``replace=False`` samples distinct positions and
        hits the target exactly. Cells already alive stay alive.

        Args:
            live_percentage: Share of the grid to seed, 0-100
            seed: Optional random seed
            replace: Whether positions are drawn with replacement

        Raises:
            InvalidArgument: If live_percentage is outside [0, 100]
        """
        _check_percentage(live_percentage)

        rows, columns = self.grid.shape
        target = int(rows * columns * live_percentage // 100)
        rng = np.random.default_rng(seed)

        cells = self.grid.cells
        if replace:
            row_idx = rng.integers(0, rows, size=target)
            col_idx = rng.integers(0, columns, size=target)
        else:
            flat = rng.choice(rows * columns, size=target, replace=False)
            row_idx, col_idx = np.unravel_index(flat, (rows, columns))
        cells[row_idx, col_idx] = True

        self._population_history.clear()

    def count_alive_neighbours(self, row: int, col: int) -> int:
        """Count living neighbours of a cell (0-8), clipped at the edges."""
        return self.grid.count_alive_neighbours(row, col)

    def count_alive_cells(self) -> int:
        """Total number of living cells."""
        return self.grid.population

    def next_generation(self) -> None:
        """Advance the simulation by one generation.

        The next state is computed from the current cells as a whole and then
        swapped in, so no cell sees a neighbour's updated state.
        """
        if not self._population_history:
            self._update_population_history()

        neighbours = self.grid.count_all_neighbours()
        current = self.grid.cells

        # Exactly 2 neighbours keeps the current state
        next_cells = np.where(neighbours == 3, True, np.where(neighbours == 2, current, False))

        self.grid.cells = next_cells
        self._generation += 1
        self._update_population_history()

    def render(self) -> str:
        """Render the current grid as text."""
        return self.grid.render()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def run_until_extinct(self, max_generations: Optional[int] = None) -> Tuple[int, str]:
        """Advance until every cell is dead.

        Args:
            max_generations: Optional cap on the number of advances

        Returns:
            Tuple of (final_generation, reason) where reason is
            'extinction' or 'max_generations'
        """
        advanced = 0
        while self.count_alive_cells() > 0:
            if max_generations is not None and advanced >= max_generations:
                return self._generation, "max_generations"
            self.next_generation()
            advanced += 1

        return self._generation, "extinction"

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and grid information
        """
        rows, columns = self.grid.shape
        return {
            "generation": self._generation,
            "population": self.population,
            "population_history": self.population_history,
            "grid_size": self.grid.shape,
            "population_density": self.population / (rows * columns),
        }


def _check_percentage(live_percentage: float) -> None:
    if not 0 <= live_percentage <= 100:
        raise InvalidArgument(f"Live percentage must be between 0 and 100, got {live_percentage}")
