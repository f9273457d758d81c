"""Named starting shapes that can replace the random seed."""

from typing import Dict, List, Tuple, Optional

from .grid import Grid


class Pattern:
    """A named set of live cells, given as (row, column) offsets."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, column) offsets of living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_row: int = 0, offset_col: int = 0) -> None:
        """Clear the grid and stamp this pattern onto it.

        Cells that land outside the grid are dropped.

        Args:
            grid: Target grid
            offset_row: Vertical offset
            offset_col: Horizontal offset
        """
        grid.clear()
        for row, col in self.cells:
            try:
                grid.set_cell(row + offset_row, col + offset_col, True)
            except IndexError:
                continue

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box as (min_row, min_col, max_row, max_col)."""
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (height, width)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, {len(self.cells)} cells)"


class PatternLibrary:
    """Built-in collection of well-known patterns."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive"],
        "Oscillators": ["Blinker", "Toad"],
        "Spaceships": ["Glider"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still lifes
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, ignoring case.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        pattern = self._patterns.get(name)
        if pattern is not None:
            return pattern

        for key, candidate in self._patterns.items():
            if key.lower() == name.lower():
                return candidate
        return None

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get pattern names grouped by category; unknown names go to Custom."""
        categories = {cat: list(names) for cat, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        builtin = {name for names in self.CATEGORIES.values() for name in names}
        for name in self._patterns:
            if name not in builtin:
                categories["Custom"].append(name)

        return {cat: names for cat, names in categories.items() if names}
