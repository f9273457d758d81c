"""Conway's Game of Life on a bounded grid, animated in the terminal."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid, InvalidArgument
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "InvalidArgument", "GameOfLife", "Pattern", "PatternLibrary"]
