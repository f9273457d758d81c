"""Core simulation logic."""

from .grid import Cell, Grid, InvalidArgument
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "InvalidArgument", "GameOfLife", "Pattern", "PatternLibrary"]
