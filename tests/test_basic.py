"""Basic tests for the lifeboard package."""

import pytest

from lifeboard import Cell, Grid, GameOfLife, InvalidArgument, PatternLibrary


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.rows == 10
    assert grid.columns == 10
    assert grid.get_cell(0, 0) is False

    grid.set_cell(5, 5, True)
    assert grid[5, 5] == Cell(True)


def test_game_creation():
    """Test basic game creation."""
    game = GameOfLife.new(10, 10, 30)
    assert game.generation == 1
    assert 0 <= game.count_alive_cells() <= 30


def test_invalid_percentage():
    """Test the seed percentage is validated."""
    with pytest.raises(InvalidArgument):
        GameOfLife.new(10, 10, 120)


def test_pattern_library():
    """Test pattern library has some patterns."""
    assert "Glider" in PatternLibrary().list_patterns()


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    game = GameOfLife(grid)

    grid.set_cell(2, 1, True)
    grid.set_cell(2, 2, True)
    grid.set_cell(2, 3, True)

    game.next_generation()
    assert game.count_alive_cells() == 3
    assert game.grid.get_cell(1, 2) is True
    assert game.grid.get_cell(2, 2) is True
    assert game.grid.get_cell(3, 2) is True

    game.next_generation()
    assert game.count_alive_cells() == 3
    assert game.grid.get_cell(2, 1) is True
    assert game.grid.get_cell(2, 2) is True
    assert game.grid.get_cell(2, 3) is True
    assert game.generation == 3
