#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifeboard package."""
    # Random 10x10 board, 30% seeded
    game = GameOfLife.new(10, 10, 30, seed=2024)
    print(game.render())
    print(f"Generation {game.generation} : {game.count_alive_cells()} alive cells")

    final_generation, reason = game.run_until_extinct(max_generations=200)
    print(f"Stopped at generation {final_generation} ({reason})")
    print()

    # A toad oscillating in the middle of a 6x6 board
    grid = Grid(6, 6)
    PatternLibrary().get_pattern("Toad").apply_to_grid(grid, offset_row=2, offset_col=1)
    game = GameOfLife(grid)

    for _ in range(3):
        print(f"Generation {game.generation}:")
        print(game.render())
        game.next_generation()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
