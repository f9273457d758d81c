"""Console frontend: animates a Game of Life board in the terminal."""

import argparse
import sys
import time
from typing import Optional, Tuple

from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary


DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 10
DEFAULT_LIVE_PERCENTAGE = 30
DEFAULT_DELAY_MS = 1000

CLEAR_SCREEN = "\x1b[2J"


def clear_console() -> None:
    """Clear the terminal with an ANSI erase-display sequence."""
    print(CLEAR_SCREEN, end="", flush=True)


class ConsoleGameOfLife:
    """Runs Game of Life boards as a text animation."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def create_game(
        self,
        rows: int,
        columns: int,
        live_percentage: float,
        seed: Optional[int] = None,
        exact: bool = False,
        pattern: Optional[str] = None,
        pattern_row: Optional[int] = None,
        pattern_col: Optional[int] = None,
        verbose: bool = False,
    ) -> GameOfLife:
        """Build the starting board.

        Args:
            rows: Grid rows
            columns: Grid columns
            live_percentage: Random seed percentage (0-100), ignored for patterns
            seed: Random seed for reproducible boards
            exact: Sample positions without replacement
            pattern: Optional pattern name to place instead of random cells
            pattern_row: Row offset for the pattern (centred when omitted)
            pattern_col: Column offset for the pattern (centred when omitted)
            verbose: Print setup details

        Returns:
            GameOfLife at generation 1
        """
        if verbose:
            print(f"Initializing {rows}x{columns} grid")

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern:
                height, width = loaded_pattern.get_size()
                if pattern_row is None:
                    pattern_row = max(0, (rows - height) // 2)
                if pattern_col is None:
                    pattern_col = max(0, (columns - width) // 2)

                if verbose:
                    print(f"Placing pattern '{loaded_pattern.name}' at ({pattern_row}, {pattern_col})")
                grid = Grid(rows, columns)
                loaded_pattern.apply_to_grid(grid, pattern_row, pattern_col)
                game = GameOfLife(grid)
                if verbose:
                    print(f"Initial population: {game.count_alive_cells()} cells")
                return game

            print(f"Warning: Pattern '{pattern}' not found, using random population")

        if verbose:
            method = "without" if exact else "with"
            print(f"Seeding {live_percentage}% of cells at random ({method} replacement)")

        game = GameOfLife.new(rows, columns, live_percentage, seed=seed, replace=not exact)

        if verbose:
            print(f"Initial population: {game.count_alive_cells()} cells")

        return game

    def run(
        self,
        game: GameOfLife,
        delay_ms: int = DEFAULT_DELAY_MS,
        max_generations: Optional[int] = None,
        clear: bool = True,
    ) -> Tuple[int, str]:
        """Animate the board until every cell is dead.

        Each frame prints the board and a status line, advances one
        generation, pauses, then clears the screen.

        Args:
            game: Game to animate
            delay_ms: Pause between frames in milliseconds
            max_generations: Optional cap on the number of frames
            clear: Clear the console after each frame

        Returns:
            Tuple of (final_generation, reason) where reason is
            'extinction' or 'max_generations'
        """
        frames = 0
        while game.count_alive_cells() > 0:
            if max_generations is not None and frames >= max_generations:
                return game.generation, "max_generations"

            print(game.render())
            print(f"Generation {game.generation} : {game.count_alive_cells()} alive cells")

            game.next_generation()
            frames += 1

            time.sleep(delay_ms / 1000)
            if clear:
                clear_console()

        return game.generation, "extinction"

    def run_simulation(
        self,
        rows: int,
        columns: int,
        live_percentage: float,
        delay_ms: int = DEFAULT_DELAY_MS,
        max_generations: Optional[int] = None,
        seed: Optional[int] = None,
        exact: bool = False,
        pattern: Optional[str] = None,
        pattern_row: Optional[int] = None,
        pattern_col: Optional[int] = None,
        clear: bool = True,
        verbose: bool = False,
    ) -> Tuple[int, str, dict]:
        """Create a board and animate it.

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        game = self.create_game(
            rows,
            columns,
            live_percentage,
            seed=seed,
            exact=exact,
            pattern=pattern,
            pattern_row=pattern_row,
            pattern_col=pattern_col,
            verbose=verbose,
        )
        initial_population = game.count_alive_cells()

        final_generation, reason = self.run(game, delay_ms, max_generations, clear)

        stats = game.get_statistics()
        stats["initial_population"] = initial_population
        return final_generation, reason, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                height, width = pattern.get_size()
                print(f"  {name}: {height}x{width}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifeboard",
        description="Animate Conway's Game of Life in the terminal until every cell dies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 10x10 board, 30% seeded, one frame per second
  lifeboard

  # Larger, faster board with a reproducible seed
  lifeboard -r 20 -c 40 -p 25 -d 200 --seed 7

  # Send a glider toward the far corner
  lifeboard --pattern Glider --pattern-row 0 --pattern-col 0 -d 300
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=DEFAULT_ROWS, help=f"Grid rows (default: {DEFAULT_ROWS})"
    )

    parser.add_argument(
        "-c",
        "--columns",
        type=int,
        default=DEFAULT_COLUMNS,
        help=f"Grid columns (default: {DEFAULT_COLUMNS})",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=DEFAULT_LIVE_PERCENTAGE,
        help=f"Percentage of cells seeded alive, 0-100 (default: {DEFAULT_LIVE_PERCENTAGE})",
    )

    parser.add_argument("--seed", type=int, help="Random seed for a reproducible board")

    parser.add_argument(
        "--exact",
        action="store_true",
        help="Seed exactly the requested number of cells (sample without replacement)",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Place a named pattern instead of random cells",
    )

    parser.add_argument("--pattern-row", type=int, help="Row offset for the pattern (default: centred)")

    parser.add_argument("--pattern-col", type=int, help="Column offset for the pattern (default: centred)")

    # Animation configuration
    parser.add_argument(
        "-d",
        "--delay",
        type=int,
        default=DEFAULT_DELAY_MS,
        help=f"Pause between generations in milliseconds (default: {DEFAULT_DELAY_MS})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=0,
        help="Stop after this many generations, 0 for no limit (default: 0)",
    )

    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Keep previous frames instead of clearing the screen",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details and final statistics",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.rows <= 0:
        errors.append("Rows must be positive")

    if args.columns <= 0:
        errors.append("Columns must be positive")

    if not 0 <= args.population <= 100:
        errors.append("Population must be between 0 and 100")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.max_generations < 0:
        errors.append("Max generations must be non-negative")

    if getattr(args, "pattern_row", None) is not None and args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if getattr(args, "pattern_col", None) is not None and args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display."""
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    else:
        return f"Unknown reason: {reason}"


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation ended at generation {final_generation}")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")


def main() -> int:
    """Main entry point for the console animation.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    console = ConsoleGameOfLife()

    if args.list_patterns:
        console.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and not console.pattern_library.get_pattern(args.pattern):
        available = console.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        return 1

    try:
        final_generation, reason, stats = console.run_simulation(
            rows=args.rows,
            columns=args.columns,
            live_percentage=args.population,
            delay_ms=args.delay,
            max_generations=args.max_generations or None,
            seed=args.seed,
            exact=args.exact,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            clear=not args.no_clear,
            verbose=args.verbose,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
