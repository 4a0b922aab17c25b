"""Command-line interface for sparse Game of Life."""

import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

from ..core.codec import EMPTY_BOARD, parse, render
from ..core.counting import COUNTERS
from ..core.field import Field
from ..core.patterns import PatternLibrary
from ..core.simulation import Simulation, SimulationConfig

logger = logging.getLogger(__name__)


class CLILife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def load_board(self, path: str) -> Field:
        """Read a text board from a file, or from stdin when path is '-'.

        Raises:
            OSError: If the file cannot be read
        """
        if path == "-":
            text = sys.stdin.read()
        else:
            with open(path, "r") as f:
                text = f.read()

        field = parse(text)
        logger.info("Loaded board from %s with %d live cells", path, field.size())
        return field

    def run_simulation(
        self,
        field: Field,
        max_generations: int,
        counter: str = "sparse",
        generations: Optional[int] = None,
        show_board: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a Game of Life simulation.

        Args:
            field: Starting generation
            max_generations: Maximum generations when running until stable
            counter: Neighbor counting strategy name
            generations: Advance exactly this many generations instead of
                running until stable
            show_board: Show boards while running

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        config = SimulationConfig(max_generations=max_generations, counter=counter)
        simulation = Simulation(field, config)
        initial_population = simulation.population

        logger.info("Initial population: %d cells", initial_population)

        if show_board:
            print("\nInitial board:")
            print(self._format_board(simulation.field))

        start_time = time.time()

        if generations is None:
            logger.info("Running simulation (max %d generations)...", max_generations)
            final_generation, reason = simulation.run_until_stable()
        else:
            logger.info("Running %d generations...", generations)
            for _ in range(generations):
                simulation.step()
                if show_board:
                    print(f"\nGeneration {simulation.generation}:")
                    print(self._format_board(simulation.field))
            final_generation, reason = simulation.generation, "generations"

        duration = time.time() - start_time

        stats = simulation.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = final_generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        if show_board and generations is None:
            print(f"\nFinal board (generation {final_generation}):")
            print(self._format_board(simulation.field))

        return final_generation, reason, stats

    def _format_board(self, field: Field, max_size: int = 80) -> str:
        """Format a field for display, refusing boards that are too large.

        Args:
            field: Field to format
            max_size: Maximum rendered dimension

        Returns:
            Rendered board text
        """
        bbox = field.bounding_box()
        if bbox is not None:
            rows = bbox[2] - bbox[0] + 1
            cols = bbox[3] - bbox[1] + 1
            if rows > max_size or cols > max_size:
                return f"Board too large to display ({rows}x{cols})"

        return render(field)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {pattern.population} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on an unbounded board from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a board file until it stabilises
  sparselife-cli --board board.txt

  # Show a glider for 8 generations
  sparselife-cli --pattern Glider --generations 8 --show-board

  # Read a board from stdin using the convolution counter
  echo "XXX" | sparselife-cli --board - --counter dense --verbose

  # List available patterns
  sparselife-cli --list-patterns
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-b", "--board", type=str, help="Text board file to load ('-' for stdin)")

    source.add_argument("--pattern", type=str, help="Load a named pattern (use --list-patterns to see options)")

    parser.add_argument("--offset-x", type=int, default=0, help="Row offset for the board or pattern (default: 0)")

    parser.add_argument("--offset-y", type=int, default=0, help="Column offset for the board or pattern (default: 0)")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    # Simulation parameters
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=None,
        help="Advance exactly this many generations instead of running until stable",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=10000,
        help="Maximum generations when running until stable (default: 10000)",
    )

    parser.add_argument(
        "-c",
        "--counter",
        choices=sorted(COUNTERS),
        default="sparse",
        help="Neighbor counting strategy (default: sparse)",
    )

    # Output options
    parser.add_argument("-v", "--verbose", action="store_true", help="Show detailed progress and statistics")

    parser.add_argument("-g", "--show-board", action="store_true", help="Show boards while running")

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason from Simulation.run_until_stable, or 'generations'
        stats: Statistics dictionary

    Returns:
        Formatted reason string
    """
    if reason == "extinction":
        return "Extinction - all cells died"
    elif reason == "cycle":
        cycle_len = stats.get("cycle_length", 0)
        cycle_start = stats.get("cycle_start_generation", 0)
        return f"Cycle detected - length {cycle_len}, started at generation {cycle_start}"
    elif reason == "max_generations":
        return f"Maximum generations reached ({stats.get('generation', 0)})"
    elif reason == "generations":
        return f"Requested generations completed ({stats.get('generation', 0)})"
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
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        print(f"  Counter: {stats['counter']}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
            print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(f"  Bounding box: ({bbox[0]}, {bbox[1]}) to ({bbox[2]}, {bbox[3]}) [{bbox_size[0]}x{bbox_size[1]}]")
        else:
            print(f"  Bounding box: {EMPTY_BOARD}")
    else:
        initial_pop = stats["initial_population"]
        final_pop = stats["population"]
        duration = stats.get("duration_seconds", 0)
        speed = stats.get("generations_per_second", 0)

        print(
            "Population: {} → {}, "
            "Duration: {:.3f}s, "
            "Speed: {:.0f} gen/s".format(initial_pop, final_pop, duration, speed)
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if not args.board and not args.pattern:
        errors.append("Either --board or --pattern is required")

    if args.generations is None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.generations is not None and args.generations < 0:
        errors.append("Generations must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    cli = CLILife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    try:
        if args.board:
            try:
                field = cli.load_board(args.board)
            except OSError as e:
                print(f"Error: Cannot read board '{args.board}': {e}")
                return 1
            if args.offset_x or args.offset_y:
                field = field.translate(args.offset_x, args.offset_y)
        else:
            pattern = cli.pattern_library.get_pattern(args.pattern)
            if not pattern:
                available = cli.pattern_library.list_patterns()
                print(f"Error: Pattern '{args.pattern}' not found")
                print(f"Available patterns: {', '.join(available)}")
                print("Use --list-patterns to see detailed information")
                return 1

            logger.info("Loading pattern '%s' at (%d, %d)", args.pattern, args.offset_x, args.offset_y)
            field = pattern.to_field(args.offset_x, args.offset_y)

        final_generation, reason, stats = cli.run_simulation(
            field=field,
            max_generations=args.max_generations,
            counter=args.counter,
            generations=args.generations,
            show_board=args.show_board,
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
