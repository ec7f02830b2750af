"""Terminal frontend: redraws the universe in place at a fixed pace."""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, TextIO

from ..core.patterns import PatternLibrary
from ..core.simulation import Simulation, SimulationConfig

LOG = logging.getLogger(__name__)

# Clear the screen and move the cursor to the top-left corner
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class TerminalGameOfLife:
    """Draws successive generations to a terminal."""

    def __init__(
        self,
        config: SimulationConfig,
        stream: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
        library: Optional[PatternLibrary] = None,
    ) -> None:
        """Initialize the frontend.

        Args:
            config: Universe size, seed and pacing
            stream: Output stream (defaults to stdout)
            sleep: Delay function called between frames (defaults to time.sleep)
            library: Pattern source for seeding

        Raises:
            ValueError: If the seed pattern is unknown
            IndexError: If the seed pattern does not fit
        """
        self.config = config
        self.stream = stream or sys.stdout
        self.sleep = sleep or time.sleep
        self.simulation = Simulation.from_config(config, library)

    def draw(self) -> None:
        """Write one frame: clear the screen, then the current generation."""
        self.stream.write(CLEAR_SCREEN)
        self.stream.write(self.simulation.universe.render())
        self.stream.flush()

    def run(self) -> int:
        """Draw, advance and wait, forever or until max_generations frames.

        Returns:
            Number of frames drawn
        """
        frames = 0
        limit = self.config.max_generations

        while limit is None or frames < limit:
            self.draw()
            frames += 1
            self.simulation.step()
            LOG.debug(
                "Generation %d, population %d",
                self.simulation.generation, self.simulation.population,
            )
            self.sleep(self.config.interval)

        return frames


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = SimulationConfig()

    parser = argparse.ArgumentParser(
        prog="lifeterm",
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 18x18 blinker, one generation every 0.5s, until Ctrl-C
  lifeterm

  # Glider on a 30x30 universe, faster
  lifeterm -r 30 -c 30 --pattern Glider --pattern-row 1 --pattern-col 1 -i 0.1

  # Stop after 20 generations
  lifeterm -m 20
        """,
    )

    parser.add_argument("-r", "--rows", type=int, default=defaults.rows, help=f"Universe rows (default: {defaults.rows})")

    parser.add_argument("-c", "--cols", type=int, default=defaults.cols, help=f"Universe columns (default: {defaults.cols})")

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=defaults.interval,
        help=f"Seconds between generations (default: {defaults.interval})",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        default=defaults.pattern,
        help=f"Seed pattern (default: {defaults.pattern})",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        default=defaults.row_offset,
        help=f"Row offset for pattern placement (default: {defaults.row_offset})",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        default=defaults.col_offset,
        help=f"Column offset for pattern placement (default: {defaults.col_offset})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List available patterns and exit",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
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

    if args.cols <= 0:
        errors.append("Columns must be positive")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, keeping stdout for frames."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    root = logging.getLogger("lifeterm")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def list_patterns(library: PatternLibrary) -> None:
    """Print available patterns."""
    print("Available patterns:")
    for name in library.list_patterns():
        pattern = library.get_pattern(name)
        rows, cols = pattern.get_size()
        print(f"  {name}: {rows}x{cols}, {len(pattern.cells)} cells")
        if pattern.description:
            print(f"    {pattern.description}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the terminal frontend.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    library = PatternLibrary()

    if args.list_patterns:
        list_patterns(library)
        return 0

    if not validate_args(args):
        return 1

    config = SimulationConfig(
        rows=args.rows,
        cols=args.cols,
        interval=args.interval,
        pattern=args.pattern,
        row_offset=args.pattern_row,
        col_offset=args.pattern_col,
        max_generations=args.max_generations,
    )

    try:
        frontend = TerminalGameOfLife(config, library=library)
    except (ValueError, IndexError) as e:
        print(f"Error: {e}")
        return 1

    try:
        frontend.run()
    except KeyboardInterrupt:
        LOG.debug("Interrupted at generation %d", frontend.simulation.generation)

    return 0


if __name__ == "__main__":
    sys.exit(main())
