"""Command line entry point: solve a maze file and print the annotated grid."""

import argparse
import logging
import sys
from typing import Optional

from maze_solver.config import get_settings
from maze_solver.core import (
    SOLUTION_HEADER,
    MazeLoadError,
    MazeParseError,
    MazeSolver,
    load_maze_file,
)

logger = logging.getLogger("maze_solver")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-solver",
        description="Solve a text maze moving only south and east.",
    )
    parser.add_argument("input_file", help="Path to the maze file")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject cell symbols other than '_', '*' and '$'",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Configure stderr logging for command line use."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    strict = get_settings().strict_symbols if args.strict is None else args.strict

    try:
        grid = load_maze_file(args.input_file, strict=strict)
    except MazeLoadError as e:
        logger.debug(f"Load failed: {e.__cause__!r}")
        print(str(e), file=sys.stderr)
        return 1
    except MazeParseError as e:
        print(f"Invalid maze in {args.input_file}: {e}", file=sys.stderr)
        return 1

    solver = MazeSolver(grid)
    solver.solve()
    result = solver.result()

    print(result.message)
    print(SOLUTION_HEADER)
    print(solver.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
