"""
Maze Parser for the Southeast Maze Solver.

Loads and validates maze text from strings and files.

Maze Format:
    rows columns
    followed by rows * columns cell symbols in row-major order.

    _ = Open path
    $ = Exit (goal)
    * = Wall

Whitespace between cells is optional: after the two header integers every
non-whitespace character is one cell.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from .errors import MazeLoadError, MazeParseError, MazeValidationError
from .maze_grid import CellType, MazeGrid

logger = logging.getLogger(__name__)

VALID_CHARS = {CellType.OPEN.value, CellType.WALL.value, CellType.EXIT.value}
DIMENSION_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_dimension(token: Optional[str], label: str) -> int:
    if token is None:
        raise MazeParseError(f"Maze header is missing the {label} count")
    if not DIMENSION_PATTERN.fullmatch(token):
        raise MazeParseError(f"Maze {label} count must be an integer, got '{token}'")
    value = int(token)
    if value < 1:
        raise MazeParseError(f"Maze {label} count must be positive, got {value}")
    return value


def _split_header(maze_text: str) -> tuple[int, int, str]:
    if not maze_text or maze_text.isspace():
        raise MazeParseError("Maze text is empty")

    parts = maze_text.split(maxsplit=2)
    rows = _parse_dimension(parts[0], "row")
    columns = _parse_dimension(parts[1] if len(parts) > 1 else None, "column")
    return rows, columns, parts[2] if len(parts) > 2 else ""


def read_maze_dimensions(maze_text: str) -> tuple[int, int]:
    """
    Read the declared (rows, columns) without collecting any cells.

    Raises:
        MazeParseError: If the header is missing or malformed.
    """
    rows, columns, _ = _split_header(maze_text)
    return rows, columns


def parse_maze_text(maze_text: str, strict: bool = False) -> MazeGrid:
    """
    Parse maze text into a grid.

    Args:
        maze_text: Header line "rows columns" followed by cell symbols.
        strict: Reject symbols other than '_', '*' and '$'. Otherwise
            unknown symbols are kept as-is and behave as walls.

    Returns:
        MazeGrid holding the parsed cells.

    Raises:
        MazeParseError: If the header or cell count is wrong, or if strict
            and an unknown symbol is found.
    """
    rows, columns, body = _split_header(maze_text)

    cells = [char for char in body if not char.isspace()]
    expected = rows * columns

    if len(cells) < expected:
        raise MazeParseError(
            f"Maze declares {rows}x{columns} = {expected} cells "
            f"but only {len(cells)} were found"
        )
    if len(cells) > expected:
        raise MazeParseError(
            f"Maze declares {rows}x{columns} = {expected} cells "
            f"but {len(cells)} were found"
        )

    if strict:
        for index, char in enumerate(cells):
            if char not in VALID_CHARS:
                row, col = divmod(index, columns)
                raise MazeParseError(
                    f"Invalid character '{char}' at position ({row}, {col}). "
                    f"Valid characters: {', '.join(sorted(VALID_CHARS))}"
                )

    try:
        return MazeGrid(rows, columns, cells)
    except MazeValidationError as e:
        raise MazeParseError(str(e)) from e


def load_maze_file(file_path: Path | str, strict: bool = False) -> MazeGrid:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        strict: Reject unknown cell symbols.

    Returns:
        MazeGrid holding the parsed cells.

    Raises:
        MazeLoadError: If the file cannot be opened or read.
        MazeParseError: If the maze cannot be parsed.
    """
    file_path = Path(file_path)

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeLoadError(file_path) from e

    grid = parse_maze_text(maze_text, strict=strict)
    logger.debug(f"Loaded {grid.rows}x{grid.columns} maze from {file_path}")
    return grid


def validate_maze_text(maze_text: str, strict: bool = False) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Maze text in the "rows columns cells..." format.
        strict: Reject unknown cell symbols.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text, strict=strict)
        return True, None
    except MazeParseError as e:
        return False, str(e)
