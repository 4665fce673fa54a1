# Core module
from .errors import (
    MazeError,
    MazeLoadError,
    MazeParseError,
    MazeValidationError,
    SolverStateError,
)
from .maze_grid import CellType, Direction, Marker, MazeGrid, Position
from .maze_engine import (
    NO_SOLUTION_MESSAGE,
    SOLUTION_HEADER,
    SOLVED_MESSAGE,
    MazeSolver,
    SolveResult,
    SolveState,
    solve_maze,
)
from .maze_parser import (
    load_maze_file,
    parse_maze_text,
    read_maze_dimensions,
    validate_maze_text,
)

__all__ = [
    "MazeError",
    "MazeLoadError",
    "MazeParseError",
    "MazeValidationError",
    "SolverStateError",
    "CellType",
    "Direction",
    "Marker",
    "MazeGrid",
    "Position",
    "MazeSolver",
    "SolveResult",
    "SolveState",
    "solve_maze",
    "SOLVED_MESSAGE",
    "NO_SOLUTION_MESSAGE",
    "SOLUTION_HEADER",
    "load_maze_file",
    "parse_maze_text",
    "read_maze_dimensions",
    "validate_maze_text",
]
