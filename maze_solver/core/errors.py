"""Exceptions raised while loading, parsing and solving mazes."""

from pathlib import Path


class MazeError(Exception):
    """Base class for maze solver errors."""

    pass


class MazeLoadError(MazeError):
    """Exception raised when a maze file cannot be opened or read."""

    def __init__(self, path: Path | str):
        self.path = str(path)
        super().__init__(f"Cannot read from {self.path}")


class MazeParseError(MazeError):
    """Exception raised when maze text is malformed."""

    pass


class MazeValidationError(MazeError):
    """Exception raised when a grid cannot be built from the given cells."""

    pass


class SolverStateError(MazeError):
    """Exception raised when a finished solver is asked to solve again."""

    pass
