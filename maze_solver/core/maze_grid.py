"""
Maze grid primitives.

Cell symbols:
    _ = Open path
    $ = Exit (goal)
    * = Wall (any other character is impassable too)
    X = Blocked (dead end written by the solver)

Overlay markers:
    > = On the path
    @ = Dead end
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union

from .errors import MazeValidationError


class CellType(Enum):
    """Symbols that can appear in a maze grid."""
    OPEN = "_"
    EXIT = "$"
    WALL = "*"
    BLOCKED = "X"

    @classmethod
    def is_passable(cls, char: str) -> bool:
        """Only open cells and the exit can be moved into."""
        return char in (cls.OPEN.value, cls.EXIT.value)


class Marker(Enum):
    """Markers written into the solution overlay."""
    ON_PATH = ">"
    DEAD_END = "@"


class Direction(Enum):
    """Movement directions. Only south and east moves are allowed."""
    SOUTH = "south"
    EAST = "east"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (d_row, d_column) for this direction."""
        deltas = {
            Direction.SOUTH: (1, 0),
            Direction.EAST: (0, 1),
        }
        return deltas[self]

    @classmethod
    def push_order(cls) -> tuple["Direction", ...]:
        """
        Order in which neighbours are pushed onto the backtrack stack.

        South is pushed before east, so east sits on top of the stack and
        is explored first.
        """
        return (cls.SOUTH, cls.EAST)


@dataclass(frozen=True)
class Position:
    """2D position in the maze, 0-indexed."""
    row: int
    column: int

    def move(self, direction: Direction) -> "Position":
        """Return new position after moving in direction."""
        d_row, d_column = direction.delta
        return Position(self.row + d_row, self.column + d_column)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "column": self.column}


Symbol = Union[str, CellType, Marker]


def _symbol_char(symbol: Symbol) -> str:
    if isinstance(symbol, (CellType, Marker)):
        return symbol.value
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise MazeValidationError(f"Cell symbol must be a single character, got {symbol!r}")
    return symbol


class MazeGrid:
    """
    Rectangular grid of single-character cells.

    Cells live in one flat list indexed by ``row * columns + column``.
    A grid is fully validated on construction; dimensions never change.
    """

    def __init__(self, rows: int, columns: int, cells: Iterable[Symbol]):
        if rows < 1 or columns < 1:
            raise MazeValidationError(
                f"Maze dimensions must be positive, got {rows}x{columns}"
            )

        self._rows = rows
        self._columns = columns
        self._cells: list[str] = [_symbol_char(cell) for cell in cells]

        if len(self._cells) != rows * columns:
            raise MazeValidationError(
                f"Expected {rows * columns} cells for a {rows}x{columns} maze, "
                f"got {len(self._cells)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Symbol]]) -> "MazeGrid":
        """Build a grid from a sequence of equally long rows."""
        if not rows:
            raise MazeValidationError("Maze has no rows")

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise MazeValidationError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )

        return cls(len(rows), width, (cell for row in rows for cell in row))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def dimensions(self) -> tuple[int, int]:
        """Get (rows, columns)."""
        return self._rows, self._columns

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._columns

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(
                f"Position ({row}, {col}) is outside a {self._rows}x{self._columns} maze"
            )
        return row * self._columns + col

    def at(self, row: int, col: int) -> str:
        """Get the cell symbol at (row, col)."""
        return self._cells[self._index(row, col)]

    def mark(self, row: int, col: int, marker: Symbol) -> None:
        """Overwrite the cell at (row, col) with marker."""
        self._cells[self._index(row, col)] = _symbol_char(marker)

    def count(self, symbol: Symbol) -> int:
        """Count cells holding symbol."""
        return self._cells.count(_symbol_char(symbol))

    def copy(self) -> "MazeGrid":
        return MazeGrid(self._rows, self._columns, self._cells)

    def to_rows(self) -> list[list[str]]:
        """Get the grid as a list of rows."""
        return [
            self._cells[start:start + self._columns]
            for start in range(0, len(self._cells), self._columns)
        ]

    def render_rows(self) -> list[str]:
        """Get each row as cells separated by single spaces."""
        return [" ".join(row) for row in self.to_rows()]

    def render(self) -> str:
        """Render the grid row by row, one line per row."""
        return "\n".join(self.render_rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.dimensions() == other.dimensions() and self._cells == other._cells

    def __repr__(self) -> str:
        return f"MazeGrid(rows={self._rows}, columns={self._columns})"
