"""
Southeast Maze Solver Engine

Stack-based depth-first search with backtracking:
- Moves are restricted to south and east
- The solution overlay records the path (>) and dead ends (@)
- Dead ends are blocked (X) in a scratch copy of the maze so they are
  never entered again

Example usage:
    grid = parse_maze_text("2 2\\n_ _\\n_ $")
    solver = MazeSolver(grid)
    if solver.solve():
        print(solver.render())
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import SolverStateError
from .maze_grid import CellType, Direction, Marker, MazeGrid, Position

logger = logging.getLogger(__name__)

SOLVED_MESSAGE = "Found the exit!!!"
NO_SOLUTION_MESSAGE = "This maze has no solution."
SOLUTION_HEADER = "The solution to this maze is:"

START = Position(0, 0)


class SolveState(Enum):
    """States of a solve attempt."""
    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SolveResult:
    """Outcome of a solve attempt."""
    state: SolveState
    iterations: int
    solution: list[str]
    path: list[Position] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.state is SolveState.SOLVED

    @property
    def message(self) -> Optional[str]:
        if self.state is SolveState.SOLVED:
            return SOLVED_MESSAGE
        if self.state is SolveState.EXHAUSTED:
            return NO_SOLUTION_MESSAGE
        return None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "solved": self.solved,
            "state": self.state.value,
            "message": self.message,
            "iterations": self.iterations,
            "solution": list(self.solution),
            "path": [position.to_dict() for position in self.path],
        }


class MazeSolver:
    """
    Depth-first maze solver driven by an explicit backtrack stack.

    The grid passed in is left untouched. The solver works on a scratch
    copy, where dead ends are overwritten with X, and on a solution overlay
    that starts as another copy of the grid.

    A solver solves once. Call reset() before solving again.
    """

    def __init__(self, grid: MazeGrid):
        self._grid = grid
        self._maze: MazeGrid = grid.copy()
        self._solution: MazeGrid = grid.copy()
        self._stack: list[Position] = [START]
        self._current: Position = START
        self._state = SolveState.SEARCHING
        self._iterations = 0

    @property
    def state(self) -> SolveState:
        return self._state

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def current(self) -> Position:
        return self._current

    @property
    def maze(self) -> MazeGrid:
        """Scratch copy of the maze with dead ends blocked."""
        return self._maze

    @property
    def solution(self) -> MazeGrid:
        """Solution overlay."""
        return self._solution

    @property
    def stack(self) -> tuple[Position, ...]:
        """Snapshot of the backtrack stack, bottom first."""
        return tuple(self._stack)

    def reset(self) -> None:
        """Restore the scratch maze and overlay so the grid can be solved again."""
        self._maze = self._grid.copy()
        self._solution = self._grid.copy()
        self._stack = [START]
        self._current = START
        self._state = SolveState.SEARCHING
        self._iterations = 0

    def next_position(self, position: Position, direction: Direction) -> Position:
        """Get the neighbour of position in direction."""
        return position.move(direction)

    def is_extensible(self, position: Position, direction: Direction) -> bool:
        """
        Check if the path can be extended from position in direction.

        The neighbour must be inside the maze and hold an open cell or the exit.
        """
        neighbour = self.next_position(position, direction)
        if not self._maze.in_bounds(neighbour.row, neighbour.column):
            return False
        return CellType.is_passable(self._maze.at(neighbour.row, neighbour.column))

    def extend_path(self, position: Position) -> bool:
        """
        Push every extensible neighbour of position onto the stack.

        Returns:
            True if at least one neighbour was pushed.
        """
        extended = False
        for direction in Direction.push_order():
            if self.is_extensible(position, direction):
                self._stack.append(self.next_position(position, direction))
                extended = True
        return extended

    def step(self) -> SolveState:
        """
        Run a single search iteration.

        Returns:
            The state after the iteration.

        Raises:
            SolverStateError: If the search has already finished.
        """
        if self._state is not SolveState.SEARCHING:
            raise SolverStateError(
                f"Maze already {self._state.value}; call reset() to solve again"
            )

        self._iterations += 1
        row, col = self._current.row, self._current.column

        if self._maze.at(row, col) == CellType.EXIT.value:
            self._state = SolveState.SOLVED

        elif self.extend_path(self._current):
            self._solution.mark(row, col, Marker.ON_PATH)
            self._current = self._stack[-1]

        else:
            self._maze.mark(row, col, CellType.BLOCKED)
            self._solution.mark(row, col, Marker.DEAD_END)
            self._stack.pop()

            if self._stack:
                self._current = self._stack[-1]
            else:
                self._state = SolveState.EXHAUSTED

        return self._state

    def solve(self) -> bool:
        """
        Search for a path from the top-left cell to the exit.

        Returns:
            True if the exit was found, False if every path was exhausted.

        Raises:
            SolverStateError: If called again without reset().
        """
        if self._state is not SolveState.SEARCHING:
            raise SolverStateError(
                f"Maze already {self._state.value}; call reset() to solve again"
            )

        while self._state is SolveState.SEARCHING:
            self.step()

        rows, columns = self._grid.dimensions()
        if self._state is SolveState.SOLVED:
            logger.info(
                f"Exit found at ({self._current.row}, {self._current.column}) "
                f"after {self._iterations} iterations"
            )
        else:
            logger.info(f"No solution after {self._iterations} iterations")
        logger.debug(f"Solved {rows}x{columns} maze, final state {self._state.value}")

        return self._state is SolveState.SOLVED

    def path(self) -> list[Position]:
        """
        Get the discovered path from the start to the exit.

        Returns:
            Positions in walking order, or an empty list if not solved.
        """
        if self._state is not SolveState.SOLVED:
            return []

        # Every move adds one to row + column, so that sum orders the path.
        on_path = {
            position
            for position in self._stack
            if self._solution.at(position.row, position.column) == Marker.ON_PATH.value
        }
        path = sorted(on_path, key=lambda position: position.row + position.column)
        path.append(self._current)
        return path

    def result(self) -> SolveResult:
        """Get the outcome of the solve attempt."""
        return SolveResult(
            state=self._state,
            iterations=self._iterations,
            solution=self._solution.render_rows(),
            path=self.path(),
        )

    def render(self) -> str:
        """Render the solution overlay."""
        return self._solution.render()


def solve_maze(grid: MazeGrid) -> SolveResult:
    """Solve grid with a fresh solver and return the result."""
    solver = MazeSolver(grid)
    solver.solve()
    return solver.result()
