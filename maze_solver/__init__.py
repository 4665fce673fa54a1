"""Southeast Maze Solver: stack-based maze traversal with south and east moves."""

__version__ = "1.0.0"
