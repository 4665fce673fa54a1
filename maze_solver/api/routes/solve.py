"""Solve routes for running the maze solver over HTTP."""

import logging

from fastapi import APIRouter, HTTPException, Request
from starlette.concurrency import run_in_threadpool

from maze_solver.api.deps import limiter
from maze_solver.config import get_settings
from maze_solver.core import (
    MazeParseError,
    SolveResult,
    parse_maze_text,
    read_maze_dimensions,
    solve_maze,
)
from maze_solver.schemas.solve import PathPosition, SolveRequest, SolveResponse

logger = logging.getLogger(__name__)

settings = get_settings()

router = APIRouter(prefix="/solve", tags=["Solve"])


def _parse_and_solve(maze_text: str, strict: bool) -> SolveResult:
    return solve_maze(parse_maze_text(maze_text, strict=strict))


@router.post(
    "",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve(
    request: Request,
    solve_request: SolveRequest,
) -> SolveResponse:
    """Solve a maze.

    The maze text uses the file format: "rows columns" followed by the
    cells. A maze without a path is not an error; the response reports
    state "exhausted" together with the dead-end trail.
    """
    strict = settings.strict_symbols if solve_request.strict is None else solve_request.strict

    try:
        rows, columns = read_maze_dimensions(solve_request.maze)
    except MazeParseError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    # Refuse oversized mazes from the header, before any cells are read
    if rows * columns > settings.max_maze_cells:
        raise HTTPException(
            status_code=413,
            detail=f"Maze has {rows * columns} cells, limit is {settings.max_maze_cells}",
        )

    # Parsing and search are CPU bound; keep them off the event loop
    try:
        result = await run_in_threadpool(_parse_and_solve, solve_request.maze, strict)
    except MazeParseError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    logger.info(f"Solved {rows}x{columns} maze: {result.state.value}")

    return SolveResponse(
        solved=result.solved,
        state=result.state.value,
        message=result.message,
        rows=rows,
        columns=columns,
        iterations=result.iterations,
        solution=result.solution,
        rendered="\n".join(result.solution),
        path=[PathPosition(row=p.row, column=p.column) for p in result.path],
    )
