"""Solve schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class SolveRequest(BaseModel):
    """Schema for a solve request."""

    maze: str = Field(..., min_length=1, description="Maze text: 'rows columns' then the cells")
    strict: Optional[bool] = Field(
        None, description="Reject symbols other than '_', '*' and '$' (defaults to server setting)"
    )


class PathPosition(BaseModel):
    """Schema for a position on the discovered path."""

    row: int
    column: int


class SolveResponse(BaseModel):
    """Schema for a solve response."""

    solved: bool
    state: str = Field(..., pattern="^(solved|exhausted)$")
    message: str
    rows: int = Field(..., gt=0)
    columns: int = Field(..., gt=0)
    iterations: int
    solution: list[str]
    rendered: str
    path: list[PathPosition]
