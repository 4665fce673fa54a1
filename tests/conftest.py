"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_solver.api.deps import limiter
from maze_solver.main import app


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    limiter.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
