"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from lichess.client import LichessClient

# Skip all integration tests unless RUN_LICHESS_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LICHESS_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_LICHESS_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def client():
    async with LichessClient() as client:
        yield client
