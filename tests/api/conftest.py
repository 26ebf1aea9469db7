"""Fixtures for API tests."""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.state_codec import StateCodec


@pytest_asyncio.fixture
async def client():
    """Create test client."""
    from api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def codec():
    """The codec the app uses."""
    from api.state_codec import get_state_codec

    return get_state_codec()


@pytest.fixture
def other_codec():
    """A codec with a different secret."""
    return StateCodec(secret_key="some-other-secret")
