"""Test configuration and fixtures."""

import os

import pytest
import pytest_asyncio

from tests.helpers import FakeEngine


@pytest_asyncio.fixture
async def fake_engine():
    """Start an isolated fake engine on a temporary unix socket."""
    engine = FakeEngine()
    await engine.start()
    try:
        yield engine
    finally:
        await engine.stop()


@pytest.fixture(scope="session")
def docker_socket():
    """Socket of a real engine for integration tests."""
    return os.getenv("DOCKER_SOCKET", "/var/run/docker.sock")


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring a docker engine"
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless a real engine is available."""
    skip_integration = pytest.mark.skip(reason="Docker engine not available")

    for item in items:
        if (
            "integration" in item.keywords
            and os.getenv("DOCKER_AVAILABLE", "false").lower() != "true"
        ):
            item.add_marker(skip_integration)
