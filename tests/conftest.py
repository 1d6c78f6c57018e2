"""Fixtures for all tests"""
from unittest.mock import Mock, patch

import pytest

from freenas.common.server import FreenasServer, FreenasServerImpl


@pytest.fixture(scope="function", name="freenas_server")
def mock_freenas_server() -> FreenasServer:
    """Get a new FreenasServer for each test"""
    return FreenasServerImpl(
        url="https://nas.local",
        username="root",
        password="mock_password",
    )


@pytest.fixture(scope="function", name="mock_request")
def mock_session_request(freenas_server):
    """Patch the HTTP session of `freenas_server`"""
    client = freenas_server.get_connection()
    with patch.object(client.session, "request", Mock()) as request:
        yield request


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "unit: fast tests without network access")
