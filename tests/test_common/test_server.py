"""Tests for `freenas.common.server.FreenasServerImpl`."""
import pytest

import freenas
from freenas.common.client import FreenasClient
from freenas.common.server import FreenasServerImpl
from freenas.repo import DatasetRepoImpl


@pytest.mark.unit
@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://nas.local", "https://nas.local"),
        ("https://nas.local/", "https://nas.local"),
        (" http://10.0.0.2:8080/ ", "http://10.0.0.2:8080"),
        ("nas.local", "http://nas.local"),
    ],
)
def test_url(url, expected):
    """Base url is normalised"""
    server = FreenasServerImpl(url=url, username="root", password="pw")
    assert server.url == expected
    assert server.get_connection().url == expected


@pytest.mark.unit
def test_get_connection(freenas_server):
    """The same configured client is handed out"""
    client = freenas_server.get_connection()
    assert isinstance(client, FreenasClient)
    assert client is freenas_server.get_connection()
    assert client.session.auth == ("root", "mock_password")
    assert isinstance(freenas_server.dataset, DatasetRepoImpl)
    assert freenas_server.dataset.client is client


@pytest.mark.unit
def test_str_masks_password(freenas_server):
    """Password never shows up in the string representation"""
    assert str(freenas_server) == "root:***@https://nas.local"
    assert "mock_password" not in str(freenas_server)


@pytest.mark.unit
def test_get_server():
    """Test `freenas.get_server`"""
    server = freenas.get_server("root", "pw", "https://nas.local", verify_ssl=False)
    assert isinstance(server, freenas.FreenasServer)
    assert server.get_connection().verify_ssl is False


@pytest.mark.unit
def test_get_server_from_env(monkeypatch):
    """Test `freenas.get_server_from_env`"""
    monkeypatch.setenv("FREENAS_URL", "nas.local")
    monkeypatch.delenv("FREENAS_USERNAME", raising=False)
    monkeypatch.setenv("FREENAS_PASSWORD", "pw")
    server = freenas.get_server_from_env()
    assert str(server) == "root:***@http://nas.local"
    assert server.get_connection().session.auth == ("root", "pw")

    monkeypatch.delenv("FREENAS_PASSWORD")
    with pytest.raises(freenas.FreenasError, match="FREENAS_PASSWORD"):
        freenas.get_server_from_env()
