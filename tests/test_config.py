"""Tests for `freenas.config`."""
import logging

import pytest

from freenas.config import FreenasConfig


@pytest.mark.unit
def test_defaults(monkeypatch):
    """Options fall back to their defaults"""
    monkeypatch.delenv("FREENAS_SDK_DEBUG", raising=False)
    monkeypatch.delenv("FREENAS_DISABLE_SSL_VERIFICATION", raising=False)
    monkeypatch.delenv("FREENAS_SDK_LOG_LEVEL", raising=False)
    conf = FreenasConfig()
    assert conf.debug is False
    assert conf.verify_ssl is True
    assert conf.log_level == logging.INFO
    assert conf.log_info is True
    assert conf.logger.name == "freenas"


@pytest.mark.unit
def test_environment(monkeypatch):
    """Options are read from the environment"""
    monkeypatch.setenv("FREENAS_SDK_DEBUG", "1")
    monkeypatch.setenv("FREENAS_DISABLE_SSL_VERIFICATION", "1")
    monkeypatch.setenv("FREENAS_SDK_LOG_LEVEL", str(logging.ERROR))
    conf = FreenasConfig()
    assert conf.debug is True
    assert conf.verify_ssl is False
    assert conf.log_level == logging.ERROR
    assert conf.log_info is False
    assert conf.logger.level == logging.DEBUG


@pytest.mark.unit
def test_overrides(monkeypatch):
    """Options can be overridden and reset"""
    monkeypatch.delenv("FREENAS_SDK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FREENAS_DISABLE_SSL_VERIFICATION", raising=False)
    monkeypatch.delenv("FREENAS_SDK_DEBUG", raising=False)
    conf = FreenasConfig()

    conf.verify_ssl = False
    assert conf.verify_ssl is False
    conf.verify_ssl = "no"  # type: ignore
    assert conf.verify_ssl is False
    del conf.verify_ssl
    assert conf.verify_ssl is True

    conf.log_level = logging.WARNING
    assert conf.logger.level == logging.WARNING
    del conf.log_level
    assert conf.log_level == logging.INFO
    assert conf.logger.level == logging.INFO


@pytest.mark.unit
def test_repr(monkeypatch):
    """Repr lists every option"""
    monkeypatch.delenv("FREENAS_SDK_DEBUG", raising=False)
    conf = FreenasConfig()
    for option in ("debug", "verify_ssl", "log_level"):
        assert f"'{option}'" in repr(conf)
