"""Tests for configuration defaults, env overrides and logger setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from bigx.core.config import BigxSettings
from bigx.core.logging import configure_logging


def test_default_settings(monkeypatch):
    monkeypatch.delenv("BIGX_UINT64_MODE", raising=False)
    monkeypatch.delenv("BIGX_LOG_LEVEL", raising=False)
    settings = BigxSettings()
    assert settings.uint64_mode == "wrap"
    assert settings.log_level == "WARNING"


def test_env_override(monkeypatch):
    monkeypatch.setenv("BIGX_UINT64_MODE", "fault")
    assert BigxSettings().uint64_mode == "fault"


def test_invalid_mode_rejected(monkeypatch):
    monkeypatch.setenv("BIGX_UINT64_MODE", "round")
    with pytest.raises(ValidationError):
        BigxSettings()


def test_configure_logging_sets_package_level():
    logger = configure_logging(BigxSettings(log_level="debug"))
    try:
        assert logger.name == "bigx"
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(logging.NOTSET)
