"""Shared fixtures for CLI tests."""

import logging

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setenv("APNS_PAYLOAD_CONFIG", str(path))
    monkeypatch.delenv("APNS_PAYLOAD_LOG_LEVEL", raising=False)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("apns_payload")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
