"""Pytest fixtures for reflectpattern tests"""

import pytest
from loguru import logger

ENV_KEYS = ["REFLECT_CHANNEL", "REFLECT_MESSAGE", "LOG_LEVEL", "LOG_FILE"]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration variables so defaults apply"""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test"""
    messages: list[str] = []
    token = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(token)
