"""
pytest configuration and fixtures.
"""

import os
import sys

import pytest
from loguru import logger

from calclib.config import Settings
from calclib.core.calculator import Calculator


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's CALCLIB_* variables out of every test."""
    for name in list(os.environ):
        if name.startswith("CALCLIB_"):
            monkeypatch.delenv(name)


@pytest.fixture
def calculator():
    """A calculator with default settings."""
    return Calculator(settings=Settings(_env_file=None))


@pytest.fixture
def tracing_calculator():
    """A calculator that logs every operation."""
    return Calculator(settings=Settings(_env_file=None, trace_operations=True))


@pytest.fixture
def log_messages():
    """Collect loguru output at DEBUG level for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logging():
    """
    Put loguru back to its import-time sink after a test that reconfigures it.

    setup_logging() drops every handler, so the test session's starting
    configuration (loguru's single stderr sink) is rebuilt afterwards.
    """
    yield
    logger.remove()
    logger.add(sys.stderr)
