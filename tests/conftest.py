"""Pytest configuration and common fixtures for onylogger tests."""

import io
import logging
from datetime import datetime

import pytest

from onylogger import CaptureSink, ConsoleLogger, ConsoleSink, LoggerConfig

FIXED_TIME = datetime(2024, 1, 1, 12, 0, 0)
STAMP = "[2024-01-01 12:00:00]"

@pytest.fixture
def fixed_clock():
    """Provide a clock that always returns the same instant."""
    return lambda: FIXED_TIME

@pytest.fixture
def stream():
    """Provide an in-memory terminal stream."""
    return io.StringIO()

@pytest.fixture
def make_logger(fixed_clock, stream):
    """Build a ConsoleLogger writing to ``stream`` with a pinned clock."""
    def _make(stdin=None, sink=None, **flags):
        flags.setdefault("colors_enabled", False)
        return ConsoleLogger(
            config=LoggerConfig(**flags),
            sink=sink or ConsoleSink(stream),
            stdin=stdin,
            clock=fixed_clock,
        )
    return _make

@pytest.fixture
def capture_logger(fixed_clock):
    """Provide a ConsoleLogger that records lines in a CaptureSink."""
    return ConsoleLogger(
        config=LoggerConfig(colors_enabled=False),
        sink=CaptureSink(),
        clock=fixed_clock,
    )

@pytest.fixture
def side_channel():
    """Restore the onylogger side-channel logger after a test reconfigures it."""
    log = logging.getLogger("onylogger")
    handlers, level, propagate = log.handlers[:], log.level, log.propagate
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)
    log.propagate = propagate
