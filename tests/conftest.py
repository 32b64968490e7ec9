"""Shared test fixtures for the vlog test suite."""

import io

import pytest

from vlog import logger as _logger_mod
from vlog import std as _std_mod
from vlog.logger import Logger

# 2026-10-18 01:23:23.123456 UTC
FIXED_TIME = 1792286603.123456


# ---------------------------------------------------------------------------
# Standard logger isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def fresh_std(monkeypatch):
    """Give every test its own standard logger (stderr, std flags, level 0).

    The -v flag, configure() and the CLI all mutate the standard logger;
    swapping the module global keeps those changes inside one test.
    """
    logger = Logger()
    monkeypatch.setattr(_std_mod, "_std", logger)
    return logger


# ---------------------------------------------------------------------------
# Sinks and clocks
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def log(buf):
    """A Logger writing bare messages (no header) to a buffer."""
    return Logger(file=buf, flags=0)


@pytest.fixture
def fixed_clock(monkeypatch):
    """Pin the timestamp used in log headers."""
    monkeypatch.setattr(_logger_mod, "_clock", lambda: FIXED_TIME)
    return FIXED_TIME


class BrokenSink:
    """A sink whose writes always fail."""

    def __init__(self, exc=None):
        self.exc = exc or OSError(5, "Input/output error")
        self.attempts = 0

    def write(self, text):
        self.attempts += 1
        raise self.exc


@pytest.fixture
def broken_sink():
    return BrokenSink()
