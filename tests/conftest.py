"""Pytest fixtures for all tests."""

import io
import sys

import pytest

from identifier import generator as generator_module
from identifier.entropy import FixedEntropy, SequenceEntropy
from identifier.generator import Id57Generator
from internal import logging as logging_module
from internal.logging import LogLevel, StructuredLogger
from utils import crash


@pytest.fixture(autouse=True)
def isolate_globals(monkeypatch):
    """Restore process-wide singletons and hooks touched by a test."""
    monkeypatch.setattr(generator_module, "_generator", None)
    monkeypatch.setattr(logging_module, "_logger", None)
    monkeypatch.setattr(crash, "_crash_log", crash._crash_log)
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)


@pytest.fixture
def fixed_generator():
    """Generator with a frozen clock and payload."""
    return Id57Generator(entropy=FixedEntropy(42), clock=lambda: 1_700_000_000_000_000)


@pytest.fixture
def sequence_generator():
    """Generator with a ticking clock and counting payload."""
    ticks = iter(range(1_000, 1_000_000, 7))
    return Id57Generator(entropy=SequenceEntropy(start=10), clock=lambda: next(ticks))


@pytest.fixture
def log_stream():
    """Capture structured log output."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    return stream
