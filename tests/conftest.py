"""Pytest configuration and shared fixtures for the mathbox test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

from mathbox.backends import FixedMetricsBackend, RecordingBackend

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def backend() -> FixedMetricsBackend:
    """Every glyph 10 units wide, every line as tall as its font size."""
    return FixedMetricsBackend(char_width=10)


@pytest.fixture
def recorder() -> RecordingBackend:
    """Fixed metrics that also records every drawing call."""
    return RecordingBackend(char_width=10)
