"""Shared test fixtures for pokermojo."""

import random

import pytest


@pytest.fixture
def rng():
    """A fixed-seed RNG isolated from global random state."""
    return random.Random(1234)


@pytest.fixture
def tmp_output(tmp_path):
    """Provide a temporary output directory for pair logs."""
    return tmp_path / "output"
