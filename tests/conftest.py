"""
Pytest configuration for traitcv tests.
"""

import numpy as np
import pytest


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def rng():
    """Seeded generator so sampled data is reproducible."""
    return np.random.default_rng(20180101)


@pytest.fixture
def normal_sample(rng):
    """1000 draws from N(10, 1); true CV is 0.1."""
    return rng.normal(loc=10.0, scale=1.0, size=1000)


@pytest.fixture
def skewed_sample(rng):
    """Right-skewed positive sample (lognormal)."""
    return rng.lognormal(mean=1.0, sigma=0.5, size=50)


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests by default unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
