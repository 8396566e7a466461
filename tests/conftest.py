#!/usr/bin/env python3
"""
Pytest configuration and fixtures for driftsum tests.

This file contains shared test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
import numpy as np
from fractions import Fraction
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from driftsum import Vector

EPS = np.finfo(np.float64).eps


def double_from_hex(le_hex: str) -> float:
    """Build a float from its 8-byte little-endian hex encoding."""
    return float(np.frombuffer(bytes.fromhex(le_hex), dtype="<f8")[0])


@pytest.fixture(scope="session")
def random_seed():
    """Set random seed for reproducible tests."""
    seed = 42
    np.random.seed(seed)
    return seed


@pytest.fixture
def special_doubles():
    """Values whose bit patterns a text round-trip would not preserve."""
    return [
        0.0,
        -0.0,
        1.0,
        -1.5,
        float("inf"),
        float("-inf"),
        float("nan"),
        double_from_hex("010000000000f87f"),  # quiet NaN with payload 1
        double_from_hex("efbeadde0000f8ff"),  # negative quiet NaN with payload
        5e-324,  # smallest subnormal
        -2.2250738585072009e-308,  # largest negative subnormal
        np.finfo(np.float64).max,
        1.0 / 60.0,
    ]


@pytest.fixture
def velocity():
    """Constant rate used by the fixed-timestep scenarios."""
    return Vector(1.0, 2.0, 3.0)


@pytest.fixture
def timestep():
    return 1.0 / 60.0


class AccuracyChecker:
    """Utility class for checking numerical accuracy against exact sums."""

    @staticmethod
    def exact_sum(values) -> Fraction:
        """Exact rational sum of doubles."""
        return sum((Fraction(v) for v in values), Fraction(0))

    @staticmethod
    def abs_error(computed: float, exact: Fraction) -> float:
        return float(abs(Fraction(computed) - exact))

    @staticmethod
    def within_eps(computed: float, exact: Fraction, factor: float = 4.0) -> bool:
        """True when the error is at most ``factor`` machine epsilons of |exact|."""
        return abs(Fraction(computed) - exact) <= Fraction(factor * EPS) * abs(exact)


@pytest.fixture
def accuracy_checker():
    """Fixture providing accuracy checking utilities."""
    return AccuracyChecker()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "long_horizon" in item.name or "stress" in item.name:
            item.add_marker(pytest.mark.slow)

        if "integration" in item.name or "end_to_end" in item.name:
            item.add_marker(pytest.mark.integration)

