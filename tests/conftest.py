"""
Pytest configuration and shared fixtures.
"""

import pytest


@pytest.fixture
def sample_data():
    """Small sample with a repeated value and an even number of observations."""
    return [3.0, 1.0, 5.0, 6.0, 3.0, 4.5]


@pytest.fixture
def paired_data():
    """Paired observations with a positive but imperfect linear relation."""
    return {
        "x": [1.0, 2.0, 3.0, 4.0, 5.0],
        "y": [2.0, 4.0, 5.0, 4.0, 5.0],
    }


@pytest.fixture
def contingency_table():
    """2x2 table of observed counts."""
    return [
        [10, 20],
        [30, 40],
    ]


@pytest.fixture
def round_trip_probabilities():
    """Probabilities covering both tails and the centre."""
    return [0.001, 0.01, 0.1, 0.5, 0.9, 0.99, 0.999]
