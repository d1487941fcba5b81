"""Shared pytest fixtures and markers for all tests."""

import random

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def matching_pennies():
    """Classic matching pennies payoffs (Row wins on a match)."""
    return [[1.0, -1.0], [-1.0, 1.0]]


@pytest.fixture
def asymmetric_game():
    """Asymmetric 2x3 game with value 1 and Column support {0, 1}."""
    return [[3.0, -1.0, 2.0], [-2.0, 4.0, 1.0]]


@pytest.fixture
def default_success_rates():
    """Palacios-Huerta (2003) penalty success rates."""
    from penalty_nash.football.penalty import DEFAULT_SUCCESS_RATES
    return [list(row) for row in DEFAULT_SUCCESS_RATES]


@pytest.fixture
def rng():
    """Seeded random generator for reproducible random matrices."""
    return random.Random(20240611)
