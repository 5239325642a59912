"""
Pytest configuration and shared fixtures.
"""

import math

import pytest


@pytest.fixture
def normal_params():
    """Non-standard normal distribution parameters."""
    return {
        "mu": 10.0,
        "sigma": 2.0,
    }


@pytest.fixture
def exponential_params():
    """Exponential distribution with mean 2."""
    return {
        "rate": 0.5,
    }


@pytest.fixture
def uniform_support():
    """Non-negative uniform support [2, 5]."""
    return {
        "start": 2.0,
        "end": 5.0,
    }


@pytest.fixture
def counting_integrand():
    """
    Integrand that records every x it is evaluated at.

    Returns (f, calls); f(x) = exp(x).
    """
    calls = []

    def f(x):
        calls.append(x)
        return math.exp(x)

    return f, calls
