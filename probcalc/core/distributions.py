"""
Continuous probability distributions with trapezoidal interval probabilities.

This module provides closed-form probability density functions (PDF) for
the uniform, normal, standard normal and exponential distributions, and
"cdf" functions that integrate those densities numerically.

Important:
    The cdf_* functions return the probability mass between two caller
    supplied bounds, P(start <= X <= end), not the classical left-tail
    cumulative value P(X <= x). For a classical normal CDF pass a start
    several standard deviations below the mean; for the exponential a
    negative "from" bound is clamped to 0 automatically.
"""

import math

from probcalc.core.integration import integrate
from probcalc.utils.constants import EXPONENTIAL_SUPPORT_START
from probcalc.utils.types import Interval


def _validate_sigma(sigma: float) -> None:
    """
    Raises:
        ValueError: If sigma is zero (degenerate normal density)
    """
    if sigma == 0:
        raise ValueError(f"Standard deviation must be non-zero, got sigma={sigma}")


# ===========================
# Density Functions
# ===========================


def pdf_uniform(start: float, end: float, x: float) -> float:
    """
    Uniform probability density function on [start, end].

    Args:
        start: Lower bound of the support
        end: Upper bound of the support
        x: Value at which to evaluate the density

    Returns:
        1 / (end - start) inside the support, 0 outside

    Raises:
        ValueError: If start == end (zero-width support)

    Notes:
        The density is also 0 for any x < 0, even when start < 0. A support
        lying entirely below zero therefore has zero density everywhere.
    """
    if end == start:
        raise ValueError(f"Uniform support must have non-zero width, got start=end={start}")

    if start <= x <= end and x >= 0:
        return 1.0 / (end - start)
    return 0.0


def pdf_normal(mu: float, sigma: float, x: float) -> float:
    """
    Normal probability density function.

    Args:
        mu: Mean
        sigma: Standard deviation
        x: Value at which to evaluate the density

    Returns:
        Probability density at x

    Raises:
        ValueError: If sigma == 0

    Examples:
        >>> abs(pdf_normal(0.0, 1.0, 0.0) - 0.3989) < 0.001  # Peak at the mean
        True
        >>> pdf_normal(10.0, 2.0, 10.0) == pdf_normal(0.0, 2.0, 0.0)
        True

    Notes:
        φ(x; μ, σ) = (1 / (σ√(2π))) · exp(-½((x - μ)/σ)²)
    """
    _validate_sigma(sigma)

    z = (x - mu) / sigma
    return (1.0 / (sigma * math.sqrt(2.0 * math.pi))) * math.exp(-0.5 * z * z)


def pdf_standard_normal(x: float) -> float:
    """Standard normal density, pdf_normal(0, 1, x)."""
    return pdf_normal(0.0, 1.0, x)


def pdf_exponential(rate: float, x: float) -> float:
    """
    Exponential probability density function.

    Args:
        rate: Rate parameter λ (expected > 0, not validated)
        x: Value at which to evaluate the density

    Returns:
        λ·e^(-λx) for x >= 0, else 0
    """
    if x < EXPONENTIAL_SUPPORT_START:
        return 0.0
    return rate * math.exp(-rate * x)


# ===========================
# Interval Probabilities
# ===========================


def cdf_uniform() -> float:
    """
    Total probability of the uniform distribution over its own support.

    Always 1.0; no integration is performed.
    """
    return 1.0


def cdf_normal(mu: float, sigma: float, step_count: int, start: float, end: float) -> float:
    """
    Probability mass of a normal distribution between start and end.

    Args:
        mu: Mean
        sigma: Standard deviation
        step_count: Number of trapezoids used for the integration
        start: "from" bound
        end: "to" bound

    Returns:
        Trapezoidal estimate of P(start <= X <= end)

    Raises:
        ValueError: If sigma == 0 or step_count < 1

    Examples:
        >>> round(cdf_normal(0.0, 1.0, 10, -1.0, 1.0), 3)  # One sigma
        0.681
    """
    _validate_sigma(sigma)
    return integrate(start, end, step_count, lambda x: pdf_normal(mu, sigma, x))


def cdf_standard_normal(step_count: int, start: float, end: float) -> float:
    """
    Probability mass of the standard normal between start and end.

    See cdf_normal; the mean is 0 and the standard deviation 1.
    """
    return integrate(start, end, step_count, pdf_standard_normal)


def cdf_exponential(rate: float, step_count: int, start: float, end: float) -> float:
    """
    Probability mass of an exponential distribution between start and end.

    A negative "from" bound is clamped to zero before integrating, since the
    density has no mass there. cdf_exponential(λ, n, -10, 5) is therefore
    identical to cdf_exponential(λ, n, 0, 5). The "to" bound is used as
    given, so a reversed interval (5, -10) integrates from 5 down to -10.

    Args:
        rate: Rate parameter λ
        step_count: Number of trapezoids used for the integration
        start: "from" bound
        end: "to" bound

    Returns:
        Trapezoidal estimate of P(start <= X <= end)
    """
    interval = Interval(start, end).clamp_start(EXPONENTIAL_SUPPORT_START)
    return integrate(
        interval.start, interval.end, step_count, lambda x: pdf_exponential(rate, x)
    )
