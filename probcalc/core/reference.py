"""
Exact interval probabilities for accuracy comparisons.

The trapezoidal estimates in probcalc.core.distributions approximate
integrals that have closed forms in terms of the distributions' CDFs.
This module evaluates those closed forms with scipy so the numerical
error of a given step count can be measured.
"""

from scipy.stats import expon, norm, uniform

from probcalc.utils.constants import EXPONENTIAL_SUPPORT_START
from probcalc.utils.types import Interval


def exact_normal(mu: float, sigma: float, start: float, end: float) -> float:
    """
    Exact normal interval probability |Φ((end-μ)/σ) - Φ((start-μ)/σ)|.

    Raises:
        ValueError: If sigma <= 0
    """
    if sigma <= 0:
        raise ValueError(f"Standard deviation must be positive, got sigma={sigma}")

    dist = norm(loc=mu, scale=sigma)
    return float(abs(dist.cdf(end) - dist.cdf(start)))


def exact_standard_normal(start: float, end: float) -> float:
    """Exact standard normal interval probability."""
    return exact_normal(0.0, 1.0, start, end)


def exact_exponential(rate: float, start: float, end: float) -> float:
    """
    Exact exponential interval probability e^(-λa) - e^(-λb).

    The "from" bound is clamped at zero exactly as cdf_exponential clamps it.

    Raises:
        ValueError: If rate <= 0
    """
    if rate <= 0:
        raise ValueError(f"Rate must be positive, got rate={rate}")

    interval = Interval(start, end).clamp_start(EXPONENTIAL_SUPPORT_START)
    dist = expon(scale=1.0 / rate)
    return float(abs(dist.cdf(interval.end) - dist.cdf(interval.start)))


def exact_uniform(start: float, end: float) -> float:
    """
    Exact uniform probability over its own support [start, end].

    Raises:
        ValueError: If start >= end
    """
    if start >= end:
        raise ValueError(f"Uniform support must satisfy start < end, got start={start}, end={end}")

    dist = uniform(loc=start, scale=end - start)
    return float(dist.cdf(end) - dist.cdf(start))


def integration_error(estimate: float, exact: float) -> float:
    """Absolute error of a numerical estimate against the exact value."""
    return abs(estimate - exact)
