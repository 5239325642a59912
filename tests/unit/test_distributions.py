"""
Unit tests for density functions and interval probabilities.

This module validates:
1. Known density values and support boundaries
2. The uniform density integrating to 1 over its support
3. The 68-95-99.7 rule for the standard normal
4. Exponential bound clamping
5. Input validation (zero sigma, zero-width support)
"""

import math

import pytest

from probcalc.core.distributions import (
    cdf_exponential,
    cdf_normal,
    cdf_standard_normal,
    cdf_uniform,
    pdf_exponential,
    pdf_normal,
    pdf_standard_normal,
    pdf_uniform,
)
from probcalc.core.integration import integrate
from probcalc.core.numeric import round_value


# ===========================
# Density Tests
# ===========================


def test_standard_normal_peak():
    """Standard normal peak is 1/√(2π)."""
    assert pdf_standard_normal(0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))


def test_standard_normal_symmetry():
    """φ(x) == φ(-x)."""
    for x in (0.3, 1.0, 2.7):
        assert pdf_standard_normal(x) == pytest.approx(pdf_standard_normal(-x))


def test_normal_shift_and_scale(normal_params):
    """Normal density equals the scaled standard density at the z-score."""
    mu, sigma = normal_params["mu"], normal_params["sigma"]
    x = 13.0
    z = (x - mu) / sigma
    assert pdf_normal(mu, sigma, x) == pytest.approx(pdf_standard_normal(z) / sigma)


def test_normal_far_tail_is_small_but_finite():
    """Tail density underflows gracefully towards zero."""
    value = pdf_normal(0.0, 1.0, 40.0)
    assert value >= 0.0
    assert value < 1e-300


def test_uniform_inside_support(uniform_support):
    """Density inside the support is 1/(end - start)."""
    assert pdf_uniform(**uniform_support, x=3.0) == pytest.approx(1.0 / 3.0)


def test_uniform_support_endpoints_included(uniform_support):
    """Both endpoints belong to the support."""
    assert pdf_uniform(**uniform_support, x=2.0) > 0.0
    assert pdf_uniform(**uniform_support, x=5.0) > 0.0


def test_uniform_outside_support(uniform_support):
    """Density is 0 outside [start, end]."""
    assert pdf_uniform(**uniform_support, x=1.999) == 0.0
    assert pdf_uniform(**uniform_support, x=5.001) == 0.0


def test_uniform_negative_x_is_zero():
    """Negative x has zero density even when the support includes it."""
    assert pdf_uniform(-2.0, 2.0, -1.0) == 0.0
    assert pdf_uniform(-2.0, 2.0, 1.0) == pytest.approx(0.25)


def test_exponential_density(exponential_params):
    """λ·e^(-λx) for x >= 0."""
    rate = exponential_params["rate"]
    assert pdf_exponential(rate, 0.0) == pytest.approx(rate)
    assert pdf_exponential(rate, 2.0) == pytest.approx(rate * math.exp(-1.0))


def test_exponential_negative_x_is_zero(exponential_params):
    """No density below zero."""
    assert pdf_exponential(exponential_params["rate"], -0.1) == 0.0


@pytest.mark.parametrize(
    "density",
    [
        lambda x: pdf_uniform(0.0, 4.0, x),
        lambda x: pdf_normal(1.0, 0.5, x),
        pdf_standard_normal,
        lambda x: pdf_exponential(2.0, x),
    ],
)
def test_densities_non_negative(density):
    """All densities are non-negative and finite on a grid."""
    for i in range(-50, 51):
        value = density(i / 10.0)
        assert value >= 0.0
        assert math.isfinite(value)


# ===========================
# Uniform Integration Tests
# ===========================


@pytest.mark.parametrize("start,end", [(0.0, 1.0), (2.0, 5.0), (1.5, 4.0)])
@pytest.mark.parametrize("step_count", [1, 3, 10, 100])
def test_uniform_integrates_to_one(start, end, step_count):
    """Uniform density over its own support integrates to 1."""
    result = integrate(start, end, step_count, lambda x: pdf_uniform(start, end, x))
    assert result == pytest.approx(1.0, abs=1e-9)


def test_uniform_negative_support_integrates_to_zero():
    """A support entirely below zero carries no mass."""
    assert integrate(-2.0, -1.0, 10, lambda x: pdf_uniform(-2.0, -1.0, x)) == 0.0


def test_cdf_uniform_constant():
    """cdf_uniform is always 1."""
    assert cdf_uniform() == 1.0


# ===========================
# Normal Interval Probability Tests
# ===========================


def test_cdf_normal_one_sigma_ten_steps():
    """cdf_normal(0, 1, 10, -1, 1) ≈ 0.681."""
    result = cdf_normal(0.0, 1.0, 10, -1.0, 1.0)
    assert abs(result - 0.681) < 0.02
    assert round_value(3, result) == 0.681


def test_cdf_normal_matches_manual_integration():
    """cdf_normal is integrate applied to pdf_normal."""
    direct = integrate(-1.0, 1.0, 10, lambda x: pdf_normal(0.0, 1.0, x))
    assert round_value(3, direct) == round_value(3, cdf_normal(0.0, 1.0, 10, -1.0, 1.0))


@pytest.mark.parametrize("k,expected", [(1, 0.683), (2, 0.954), (3, 0.997)])
def test_empirical_rule(k, expected):
    """68-95-99.7 rule with 100 steps."""
    assert abs(cdf_standard_normal(100, -k, k) - expected) < 0.01


def test_standard_normal_monotone_in_width():
    """Wider symmetric intervals hold more mass, approaching 1."""
    values = [cdf_standard_normal(200, -k, k) for k in (0.5, 1.0, 2.0, 3.0, 5.0, 8.0)]
    assert values == sorted(values)
    assert values[-1] == pytest.approx(1.0, abs=1e-4)


def test_cdf_normal_location_scale(normal_params):
    """Shifting and scaling the interval with mu and sigma preserves mass."""
    mu, sigma = normal_params["mu"], normal_params["sigma"]
    shifted = cdf_normal(mu, sigma, 50, mu - sigma, mu + 2.0 * sigma)
    standard = cdf_standard_normal(50, -1.0, 2.0)
    assert shifted == pytest.approx(standard, rel=1e-9)


def test_cdf_normal_reversed_bounds():
    """Reversed bounds give the same mass."""
    assert cdf_normal(0.0, 1.0, 40, 1.0, -0.5) == pytest.approx(cdf_normal(0.0, 1.0, 40, -0.5, 1.0))


# ===========================
# Exponential Interval Probability Tests
# ===========================


@pytest.mark.parametrize("rate", [0.5, 1.0, 3.0])
@pytest.mark.parametrize("step_count", [1, 10, 100])
def test_exponential_clamp(rate, step_count):
    """Negative lower bound is clamped to zero."""
    assert cdf_exponential(rate, step_count, -10.0, 5.0) == cdf_exponential(rate, step_count, 0.0, 5.0)


def test_exponential_interval_probability(exponential_params):
    """P(0 <= X <= 2) = 1 - e^(-λ·2)."""
    rate = exponential_params["rate"]
    expected = 1.0 - math.exp(-rate * 2.0)
    assert cdf_exponential(rate, 200, 0.0, 2.0) == pytest.approx(expected, abs=1e-4)


def test_exponential_entirely_negative_interval():
    """Only the "from" bound is clamped; (-5, -1) integrates from 0 down to -1."""
    expected = integrate(0.0, -1.0, 10, lambda x: pdf_exponential(1.0, x))
    result = cdf_exponential(1.0, 10, -5.0, -1.0)
    assert result == expected
    assert result == pytest.approx(0.05)


def test_exponential_reversed_interval_keeps_to_bound():
    """A reversed interval integrates positionally from 5 down to -10."""
    expected = integrate(5.0, -10.0, 10, lambda x: pdf_exponential(1.0, x))
    result = cdf_exponential(1.0, 10, 5.0, -10.0)
    assert result == expected
    assert result == pytest.approx(1.163148449806661)


def test_exponential_clamps_start_not_end():
    """A negative "to" bound is left alone."""
    assert cdf_exponential(1.0, 10, 1.0, -2.0) == integrate(1.0, -2.0, 10, lambda x: pdf_exponential(1.0, x))
    assert cdf_exponential(1.0, 10, 1.0, -2.0) != cdf_exponential(1.0, 10, 1.0, 0.0)


# ===========================
# Input Validation Tests
# ===========================


def test_zero_sigma_pdf_raises():
    """Zero standard deviation should raise ValueError."""
    with pytest.raises(ValueError, match="sigma"):
        pdf_normal(0.0, 0.0, 1.0)


def test_zero_sigma_cdf_raises():
    """cdf_normal rejects zero sigma before integrating."""
    with pytest.raises(ValueError, match="sigma"):
        cdf_normal(0.0, 0.0, 10, -1.0, 1.0)


def test_zero_width_uniform_raises():
    """Zero-width uniform support should raise ValueError."""
    with pytest.raises(ValueError, match="non-zero width"):
        pdf_uniform(1.0, 1.0, 1.0)


def test_cdf_zero_steps_raises():
    """Zero step count should raise ValueError."""
    with pytest.raises(ValueError):
        cdf_standard_normal(0, -1.0, 1.0)
