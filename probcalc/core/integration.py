"""
Trapezoidal-rule definite integration.

This module turns an arbitrary real-valued function into the area under
its curve over an interval. The computation is split into the stages of
the trapezoidal rule so each can be inspected on its own:

    fractions -> sample points -> sample sequence -> bins -> areas -> sum

Mathematical Background:
    With n steps of width h = (b - a) / n and samples y_i = f(a + i·h),

        ∫ f(x) dx ≈ Σ h · (y_i + y_{i+1}) / 2,   i = 0 .. n-1

    The error is O(h²) for twice-differentiable f, so accuracy improves
    as the step count grows. No adaptive refinement is performed.
"""

import logging

import numpy as np

from probcalc.utils.constants import MIN_STEP_COUNT
from probcalc.utils.types import Interval, RealFunction

logger = logging.getLogger(__name__)


def _validate_step_count(step_count: int) -> None:
    """
    Validate the number of trapezoids.

    Args:
        step_count: Number of equal-width steps across the interval

    Raises:
        ValueError: If step_count is not an integer or is below 1
    """
    if isinstance(step_count, bool) or not isinstance(step_count, (int, np.integer)):
        raise ValueError(f"Step count must be an integer, got step_count={step_count!r}")
    if step_count < MIN_STEP_COUNT:
        raise ValueError(f"Step count must be at least {MIN_STEP_COUNT}, got step_count={step_count}")


def interpolation_fractions(step_count: int) -> np.ndarray:
    """
    Evenly spaced fractions i / step_count for i = 0 .. step_count.

    Returns:
        Array of length step_count + 1, starting at exactly 0.0 and
        ending at exactly 1.0
    """
    _validate_step_count(step_count)
    return np.arange(step_count + 1) / step_count


def sample_points(interval: Interval, step_count: int) -> np.ndarray:
    """
    Map interpolation fractions onto the interval.

    Args:
        interval: Positional (start, end) pair; may be reversed
        step_count: Number of steps

    Returns:
        x-coordinates x_i = start + fraction_i · span
    """
    return interval.start + interpolation_fractions(step_count) * interval.span


def sample_values(points: np.ndarray, f: RealFunction) -> np.ndarray:
    """
    Evaluate f at each point, preserving order.

    f is called once per point with a plain Python float, so integrands
    written with scalar branches (support checks, math.exp) work unchanged.
    Exceptions raised by f are not caught.
    """
    return np.array([f(x) for x in points.tolist()], dtype=float)


def to_bins(samples: np.ndarray) -> np.ndarray:
    """
    Pair each sample with its successor.

    Returns:
        Array of shape (len(samples) - 1, 2); row i is (y_i, y_{i+1}).
        The last sample has no successor and forms no bin.
    """
    return np.column_stack((samples[:-1], samples[1:]))


def trapezoid_areas(bins: np.ndarray, step_width: float) -> np.ndarray:
    """
    Signed area of each trapezoid: step_width · (left + right) / 2.
    """
    return step_width * (bins[:, 0] + bins[:, 1]) / 2.0


def sample_curve(
    start: float, end: float, step_count: int, f: RealFunction
) -> tuple[np.ndarray, np.ndarray]:
    """
    Tabulate f at the integrator's sample points.

    Args:
        start: "from" endpoint
        end: "to" endpoint
        step_count: Number of steps (step_count + 1 samples)
        f: Function to evaluate

    Returns:
        Tuple (points, samples), each of length step_count + 1

    Raises:
        ValueError: If step_count is not a positive integer
    """
    points = sample_points(Interval(start, end), step_count)
    return points, sample_values(points, f)


def integrate(start: float, end: float, step_count: int, f: RealFunction) -> float:
    """
    Approximate the definite integral of f over [start, end].

    Args:
        start: "from" endpoint
        end: "to" endpoint (may be less than start)
        step_count: Number of equal-width trapezoids, at least 1
        f: Pure function from float to float

    Returns:
        Absolute value of the summed trapezoid areas

    Raises:
        ValueError: If step_count is not a positive integer

    Examples:
        >>> abs(integrate(0.0, 1.0, 10, lambda x: 2.0 * x) - 1.0) < 1e-12  # Exact for lines
        True
        >>> integrate(5.0, 5.0, 10, lambda x: x * x)  # Degenerate interval
        0.0

    Notes:
        - f is evaluated exactly step_count + 1 times
        - Only the final sum is made non-negative; for a reversed interval
          the per-segment signs are all flipped together
        - Non-finite samples (inf, nan) propagate into the result
    """
    _, samples = sample_curve(start, end, step_count, f)
    step_width = Interval(start, end).span / step_count

    areas = trapezoid_areas(to_bins(samples), step_width)
    result = abs(float(np.sum(areas)))

    logger.debug(
        "Integrated over [%s, %s] with %d steps: %s", start, end, step_count, result
    )
    return result
