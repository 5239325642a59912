"""
Small numeric helpers used alongside the integrator.

Rounding, factorial, min-max normalization and central-difference
derivative estimates. These are convenience functions for callers that
display or post-process densities; the integrator does not depend on them.
"""

from probcalc.utils.constants import DEFAULT_DX, TANGENT_DECIMALS
from probcalc.utils.types import RealFunction, Tangent


def round_value(decimal_places: int, x: float) -> float:
    """
    Round x to a fixed number of decimal places.

    Scales by 10^decimal_places, rounds to the nearest integer (ties to
    even, as Python's round does) and scales back.

    Examples:
        >>> round_value(3, 0.68106)
        0.681
        >>> round_value(0, 2.4)
        2.0
    """
    scale = 10 ** decimal_places
    return round(x * scale) / scale


def factorial(n: int) -> int:
    """
    Product n · (n-1) · ... · 1.

    Any n < 1, including negative n, is the base case and returns 1.

    Examples:
        >>> factorial(5)
        120
        >>> factorial(0), factorial(-3)
        (1, 1)
    """
    result = 1
    while n >= 1:
        result *= n
        n -= 1
    return result


def normalize(xmin: float, xmax: float, x: float) -> float:
    """
    Linearly rescale x from [xmin, xmax] onto [0, 1].

    No clamping is done: x outside [xmin, xmax] maps outside [0, 1].

    Raises:
        ValueError: If xmin == xmax (zero-width range)
    """
    if xmax == xmin:
        raise ValueError(f"Normalization range must have non-zero width, got xmin=xmax={xmin}")
    return (x - xmin) / (xmax - xmin)


def slope(dx: float, x: float, f: RealFunction) -> float:
    """
    Central-difference derivative estimate (f(x + dx/2) - f(x - dx/2)) / dx.
    """
    half = dx / 2.0
    return (f(x + half) - f(x - half)) / dx


def tangent(dx: float, x: float, f: RealFunction) -> Tangent:
    """
    Tangent line of f at x.

    Args:
        dx: Step for the derivative estimate (see slope)
        x: Point of tangency
        f: Function to approximate

    Returns:
        Tangent with the slope rounded to TANGENT_DECIMALS places and
        intercept f(x) - slope · x computed from the rounded slope

    Example:
        >>> line = tangent(0.01, 2.0, lambda t: t * t)
        >>> line.slope, line.intercept
        (4.0, -4.0)
    """
    m = round_value(TANGENT_DECIMALS, slope(dx, x, f))
    return Tangent(slope=m, intercept=f(x) - m * x, x=x, dx=dx)


def tangent_at(x: float, f: RealFunction) -> Tangent:
    """Tangent of f at x using the default derivative step."""
    return tangent(DEFAULT_DX, x, f)
