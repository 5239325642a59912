"""
Data types and structures for density integration.

This module defines the small immutable value types passed between the
integrator, the distribution functions and the command-line interface.
"""

from dataclasses import dataclass
from typing import Callable, Literal

DistributionName = Literal["uniform", "normal", "standard-normal", "exponential"]

RealFunction = Callable[[float], float]


@dataclass(frozen=True)
class Interval:
    """
    Positional integration interval.

    Attributes:
        start: The "from" endpoint; the first sample is taken here
        end: The "to" endpoint; the last sample is taken here

    Notes:
        start > end is allowed. The integrator subtracts positionally, so a
        reversed interval produces a negative running sum that is only
        corrected by taking the absolute value of the final result.
    """
    start: float
    end: float

    @property
    def span(self) -> float:
        """Signed width of the interval (end - start)."""
        return self.end - self.start

    def clamp_start(self, floor: float) -> "Interval":
        """Return a copy with the "from" endpoint raised to at least floor."""
        return Interval(max(self.start, floor), self.end)


@dataclass(frozen=True)
class Tangent:
    """
    Local linear approximation y = slope * x + intercept.

    Attributes:
        slope: Central-difference derivative estimate, rounded
        intercept: f(x) - slope * x
        x: Point of tangency
        dx: Step used for the derivative estimate
    """
    slope: float
    intercept: float
    x: float
    dx: float

    def __call__(self, x: float) -> float:
        return self.slope * x + self.intercept
