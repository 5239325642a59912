"""
Command-line interface for probcalc.

This CLI provides access to:
- Probability densities (uniform, normal, standard normal, exponential)
- Interval probabilities by trapezoidal integration
- Tabulated density samples
- Factorial
"""

import logging
import sys

import click
import pandas as pd

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
from probcalc.core.integration import sample_curve
from probcalc.core.numeric import factorial as factorial_value
from probcalc.core.reference import (
    exact_exponential,
    exact_normal,
    exact_standard_normal,
    exact_uniform,
    integration_error,
)
from probcalc.utils.constants import DEFAULT_STEP_COUNT, DEFAULT_TABLE_STEPS, DISTRIBUTIONS
from probcalc.utils.types import DistributionName, RealFunction


def _density(dist: DistributionName, mu: float, sigma: float, rate: float, low: float, high: float) -> RealFunction:
    """Bind the distribution parameters, leaving a function of x."""
    if dist == "uniform":
        return lambda x: pdf_uniform(low, high, x)
    elif dist == "normal":
        return lambda x: pdf_normal(mu, sigma, x)
    elif dist == "standard-normal":
        return pdf_standard_normal
    else:
        return lambda x: pdf_exponential(rate, x)


def _interval_probability(
    dist: DistributionName, mu: float, sigma: float, rate: float, steps: int, start: float, end: float
) -> float:
    if dist == "uniform":
        return cdf_uniform()
    elif dist == "normal":
        return cdf_normal(mu, sigma, steps, start, end)
    elif dist == "standard-normal":
        return cdf_standard_normal(steps, start, end)
    else:
        return cdf_exponential(rate, steps, start, end)


def _exact_probability(
    dist: DistributionName, mu: float, sigma: float, rate: float, low: float, high: float, start: float, end: float
) -> float:
    if dist == "uniform":
        return exact_uniform(low, high)
    elif dist == "normal":
        return exact_normal(mu, sigma, start, end)
    elif dist == "standard-normal":
        return exact_standard_normal(start, end)
    else:
        return exact_exponential(rate, start, end)


def distribution_options(command):
    """Shared distribution selection and parameter options."""
    options = [
        click.option("--dist", "-d", type=click.Choice(DISTRIBUTIONS), default="standard-normal"),
        click.option("--mu", "-m", type=float, default=0.0, help="Mean (normal)"),
        click.option("--sigma", "-s", type=float, default=1.0, help="Standard deviation (normal)"),
        click.option("--rate", "-l", type=float, default=1.0, help="Rate lambda (exponential)"),
        click.option("--low", type=float, default=0.0, help="Support lower bound (uniform)"),
        click.option("--high", type=float, default=1.0, help="Support upper bound (uniform)"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """probcalc - Densities and trapezoidal interval probabilities."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@distribution_options
@click.option("-x", type=float, required=True, help="Point at which to evaluate")
def pdf(dist, mu, sigma, rate, low, high, x):
    """Evaluate a probability density at a point."""
    try:
        value = _density(dist, mu, sigma, rate, low, high)(x)
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    click.echo(f"\n{dist} density at x={x}: {value:.6f}")


@cli.command()
@distribution_options
@click.option("--start", "-a", type=float, required=True, help="Interval start")
@click.option("--end", "-b", type=float, required=True, help="Interval end")
@click.option("--steps", "-n", type=int, default=DEFAULT_STEP_COUNT, help="Trapezoid count")
@click.option("--compare", is_flag=True, help="Also show the exact value and error")
def cdf(dist, mu, sigma, rate, low, high, start, end, steps, compare):
    """Probability mass between START and END (trapezoidal rule)."""
    try:
        estimate = _interval_probability(dist, mu, sigma, rate, steps, start, end)
        exact = _exact_probability(dist, mu, sigma, rate, low, high, start, end) if compare else None
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    if dist == "uniform":
        click.echo(f"\nP({low} <= X <= {high}) for uniform (full support): {estimate:.6f}")
    else:
        click.echo(f"\nP({start} <= X <= {end}) for {dist}: {estimate:.6f}")
    if exact is not None:
        click.echo(f"  Exact:  {exact:>10.6f}")
        click.echo(f"  Error:  {integration_error(estimate, exact):>10.2e}")


@cli.command()
@distribution_options
@click.option("--start", "-a", type=float, required=True, help="Interval start")
@click.option("--end", "-b", type=float, required=True, help="Interval end")
@click.option("--steps", "-n", type=int, default=DEFAULT_TABLE_STEPS, help="Number of steps")
def table(dist, mu, sigma, rate, low, high, start, end, steps):
    """Tabulate the density at evenly spaced points."""
    try:
        points, samples = sample_curve(start, end, steps, _density(dist, mu, sigma, rate, low, high))
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    df = pd.DataFrame({"x": points, "density": samples})
    click.echo(df.to_string(index=False))


@cli.command()
@click.argument("n", type=int)
def factorial(n):
    """Compute N! (1 for any N < 1)."""
    click.echo(factorial_value(n))


if __name__ == "__main__":
    cli()
