"""
Command-line interface for the statdist toolkit.

This CLI provides access to:
- Density, distribution and quantile functions (normal, binomial,
  Poisson, chi-square, Student-t)
- Descriptive statistics of a sample

Negative values must follow ``--`` so they are not read as options,
e.g. ``statdist normal -- -1.5``.
"""

import logging
import math

import click

from statdist.core.binomial import dbinom, pbinom, qbinom
from statdist.core.chisquare import dchisq, pchisq, qchisq
from statdist.core.normal import dnorm, pnorm, qnorm
from statdist.core.poisson import dpois, ppois, qpois
from statdist.core.student import dt, pt, qt
from statdist.inference.descriptive import mean, median, mode, standard_deviation, variance

FUNCTIONS = click.Choice(["d", "p", "q"])


def _report(fn: str, value: float, result: float, upper: bool = False) -> None:
    if math.isnan(result):
        raise click.ClickException("Result is undefined for these parameters")

    if fn == "d":
        click.echo(f"\nDensity at {value:g}: {result:.6f}")
    elif fn == "p":
        relation = ">" if upper else "<="
        click.echo(f"\nP(X {relation} {value:g}) = {result:.6f}")
    else:
        click.echo(f"\nQuantile at p={value:g}: {result:.6f}")


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose):
    """statdist - Probability distributions and elementary inference."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("value", type=float)
@click.option("--mean", "-m", "mu", type=float, default=0.0, help="Mean")
@click.option("--sd", "-s", "sigma", type=float, default=1.0, help="Standard deviation")
@click.option("--fn", "-f", type=FUNCTIONS, default="p", help="d=density, p=CDF, q=quantile")
@click.option("--upper", is_flag=True, help="Upper tail for the CDF")
def normal(value, mu, sigma, fn, upper):
    """Normal distribution N(mean, sd^2)."""
    if fn == "d":
        result = dnorm(value, mu, sigma)
    elif fn == "p":
        result = pnorm(value, mu, sigma, lower_tail=not upper)
    else:
        result = qnorm(value, mu, sigma)
    _report(fn, value, result, upper)


@cli.command()
@click.argument("value", type=float)
@click.option("--size", "-n", type=int, required=True, help="Number of trials")
@click.option("--prob", "-p", type=float, required=True, help="Success probability")
@click.option("--fn", "-f", type=FUNCTIONS, default="p", help="d=mass, p=CDF, q=quantile")
@click.option("--upper", is_flag=True, help="Upper tail for the CDF")
def binomial(value, size, prob, fn, upper):
    """Binomial distribution B(size, prob)."""
    if fn == "d":
        result = dbinom(value, size, prob)
    elif fn == "p":
        result = pbinom(value, size, prob, lower_tail=not upper)
    else:
        result = qbinom(value, size, prob)
    _report(fn, value, result, upper)


@cli.command()
@click.argument("value", type=float)
@click.option("--lam", "-l", type=float, required=True, help="Rate (mean)")
@click.option("--fn", "-f", type=FUNCTIONS, default="p", help="d=mass, p=CDF, q=quantile")
@click.option("--upper", is_flag=True, help="Upper tail for the CDF")
def poisson(value, lam, fn, upper):
    """Poisson distribution with rate lam."""
    if fn == "d":
        result = dpois(value, lam)
    elif fn == "p":
        result = ppois(value, lam, lower_tail=not upper)
    else:
        result = qpois(value, lam)
    _report(fn, value, result, upper)


@cli.command()
@click.argument("value", type=float)
@click.option("--df", "-d", type=float, required=True, help="Degrees of freedom")
@click.option("--fn", "-f", type=FUNCTIONS, default="p", help="d=density, p=CDF, q=quantile")
@click.option("--upper", is_flag=True, help="Upper tail for the CDF")
def chisq(value, df, fn, upper):
    """Chi-square distribution with df degrees of freedom."""
    if fn == "d":
        result = dchisq(value, df)
    elif fn == "p":
        result = pchisq(value, df, lower_tail=not upper)
    else:
        result = qchisq(value, df)
    _report(fn, value, result, upper)


@cli.command(name="t")
@click.argument("value", type=float)
@click.option("--df", "-d", type=float, required=True, help="Degrees of freedom")
@click.option("--fn", "-f", type=FUNCTIONS, default="p", help="d=density, p=CDF, q=quantile")
@click.option("--upper", is_flag=True, help="Upper tail for the CDF")
def student_t(value, df, fn, upper):
    """Student's t distribution with df degrees of freedom."""
    if fn == "d":
        result = dt(value, df)
    elif fn == "p":
        result = pt(value, df, lower_tail=not upper)
    else:
        result = qt(value, df)
    _report(fn, value, result, upper)


@cli.command()
@click.argument("values", nargs=-1, type=float, required=True)
def describe(values):
    """Descriptive statistics of the given numbers."""
    click.echo(f"\nSample of {len(values)} observation(s):")
    click.echo(f"  Mean:      {mean(values):>12.6f}")
    click.echo(f"  Median:    {median(values):>12.6f}")
    click.echo(f"  Mode:      {mode(values):>12.6f}")
    try:
        click.echo(f"  Variance:  {variance(values):>12.6f}")
        click.echo(f"  Std dev:   {standard_deviation(values):>12.6f}")
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)


if __name__ == "__main__":
    cli()
