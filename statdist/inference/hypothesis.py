"""
z and t hypothesis tests for proportions and means.

The statistic helpers return bare numbers; ``proportion_test`` and
``mean_test`` wrap them into a HypothesisTestResult with the p-value
for the requested alternative and the decision at level alpha.
"""

import logging
import math
from typing import Callable

from statdist.core.normal import pnorm
from statdist.core.student import pt
from statdist.utils.constants import DEFAULT_ALPHA
from statdist.utils.types import Alternative, HypothesisTestResult

logger = logging.getLogger(__name__)

ALTERNATIVES = ("two-sided", "less", "greater")


def proportion_hypothesis_z(n: float, phat: float, p0: float) -> float:
    """
    One-sample z statistic for a proportion.

        z = (phat - p0) / sqrt(p0 (1 - p0) / n)

    Raises:
        ValueError: If n <= 0 or p0 is not in (0, 1)
    """
    if not n > 0:
        raise ValueError(f"Sample size must be positive, got n={n}")
    if not 0.0 < p0 < 1.0:
        raise ValueError(f"Null proportion must be in (0, 1), got p0={p0}")
    return (phat - p0) / math.sqrt(p0 * (1.0 - p0) / n)


def mean_hypothesis_t(n: float, xbar: float, mu: float, sigma: float) -> float:
    """
    One-sample t (or z) statistic for a mean.

        t = (xbar - mu) / (sigma / sqrt(n))
    """
    if not n > 0:
        raise ValueError(f"Sample size must be positive, got n={n}")
    if not sigma > 0:
        raise ValueError(f"Standard deviation must be positive, got sigma={sigma}")
    return (xbar - mu) / (sigma / math.sqrt(n))


def two_proportion_z(x1: float, n1: float, x2: float, n2: float) -> float:
    """
    Pooled two-sample z statistic for the difference of two proportions.

    Args:
        x1, n1: Successes and trials of the first sample
        x2, n2: Successes and trials of the second sample

    Returns:
        (p1 - p2) / sqrt(p (1 - p) (1/n1 + 1/n2)) with the pooled
        proportion p = (x1 + x2) / (n1 + n2)
    """
    if not (n1 > 0 and n2 > 0):
        raise ValueError(f"Sample sizes must be positive, got n1={n1}, n2={n2}")
    if not (0 <= x1 <= n1 and 0 <= x2 <= n2):
        raise ValueError("Successes must lie between 0 and the sample size")

    pooled = (x1 + x2) / (n1 + n2)
    if pooled in (0.0, 1.0):
        raise ValueError("Pooled proportion is 0 or 1; the z statistic is undefined")

    se = math.sqrt(pooled * (1.0 - pooled) * (1.0 / n1 + 1.0 / n2))
    return (x1 / n1 - x2 / n2) / se


def two_mean_t(
    xbar1: float, s1: float, n1: float, xbar2: float, s2: float, n2: float
) -> tuple[float, float]:
    """
    Welch's two-sample t statistic and its Welch-Satterthwaite degrees of freedom.

    Returns:
        Tuple (t, df)
    """
    if not (n1 > 1 and n2 > 1):
        raise ValueError(f"Each sample needs at least two observations, got n1={n1}, n2={n2}")
    if s1 < 0 or s2 < 0:
        raise ValueError("Standard deviations cannot be negative")

    v1 = s1 * s1 / n1
    v2 = s2 * s2 / n2
    se2 = v1 + v2
    if se2 == 0.0:
        raise ValueError("Both samples have zero spread; the t statistic is undefined")

    t = (xbar1 - xbar2) / math.sqrt(se2)
    df = se2 * se2 / (v1 * v1 / (n1 - 1) + v2 * v2 / (n2 - 1))
    return t, df


def decide_hypothesis(p_value: float, alpha: float = DEFAULT_ALPHA) -> bool:
    """
    Reject H0 when the p-value falls below the significance level.

    Returns:
        True to reject H0, False otherwise
    """
    if not 0.0 < alpha < 1.0:
        raise ValueError(f"Significance level must be in (0, 1), got alpha={alpha}")
    reject = p_value < alpha
    logger.debug("p-value %.6g vs alpha %g: %s H0", p_value, alpha,
                 "reject" if reject else "don't reject")
    return reject


def _p_value(statistic: float, alternative: Alternative, cdf: Callable[..., float]) -> float:
    if alternative == "less":
        return cdf(statistic, lower_tail=True)
    if alternative == "greater":
        return cdf(statistic, lower_tail=False)
    if alternative == "two-sided":
        tail = min(cdf(statistic, lower_tail=True), cdf(statistic, lower_tail=False))
        return min(1.0, 2.0 * tail)
    raise ValueError(f"alternative must be one of {ALTERNATIVES}, got {alternative!r}")


def proportion_test(
    successes: int,
    n: int,
    p0: float,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> HypothesisTestResult:
    """
    One-sample z test for a proportion.

    Args:
        successes: Number of successes observed
        n: Number of trials
        p0: Proportion under H0, in (0, 1)
        alternative: 'two-sided', 'less' or 'greater'
        alpha: Significance level

    Returns:
        HypothesisTestResult with the z statistic and its normal p-value

    Examples:
        >>> result = proportion_test(80, 100, 0.81, alternative="less")
        >>> round(result.p_value, 4)
        0.3994
    """
    if not 0 <= successes <= n:
        raise ValueError(f"Successes must be between 0 and n={n}, got {successes}")

    z = proportion_hypothesis_z(n, successes / n, p0)

    def cdf(x: float, lower_tail: bool) -> float:
        return pnorm(x, 0.0, 1.0, lower_tail)

    p_value = _p_value(z, alternative, cdf)
    return HypothesisTestResult(
        statistic=z,
        p_value=p_value,
        alternative=alternative,
        alpha=alpha,
        reject=decide_hypothesis(p_value, alpha),
    )


def mean_test(
    xbar: float,
    s: float,
    n: int,
    mu0: float,
    alternative: Alternative = "two-sided",
    alpha: float = DEFAULT_ALPHA,
) -> HypothesisTestResult:
    """
    One-sample t test for a mean with n - 1 degrees of freedom.

    Args:
        xbar: Sample mean
        s: Sample standard deviation
        n: Sample size, at least 2
        mu0: Mean under H0
        alternative: 'two-sided', 'less' or 'greater'
        alpha: Significance level

    Returns:
        HypothesisTestResult with the t statistic, its p-value and df
    """
    if n < 2:
        raise ValueError(f"A t test needs at least two observations, got n={n}")

    t = mean_hypothesis_t(n, xbar, mu0, s)
    df = n - 1

    def cdf(x: float, lower_tail: bool) -> float:
        return pt(x, df, lower_tail)

    p_value = _p_value(t, alternative, cdf)
    return HypothesisTestResult(
        statistic=t,
        p_value=p_value,
        alternative=alternative,
        alpha=alpha,
        reject=decide_hypothesis(p_value, alpha),
        df=float(df),
    )
