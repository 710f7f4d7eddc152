"""
Central limit theorem helpers and confidence intervals.

By the central limit theorem, sample means (n >= 30) are approximately
normal with mean mu and standard error sigma/sqrt(n), and sample
proportions (n*p >= 5 and n*(1-p) >= 5) approximately normal with mean p
and standard error sqrt(p(1-p)/n). The helpers below compute those
standard errors, convert between raw values and z-scores, and build
margins of error, required sample sizes and two-sided intervals.
"""

import math
from typing import Optional

from statdist.core.normal import qnorm
from statdist.core.student import qt
from statdist.utils.constants import LARGE_SAMPLE_SIZE
from statdist.utils.types import ConfidenceInterval


def _validate_n(n: float) -> None:
    if not n > 0:
        raise ValueError(f"Sample size must be positive, got n={n}")


def _validate_probability(p: float, name: str = "p") -> None:
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {name}={p}")


def _validate_confidence(confidence: float) -> None:
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"Confidence level must be in (0, 1), got confidence={confidence}")


def q_sigma_clt(n: float, sigma: float) -> float:
    """
    Standard error of the sample mean, sigma / sqrt(n).

    Examples:
        >>> q_sigma_clt(100, 15.0)
        1.5
    """
    _validate_n(n)
    if sigma < 0:
        raise ValueError(f"Standard deviation cannot be negative, got sigma={sigma}")
    return sigma / math.sqrt(n)


def p_sigma_clt(n: float, p: float) -> float:
    """Standard error of a sample proportion, sqrt(p(1 - p) / n)."""
    _validate_n(n)
    _validate_probability(p)
    return math.sqrt(p * (1.0 - p) / n)


def z_clt(x: float, mu: float, sigma: float) -> float:
    """z-score of x for a normal distribution with mean mu and sd sigma."""
    if not sigma > 0:
        raise ValueError(f"Standard deviation must be positive, got sigma={sigma}")
    return (x - mu) / sigma


def x_clt(z: float, mu: float, sigma: float) -> float:
    """Raw value at z standard deviations from mu."""
    return mu + z * sigma


def z_phat(n: float, p: float, phat: float) -> float:
    """
    z-score of an observed proportion phat under a population proportion p.

    Args:
        n: Sample size
        p: Population proportion in (0, 1)
        phat: Observed sample proportion

    Returns:
        (phat - p) / sqrt(p(1 - p) / n)
    """
    _validate_n(n)
    if not 0.0 < p < 1.0:
        raise ValueError(f"Population proportion must be in (0, 1), got p={p}")
    return (phat - p) / math.sqrt(p * (1.0 - p) / n)


def proportion_moe(n: float, z: float, phat: float) -> float:
    """Margin of error of a proportion, z * sqrt(phat(1 - phat) / n)."""
    _validate_n(n)
    _validate_probability(phat, "phat")
    return z * math.sqrt(phat * (1.0 - phat) / n)


def mean_moe(n: float, t: float, sigma: float) -> float:
    """Margin of error of a mean, t * sigma / sqrt(n) (t may be a z value)."""
    _validate_n(n)
    return t * (sigma / math.sqrt(n))


def proportion_n(moe: float, z: float, phat: float = 0.5) -> float:
    """
    Sample size giving a proportion margin of error of at most ``moe``.

    Computes phat(1 - phat)(z / moe)^2; round the result up to get a
    whole number of observations. Without a prior estimate, phat = 0.5
    gives the most conservative size.

    Examples:
        >>> math.ceil(proportion_n(0.05, 1.64485, 0.84))
        146
    """
    if not moe > 0:
        raise ValueError(f"Margin of error must be positive, got moe={moe}")
    _validate_probability(phat, "phat")
    return phat * (1.0 - phat) * (z / moe) ** 2


def mean_n(moe: float, z: float, sigma: float) -> float:
    """Sample size giving a mean margin of error of at most ``moe``, (z sigma / moe)^2."""
    if not moe > 0:
        raise ValueError(f"Margin of error must be positive, got moe={moe}")
    return ((z * sigma) / moe) ** 2


def critical_z(confidence: float) -> float:
    """
    Two-sided critical value of the standard normal distribution.

    Examples:
        >>> round(critical_z(0.95), 5)
        1.95996
    """
    _validate_confidence(confidence)
    return qnorm(1.0 - (1.0 - confidence) / 2.0)


def critical_t(confidence: float, df: float) -> float:
    """Two-sided critical value of Student's t with df degrees of freedom."""
    _validate_confidence(confidence)
    if not df > 0:
        raise ValueError(f"Degrees of freedom must be positive, got df={df}")
    return qt(1.0 - (1.0 - confidence) / 2.0, df)


def proportion_interval(successes: int, n: int, confidence: float = 0.95) -> ConfidenceInterval:
    """
    Normal-approximation (Wald) confidence interval for a proportion.

    Args:
        successes: Number of successes observed
        n: Number of trials
        confidence: Confidence level in (0, 1)

    Returns:
        ConfidenceInterval around phat = successes / n

    Examples:
        >>> ci = proportion_interval(137, 238)
        >>> round(ci.lower, 3), round(ci.upper, 3)
        (0.513, 0.638)
    """
    _validate_n(n)
    if not 0 <= successes <= n:
        raise ValueError(f"Successes must be between 0 and n={n}, got {successes}")
    _validate_confidence(confidence)

    phat = successes / n
    z = critical_z(confidence)
    return ConfidenceInterval(
        estimate=phat,
        margin_of_error=proportion_moe(n, z, phat),
        confidence=confidence,
        critical_value=z,
    )


def mean_interval(
    xbar: float,
    s: float,
    n: int,
    confidence: float = 0.95,
    use_t: Optional[bool] = None,
) -> ConfidenceInterval:
    """
    Confidence interval for a mean.

    Args:
        xbar: Sample mean
        s: Sample (or known population) standard deviation
        n: Sample size
        confidence: Confidence level in (0, 1)
        use_t: Use Student's t with n - 1 degrees of freedom; by default
               t is used for small samples (n < 30) and z otherwise

    Returns:
        ConfidenceInterval around xbar
    """
    _validate_n(n)
    _validate_confidence(confidence)
    if s < 0:
        raise ValueError(f"Standard deviation cannot be negative, got s={s}")

    if use_t is None:
        use_t = n < LARGE_SAMPLE_SIZE
    if use_t:
        if n < 2:
            raise ValueError("A t interval needs at least two observations")
        critical = critical_t(confidence, n - 1)
    else:
        critical = critical_z(confidence)

    return ConfidenceInterval(
        estimate=xbar,
        margin_of_error=mean_moe(n, critical, s),
        confidence=confidence,
        critical_value=critical,
    )
