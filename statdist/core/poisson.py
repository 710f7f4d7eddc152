"""
Poisson distribution: probability mass, distribution and quantile functions.

The mass function is evaluated with Loader's saddle-point method
(``dpois_raw``), the CDF through its identity with the upper regularized
incomplete gamma function, and the quantile by a Cornish-Fisher start
followed by a discrete search.

    P(X = x)  = lambda^x e^(-lambda) / x!
    P(X <= x) = Q(floor(x) + 1, lambda)
"""

import math

from statdist.core.gamma import pgamma
from statdist.core.normal import qnorm
from statdist.core.primitives import dpois_raw, tail_prob
from statdist.solvers.discrete_search import coarse_to_fine_search, discrete_quantile_search
from statdist.utils.constants import (
    CDF_FLOOR_NUDGE,
    COARSE_SEARCH_THRESHOLD,
    COARSE_STEP_FRACTION,
    DBL_EPSILON,
    QUANTILE_FUZZ,
)


def dpois(x: float, lam: float, log: bool = False) -> float:
    """
    Poisson probability mass function.

    Args:
        x: Count; rounded to the nearest integer
        lam: Mean number of events, lam >= 0
        log: If True return the log-probability

    Returns:
        P(X = x); 0 for negative or infinite x, NaN for lam < 0

    Examples:
        >>> round(dpois(3, 1.2), 3)
        0.087
        >>> dpois(0, 0.0)
        1.0
    """
    if math.isnan(x) or math.isnan(lam):
        return x + lam
    if lam < 0:
        return math.nan
    if x < 0 or not math.isfinite(x):
        return -math.inf if log else 0.0

    x = math.floor(x + 0.5)
    return dpois_raw(x, lam, log)


def ppois(x: float, lam: float, lower_tail: bool = True) -> float:
    """
    Poisson cumulative distribution function.

    Args:
        x: Count; non-integers are floored
        lam: Mean number of events, lam >= 0
        lower_tail: If True return P(X <= x), else P(X > x)

    Returns:
        Tail probability; NaN for lam < 0

    Examples:
        >>> round(ppois(10, 15), 3)
        0.118
    """
    if math.isnan(x) or math.isnan(lam):
        return x + lam
    if lam < 0:
        return math.nan
    if x < 0:
        return tail_prob(0.0, lower_tail)
    if lam == 0 or not math.isfinite(x):
        return tail_prob(1.0, lower_tail)

    x = math.floor(x + CDF_FLOOR_NUDGE)
    return pgamma(lam, x + 1, 1.0, lower_tail=not lower_tail)


def qpois(p: float, lam: float) -> float:
    """
    Poisson quantile function.

    Returns the smallest integer y with ppois(y, lam) >= p. The search
    starts from the Cornish-Fisher estimate
        y = mu + sigma * (z + gamma * (z^2 - 1) / 6),   z = qnorm(p)
    with mu = lam, sigma = sqrt(lam) and skewness gamma = 1/sigma.

    Args:
        p: Probability in [0, 1]
        lam: Mean number of events, finite and >= 0

    Returns:
        Quantile; 0 at p = 0 or lam = 0, +inf at p = 1, NaN for invalid
        arguments

    Examples:
        >>> qpois(0.5, 4.0)
        4.0
    """
    if math.isnan(p) or math.isnan(lam):
        return p + lam
    if not math.isfinite(lam) or lam < 0:
        return math.nan
    if lam == 0:
        return 0.0
    if p < 0 or p > 1:
        return math.nan
    if p == 0:
        return 0.0
    if p == 1:
        return math.inf

    mu = lam
    sigma = math.sqrt(lam)
    gamma = 1.0 / sigma

    if p + 1.01 * DBL_EPSILON >= 1.0:
        return math.inf

    z = qnorm(p)
    y = max(0.0, float(math.floor(mu + sigma * (z + gamma * (z * z - 1) / 6) + 0.5)))

    def cdf(k: float) -> float:
        return ppois(k, lam)

    z = cdf(y)

    # fuzz to ensure left continuity
    p *= QUANTILE_FUZZ

    if lam < COARSE_SEARCH_THRESHOLD:
        return discrete_quantile_search(y, z, p, cdf, 1.0)[0]

    return coarse_to_fine_search(y, z, p, cdf, math.floor(y * COARSE_STEP_FRACTION), lam)
