"""
Student's t distribution: density, distribution and quantile functions.

The density uses the same saddle-point pieces as the binomial and
Poisson evaluators (``stirlerr`` and ``bd0``). The CDF reduces to the
regularized incomplete beta function from ``scipy.special``. The
quantile is seeded with the Cornish-Fisher type expansion of
Abramowitz & Stegun 26.7.5 and solved numerically.
"""

import logging
import math

from scipy.special import betainc, betaincc, betaln

from statdist.core.normal import dnorm, pnorm, qnorm
from statdist.core.primitives import bd0, stirlerr, tail_prob
from statdist.solvers.quantile import continuous_quantile
from statdist.utils.constants import (
    DBL_EPSILON,
    M_1_SQRT_2PI,
    M_LN_SQRT_2PI,
    T_BRACKET_MAX_EXPANSIONS,
    T_NORMAL_DF,
)

logger = logging.getLogger(__name__)


def dt(x: float, df: float, log: bool = False) -> float:
    """
    Student-t probability density function.

        f(x) = Gamma((n+1)/2) / (sqrt(n pi) Gamma(n/2)) (1 + x^2/n)^(-(n+1)/2)

    Args:
        x: Value at which to evaluate the density
        df: Degrees of freedom, df > 0 (may be non-integer or infinite)
        log: If True return the log-density

    Returns:
        Density at x (or its log); NaN for df <= 0

    Examples:
        >>> round(dt(0.0, 1.0), 6)  # Cauchy: 1/pi
        0.31831
    """
    if math.isnan(x) or math.isnan(df):
        return x + df
    if df <= 0:
        return math.nan
    if not math.isfinite(x):
        return -math.inf if log else 0.0
    if not math.isfinite(df):
        return dnorm(x, 0.0, 1.0, log)

    n = df
    t = -bd0(n / 2.0, (n + 1) / 2.0) + stirlerr((n + 1) / 2.0) - stirlerr(n / 2.0)
    x2n = x * x / n
    ax = 0.0
    lrg_x2n = x2n > 1.0 / DBL_EPSILON
    if lrg_x2n:
        # large x^2/n
        ax = abs(x)
        l_x2n = math.log(ax) - math.log(n) / 2.0  # = log(|x|/sqrt(n))
        u = n * l_x2n
    elif x2n > 0.2:
        l_x2n = math.log(1 + x2n) / 2.0
        u = n * l_x2n
    else:
        l_x2n = math.log1p(x2n) / 2.0
        u = -bd0(n / 2.0, (n + x * x) / 2.0) + x * x / 2.0

    if log:
        return t - u - (M_LN_SQRT_2PI + l_x2n)

    # 1/sqrt(1 + x^2/n)
    i_sqrt = math.sqrt(n) / ax if lrg_x2n else math.exp(-l_x2n)
    return math.exp(t - u) * M_1_SQRT_2PI * i_sqrt


def pt(x: float, df: float, lower_tail: bool = True) -> float:
    """
    Student-t cumulative distribution function.

    Uses P(|T| > |x|) = I_{n/(n+x^2)}(n/2, 1/2), choosing between the
    two complementary incomplete-beta forms so the argument stays away
    from 1. Far in the tails (1 + x^2/n > 1e100) the leading term is
    taken in log space.

    Args:
        x: Value at which to evaluate the CDF
        df: Degrees of freedom, df > 0
        lower_tail: If True return P(T <= x), else P(T > x)

    Returns:
        Tail probability; NaN for df <= 0

    Examples:
        >>> pt(0.0, 5.0)
        0.5
        >>> round(pt(2.015048, 5), 3)
        0.95
    """
    if math.isnan(x) or math.isnan(df):
        return x + df
    if df <= 0.0:
        return math.nan
    if not math.isfinite(x):
        return tail_prob(0.0 if x < 0 else 1.0, lower_tail)
    if not math.isfinite(df):
        return pnorm(x, 0.0, 1.0, lower_tail)

    n = df
    nx = 1 + (x / n) * x
    if nx > 1e100:
        # 1/nx underflows in the incomplete beta; use its leading term
        lval = -0.5 * n * (2 * math.log(abs(x)) - math.log(n)) \
            - float(betaln(0.5 * n, 0.5)) - math.log(0.5 * n)
        val = math.exp(lval)
    elif n > x * x:
        val = float(betaincc(0.5, n / 2.0, x * x / (n + x * x)))
    else:
        val = float(betainc(n / 2.0, 0.5, 1.0 / nx))

    # val = P(|T| > |x|)
    if x <= 0.0:
        lower_tail = not lower_tail

    val /= 2.0
    return 0.5 - val + 0.5 if lower_tail else val


def _cornish_fisher_seed(z: float, df: float) -> float:
    """Abramowitz & Stegun 26.7.5 expansion of the t quantile around qnorm."""
    z2 = z * z
    z3 = z2 * z
    z5 = z3 * z2
    z7 = z5 * z2
    z9 = z7 * z2
    g1 = (z3 + z) / 4.0
    g2 = (5 * z5 + 16 * z3 + 3 * z) / 96.0
    g3 = (3 * z7 + 19 * z5 + 17 * z3 - 15 * z) / 384.0
    g4 = (79 * z9 + 776 * z7 + 1482 * z5 - 1920 * z3 - 945 * z) / 92160.0
    return z + g1 / df + g2 / df ** 2 + g3 / df ** 3 + g4 / df ** 4


def qt(p: float, df: float) -> float:
    """
    Student-t quantile function.

    Closed forms are used for df = 1 (Cauchy) and df = 2, the normal
    quantile for df > 1e20. Otherwise the root of pt(x) = P is found in
    the lower tail, P = min(p, 1 - p), starting from the A&S 26.7.5
    expansion; Newton-Raphson with the density as derivative is tried
    first and Brent's method on a doubling bracket is the fallback.

    Args:
        p: Probability in [0, 1]
        df: Degrees of freedom, df > 0

    Returns:
        Quantile; -inf at p = 0, +inf at p = 1, NaN for invalid
        arguments or if no solver converges

    Examples:
        >>> qt(0.5, 7.0)
        0.0
        >>> round(qt(0.975, 10), 4)
        2.2281
    """
    if math.isnan(p) or math.isnan(df):
        return p + df
    if p < 0 or p > 1 or df <= 0:
        return math.nan
    if p == 0:
        return -math.inf
    if p == 1:
        return math.inf
    if p == 0.5:
        return 0.0
    if df > T_NORMAL_DF:
        return qnorm(p, 0.0, 1.0)

    upper_half = p > 0.5
    P = 1.0 - p if upper_half else p

    if df == 1:
        q = -1.0 / math.tan(math.pi * P)
    elif df == 2:
        q = -(1.0 - 2.0 * P) / math.sqrt(2.0 * P * (1.0 - P))
    else:
        q = _solve_lower_tail(P, df)

    return -q if upper_half else q


def _solve_lower_tail(P: float, df: float) -> float:
    """Solve pt(x, df) = P for x <= 0, with P < 0.5."""
    x0 = min(_cornish_fisher_seed(qnorm(P), df), 0.0)

    def cdf(x: float) -> float:
        return pt(x, df)

    def pdf(x: float) -> float:
        return dt(x, df)

    lo = min(x0, -1.0)
    for _ in range(T_BRACKET_MAX_EXPANSIONS):
        if cdf(lo) <= P or not math.isfinite(lo):
            break
        lo *= 2.0

    result = continuous_quantile(cdf, pdf, P, x0, lo, 0.0)
    if not result.success:
        logger.debug("qt(%r, %r) did not converge: %s", P, df, result.message)
        return math.nan
    return result.root
