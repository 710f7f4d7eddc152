"""
Numeric primitives behind the distribution functions.

This module provides the building blocks shared by the Poisson, gamma,
binomial and Student-t evaluators: Stirling's error term, the binomial
deviance (plain and extended precision), log(1+x)-x, log(Gamma(1+a)) for
small a, a continued-fraction evaluator and a few log-space helpers.

None of these functions raise on floating-point trouble. Where the C
library would quietly produce an IEEE infinity or NaN, the Python
equivalents (``math.log(0)``, ``math.ldexp`` overflow, ...) are guarded
explicitly so the same limit value is returned.

References:
    Loader, C. (2000). Fast and Accurate Computation of Binomial
    Probabilities.
"""

import math

from statdist.core.tables import (
    BD0_SCALE,
    LGAMMA1P_COEFFS,
    LGAMMA1P_TAIL,
    S0,
    S1,
    S2,
    S3,
    S4,
    SFERR_HALVES,
)
from statdist.utils.constants import (
    BD0_MAX_TERMS,
    DBL_MAX,
    DBL_MIN,
    EULERS_CONST,
    LOG1PMX_MIN,
    LOGCF_TOLERANCE,
    M_LN2,
    M_LN_SQRT_2PI,
    M_2PI,
    M_SQRT_2PI,
    POIS_M_CUTOFF,
    SCALEFACTOR,
    X_LRG,
)
from statdist.utils.types import DoubleDouble


def fmax2(x: float, y: float) -> float:
    """Maximum of two doubles; NaN in either argument propagates."""
    if math.isnan(x) or math.isnan(y):
        return x + y
    return x if x >= y else y


def fmin2(x: float, y: float) -> float:
    """Minimum of two doubles; NaN in either argument propagates."""
    if math.isnan(x) or math.isnan(y):
        return x + y
    return y if x > y else x


def stirlerr(n: float) -> float:
    """
    Error of Stirling's approximation to n!.

    Computes log(n!) - log(sqrt(2*pi*n) * (n/e)^n).

    Args:
        n: Non-negative argument (need not be an integer)

    Returns:
        Stirling error term; exact tabulated values for half-integers
        up to 15

    Notes:
        For n > 15 the asymptotic series
            (S0 - S1/n^2 + S2/n^4 - S3/n^6 + S4/n^8) / n
        is truncated after fewer terms as n grows.
    """
    if math.isnan(n):
        return n

    if n <= 15.0:
        nn = n + n
        if nn == int(nn):
            return SFERR_HALVES[int(nn)]
        return math.lgamma(n + 1.0) - (n + 0.5) * math.log(n) + n - M_LN_SQRT_2PI

    nn = n * n
    if n > 500:
        return (S0 - S1 / nn) / n
    if n > 80:
        return (S0 - (S1 - S2 / nn) / nn) / n
    if n > 35:
        return (S0 - (S1 - (S2 - S3 / nn) / nn) / nn) / n
    # 15 < n <= 35
    return (S0 - (S1 - (S2 - (S3 - S4 / nn) / nn) / nn) / nn) / n


def logcf(x: float, i: float, d: float, eps: float = LOGCF_TOLERANCE) -> float:
    """
    Continued fraction for sum_{k>=0} x^k / (i + k*d).

    The convergents are rescaled by 2^256 whenever they leave a safe
    range so the recurrence neither overflows nor underflows.

    Args:
        x: Ratio of the series, |x| < 1
        i: First denominator, must be positive
        d: Denominator increment, must be non-negative
        eps: Relative tolerance between successive convergents

    Returns:
        Value of the series; NaN unless i > 0 and d >= 0
    """
    if not (i > 0 and d >= 0):
        return math.nan

    c1 = 2 * d
    c2 = i + d
    c4 = c2 + d
    a1 = c2
    b1 = i * (c2 - i * x)
    b2 = d * d * x
    a2 = c4 * c2 - b2
    b2 = c4 * b1 - i * b2

    while abs(a2 * b1 - a1 * b2) > abs(eps * b1 * b2):
        c3 = c2 * c2 * x
        c2 += d
        c4 += d
        a1 = c4 * a2 - c3 * a1
        b1 = c4 * b2 - c3 * b1

        c3 = c1 * c1 * x
        c1 += d
        c4 += d
        a2 = c4 * a1 - c3 * a2
        b2 = c4 * b1 - c3 * b2

        if abs(b2) > SCALEFACTOR:
            a1 /= SCALEFACTOR
            b1 /= SCALEFACTOR
            a2 /= SCALEFACTOR
            b2 /= SCALEFACTOR
        elif abs(b2) < 1 / SCALEFACTOR:
            a1 *= SCALEFACTOR
            b1 *= SCALEFACTOR
            a2 *= SCALEFACTOR
            b2 *= SCALEFACTOR

    return a2 / b2


def log1pmx(x: float) -> float:
    """
    Accurate log(1 + x) - x, particularly for small x.

    Args:
        x: Argument, x > -1

    Returns:
        log(1 + x) - x; -inf at x = -1 and NaN below

    Examples:
        >>> log1pmx(0.0)
        0.0
        >>> abs(log1pmx(1e-3) + 4.996669167e-07) < 1e-14
        True
    """
    if x <= -1:
        return -math.inf if x == -1 else math.nan

    if x > 1 or x < LOG1PMX_MIN:
        return math.log1p(x) - x

    r = x / (2 + x)
    y = r * r
    if abs(x) < 1e-2:
        two = 2.0
        return r * ((((two / 9 * y + two / 7) * y + two / 5) * y + two / 3) * y - x)
    return r * (2 * y * logcf(y, 3, 2) - x)


def lgamma1p(a: float) -> float:
    """
    log(Gamma(a + 1)), accurate also for small a (|a| < 0.5).

    Uses the Taylor series of log(Gamma(1 + a)) with coefficients
    (zeta(k) - 1)/k, the tail summed by ``logcf``.

    Args:
        a: Argument, a > -1

    Returns:
        log(Gamma(a + 1))
    """
    if abs(a) >= 0.5:
        return math.lgamma(a + 1)

    lgam = LGAMMA1P_TAIL * logcf(-a / 2, len(LGAMMA1P_COEFFS) + 2, 1)
    for coeff in reversed(LGAMMA1P_COEFFS):
        lgam = coeff - a * lgam

    return (a * lgam - EULERS_CONST) * a - log1pmx(a)


def bd0(x: float, np: float) -> float:
    """
    Deviance term x*log(x/np) + np - x.

    When x and np are close the direct formula cancels badly, so the
    series in v = (x - np)/(x + np) is summed instead.

    Args:
        x: Observed value, x >= 0
        np: Expected value, np > 0

    Returns:
        The (non-negative) deviance, or NaN for non-finite arguments
        or np == 0
    """
    if not math.isfinite(x) or not math.isfinite(np) or np == 0.0:
        return math.nan
    if x == 0:
        return np

    if abs(x - np) < 0.1 * (x + np):
        v = (x - np) / (x + np)
        s = (x - np) * v
        if abs(s) < DBL_MIN:
            return s
        ej = 2 * x * v
        v *= v
        for j in range(1, BD0_MAX_TERMS):
            ej *= v
            s1 = s + ej / (2 * j + 1)
            if s1 == s:
                return s1
            s = s1

    return x * math.log(x / np) + np - x


class _SplitAccumulator:
    """Sums values as integer parts plus residuals."""

    def __init__(self):
        self.high = 0.0
        self.low = 0.0

    def add(self, d: float) -> None:
        if not math.isfinite(d):
            self.high += d
            return
        d1 = float(math.floor(d + 0.5))
        self.high += d1
        self.low += d - d1

    def result(self) -> DoubleDouble:
        return DoubleDouble(self.high, self.low)


def ebd0(x: float, M: float) -> DoubleDouble:
    """
    Extended-precision deviance x*log(x/M) + (M - x).

    M/x is split as r * 2^e and r is matched to the nearest entry
    f/1024 of a 129-row table of log(k/1024) values, each stored as four
    single-precision parts. The remainder is handled by ``log1pmx``.
    Every addend is split into an integer part (accumulated in ``high``)
    and a residual (accumulated in ``low``).

    Args:
        x: Observed value, x >= 0
        M: Expected value, M >= 0

    Returns:
        DoubleDouble whose sum is the deviance; (inf, 0) on overflow

    Examples:
        >>> ebd0(3.0, 3.0)
        DoubleDouble(high=0.0, low=0.0)
        >>> ebd0(0.0, 2.5).value
        2.5
    """
    sb = 10
    s = float(1 << sb)
    n = len(BD0_SCALE) - 1

    if x == M:
        return DoubleDouble(0.0, 0.0)
    if x == 0:
        return DoubleDouble(M, 0.0)
    if M == 0:
        return DoubleDouble(math.inf, 0.0)

    ratio = M / x
    if ratio == math.inf:
        return DoubleDouble(M, 0.0)

    r, e = math.frexp(ratio)

    # later products would overflow
    if M_LN2 * (-e) > 1.0 + DBL_MAX / x:
        return DoubleDouble(math.inf, 0.0)

    i = int(math.floor((r - 0.5) * (2 * n) + 0.5))
    # 0 <= i <= n
    f = math.floor(s / (0.5 + i / (2.0 * n)) + 0.5)
    try:
        fg = math.ldexp(f, -(e + sb))
    except OverflowError:
        return DoubleDouble(math.inf, 0.0)

    acc = _SplitAccumulator()
    acc.add(-x * log1pmx((M * fg - x) / x))
    if fg == 1:
        return acc.result()

    for j in range(4):
        acc.add(x * BD0_SCALE[i][j])  # x*log(fg*2^e)
        acc.add(-x * e * BD0_SCALE[0][j])  # x*log(1/2^e)
        if not math.isfinite(acc.high):
            return DoubleDouble(math.inf, 0.0)

    acc.add(M)
    acc.add(-M * fg)
    return acc.result()


def log1_exp(x: float) -> float:
    """log(1 - exp(x)) for x <= 0, accurate at both ends of the range."""
    if math.isnan(x) or x > 0:
        return math.nan
    if x == 0:
        return -math.inf
    if x > -M_LN2:
        return math.log(-math.expm1(x))
    return math.log1p(-math.exp(x))


def logspace_add(logx: float, logy: float) -> float:
    """log(exp(logx) + exp(logy)) without leaving log space."""
    if logx == -math.inf:
        return logy
    if logy == -math.inf:
        return logx
    return fmax2(logx, logy) + math.log1p(math.exp(-abs(logx - logy)))


def logspace_sub(logx: float, logy: float) -> float:
    """log(exp(logx) - exp(logy)) for logy <= logx."""
    if logy == -math.inf:
        return logx
    return logx + log1_exp(logy - logx)


def logspace_sum(logx) -> float:
    """
    log(sum(exp(logx))) for a sequence of log-terms.

    The terms are scaled by their maximum before exponentiation; an
    empty sequence gives -inf.
    """
    logx = list(logx)
    if not logx:
        return -math.inf
    if len(logx) == 1:
        return logx[0]
    if len(logx) == 2:
        return logspace_add(logx[0], logx[1])

    mx = max(logx)
    if mx == -math.inf or not math.isfinite(mx):
        return mx
    return mx + math.log(math.fsum(math.exp(lx - mx) for lx in logx))


def tail_prob(p: float, lower_tail: bool = True, log_p: bool = False) -> float:
    """
    Express an exact lower-tail probability on the requested scale.

    Only meant for the boundary values 0 and 1, where 1 - p is exact.
    """
    if not lower_tail:
        p = 1.0 - p
    if log_p:
        return -math.inf if p == 0 else math.log(p)
    return p


def dpois_raw(x: float, lam: float, log: bool = False) -> float:
    """
    Poisson probability lam^x * exp(-lam) / x! for real x >= 0.

    Uses Loader's saddle-point form
        exp(-stirlerr(x) - bd0(x, lam)) / sqrt(2*pi*x)
    with the deviance in extended precision from ``ebd0``. x need not be
    an integer, which lets the gamma density and CDF reuse it.

    Args:
        x: Non-negative count (real-valued)
        lam: Poisson mean, lam >= 0
        log: If True return the log-probability

    Returns:
        Probability (or its log)
    """
    zero = -math.inf if log else 0.0

    if lam == 0:
        if x == 0:
            return 0.0 if log else 1.0
        return zero
    if not math.isfinite(lam):
        return zero
    if x < 0:
        return zero
    if x <= lam * DBL_MIN:
        return -lam if log else math.exp(-lam)
    if lam < x * DBL_MIN:
        if not math.isfinite(x):
            return zero
        log_val = -lam + x * math.log(lam) - math.lgamma(x + 1)
        return log_val if log else math.exp(log_val)

    dev = ebd0(x, lam)
    yh = dev.high
    yl = dev.low + stirlerr(x)

    # 2*pi*x overflows for really large x
    large_x = x >= X_LRG
    r = M_SQRT_2PI * math.sqrt(x) if large_x else M_2PI * x

    if log:
        return -yl - yh - (math.log(r) if large_x else 0.5 * math.log(r))
    return math.exp(-yl) * math.exp(-yh) / (r if large_x else math.sqrt(r))


def dpois_wrap(x_plus_1: float, lam: float, log: bool = False) -> float:
    """Poisson probability at x given x + 1, also for 0 < x + 1 <= 1."""
    if not math.isfinite(lam):
        return -math.inf if log else 0.0

    if x_plus_1 > 1:
        return dpois_raw(x_plus_1 - 1, lam, log)

    if lam > abs(x_plus_1 - 1) * POIS_M_CUTOFF:
        log_val = -lam - math.lgamma(x_plus_1)
        return log_val if log else math.exp(log_val)

    d = dpois_raw(x_plus_1, lam, log)
    if log:
        return d + math.log(x_plus_1 / lam)
    return d * (x_plus_1 / lam)
