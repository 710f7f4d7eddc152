"""
Normal distribution: density, distribution and quantile functions.

The CDF and quantile are built on the complementary error function
and its inverse from ``scipy.special``, so both tails keep full
relative precision. Two further quantile/CDF evaluators are provided:
Wichura's AS 241 rational approximation and the classic
Abramowitz & Stegun 7.1.26 polynomial.
"""

import math

from scipy.special import erfc, erfcinv, log_ndtr

from statdist.utils.constants import (
    DBL_EPSILON,
    DBL_MAX,
    M_1_SQRT_2PI,
    M_LN_SQRT_2PI,
    M_SQRT2,
)


def pnorm(
    x: float,
    mu: float = 0.0,
    sigma: float = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> float:
    """
    Normal cumulative distribution function.

    Args:
        x: Value at which to evaluate the CDF
        mu: Mean
        sigma: Standard deviation, sigma >= 0
        lower_tail: If True return P(X <= x), else P(X > x)
        log_p: If True return the natural log of the probability

    Returns:
        Tail probability (or its log); NaN for sigma < 0

    Examples:
        >>> pnorm(0.0)
        0.5
        >>> round(pnorm(4, 2.58, 0.76), 3)
        0.969
    """
    if math.isnan(x) or math.isnan(mu) or math.isnan(sigma):
        return x + mu + sigma
    if sigma < 0:
        return math.nan
    if not math.isfinite(x) and mu == x:
        return math.nan

    if sigma == 0:
        below = x < mu
        p = 0.0 if below == lower_tail else 1.0
        if log_p:
            return -math.inf if p == 0.0 else 0.0
        return p

    z = (x - mu) / sigma
    if not lower_tail:
        z = -z

    if log_p:
        return float(log_ndtr(z))
    return float(erfc(-z / M_SQRT2) / 2.0)


def dnorm(x: float, mu: float = 0.0, sigma: float = 1.0, log: bool = False) -> float:
    """
    Normal probability density function.

    Args:
        x: Value at which to evaluate the density
        mu: Mean
        sigma: Standard deviation; sigma == 0 is a point mass at mu
        log: If True return the log-density

    Returns:
        Density at x (or its log)

    Notes:
        The density is
            f(x) = 1 / (sigma * sqrt(2*pi)) * exp(-(x - mu)^2 / (2*sigma^2))
    """
    if math.isnan(x) or math.isnan(mu) or math.isnan(sigma):
        return x + mu + sigma
    if sigma < 0:
        return math.nan

    zero = -math.inf if log else 0.0
    if not math.isfinite(sigma):
        return zero
    if not math.isfinite(x) and mu == x:
        return math.nan
    if sigma == 0:
        return math.inf if x == mu else zero

    x_ = (x - mu) / sigma
    if not math.isfinite(x_):
        return zero

    x_ = abs(x_)
    if x_ >= 2 * math.sqrt(DBL_MAX):
        return zero
    if log:
        return -(M_LN_SQRT_2PI + 0.5 * x_ * x_ + math.log(sigma))
    return M_1_SQRT_2PI * math.exp(-0.5 * x_ * x_) / sigma


def qnorm(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """
    Normal quantile function via the inverse complementary error function.

    Computes mu - sigma * sqrt(2) * erfcinv(2p), which equals
    mu + sigma * sqrt(2) * erfinv(2p - 1) without losing precision in
    the lower tail.

    Args:
        p: Probability in [0, 1]
        mu: Mean
        sigma: Standard deviation, sigma >= 0

    Returns:
        x such that pnorm(x, mu, sigma) == p; -inf at p = 0, +inf at
        p = 1, NaN for invalid arguments

    Examples:
        >>> qnorm(0.5, 10.0, 3.0)
        10.0
        >>> round(qnorm(0.22, 201, 46), 2)
        165.48
    """
    if math.isnan(p) or math.isnan(mu) or math.isnan(sigma):
        return p + mu + sigma
    if p < 0 or p > 1 or sigma < 0:
        return math.nan
    if p == 0:
        return -math.inf
    if p == 1:
        return math.inf
    if sigma == 0:
        return mu
    if p == 0.5:
        return mu

    return mu - sigma * M_SQRT2 * float(erfcinv(2.0 * p))


# AS 241 rational approximations, coefficients from highest degree down
_AS241_CENTRAL_NUM = (
    2509.0809287301226727, 33430.575583588128105, 67265.770927008700853,
    45921.953931549871457, 13731.693765509461125, 1971.5909503065514427,
    133.14166789178437745, 3.387132872796366608,
)
_AS241_CENTRAL_DEN = (
    5226.495278852854561, 28729.085735721942674, 39307.89580009271061,
    21213.794301586595867, 5394.1960214247511077, 687.1870074920579083,
    42.313330701600911252, 1.0,
)
_AS241_NEAR_NUM = (
    7.7454501427834140764e-4, 0.0227238449892691845833, 0.24178072517745061177,
    1.27045825245236838258, 3.64784832476320460504, 5.7694972214606914055,
    4.6303378461565452959, 1.42343711074968357734,
)
_AS241_NEAR_DEN = (
    1.05075007164441684324e-9, 5.475938084995344946e-4, 0.0151986665636164571966,
    0.14810397642748007459, 0.68976733498510000455, 1.6763848301838038494,
    2.05319162663775882187, 1.0,
)
_AS241_FAR_NUM = (
    2.01033439929228813265e-7, 2.71155556874348757815e-5, 0.0012426609473880784386,
    0.026532189526576123093, 0.29656057182850489123, 1.7848265399172913358,
    5.4637849111641143699, 6.6579046435011037772,
)
_AS241_FAR_DEN = (
    2.04426310338993978564e-15, 1.4215117583164458887e-7, 1.8463183175100546818e-5,
    7.868691311456132591e-4, 0.0148753612908506148525, 0.13692988092273580531,
    0.59983220655588793769, 1.0,
)


def _horner(r: float, coeffs) -> float:
    val = 0.0
    for c in coeffs:
        val = val * r + c
    return val


def qnorm_cdf(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """
    Normal quantile function by Wichura's algorithm AS 241 (PPND16).

    Accurate to about 1 part in 10^16. The central band |p - 0.5| <= 0.425
    uses a rational function of r = 0.180625 - q^2; the tails use
    r = sqrt(-log(min(p, 1 - p))) with separate fits for r <= 5 and r > 5.

    Args:
        p: Probability in [0, 1]
        mu: Mean
        sigma: Standard deviation, sigma >= 0

    Returns:
        Quantile; -inf at p = 0, +inf at p = 1, NaN for invalid arguments

    References:
        Wichura, M. J. (1988). Algorithm AS 241: The percentage points
        of the normal distribution. Applied Statistics, 37, 477-484.
    """
    if math.isnan(p) or math.isnan(mu) or math.isnan(sigma):
        return p + mu + sigma
    if p < 0.0 or p > 1.0 or sigma < 0.0:
        return math.nan
    if p == 0.0:
        return -math.inf
    if p == 1.0:
        return math.inf
    if sigma == 0.0:
        return mu

    q = p - 0.5

    if abs(q) <= 0.425:
        r = 0.180625 - q * q
        val = q * _horner(r, _AS241_CENTRAL_NUM) / _horner(r, _AS241_CENTRAL_DEN)
        return mu + sigma * val

    r = 1.0 - p if q > 0 else p
    r = math.sqrt(-math.log(r))

    if r <= 5.0:
        r -= 1.6
        val = _horner(r, _AS241_NEAR_NUM) / _horner(r, _AS241_NEAR_DEN)
    else:
        r -= 5.0
        val = _horner(r, _AS241_FAR_NUM) / _horner(r, _AS241_FAR_DEN)

    if q < 0.0:
        val = -val
    return mu + sigma * val


def pnorm_approx(x: float) -> float:
    """
    Standard normal CDF by Abramowitz & Stegun formula 7.1.26.

    A five-term polynomial approximation of erf with maximum absolute
    error about 1.5e-7. Useful as a cheap cross-check of ``pnorm``.

    Args:
        x: Value at which to evaluate the CDF

    Returns:
        Approximate P(Z <= x)
    """
    a1 = 0.254829592
    a2 = -0.284496736
    a3 = 1.421413741
    a4 = -1.453152027
    a5 = 1.061405429
    p = 0.3275911

    sign = -1 if x < 0 else 1
    x = abs(x) / M_SQRT2

    t = 1.0 / (1.0 + p * x)
    y = 1.0 - (((((a5 * t + a4) * t) + a3) * t + a2) * t + a1) * t * math.exp(-x * x)

    return 0.5 * (1.0 + sign * y)


def dpnorm(x: float, lower_tail: bool, lp: float) -> float:
    """
    Ratio dnorm(x) / pnorm(x, lower_tail) given lp = log(pnorm(x, lower_tail)).

    Far in the upper tail (x > 10) the ratio is evaluated from the
    asymptotic series of Mills' ratio, so no division by a vanishing
    probability happens.
    """
    if x < 0:
        x = -x
        lower_tail = not lower_tail

    if x > 10 and not lower_tail:
        term = 1.0 / x
        total = term
        x2 = x * x
        i = 1.0
        while True:
            term *= -i / x2
            total += term
            i += 2
            if abs(term) <= DBL_EPSILON * total:
                break
        return 1.0 / total

    return dnorm(x) / math.exp(lp)
