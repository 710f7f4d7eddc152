"""
Chi-square distribution as the gamma distribution with shape df/2 and scale 2.
"""

from statdist.core.gamma import dgamma, pgamma, qgamma


def dchisq(x: float, df: float) -> float:
    """Chi-square density with df degrees of freedom."""
    return dgamma(x, df / 2.0, 2.0)


def pchisq(x: float, df: float, lower_tail: bool = True) -> float:
    """
    Chi-square cumulative distribution function.

    Args:
        x: Value at which to evaluate the CDF
        df: Degrees of freedom, df >= 0
        lower_tail: If True return P(X <= x), else P(X > x)

    Returns:
        Tail probability; NaN for df < 0

    Examples:
        >>> round(pchisq(3.841459, 1), 4)
        0.95
    """
    return pgamma(x, df / 2.0, 2.0, lower_tail)


def qchisq(p: float, df: float) -> float:
    """
    Chi-square quantile function.

    Examples:
        >>> round(qchisq(0.98, 4), 2)
        11.67
    """
    return qgamma(p, 0.5 * df, 2.0)
