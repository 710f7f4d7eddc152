"""
Quantile solver for continuous distributions with automatic method selection.

Inverts a CDF by solving cdf(x) - p = 0, trying Newton-Raphson with the
density as derivative first and falling back to Brent's method on the
bracket when Newton fails.
"""

import logging
import math
from typing import Callable

from statdist.solvers.brent import brent_root
from statdist.solvers.newton_raphson import newton_raphson
from statdist.utils.types import SolverResult

logger = logging.getLogger(__name__)


def continuous_quantile(
    cdf: Callable[[float], float],
    pdf: Callable[[float], float],
    p: float,
    x0: float,
    lower: float,
    upper: float,
    method: str = "auto",
) -> SolverResult:
    """
    Find x in [lower, upper] with cdf(x) == p.

    Args:
        cdf: Continuous, non-decreasing distribution function
        pdf: Its density (derivative of cdf)
        p: Target probability
        x0: Starting point for Newton-Raphson
        lower: Lower end of a bracket with cdf(lower) <= p
        upper: Upper end of a bracket with cdf(upper) >= p
        method: "auto" (default), "newton", or "brent"

    Returns:
        SolverResult from the method that produced the answer

    Raises:
        ValueError: If method is not one of the accepted names

    Notes:
        - Auto mode tries Newton-Raphson first and falls back to Brent
        - A Newton failure is logged at debug level together with the reason
    """
    if method not in ("auto", "newton", "brent"):
        raise ValueError(f"method must be 'auto', 'newton' or 'brent', got {method!r}")

    def objective(x: float) -> float:
        return cdf(x) - p

    if method in ("auto", "newton"):
        nr_result = newton_raphson(objective, pdf, x0, lower, upper)

        if nr_result.success or method == "newton":
            return nr_result

        logger.debug("Newton-Raphson failed for p=%r (%s); falling back to Brent",
                     p, nr_result.message)

    if not (math.isfinite(lower) and math.isfinite(upper)):
        return SolverResult(
            root=float("nan"),
            iterations=0,
            method="brent",
            success=False,
            message=f"Brent method needs a finite bracket, got [{lower}, {upper}]",
        )

    return brent_root(objective, lower, upper)
