"""
Brent's method as a robust fallback root finder.

Brent's method (bisection combined with inverse quadratic interpolation
and secant steps) is guaranteed to converge when the objective changes
sign over the bracket, though it is slower than Newton-Raphson.
"""

import logging
from typing import Callable

from scipy.optimize import brentq

from statdist.utils.constants import BRENT_MAX_ITERATIONS, BRENT_RTOL, BRENT_XTOL
from statdist.utils.types import SolverResult

logger = logging.getLogger(__name__)


def brent_root(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    xtol: float = BRENT_XTOL,
    rtol: float = BRENT_RTOL,
    max_iterations: int = BRENT_MAX_ITERATIONS,
) -> SolverResult:
    """
    Solve f(x) = 0 on [lower, upper] with scipy's brentq.

    Args:
        f: Objective function, continuous on the bracket
        lower: Left end of the bracket
        upper: Right end of the bracket
        xtol: Absolute tolerance on the root
        rtol: Relative tolerance on the root
        max_iterations: Maximum number of iterations

    Returns:
        SolverResult; success=False (root NaN) if the bracket does not
        contain a sign change
    """
    try:
        root, info = brentq(
            f,
            lower,
            upper,
            xtol=xtol,
            rtol=rtol,
            maxiter=max_iterations,
            full_output=True,
            disp=False,
        )
    except ValueError as e:
        # f(lower) and f(upper) have the same sign
        logger.debug("brentq failed on [%r, %r]: %s", lower, upper, e)
        return SolverResult(
            root=float("nan"),
            iterations=0,
            method="brent",
            success=False,
            message=f"Brent method failed: {e}",
        )

    if not info.converged:
        return SolverResult(
            root=float(root),
            iterations=info.iterations,
            method="brent",
            success=False,
            message=f"Brent method did not converge: {info.flag}",
        )

    return SolverResult(
        root=float(root),
        iterations=info.iterations,
        method="brent",
        success=True,
        message=f"Converged in {info.iterations} iterations",
    )
