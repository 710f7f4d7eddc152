"""
Newton-Raphson root finder.

This module implements a bounded Newton-Raphson iteration for solving
F(x) = 0 when the derivative is available in closed form, as it is for
a CDF whose density is known. Failure is reported through the result
rather than raised, so callers can fall back to a bracketing method.
"""

import logging
import math
from typing import Callable

from statdist.utils.constants import T_QUANTILE_MAX_ITERATIONS, T_QUANTILE_TOLERANCE
from statdist.utils.types import SolverResult

logger = logging.getLogger(__name__)


def newton_raphson(
    f: Callable[[float], float],
    fprime: Callable[[float], float],
    x0: float,
    lower: float = -math.inf,
    upper: float = math.inf,
    max_iterations: int = T_QUANTILE_MAX_ITERATIONS,
    tolerance: float = T_QUANTILE_TOLERANCE,
) -> SolverResult:
    """
    Solve f(x) = 0 with Newton-Raphson steps confined to [lower, upper].

    The update is:
        x_{n+1} = x_n - f(x_n) / f'(x_n)

    Args:
        f: Objective function
        fprime: Derivative of the objective
        x0: Starting point
        lower: Lower bound; a step leaving the bounds is a failure
        upper: Upper bound
        max_iterations: Maximum number of iterations
        tolerance: Relative tolerance on the step size

    Returns:
        SolverResult with root, iterations, method, success flag

    Notes:
        - Returns success=False if the derivative vanishes or is not finite
        - Returns success=False if a step leaves [lower, upper]
        - Returns success=True on an exact zero or a small relative step
    """
    x = x0
    iterations = 0

    for _ in range(max_iterations):
        iterations += 1

        fx = f(x)
        if fx == 0.0:
            return SolverResult(
                root=x,
                iterations=iterations,
                method="newton-raphson",
                success=True,
                message=f"Exact root found in {iterations} iterations",
            )
        if math.isnan(fx):
            return SolverResult(
                root=x,
                iterations=iterations,
                method="newton-raphson",
                success=False,
                message=f"Objective is NaN at x={x!r}",
            )

        dfx = fprime(x)
        if dfx == 0.0 or not math.isfinite(dfx):
            return SolverResult(
                root=x,
                iterations=iterations,
                method="newton-raphson",
                success=False,
                message=f"Derivative unusable ({dfx!r}) at iteration {iterations}, need fallback",
            )

        x_new = x - fx / dfx

        if not lower <= x_new <= upper:
            return SolverResult(
                root=x,
                iterations=iterations,
                method="newton-raphson",
                success=False,
                message=f"Stepped out of bounds (x={x_new:.6g}) at iteration {iterations}",
            )

        if abs(x_new - x) <= tolerance * abs(x_new):
            return SolverResult(
                root=x_new,
                iterations=iterations,
                method="newton-raphson",
                success=True,
                message=f"Converged in {iterations} iterations",
            )

        x = x_new

    logger.debug("Newton-Raphson hit max_iterations=%d at x=%r", max_iterations, x)
    return SolverResult(
        root=x,
        iterations=iterations,
        method="newton-raphson",
        success=False,
        message=f"Max iterations ({max_iterations}) reached without convergence",
    )
