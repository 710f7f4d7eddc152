"""
Quantile search for discrete distributions on the non-negative integers.

Starting from an approximate quantile (typically a Cornish-Fisher
estimate), the search walks left or right in steps of ``incr`` until it
finds the smallest y with cdf(y) >= p. For large supports the walk is
repeated with steps shrinking by a factor of 100 down to 1.
"""

import logging
import math
from typing import Callable, Optional

from statdist.core.primitives import fmax2
from statdist.utils.constants import COARSE_STEP_SHRINK

logger = logging.getLogger(__name__)


def discrete_quantile_search(
    y: float,
    z: float,
    p: float,
    cdf: Callable[[float], float],
    incr: float,
    upper: Optional[float] = None,
) -> tuple[float, float]:
    """
    Walk from y to the smallest multiple-of-incr offset with cdf >= p.

    Args:
        y: Starting point
        z: cdf(y), or the last CDF value seen by a previous pass
        p: Target probability (already fuzzed for left continuity)
        cdf: Distribution function of the discrete variable
        incr: Step size, at least 1
        upper: Largest value of the support (None for unbounded)

    Returns:
        Tuple (y, z) of the final point and the last CDF value computed

    Notes:
        Going left, z is only updated when the step is taken. Going
        right, the walk stops at ``upper`` without evaluating the CDF.
    """
    if z >= p:
        # search to the left
        while True:
            if y == 0:
                return y, z
            new_z = cdf(y - incr)
            if new_z < p:
                return y, z
            y = fmax2(0.0, y - incr)
            z = new_z

    # search to the right
    while True:
        y = y + incr if upper is None else min(y + incr, upper)
        if upper is not None and y == upper:
            return y, z
        z = cdf(y)
        if z >= p:
            return y, z


def coarse_to_fine_search(
    y: float,
    z: float,
    p: float,
    cdf: Callable[[float], float],
    incr: float,
    scale: float,
    upper: Optional[float] = None,
) -> float:
    """
    Repeat the discrete search with steps shrinking from incr down to 1.

    Args:
        y: Starting point
        z: cdf(y)
        p: Target probability
        cdf: Distribution function
        incr: First (coarse) step
        scale: Size of the problem (n or lambda); steps below
            scale * 1e-15 are not resolvable and end the search
        upper: Largest value of the support (None for unbounded)

    Returns:
        The quantile
    """
    incr = max(1.0, incr)
    while True:
        old_incr = incr
        y, z = discrete_quantile_search(y, z, p, cdf, incr, upper)
        logger.debug("discrete search pass with step %g ended at y=%g", old_incr, y)
        incr = max(1.0, math.floor(incr / COARSE_STEP_SHRINK))
        if not (old_incr > 1 and incr > scale * 1e-15):
            return y
