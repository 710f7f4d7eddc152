"""
Linear correlation and least-squares regression of paired samples.
"""

import math
from typing import Sequence

import numpy as np

from statdist.utils.types import LinearFit


def _as_pairs(x: Sequence[float], y: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    if xs.ndim != 1 or ys.ndim != 1:
        raise ValueError("x and y must be one-dimensional")
    if xs.size != ys.size:
        raise ValueError(f"x and y must have the same length, got {xs.size} and {ys.size}")
    if xs.size < 2:
        raise ValueError(f"Need at least two pairs, got {xs.size}")
    if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ys))):
        raise ValueError("x and y must not contain NaN or infinite values")
    return xs, ys


def _sums_of_squares(xs: np.ndarray, ys: np.ndarray) -> tuple[float, float, float]:
    dx = xs - xs.mean()
    dy = ys - ys.mean()
    return float(np.dot(dx, dx)), float(np.dot(dy, dy)), float(np.dot(dx, dy))


def correlation(x: Sequence[float], y: Sequence[float]) -> float:
    """
    Pearson correlation coefficient R of two paired samples.

        R = sum((x - xbar)(y - ybar)) / sqrt(sum((x - xbar)^2) sum((y - ybar)^2))

    Raises:
        ValueError: If the samples differ in length, have fewer than two
                    pairs or either has no spread

    Examples:
        >>> correlation([1.0, 2.0, 3.0], [2.0, 4.0, 6.0])
        1.0
    """
    xs, ys = _as_pairs(x, y)
    sxx, syy, sxy = _sums_of_squares(xs, ys)
    if sxx == 0.0 or syy == 0.0:
        raise ValueError("Correlation is undefined when x or y is constant")
    # clip rounding just outside [-1, 1]
    return max(-1.0, min(1.0, sxy / math.sqrt(sxx * syy)))


def lsq(x: Sequence[float], y: Sequence[float]) -> LinearFit:
    """
    Ordinary least-squares fit of y = intercept + slope * x.

    Args:
        x: Explanatory values
        y: Response values, paired with x

    Returns:
        LinearFit with the slope, intercept and sample correlation r
        (r is NaN when y is constant, since the line then fits exactly
        but the correlation is undefined)

    Raises:
        ValueError: If the samples differ in length, have fewer than two
                    pairs or x is constant

    Examples:
        >>> fit = lsq([1.0, 2.0, 3.0, 4.0], [3.0, 5.0, 7.0, 9.0])
        >>> fit.slope, fit.intercept
        (2.0, 1.0)
    """
    xs, ys = _as_pairs(x, y)
    sxx, syy, sxy = _sums_of_squares(xs, ys)
    if sxx == 0.0:
        raise ValueError("Regression slope is undefined when x is constant")

    slope = sxy / sxx
    intercept = float(ys.mean()) - slope * float(xs.mean())
    r = max(-1.0, min(1.0, sxy / math.sqrt(sxx * syy))) if syy > 0.0 else math.nan

    return LinearFit(slope=slope, intercept=intercept, r=r, n=int(xs.size))
