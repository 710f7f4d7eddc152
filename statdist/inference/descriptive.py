"""
Descriptive statistics for a one-dimensional sample.

Each function takes any sequence of numbers and returns a plain float.
Invalid samples (empty, or too small for the statistic) raise ValueError.
"""

import math
from typing import Sequence

import numpy as np


def _as_sample(data: Sequence[float], minimum: int = 1) -> np.ndarray:
    """
    Convert a sample to a float array and validate its size.

    Args:
        data: Sequence of observations
        minimum: Smallest acceptable number of observations

    Returns:
        One-dimensional float64 array

    Raises:
        ValueError: If the sample is not one-dimensional, contains
                    non-finite values or is too small
    """
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Sample must be one-dimensional, got shape {arr.shape}")
    if arr.size < minimum:
        raise ValueError(f"Sample needs at least {minimum} observation(s), got {arr.size}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Sample contains NaN or infinite values")
    return arr


def mean(data: Sequence[float]) -> float:
    """
    Arithmetic mean of the sample.

    Examples:
        >>> mean([3.0, 1.0, 5.0, 6.0, 3.0, 4.5])
        3.75
    """
    return float(np.mean(_as_sample(data)))


def median(data: Sequence[float]) -> float:
    """
    Middle value of the sample.

    For an even number of observations this is the average of the two
    middle values.

    Examples:
        >>> median([3.0, 1.0, 5.0, 6.0, 3.0, 4.5])
        3.75
        >>> median([7.0, 1.0, 4.0])
        4.0
    """
    return float(np.median(_as_sample(data)))


def mode(data: Sequence[float]) -> float:
    """
    Most frequent value of the sample; the smallest one if several tie.

    Examples:
        >>> mode([3.0, 1.0, 5.0, 6.0, 3.0, 4.5])
        3.0
        >>> mode([2.0, 9.0, 2.0, 9.0])
        2.0
    """
    values, counts = np.unique(_as_sample(data), return_counts=True)
    # np.unique sorts, and argmax returns the first maximum
    return float(values[np.argmax(counts)])


def variance(data: Sequence[float]) -> float:
    """
    Sample variance with the n - 1 (Bessel) denominator.

    Raises:
        ValueError: If the sample has fewer than two observations

    Examples:
        >>> variance([3.0, 1.0, 5.0, 6.0, 3.0, 4.5])
        3.175
    """
    return float(np.var(_as_sample(data, minimum=2), ddof=1))


def standard_deviation(data: Sequence[float]) -> float:
    """Sample standard deviation, the square root of ``variance``."""
    return math.sqrt(variance(data))


def z_score(x: float, data: Sequence[float]) -> float:
    """
    Number of sample standard deviations x lies above the sample mean.

    Args:
        x: Value to standardize
        data: Reference sample (at least two observations)

    Returns:
        (x - mean) / standard_deviation

    Raises:
        ValueError: If the sample has no spread (all values equal)
    """
    sd = standard_deviation(data)
    if sd == 0.0:
        raise ValueError("z-score is undefined for a sample with zero standard deviation")
    return (x - mean(data)) / sd
