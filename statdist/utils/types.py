"""
Data types and structures for distribution calculations.

This module defines dataclasses and types used throughout the library
for representing intermediate high-precision values, solver outcomes
and the results of inferential procedures.
"""

from dataclasses import dataclass
from typing import Literal

SolverMethod = Literal["newton-raphson", "brent"]
Alternative = Literal["two-sided", "less", "greater"]


@dataclass(frozen=True)
class DoubleDouble:
    """
    Unevaluated sum of two doubles carrying extra precision.

    Attributes:
        high: Leading part, accumulated from values rounded to integers
        low: Residual part, accumulated from the rounding remainders
    """
    high: float
    low: float

    @property
    def value(self) -> float:
        """Collapse to a single double (loses the extra precision)."""
        return self.high + self.low


@dataclass
class SolverResult:
    """
    Result from a continuous root finder.

    Attributes:
        root: Best available approximation of the root
        iterations: Number of iterations performed
        method: Method used ('newton-raphson' or 'brent')
        success: Whether the solver converged successfully
        message: Additional information about convergence
    """
    root: float
    iterations: int
    method: SolverMethod
    success: bool
    message: str = ""


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Two-sided confidence interval around a point estimate.

    Attributes:
        estimate: Point estimate (sample proportion or mean)
        margin_of_error: Half-width of the interval
        confidence: Confidence level in (0, 1)
        critical_value: z or t critical value used
    """
    estimate: float
    margin_of_error: float
    confidence: float
    critical_value: float

    @property
    def lower(self) -> float:
        return self.estimate - self.margin_of_error

    @property
    def upper(self) -> float:
        return self.estimate + self.margin_of_error


@dataclass
class HypothesisTestResult:
    """
    Result from a z or t hypothesis test.

    Attributes:
        statistic: Observed test statistic
        p_value: Probability of a statistic at least as extreme under H0
        alternative: 'two-sided', 'less' or 'greater'
        alpha: Significance level
        reject: Whether H0 is rejected at level alpha
        df: Degrees of freedom (None for z tests)
    """
    statistic: float
    p_value: float
    alternative: Alternative
    alpha: float
    reject: bool
    df: float | None = None


@dataclass
class LinearFit:
    """
    Least-squares regression line y = intercept + slope * x.

    Attributes:
        slope: Fitted slope
        intercept: Fitted intercept
        r: Pearson correlation coefficient of the sample
        n: Number of observations
    """
    slope: float
    intercept: float
    r: float
    n: int

    @property
    def r_squared(self) -> float:
        return self.r * self.r

    def predict(self, x: float) -> float:
        """Evaluate the fitted line at x."""
        return self.intercept + self.slope * x


@dataclass
class ChiSquareTestResult:
    """
    Result from a chi-square goodness-of-fit or independence test.

    Attributes:
        statistic: Sum of (observed - expected)^2 / expected
        df: Degrees of freedom
        critical_value: Upper alpha quantile of chi-square(df)
        p_value: Upper-tail probability of the statistic
        alpha: Significance level
        reject: Whether H0 is rejected at level alpha
        expected: Expected counts used for the statistic
    """
    statistic: float
    df: int
    critical_value: float
    p_value: float
    alpha: float
    reject: bool
    expected: list[list[float]] | list[float]
