"""
Unit tests for Student's t distribution.

This module validates:
1. Density and CDF against scipy across degrees of freedom
2. Known critical values
3. Quantile round trips, closed forms and symmetry
4. Edge cases (infinite arguments, huge df, invalid df)
"""

import pytest
import math
from scipy import stats
from statdist.core.normal import dnorm, pnorm, qnorm
from statdist.core.student import dt, pt, qt

DEGREES_OF_FREEDOM = [1.0, 2.5, 5.0, 30.0, 1e6]


# ===========================
# Density Tests
# ===========================


@pytest.mark.parametrize("df", DEGREES_OF_FREEDOM)
@pytest.mark.parametrize("x", [-50.0, -3.0, -0.5, 0.0, 0.5, 2.0, 10.0])
def test_dt_matches_scipy(x, df):
    assert dt(x, df) == pytest.approx(stats.t.pdf(x, df), rel=1e-10)


def test_dt_cauchy_peak():
    assert dt(0.0, 1.0) == pytest.approx(1.0 / math.pi, rel=1e-14)


def test_dt_log_scale():
    assert abs(dt(1.7, 4.0, log=True) - math.log(dt(1.7, 4.0))) < 1e-13


def test_dt_huge_argument():
    """Very large x^2/n takes the log-scale branch."""
    assert dt(1e10, 3.0) == pytest.approx(stats.t.pdf(1e10, 3.0), rel=1e-9)


def test_dt_infinite_df_is_normal():
    assert dt(1.3, math.inf) == dnorm(1.3)


# ===========================
# Distribution Function Tests
# ===========================


@pytest.mark.parametrize("df", DEGREES_OF_FREEDOM)
@pytest.mark.parametrize("x", [-40.0, -2.0, -0.3, 0.0, 0.8, 3.0, 25.0])
def test_pt_matches_scipy(x, df):
    assert pt(x, df) == pytest.approx(stats.t.cdf(x, df), rel=1e-9)
    assert pt(x, df, lower_tail=False) == pytest.approx(stats.t.sf(x, df), rel=1e-9)


def test_pt_far_tail_log_branch():
    """1 + x^2/n beyond 1e100 uses the leading term of the incomplete beta."""
    assert pt(-1e60, 2.0) == pytest.approx(stats.t.cdf(-1e60, 2.0), rel=1e-9)


def test_pt_center_and_limits():
    assert pt(0.0, 5.0) == 0.5
    assert pt(math.inf, 5.0) == 1.0
    assert pt(-math.inf, 5.0) == 0.0
    assert pt(-math.inf, 5.0, lower_tail=False) == 1.0


def test_pt_infinite_df_is_normal():
    assert pt(1.1, math.inf) == pnorm(1.1)


@pytest.mark.parametrize("df", [1.0, 4.0, 17.0])
def test_pt_monotone(df):
    values = [pt(-6.0 + 0.3 * i, df) for i in range(41)]
    assert all(a <= b for a, b in zip(values, values[1:]))


# ===========================
# Quantile Tests
# ===========================


@pytest.mark.parametrize(
    "p, df, expected",
    [
        (0.975, 10, 2.228139),
        (0.95, 5, 2.015048),
        (0.995, 30, 2.749996),
        (0.975, 1, 12.706205),
        (0.9, 2, 1.885618),
        (0.025, 24, -2.063899),
    ],
)
def test_qt_critical_values(p, df, expected):
    assert abs(qt(p, df) - expected) < 1e-6


@pytest.mark.parametrize("df", [1.0, 2.0, 3.0, 5.5, 10.0, 100.0])
@pytest.mark.parametrize("p", [0.001, 0.025, 0.3, 0.7, 0.975, 0.999])
def test_qt_round_trip(p, df):
    assert pt(qt(p, df), df) == pytest.approx(p, rel=1e-9)


@pytest.mark.parametrize("df", [3.0, 7.0, 40.0])
@pytest.mark.parametrize("p", [1e-6, 0.05, 0.6])
def test_qt_matches_scipy(p, df):
    assert qt(p, df) == pytest.approx(stats.t.ppf(p, df), rel=1e-8)


def test_qt_symmetry():
    for df in (1.0, 2.0, 6.0):
        assert qt(0.2, df) == pytest.approx(-qt(0.8, df), rel=1e-12)


def test_qt_boundaries():
    assert qt(0.5, 7.0) == 0.0
    assert qt(0.0, 7.0) == -math.inf
    assert qt(1.0, 7.0) == math.inf


def test_qt_huge_df_is_normal():
    assert qt(0.3, 1e25) == qnorm(0.3)


# ===========================
# Invalid Argument Tests
# ===========================


def test_invalid_parameters_give_nan():
    assert math.isnan(dt(1.0, 0.0))
    assert math.isnan(pt(1.0, -2.0))
    assert math.isnan(qt(0.3, 0.0))
    assert math.isnan(qt(1.2, 5.0))
    assert math.isnan(pt(math.nan, 5.0))
