"""
Unit tests for the numeric primitives.

This module validates:
1. Stirling error and deviance terms against their direct formulas
2. Extended-precision deviance agreement with bd0
3. log(1+x)-x, lgamma1p and the continued fraction
4. Log-space helpers and boundary probabilities
5. Saddle-point Poisson probabilities
"""

import pytest
import math
from statdist.core.primitives import (
    bd0,
    dpois_raw,
    dpois_wrap,
    ebd0,
    fmax2,
    fmin2,
    lgamma1p,
    log1_exp,
    log1pmx,
    logcf,
    logspace_add,
    logspace_sub,
    logspace_sum,
    stirlerr,
    tail_prob,
)
from statdist.utils.constants import DBL_MIN, M_1_SQRT_2PI, M_LN_SQRT_2PI, X_LRG
from statdist.utils.constants import M_LN_SQRT_2PI


def _stirlerr_direct(n):
    return math.lgamma(n + 1.0) - (n + 0.5) * math.log(n) + n - M_LN_SQRT_2PI


# ===========================
# Stirling Error Tests
# ===========================


@pytest.mark.parametrize("n", [0.5, 1.0, 2.5, 7.0, 12.3, 15.0])
def test_stirlerr_small_n_matches_direct_formula(n):
    """Tabulated and lgamma-based values agree with the definition."""
    assert abs(stirlerr(n) - _stirlerr_direct(n)) < 1e-12


@pytest.mark.parametrize("n", [16.0, 40.0, 100.0, 600.0])
def test_stirlerr_series_matches_direct_formula(n):
    """The asymptotic series agrees with the definition for n > 15."""
    assert abs(stirlerr(n) - _stirlerr_direct(n)) < 1e-9


def test_stirlerr_zero_and_nan():
    """stirlerr(0) is 0 and NaN propagates."""
    assert stirlerr(0.0) == 0.0
    assert math.isnan(stirlerr(math.nan))


def test_stirlerr_decreasing():
    """The Stirling error shrinks like 1/(12n)."""
    values = [stirlerr(n) for n in (1, 5, 20, 100, 1000)]
    assert values == sorted(values, reverse=True)
    assert abs(stirlerr(1000.0) - 1.0 / 12000.0) < 1e-9


# ===========================
# Deviance Tests
# ===========================


@pytest.mark.parametrize(
    "x, np_",
    [(10.0, 2.0), (3.0, 100.0), (10.0, 10.5), (1000.0, 990.0), (0.5, 7.0)],
)
def test_bd0_matches_direct_formula(x, np_):
    """bd0 equals x log(x/np) + np - x."""
    expected = x * math.log(x / np_) + np_ - x
    assert abs(bd0(x, np_) - expected) < 1e-10 * max(1.0, expected)


def test_bd0_equal_arguments_is_zero():
    assert bd0(7.0, 7.0) == 0.0


def test_bd0_edge_cases():
    """x = 0 gives np; non-finite arguments and np = 0 give NaN."""
    assert bd0(0.0, 3.0) == 3.0
    assert math.isnan(bd0(math.inf, 1.0))
    assert math.isnan(bd0(1.0, 0.0))


@pytest.mark.parametrize(
    "x, M",
    [(10.0, 12.5), (3.0, 100.0), (1000.0, 990.0), (0.5, 7.0), (50.0, 0.25)],
)
def test_ebd0_agrees_with_bd0(x, M):
    """The double-double deviance sums to the plain deviance."""
    dd = ebd0(x, M)
    expected = bd0(x, M)
    assert abs(dd.value - expected) < 1e-10 * max(1.0, expected)


def test_ebd0_edge_cases():
    assert ebd0(4.0, 4.0).value == 0.0
    assert ebd0(0.0, 2.5).value == 2.5
    assert ebd0(3.0, 0.0).high == math.inf


# ===========================
# Series and Continued Fraction Tests
# ===========================


@pytest.mark.parametrize("x", [-0.9, -0.5, -0.1, -1e-4, 0.05, 0.5, 2.0])
def test_log1pmx_matches_direct_formula(x):
    assert abs(log1pmx(x) - (math.log1p(x) - x)) < 1e-14


def test_log1pmx_domain():
    assert log1pmx(-1.0) == -math.inf
    assert math.isnan(log1pmx(-2.0))


@pytest.mark.parametrize("a", [-0.4, -0.2, 1e-6, 0.1, 0.3, 0.49, 0.75, 3.0])
def test_lgamma1p_matches_lgamma(a):
    assert abs(lgamma1p(a) - math.lgamma(1.0 + a)) < 1e-13


def test_logcf_geometric_cases():
    """sum x^k / (1 + k) = -log(1 - x) / x."""
    assert logcf(0.0, 1.0, 1.0) == pytest.approx(1.0)
    assert abs(logcf(0.5, 1.0, 1.0) - 2.0 * math.log(2.0)) < 1e-12


def test_logcf_invalid_arguments_give_nan():
    assert math.isnan(logcf(0.5, 0.0, 1.0))
    assert math.isnan(logcf(0.5, 1.0, -1.0))
    assert math.isnan(logcf(0.5, math.nan, 1.0))


# ===========================
# Log-Space Helper Tests
# ===========================


def test_log1_exp():
    assert abs(log1_exp(math.log(0.3)) - math.log(0.7)) < 1e-15
    assert abs(log1_exp(-1e-10) - math.log(1e-10)) < 1e-6
    assert log1_exp(0.0) == -math.inf
    assert math.isnan(log1_exp(0.5))


def test_logspace_add_and_sub():
    assert abs(logspace_add(math.log(2.0), math.log(3.0)) - math.log(5.0)) < 1e-15
    assert abs(logspace_sub(math.log(5.0), math.log(2.0)) - math.log(3.0)) < 1e-15
    assert logspace_add(-math.inf, 1.0) == 1.0
    assert logspace_sub(1.0, -math.inf) == 1.0


def test_logspace_sum():
    logs = [math.log(v) for v in (1.0, 2.0, 3.0, 4.0)]
    assert abs(logspace_sum(logs) - math.log(10.0)) < 1e-15
    assert logspace_sum([]) == -math.inf
    assert logspace_sum([0.5]) == 0.5


def test_fmax2_fmin2():
    assert fmax2(1.0, 2.0) == 2.0
    assert fmin2(1.0, 2.0) == 1.0
    assert math.isnan(fmax2(math.nan, 2.0))
    assert math.isnan(fmin2(1.0, math.nan))


@pytest.mark.parametrize(
    "p, lower_tail, log_p, expected",
    [
        (0.0, True, False, 0.0),
        (0.0, False, False, 1.0),
        (1.0, True, True, 0.0),
        (0.0, True, True, -math.inf),
        (1.0, False, True, -math.inf),
    ],
)
def test_tail_prob(p, lower_tail, log_p, expected):
    assert tail_prob(p, lower_tail, log_p) == expected


# ===========================
# Saddle-Point Poisson Tests
# ===========================


@pytest.mark.parametrize("x, lam", [(3.0, 1.2), (0.0, 2.5), (10.0, 10.0), (40.0, 25.0)])
def test_dpois_raw_matches_formula(x, lam):
    expected = math.exp(-lam + x * math.log(lam) - math.lgamma(x + 1))
    assert abs(dpois_raw(x, lam) - expected) < 1e-12 * expected


def test_dpois_raw_log_scale():
    assert abs(dpois_raw(3.0, 1.2, log=True) - math.log(dpois_raw(3.0, 1.2))) < 1e-13


def test_dpois_raw_zero_rate():
    assert dpois_raw(0.0, 0.0) == 1.0
    assert dpois_raw(2.0, 0.0) == 0.0
    assert dpois_raw(2.0, 0.0, log=True) == -math.inf


@pytest.mark.parametrize(
    "x, lam",
    [
        (3.0, math.inf),  # non-finite rate
        (-1.0, 2.0),  # negative count
        (math.inf, 1.0),  # infinite count with a tiny-rate form
    ],
)
def test_dpois_raw_zero_regimes(x, lam):
    assert dpois_raw(x, lam) == 0.0
    assert dpois_raw(x, lam, log=True) == -math.inf


def test_dpois_raw_count_below_rate_times_dbl_min():
    """x <= lam * DBL_MIN leaves only exp(-lam)."""
    x = 1e-310
    assert x <= 2.0 * DBL_MIN
    assert dpois_raw(x, 2.0) == math.exp(-2.0)
    assert dpois_raw(x, 2.0, log=True) == -2.0


@pytest.mark.parametrize("x, lam", [(5.0, 1e-310), (1e300, 1e-9)])
def test_dpois_raw_rate_below_count_times_dbl_min(x, lam):
    """lam < x * DBL_MIN evaluates the log-density directly."""
    assert lam < x * DBL_MIN
    expected = -lam + x * math.log(lam) - math.lgamma(x + 1)
    assert dpois_raw(x, lam, log=True) == pytest.approx(expected, rel=1e-14)
    assert dpois_raw(x, lam) == math.exp(expected)


def test_dpois_raw_at_the_mean_of_a_huge_rate():
    """At x = lam the deviance vanishes and 1/sqrt(2 pi x) remains."""
    assert dpois_raw(1e15, 1e15) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi * 1e15), rel=1e-12)


def test_dpois_raw_beyond_x_lrg():
    """2 pi x overflows, so the root is taken as sqrt(2 pi) * sqrt(x)."""
    x = 1e308
    assert x >= X_LRG
    assert dpois_raw(x, x) == pytest.approx(M_1_SQRT_2PI / math.sqrt(x), rel=1e-14)
    assert dpois_raw(x, x, log=True) == pytest.approx(
        -(M_LN_SQRT_2PI + 0.5 * math.log(x)), rel=1e-14
    )


def test_dpois_wrap_shifts_argument():
    assert dpois_wrap(4.0, 1.2) == dpois_raw(3.0, 1.2)
    # x + 1 = 0.5 means x = -0.5: lam^x e^-lam / Gamma(x + 1)
    expected = math.exp(-0.5 * math.log(2.0) - 2.0 - math.lgamma(0.5))
    assert abs(dpois_wrap(0.5, 2.0) - expected) < 1e-12
