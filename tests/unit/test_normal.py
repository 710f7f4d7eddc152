"""
Unit tests for the normal distribution.

This module validates:
1. Known textbook probabilities and quantiles
2. Round trips between pnorm and qnorm
3. Agreement of the AS 241 and A&S 7.1.26 evaluators with the erfc-based ones
4. Edge cases (degenerate sigma, infinite arguments, NaN)
"""

import pytest
import math
from scipy import stats
from statdist.core.normal import dnorm, dpnorm, pnorm, pnorm_approx, qnorm, qnorm_cdf
from statdist.utils.constants import M_1_SQRT_2PI


# ===========================
# Known Solutions Tests
# ===========================


def test_pnorm_textbook_values():
    """Heights, weights and grades examples from an introductory course."""
    assert abs(pnorm(4, 2.58, 0.76) - 0.969) < 1e-3
    assert abs((1 - pnorm(40, 25, 7)) - 0.016) < 1e-3
    assert abs((pnorm(11.45, 11.5, 0.21) - pnorm(11.2, 11.5, 0.21)) - 0.329) < 1e-3


@pytest.mark.parametrize(
    "p, mu, sigma, expected",
    [
        (0.97, 68.6, 2.8, 73.866),
        (0.85, 75.0, 8.0, 83.291),
        (0.92, 592.0, 106.0, 740.94),
        (0.22, 201.0, 46.0, 165.48),
    ],
)
def test_qnorm_textbook_values(p, mu, sigma, expected):
    assert abs(qnorm(p, mu, sigma) - expected) < 2e-2


def test_qnorm_symmetric_interval():
    """Middle 81% of N(11.5, 4.37^2)."""
    lo = qnorm(0.095, 11.5, 4.37)
    hi = qnorm(0.905, 11.5, 4.37)
    assert abs(lo - 5.7728) < 1e-3
    assert abs(hi - 17.2272) < 1e-3
    assert abs((lo + hi) / 2 - 11.5) < 1e-12


@pytest.mark.parametrize("x", [-8.0, -3.0, -1.0, 0.0, 0.5, 2.0, 6.0])
def test_pnorm_matches_scipy(x):
    assert pnorm(x) == pytest.approx(stats.norm.cdf(x), rel=1e-12)
    assert pnorm(x, lower_tail=False) == pytest.approx(stats.norm.sf(x), rel=1e-12)


# ===========================
# Round-Trip Tests
# ===========================


def test_pnorm_qnorm_round_trip(round_trip_probabilities):
    for p in round_trip_probabilities:
        assert abs(pnorm(qnorm(p)) - p) < 1e-12, f"Round trip failed at p={p}"


@pytest.mark.parametrize("mu, sigma", [(0.0, 1.0), (100.0, 15.0), (-3.0, 0.01)])
def test_qnorm_median_is_mean(mu, sigma):
    assert qnorm(0.5, mu, sigma) == mu


def test_qnorm_lower_tail_precision():
    """erfcinv keeps relative precision deep in the lower tail."""
    assert qnorm(1e-300) == pytest.approx(stats.norm.ppf(1e-300), rel=1e-10)


# ===========================
# Density Tests
# ===========================


def test_dnorm_peak_and_symmetry():
    assert dnorm(0.0) == pytest.approx(M_1_SQRT_2PI)
    for d in (0.3, 1.0, 2.5):
        assert dnorm(5.0 + d, 5.0, 2.0) == pytest.approx(dnorm(5.0 - d, 5.0, 2.0), rel=1e-14)


def test_dnorm_log_scale():
    assert abs(dnorm(1.3, 0.5, 2.0, log=True) - math.log(dnorm(1.3, 0.5, 2.0))) < 1e-14


def test_dnorm_point_mass():
    """sigma = 0 is a point mass at mu."""
    assert dnorm(2.0, 2.0, 0.0) == math.inf
    assert dnorm(2.1, 2.0, 0.0) == 0.0


def test_dnorm_far_tail_underflows_to_zero():
    assert dnorm(1e200) == 0.0
    assert dnorm(1e200, log=True) == -math.inf


# ===========================
# Alternative Evaluator Tests
# ===========================


@pytest.mark.parametrize("p", [1e-10, 0.001, 0.2, 0.5, 0.8, 0.999, 1 - 1e-10])
def test_qnorm_cdf_agrees_with_qnorm(p):
    assert abs(qnorm_cdf(p) - qnorm(p)) < 1e-8


def test_qnorm_cdf_location_scale():
    assert abs(qnorm_cdf(0.97, 68.6, 2.8) - qnorm(0.97, 68.6, 2.8)) < 1e-8


def test_qnorm_cdf_domain():
    """Invalid arguments give NaN rather than terminating."""
    assert math.isnan(qnorm_cdf(-0.1))
    assert math.isnan(qnorm_cdf(1.1))
    assert math.isnan(qnorm_cdf(0.5, 0.0, -1.0))
    assert qnorm_cdf(0.0) == -math.inf
    assert qnorm_cdf(1.0) == math.inf


@pytest.mark.parametrize("x", [-4.0, -1.5, -0.2, 0.0, 0.7, 2.0, 5.0])
def test_pnorm_approx_accuracy(x):
    assert abs(pnorm_approx(x) - pnorm(x)) < 2e-7


def test_pnorm_approx_proportion_examples():
    """P(phat <= 0.80) when p = 0.81, and P(phat > 0.68) when p = 0.79 (n = 100)."""
    z1 = (0.80 - 0.81) / math.sqrt(0.81 * 0.19 / 100)
    z2 = (0.68 - 0.79) / math.sqrt(0.79 * 0.21 / 100)
    assert abs(pnorm_approx(z1) - 0.3994) < 1e-4
    assert abs((1 - pnorm_approx(z2)) - 0.9965) < 1e-4


def test_dpnorm_ratio():
    x = 1.0
    lp = math.log(pnorm(x))
    assert dpnorm(x, True, lp) == pytest.approx(dnorm(x) / pnorm(x), rel=1e-14)


def test_dpnorm_upper_tail_series():
    """Mills' ratio series far in the upper tail."""
    x = 12.0
    lp = pnorm(x, lower_tail=False, log_p=True)
    expected = dnorm(x) / pnorm(x, lower_tail=False)
    assert dpnorm(x, False, lp) == pytest.approx(expected, rel=1e-10)


# ===========================
# Edge Cases
# ===========================


def test_pnorm_boundaries():
    assert pnorm(math.inf) == 1.0
    assert pnorm(-math.inf) == 0.0
    assert pnorm(0.0) == 0.5
    assert pnorm(1.0, 0.0, 0.0) == 1.0
    assert pnorm(-1.0, 0.0, 0.0) == 0.0


def test_pnorm_log_scale_far_tail():
    lp = pnorm(-40.0, log_p=True)
    assert math.isfinite(lp)
    assert lp < -800


def test_qnorm_boundaries():
    assert qnorm(0.0) == -math.inf
    assert qnorm(1.0) == math.inf
    assert qnorm(0.3, 4.0, 0.0) == 4.0


def test_invalid_arguments_give_nan():
    assert math.isnan(pnorm(1.0, 0.0, -1.0))
    assert math.isnan(dnorm(1.0, 0.0, -1.0))
    assert math.isnan(qnorm(1.5))
    assert math.isnan(qnorm(-0.5))
    assert math.isnan(pnorm(math.nan))
    assert math.isnan(pnorm(math.inf, math.inf))


def test_pnorm_monotone():
    xs = [-5.0 + 0.25 * i for i in range(41)]
    values = [pnorm(x, 1.0, 2.0) for x in xs]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_repeated_calls_bit_identical():
    assert qnorm(0.123456) == qnorm(0.123456)
    assert pnorm(-1.234) == pnorm(-1.234)
