"""
Unit tests for the Poisson distribution.

This module validates:
1. Known textbook probabilities
2. Consistency of the CDF with summed probabilities
3. Quantile search (direct and coarse-to-fine)
4. Edge cases (zero rate, negative counts, invalid parameters)
"""

import pytest
import math
from scipy import stats
from statdist.core.poisson import dpois, ppois, qpois


# ===========================
# Known Solutions Tests
# ===========================


def test_poisson_textbook_values():
    """Call-centre and accident-rate examples."""
    assert abs(dpois(3, 1.2) - 0.087) < 1e-3
    assert abs(ppois(10, 15) - 0.118) < 1e-3
    assert abs(ppois(5, 13 / 4) - 0.889) < 1e-3
    assert abs(ppois(0, 170 / 104) - 0.195) < 1e-3
    assert abs((1 - ppois(2, 170 / 104)) - 0.2256) < 1e-3
    assert abs(dpois(3, 170 / 104) - 0.142) < 1e-3


def test_poisson_exact_small_values():
    assert dpois(2, 10) == pytest.approx(50 * math.exp(-10), rel=1e-13)
    assert ppois(2, 10) == pytest.approx(61 * math.exp(-10), rel=1e-12)


@pytest.mark.parametrize("lam", [0.3, 4.0, 17.5, 250.0])
@pytest.mark.parametrize("k", [0, 1, 3, 10, 30, 240, 300])
def test_dpois_matches_scipy(k, lam):
    assert dpois(k, lam) == pytest.approx(stats.poisson.pmf(k, lam), rel=1e-10, abs=1e-300)


@pytest.mark.parametrize("lam", [0.3, 4.0, 17.5, 250.0])
@pytest.mark.parametrize("k", [0, 2, 5, 15, 200, 260])
def test_ppois_matches_scipy(k, lam):
    assert ppois(k, lam) == pytest.approx(stats.poisson.cdf(k, lam), rel=1e-9, abs=1e-300)
    assert ppois(k, lam, lower_tail=False) == pytest.approx(
        stats.poisson.sf(k, lam), rel=1e-9, abs=1e-300
    )


# ===========================
# Consistency Tests
# ===========================


def test_pmf_sums_to_one():
    total = math.fsum(dpois(k, 15) for k in range(61))
    assert abs(total - 1.0) < 1e-12
    assert abs(ppois(60, 15) - 1.0) < 1e-12


@pytest.mark.parametrize("lam", [0.5, 4.0, 30.0])
def test_cdf_is_cumulative_sum(lam):
    running = 0.0
    for k in range(int(3 * lam) + 10):
        running += dpois(k, lam)
        assert ppois(k, lam) == pytest.approx(running, rel=1e-10)


@pytest.mark.parametrize("lam", [0.5, 12.0, 900.0])
def test_tails_sum_to_one(lam):
    for k in (0, int(lam), int(2 * lam)):
        assert abs(ppois(k, lam) + ppois(k, lam, lower_tail=False) - 1.0) < 1e-12


def test_ppois_monotone():
    values = [ppois(k, 7.3) for k in range(40)]
    assert all(a <= b for a, b in zip(values, values[1:]))


def test_ppois_floors_non_integers():
    assert ppois(2.7, 3.0) == ppois(2, 3.0)


def test_dpois_log_scale():
    assert abs(dpois(3, 1.2, log=True) - math.log(dpois(3, 1.2))) < 1e-13


# ===========================
# Quantile Tests
# ===========================


@pytest.mark.parametrize("lam", [0.5, 4.0, 30.0, 1000.0, 2.0e5])
@pytest.mark.parametrize("p", [0.01, 0.3, 0.5, 0.9, 0.999])
def test_qpois_is_smallest_k_reaching_p(p, lam):
    q = qpois(p, lam)
    assert q == math.floor(q)
    assert ppois(q, lam) >= p * (1 - 1e-12)
    if q > 0:
        assert ppois(q - 1, lam) < p


def test_qpois_known_value():
    assert qpois(0.5, 4.0) == 4.0


def test_qpois_boundaries():
    assert qpois(0.0, 3.0) == 0.0
    assert qpois(1.0, 3.0) == math.inf
    assert qpois(0.7, 0.0) == 0.0


# ===========================
# Edge Cases
# ===========================


def test_zero_rate_is_point_mass_at_zero():
    assert dpois(0, 0.0) == 1.0
    assert dpois(2, 0.0) == 0.0
    assert ppois(4, 0.0) == 1.0


def test_negative_counts():
    assert dpois(-1, 2.0) == 0.0
    assert ppois(-1, 2.0) == 0.0
    assert ppois(-1, 2.0, lower_tail=False) == 1.0


def test_invalid_parameters_give_nan():
    assert math.isnan(dpois(1, -1.0))
    assert math.isnan(ppois(1, -1.0))
    assert math.isnan(qpois(0.5, -1.0))
    assert math.isnan(qpois(1.5, 2.0))
    assert math.isnan(qpois(0.5, math.inf))
    assert math.isnan(dpois(math.nan, 2.0))
