"""
Unit tests for the root finders and quantile searches.

This module validates:
1. Newton-Raphson convergence and its failure modes
2. Brent's method on valid and invalid brackets
3. Method selection and fallback in the continuous quantile solver
4. Discrete quantile search in both directions and with coarse steps
"""

import logging

import pytest
import math
from statdist.core.normal import dnorm, pnorm
from statdist.core.poisson import ppois
from statdist.solvers.brent import brent_root
from statdist.solvers.discrete_search import coarse_to_fine_search, discrete_quantile_search
from statdist.solvers.newton_raphson import newton_raphson
from statdist.solvers.quantile import continuous_quantile


# ===========================
# Newton-Raphson Tests
# ===========================


def test_newton_converges_to_sqrt2():
    result = newton_raphson(lambda x: x * x - 2.0, lambda x: 2.0 * x, 1.0)
    assert result.success, result.message
    assert result.method == "newton-raphson"
    assert abs(result.root - math.sqrt(2.0)) < 1e-14
    assert result.iterations < 10


def test_newton_exact_root():
    result = newton_raphson(lambda x: x - 3.0, lambda x: 1.0, 3.0)
    assert result.success
    assert result.root == 3.0
    assert result.iterations == 1


def test_newton_zero_derivative_fails():
    result = newton_raphson(lambda x: x * x - 2.0, lambda x: 0.0, 1.0)
    assert not result.success
    assert "Derivative" in result.message


def test_newton_nan_objective_fails():
    result = newton_raphson(lambda x: math.nan, lambda x: 1.0, 1.0)
    assert not result.success
    assert "NaN" in result.message


def test_newton_out_of_bounds_fails():
    result = newton_raphson(lambda x: x - 10.0, lambda x: 1.0, 0.0, lower=-5.0, upper=5.0)
    assert not result.success
    assert "out of bounds" in result.message


def test_newton_max_iterations(caplog):
    caplog.set_level(logging.DEBUG, logger="statdist.solvers.newton_raphson")
    # x^(1/3) sign-preserving: Newton diverges by oscillation
    f = lambda x: math.copysign(abs(x) ** (1.0 / 3.0), x)
    fp = lambda x: (1.0 / 3.0) * abs(x) ** (-2.0 / 3.0)
    result = newton_raphson(f, fp, 1.0, max_iterations=5)
    assert not result.success
    assert result.iterations == 5
    assert "max_iterations" in caplog.text


# ===========================
# Brent Tests
# ===========================


def test_brent_cube_root():
    result = brent_root(lambda x: x ** 3 - 2.0, 0.0, 2.0)
    assert result.success, result.message
    assert result.method == "brent"
    assert abs(result.root - 2.0 ** (1.0 / 3.0)) < 1e-14


def test_brent_without_sign_change_fails():
    result = brent_root(lambda x: x * x + 1.0, -1.0, 1.0)
    assert not result.success
    assert math.isnan(result.root)
    assert result.iterations == 0


# ===========================
# Continuous Quantile Tests
# ===========================


def test_continuous_quantile_auto_uses_newton():
    result = continuous_quantile(pnorm, dnorm, 0.975, 0.0, -10.0, 10.0)
    assert result.success
    assert result.method == "newton-raphson"
    assert abs(result.root - 1.959963984540054) < 1e-12


def test_continuous_quantile_brent_only():
    result = continuous_quantile(pnorm, dnorm, 0.975, 0.0, -10.0, 10.0, method="brent")
    assert result.success
    assert result.method == "brent"
    assert abs(result.root - 1.959963984540054) < 1e-12


def test_continuous_quantile_falls_back_to_brent(caplog):
    caplog.set_level(logging.DEBUG, logger="statdist.solvers.quantile")
    result = continuous_quantile(pnorm, lambda x: 0.0, 0.3, 0.0, -10.0, 10.0)
    assert result.success
    assert result.method == "brent"
    assert abs(pnorm(result.root) - 0.3) < 1e-14
    assert "falling back to Brent" in caplog.text


def test_continuous_quantile_newton_only_reports_failure():
    result = continuous_quantile(pnorm, lambda x: 0.0, 0.3, 0.0, -10.0, 10.0, method="newton")
    assert not result.success
    assert result.method == "newton-raphson"


def test_continuous_quantile_needs_finite_bracket_for_brent():
    result = continuous_quantile(pnorm, lambda x: 0.0, 0.3, 0.0, -math.inf, 10.0)
    assert not result.success
    assert "finite bracket" in result.message


def test_continuous_quantile_invalid_method_raises():
    with pytest.raises(ValueError, match="method must be"):
        continuous_quantile(pnorm, dnorm, 0.5, 0.0, -1.0, 1.0, method="bisection")


# ===========================
# Discrete Search Tests
# ===========================


def _poisson4(k):
    return ppois(k, 4.0)


@pytest.mark.parametrize("start", [0.0, 2.0, 4.0, 9.0, 20.0])
def test_discrete_search_from_either_side(start):
    """The median of Poisson(4) is 4 wherever the search starts."""
    y, z = discrete_quantile_search(start, _poisson4(start), 0.5, _poisson4, 1.0)
    assert y == 4.0
    assert z == _poisson4(4.0)


def test_discrete_search_stops_at_zero():
    y, _ = discrete_quantile_search(3.0, _poisson4(3.0), 1e-6, _poisson4, 1.0)
    assert y == 0.0


def test_discrete_search_respects_upper_bound():
    cdf = lambda k: min(1.0, (k + 1) / 11.0)
    y, _ = discrete_quantile_search(2.0, cdf(2.0), 0.99, cdf, 1.0, upper=10.0)
    assert y == 10.0


def test_coarse_to_fine_search_uniform():
    """Discrete uniform on 0..999999: the median is 499999."""
    cdf = lambda k: (math.floor(k) + 1) / 1e6
    y = coarse_to_fine_search(0.0, cdf(0.0), 0.5, cdf, 1000.0, 1e6)
    assert y == 499999.0


def test_coarse_to_fine_search_small_step_is_plain_search():
    y = coarse_to_fine_search(9.0, _poisson4(9.0), 0.5, _poisson4, 0.3, 4.0)
    assert y == 4.0
