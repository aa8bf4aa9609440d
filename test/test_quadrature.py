import math

import numpy as np
import pytest

from inductance_calc.errors import ConvergenceError, DomainError
from inductance_calc.quadrature import DEFAULT_QUADRATURE, QuadratureResult, QuadratureSettings, integrate


def test_default_settings_match_reference_configuration():
    assert DEFAULT_QUADRATURE.absolute_tolerance == 1e-12
    assert DEFAULT_QUADRATURE.relative_tolerance == 1e-8
    assert DEFAULT_QUADRATURE.max_subdivisions == 10
    assert DEFAULT_QUADRATURE.max_seconds is None


def test_polynomial_is_exact_on_a_single_interval():
    result = integrate(lambda x: x ** 5 - 3 * x ** 2 + 1, 0.0, 2.0)
    assert result.converged
    assert result.subdivisions == 1
    assert result.value == pytest.approx(64 / 6 - 8 + 2, rel=1e-14)


def test_smooth_integrands():
    assert integrate(np.sin, 0.0, math.pi).unwrap() == pytest.approx(2.0, rel=1e-12)
    assert integrate(lambda x: np.exp(-x * x), -5.0, 5.0).unwrap() == pytest.approx(math.sqrt(math.pi), rel=1e-10)


def test_error_bound_is_reported():
    settings = QuadratureSettings(absolute_tolerance=1e-10, max_subdivisions=50)
    result = integrate(lambda x: np.cos(50 * x), 0.0, math.pi, settings)
    assert result.converged
    assert abs(result.value) <= max(result.abs_error, 1e-10)


def test_constant_integrand_returning_scalar():
    assert integrate(lambda x: 3.0, 1.0, 2.0).unwrap() == pytest.approx(3.0)


def test_endpoint_log_singularity():
    settings = QuadratureSettings(max_subdivisions=100)
    result = integrate(lambda x: np.log(np.sin(x)), 0.0, math.pi / 2, settings)
    assert result.converged
    assert result.value == pytest.approx(-math.pi / 2 * math.log(2), rel=1e-8)


def test_inverse_square_root_singularity():
    settings = QuadratureSettings(max_subdivisions=200)
    assert integrate(lambda x: 1 / np.sqrt(x), 0.0, 1.0, settings).unwrap() == pytest.approx(2.0, rel=1e-8)


def test_exhausted_budget_is_reported_not_zeroed():
    result = integrate(np.log, 0.0, 1.0, QuadratureSettings(max_subdivisions=1))
    assert not result.converged
    assert result.subdivisions == 1
    assert result.abs_error > 1e-8
    # the partial estimate is kept for diagnostics, it is not replaced by a default
    assert result.value == pytest.approx(-1.0, rel=1e-2)
    assert "subdivisions" in result.message

    with pytest.raises(ConvergenceError) as info:
        result.unwrap()
    assert info.value.subdivisions == 1
    assert info.value.estimate == result.value


def test_unwrap_names_the_integral():
    result = QuadratureResult(-0.9, 0.7, 1, False, "budget exhausted")
    with pytest.raises(ConvergenceError, match=r"^J1\(1.01\) did not converge: budget exhausted$"):
        result.unwrap("J1(1.01)")
    with pytest.raises(ConvergenceError, match=r"^budget exhausted$"):
        result.unwrap()
    assert QuadratureResult(2.0, 1e-14, 1, True).unwrap("J2") == 2.0


def test_non_finite_integrand_fails():
    result = integrate(lambda x: math.inf, 0.0, 1.0)
    assert not result.converged
    assert "not finite" in result.message
    with pytest.raises(ConvergenceError):
        result.unwrap()


def test_wall_clock_limit():
    settings = QuadratureSettings(max_subdivisions=1000, max_seconds=1e-9)
    result = integrate(np.log, 0.0, 1.0, settings)
    assert not result.converged
    assert "Wall-clock" in result.message


def test_reversed_and_empty_intervals():
    assert integrate(np.sin, math.pi, 0.0).unwrap() == pytest.approx(-2.0, rel=1e-12)
    empty = integrate(np.sin, 1.0, 1.0)
    assert empty.converged and empty.value == 0.0 and empty.subdivisions == 0


@pytest.mark.parametrize("bounds", [(0.0, math.inf), (-math.inf, 0.0), (math.nan, 1.0)])
def test_infinite_bounds_rejected(bounds):
    with pytest.raises(DomainError):
        integrate(np.sin, *bounds)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"absolute_tolerance": -1.0},
        {"absolute_tolerance": 0.0, "relative_tolerance": 0.0},
        {"absolute_tolerance": 0.0, "relative_tolerance": 1e-20},
        {"max_subdivisions": 0},
        {"max_seconds": 0.0},
    ],
)
def test_invalid_settings(kwargs):
    with pytest.raises(DomainError):
        QuadratureSettings(**kwargs)
