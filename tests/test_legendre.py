import math

import numpy as np
import pytest
from scipy.special import lpmv

from ylmpy import InvalidArgumentError
from ylmpy.legendre import deriv1_plmcos_dtheta, deriv2_plmcos_dtheta, plmcos


def _double_factorial_odd(m: int) -> float:
    # (2m - 1)!!
    return float(math.prod(range(1, 2 * m, 2)))


def test_plmcos_reference_values():
    theta = 2.6
    computed = plmcos(4, 4, math.sin(theta), math.cos(theta))
    assert computed == pytest.approx(105.0 * math.sin(theta) ** 4, abs=1e-10)

    theta = -0.34
    computed = plmcos(3, 2, math.sin(theta), math.cos(theta))
    expected = 15.0 * math.cos(theta) * math.sin(theta) ** 2
    assert computed == pytest.approx(expected, abs=1e-10)


@pytest.mark.parametrize("l", list(range(0, 21)) + [40])
def test_plmcos_diagonal_closed_form(l: int):
    theta = 1.1
    sintheta = math.sin(theta)
    expected = _double_factorial_odd(l) * sintheta**l

    assert plmcos(l, l, sintheta, math.cos(theta)) == pytest.approx(expected, rel=1e-12)
    # The diagonal does not depend on cos(theta).
    assert plmcos(l, l, sintheta, 0.3) == plmcos(l, l, sintheta, -0.9)


@pytest.mark.parametrize("l", [0, 1, 2, 5, 9, 16])
@pytest.mark.parametrize("theta", [0.05, 0.7, 1.5, 2.3, 3.1])
def test_plmcos_matches_scipy_without_condon_shortley_phase(l: int, theta: float):
    sintheta, costheta = math.sin(theta), math.cos(theta)
    for m in range(l + 1):
        expected = (-1) ** m * lpmv(m, l, costheta)
        assert plmcos(l, m, sintheta, costheta) == pytest.approx(
            expected, rel=1e-9, abs=1e-12
        )


def test_plmcos_first_recurrence_step():
    theta = 0.4
    sintheta, costheta = math.sin(theta), math.cos(theta)
    for m in range(0, 16):
        assert plmcos(m + 1, m, sintheta, costheta) == pytest.approx(
            (2 * m + 1) * costheta * plmcos(m, m, sintheta, costheta), rel=1e-14
        )


def test_plmcos_rejects_invalid_orders():
    theta = 2.6
    with pytest.raises(InvalidArgumentError):
        plmcos(4, 5, math.sin(theta), math.cos(theta))
    with pytest.raises(InvalidArgumentError):
        plmcos(4, -1, math.sin(theta), math.cos(theta))
    with pytest.raises(InvalidArgumentError):
        plmcos(2.0, 1, math.sin(theta), math.cos(theta))
    with pytest.raises(ValueError):
        plmcos(True, 0, math.sin(theta), math.cos(theta))


def test_plmcos_accepts_numpy_integers():
    theta = 0.9
    sintheta, costheta = math.sin(theta), math.cos(theta)
    assert plmcos(np.int64(6), np.int32(3), sintheta, costheta) == plmcos(
        6, 3, sintheta, costheta
    )


@pytest.mark.parametrize("l,m", [(0, 0), (1, 0), (1, 1), (3, 2), (6, 0), (6, 4), (10, 7)])
@pytest.mark.parametrize("theta", [0.3, 1.2, 2.7])
def test_deriv1_matches_finite_difference(l: int, m: int, theta: float):
    h = 1e-6

    def p(t):
        return plmcos(l, m, math.sin(t), math.cos(t))

    numeric = (p(theta + h) - p(theta - h)) / (2 * h)
    analytic = deriv1_plmcos_dtheta(l, m, math.sin(theta), math.cos(theta))
    assert analytic == pytest.approx(numeric, rel=1e-6, abs=1e-7 * max(1.0, abs(p(theta))))


@pytest.mark.parametrize("l,m", [(0, 0), (1, 0), (2, 1), (4, 4), (7, 3)])
@pytest.mark.parametrize("theta", [0.3, 1.2, 2.7])
def test_deriv2_matches_finite_difference(l: int, m: int, theta: float):
    h = 1e-5

    def dp(t):
        return deriv1_plmcos_dtheta(l, m, math.sin(t), math.cos(t))

    numeric = (dp(theta + h) - dp(theta - h)) / (2 * h)
    analytic = deriv2_plmcos_dtheta(l, m, math.sin(theta), math.cos(theta))
    scale = max(1.0, abs(plmcos(l, m, math.sin(theta), math.cos(theta))))
    assert analytic == pytest.approx(numeric, rel=1e-5, abs=1e-5 * scale)


def test_derivatives_of_first_degree():
    theta = 0.8
    sintheta, costheta = math.sin(theta), math.cos(theta)
    # P_1^0 = cos(theta)
    assert deriv1_plmcos_dtheta(1, 0, sintheta, costheta) == pytest.approx(-sintheta)
    assert deriv2_plmcos_dtheta(1, 0, sintheta, costheta) == pytest.approx(-costheta)
    # P_1^1 = sin(theta)
    assert deriv1_plmcos_dtheta(1, 1, sintheta, costheta) == pytest.approx(costheta)
    assert deriv2_plmcos_dtheta(1, 1, sintheta, costheta) == pytest.approx(-sintheta)


@pytest.mark.parametrize("l,m", [(0, 0), (2, 0), (3, 1), (5, 5)])
@pytest.mark.parametrize("costheta", [1.0, -1.0])
def test_derivatives_at_the_poles_are_not_finite(l: int, m: int, costheta: float):
    # sin(theta) = 0 is not guarded: IEEE division gives inf or nan, no exception.
    assert not math.isfinite(deriv1_plmcos_dtheta(l, m, 0.0, costheta))
    assert not math.isfinite(deriv2_plmcos_dtheta(l, m, 0.0, costheta))


def test_derivatives_reject_invalid_orders():
    with pytest.raises(InvalidArgumentError):
        deriv1_plmcos_dtheta(2, 3, 0.5, math.sqrt(0.75))
    with pytest.raises(InvalidArgumentError):
        deriv2_plmcos_dtheta(2, 3, 0.5, math.sqrt(0.75))


def test_repeated_calls_are_bit_identical():
    theta = 1.3
    args = (12, 5, math.sin(theta), math.cos(theta))
    for func in (plmcos, deriv1_plmcos_dtheta, deriv2_plmcos_dtheta):
        first = func(*args)
        assert all(func(*args) == first for _ in range(5))
