"""Associated Legendre functions of cos(theta) and their theta-derivatives.

The functions here follow the convention

.. math::

    P_l^m(x) = \\frac{1}{2^l l!} (1 - x^2)^{m/2} \\frac{d^{l+m}}{dx^{l+m}} (x^2 - 1)^l,

with :math:`x = \\cos\\theta`, i.e. the Numerical Recipes ``plgndr`` routine
without the :math:`(-1)^m` factor. The Condon-Shortley phase is applied by
:func:`ylmpy.normalization.ylmnorm` instead.

Callers pass :math:`\\sin\\theta` and :math:`\\cos\\theta` rather than
:math:`\\theta`, so that both can be computed once and reused across many
``(l, m)`` pairs.
"""

from __future__ import annotations

from ylmpy.functions.cpu_numba import deriv1_plm_cos, deriv2_plm_cos, plm_cos
from ylmpy.validation import check_unsigned_order


def plmcos(l: int, m: int, sintheta: float, costheta: float) -> float:  # noqa: E741
    """Compute the associated Legendre function :math:`P_l^m(\\cos\\theta)`.

    The diagonal value :math:`P_m^m = (2m-1)!! \\sin^m\\theta` is evaluated in
    closed form and then raised to degree ``l`` with the three-term recurrence

    .. math::

        (i - m) P_i^m = (2i - 1) \\cos\\theta P_{i-1}^m - (i + m - 1) P_{i-2}^m.

    Parameters
    ----------
    l:
        The degree, ``l >= 0``.
    m:
        The order, ``0 <= m <= l``.
    sintheta:
        :math:`\\sin\\theta`.
    costheta:
        :math:`\\cos\\theta`.

    Returns
    -------
    float
        :math:`P_l^m(\\cos\\theta)`.

    Raises
    ------
    InvalidArgumentError
        If ``m < 0`` or ``m > l``.
    """

    l, m = check_unsigned_order(l, m, "plmcos")  # noqa: E741
    return plm_cos(l, m, float(sintheta), float(costheta))


def deriv1_plmcos_dtheta(
    l: int, m: int, sintheta: float, costheta: float  # noqa: E741
) -> float:
    """Compute :math:`dP_l^m(\\cos\\theta)/d\\theta`.

    Uses

    .. math::

        \\frac{dP_l^m}{d\\theta} = \\frac{-(l+1)\\cos\\theta P_l^m + (l-m+1) P_{l+1}^m}{\\sin\\theta}.

    Parameters
    ----------
    l:
        The degree, ``l >= 0``.
    m:
        The order, ``0 <= m <= l``.
    sintheta:
        :math:`\\sin\\theta`. Must be non-zero for a finite result.
    costheta:
        :math:`\\cos\\theta`.

    Returns
    -------
    float
        The first derivative with respect to :math:`\\theta`.

    Raises
    ------
    InvalidArgumentError
        If ``m < 0`` or ``m > l``.

    Notes
    -----
    ``sintheta == 0`` is not rejected. The division follows IEEE semantics and
    the result is ``inf`` or ``nan``, although the derivative itself has a
    finite limit at the poles.
    """

    l, m = check_unsigned_order(l, m, "deriv1_plmcos_dtheta")  # noqa: E741
    return deriv1_plm_cos(l, m, float(sintheta), float(costheta))


def deriv2_plmcos_dtheta(
    l: int, m: int, sintheta: float, costheta: float  # noqa: E741
) -> float:
    """Compute :math:`d^2P_l^m(\\cos\\theta)/d\\theta^2`.

    Combines :math:`P_l^m`, :math:`P_{l+1}^m` and :math:`P_{l+2}^m` weighted by
    :math:`1/\\sin^2\\theta` and :math:`\\cos\\theta/\\sin^2\\theta`.

    Raises
    ------
    InvalidArgumentError
        If ``m < 0`` or ``m > l``.

    Notes
    -----
    As for :func:`deriv1_plmcos_dtheta`, ``sintheta == 0`` yields ``inf`` or
    ``nan`` instead of an exception.
    """

    l, m = check_unsigned_order(l, m, "deriv2_plmcos_dtheta")  # noqa: E741
    return deriv2_plm_cos(l, m, float(sintheta), float(costheta))
